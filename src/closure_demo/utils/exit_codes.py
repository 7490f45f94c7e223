"""Exit-code contract for the ``closure-demo`` CLI.

Code  Meaning
----  -------
  0   Success
  1   Violation: a registry snapshot failed its schema contract
  2   Error: usage error, missing or invalid seed file
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
