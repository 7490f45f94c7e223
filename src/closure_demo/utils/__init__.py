"""Shared helpers: exit codes and canonical JSON output."""

from closure_demo.utils.exit_codes import ExitCode
from closure_demo.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = ["ExitCode", "stable_json_dump", "stable_json_dumps"]
