"""Scripted replays of the blog-post snippets.

Each replay returns plain data so the CLI can print it either as console
lines or as canonical JSON.
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from closure_demo.config import DemoConfig
from closure_demo.contracts.load import SNAPSHOT_SCHEMA, validate_instance
from closure_demo.counter import create_counter
from closure_demo.model import Record
from closure_demo.registry import create_registry

_logger = logging.getLogger(__name__)

LOOKUP_IDS = (3, 4)
VERSE_A = "bark"
VERSE_B = "buzz"


def run_counters(config: DemoConfig) -> list[list[int]]:
    """Create ``config.instances`` counters and record what each returns."""
    counters = [create_counter(config.start) for _ in range(config.instances)]
    results: list[list[int]] = []
    for i, increment in enumerate(counters):
        results.append([increment() for _ in range(config.calls_for(i))])
    return results


def run_registries(
    seed: Iterable[Record] | None = None,
    *,
    out: TextIO | None = None,
) -> dict:
    """Replay the two-registry snippet.

    Builds registries A and B from the same seed, reads two verses from A,
    writes a different verse to record 4 on each, and validates both
    snapshots.  When *out* is given the lookups and both registries are
    printed to it as the snippet does.
    """
    records = None if seed is None else tuple(seed)
    a = create_registry(records)
    b = create_registry(records)

    lookups = {str(i): a.get_field(i) for i in LOOKUP_IDS}
    if out is not None:
        for i in LOOKUP_IDS:
            print(lookups[str(i)], file=out)

    a.set_field(4, VERSE_A)
    b.set_field(4, VERSE_B)

    if out is not None:
        a.print_registry(out)
        b.print_registry(out)

    snap_a, snap_b = a.snapshot(), b.snapshot()
    validate_instance(snap_a, SNAPSHOT_SCHEMA)
    validate_instance(snap_b, SNAPSHOT_SCHEMA)
    _logger.debug("registry replay finished: a=%d b=%d record(s)", len(snap_a), len(snap_b))
    return {"lookups": lookups, "a": snap_a, "b": snap_b}
