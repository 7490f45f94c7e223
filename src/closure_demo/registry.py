"""Registry factory — an ordered set of records hidden behind three closures.

The factory binds a private tuple of :class:`~closure_demo.model.Record`
values and hands back a :class:`Registry`, which carries *only* the
accessor functions.  Nothing on the returned object refers to the tuple
itself, so callers can read and rewrite verses but can never reach the
underlying sequence:

    >>> animals = create_registry()
    >>> animals.get_field(3)
    'chirp'
    >>> getattr(animals, "animals", None) is None
    True

Writes are copy-on-write: ``set_field`` builds a new tuple in which the
matching record is replaced and every other record is the same object as
before, then rebinds the closure variable to it.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TextIO

from closure_demo.model import DEFAULT_SEED, Record, check_unique_ids

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Registry:
    """Public interface returned by :func:`create_registry`.

    Holds callables only.  ``frozen`` and ``slots`` keep callers from
    attaching attributes after construction.
    """

    get_field: Callable[[int], Optional[str]]
    set_field: Callable[[int, str], None]
    print_registry: Callable[..., None]
    snapshot: Callable[[], list]


def create_registry(seed: Iterable[Record] | None = None) -> Registry:
    """Build a registry over a private copy of *seed* (default: four animals).

    Raises ``ValueError`` if two seed records share an ``id``.
    """
    animals: tuple[Record, ...] = tuple(DEFAULT_SEED if seed is None else seed)
    check_unique_ids(animals)
    _logger.debug("registry created with %d record(s)", len(animals))

    def _find(record_id: int) -> Record | None:
        for rec in animals:
            if rec.id == record_id:
                return rec
        return None

    def get_field(record_id: int) -> Optional[str]:
        """Return the verse of record *record_id*, or ``None`` when absent."""
        found = _find(record_id)
        if found is None:
            return None
        return found.verse

    def set_field(record_id: int, new_verse: str) -> None:
        """Replace the verse of record *record_id*; absent ids are a no-op."""
        nonlocal animals
        old = _find(record_id)
        if old is None:
            _logger.debug("set_field: no record with id %r, registry unchanged", record_id)
            return
        new = old.with_verse(new_verse)
        animals = tuple(new if rec is old else rec for rec in animals)

    def print_registry(file: TextIO | None = None) -> None:
        """Write the current records to *file* (default stdout)."""
        out = file if file is not None else sys.stdout
        print("[", file=out)
        last = len(animals) - 1
        for i, rec in enumerate(animals):
            sep = "," if i < last else ""
            print(f"  {rec.console_repr()}{sep}", file=out)
        print("]", file=out)

    def snapshot() -> list:
        """Return detached dicts describing the current records, in order."""
        return [rec.to_dict() for rec in animals]

    return Registry(
        get_field=get_field,
        set_field=set_field,
        print_registry=print_registry,
        snapshot=snapshot,
    )


# Name used in the original blog post snippet.
manage_animals = create_registry
