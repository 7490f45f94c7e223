"""Record — the value type held by a registry, plus the default seed."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Record:
    """Immutable registry entry, identified by ``id``."""

    id: int
    name: str
    verse: str

    def with_verse(self, verse: str) -> Record:
        """Return a new record equal to this one except for ``verse``."""
        return replace(self, verse=verse)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "verse": self.verse}

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(id=int(data["id"]), name=str(data["name"]), verse=str(data["verse"]))

    def console_repr(self) -> str:
        """Render like a console dump of a plain object literal."""
        return f"{{id: {self.id}, name: {self.name!r}, verse: {self.verse!r}}}"


DEFAULT_SEED: tuple[Record, ...] = (
    Record(1, "chicken", "cluck"),
    Record(2, "zebra", "neigh"),
    Record(3, "penguin", "chirp"),
    Record(4, "dolphin", "whistle"),
)


def check_unique_ids(records: tuple[Record, ...]) -> None:
    """Raise ``ValueError`` if two records share an ``id``."""
    seen: set[int] = set()
    for rec in records:
        if rec.id in seen:
            raise ValueError(f"duplicate record id in seed: {rec.id}")
        seen.add(rec.id)
