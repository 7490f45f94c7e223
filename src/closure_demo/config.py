"""Demo configuration dataclass.

Environment variables override defaults; CLI flags override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

ENV_PREFIX = "CLOSURE_DEMO_"


@dataclass(frozen=True)
class DemoConfig:
    """Immutable settings for the console replays."""

    instances: int = 2
    calls: tuple[int, ...] = (4, 3)      # calls per counter, in creation order
    start: int = 0
    seed_path: Path | None = None
    json_out: bool = False

    def __post_init__(self) -> None:
        if self.instances < 1:
            raise ValueError(f"instances must be >= 1, got {self.instances}")
        if any(c < 0 for c in self.calls):
            raise ValueError(f"call counts must be non-negative, got {self.calls}")

    def calls_for(self, index: int) -> int:
        """Calls to make on counter *index*; missing entries repeat the last one."""
        if not self.calls:
            return 0
        if index < len(self.calls):
            return self.calls[index]
        return self.calls[-1]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DemoConfig:
        """Build a config from ``CLOSURE_DEMO_*`` environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        instances = env.get(ENV_PREFIX + "INSTANCES")
        if instances:
            values["instances"] = int(instances)
        calls = env.get(ENV_PREFIX + "CALLS")
        if calls:
            values["calls"] = tuple(int(c) for c in calls.split(",") if c.strip())
        start = env.get(ENV_PREFIX + "START")
        if start:
            values["start"] = int(start)
        seed = env.get(ENV_PREFIX + "SEED")
        if seed:
            values["seed_path"] = Path(seed)
        return cls(**values)

    def override(self, **changes: Any) -> DemoConfig:
        """Return a copy with every non-``None`` entry of *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
