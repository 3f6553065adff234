from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = tuple(sorted(labels.items()))
        self.values[key] = self.values.get(key, 0.0) + value

    def get(self, **labels: Any) -> float:
        return self.values.get(tuple(sorted(labels.items())), 0.0)

    def reset(self) -> None:
        self.values.clear()


# Predefined metrics
cache_lookups_total = Counter("cache_lookups_total", "Item resolutions by result (hit/miss)")
cache_writes_total = Counter("cache_writes_total", "Pool saves by result (ok/failed/expired)")
cache_deletes_total = Counter("cache_deletes_total", "Pool deletes by result (ok/failed)")
