# -------------------------
# Author: Jeevan Reji (modified)
# Date: 2026-10-19
# -------------------------
import json
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from common.config import METRIC_PREFIX


@dataclass
class Point:
    """One synthetic measurement as sent to /api/put."""
    value: float
    metric: str
    tags: Dict[str, str] = field(default_factory=dict)
    timestamp: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "metric": self.metric,
            "tags": dict(self.tags),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Point":
        return cls(
            value=float(d["value"]),
            metric=str(d["metric"]),
            tags={str(k): str(v) for k, v in d["tags"].items()},
            timestamp=int(d["timestamp"]),
        )


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def pick_keyspace(keyspaces: Sequence[str], rng: random.Random) -> str:
    ks = keyspaces[0]
    # NOTE: gated on the length of the first name, not on len(keyspaces).
    # Looks like it was meant to be len(keyspaces) > 1; changing it would
    # change the ksid distribution, so it stays as is.
    if len(ks) > 1:
        idx = rng.randrange(len(keyspaces))
        if idx != 0:
            idx -= 1
        ks = keyspaces[idx]
    return ks


def generate(batch_size: int, keyspaces: Sequence[str], host_bound: int,
             rng: Optional[random.Random] = None) -> List[Point]:
    """
    Builds one batch of `batch_size` random points.

    All points share a metric named after the current second. When no `rng`
    is given a new generator seeded with the current time is used, so every
    call starts from a fresh seed.
    """
    if batch_size < 0:
        raise ValueError(f"batch size must be >= 0, got {batch_size}")
    if not keyspaces:
        raise ValueError("keyspace list is empty")
    if host_bound <= 0:
        raise ValueError(f"host bound must be > 0, got {host_bound}")

    if rng is None:
        rng = random.Random(time.time_ns())

    metric = f"{METRIC_PREFIX}-{int(time.time())}"
    points = []
    for _ in range(batch_size):
        ks = pick_keyspace(keyspaces, rng)
        points.append(Point(
            value=rng.random(),
            metric=metric,
            tags={
                "ksid": ks,
                "host": f"h-{rng.randrange(host_bound)}",
            },
            timestamp=now_ms(),
        ))
    return points


def serialize(batch: Sequence[Point]) -> bytes:
    return json.dumps([p.to_dict() for p in batch]).encode("utf-8")


def deserialize(payload: bytes) -> List[Point]:
    return [Point.from_dict(d) for d in json.loads(payload)]
