# -------------------------
# Author: Jeevan Reji (modified)
# Date: 2026-10-19
# -------------------------
import sys
from typing import Callable, List, Optional, Sequence

from common.config import EXIT_FATAL, EXIT_OK
from common.points import Point, generate

RUNNING = "running"
STOPPED = "stopped"


class LoadGenerator:
    """
    Repeats generate -> submit, one cycle at a time.

    iterations == 0 runs until a cycle returns a non-zero code; otherwise
    stops with 0 after `iterations` cycles whatever the last HTTP status was.
    """
    def __init__(self, factory: Callable[[], List[Point]], submitter, iterations: int = 0):
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        self.factory = factory
        self.submitter = submitter
        self.iterations = iterations
        self.state = RUNNING
        self.cycles = 0
        self.result: Optional[int] = None

    def _stop(self, code: int):
        self.state = STOPPED
        self.result = code

    def tick(self):
        if self.state == STOPPED:
            return
        try:
            batch = self.factory()
        except ValueError as e:
            print(f"[LoadGenerator] Bad configuration: {e}", file=sys.stderr)
            self._stop(EXIT_FATAL)
            return

        res = self.submitter.submit(batch)
        self.cycles += 1
        if res.code != EXIT_OK:
            self._stop(res.code)
            return

        if self.iterations and self.cycles == self.iterations:
            self._stop(EXIT_OK)

    def run(self) -> int:
        while self.state == RUNNING:
            self.tick()
        return self.result


def batch_factory(size: int, keyspaces: Sequence[str], host_bound: int, rng=None) -> Callable[[], List[Point]]:
    def _make():
        return generate(size, keyspaces, host_bound, rng)
    return _make
