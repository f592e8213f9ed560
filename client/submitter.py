# -------------------------
# Author: Jeevan Reji (modified)
# Date: 2026-10-19
# -------------------------
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

import requests

from common.config import DEFAULT_PORT, EXIT_FATAL, EXIT_OK, PUT_PATH
from common.points import Point, serialize
from utils.durations import format_duration

NO_CONTENT = 204


@dataclass
class SubmitResult:
    code: int                   # 0 keeps the loop going, anything else stops it
    status: Optional[int]       # HTTP status, None when nothing came back
    elapsed: float              # seconds, dispatch -> response headers (or failure)
    body: Optional[str] = None  # only read for non-204 responses


class Submitter:
    """
    Posts one batch per call to http://<host>:<port>/api/put and prints
    the status and latency of the request. No retries.
    """
    def __init__(self, host: str, port: int = DEFAULT_PORT, timeout: Optional[float] = 5.0,
                 debug: bool = False, session: Optional[requests.Session] = None):
        self.host = host
        self.port = port
        # a zero timeout means wait forever
        self.timeout = timeout if timeout else None
        self.debug = debug
        self.session = session if session is not None else requests.Session()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}{PUT_PATH}"

    def submit(self, batch: Sequence[Point]) -> SubmitResult:
        try:
            payload = serialize(batch)
        except (TypeError, ValueError) as e:
            print(f"[Submitter] Could not encode batch: {e}", file=sys.stderr)
            return SubmitResult(EXIT_FATAL, None, 0.0)

        if self.debug:
            print(payload.decode("utf-8"))

        t0 = time.time()
        try:
            resp = self.session.post(
                self.url,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
                stream=True,
            )
        except requests.exceptions.RequestException as e:
            elapsed = time.time() - t0
            print(f"[Submitter] Request to {self.url} failed after {format_duration(elapsed)}: {e}",
                  file=sys.stderr)
            return SubmitResult(EXIT_FATAL, None, elapsed)
        elapsed = time.time() - t0

        try:
            status = resp.status_code
            print(f"request returned code: {status} and took: {format_duration(elapsed)}")
            if status == NO_CONTENT:
                return SubmitResult(EXIT_OK, status, elapsed)

            try:
                body = resp.text
            except requests.exceptions.RequestException as e:
                # status already reported; a broken body read does not stop the run
                print(f"[Submitter] Could not read response body: {e}", file=sys.stderr)
                return SubmitResult(EXIT_OK, status, elapsed)
            print(body)
            return SubmitResult(EXIT_OK, status, elapsed, body)
        finally:
            resp.close()
