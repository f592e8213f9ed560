# -------------------------
# Author: Jeevan Reji (modified)
# Date: 2026-10-19
# -------------------------
"""
Local stand-in for the ingestion API, to point the generator at.

python -m sink.run_sink 8080
SINK_PORT=8787 python -m sink.run_sink
"""
import uvicorn
import sys
import os


def main():
    # First positional arg wins, then SINK_PORT, then 8080.
    if len(sys.argv) > 1:
        try:
            port = int(sys.argv[1])
        except ValueError:
            raise RuntimeError("First argument must be the sink port (e.g. 8080)")
    else:
        port = int(os.environ.get("SINK_PORT", 8080))
    host = os.environ.get("SINK_HOST", "0.0.0.0")

    # sink.sink reads it at import to tag its log lines
    os.environ["SINK_PORT"] = str(port)

    uvicorn.run("sink.sink:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
