# -------------------------
# Author: Jeevan Reji (modified)
# Date: 2026-10-19
# -------------------------
"""
Usage examples:

python -m client.send_points http -host localhost
python -m client.send_points http -host tsdb.local -port 8787 -iter 100 -size 50 -ks keyspaces.json
python -m client.send_points http -host localhost -timeout 500ms -ts 1000 -debug
"""
import argparse
import sys
from typing import List, Optional

from client.submitter import Submitter
from common.config import (DEFAULT_HOST_BOUND, DEFAULT_ITER, DEFAULT_KEYSPACES, DEFAULT_PORT,
                           DEFAULT_SIZE, DEFAULT_TIMEOUT, EXIT_FATAL, EXIT_OK, EXIT_USAGE)
from common.keyspaces import KeyspaceFileError, load_keyspaces
from utils.durations import parse_duration
from utils.load_generator import LoadGenerator, batch_factory

APP_HELP = """
Usage: sendpoints <command> [args]

Available commands are:
    http    Send points using http protocol
"""

HTTP_HELP = f"""
Send points using http protocol

Accepted arguments:

 -host:    hostname of the ingestion API (REQUIRED)
 -port:    http port of the ingestion API (defaults to {DEFAULT_PORT})
 -timeout: timeout duration, e.g. 5s or 500ms (defaults to {DEFAULT_TIMEOUT})
 -iter:    number of requests to send (defaults to infinity)
 -size:    number of points per request (defaults to {DEFAULT_SIZE})
 -ts:      number of unique timeseries (defaults to max int64)
 -ks:      path to keyspaces file (defaults to {DEFAULT_KEYSPACES})
 -debug:   print information about the request
"""


class _ArgParser(argparse.ArgumentParser):
    def error(self, message):
        raise ValueError(message)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgParser(prog="sendpoints http", add_help=False)
    p.add_argument("-host", "--host", default="")
    p.add_argument("-port", "--port", type=int, default=DEFAULT_PORT)
    p.add_argument("-timeout", "--timeout", default=DEFAULT_TIMEOUT)
    p.add_argument("-iter", "--iter", type=int, default=DEFAULT_ITER)
    p.add_argument("-size", "--size", type=int, default=DEFAULT_SIZE)
    p.add_argument("-ts", "--ts", type=int, default=DEFAULT_HOST_BOUND)
    p.add_argument("-ks", "--ks", default=DEFAULT_KEYSPACES)
    p.add_argument("-debug", "--debug", action="store_true")
    p.add_argument("-h", "-help", "--help", dest="help", action="store_true")
    return p


def parse_http_args(argv: List[str]) -> argparse.Namespace:
    """Parses and validates `http` options. Raises ValueError on bad input."""
    args = _build_parser().parse_args(argv)
    if args.help:
        return args
    if not args.host:
        raise ValueError("-host is required")
    if args.size < 0:
        raise ValueError("-size must not be negative")
    if args.ts < 0:
        raise ValueError("-ts must not be negative")
    if args.ts == 0:
        raise ValueError("-ts must be greater than zero")
    if args.iter < 0:
        raise ValueError("-iter must not be negative")
    if not 0 < args.port < 65536:
        raise ValueError(f"-port {args.port} out of range")
    args.timeout = parse_duration(args.timeout)
    if args.timeout < 0:
        raise ValueError("-timeout must not be negative")
    return args


def run_http(argv: List[str]) -> int:
    try:
        args = parse_http_args(argv)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        print(HTTP_HELP.strip(), file=sys.stderr)
        return EXIT_USAGE
    if args.help:
        print(HTTP_HELP.strip())
        return EXIT_OK

    try:
        keyspaces = load_keyspaces(args.ks)
    except KeyspaceFileError as e:
        print(e, file=sys.stderr)
        return EXIT_FATAL

    submitter = Submitter(args.host, args.port, args.timeout, args.debug)
    try:
        lg = LoadGenerator(batch_factory(args.size, keyspaces, args.ts), submitter, args.iter)
        return lg.run()
    finally:
        submitter.session.close()


COMMANDS = {
    "http": run_http,
}


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] in ("-h", "-help", "--help"):
        print(APP_HELP.strip(), file=sys.stderr)
        return EXIT_USAGE if not argv else EXIT_OK
    cmd = COMMANDS.get(argv[0])
    if cmd is None:
        print(f"Unknown command: {argv[0]}", file=sys.stderr)
        print(APP_HELP.strip(), file=sys.stderr)
        return EXIT_USAGE
    return cmd(argv[1:])


if __name__ == "__main__":
    sys.exit(main())
