"""Command line entry point: solve a stored problem for input from a file or stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from problemset import tasks_a, tasks_b, tasks_cdef

_RUNNERS: dict[str, Callable[[str, str], str]] = {
    name: module.run
    for module in (tasks_a, tasks_b, tasks_cdef)
    for name in module._PROBLEMS
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="problemset",
        description="Solve a stored problem, reading its input from a file or stdin.",
    )
    parser.add_argument("problem", nargs="?", help="problem name such as 50A or 1829F")
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    parser.add_argument("-l", "--list", action="store_true", help="list the known problems")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.list:
        print("\n".join(sorted(_RUNNERS)))
        return 0
    if args.problem is None:
        parser.error("a problem name is required")
    runner = _RUNNERS.get(args.problem)
    if runner is None:
        parser.error(f"unknown problem: {args.problem}")
    try:
        text = Path(args.input).read_text() if args.input else sys.stdin.read()
        output = runner(args.problem, text)
    except (OSError, ValueError, IndexError) as exc:
        print(f"problemset: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())