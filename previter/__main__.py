import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .tools import dedupe_consecutive, with_previous


def print_with_previous(stream: TextIO, separator: str, dedupe: bool) -> None:
    lines: Iterable[str] = (line.rstrip("\n") for line in stream)
    if dedupe:
        lines = dedupe_consecutive(lines)
    for previous, line in with_previous(lines):
        if previous is None:
            previous = ""
        print(f"{previous}{separator}{line}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser("previter")
    parser.add_argument("file", nargs="?", help="File to read (default: stdin)")
    parser.add_argument(
        "--separator", default="\t", help="Text between previous and current line"
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="Drop lines identical to the line before them",
    )
    args = parser.parse_args(argv)
    if args.file is None:
        print_with_previous(sys.stdin, args.separator, args.dedupe)
        return
    try:
        f = open(args.file)
    except OSError as e:
        parser.error(f"cannot open {args.file!r}: {e.strerror}")
    with f:
        print_with_previous(f, args.separator, args.dedupe)


if __name__ == "__main__":
    main()
