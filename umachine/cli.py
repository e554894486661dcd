"""Command-line entry: load a program file into segment 0 and run it."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import BinaryIO

from .machine import MachineError, UniversalMachine
from .memory import SegmentError

_BYTES_PER_WORD = 4


def words_from_bytes(data: bytes) -> list[int]:
    """Split ``data`` into big-endian 32-bit words; trailing bytes are dropped."""
    count = len(data) // _BYTES_PER_WORD
    return [
        int.from_bytes(data[start : start + _BYTES_PER_WORD], "big")
        for start in range(0, count * _BYTES_PER_WORD, _BYTES_PER_WORD)
    ]


def load_machine(
    path: str | PathLike[str],
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> UniversalMachine:
    """Create a machine whose segment 0 holds the program read from ``path``."""
    words = words_from_bytes(Path(path).read_bytes())
    machine = UniversalMachine(len(words), stdin, stdout)
    for index, word in enumerate(words):
        machine.populate(index, word)
    return machine


def main(argv: list[str] | None = None) -> int:
    """Run the program file named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: um <Um file>", file=sys.stderr)
        return 1

    stdin = getattr(sys.stdin, "buffer", sys.stdin)
    stdout = getattr(sys.stdout, "buffer", sys.stdout)
    try:
        machine = load_machine(args[0], stdin, stdout)
    except OSError as error:
        print(f"um: cannot read {args[0]}: {error}", file=sys.stderr)
        return 1

    try:
        machine.execute()
    except (MachineError, SegmentError) as error:
        print(f"um: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())