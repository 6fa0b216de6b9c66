from sys import stderr
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=stderr)


def trace_operation(operation: str, key: Any, index: int, outcome: str):
    printf_err(
        "[table] {0:<6s} {1!r:<16} bucket {2:4d} {3:s}\n",
        operation,
        key,
        index,
        outcome,
    )
