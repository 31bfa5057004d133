"""Result type for explicit error handling.

Every fallible step of a release run (reading the manifest, talking to git,
calling the hosting API) returns a Result instead of raising. The caller
decides whether a failure aborts the run or degrades gracefully.

Usage:
    def read_version(content: str) -> Result[str, ParseError]:
        ...

    match read_version(text):
        case Ok(version):
            print(f"version: {version}")
        case Err(error):
            print(f"failed: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

__all__ = ["Err", "Ok", "Result"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error payload (a frozen dataclass describing the failure).
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
