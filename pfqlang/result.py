"""Ok/Err result type for caller-side operations that can fail.

The signature algebra itself never fails; it answers with booleans,
``None`` arities and empty views. Results are for the layers above it:
loading configuration and parsing computations.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]
