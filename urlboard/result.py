"""Tagged result type produced once at the transport boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

ErrorKind = Literal["http", "network", "payload"]

__all__ = ["Ok", "Err", "ErrorKind", "Result"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """
    Normalized failure of an outbound call.

    kind:    "http" (non-2xx answer), "network" (no answer at all),
             "payload" (2xx answer we could not decode).
    message: single user-presentable string (server `detail` when it sent one).
    status:  HTTP status code when there was a response.
    """

    kind: ErrorKind
    message: str
    status: int | None = None

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Err
