from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    PROVIDER_ERROR = "provider_error"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """
    Outcome of a provider-backed lookup.
    Lets callers tell "no match" apart from "provider unreachable".
    """
    status: LookupStatus
    value: Optional[T] = None
    detail: Optional[str] = None

    @classmethod
    def found(cls, value: T) -> "LookupResult[T]":
        return cls(LookupStatus.FOUND, value=value)

    @classmethod
    def not_found(cls, detail: str = "not found") -> "LookupResult[T]":
        return cls(LookupStatus.NOT_FOUND, detail=detail)

    @classmethod
    def provider_error(cls, detail: str) -> "LookupResult[T]":
        return cls(LookupStatus.PROVIDER_ERROR, detail=detail)

    @property
    def ok(self) -> bool:
        return self.status is LookupStatus.FOUND
