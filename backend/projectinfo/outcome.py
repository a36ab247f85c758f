"""
Result values passed between the upstream client, the field resolvers and
the aggregator. A fetch either resolves to a value or fails with a reason;
neither case raises.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureReason(str, Enum):
    NETWORK = "network"
    EMPTY_BODY = "empty_body"
    MALFORMED_JSON = "malformed_json"
    NOT_FOUND = "not_found"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class Resolved(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    reason: FailureReason
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason.value}: {self.detail}"
        return self.reason.value


Outcome = Union[Resolved[T], Failed]
