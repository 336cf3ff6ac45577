from __future__ import annotations

import dataclasses
import typing

__all__ = (
    "CqlGenError",
    "Error",
    "InvalidIdentifier",
    "InvalidOptionValue",
    "InvalidSpecification",
    "UnknownCluster",
)


class CqlGenError(ValueError):
    """Base class for errors occurring in the cqlgen codebase"""


class InvalidSpecification(CqlGenError):
    """A specification is incomplete or inconsistent and cannot be rendered."""

    def __init__(self, *, statement: str, reason: str):
        super().__init__(f"Cannot generate {statement}: {reason}")


class InvalidIdentifier(CqlGenError):
    def __init__(self, *, name: str | None):
        super().__init__(f"The identifier, {name!r}, is not a valid CQL identifier.")


class InvalidOptionValue(CqlGenError):
    def __init__(self, *, option_name: str, value: typing.Any, expected: str):
        super().__init__(f"The value for option, {option_name}, should be {expected}, but got {value!r}.")


class UnknownCluster(CqlGenError):
    def __init__(self, *, cluster_name: str):
        super().__init__(f"The cluster specified, {cluster_name}, was not found in the config file.")


@dataclasses.dataclass(frozen=True)
class Error:
    message: str
    context: dict[str, typing.Any] = dataclasses.field(default_factory=dict)

    @staticmethod
    def new(message: str, /, **context: typing.Any) -> Error:
        return Error(message=message, context=context)

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{key}={val!r}" for key, val in self.context.items())
            return f"{self.message} [{ctx}]"
        return self.message
