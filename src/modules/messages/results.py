"""Outcomes returned by the message service.

Every service mutation returns exactly one of these variants. Callers are
expected to ``match`` on the result rather than catch exceptions.
"""

from dataclasses import dataclass, field

from src.database.models import Message


@dataclass(frozen=True)
class Created:
    message: Message


@dataclass(frozen=True)
class Updated:
    pass


@dataclass(frozen=True)
class Deleted:
    pass


@dataclass(frozen=True)
class NotFound:
    reason: str


@dataclass(frozen=True)
class Conflict:
    reason: str


@dataclass(frozen=True)
class ValidationError:
    """Field name mapped to its error messages, in the order they were found."""

    errors: dict[str, list[str]] = field(default_factory=dict)


MessageResult = Created | Updated | Deleted | NotFound | Conflict | ValidationError
