"""Base use case and shared request parsing helpers."""

from abc import ABC, abstractmethod
from typing import Any, TypeVar
from uuid import UUID

import pydantic

from wingman.domain.error import ValidationError

V = TypeVar("V")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_value(value_type: type[V], raw: Any) -> V:
    """Build a value object from raw input, raising a domain ValidationError.

    Args:
        value_type: Value object class, e.g. Email
        raw: Untrusted input

    Returns:
        The validated value object

    Raises:
        ValidationError: With the first validation message
    """
    try:
        return value_type(raw)
    except pydantic.ValidationError as e:
        errors = e.errors()
        message = errors[0]["msg"] if errors else str(e)
        raise ValidationError(message.removeprefix("Value error, ")) from e


def parse_uuid(raw: str, field: str) -> UUID:
    """Parse a UUID from a string.

    Raises:
        ValidationError: If raw is not a valid UUID
    """
    try:
        return UUID(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {field}") from e
