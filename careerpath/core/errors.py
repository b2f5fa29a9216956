"""Error taxonomy shared by the engine, evaluators, store and routes.

Two flavours live here:

- exceptions (``InputValidationError``, ``UpstreamFetchError``) for failures
  that abort the current operation;
- typed results (``ValidationFailure``, ``NotFound``) for failures the caller
  is expected to branch on, e.g. a missing profile card id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)


class CareerPathError(Exception):
    """Base class for application errors."""


class InputValidationError(CareerPathError):
    """Malformed or missing input; ``details`` holds field-level issues."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class UpstreamFetchError(CareerPathError):
    """A third-party API (GitHub, LinkedIn) could not be read."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass(frozen=True)
class ValidationFailure:
    details: list[dict[str, Any]] = field(default_factory=list)
    error: str = "ValidationError"


@dataclass(frozen=True)
class NotFound:
    id: str
    error: str = "Profile card not found"


def _jsonable_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    # ctx may carry exception objects that are not JSON serialisable
    return [
        {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]


def validate_payload(model: type[M], data: Any) -> M | ValidationFailure:
    """Validate ``data`` against ``model`` without raising."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        return ValidationFailure(details=_jsonable_errors(exc))
