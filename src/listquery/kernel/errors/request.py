"""Request errors – malformed search payloads and missing records."""

from __future__ import annotations

from typing import Any

from listquery.kernel.errors.base import BaseError


class ValidationError(BaseError):
    """A search request could not be decoded.

    ``errors`` lists one ``{"field": ..., "reason": ...}`` entry per bad
    request parameter.
    """

    default_code = "invalid_request"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    @classmethod
    def for_parameter(cls, name: str, reason: str, *, cause: BaseException | None = None) -> "ValidationError":
        return cls(
            f"Invalid request parameter '{name}': {reason}",
            errors=[{"field": name, "reason": reason}],
            cause=cause,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class NotFoundError(BaseError):
    """No record of *entity* matches *key*."""

    default_code = "not_found"
    key_name = "key"

    def __init__(self, entity: str, key: Any = None, *, message: str | None = None, **kwargs: Any) -> None:
        if message is None:
            message = f"{entity} not found" if key is None else f"{entity} '{key}' not found"
        super().__init__(message, entity=entity, **{self.key_name: key}, **kwargs)
        self.entity = entity
        self.key = key


__all__ = ["NotFoundError", "ValidationError"]
