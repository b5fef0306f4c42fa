"""Root of the listquery error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Every error raised by listquery.

    ``code`` is a stable slug clients can branch on. Extra keyword arguments
    become ``detail``: the request fragment that failed (filter key, field,
    operand) so an API layer can echo it back in its failed list response.
    """

    default_code: str = "listquery_error"

    def __init__(self, message: str, *, code: str | None = None, cause: BaseException | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def to_dict(self) -> dict[str, Any]:
        """Failed list-response payload: ``succeeded`` is always ``False``."""
        payload: dict[str, Any] = {"succeeded": False, "code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
