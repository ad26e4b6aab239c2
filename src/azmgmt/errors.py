from __future__ import annotations
from typing import Any, Optional

class AzmgmtError(Exception):
    """Base error for azmgmt."""

class AuthError(AzmgmtError):
    pass

class HttpError(AzmgmtError):
    def __init__(self, status_code: int, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.details = details

class ValidationError(AzmgmtError):
    """Raised before a request is sent when an argument fails a client-side rule."""

    def __init__(self, target: str, rule: str = "required") -> None:
        super().__init__(f"'{target}' failed validation rule '{rule}'")
        self.target = target
        self.rule = rule

class DeserializationError(AzmgmtError):
    """Raised when a response body cannot be decoded into the expected model."""

    def __init__(self, model: str, message: str) -> None:
        super().__init__(f"Unable to deserialize {model}: {message}")
        self.model = model
