from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when a request body cannot be decoded into the expected shape.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when a fetch by id matched no rows.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class StorageError(Exception):
    """Raised when a query, statement or commit against the store fails.

    The message carries the driver's error text. The enclosing transaction has
    already been rolled back when this is raised. http_status is 500.
    """

    http_status = 500

    def __init__(self, message: str = "Storage failure", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    @classmethod
    def from_exception(cls, exc: Exception) -> "StorageError":
        """Build from a SQLAlchemy error, preferring the DBAPI message."""
        orig = getattr(exc, "orig", None)
        message = str(orig) if orig is not None else str(exc)
        return cls(message.strip())

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message
