from __future__ import annotations


class ServiceError(Exception):
    """Base class for domain/service layer failures."""


class NotFoundError(ServiceError):
    def __init__(self, resource: str, identifier: object, message: str | None = None):
        self._resource = resource
        self._identifier = identifier
        super().__init__(message or f"{resource} '{identifier}' not found")

    def __reduce__(self):
        # args only holds the rendered message
        return (type(self), (self._resource, self._identifier, str(self)))

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def identifier(self) -> object:
        return self._identifier


class UserNotFoundError(NotFoundError):
    """Raised when no user exists for the given id."""

    def __init__(self, identifier: int):
        super().__init__("User", identifier, f"Could not find the user with id {identifier}")

    def __reduce__(self):
        return (type(self), (self._identifier,))

    @property
    def identifier(self) -> int:
        return self._identifier


class ConflictError(ServiceError):
    """Raised when a write would break a uniqueness rule."""
