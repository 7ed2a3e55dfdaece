"""Domain error codes for the cinema module."""

from dataclasses import dataclass
from enum import Enum

from cinema.domain.value_objects import ClientId, ProviderId, SessionId


class ErrorCode(Enum):
    """Domain error codes."""

    CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SEAT_NOT_FOUND = "SEAT_NOT_FOUND"
    PROVIDER_NOT_FOUND = "PROVIDER_NOT_FOUND"
    INVALID_CATALOG = "INVALID_CATALOG"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ClientNotFoundError(DomainError):
    """Raised when a client is not in the catalog."""

    def __init__(self, client_id: ClientId) -> None:
        super().__init__(
            code=ErrorCode.CLIENT_NOT_FOUND,
            message=f"Client {client_id} not found",
        )
        self.client_id = client_id


class SessionNotFoundError(DomainError):
    """Raised when a session is not in the catalog."""

    def __init__(self, session_id: SessionId) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message=f"Session {session_id} not found",
        )
        self.session_id = session_id


class SeatNotFoundError(DomainError):
    """Raised when a requested seat does not exist in the session."""

    def __init__(self, seat: int) -> None:
        super().__init__(
            code=ErrorCode.SEAT_NOT_FOUND,
            message=f"Seat {seat} not found",
        )
        self.seat = seat


class ProviderNotFoundError(DomainError):
    """Raised when a provider is not part of the provider tree."""

    def __init__(self, provider_id: ProviderId) -> None:
        super().__init__(
            code=ErrorCode.PROVIDER_NOT_FOUND,
            message=f"Provider {provider_id} not found",
        )
        self.provider_id = provider_id


class InvalidCatalogError(DomainError):
    """Raised when catalog data is inconsistent."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATALOG,
            message=f"Invalid catalog: {reason}",
        )
        self.reason = reason
