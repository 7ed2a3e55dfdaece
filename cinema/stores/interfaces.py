"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from cinema.domain import (
    Client,
    ClientId,
    Movie,
    MovieId,
    ProviderTree,
    Reservation,
    Session,
    SessionId,
)


class CatalogStore(ABC):
    """Interface for the fixed reference data of a cinema."""

    @property
    @abstractmethod
    def provider_tree(self) -> ProviderTree:
        """Return the provider hierarchy."""
        ...

    @abstractmethod
    def get_client(self, client_id: ClientId) -> Client | None:
        """Return a client by ID, or None if not found."""
        ...

    @abstractmethod
    def get_session(self, session_id: SessionId) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def get_movie(self, movie_id: MovieId) -> Movie | None:
        """Return a movie by ID, or None if not found."""
        ...


class ReservationStore(ABC):
    """Interface for the append-only reservation log."""

    @abstractmethod
    def add(self, reservation: Reservation) -> None:
        """Append a reservation."""
        ...

    @abstractmethod
    def list_reservations(self) -> list[Reservation]:
        """Return all reservations in insertion order."""
        ...

    @abstractmethod
    def for_session(self, session_id: SessionId) -> list[Reservation]:
        """Return reservations for a session in insertion order."""
        ...

    @abstractmethod
    def for_client(self, client_id: ClientId) -> list[Reservation]:
        """Return reservations made by a client in insertion order."""
        ...
