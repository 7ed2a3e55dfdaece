"""In-memory implementations of the cinema stores."""

import logging
from collections.abc import Iterable
from typing import NoReturn

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
from cinema.domain.errors import InvalidCatalogError
from cinema.stores.interfaces import CatalogStore, ReservationStore

logger = logging.getLogger(__name__)


class InMemoryCatalogStore(CatalogStore):
    """Catalog held in dictionaries keyed by id, validated on construction."""

    def __init__(
        self,
        provider_tree: ProviderTree,
        movies: Iterable[Movie],
        clients: Iterable[Client],
        sessions: Iterable[Session],
    ) -> None:
        self._provider_tree = provider_tree
        self._movies = _index(movies, "movie")
        self._clients = _index(clients, "client")
        self._sessions = _index(sessions, "session")

        for session in self._sessions.values():
            if session.movie_id not in self._movies:
                _reject(f"session {session.id} references unknown movie {session.movie_id}")
            if session.provider_id not in provider_tree:
                _reject(
                    f"session {session.id} references unknown provider {session.provider_id}"
                )

    @property
    def provider_tree(self) -> ProviderTree:
        return self._provider_tree

    def get_client(self, client_id: ClientId) -> Client | None:
        return self._clients.get(client_id)

    def get_session(self, session_id: SessionId) -> Session | None:
        return self._sessions.get(session_id)

    def get_movie(self, movie_id: MovieId) -> Movie | None:
        return self._movies.get(movie_id)


class InMemoryReservationStore(ReservationStore):
    """Append-only list of reservations."""

    def __init__(self, reservations: Iterable[Reservation] = ()) -> None:
        self._reservations: list[Reservation] = list(reservations)

    def add(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)

    def list_reservations(self) -> list[Reservation]:
        return list(self._reservations)

    def for_session(self, session_id: SessionId) -> list[Reservation]:
        return [r for r in self._reservations if r.session_id == session_id]

    def for_client(self, client_id: ClientId) -> list[Reservation]:
        return [r for r in self._reservations if r.client_id == client_id]


def _index(records, kind: str) -> dict:
    indexed = {}
    for record in records:
        if record.id in indexed:
            _reject(f"duplicate {kind} id {record.id}")
        indexed[record.id] = record
    return indexed


def _reject(reason: str) -> NoReturn:
    logger.error("Rejected catalog: %s", reason)
    raise InvalidCatalogError(reason)
