"""Cinema service - all booking business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Raise domain errors for unknown identifiers
- Return domain models or plain result values
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Self

from cinema.config import CinemaSettings, get_settings
from cinema.domain import (
    Client,
    ClientId,
    Money,
    Movie,
    ProviderId,
    ProviderTree,
    Reservation,
    ReserveOk,
    ReserveResult,
    SeatAlreadyReserved,
    Session,
    SessionId,
)
from cinema.domain.errors import (
    ClientNotFoundError,
    InvalidCatalogError,
    SeatNotFoundError,
    SessionNotFoundError,
)
from cinema.stores.interfaces import CatalogStore, ReservationStore
from cinema.stores.memory_store import InMemoryCatalogStore, InMemoryReservationStore

logger = logging.getLogger(__name__)


class Cinema:
    """Seat reservations, watch history and provider earnings for one cinema."""

    def __init__(
        self,
        catalog: CatalogStore,
        reservations: ReservationStore,
        settings: CinemaSettings | None = None,
    ) -> None:
        self._catalog = catalog
        self._reservations = reservations
        self._settings = settings or get_settings()

        for reservation in reservations.list_reservations():
            if catalog.get_client(reservation.client_id) is None:
                reason = f"reservation references unknown client {reservation.client_id}"
            elif catalog.get_session(reservation.session_id) is None:
                reason = f"reservation references unknown session {reservation.session_id}"
            else:
                continue
            logger.error("Rejected seeded reservation: %s", reason)
            raise InvalidCatalogError(reason)

    @classmethod
    def from_catalog(
        cls,
        provider_tree: ProviderTree,
        movies: Iterable[Movie],
        clients: Iterable[Client],
        sessions: Iterable[Session],
        reservations: Iterable[Reservation] = (),
        settings: CinemaSettings | None = None,
    ) -> Self:
        """Build a cinema backed by in-memory stores."""
        return cls(
            catalog=InMemoryCatalogStore(provider_tree, movies, clients, sessions),
            reservations=InMemoryReservationStore(reservations),
            settings=settings,
        )

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        return tuple(self._reservations.list_reservations())

    def reserve(
        self, client_id: ClientId, session_id: SessionId, seats: Iterable[int]
    ) -> ReserveResult:
        """Reserve seats for a client, refusing seats that are already taken.

        Returns ReserveOk when the reservation is recorded, or
        SeatAlreadyReserved carrying the first requested seat that is
        already held. Nothing is recorded in the latter case.

        Raises:
            ClientNotFoundError: If the client does not exist.
            SessionNotFoundError: If the session does not exist.
            SeatNotFoundError: If a seat is outside the session's seat range.
            ValueError: If no seats are requested.
        """
        seats = tuple(seats)
        logger.debug("Reserve seats %s in session %s for client %s", seats, session_id, client_id)
        client = self._get_client(client_id)
        session = self._get_session(session_id)

        for seat in seats:
            if seat not in session.seat_count:
                logger.warning("Seat %s not found in session %s", seat, session.id)
                raise SeatNotFoundError(seat)

        reservation = Reservation(client_id=client.id, session_id=session.id, seats=seats)

        taken = set(self._reserved_seats(session))
        for seat in reservation.seats:
            if seat in taken:
                logger.info("Seat %s in session %s is already reserved", seat, session.id)
                return SeatAlreadyReserved(seat)

        self._reservations.add(reservation)
        logger.info(
            "Reserved seats %s in session %s for client %s",
            list(reservation.seats),
            session.id,
            client.id,
        )
        return ReserveOk()

    def watched_movies(self, client_id: ClientId) -> list[Movie]:
        """Return the movies a client has booked, in booking order.

        Raises:
            ClientNotFoundError: If the client does not exist.
        """
        client = self._get_client(client_id)
        movies = []
        for reservation in self._reservations.for_client(client.id):
            session = self._catalog.get_session(reservation.session_id)
            movies.append(self._catalog.get_movie(session.movie_id))
        return movies

    def provider_earnings(
        self, provider_id: ProviderId, date_from: datetime, date_to: datetime
    ) -> Money:
        """Return what a provider and its sub-providers earned.

        Sums the session earnings of every reservation attributed to the
        provider and to each of its direct sub-providers. Deeper levels and
        the date range only count when enabled in the settings.

        Raises:
            ProviderNotFoundError: If the provider is not in the provider tree.
            ValueError: If date filtering is enabled and date_from > date_to.
        """
        tree = self._catalog.provider_tree
        provider = tree.get(provider_id)

        filter_by_date = self._settings.EARNINGS_FILTER_BY_DATE
        if filter_by_date and date_from > date_to:
            raise ValueError("date_from must not be after date_to")

        if self._settings.EARNINGS_INCLUDE_ALL_DESCENDANTS:
            subordinates = tree.descendants(provider.id)
        else:
            subordinates = tree.children(provider.id)
        visited = {provider.id, *(p.id for p in subordinates)}

        logger.debug(
            "Earnings for provider %s over %s (date filter: %s)",
            provider.id,
            sorted(pid.value for pid in visited),
            filter_by_date,
        )

        total = Money.zero()
        for reservation in self._reservations.list_reservations():
            session = self._catalog.get_session(reservation.session_id)
            if session.provider_id not in visited:
                continue
            if filter_by_date and not date_from <= session.date <= date_to:
                continue
            total += session.provider_earn
        return total

    def reserved_seats(self, session_id: SessionId) -> list[int]:
        """Return every seat held in a session, in reservation order.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        return self._reserved_seats(self._get_session(session_id))

    def reservations_for_client(self, client_id: ClientId) -> list[Reservation]:
        """Return a client's reservations in booking order.

        Raises:
            ClientNotFoundError: If the client does not exist.
        """
        return self._reservations.for_client(self._get_client(client_id).id)

    def _reserved_seats(self, session: Session) -> list[int]:
        return [
            seat
            for reservation in self._reservations.for_session(session.id)
            for seat in reservation.seats
        ]

    def _get_client(self, client_id: ClientId) -> Client:
        client = self._catalog.get_client(client_id)
        if client is None:
            logger.warning("Client %s not found", client_id)
            raise ClientNotFoundError(client_id)
        return client

    def _get_session(self, session_id: SessionId) -> Session:
        session = self._catalog.get_session(session_id)
        if session is None:
            logger.warning("Session %s not found", session_id)
            raise SessionNotFoundError(session_id)
        return session

