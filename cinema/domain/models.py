"""Domain models for the cinema catalog and its reservations.

These are pure domain objects. Records reference each other by id only;
lookups go through the stores.
"""

from dataclasses import dataclass
from datetime import datetime

from cinema.domain.value_objects import (
    ClientId,
    Money,
    MovieId,
    ProviderId,
    SeatCount,
    SessionId,
)


@dataclass(frozen=True)
class Provider:
    """Domain representation of a Provider (a company earning from sessions)."""

    id: ProviderId
    company_name: str
    child_ids: tuple[ProviderId, ...] = ()


@dataclass(frozen=True)
class ProviderNode:
    """Nested provider description, flattened into a ProviderTree."""

    id: ProviderId
    company_name: str
    sub: tuple["ProviderNode", ...] = ()


@dataclass(frozen=True)
class Movie:
    """Domain representation of a Movie."""

    id: MovieId
    name: str
    description: str


@dataclass(frozen=True)
class Client:
    """Domain representation of a Client."""

    id: ClientId
    name: str


@dataclass(frozen=True)
class Session:
    """Domain representation of a screening Session."""

    id: SessionId
    movie_id: MovieId
    seat_count: SeatCount
    date: datetime
    provider_id: ProviderId
    provider_earn: Money

    def __post_init__(self) -> None:
        if isinstance(self.seat_count, int):
            object.__setattr__(self, "seat_count", SeatCount(self.seat_count))


@dataclass(frozen=True)
class Reservation:
    """Seats held by a client in a session."""

    client_id: ClientId
    session_id: SessionId
    seats: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "seats", tuple(self.seats))
        if not self.seats:
            raise ValueError("Reservation must hold at least one seat")
        if any(seat < 1 for seat in self.seats):
            raise ValueError("Seat numbers start at 1")


@dataclass(frozen=True)
class ReserveOk:
    """The reservation was recorded."""


@dataclass(frozen=True)
class SeatAlreadyReserved:
    """The reservation was refused because a seat is already taken."""

    seat: int


ReserveResult = ReserveOk | SeatAlreadyReserved
