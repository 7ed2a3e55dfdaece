from cinema.domain.models import (
    Client,
    Movie,
    Provider,
    ProviderNode,
    Reservation,
    ReserveOk,
    ReserveResult,
    SeatAlreadyReserved,
    Session,
)
from cinema.domain.provider_tree import ProviderTree
from cinema.domain.value_objects import ClientId, Money, MovieId, ProviderId, SeatCount, SessionId

__all__ = [
    "Client",
    "Movie",
    "Provider",
    "ProviderNode",
    "ProviderTree",
    "Reservation",
    "ReserveOk",
    "ReserveResult",
    "SeatAlreadyReserved",
    "Session",
    "ClientId",
    "MovieId",
    "ProviderId",
    "SessionId",
    "Money",
    "SeatCount",
]
