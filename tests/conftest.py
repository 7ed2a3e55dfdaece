"""Pytest configuration and shared fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest

from cinema.config import CinemaSettings
from cinema.domain import (
    Client,
    ClientId,
    Money,
    Movie,
    MovieId,
    ProviderId,
    ProviderNode,
    ProviderTree,
    SeatCount,
    Session,
    SessionId,
)
from cinema.services import Cinema

ROOT = ProviderId(1)
CHILD_A = ProviderId(2)
CHILD_B = ProviderId(3)
GRANDCHILD = ProviderId(4)

ALICE = ClientId(1)
BOB = ClientId(2)
CAROL = ClientId(3)

ROOT_SESSION = SessionId(10)
CHILD_A_SESSION = SessionId(11)
CHILD_B_SESSION = SessionId(12)
GRANDCHILD_SESSION = SessionId(13)


@pytest.fixture
def provider_tree() -> ProviderTree:
    return ProviderTree.from_nested(
        ProviderNode(
            id=ROOT,
            company_name="Root Pictures",
            sub=(
                ProviderNode(
                    id=CHILD_A,
                    company_name="North Screens",
                    sub=(ProviderNode(id=GRANDCHILD, company_name="North Annex"),),
                ),
                ProviderNode(id=CHILD_B, company_name="South Screens"),
            ),
        )
    )


@pytest.fixture
def movies() -> list[Movie]:
    return [
        Movie(id=MovieId(100), name="Solaris", description="Ocean planet"),
        Movie(id=MovieId(101), name="Stalker", description="The Zone"),
        Movie(id=MovieId(102), name="Mirror", description="Memories"),
    ]


@pytest.fixture
def clients() -> list[Client]:
    return [
        Client(id=ALICE, name="Alice"),
        Client(id=BOB, name="Bob"),
        Client(id=CAROL, name="Carol"),
    ]


@pytest.fixture
def sessions() -> list[Session]:
    return [
        Session(
            id=ROOT_SESSION,
            movie_id=MovieId(100),
            seat_count=SeatCount(50),
            date=datetime(2024, 1, 10, 19, 0),
            provider_id=ROOT,
            provider_earn=Money(Decimal("10.00")),
        ),
        Session(
            id=CHILD_A_SESSION,
            movie_id=MovieId(101),
            seat_count=SeatCount(20),
            date=datetime(2024, 2, 1, 18, 30),
            provider_id=CHILD_A,
            provider_earn=Money(Decimal("5.50")),
        ),
        Session(
            id=CHILD_B_SESSION,
            movie_id=MovieId(102),
            seat_count=SeatCount(10),
            date=datetime(2024, 2, 15, 21, 0),
            provider_id=CHILD_B,
            provider_earn=Money(Decimal("3.00")),
        ),
        Session(
            id=GRANDCHILD_SESSION,
            movie_id=MovieId(100),
            seat_count=SeatCount(5),
            date=datetime(2024, 3, 1, 20, 0),
            provider_id=GRANDCHILD,
            provider_earn=Money(Decimal("7.00")),
        ),
    ]


@pytest.fixture
def settings() -> CinemaSettings:
    return CinemaSettings(
        EARNINGS_FILTER_BY_DATE=False,
        EARNINGS_INCLUDE_ALL_DESCENDANTS=False,
    )


@pytest.fixture
def cinema(provider_tree, movies, clients, sessions, settings) -> Cinema:
    return Cinema.from_catalog(provider_tree, movies, clients, sessions, settings=settings)
