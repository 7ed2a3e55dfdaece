"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self


@dataclass(frozen=True)
class ProviderId:
    """Unique identifier for a Provider."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MovieId:
    """Unique identifier for a Movie."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ClientId:
    """Unique identifier for a Client."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Earning amount with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class SeatCount:
    """Non-negative number of seats in a session."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Seat count cannot be negative")

    def __contains__(self, seat: int) -> bool:
        return 1 <= seat <= self.value
