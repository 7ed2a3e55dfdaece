from cinema.stores.interfaces import CatalogStore, ReservationStore
from cinema.stores.memory_store import InMemoryCatalogStore, InMemoryReservationStore

__all__ = [
    "CatalogStore",
    "ReservationStore",
    "InMemoryCatalogStore",
    "InMemoryReservationStore",
]
