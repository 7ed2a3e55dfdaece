from cinema.services.cinema_service import Cinema

__all__ = ["Cinema"]
