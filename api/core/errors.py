"""
Error types raised by repositories and services.

Repositories raise these (or asyncpg errors); services decide whether an
operation reports `False` / `[]` or lets the error reach the router.
"""

from __future__ import annotations


class PortDataError(RuntimeError):
    pass


class ConfigError(PortDataError):
    pass


class QueryValidationError(PortDataError):
    """User-supplied filter or projection input was rejected before any SQL ran."""


class RecordNotFoundError(PortDataError):
    pass


class DuplicateValueError(PortDataError):
    pass


class CapacityError(PortDataError):
    def __init__(self, *, port_address: str, section: int, current: int, delta: int, capacity: int) -> None:
        self.port_address = port_address
        self.section = section
        self.current = current
        self.delta = delta
        self.capacity = capacity
        super().__init__(
            f"Warehouse {port_address!r} section {section}: "
            f"{current} {delta:+d} is outside 0..{capacity}."
        )
