"""
Fare catalog and accepted denominations.

Both are fixed at construction and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from ticket_kiosk.configs import DENOMINATIONS, FARES
from ticket_kiosk.core.exceptions import (
    InvalidCatalogError,
    UnknownDestinationError,
    UnsupportedDenominationError,
)
from ticket_kiosk.core.value_objects import Destination, Money


class FareCatalog:
    """
    Immutable mapping from destination identifier to destination.

    Preserves the order destinations were configured in, which is the
    order they are offered on the display.
    """

    def __init__(self, destinations: Iterable[Destination]) -> None:
        """
        Initialize the catalog.

        Args:
            destinations: Destinations to offer.

        Raises:
            InvalidCatalogError: If a fare is not positive or an id repeats.
        """
        entries: dict[str, Destination] = {}
        for destination in destinations:
            if destination.fare.is_zero:
                raise InvalidCatalogError(
                    f"Fare for {destination.id} must be positive",
                    details={"destination": destination.id},
                )
            if destination.id in entries:
                raise InvalidCatalogError(
                    f"Duplicate destination: {destination.id}",
                    details={"destination": destination.id},
                )
            entries[destination.id] = destination
        self._entries: Mapping[str, Destination] = MappingProxyType(entries)

    @classmethod
    def from_config(
        cls,
        fares: Optional[Mapping[str, tuple[str, int]]] = None,
    ) -> "FareCatalog":
        """
        Build a catalog from a configuration mapping.

        Args:
            fares: Mapping of id -> (display name, fare in cents).
                Defaults to the configured fares.

        Returns:
            FareCatalog instance.
        """
        fares = FARES if fares is None else fares
        return cls(
            Destination(id=destination_id, name=name, fare=Money(cents))
            for destination_id, (name, cents) in fares.items()
        )

    def get(self, destination_id: str) -> Destination:
        """
        Look up a destination.

        Raises:
            UnknownDestinationError: If the id is not in the catalog.
        """
        try:
            return self._entries[destination_id]
        except (KeyError, TypeError):
            raise UnknownDestinationError(destination_id) from None

    def fare(self, destination_id: str) -> Money:
        """Get the fare for a destination."""
        return self.get(destination_id).fare

    def destinations(self) -> list[Destination]:
        """Get all destinations in display order."""
        return list(self._entries.values())

    def __contains__(self, destination_id: object) -> bool:
        try:
            return destination_id in self._entries
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class DenominationSet:
    """Immutable set of accepted insertion amounts."""

    def __init__(self, denominations: Iterable[Money]) -> None:
        """
        Initialize the denomination set.

        Raises:
            InvalidCatalogError: If a denomination is not positive.
        """
        values = frozenset(denominations)
        if any(value.is_zero for value in values):
            raise InvalidCatalogError("Denominations must be positive")
        self._values = values

    @classmethod
    def from_config(
        cls,
        denominations: Optional[Iterable[int]] = None,
    ) -> "DenominationSet":
        """Build a denomination set from amounts in cents."""
        denominations = DENOMINATIONS if denominations is None else denominations
        return cls(Money(cents) for cents in denominations)

    def validate(self, amount: Money) -> Money:
        """
        Check that an amount is an accepted denomination.

        Returns:
            The amount, unchanged.

        Raises:
            UnsupportedDenominationError: If the amount is not accepted.
        """
        if amount not in self._values:
            raise UnsupportedDenominationError(
                f"Unsupported denomination: {amount}",
                amount=amount.cents,
                accepted=[value.cents for value in self.values()],
            )
        return amount

    def values(self) -> list[Money]:
        """Get accepted denominations in ascending order."""
        return sorted(self._values)

    def __contains__(self, amount: object) -> bool:
        return amount in self._values

    def __len__(self) -> int:
        return len(self._values)
