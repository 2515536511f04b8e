"""
Domain layer - Business logic and domain models.

Contains:
- Fare catalog and accepted denominations
- Report builders
- Transaction state machine
"""

from .catalog import (
    FareCatalog,
    DenominationSet,
)
from .transaction_engine import (
    TransactionEngine,
    TransactionPhase,
    TransactionState,
)


__all__ = [
    # Catalog
    "FareCatalog",
    "DenominationSet",
    # Transaction State
    "TransactionEngine",
    "TransactionPhase",
    "TransactionState",
]
