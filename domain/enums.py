"""
Domain enums for the SCPP application.
Contains all enumeration types used across the domain models.
"""

import enum


class DocumentKind(int, enum.Enum):
    """Fixed document types; ids match the seeded document_type rows"""

    EXPENSE = 1
    SAVINGS = 2
    INCOME = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class TransactionType(str, enum.Enum):
    """Food ledger transaction types"""

    RESTOCK = "restock"
    CONSUMPTION = "consumption"
    ADJUSTMENT = "adjustment"
