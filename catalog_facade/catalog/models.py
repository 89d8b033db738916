"""Catalog domain models.

Defines the immutable Product record held by the in-memory store.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ProductCategory(str, Enum):
    """Fixed category labels assigned at seed time."""

    CATEGORY_A = "Category A"
    CATEGORY_B = "Category B"


@dataclass(frozen=True)
class Product:
    """Product entity in the local catalog.

    Attributes:
        id: Sequence-assigned identifier, never reused.
        name: Display name.
        category: One of the ProductCategory labels.
        price: Non-negative price with two decimal places.
    """

    id: int
    name: str
    category: ProductCategory
    price: Decimal
