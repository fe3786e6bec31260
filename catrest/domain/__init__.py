"""Domain entities."""

from .cats import CAT_FIELDS, Cat, CatIn

__all__ = ["CAT_FIELDS", "Cat", "CatIn"]
