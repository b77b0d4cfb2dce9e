"""Catalog SQLModel models.

Tables for the Category → SubCategory → Item hierarchy, the languages they
can be translated into, and the per-language translation rows.
"""

from .base import BaseModel
from .category import Category, CategoryTranslation
from .item import Item, ItemTranslation
from .language import Language
from .sub_category import ItemSubCategoryLink, SubCategory, SubCategoryTranslation

__all__ = [
    "BaseModel",
    "Language",
    "Category",
    "CategoryTranslation",
    "SubCategory",
    "SubCategoryTranslation",
    "ItemSubCategoryLink",
    "Item",
    "ItemTranslation",
]
