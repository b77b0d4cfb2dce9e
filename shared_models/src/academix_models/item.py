from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from .base import BaseModel
from .sub_category import ItemSubCategoryLink

if TYPE_CHECKING:
    from .language import Language
    from .sub_category import SubCategory


class Item(BaseModel, table=True):
    """Leaf of the catalog, listed under one or more SubCategories."""

    __tablename__ = "item"

    id: Optional[int] = Field(default=None, primary_key=True)

    sub_categories: List["SubCategory"] = Relationship(back_populates="items", link_model=ItemSubCategoryLink)
    translations: List["ItemTranslation"] = Relationship(
        back_populates="item",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "ItemTranslation.language_id"},
    )


class ItemTranslation(BaseModel, table=True):
    """Localized name of an Item, keyed by (item_id, language_id)."""

    __tablename__ = "item_translation"

    item_id: int = Field(foreign_key="item.id", primary_key=True, ondelete="CASCADE")
    language_id: int = Field(foreign_key="language.id", primary_key=True, ondelete="CASCADE")
    name: str

    item: Optional[Item] = Relationship(back_populates="translations")
    language: Optional["Language"] = Relationship(back_populates="item_translations")
