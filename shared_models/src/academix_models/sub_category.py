from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from .base import BaseModel

if TYPE_CHECKING:
    from .category import Category
    from .item import Item
    from .language import Language


class ItemSubCategoryLink(SQLModel, table=True):
    """Association between Items and the SubCategories they are listed under."""

    __tablename__ = "item_sub_category"

    item_id: int = Field(foreign_key="item.id", primary_key=True, ondelete="CASCADE")
    sub_category_id: int = Field(foreign_key="sub_category.id", primary_key=True, ondelete="CASCADE")


class SubCategory(BaseModel, table=True):
    """Second level of the catalog. Always belongs to exactly one Category."""

    __tablename__ = "sub_category"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Assigned once at creation from the parent lookup
    category_id: int = Field(foreign_key="category.id", index=True, ondelete="CASCADE")

    category: Optional["Category"] = Relationship(back_populates="sub_categories")
    translations: List["SubCategoryTranslation"] = Relationship(
        back_populates="sub_category",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "SubCategoryTranslation.language_id"},
    )
    items: List["Item"] = Relationship(back_populates="sub_categories", link_model=ItemSubCategoryLink)


class SubCategoryTranslation(BaseModel, table=True):
    """Localized name of a SubCategory, keyed by (sub_category_id, language_id)."""

    __tablename__ = "sub_category_translation"

    sub_category_id: int = Field(foreign_key="sub_category.id", primary_key=True, ondelete="CASCADE")
    language_id: int = Field(foreign_key="language.id", primary_key=True, ondelete="CASCADE")
    name: str

    sub_category: Optional[SubCategory] = Relationship(back_populates="translations")
    language: Optional["Language"] = Relationship(back_populates="sub_category_translations")
