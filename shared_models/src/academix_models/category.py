from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .language import Language
    from .sub_category import SubCategory


class Category(BaseModel, table=True):
    """Root of the catalog hierarchy."""

    __tablename__ = "category"

    id: Optional[int] = Field(default=None, primary_key=True)

    translations: List["CategoryTranslation"] = Relationship(
        back_populates="category",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "CategoryTranslation.language_id"},
    )
    sub_categories: List["SubCategory"] = Relationship(
        back_populates="category",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "SubCategory.id"},
    )


class CategoryTranslation(BaseModel, table=True):
    """Localized name of a Category.

    Identity is the (category_id, language_id) pair.
    """

    __tablename__ = "category_translation"

    category_id: int = Field(foreign_key="category.id", primary_key=True, ondelete="CASCADE")
    language_id: int = Field(foreign_key="language.id", primary_key=True, ondelete="CASCADE")
    name: str

    category: Optional[Category] = Relationship(back_populates="translations")
    language: Optional["Language"] = Relationship(back_populates="category_translations")
