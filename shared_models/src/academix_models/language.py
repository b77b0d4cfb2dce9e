from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlmodel import Field, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .category import CategoryTranslation
    from .item import ItemTranslation
    from .sub_category import SubCategoryTranslation


class Language(BaseModel, table=True):
    """A locale that catalog translations can be written in.

    Referenced by every translation kind but owned by none of them. Removing a
    language removes the translations written in it.
    """

    __tablename__ = "language"

    id: Optional[int] = Field(default=None, primary_key=True)
    locale: str = Field(sa_type=String(16), unique=True, index=True)

    category_translations: List["CategoryTranslation"] = Relationship(
        back_populates="language",
        sa_relationship_kwargs={"cascade": "all"},
    )
    sub_category_translations: List["SubCategoryTranslation"] = Relationship(
        back_populates="language",
        sa_relationship_kwargs={"cascade": "all"},
    )
    item_translations: List["ItemTranslation"] = Relationship(
        back_populates="language",
        sa_relationship_kwargs={"cascade": "all"},
    )
