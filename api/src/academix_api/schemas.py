from typing import Annotated, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from academix_api.localization import resolve_name
from academix_models import Category, Item, Language, SubCategory


class TranslationIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    language_id: int
    name: str = Field(min_length=1)


class TranslationOut(BaseModel):
    language_id: int
    locale: Optional[str] = None
    name: str


class CategoryIn(BaseModel):
    """Create/update body for categories. Update only merges ``translations``."""

    model_config = ConfigDict(extra="forbid")

    translations: List[TranslationIn] = Field(default_factory=list)


class SubCategoryIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    translations: List[TranslationIn] = Field(default_factory=list)


class ItemIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sub_category_ids: List[int] = Field(min_length=1)
    translations: List[TranslationIn] = Field(default_factory=list)


class ItemUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    translations: List[TranslationIn] = Field(default_factory=list)


class LanguageIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    locale: Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1, max_length=16)]


class LanguageOut(BaseModel):
    id: int
    locale: str

    @classmethod
    def from_entity(cls, language: Language) -> "LanguageOut":
        return cls(id=language.id, locale=language.locale)


def _translations_out(translations: Sequence) -> List[TranslationOut]:
    return [
        TranslationOut(
            language_id=t.language_id,
            locale=t.language.locale if t.language is not None else None,
            name=t.name,
        )
        for t in translations
    ]


class CategoryOut(BaseModel):
    id: int
    name: Optional[str] = None
    translations: List[TranslationOut] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, category: Category, locale: str) -> "CategoryOut":
        return cls(
            id=category.id,
            name=resolve_name(category.translations, locale),
            translations=_translations_out(category.translations),
        )


class SubCategoryOut(BaseModel):
    id: int
    category_id: int
    name: Optional[str] = None
    translations: List[TranslationOut] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, sub_category: SubCategory, locale: str) -> "SubCategoryOut":
        return cls(
            id=sub_category.id,
            category_id=sub_category.category_id,
            name=resolve_name(sub_category.translations, locale),
            translations=_translations_out(sub_category.translations),
        )


class ItemOut(BaseModel):
    id: int
    sub_category_ids: List[int] = Field(default_factory=list)
    name: Optional[str] = None
    translations: List[TranslationOut] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, item: Item, locale: str) -> "ItemOut":
        return cls(
            id=item.id,
            sub_category_ids=sorted(s.id for s in item.sub_categories),
            name=resolve_name(item.translations, locale),
            translations=_translations_out(item.translations),
        )


class ItemPage(BaseModel):
    items: List[ItemOut]
    page: int
    size: int
    total: int
