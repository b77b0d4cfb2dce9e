"""Explicit data access for catalog tables.

One small repository per table, all bound to the request's Session. ``save``
and ``delete_by_id`` only flush; committing is the caller's unit of work.
"""

from typing import Generic, Iterable, List, Optional, Set, Tuple, Type, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from academix_models import (
    Category,
    CategoryTranslation,
    Item,
    ItemSubCategoryLink,
    ItemTranslation,
    Language,
    SubCategory,
    SubCategoryTranslation,
)

ModelT = TypeVar("ModelT", bound=SQLModel)
TranslationT = TypeVar("TranslationT", bound=SQLModel)

TranslationKey = Tuple[int, int]

# Widest value an INTEGER primary key column can hold (signed 64-bit)
MAX_STORABLE_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """False for ids no row can have; those are absent, never a driver error."""
    return -MAX_STORABLE_ID - 1 <= value <= MAX_STORABLE_ID


class Repository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> List[ModelT]:
        return list(self.session.exec(select(self.model).order_by(self.model.id)).all())

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        if not is_storable_id(entity_id):
            return None
        return self.session.get(self.model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        if not is_storable_id(entity_id):
            return False
        stmt = select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        return self.session.exec(stmt).one() > 0

    def save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        entity = self.find_by_id(entity_id)
        if entity is not None:
            # ORM delete so relationship cascades run
            self.session.delete(entity)
            self.session.flush()


class LanguageRepository(Repository[Language]):
    model = Language

    def find_by_locale(self, locale: str) -> Optional[Language]:
        return self.session.exec(select(Language).where(Language.locale == locale)).first()

    def find_existing_ids(self, ids: Iterable[int]) -> Set[int]:
        wanted = {i for i in ids if is_storable_id(i)}
        if not wanted:
            return set()
        rows = self.session.exec(select(Language.id).where(Language.id.in_(wanted))).all()
        return set(rows)


class CategoryRepository(Repository[Category]):
    model = Category


class SubCategoryRepository(Repository[SubCategory]):
    model = SubCategory

    def find_all_by_category_id(self, category_id: int) -> List[SubCategory]:
        stmt = select(SubCategory).where(SubCategory.category_id == category_id).order_by(SubCategory.id)
        return list(self.session.exec(stmt).all())


class ItemRepository(Repository[Item]):
    model = Item

    def find_page_by_sub_category(self, sub_category_id: int, page: int, size: int) -> Tuple[List[Item], int]:
        """Return one zero-based page of items linked to a subcategory, plus the total count."""
        total = self.session.exec(
            select(func.count())
            .select_from(ItemSubCategoryLink)
            .where(ItemSubCategoryLink.sub_category_id == sub_category_id)
        ).one()
        if page * size >= total:
            # Past the end; the offset may not even fit a SQL integer
            return [], total
        stmt = (
            select(Item)
            .join(ItemSubCategoryLink, ItemSubCategoryLink.item_id == Item.id)
            .where(ItemSubCategoryLink.sub_category_id == sub_category_id)
            .order_by(Item.id)
            .offset(page * size)
            .limit(size)
        )
        return list(self.session.exec(stmt).all()), total


class TranslationRepository(Generic[TranslationT]):
    """Translation rows addressed by their (owner id, language id) key."""

    model: Type[TranslationT]
    owner_key: str

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, key: TranslationKey) -> Optional[TranslationT]:
        if not all(is_storable_id(part) for part in key):
            return None
        return self.session.get(self.model, key)

    def build(self, owner_id: int, language_id: int, name: str) -> TranslationT:
        return self.model(**{self.owner_key: owner_id, "language_id": language_id, "name": name})


class CategoryTranslationRepository(TranslationRepository[CategoryTranslation]):
    model = CategoryTranslation
    owner_key = "category_id"


class SubCategoryTranslationRepository(TranslationRepository[SubCategoryTranslation]):
    model = SubCategoryTranslation
    owner_key = "sub_category_id"


class ItemTranslationRepository(TranslationRepository[ItemTranslation]):
    model = ItemTranslation
    owner_key = "item_id"
