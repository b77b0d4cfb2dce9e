import logging
from typing import List, Tuple

from sqlmodel import Session

from academix_api.errors import ResourceNotFoundError
from academix_api.repositories import (
    CategoryRepository,
    ItemRepository,
    SubCategoryRepository,
    SubCategoryTranslationRepository,
)
from academix_api.schemas import SubCategoryIn
from academix_api.services.translations import ensure_languages_exist, merge_translations
from academix_models import Item, SubCategory

logger = logging.getLogger(__name__)


class SubCategoryService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.categories = CategoryRepository(session)
        self.sub_categories = SubCategoryRepository(session)
        self.translations = SubCategoryTranslationRepository(session)
        self.items = ItemRepository(session)

    def get_all_sub_categories(self) -> List[SubCategory]:
        return self.sub_categories.find_all()

    def get_sub_category_by_id(self, sub_category_id: int) -> SubCategory:
        sub_category = self.sub_categories.find_by_id(sub_category_id)
        if sub_category is None:
            msg = f"Error, SubCategory by id: {sub_category_id} doesn't exist."
            logger.error(msg, extra={"sub_category_id": sub_category_id})
            raise ResourceNotFoundError(msg)
        return sub_category

    def get_items_by_sub_category_id(self, sub_category_id: int, page: int, size: int) -> Tuple[List[Item], int]:
        """One zero-based page of the subcategory's items and the total item count."""
        sub_category = self.get_sub_category_by_id(sub_category_id)
        return self.items.find_page_by_sub_category(sub_category.id, page, size)

    def add_sub_category(self, category_id: int, payload: SubCategoryIn) -> SubCategory:
        category = self.categories.find_by_id(category_id)
        if category is None:
            msg = (
                f"Error, Category with id: {category_id} doesn't exist. "
                "SubCategory's parent Category is invalid."
            )
            logger.error(msg, extra={"category_id": category_id})
            raise ResourceNotFoundError(msg)
        ensure_languages_exist(self.session, payload.translations)

        sub_category = self.sub_categories.save(SubCategory(category_id=category.id))
        merge_translations(self.session, sub_category, payload.translations, self.translations)
        self.session.commit()
        self.session.refresh(sub_category)
        logger.info(
            "SubCategory created",
            extra={"sub_category_id": sub_category.id, "category_id": category_id},
        )
        return sub_category

    def update_sub_category(self, sub_category_id: int, payload: SubCategoryIn) -> bool:
        sub_category = self.sub_categories.find_by_id(sub_category_id)
        if sub_category is None:
            msg = (
                f"Error, SubCategory with id: {sub_category_id} cannot be updated. "
                "SubCategory doesn't exist."
            )
            logger.error(msg, extra={"sub_category_id": sub_category_id})
            raise ResourceNotFoundError(msg)
        ensure_languages_exist(self.session, payload.translations)
        result = merge_translations(self.session, sub_category, payload.translations, self.translations)
        self.session.commit()
        logger.info(
            "SubCategory updated",
            extra={
                "sub_category_id": sub_category_id,
                "inserted": len(result.inserted),
                "updated": len(result.updated),
            },
        )
        return True

    def delete_sub_category(self, sub_category_id: int) -> bool:
        if not self.sub_categories.exists_by_id(sub_category_id):
            msg = (
                f"Error, SubCategory with id: {sub_category_id} cannot be deleted. "
                "SubCategory doesn't exist."
            )
            logger.error(msg, extra={"sub_category_id": sub_category_id})
            raise ResourceNotFoundError(msg)
        self.sub_categories.delete_by_id(sub_category_id)
        self.session.commit()
        logger.info("SubCategory deleted", extra={"sub_category_id": sub_category_id})
        return True
