import logging
from typing import List

from sqlmodel import Session

from academix_api.errors import ResourceNotFoundError
from academix_api.repositories import (
    CategoryRepository,
    CategoryTranslationRepository,
    SubCategoryRepository,
)
from academix_api.schemas import CategoryIn
from academix_api.services.translations import ensure_languages_exist, merge_translations
from academix_models import Category, SubCategory

logger = logging.getLogger(__name__)


class CategoryService:
    """Category CRUD plus translation merges. One instance per request session."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.categories = CategoryRepository(session)
        self.translations = CategoryTranslationRepository(session)
        self.sub_categories = SubCategoryRepository(session)

    def get_all_categories(self) -> List[Category]:
        return self.categories.find_all()

    def get_category_by_id(self, category_id: int) -> Category:
        category = self.categories.find_by_id(category_id)
        if category is None:
            msg = f"Error, Category by id: {category_id} doesn't exist."
            logger.error(msg, extra={"category_id": category_id})
            raise ResourceNotFoundError(msg)
        return category

    def get_sub_categories_by_category_id(self, category_id: int) -> List[SubCategory]:
        if not self.categories.exists_by_id(category_id):
            msg = f"Error, Category by id: {category_id} doesn't exist."
            logger.error(msg, extra={"category_id": category_id})
            raise ResourceNotFoundError(msg)
        return self.sub_categories.find_all_by_category_id(category_id)

    def add_category(self, payload: CategoryIn) -> Category:
        ensure_languages_exist(self.session, payload.translations)
        category = self.categories.save(Category())
        merge_translations(self.session, category, payload.translations, self.translations)
        self.session.commit()
        self.session.refresh(category)
        logger.info("Category created", extra={"category_id": category.id})
        return category

    def update_category(self, category_id: int, payload: CategoryIn) -> bool:
        """Merge the payload's translations into an existing category.

        Existing (category, language) rows are renamed, new ones inserted,
        unmentioned ones untouched. Returns True; re-fetch to see the result.
        """
        category = self.categories.find_by_id(category_id)
        if category is None:
            msg = f"Error, Category with id: {category_id} cannot be updated. Category doesn't exist."
            logger.error(msg, extra={"category_id": category_id})
            raise ResourceNotFoundError(msg)
        ensure_languages_exist(self.session, payload.translations)
        result = merge_translations(self.session, category, payload.translations, self.translations)
        self.session.commit()
        logger.info(
            "Category updated",
            extra={"category_id": category_id, "inserted": len(result.inserted), "updated": len(result.updated)},
        )
        return True

    def delete_category(self, category_id: int) -> bool:
        if not self.categories.exists_by_id(category_id):
            msg = f"Error, Category with id: {category_id} cannot be deleted. Category doesn't exist."
            logger.error(msg, extra={"category_id": category_id})
            raise ResourceNotFoundError(msg)
        self.categories.delete_by_id(category_id)
        self.session.commit()
        logger.info("Category deleted", extra={"category_id": category_id})
        return True
