import logging
from typing import List

from sqlmodel import Session

from academix_api.errors import ResourceNotFoundError
from academix_api.repositories import ItemRepository, ItemTranslationRepository, SubCategoryRepository
from academix_api.schemas import ItemIn, ItemUpdate
from academix_api.services.translations import ensure_languages_exist, merge_translations
from academix_models import Item

logger = logging.getLogger(__name__)


class ItemService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.items = ItemRepository(session)
        self.translations = ItemTranslationRepository(session)
        self.sub_categories = SubCategoryRepository(session)

    def get_all_items(self) -> List[Item]:
        return self.items.find_all()

    def get_item_by_id(self, item_id: int) -> Item:
        item = self.items.find_by_id(item_id)
        if item is None:
            msg = f"Error, Item by id: {item_id} doesn't exist."
            logger.error(msg, extra={"item_id": item_id})
            raise ResourceNotFoundError(msg)
        return item

    def add_item(self, payload: ItemIn) -> Item:
        """Create an item listed under every SubCategory in ``payload.sub_category_ids``.

        All parents are resolved before anything is written.
        """
        parents = []
        for sub_category_id in dict.fromkeys(payload.sub_category_ids):
            sub_category = self.sub_categories.find_by_id(sub_category_id)
            if sub_category is None:
                msg = (
                    f"Error, SubCategory with id: {sub_category_id} doesn't exist. "
                    "Item's parent SubCategory is invalid."
                )
                logger.error(msg, extra={"sub_category_id": sub_category_id})
                raise ResourceNotFoundError(msg)
            parents.append(sub_category)
        ensure_languages_exist(self.session, payload.translations)

        item = self.items.save(Item(sub_categories=parents))
        merge_translations(self.session, item, payload.translations, self.translations)
        self.session.commit()
        self.session.refresh(item)
        logger.info("Item created", extra={"item_id": item.id, "sub_category_ids": [p.id for p in parents]})
        return item

    def update_item(self, item_id: int, payload: ItemUpdate) -> bool:
        item = self.items.find_by_id(item_id)
        if item is None:
            msg = f"Error, Item with id: {item_id} cannot be updated. Item doesn't exist."
            logger.error(msg, extra={"item_id": item_id})
            raise ResourceNotFoundError(msg)
        ensure_languages_exist(self.session, payload.translations)
        result = merge_translations(self.session, item, payload.translations, self.translations)
        self.session.commit()
        logger.info(
            "Item updated",
            extra={"item_id": item_id, "inserted": len(result.inserted), "updated": len(result.updated)},
        )
        return True

    def delete_item(self, item_id: int) -> bool:
        if not self.items.exists_by_id(item_id):
            msg = f"Error, Item with id: {item_id} cannot be deleted. Item doesn't exist."
            logger.error(msg, extra={"item_id": item_id})
            raise ResourceNotFoundError(msg)
        self.items.delete_by_id(item_id)
        self.session.commit()
        logger.info("Item deleted", extra={"item_id": item_id})
        return True
