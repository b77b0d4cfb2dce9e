import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from academix_api.db import get_session
from academix_api.localization import select_locale
from academix_api.schemas import ItemIn, ItemOut, ItemUpdate
from academix_api.services.items import ItemService

router = APIRouter(prefix="/items", tags=["items"])
logger = logging.getLogger(__name__)


def get_item_service(session: Session = Depends(get_session)) -> ItemService:  # noqa: B008
    return ItemService(session)


@router.get("", response_model=List[ItemOut])
def list_items(
    lang: Optional[str] = None,
    service: ItemService = Depends(get_item_service),  # noqa: B008
    response: Response = None,
) -> List[ItemOut]:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    items = service.get_all_items()
    logger.info("Items listed", extra={"count": len(items)})
    return [ItemOut.from_entity(i, locale) for i in items]


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(
    payload: ItemIn,
    lang: Optional[str] = None,
    service: ItemService = Depends(get_item_service),  # noqa: B008
    response: Response = None,
) -> ItemOut:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    item = service.add_item(payload)
    return ItemOut.from_entity(item, locale)


@router.get("/{item_id}", response_model=ItemOut)
def get_item(
    item_id: int,
    lang: Optional[str] = None,
    service: ItemService = Depends(get_item_service),  # noqa: B008
    response: Response = None,
) -> ItemOut:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    item = service.get_item_by_id(item_id)
    logger.info("Item fetched", extra={"item_id": item_id})
    return ItemOut.from_entity(item, locale)


@router.put("/{item_id}", response_model=bool)
def update_item(
    item_id: int,
    payload: ItemUpdate,
    service: ItemService = Depends(get_item_service),  # noqa: B008
) -> bool:
    return service.update_item(item_id, payload)


@router.delete("/{item_id}", response_model=bool)
def delete_item(
    item_id: int,
    service: ItemService = Depends(get_item_service),  # noqa: B008
) -> bool:
    return service.delete_item(item_id)
