import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from academix_api.localization import select_locale
from academix_api.routers.categories import get_sub_category_service
from academix_api.schemas import ItemOut, ItemPage, SubCategoryIn, SubCategoryOut
from academix_api.services.sub_categories import SubCategoryService

router = APIRouter(prefix="/subcategories", tags=["subcategories"])
logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@router.get("", response_model=List[SubCategoryOut])
def list_sub_categories(
    lang: Optional[str] = None,
    service: SubCategoryService = Depends(get_sub_category_service),  # noqa: B008
    response: Response = None,
) -> List[SubCategoryOut]:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    sub_categories = service.get_all_sub_categories()
    logger.info("SubCategories listed", extra={"count": len(sub_categories)})
    return [SubCategoryOut.from_entity(s, locale) for s in sub_categories]


@router.get("/{sub_category_id}", response_model=SubCategoryOut)
def get_sub_category(
    sub_category_id: int,
    lang: Optional[str] = None,
    service: SubCategoryService = Depends(get_sub_category_service),  # noqa: B008
    response: Response = None,
) -> SubCategoryOut:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    sub_category = service.get_sub_category_by_id(sub_category_id)
    logger.info("SubCategory fetched", extra={"sub_category_id": sub_category_id})
    return SubCategoryOut.from_entity(sub_category, locale)


@router.get("/{sub_category_id}/items", response_model=ItemPage)
def list_sub_category_items(
    sub_category_id: int,
    page: int = Query(0, ge=0),  # noqa: B008
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),  # noqa: B008
    lang: Optional[str] = None,
    service: SubCategoryService = Depends(get_sub_category_service),  # noqa: B008
    response: Response = None,
) -> ItemPage:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    items, total = service.get_items_by_sub_category_id(sub_category_id, page, size)
    logger.info(
        "SubCategory items listed",
        extra={"sub_category_id": sub_category_id, "page": page, "size": size, "count": len(items)},
    )
    return ItemPage(
        items=[ItemOut.from_entity(i, locale) for i in items],
        page=page,
        size=size,
        total=total,
    )


@router.put("/{sub_category_id}", response_model=bool)
def update_sub_category(
    sub_category_id: int,
    payload: SubCategoryIn,
    service: SubCategoryService = Depends(get_sub_category_service),  # noqa: B008
) -> bool:
    return service.update_sub_category(sub_category_id, payload)


@router.delete("/{sub_category_id}", response_model=bool)
def delete_sub_category(
    sub_category_id: int,
    service: SubCategoryService = Depends(get_sub_category_service),  # noqa: B008
) -> bool:
    return service.delete_sub_category(sub_category_id)
