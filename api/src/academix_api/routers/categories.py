import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from academix_api.db import get_session
from academix_api.localization import select_locale
from academix_api.schemas import CategoryIn, CategoryOut, SubCategoryIn, SubCategoryOut
from academix_api.services.categories import CategoryService
from academix_api.services.sub_categories import SubCategoryService

router = APIRouter(prefix="/categories", tags=["categories"])
logger = logging.getLogger(__name__)


def get_category_service(session: Session = Depends(get_session)) -> CategoryService:  # noqa: B008
    return CategoryService(session)


def get_sub_category_service(session: Session = Depends(get_session)) -> SubCategoryService:  # noqa: B008
    return SubCategoryService(session)


@router.get("", response_model=List[CategoryOut])
def list_categories(
    lang: Optional[str] = None,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
    response: Response = None,
) -> List[CategoryOut]:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    categories = service.get_all_categories()
    logger.info("Categories listed", extra={"count": len(categories)})
    return [CategoryOut.from_entity(c, locale) for c in categories]


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryIn,
    lang: Optional[str] = None,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
    response: Response = None,
) -> CategoryOut:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    category = service.add_category(payload)
    return CategoryOut.from_entity(category, locale)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(
    category_id: int,
    lang: Optional[str] = None,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
    response: Response = None,
) -> CategoryOut:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    category = service.get_category_by_id(category_id)
    logger.info("Category fetched", extra={"category_id": category_id})
    return CategoryOut.from_entity(category, locale)


@router.get("/{category_id}/subcategories", response_model=List[SubCategoryOut])
def list_category_sub_categories(
    category_id: int,
    lang: Optional[str] = None,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
    response: Response = None,
) -> List[SubCategoryOut]:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    sub_categories = service.get_sub_categories_by_category_id(category_id)
    logger.info("SubCategories listed", extra={"category_id": category_id, "count": len(sub_categories)})
    return [SubCategoryOut.from_entity(s, locale) for s in sub_categories]


@router.post(
    "/{category_id}/subcategories",
    response_model=SubCategoryOut,
    status_code=status.HTTP_201_CREATED,
)
def create_sub_category(
    category_id: int,
    payload: SubCategoryIn,
    lang: Optional[str] = None,
    service: SubCategoryService = Depends(get_sub_category_service),  # noqa: B008
    response: Response = None,
) -> SubCategoryOut:
    locale = select_locale(lang)
    if response is not None:
        response.headers["Content-Language"] = locale
    sub_category = service.add_sub_category(category_id, payload)
    return SubCategoryOut.from_entity(sub_category, locale)


@router.put("/{category_id}", response_model=bool)
def update_category(
    category_id: int,
    payload: CategoryIn,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
) -> bool:
    return service.update_category(category_id, payload)


@router.delete("/{category_id}", response_model=bool)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
) -> bool:
    return service.delete_category(category_id)
