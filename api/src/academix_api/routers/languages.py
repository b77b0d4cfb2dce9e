import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from academix_api.db import get_session
from academix_api.schemas import LanguageIn, LanguageOut
from academix_api.services.languages import LanguageService

router = APIRouter(prefix="/languages", tags=["languages"])
logger = logging.getLogger(__name__)


def get_language_service(session: Session = Depends(get_session)) -> LanguageService:  # noqa: B008
    return LanguageService(session)


@router.get("", response_model=List[LanguageOut])
def list_languages(service: LanguageService = Depends(get_language_service)) -> List[LanguageOut]:  # noqa: B008
    languages = service.get_all_languages()
    logger.info("Languages listed", extra={"count": len(languages)})
    return [LanguageOut.from_entity(lang) for lang in languages]


@router.post("", response_model=LanguageOut, status_code=status.HTTP_201_CREATED)
def create_language(
    payload: LanguageIn,
    service: LanguageService = Depends(get_language_service),  # noqa: B008
) -> LanguageOut:
    return LanguageOut.from_entity(service.add_language(payload.locale))


@router.get("/{language_id}", response_model=LanguageOut)
def get_language(
    language_id: int,
    service: LanguageService = Depends(get_language_service),  # noqa: B008
) -> LanguageOut:
    return LanguageOut.from_entity(service.get_language_by_id(language_id))


@router.delete("/{language_id}", response_model=bool)
def delete_language(
    language_id: int,
    service: LanguageService = Depends(get_language_service),  # noqa: B008
) -> bool:
    return service.delete_language(language_id)
