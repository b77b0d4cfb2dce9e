import logging
from typing import List

from sqlmodel import Session

from academix_api.errors import ResourceNotFoundError
from academix_api.localization import normalize_locale
from academix_api.repositories import LanguageRepository
from academix_models import Language

logger = logging.getLogger(__name__)


class LanguageService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.languages = LanguageRepository(session)

    def get_all_languages(self) -> List[Language]:
        return self.languages.find_all()

    def get_language_by_id(self, language_id: int) -> Language:
        language = self.languages.find_by_id(language_id)
        if language is None:
            msg = f"Error, Language by id: {language_id} doesn't exist."
            logger.error(msg, extra={"language_id": language_id})
            raise ResourceNotFoundError(msg)
        return language

    def add_language(self, locale: str) -> Language:
        # A duplicate locale fails on the unique constraint and propagates as is
        language = self.languages.save(Language(locale=normalize_locale(locale)))
        self.session.commit()
        self.session.refresh(language)
        logger.info("Language created", extra={"language_id": language.id, "locale": language.locale})
        return language

    def delete_language(self, language_id: int) -> bool:
        """Delete a language together with every translation written in it."""
        if not self.languages.exists_by_id(language_id):
            msg = f"Error, Language with id: {language_id} cannot be deleted. Language doesn't exist."
            logger.error(msg, extra={"language_id": language_id})
            raise ResourceNotFoundError(msg)
        self.languages.delete_by_id(language_id)
        self.session.commit()
        logger.info("Language deleted", extra={"language_id": language_id})
        return True
