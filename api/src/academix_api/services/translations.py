"""Merging submitted per-language names into a catalog entity.

The merge is additive: every submitted (language, name) pair ends up stored
for the entity, existing rows are renamed in place, and translations that are
not mentioned are left alone. Nothing is ever deleted here.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from sqlmodel import Session, SQLModel

from academix_api.errors import ResourceNotFoundError
from academix_api.repositories import LanguageRepository, TranslationRepository
from academix_api.schemas import TranslationIn

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    inserted: List[int] = field(default_factory=list)
    updated: List[int] = field(default_factory=list)


def ensure_languages_exist(session: Session, submitted: Sequence[TranslationIn]) -> None:
    """Raise ResourceNotFoundError if any submitted language id is unknown."""
    wanted = {t.language_id for t in submitted}
    missing = sorted(wanted - LanguageRepository(session).find_existing_ids(wanted))
    if missing:
        msg = f"Error, Language by id: {missing[0]} doesn't exist."
        logger.error(msg, extra={"language_ids": missing})
        raise ResourceNotFoundError(msg)


def merge_translations(
    session: Session,
    entity: SQLModel,
    submitted: Sequence[TranslationIn],
    translations: TranslationRepository,
) -> MergeResult:
    """Upsert ``submitted`` into ``entity.translations`` and flush.

    Entries are applied in order, so when a language appears twice the last
    name wins and only one row is written, reported once in the result. The
    caller validates the language ids first (``ensure_languages_exist``) and
    owns the commit.
    """
    result = MergeResult()
    touched: Dict[int, SQLModel] = {}
    for entry in submitted:
        current = touched.get(entry.language_id)
        if current is not None:
            current.name = entry.name
            continue
        current = translations.find_by_id((entity.id, entry.language_id))
        if current is not None:
            current.name = entry.name
            result.updated.append(entry.language_id)
        else:
            current = translations.build(entity.id, entry.language_id, entry.name)
            entity.translations.append(current)
            result.inserted.append(entry.language_id)
        touched[entry.language_id] = current

    session.add(entity)
    session.flush()
    logger.debug(
        "Translations merged",
        extra={
            "entity": type(entity).__name__,
            "entity_id": entity.id,
            "inserted": result.inserted,
            "updated": result.updated,
        },
    )
    return result
