"""Insert the configured languages into an empty database.

Usage: ``python -m academix_api.seed`` (or the ``academix-seed`` script).
Locales come from ``SEED_LOCALES`` (comma separated).
"""

import logging
import os
from typing import List

from sqlmodel import Session, select

from academix_api.db import engine, init_db
from academix_api.localization import normalize_locale
from academix_api.logging_config import configure_logging
from academix_models import Language

logger = logging.getLogger(__name__)

DEFAULT_SEED_LOCALES = "en,si,ta"


def is_empty(session: Session, model: type) -> bool:
    return session.exec(select(model).limit(1)).first() is None


def configured_locales() -> List[str]:
    raw = os.getenv("SEED_LOCALES", DEFAULT_SEED_LOCALES)
    locales = [normalize_locale(part) for part in raw.split(",")]
    return list(dict.fromkeys(loc for loc in locales if loc))


def seed_languages(session: Session, locales: List[str]) -> int:
    """Add ``locales`` when no language exists yet. Returns how many were added."""
    if not is_empty(session, Language):
        logger.info("Languages already present, skipping seed")
        return 0
    for locale in locales:
        session.add(Language(locale=locale))
    session.commit()
    logger.info("Languages seeded", extra={"count": len(locales), "locales": locales})
    return len(locales)


def main() -> None:
    configure_logging(service_name=os.getenv("LOG_SERVICE_NAME", "seed"))
    if engine.url.get_backend_name() == "sqlite":
        init_db()
    with Session(engine) as session:
        seed_languages(session, configured_locales())


if __name__ == "__main__":
    main()
