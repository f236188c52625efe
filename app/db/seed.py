from __future__ import annotations

import logging

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from app.db.models import Advertisement

logger = logging.getLogger(__name__)

# (company_name, slogan); company_name is the natural key for reconciliation.
SEED_ADVERTISEMENTS: tuple[tuple[str, str], ...] = (
    ("Nike", "Just do it!"),
    ("Volvo", "For life."),
)


def seed_advertisements(session: Session) -> int:
    """Insert each baseline advertisement whose company name is absent.

    Safe to run on every start: rows already present (by company name) are
    left untouched, including any slogan edits made since.
    """
    inserted = 0
    try:
        for company_name, slogan in SEED_ADVERTISEMENTS:
            present = session.scalar(
                select(exists().where(Advertisement.company_name == company_name))
            )
            if present:
                continue
            session.add(Advertisement(company_name=company_name, slogan=slogan))
            inserted += 1
            logger.info("Seeding advertisement for %s", company_name)

        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Failed to seed advertisements")
        raise

    return inserted
