from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.security import ROLE_ADMIN, ROLE_USER, require_roles
from app.db.session import get_db_session
from app.services.advertisement_service import AdvertisementService

require_reader = require_roles(ROLE_ADMIN, ROLE_USER)
require_admin = require_roles(ROLE_ADMIN)


def get_advertisement_service(
    db: Session = Depends(get_db_session),
) -> AdvertisementService:
    return AdvertisementService(db)
