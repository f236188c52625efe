from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models import Advertisement
from app.models.advertisement import AdvertisementUpdate, AdvertisementView
from app.services.errors import AdvertisementNotFoundError
from app.services.patch_service import apply_patch, parse_patch_document

logger = logging.getLogger(__name__)


class AdvertisementService:
    """CRUD operations on advertisements, returning public views."""

    def __init__(self, db: Session):
        self._db = db

    def _get_or_raise(
        self, advertisement_id: int, message: str = "Advertisement not found."
    ) -> Advertisement:
        ad = self._db.get(Advertisement, advertisement_id)
        if ad is None:
            logger.warning("Advertisement %s not found", advertisement_id)
            raise AdvertisementNotFoundError(advertisement_id, message)
        return ad

    def _commit(self) -> None:
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def list_advertisements(self) -> list[AdvertisementView]:
        ads = self._db.scalars(select(Advertisement).order_by(Advertisement.id)).all()
        return [AdvertisementView.from_record(ad) for ad in ads]

    def get_advertisement(self, advertisement_id: int) -> AdvertisementView:
        return AdvertisementView.from_record(self._get_or_raise(advertisement_id))

    def create_advertisement(self, view: AdvertisementView) -> list[AdvertisementView]:
        """Insert a new advertisement and return every advertisement stored."""
        ad = view.to_record()
        self._db.add(ad)
        self._commit()

        logger.info("Created advertisement %s (%s)", ad.id, ad.company_name)
        return self.list_advertisements()

    def update_advertisement(self, update: AdvertisementUpdate) -> AdvertisementView:
        ad = self._get_or_raise(update.id)

        ad.company_name = update.company_name
        ad.slogan = update.slogan
        self._commit()

        logger.info("Updated advertisement %s", ad.id)
        return AdvertisementView.from_record(ad)

    def patch_advertisement(
        self, advertisement_id: int, raw_operations: Any
    ) -> AdvertisementView:
        """Apply a JSON Patch document to one advertisement.

        The record is looked up before the document is parsed, so an unknown
        id is reported as not found even when the patch is also invalid.
        """
        ad = self._get_or_raise(advertisement_id)

        operations = parse_patch_document(raw_operations)
        apply_patch(ad, operations)
        self._commit()

        logger.info(
            "Patched advertisement %s (%d operation(s))", ad.id, len(operations)
        )
        return AdvertisementView.from_record(ad)

    def delete_advertisement(self, advertisement_id: int) -> list[AdvertisementView]:
        """Delete one advertisement and return the remaining ones."""
        ad = self._get_or_raise(advertisement_id, "Advertisement not found")

        self._db.delete(ad)
        self._commit()

        logger.info("Deleted advertisement %s", advertisement_id)
        return self.list_advertisements()
