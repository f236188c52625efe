import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from app.dependencies import get_advertisement_service, require_admin, require_reader
from app.models.advertisement import AdvertisementUpdate, AdvertisementView
from app.services.advertisement_service import AdvertisementService
from app.services.errors import AdvertisementError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/advertisement", tags=["advertisement"])


def _bad_request(e: AdvertisementError) -> HTTPException:
    return HTTPException(status_code=400, detail=e.message)


def _internal_error(e: Exception) -> HTTPException:
    return HTTPException(status_code=500, detail=f"Internal server error: {e}")


@router.get(
    "",
    response_model=list[AdvertisementView],
    dependencies=[Depends(require_reader)],
)
def list_advertisements(
    service: AdvertisementService = Depends(get_advertisement_service),
) -> list[AdvertisementView]:
    """Retrieve all advertisements."""
    try:
        return service.list_advertisements()
    except Exception as e:
        logger.exception("List advertisements endpoint failed")
        raise _internal_error(e)


@router.get(
    "/{advertisement_id}",
    response_model=AdvertisementView,
    dependencies=[Depends(require_reader)],
)
def get_advertisement(
    advertisement_id: int,
    service: AdvertisementService = Depends(get_advertisement_service),
) -> AdvertisementView:
    """Retrieve one advertisement; 400 when the id is unknown."""
    try:
        return service.get_advertisement(advertisement_id)
    except AdvertisementError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Get advertisement endpoint failed")
        raise _internal_error(e)


@router.post(
    "",
    response_model=list[AdvertisementView],
    dependencies=[Depends(require_admin)],
)
def create_advertisement(
    request: AdvertisementView,
    service: AdvertisementService = Depends(get_advertisement_service),
) -> list[AdvertisementView]:
    """
    Add an advertisement.
    Returns: every advertisement, including the new one
    """
    try:
        return service.create_advertisement(request)
    except Exception as e:
        logger.exception("Create advertisement endpoint failed")
        raise _internal_error(e)


@router.put(
    "",
    response_model=AdvertisementView,
    dependencies=[Depends(require_admin)],
)
def update_advertisement(
    request: AdvertisementUpdate,
    service: AdvertisementService = Depends(get_advertisement_service),
) -> AdvertisementView:
    """Replace both fields of the advertisement named by ``id`` in the body."""
    try:
        return service.update_advertisement(request)
    except AdvertisementError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Update advertisement endpoint failed")
        raise _internal_error(e)


@router.patch(
    "/{advertisement_id}",
    response_model=AdvertisementView,
    dependencies=[Depends(require_admin)],
)
def patch_advertisement(
    advertisement_id: int,
    operations: Any = Body(...),
    service: AdvertisementService = Depends(get_advertisement_service),
) -> AdvertisementView:
    """
    Apply a JSON Patch document, e.g.
    ``[{"op": "replace", "path": "/slogan", "value": "Win."}]``.

    Malformed documents and unsupported operations are rejected with 400
    before anything is written.
    """
    try:
        return service.patch_advertisement(advertisement_id, operations)
    except AdvertisementError as e:
        logger.info("Rejected patch for advertisement %s: %s", advertisement_id, e)
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Patch advertisement endpoint failed")
        raise _internal_error(e)


@router.delete(
    "/{advertisement_id}",
    response_model=list[AdvertisementView],
    dependencies=[Depends(require_admin)],
)
def delete_advertisement(
    advertisement_id: int,
    service: AdvertisementService = Depends(get_advertisement_service),
) -> list[AdvertisementView]:
    """
    Delete an advertisement.
    Returns: the advertisements that remain
    """
    try:
        return service.delete_advertisement(advertisement_id)
    except AdvertisementError as e:
        raise _bad_request(e)
    except Exception as e:
        logger.exception("Delete advertisement endpoint failed")
        raise _internal_error(e)
