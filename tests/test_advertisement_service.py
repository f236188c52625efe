from __future__ import annotations

import pytest

from app.db.seed import seed_advertisements
from app.models.advertisement import AdvertisementUpdate, AdvertisementView
from app.services.advertisement_service import AdvertisementService
from app.services.errors import (
    AdvertisementNotFoundError,
    PatchValidationError,
    UnsupportedPatchOperationError,
)


@pytest.fixture
def service(db_session) -> AdvertisementService:
    seed_advertisements(db_session)
    return AdvertisementService(db_session)


def _view(company_name: str, slogan: str) -> AdvertisementView:
    return AdvertisementView(company_name=company_name, slogan=slogan)


def test_list_returns_views_in_insertion_order(service):
    assert service.list_advertisements() == [
        _view("Nike", "Just do it!"),
        _view("Volvo", "For life."),
    ]


def test_list_on_empty_store(db_session):
    assert AdvertisementService(db_session).list_advertisements() == []


def test_create_returns_full_list_and_get_returns_input(service):
    views = service.create_advertisement(_view("Acme", "Beep beep."))

    assert views[-1] == _view("Acme", "Beep beep.")
    assert len(views) == 3
    assert service.get_advertisement(3) == _view("Acme", "Beep beep.")


def test_get_unknown_id_raises(service):
    with pytest.raises(AdvertisementNotFoundError) as excinfo:
        service.get_advertisement(999)

    assert excinfo.value.message == "Advertisement not found."
    assert excinfo.value.advertisement_id == 999


def test_full_update_then_get(service):
    updated = service.update_advertisement(
        AdvertisementUpdate(id=2, company_name="Saab", slogan="Move your mind.")
    )

    assert updated == _view("Saab", "Move your mind.")
    assert service.get_advertisement(2) == updated


def test_full_update_unknown_id_raises(service):
    with pytest.raises(AdvertisementNotFoundError):
        service.update_advertisement(AdvertisementUpdate(id=42, company_name="x", slogan="y"))


def test_patch_replaces_single_field(service):
    view = service.patch_advertisement(
        1, [{"op": "replace", "path": "/slogan", "value": "Win."}]
    )

    assert view == _view("Nike", "Win.")
    assert service.get_advertisement(1) == _view("Nike", "Win.")


def test_patch_unknown_id_is_reported_before_patch_errors(service):
    with pytest.raises(AdvertisementNotFoundError):
        service.patch_advertisement(999, [{"op": "remove", "path": "/id"}])


def test_patch_invalid_path_leaves_record_unchanged(service):
    with pytest.raises(PatchValidationError):
        service.patch_advertisement(
            1,
            [
                {"op": "replace", "path": "/slogan", "value": "Win."},
                {"op": "replace", "path": "/budget", "value": "100"},
            ],
        )

    assert service.get_advertisement(1) == _view("Nike", "Just do it!")


def test_patch_unsupported_verb(service):
    with pytest.raises(UnsupportedPatchOperationError):
        service.patch_advertisement(1, [{"op": "remove", "path": "/slogan"}])


def test_delete_returns_remaining_and_get_fails(service):
    remaining = service.delete_advertisement(1)

    assert remaining == [_view("Volvo", "For life.")]
    with pytest.raises(AdvertisementNotFoundError):
        service.get_advertisement(1)


def test_delete_unknown_id_message(service):
    with pytest.raises(AdvertisementNotFoundError) as excinfo:
        service.delete_advertisement(999)

    assert excinfo.value.message == "Advertisement not found"
