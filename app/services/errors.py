from __future__ import annotations


class AdvertisementError(Exception):
    """Base class for errors surfaced to API clients as 400 responses."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AdvertisementNotFoundError(AdvertisementError):
    def __init__(self, advertisement_id: int, message: str = "Advertisement not found."):
        super().__init__(message)
        self.advertisement_id = advertisement_id


class PatchError(AdvertisementError):
    pass


class PatchValidationError(PatchError):
    """The patch document is malformed or targets a field that cannot be patched."""


class PatchTestFailedError(PatchValidationError):
    pass


class UnsupportedPatchOperationError(PatchError):
    """The patch verb is valid JSON Patch but not supported on advertisements."""
