"""
JSON Patch (RFC 6902) support for advertisements.

Only the two scalar text fields can be patched, and only with ``replace``
and ``test``. ``add``/``remove``/``move``/``copy`` are recognised and
rejected as unsupported; anything else in the ``op`` slot is rejected the
same way. Documents are parsed up front into :class:`PatchOperation`
values so that nothing is written unless the whole document is valid.
"""

from __future__ import annotations

import logging
from typing import Any

from app.db.models import Advertisement
from app.models.patch import PatchableField, PatchOperation, PatchVerb
from app.services.errors import (
    PatchTestFailedError,
    PatchValidationError,
    UnsupportedPatchOperationError,
)

logger = logging.getLogger(__name__)

_FIELDS_BY_NAME = {field.value.lower(): field for field in PatchableField}


def _parse_verb(index: int, raw_op: Any) -> PatchVerb:
    if not isinstance(raw_op, str) or not raw_op.strip():
        raise PatchValidationError(f"Operation {index} is missing 'op'.")

    try:
        return PatchVerb(raw_op.strip().lower())
    except ValueError:
        supported = ", ".join(verb.value for verb in PatchVerb)
        raise UnsupportedPatchOperationError(
            f"Operation '{raw_op}' is not supported; use one of: {supported}."
        ) from None


def _parse_path(index: int, raw_path: Any) -> PatchableField:
    if not isinstance(raw_path, str) or not raw_path.strip():
        raise PatchValidationError(f"Operation {index} is missing 'path'.")

    name = raw_path.strip()
    if name.startswith("/"):
        name = name[1:]

    field = _FIELDS_BY_NAME.get(name.lower())
    if field is None:
        raise PatchValidationError(
            f"The target location specified by path '{raw_path}' was not found."
        )
    return field


def parse_patch_document(raw: Any) -> list[PatchOperation]:
    """Validate a decoded JSON Patch body.

    Raises:
        PatchValidationError: malformed document, unknown path or bad value.
        UnsupportedPatchOperationError: verb other than replace/test.
    """
    if not isinstance(raw, list):
        raise PatchValidationError("Patch document must be a JSON array of operations.")

    operations: list[PatchOperation] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise PatchValidationError(f"Operation {index} must be a JSON object.")

        verb = _parse_verb(index, entry.get("op"))
        field = _parse_path(index, entry.get("path"))

        if "value" not in entry:
            raise PatchValidationError(f"Operation {index} is missing 'value'.")
        value = entry["value"]
        if not isinstance(value, str):
            raise PatchValidationError(
                f"The value for '{field.pointer}' must be a string."
            )

        operations.append(PatchOperation(op=verb, path=field, value=value))

    return operations


def apply_patch(
    record: Advertisement, operations: list[PatchOperation]
) -> Advertisement:
    """Apply ``operations`` in order to ``record`` in place.

    Changes are staged and written only after every operation succeeds, so
    a failing ``test`` leaves the record untouched. The caller commits.
    """
    staged = {field: getattr(record, field.attribute) for field in PatchableField}

    for operation in operations:
        if operation.op is PatchVerb.REPLACE:
            staged[operation.path] = operation.value
        elif operation.op is PatchVerb.TEST:
            current = staged[operation.path]
            if current != operation.value:
                raise PatchTestFailedError(
                    f"The current value '{current}' at path '{operation.path.pointer}' "
                    f"is not equal to the test value '{operation.value}'."
                )

    for field, value in staged.items():
        setattr(record, field.attribute, value)

    logger.debug("Applied %d patch operation(s) to %r", len(operations), record)
    return record
