from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PatchVerb(str, Enum):
    REPLACE = "replace"
    TEST = "test"


class PatchableField(str, Enum):
    COMPANY_NAME = "companyName"
    SLOGAN = "slogan"

    @property
    def pointer(self) -> str:
        return f"/{self.value}"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self]


_ATTRIBUTES = {
    PatchableField.COMPANY_NAME: "company_name",
    PatchableField.SLOGAN: "slogan",
}


class PatchOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    op: PatchVerb
    path: PatchableField
    value: str
