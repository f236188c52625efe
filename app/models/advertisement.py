from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.db.models import Advertisement


class AdvertisementView(BaseModel):
    """Public shape of an advertisement; the identity key is never exposed."""

    model_config = ConfigDict(populate_by_name=True)

    company_name: str = Field(alias="companyName")
    slogan: str

    @classmethod
    def from_record(cls, record: Advertisement) -> AdvertisementView:
        return cls(company_name=record.company_name, slogan=record.slogan)

    def to_record(self) -> Advertisement:
        # id is assigned by the database on flush.
        return Advertisement(company_name=self.company_name, slogan=self.slogan)


class AdvertisementUpdate(BaseModel):
    """Full-update payload: every field, addressed by id."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    company_name: str = Field(alias="companyName")
    slogan: str
