"""Locations and beacons that make a pass relevant on the lock screen."""

import hashlib

from pydantic import Field, field_serializer

from pass_generator.models.base import PassModel
from pass_generator.models.localizable import LocalizableText, StringsTable, localized_entries, lookup_key


class PassLocation(PassModel):
    altitude: float | None = None
    latitude: float
    longitude: float
    # Text shown on the lock screen near this location
    relevant_text: LocalizableText | None = None

    @property
    def localization_key(self) -> str:
        """Lookup key derived from the coordinates, stable across runs."""
        coordinates = f"{self.latitude!r},{self.longitude!r},{self.altitude!r}"
        return f"pass.location.{hashlib.sha1(coordinates.encode()).hexdigest()[:16]}"

    @field_serializer("relevant_text", when_used="json")
    def serialize_relevant_text(self, relevant_text: LocalizableText | None) -> str | None:
        return lookup_key(self.localization_key, relevant_text)

    @property
    def strings(self) -> StringsTable:
        return localized_entries(self.localization_key, self.relevant_text)


class PassBeacon(PassModel):
    major: int | None = Field(None, ge=0, le=65535)
    minor: int | None = Field(None, ge=0, le=65535)
    proximity_uuid: str = Field(..., alias="proximityUUID")
    relevant_text: LocalizableText | None = None

    @property
    def localization_key(self) -> str:
        return f"pass.beacon.{self.proximity_uuid}"

    @field_serializer("relevant_text", when_used="json")
    def serialize_relevant_text(self, relevant_text: LocalizableText | None) -> str | None:
        return lookup_key(self.localization_key, relevant_text)

    @property
    def strings(self) -> StringsTable:
        return localized_entries(self.localization_key, self.relevant_text)
