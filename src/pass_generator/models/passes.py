"""The root pass document.

See: https://developer.apple.com/documentation/walletpasses/pass
"""

import typing as t
from collections import Counter

from pydantic import Field, field_serializer, model_validator

from pass_generator.models.barcode import PassBarcode, PassNFC
from pass_generator.models.base import PassDate, PassModel
from pass_generator.models.fields import PassStructure
from pass_generator.models.localizable import (
    LocalizableText,
    StringsTable,
    localized_entries,
    lookup_key,
    merge_strings,
)
from pass_generator.models.relevance import PassBeacon, PassLocation
from pass_generator.models.semantics import PassSemantics

DESCRIPTION_KEY = "pass.description"
LOGO_TEXT_KEY = "pass.logoText"

STYLE_KEYS = ("boarding_pass", "coupon", "event_ticket", "generic", "store_card")

MIN_AUTHENTICATION_TOKEN_LENGTH = 16


class Pass(PassModel):
    """Everything pass.json describes about a single pass.

    Populate at most one of the style structures (``boarding_pass``,
    ``coupon``, ``event_ticket``, ``generic``, ``store_card``).
    """

    # Brief description used by accessibility technologies
    description: LocalizableText
    format_version: t.Literal[1] = 1
    organization_name: str
    # Must match the signing certificate
    pass_type_identifier: str
    serial_number: str
    team_identifier: str

    # Associated app
    app_launch_url: str | None = Field(None, alias="appLaunchURL")
    associated_store_identifiers: list[int] | None = None

    # Companion app data, not displayed
    user_info: dict[str, t.Any] | None = None

    # Expiration
    expiration_date: PassDate | None = None
    voided: bool | None = None

    # Relevance
    beacons: list[PassBeacon] | None = None
    locations: list[PassLocation] | None = None
    max_distance: float | None = None
    relevant_date: PassDate | None = None

    # Style
    boarding_pass: PassStructure | None = None
    coupon: PassStructure | None = None
    event_ticket: PassStructure | None = None
    generic: PassStructure | None = None
    store_card: PassStructure | None = None

    # Visual appearance
    barcode: PassBarcode | None = None  # iOS 8 and earlier
    barcodes: list[PassBarcode] | None = None
    background_color: str | None = None  # e.g. "rgb(23, 187, 82)"
    foreground_color: str | None = None
    grouping_identifier: str | None = None
    label_color: str | None = None
    logo_text: LocalizableText | None = None
    strip_color: str | None = None

    # Web service
    authentication_token: str | None = None
    web_service_url: str | None = Field(None, alias="webServiceURL")

    nfc: PassNFC | None = None
    semantics: PassSemantics | None = None

    @model_validator(mode="after")
    def validate_single_style(self) -> t.Self:
        """At most one style structure may be set."""
        styles = [name for name in STYLE_KEYS if getattr(self, name) is not None]
        if len(styles) > 1:
            raise ValueError(f"Only one pass style may be set, got: {', '.join(styles)}.")
        return self

    @model_validator(mode="after")
    def validate_transit_type(self) -> t.Self:
        """Transit type is required for boarding passes and forbidden elsewhere."""
        if self.boarding_pass is not None and self.boarding_pass.transit_type is None:
            raise ValueError("Boarding passes require a transit type.")
        for name in STYLE_KEYS:
            structure = getattr(self, name)
            if name != "boarding_pass" and structure is not None and structure.transit_type is not None:
                raise ValueError(f"Transit type is only allowed for boarding passes, not {name}.")
        return self

    @model_validator(mode="after")
    def validate_web_service(self) -> t.Self:
        """The authentication token and web service URL come together."""
        if (self.authentication_token is None) != (self.web_service_url is None):
            raise ValueError("Authentication token and web service URL must be provided together.")
        if self.authentication_token is not None and len(self.authentication_token) < MIN_AUTHENTICATION_TOKEN_LENGTH:
            raise ValueError(
                f"Authentication token must be at least {MIN_AUTHENTICATION_TOKEN_LENGTH} characters long."
            )
        return self

    @model_validator(mode="after")
    def validate_unique_field_keys(self) -> t.Self:
        """Field keys must be unique within the whole pass."""
        keys = Counter(pass_field.key for structure in self.structures for pass_field in structure.iter_fields())
        duplicates = sorted(key for key, count in keys.items() if count > 1)
        if duplicates:
            raise ValueError(f"Field keys must be unique, duplicated: {', '.join(duplicates)}.")
        return self

    @property
    def structures(self) -> list[PassStructure]:
        """The populated style structures (at most one)."""
        return [structure for name in STYLE_KEYS if (structure := getattr(self, name)) is not None]

    @field_serializer("description", when_used="json")
    def serialize_description(self, description: LocalizableText) -> str | None:
        return lookup_key(DESCRIPTION_KEY, description)

    @field_serializer("logo_text", when_used="json")
    def serialize_logo_text(self, logo_text: LocalizableText | None) -> str | None:
        return lookup_key(LOGO_TEXT_KEY, logo_text)

    @property
    def strings(self) -> StringsTable:
        """Every translation on the pass, merged into one table."""
        return merge_strings(
            [
                localized_entries(DESCRIPTION_KEY, self.description),
                localized_entries(LOGO_TEXT_KEY, self.logo_text),
                *(beacon.strings for beacon in self.beacons or []),
                *(location.strings for location in self.locations or []),
                *(structure.strings for structure in self.structures),
            ]
        )
