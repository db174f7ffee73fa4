"""Flat templates for the most common pass shapes.

A template carries the handful of values a typical pass of that style needs
and builds the full :class:`Pass` from them, with a single barcode and one
style structure.
"""

import typing as t

from pass_generator.models.barcode import PassBarcode
from pass_generator.models.base import PassDate, PassModel
from pass_generator.models.enums import PassBarcodeFormat, PassTransitType
from pass_generator.models.fields import PassField, PassStructure
from pass_generator.models.localizable import LocalizableText
from pass_generator.models.passes import Pass
from pass_generator.models.relevance import PassLocation
from pass_generator.models.semantics import PassSemantics


@t.runtime_checkable
class PassConvertible(t.Protocol):
    """Anything that can build a :class:`Pass`."""

    def to_pass(self) -> Pass: ...


class _PassTemplate(PassModel):
    description: LocalizableText
    organization_name: str
    pass_type_identifier: str
    serial_number: str
    team_identifier: str
    background_color: str | None = None
    foreground_color: str | None = None
    label_color: str | None = None
    locations: list[PassLocation] | None = None
    barcode_format: PassBarcodeFormat
    barcode_message: str
    barcode_alt_text: str | None = None
    auxiliary_fields: list[PassField] | None = None
    back_fields: list[PassField] | None = None
    header_fields: list[PassField] | None = None
    primary_fields: list[PassField] | None = None
    secondary_fields: list[PassField] | None = None
    semantics: PassSemantics | None = None

    def _barcode(self) -> PassBarcode:
        return PassBarcode(
            format=self.barcode_format,
            message=self.barcode_message,
            alt_text=self.barcode_alt_text,
        )

    def _structure(self, transit_type: PassTransitType | None = None) -> PassStructure:
        return PassStructure(
            auxiliary_fields=self.auxiliary_fields,
            back_fields=self.back_fields,
            header_fields=self.header_fields,
            primary_fields=self.primary_fields,
            secondary_fields=self.secondary_fields,
            transit_type=transit_type,
        )

    def _common(self) -> dict[str, t.Any]:
        return {
            "description": self.description,
            "organization_name": self.organization_name,
            "pass_type_identifier": self.pass_type_identifier,
            "serial_number": self.serial_number,
            "team_identifier": self.team_identifier,
            "locations": self.locations,
            "barcodes": [self._barcode()],
            "background_color": self.background_color,
            "foreground_color": self.foreground_color,
            "label_color": self.label_color,
            "semantics": self.semantics,
        }


class BoardingPassTemplate(_PassTemplate):
    """A boarding pass for any transit type, updatable through a web service."""

    transit_type: PassTransitType
    relevant_date: PassDate | None = None
    authentication_token: str | None = None
    web_service_url: str | None = None

    def to_pass(self) -> Pass:
        return Pass(
            **self._common(),
            relevant_date=self.relevant_date,
            boarding_pass=self._structure(self.transit_type),
            authentication_token=self.authentication_token,
            web_service_url=self.web_service_url,
        )


class StoreCardTemplate(_PassTemplate):
    """A loyalty or gift card."""

    strip_color: str | None = None

    def to_pass(self) -> Pass:
        return Pass(
            **self._common(),
            store_card=self._structure(),
            strip_color=self.strip_color,
        )


def as_pass(value: Pass | PassConvertible) -> Pass:
    """Return ``value`` itself when it already is a pass, else build one."""
    if isinstance(value, Pass):
        return value
    return value.to_pass()
