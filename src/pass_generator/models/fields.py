"""Pass fields and the zones that group them."""

import typing as t
from collections.abc import Iterator, Mapping

from pydantic import field_serializer, field_validator, model_validator

from pass_generator.models.base import PassModel
from pass_generator.models.enums import PassDataDetectorType, PassTextAlignment, PassTransitType
from pass_generator.models.localizable import (
    LocalizableText,
    LocalizedString,
    StringsTable,
    localized_entries,
    lookup_key,
    merge_strings,
)

# Number, plain text, or language code -> text
PassValue = int | float | str | LocalizedString

CHANGE_MESSAGE_PLACEHOLDER = "%@"


class PassField(PassModel):
    """A key/value pair displayed on the pass.

    The key must be unique within the whole pass, e.g. "departure-gate".
    """

    key: str
    value: PassValue | None = None
    label: LocalizableText | None = None
    attributed_value: PassValue | None = None
    # Alert text shown when the field changes, e.g. "Gate changed to %@."
    change_message: str | None = None
    # Back fields only; an empty list disables data detection
    data_detector_types: list[PassDataDetectorType] | None = None
    # Not allowed for primary and back fields
    text_alignment: PassTextAlignment | None = None

    @field_validator("change_message")
    @classmethod
    def validate_change_message(cls, change_message: str | None) -> str | None:
        """A change message must contain exactly one placeholder."""
        if change_message is not None and change_message.count(CHANGE_MESSAGE_PLACEHOLDER) != 1:
            raise ValueError(f"Change message must contain exactly one '{CHANGE_MESSAGE_PLACEHOLDER}' placeholder.")
        return change_message

    @property
    def label_key(self) -> str:
        return f"pass.field.{self.key}"

    @property
    def value_key(self) -> str:
        return f"pass.field.{self.key}.value"

    @property
    def attributed_value_key(self) -> str:
        return f"pass.field.{self.key}.attributedValue"

    @field_serializer("label", when_used="json")
    def serialize_label(self, label: LocalizableText | None) -> str | None:
        return lookup_key(self.label_key, label)

    @field_serializer("value", when_used="json")
    def serialize_value(self, value: PassValue | None) -> int | float | str | None:
        if isinstance(value, Mapping):
            return self.value_key
        return value

    @field_serializer("attributed_value", when_used="json")
    def serialize_attributed_value(self, value: PassValue | None) -> int | float | str | None:
        if isinstance(value, Mapping):
            return self.attributed_value_key
        return value

    @property
    def strings(self) -> StringsTable:
        return merge_strings(
            [
                localized_entries(self.label_key, self.label),
                localized_entries(self.value_key, _localized(self.value)),
                localized_entries(self.attributed_value_key, _localized(self.attributed_value)),
            ]
        )


def _localized(value: PassValue | None) -> LocalizedString | None:
    return value if isinstance(value, dict) else None


class PassStructure(PassModel):
    """Fields of one pass style, grouped by the zone they are shown in."""

    auxiliary_fields: list[PassField] | None = None
    back_fields: list[PassField] | None = None
    header_fields: list[PassField] | None = None
    primary_fields: list[PassField] | None = None
    secondary_fields: list[PassField] | None = None
    # Required for boarding passes; otherwise not allowed
    transit_type: PassTransitType | None = None

    @model_validator(mode="after")
    def validate_zone_rules(self) -> t.Self:
        """Enforce which field attributes each zone accepts."""
        for zone, fields in (("primary", self.primary_fields), ("back", self.back_fields)):
            for pass_field in fields or []:
                if pass_field.text_alignment is not None:
                    raise ValueError(f"Text alignment is not allowed for {zone} field '{pass_field.key}'.")

        front_fields = [
            *(self.auxiliary_fields or []),
            *(self.header_fields or []),
            *(self.primary_fields or []),
            *(self.secondary_fields or []),
        ]
        for pass_field in front_fields:
            if pass_field.data_detector_types is not None:
                raise ValueError(f"Data detectors are only allowed for back fields, not '{pass_field.key}'.")
        return self

    def iter_fields(self) -> Iterator[PassField]:
        """Yield every field of every zone."""
        for fields in (
            self.auxiliary_fields,
            self.back_fields,
            self.header_fields,
            self.primary_fields,
            self.secondary_fields,
        ):
            yield from fields or []

    @property
    def strings(self) -> StringsTable:
        return merge_strings(pass_field.strings for pass_field in self.iter_fields())
