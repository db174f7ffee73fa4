"""Pass data model serialized into pass.json and the pass.strings tables."""

from pass_generator.models.barcode import PassBarcode, PassNFC
from pass_generator.models.enums import (
    PassBarcodeFormat,
    PassDataDetectorType,
    PassEventType,
    PassTextAlignment,
    PassTransitType,
)
from pass_generator.models.fields import PassField, PassStructure, PassValue
from pass_generator.models.localizable import (
    Localizable,
    LocalizableText,
    LocalizedString,
    StringsTable,
    merge_strings,
)
from pass_generator.models.passes import Pass
from pass_generator.models.relevance import PassBeacon, PassLocation
from pass_generator.models.semantics import (
    PassCurrencyAmount,
    PassPersonNameComponents,
    PassSeat,
    PassSemantics,
    SemanticLocation,
)
from pass_generator.models.templates import BoardingPassTemplate, PassConvertible, StoreCardTemplate, as_pass

__all__ = [
    "BoardingPassTemplate",
    "Localizable",
    "LocalizableText",
    "LocalizedString",
    "Pass",
    "PassBarcode",
    "PassBarcodeFormat",
    "PassBeacon",
    "PassConvertible",
    "PassCurrencyAmount",
    "PassDataDetectorType",
    "PassEventType",
    "PassField",
    "PassLocation",
    "PassNFC",
    "PassPersonNameComponents",
    "PassSeat",
    "PassSemantics",
    "PassStructure",
    "PassTextAlignment",
    "PassTransitType",
    "PassValue",
    "SemanticLocation",
    "StoreCardTemplate",
    "StringsTable",
    "as_pass",
    "merge_strings",
]
