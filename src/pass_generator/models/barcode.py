"""Barcode and NFC payloads."""

from pydantic import Field

from pass_generator.models.base import PassModel
from pass_generator.models.enums import PassBarcodeFormat

DEFAULT_MESSAGE_ENCODING = "iso-8859-1"


class PassBarcode(PassModel):
    format: PassBarcodeFormat
    message: str
    message_encoding: str = DEFAULT_MESSAGE_ENCODING
    # Text displayed near the barcode, e.g. a human-readable version of the message
    alt_text: str | None = None


class PassNFC(PassModel):
    """Value Added Service Protocol payload, store cards only."""

    message: str = Field(..., max_length=64)
    encryption_public_key: str | None = None
    requires_authentication: bool | None = None
