"""pass.json encoding and decoding.

Localizable values are written as lookup keys; their translations live in
the ``pass.strings`` tables. Decoding takes those tables to turn the lookup
keys back into language mappings.
"""

import json
import re
import typing as t
from collections.abc import Mapping
from pathlib import Path

import structlog

from pass_generator.bundle.localizables import LPROJ_SUFFIX, STRINGS_ENCODING, STRINGS_FILE_NAME
from pass_generator.exceptions import InvalidPassJSONError
from pass_generator.models import Pass, StringsTable

logger = structlog.get_logger(__name__)

PASS_JSON_FILE_NAME = "pass.json"

_STRINGS_LINE = re.compile(r'^"((?:[^"\\]|\\.)*)"\s*=\s*"((?:[^"\\]|\\.)*)";$')
_UNESCAPES = {"\\": "\\", '"': '"', "n": "\n"}


def encode_pass(pass_: Pass) -> bytes:
    """Encode a pass into the pass.json document.

    Optional values that are not set are omitted.

    Raises:
        InvalidPassJSONError: If the pass cannot be represented as JSON.
    """
    try:
        document = pass_.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except Exception as e:
        logger.error("pass_json_encoding_failed", serial_number=pass_.serial_number, error=str(e))
        raise InvalidPassJSONError(f"Failed to encode pass: {e}") from e


def write_pass(pass_: Pass, directory: Path) -> Path:
    """Write pass.json into the bundle directory and return its path.

    Raises:
        InvalidPassJSONError: If the pass cannot be represented as JSON.
        OSError: If the file cannot be written.
    """
    pass_path = directory / PASS_JSON_FILE_NAME
    pass_path.write_bytes(encode_pass(pass_))
    logger.debug("pass_json_written", path=str(pass_path))
    return pass_path


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", lambda match: _UNESCAPES.get(match.group(1), match.group(1)), text)


def parse_strings(content: str) -> dict[str, str]:
    """Parse the ``"key" = "value";`` lines of a .strings file.

    Blank lines are skipped.

    Raises:
        ValueError: If a line is not a key/value entry.
    """
    entries: dict[str, str] = {}
    for number, line in enumerate(content.split("\n"), start=1):
        line = line.strip()
        if not line:
            continue
        match = _STRINGS_LINE.match(line)
        if match is None:
            raise ValueError(f"Invalid strings entry on line {number}: {line!r}")
        entries[_unescape(match.group(1))] = _unescape(match.group(2))
    return entries


def read_strings_file(path: Path) -> dict[str, str]:
    """Read one pass.strings file into a key -> text mapping."""
    return parse_strings(path.read_text(encoding=STRINGS_ENCODING))


def read_strings_tables(directory: Path) -> StringsTable:
    """Read every ``<language>.lproj/pass.strings`` table of a bundle directory."""
    tables: StringsTable = {}
    for lproj_directory in sorted(directory.glob(f"*{LPROJ_SUFFIX}")):
        strings_path = lproj_directory / STRINGS_FILE_NAME
        if strings_path.is_file():
            tables[lproj_directory.name.removesuffix(LPROJ_SUFFIX)] = read_strings_file(strings_path)
    return tables


_PASS_TEXT_KEYS = ("description", "logoText")
_STRUCTURE_KEYS = ("boardingPass", "coupon", "eventTicket", "generic", "storeCard")
_ZONE_KEYS = ("auxiliaryFields", "backFields", "headerFields", "primaryFields", "secondaryFields")
_FIELD_TEXT_KEYS = ("label", "value", "attributedValue")


def _dicts(value: t.Any) -> list[dict[str, t.Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _translate(container: dict[str, t.Any], key: str, strings: Mapping[str, Mapping[str, str]]) -> None:
    value = container.get(key)
    if not isinstance(value, str):
        return
    translations = {language: entries[value] for language, entries in strings.items() if value in entries}
    if translations:
        container[key] = translations


def _resolve(data: t.Any, strings: Mapping[str, Mapping[str, str]]) -> t.Any:
    """Replace lookup keys in localizable positions by their translations.

    Only the pass description and logo text, field labels and values, and the
    relevant text of locations and beacons are looked up.
    """
    if not isinstance(data, dict):
        return data
    for key in _PASS_TEXT_KEYS:
        _translate(data, key, strings)
    for relevance_key in ("locations", "beacons"):
        for item in _dicts(data.get(relevance_key)):
            _translate(item, "relevantText", strings)
    for style in _STRUCTURE_KEYS:
        structure = data.get(style)
        if not isinstance(structure, dict):
            continue
        for zone in _ZONE_KEYS:
            for pass_field in _dicts(structure.get(zone)):
                for key in _FIELD_TEXT_KEYS:
                    _translate(pass_field, key, strings)
    return data


def decode_pass(document: str | bytes, strings: Mapping[str, Mapping[str, str]] | None = None) -> Pass:
    """Decode a pass.json document back into a pass.

    Args:
        document: The pass.json content.
        strings: String tables keyed by language. Localizable values found as
            a key in them are replaced by their translations; barcode
            messages, user info and other plain text are left as written.

    Returns:
        The decoded pass.

    Raises:
        json.JSONDecodeError: If the document is not valid JSON.
        pydantic.ValidationError: If the document does not describe a valid pass.
    """
    data = json.loads(document)
    if strings:
        data = _resolve(data, strings)
    return Pass.model_validate(data)
