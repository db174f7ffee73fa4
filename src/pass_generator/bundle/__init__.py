"""Pipeline stages that assemble a pass bundle on disk."""

from pass_generator.bundle.copier import ItemsCopier
from pass_generator.bundle.localizables import LocalizablesGenerator
from pass_generator.bundle.manifest import ManifestGenerator
from pass_generator.bundle.pem import PEMGenerator
from pass_generator.bundle.serializer import decode_pass, encode_pass, read_strings_file, write_pass
from pass_generator.bundle.signature import SignatureGenerator
from pass_generator.bundle.zipper import Zipper

__all__ = [
    "ItemsCopier",
    "LocalizablesGenerator",
    "ManifestGenerator",
    "PEMGenerator",
    "SignatureGenerator",
    "Zipper",
    "decode_pass",
    "encode_pass",
    "read_strings_file",
    "write_pass",
]
