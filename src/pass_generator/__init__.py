"""Assembly of signed Apple Wallet .pkpass bundles."""

from pass_generator.exceptions import (
    CannotGenerateCertificateError,
    CannotGenerateKeyError,
    CannotGenerateSignatureError,
    CannotZipError,
    ExecutableNotFoundError,
    InvalidPassJSONError,
    PassGeneratorError,
    ProcessFailedError,
    ProcessTimeoutError,
)
from pass_generator.generator import (
    CONTENT_TYPE,
    FILE_EXTENSION,
    PassGenerator,
    PassGeneratorConfiguration,
)

__all__ = [
    "CONTENT_TYPE",
    "FILE_EXTENSION",
    "CannotGenerateCertificateError",
    "CannotGenerateKeyError",
    "CannotGenerateSignatureError",
    "CannotZipError",
    "ExecutableNotFoundError",
    "InvalidPassJSONError",
    "PassGenerator",
    "PassGeneratorConfiguration",
    "PassGeneratorError",
    "ProcessFailedError",
    "ProcessTimeoutError",
]
