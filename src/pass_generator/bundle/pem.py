"""PEM key and certificate extraction from a PKCS#12 pass certificate."""

import typing as t
from pathlib import Path

from pass_generator.bundle.tool import ExternalTool
from pass_generator.exceptions import CannotGenerateCertificateError, CannotGenerateKeyError


class PEMGenerator(ExternalTool):
    """Converts the PKCS#12 certificate into the PEM files ``openssl smime`` expects."""

    def __init__(
        self,
        openssl_path: str | Path | None = None,
        *,
        legacy: bool = False,
        timeout: float | None = None,
        log: t.Any = None,
    ) -> None:
        """Initialize the generator.

        Args:
            openssl_path: Absolute path or bare name of the openssl binary.
            legacy: Pass ``-legacy`` so OpenSSL 3 reads RC2/3DES encrypted bundles.
            timeout: Seconds allowed per invocation.
            log: Logger to use instead of the module logger.
        """
        super().__init__(openssl_path, timeout=timeout, log=log)
        self.legacy = legacy

    def _pkcs12_arguments(self, certificate: Path) -> list[str]:
        return ["pkcs12", *(["-legacy"] if self.legacy else []), "-in", str(certificate)]

    async def generate_pem_key(self, certificate: Path, password: str, key_path: Path) -> None:
        """Extract the private key, re-encrypted with the certificate password.

        Raises:
            CannotGenerateKeyError: If openssl exits with a non-zero status.
        """
        self.logger.debug("pem_key_generating", certificate=str(certificate), key_path=str(key_path))
        await self.run(
            [
                *self._pkcs12_arguments(certificate),
                "-nocerts",
                "-out",
                str(key_path),
                "-passin",
                f"pass:{password}",
                "-passout",
                f"pass:{password}",
            ],
            CannotGenerateKeyError,
            "pem_key_generation_failed",
        )

    async def generate_pem_certificate(self, certificate: Path, password: str, certificate_path: Path) -> None:
        """Extract the leaf certificate, without keys or CA certificates.

        Raises:
            CannotGenerateCertificateError: If openssl exits with a non-zero status.
        """
        self.logger.debug(
            "pem_certificate_generating",
            certificate=str(certificate),
            certificate_path=str(certificate_path),
        )
        await self.run(
            [
                *self._pkcs12_arguments(certificate),
                "-clcerts",
                "-nokeys",
                "-out",
                str(certificate_path),
                "-passin",
                f"pass:{password}",
            ],
            CannotGenerateCertificateError,
            "pem_certificate_generation_failed",
        )
