"""Detached PKCS#7 signature of manifest.json.

Apple Wallet requires a SHA-1 based PKCS#7 signature, so signing goes through
the ``openssl smime`` command instead of a Python crypto library.
"""

from pathlib import Path

from pass_generator.bundle.tool import ExternalTool
from pass_generator.exceptions import CannotGenerateSignatureError


class SignatureGenerator(ExternalTool):
    """Signs the manifest with the pass certificate and the WWDR chain."""

    async def generate_signature(
        self,
        certificate_path: Path,
        key_path: Path,
        password: str,
        wwdr_path: Path,
        manifest_path: Path,
        signature_path: Path,
    ) -> None:
        """Write a detached, DER encoded signature of the manifest.

        Args:
            certificate_path: The PEM signer certificate.
            key_path: The PEM private key.
            password: Password protecting the key.
            wwdr_path: The Apple WWDR intermediate certificate.
            manifest_path: The manifest to sign.
            signature_path: Where to write the signature.

        Raises:
            CannotGenerateSignatureError: If openssl exits with a non-zero status.
        """
        self.logger.debug(
            "signature_generating",
            certificate_path=str(certificate_path),
            wwdr_path=str(wwdr_path),
            manifest_path=str(manifest_path),
        )
        # openssl smime -sign -signer cert.pem -inkey key.pem -certfile wwdr.pem
        #   -in manifest.json -out signature -outform der -binary -passin pass:...
        await self.run(
            [
                "smime",
                "-sign",
                "-signer",
                str(certificate_path),
                "-inkey",
                str(key_path),
                "-certfile",
                str(wwdr_path),
                "-in",
                str(manifest_path),
                "-out",
                str(signature_path),
                "-outform",
                "der",
                "-binary",
                "-passin",
                f"pass:{password}",
            ],
            CannotGenerateSignatureError,
            "signature_generation_failed",
        )
