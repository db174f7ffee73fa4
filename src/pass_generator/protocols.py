"""Protocol definitions for the pass bundle pipeline stages.

Each stage the orchestrator drives is described by a small protocol, so the
generator can be assembled from fakes in tests without touching the file
system or spawning external processes.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pass_generator.models import StringsTable


class LocalizablesGeneratorProtocol(Protocol):
    """Writes the per-language string tables of a pass."""

    def generate_localizables(self, strings: "StringsTable", directory: Path) -> None:
        """Write one ``<language>.lproj/pass.strings`` file per language.

        Args:
            strings: Entries keyed by language, then by lookup key.
            directory: The bundle directory.
        """
        ...


class ItemsCopierProtocol(Protocol):
    """Copies template assets into the bundle."""

    def copy_items(self, template_directory: Path, bundle_directory: Path) -> None:
        """Copy the template assets into the bundle directory.

        Args:
            template_directory: Directory holding the template assets.
            bundle_directory: The bundle directory, possibly holding lproj directories.
        """
        ...


class ManifestGeneratorProtocol(Protocol):
    """Hashes every file of the bundle."""

    def generate_manifest(self, directory: Path, manifest_path: Path) -> None:
        """Write the file name -> SHA-1 mapping of ``directory`` to ``manifest_path``.

        Args:
            directory: The bundle directory.
            manifest_path: Where to write manifest.json.
        """
        ...


class PEMGeneratorProtocol(Protocol):
    """Extracts PEM material from a PKCS#12 certificate."""

    async def generate_pem_key(self, certificate: Path, password: str, key_path: Path) -> None:
        """Write the certificate's private key, encrypted with ``password``.

        Args:
            certificate: The PKCS#12 certificate.
            password: Password of the certificate.
            key_path: Where to write the PEM key.
        """
        ...

    async def generate_pem_certificate(self, certificate: Path, password: str, certificate_path: Path) -> None:
        """Write the certificate's leaf certificate.

        Args:
            certificate: The PKCS#12 certificate.
            password: Password of the certificate.
            certificate_path: Where to write the PEM certificate.
        """
        ...


class SignatureGeneratorProtocol(Protocol):
    """Signs the manifest."""

    async def generate_signature(
        self,
        certificate_path: Path,
        key_path: Path,
        password: str,
        wwdr_path: Path,
        manifest_path: Path,
        signature_path: Path,
    ) -> None:
        """Write a detached DER signature of the manifest.

        Args:
            certificate_path: The PEM signer certificate.
            key_path: The PEM private key.
            password: Password protecting the key.
            wwdr_path: The wallet-authority intermediate certificate.
            manifest_path: The manifest to sign.
            signature_path: Where to write the signature.
        """
        ...


class ZipperProtocol(Protocol):
    """Compresses the bundle into the final archive."""

    async def zip_items(self, directory: Path, zip_path: Path) -> None:
        """Archive the contents of ``directory`` into ``zip_path``.

        Args:
            directory: The bundle directory.
            zip_path: Where to write the archive.
        """
        ...
