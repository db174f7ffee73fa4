"""Apple Wallet pass generator.

This module assembles signed .pkpass archives. A .pkpass file is a ZIP
archive containing:
- pass.json: The pass definition
- manifest.json: SHA-1 hashes of all files
- signature: PKCS#7 detached signature of the manifest
- <language>.lproj/pass.strings: Translations of localizable values
- Template assets: icon, logo, thumbnail, etc.

Every call works in its own temporary directory, which is removed once the
archive has been read back, whether generation succeeded, failed or was
cancelled.
"""

import asyncio
import shutil
import tempfile
import typing as t
from dataclasses import dataclass
from pathlib import Path

import structlog
from asgiref.sync import async_to_sync, sync_to_async

from pass_generator import settings
from pass_generator.bundle import (
    ItemsCopier,
    LocalizablesGenerator,
    ManifestGenerator,
    PEMGenerator,
    SignatureGenerator,
    Zipper,
    write_pass,
)
from pass_generator.bundle.manifest import MANIFEST_FILE_NAME
from pass_generator.models import Pass, PassConvertible, as_pass
from pass_generator.protocols import (
    ItemsCopierProtocol,
    LocalizablesGeneratorProtocol,
    ManifestGeneratorProtocol,
    PEMGeneratorProtocol,
    SignatureGeneratorProtocol,
    ZipperProtocol,
)

logger = structlog.get_logger(__name__)

CONTENT_TYPE = "application/vnd.apple.pkpass"
FILE_EXTENSION = "pkpass"

WORKING_DIRECTORY_PREFIX = "pass-"


@dataclass(frozen=True)
class PassGeneratorConfiguration:
    """Inputs shared by every pass a generator produces."""

    certificate_path: Path  # PKCS#12 Pass Type ID certificate
    certificate_password: str
    wwdr_path: Path  # Apple WWDR intermediate certificate
    template_path: Path  # Directory with icon.png, logo.png, ...
    working_directory: Path | None = None  # System temp dir when None
    openssl_path: str = "openssl"
    zip_path: str = "zip"
    openssl_legacy: bool = False
    process_timeout: float | None = None

    @classmethod
    def from_settings(cls, **overrides: t.Any) -> "PassGeneratorConfiguration":
        """Build a configuration from the ``PASS_*`` settings.

        Args:
            **overrides: Field values taking precedence over the settings.

        Returns:
            The configuration.
        """
        values: dict[str, t.Any] = {
            "certificate_path": Path(settings.PASS_CERTIFICATE_PATH),
            "certificate_password": settings.PASS_CERTIFICATE_PASSWORD,
            "wwdr_path": Path(settings.PASS_WWDR_CERTIFICATE_PATH),
            "template_path": Path(settings.PASS_TEMPLATE_PATH),
            "working_directory": Path(settings.PASS_WORKING_DIRECTORY) if settings.PASS_WORKING_DIRECTORY else None,
            "openssl_path": settings.PASS_OPENSSL_PATH,
            "zip_path": settings.PASS_ZIP_PATH,
            "openssl_legacy": settings.PASS_OPENSSL_LEGACY,
            "process_timeout": settings.PASS_PROCESS_TIMEOUT or None,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class BundlePaths:
    """Layout of one generation's working directory."""

    root: Path

    @property
    def bundle(self) -> Path:
        return self.root / "pass"

    @property
    def archive(self) -> Path:
        return self.root / f"pass.{FILE_EXTENSION}"

    @property
    def key(self) -> Path:
        return self.root / "key.pem"

    @property
    def certificate(self) -> Path:
        return self.root / "cert.pem"

    @property
    def manifest(self) -> Path:
        return self.bundle / MANIFEST_FILE_NAME

    @property
    def signature(self) -> Path:
        return self.bundle / "signature"


class PassGenerator:
    """Generates signed Apple Wallet .pkpass archives."""

    CONTENT_TYPE = CONTENT_TYPE
    FILE_EXTENSION = FILE_EXTENSION

    def __init__(
        self,
        configuration: PassGeneratorConfiguration | None = None,
        *,
        localizables_generator: LocalizablesGeneratorProtocol | None = None,
        items_copier: ItemsCopierProtocol | None = None,
        manifest_generator: ManifestGeneratorProtocol | None = None,
        pem_generator: PEMGeneratorProtocol | None = None,
        signature_generator: SignatureGeneratorProtocol | None = None,
        zipper: ZipperProtocol | None = None,
        log: t.Any = None,
    ) -> None:
        """Initialize the generator.

        Args:
            configuration: Certificates, template and tools to use.
                If not provided, it is read from the ``PASS_*`` settings.
            localizables_generator: Writes the pass.strings tables.
            items_copier: Copies the template assets.
            manifest_generator: Writes manifest.json.
            pem_generator: Extracts the PEM key and certificate.
            signature_generator: Signs the manifest.
            zipper: Compresses the bundle.
            log: Logger to use instead of the module logger.

        Stages that are not provided are built from the configuration.
        """
        self.configuration = configuration or PassGeneratorConfiguration.from_settings()
        self.logger = log or logger
        config = self.configuration
        self.localizables_generator = localizables_generator or LocalizablesGenerator(log=self.logger)
        self.items_copier = items_copier or ItemsCopier(log=self.logger)
        self.manifest_generator = manifest_generator or ManifestGenerator(log=self.logger)
        self.pem_generator = pem_generator or PEMGenerator(
            config.openssl_path,
            legacy=config.openssl_legacy,
            timeout=config.process_timeout,
            log=self.logger,
        )
        self.signature_generator = signature_generator or SignatureGenerator(
            config.openssl_path,
            timeout=config.process_timeout,
            log=self.logger,
        )
        self.zipper = zipper or Zipper(config.zip_path, timeout=config.process_timeout, log=self.logger)

    def get_pass_content_type(self) -> str:
        """Get the MIME content type for Apple passes."""
        return self.CONTENT_TYPE

    def get_pass_file_extension(self) -> str:
        """Get the file extension for Apple passes."""
        return self.FILE_EXTENSION

    async def generate_pass(self, pass_: Pass | PassConvertible) -> bytes:
        """Generate a .pkpass archive for a pass.

        Args:
            pass_: The pass, or anything that can build one. Its
                ``pass_type_identifier`` and ``team_identifier`` must match
                the certificate.

        Returns:
            The .pkpass file as bytes.

        Raises:
            InvalidPassJSONError: If the pass cannot be encoded.
            ProcessFailedError: If openssl or zip exits with a non-zero status;
                the subclass names the failing step.
            ExecutableNotFoundError: If openssl or zip cannot be found.
            ProcessTimeoutError: If openssl or zip outlives the configured timeout.
            OSError: If a file-system operation fails.
        """
        pass_ = as_pass(pass_)
        config = self.configuration
        log = self.logger.bind(serial_number=pass_.serial_number)

        # No await between creating the directory and entering the cleanup block
        try:
            paths = BundlePaths(self._create_working_directory())
        except Exception as e:
            log.error("pass_generation_failed", step="working_directory", error=str(e))
            raise
        log.debug("working_directory_created", path=str(paths.root))

        step = "bundle_directory"
        try:
            await sync_to_async(paths.bundle.mkdir, thread_sensitive=False)()

            step = "localizables"
            await sync_to_async(self.localizables_generator.generate_localizables, thread_sensitive=False)(
                pass_.strings, paths.bundle
            )

            step = "template"
            await sync_to_async(self.items_copier.copy_items, thread_sensitive=False)(
                config.template_path, paths.bundle
            )

            step = "pass_json"
            await sync_to_async(write_pass, thread_sensitive=False)(pass_, paths.bundle)

            step = "manifest"
            await sync_to_async(self.manifest_generator.generate_manifest, thread_sensitive=False)(
                paths.bundle, paths.manifest
            )

            step = "pem_key"
            await self.pem_generator.generate_pem_key(config.certificate_path, config.certificate_password, paths.key)

            step = "pem_certificate"
            await self.pem_generator.generate_pem_certificate(
                config.certificate_path, config.certificate_password, paths.certificate
            )

            step = "signature"
            await self.signature_generator.generate_signature(
                paths.certificate,
                paths.key,
                config.certificate_password,
                config.wwdr_path,
                paths.manifest,
                paths.signature,
            )

            step = "zip"
            await self.zipper.zip_items(paths.bundle, paths.archive)

            step = "read_archive"
            pkpass_bytes = await sync_to_async(paths.archive.read_bytes, thread_sensitive=False)()

        except asyncio.CancelledError:
            log.warning("pass_generation_cancelled", step=step)
            raise

        except Exception as e:
            log.error("pass_generation_failed", step=step, error=str(e))
            raise

        finally:
            await asyncio.shield(sync_to_async(self._remove_working_directory, thread_sensitive=False)(paths.root))

        log.info("pass_generated", size=len(pkpass_bytes))
        return pkpass_bytes

    def generate_pass_sync(self, pass_: Pass | PassConvertible) -> bytes:
        """Generate a .pkpass archive from synchronous code.

        Must not be called from a thread that runs an event loop.
        """
        return async_to_sync(self.generate_pass)(pass_)

    def _create_working_directory(self) -> Path:
        parent = self.configuration.working_directory
        return Path(tempfile.mkdtemp(prefix=WORKING_DIRECTORY_PREFIX, dir=parent))

    def _remove_working_directory(self, path: Path) -> None:
        try:
            shutil.rmtree(path)
        except OSError as e:
            self.logger.warning("working_directory_cleanup_failed", path=str(path), error=str(e))
        else:
            self.logger.debug("working_directory_removed", path=str(path))
