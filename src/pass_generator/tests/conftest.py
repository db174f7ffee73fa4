"""Test fixtures for pass generation tests.

Certificates are generated on the fly with ``cryptography`` so the
end-to-end tests can drive the real ``openssl`` and ``zip`` tools without
any Apple-issued material.
"""

import io
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import pkcs12
from cryptography.x509.oid import NameOID
from PIL import Image

from pass_generator.generator import PassGeneratorConfiguration
from pass_generator.models import (
    Pass,
    PassBarcode,
    PassBarcodeFormat,
    PassField,
    PassStructure,
)

CERTIFICATE_PASSWORD = "test-password"


# --- Mock Certificate Fixtures ---


@pytest.fixture
def certificate_password() -> str:
    """Password protecting the mock PKCS#12 certificate."""
    return CERTIFICATE_PASSWORD


def _self_signed_certificate(private_key: rsa.RSAPrivateKey, name: x509.Name) -> x509.Certificate:
    now = datetime.now(UTC)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + timedelta(days=365))
        .sign(private_key, hashes.SHA256())
    )


@pytest.fixture(scope="session")
def mock_private_key() -> rsa.RSAPrivateKey:
    """Generate a mock RSA private key for testing."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def mock_certificate(mock_private_key: rsa.RSAPrivateKey) -> x509.Certificate:
    """Generate a mock Pass Type ID certificate for testing."""
    return _self_signed_certificate(
        mock_private_key,
        x509.Name(
            [
                x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Test Org"),
                x509.NameAttribute(NameOID.USER_ID, "pass.com.example.test"),
                x509.NameAttribute(NameOID.COMMON_NAME, "Pass Type ID: pass.com.example.test"),
            ]
        ),
    )


@pytest.fixture(scope="session")
def mock_wwdr_certificate() -> x509.Certificate:
    """Generate a mock Apple WWDR certificate for testing."""
    return _self_signed_certificate(
        rsa.generate_private_key(public_exponent=65537, key_size=2048),
        x509.Name(
            [
                x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Apple Inc."),
                x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "Apple Worldwide Developer Relations"),
                x509.NameAttribute(
                    NameOID.COMMON_NAME, "Apple Worldwide Developer Relations Certification Authority"
                ),
            ]
        ),
    )


@pytest.fixture
def p12_path(tmp_path: Path, mock_private_key: rsa.RSAPrivateKey, mock_certificate: x509.Certificate) -> Path:
    """Write the mock certificate and key as a password protected PKCS#12 file."""
    path = tmp_path / "certificate.p12"
    path.write_bytes(
        pkcs12.serialize_key_and_certificates(
            name=b"pass",
            key=mock_private_key,
            cert=mock_certificate,
            cas=None,
            encryption_algorithm=serialization.BestAvailableEncryption(CERTIFICATE_PASSWORD.encode()),
        )
    )
    return path


@pytest.fixture
def wwdr_path(tmp_path: Path, mock_wwdr_certificate: x509.Certificate) -> Path:
    """Write the mock WWDR certificate as PEM."""
    path = tmp_path / "wwdr.pem"
    path.write_bytes(mock_wwdr_certificate.public_bytes(serialization.Encoding.PEM))
    return path


# --- Template Fixtures ---


def _png(size: tuple[int, int], color: tuple[int, int, int]) -> bytes:
    image = Image.new("RGB", size, color)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def empty_template(tmp_path: Path) -> Path:
    """An empty template directory."""
    path = tmp_path / "template-empty"
    path.mkdir()
    return path


@pytest.fixture
def image_template(tmp_path: Path) -> Path:
    """A template directory holding the usual pass icons and logo."""
    path = tmp_path / "template"
    path.mkdir()
    (path / "icon.png").write_bytes(_png((29, 29), (23, 187, 82)))
    (path / "icon@2x.png").write_bytes(_png((58, 58), (23, 187, 82)))
    (path / "logo.png").write_bytes(_png((160, 50), (255, 255, 255)))
    return path


@pytest.fixture
def working_directory(tmp_path: Path) -> Path:
    """Parent directory for the generator's per-call working directories."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def configuration(
    p12_path: Path, wwdr_path: Path, empty_template: Path, working_directory: Path
) -> PassGeneratorConfiguration:
    """A configuration pointing at the mock certificates and an empty template."""
    return PassGeneratorConfiguration(
        certificate_path=p12_path,
        certificate_password=CERTIFICATE_PASSWORD,
        wwdr_path=wwdr_path,
        template_path=empty_template,
        working_directory=working_directory,
    )


# --- Pass Fixtures ---


@pytest.fixture
def minimal_pass() -> Pass:
    """A generic pass with plain, non-localized text."""
    return Pass(
        description="Test",
        organization_name="Test Org",
        pass_type_identifier="pass.com.example.test",
        serial_number="SN-0001",
        team_identifier="TEAM123456",
        generic=PassStructure(
            primary_fields=[PassField(key="name", label="Name", value="Jane Appleseed")],
        ),
    )


@pytest.fixture
def localized_pass() -> Pass:
    """An event ticket whose description and one field are translated into two languages."""
    return Pass(
        description={"en": "Concert ticket", "de": "Konzertkarte"},
        organization_name="Test Org",
        pass_type_identifier="pass.com.example.test",
        serial_number="SN-0002",
        team_identifier="TEAM123456",
        relevant_date=datetime(2025, 1, 3, 19, 0, tzinfo=UTC),
        event_ticket=PassStructure(
            primary_fields=[PassField(key="event", value="Rock Night")],
            secondary_fields=[
                PassField(key="door", label={"en": "Door", "de": "Einlass"}, value="19:00"),
            ],
        ),
        barcodes=[PassBarcode(format=PassBarcodeFormat.QR, message="SN-0002")],
    )
