"""Pass Generator Configuration.

Values are read from the environment (or a ``.env`` / ``settings.ini`` file)
when the module is imported. Explicit arguments passed to the generator
always take precedence.

See: https://developer.apple.com/documentation/walletpasses
"""

from decouple import config

PASS_CERTIFICATE_PATH: str = config("PASS_CERTIFICATE_PATH", default="")
PASS_CERTIFICATE_PASSWORD: str = config("PASS_CERTIFICATE_PASSWORD", default="")
PASS_WWDR_CERTIFICATE_PATH: str = config("PASS_WWDR_CERTIFICATE_PATH", default="")
PASS_TEMPLATE_PATH: str = config("PASS_TEMPLATE_PATH", default="")
# Parent of the per-call working directories; empty means the system temp dir
PASS_WORKING_DIRECTORY: str = config("PASS_WORKING_DIRECTORY", default="")

# External tools, absolute paths or bare names looked up on PATH
PASS_OPENSSL_PATH: str = config("PASS_OPENSSL_PATH", default="openssl")
PASS_ZIP_PATH: str = config("PASS_ZIP_PATH", default="zip")
# OpenSSL 3 needs -legacy to read PKCS#12 bundles exported with RC2/3DES
PASS_OPENSSL_LEGACY: bool = config("PASS_OPENSSL_LEGACY", default=False, cast=bool)
# Seconds allowed per external invocation, 0 disables the timeout
PASS_PROCESS_TIMEOUT: float = config("PASS_PROCESS_TIMEOUT", default=0.0, cast=float)

PASS_LOG_LEVEL: str = config("PASS_LOG_LEVEL", default="INFO")
PASS_LOG_JSON: bool = config("PASS_LOG_JSON", default=True, cast=bool)
