"""Typed failures raised while assembling a pass bundle.

Every failure that originates in the pipeline itself derives from
``PassGeneratorError``. File-system problems are not wrapped: they surface
as the built-in ``OSError`` subclasses raised by the failing operation.
"""


class PassGeneratorError(Exception):
    """Base class for pass generation failures."""

    pass


class InvalidPassJSONError(PassGeneratorError):
    """Raised when a pass cannot be encoded into pass.json."""

    pass


class ProcessFailedError(PassGeneratorError):
    """Raised when an external tool exits with a non-zero status.

    Attributes:
        termination_status: Exit status reported by the process.
        stderr: Text the process wrote to standard error, if captured.
    """

    def __init__(self, message: str, termination_status: int, stderr: str = "") -> None:
        """Initialize the error.

        Args:
            message: Error message describing which step failed.
            termination_status: Exit status reported by the process.
            stderr: Text the process wrote to standard error.
        """
        super().__init__(message)
        self.termination_status = termination_status
        self.stderr = stderr


class CannotGenerateKeyError(ProcessFailedError):
    """Raised when the PEM private key cannot be extracted."""

    pass


class CannotGenerateCertificateError(ProcessFailedError):
    """Raised when the PEM certificate cannot be extracted."""

    pass


class CannotGenerateSignatureError(ProcessFailedError):
    """Raised when the manifest signature cannot be produced."""

    pass


class CannotZipError(ProcessFailedError):
    """Raised when the bundle directory cannot be compressed."""

    pass


class ExecutableNotFoundError(PassGeneratorError):
    """Raised when a bare executable name cannot be resolved to a path."""

    def __init__(self, program: str) -> None:
        super().__init__(f"Executable not found: {program}")
        self.program = program


class ProcessTimeoutError(PassGeneratorError):
    """Raised when an external tool runs longer than allowed.

    The child process is killed before this is raised.
    """

    def __init__(self, program: str, timeout: float) -> None:
        super().__init__(f"{program} did not finish within {timeout:g} seconds")
        self.program = program
        self.timeout = timeout
