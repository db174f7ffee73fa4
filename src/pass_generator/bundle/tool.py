"""Shared plumbing for stages that shell out to an external tool."""

import typing as t
from pathlib import Path

import structlog

from pass_generator import process
from pass_generator.exceptions import ProcessFailedError
from pass_generator.process import OutputCollector

logger = structlog.get_logger(__name__)


class ExternalTool:
    """Runs one external program and turns a non-zero exit into a typed error."""

    default_program = "openssl"

    def __init__(self, program: str | Path | None = None, *, timeout: float | None = None, log: t.Any = None) -> None:
        """Initialize the tool.

        Args:
            program: Absolute path or bare name looked up on ``PATH``. Defaults
                to ``default_program``.
            timeout: Seconds allowed per invocation. ``None`` or ``0`` waits forever.
            log: Logger to use instead of the module logger.
        """
        self.program = program or self.default_program
        self.timeout = timeout or None
        self.logger = log or logger

    async def run(
        self,
        arguments: t.Sequence[str],
        error_class: type[ProcessFailedError],
        event: str,
        *,
        cwd: Path | None = None,
    ) -> None:
        """Run the program and fail on a non-zero exit status.

        Args:
            arguments: Arguments passed to the program.
            error_class: Error raised on a non-zero exit status.
            event: Log event name reported on failure.
            cwd: Working directory of the child process.

        Raises:
            ProcessFailedError: ``error_class`` carrying the exit status and stderr.
            ExecutableNotFoundError: If the program cannot be resolved.
            ProcessTimeoutError: If the program outlives the timeout.
        """
        collector = OutputCollector()
        status = await process.execute(
            self.program,
            arguments,
            cwd=cwd,
            output=collector,
            timeout=self.timeout,
            log=self.logger,
        )
        if status != 0:
            self.logger.error(event, program=str(self.program), termination_status=status, stderr=collector.stderr)
            raise error_class(
                f"{Path(self.program).name} exited with status {status}",
                termination_status=status,
                stderr=collector.stderr,
            )
