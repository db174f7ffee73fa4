"""Asynchronous execution of external tools.

The pipeline shells out to ``openssl`` and ``zip``. Executions run as
``asyncio`` subprocesses: the awaiting task is suspended while the child
runs, and standard output and error are streamed to an optional observer
as chunks arrive.
"""

import asyncio
import enum
import os
import shutil
import typing as t
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from pass_generator.exceptions import ExecutableNotFoundError, ProcessTimeoutError
from pass_generator.observability import redact_arguments

logger = structlog.get_logger(__name__)

READ_CHUNK_SIZE = 4096


class OutputStream(enum.Enum):
    """Stream a chunk of process output was read from."""

    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(frozen=True)
class ProcessOutput:
    """A chunk of output produced by a running process."""

    stream: OutputStream
    data: bytes


OutputHandler = t.Callable[[ProcessOutput], None]


@dataclass
class OutputCollector:
    """Output handler that keeps everything a process wrote."""

    stdout_chunks: list[bytes] = field(default_factory=list)
    stderr_chunks: list[bytes] = field(default_factory=list)

    def __call__(self, output: ProcessOutput) -> None:
        if output.stream is OutputStream.STDOUT:
            self.stdout_chunks.append(output.data)
        else:
            self.stderr_chunks.append(output.data)

    @property
    def stdout(self) -> str:
        return b"".join(self.stdout_chunks).decode(errors="replace")

    @property
    def stderr(self) -> str:
        return b"".join(self.stderr_chunks).decode(errors="replace")


def resolve_executable(program: str | Path) -> str:
    """Resolve a program to an absolute executable path.

    Absolute paths are returned unchanged. Anything else is looked up on
    ``PATH``.

    Args:
        program: Absolute path or bare executable name.

    Returns:
        The absolute path of the executable.

    Raises:
        ExecutableNotFoundError: If the name cannot be resolved.
    """
    program = os.fspath(program)
    if os.path.isabs(program):
        return program
    resolved = shutil.which(program)
    if resolved is None:
        raise ExecutableNotFoundError(program)
    return os.path.abspath(resolved)


async def _pump(stream: asyncio.StreamReader | None, kind: OutputStream, output: OutputHandler | None) -> None:
    """Forward chunks from a pipe to the output handler until EOF."""
    if stream is None:
        return
    while chunk := await stream.read(READ_CHUNK_SIZE):
        if output is not None:
            output(ProcessOutput(stream=kind, data=chunk))


def _kill(process: asyncio.subprocess.Process) -> None:
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass


async def _reap(process: asyncio.subprocess.Process) -> None:
    """Kill the child if it is still running and wait for it to exit."""
    _kill(process)
    await asyncio.shield(process.wait())


async def execute(
    program: str | Path,
    arguments: t.Sequence[str],
    *,
    cwd: str | Path | None = None,
    output: OutputHandler | None = None,
    timeout: float | None = None,
    log: t.Any = None,
) -> int:
    """Run an external program to completion.

    Args:
        program: Absolute path or bare executable name.
        arguments: Arguments passed to the program.
        cwd: Working directory of the child process.
        output: Called with every stdout/stderr chunk as it is read.
        timeout: Seconds to wait before killing the child. ``None`` or ``0``
            waits forever.
        log: Logger to use instead of the module logger.

    Returns:
        The exit status of the process.

    Raises:
        ExecutableNotFoundError: If a bare program name cannot be resolved.
        ProcessTimeoutError: If the process outlives ``timeout``.
        OSError: If the process cannot be started.
    """
    log = log or logger
    executable = resolve_executable(program)
    log.debug(
        "process_starting",
        program=executable,
        arguments=redact_arguments(arguments),
        cwd=os.fspath(cwd) if cwd is not None else None,
    )

    process = await asyncio.create_subprocess_exec(
        executable,
        *arguments,
        cwd=cwd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )

    try:
        async with asyncio.timeout(timeout or None):
            await asyncio.gather(
                _pump(process.stdout, OutputStream.STDOUT, output),
                _pump(process.stderr, OutputStream.STDERR, output),
            )
            status = await process.wait()
    except TimeoutError as e:
        await _reap(process)
        log.error("process_timed_out", program=executable, timeout=timeout)
        raise ProcessTimeoutError(executable, t.cast(float, timeout)) from e
    except BaseException:
        # Cancellation or a failing output handler; the child must not outlive the call
        await _reap(process)
        raise

    log.debug("process_finished", program=executable, status=status)
    return status
