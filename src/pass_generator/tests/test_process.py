"""Tests for pass_generator/process.py."""

import asyncio
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pass_generator.exceptions import ExecutableNotFoundError, ProcessTimeoutError
from pass_generator.process import OutputCollector, OutputStream, ProcessOutput, execute, resolve_executable

# Writes its pid to argv[1], reports on stdout, then sleeps
SLEEPER = (
    "import os, pathlib, sys, time; "
    "pathlib.Path(sys.argv[1]).write_text(str(os.getpid())); "
    "print('ready', flush=True); "
    "time.sleep(30)"
)


def _is_running(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    return True


async def _wait_for_pid(pid_file: Path) -> int:
    for _ in range(200):
        if pid_file.exists() and (content := pid_file.read_text()):
            return int(content)
        await asyncio.sleep(0.05)
    raise AssertionError("child did not start")


class TestResolveExecutable:
    """Tests for executable lookup."""

    def test_absolute_path_is_returned_unchanged(self) -> None:
        """Absolute paths should not be looked up."""
        with patch("pass_generator.process.shutil.which") as which:
            assert resolve_executable("/opt/tools/openssl") == "/opt/tools/openssl"
        which.assert_not_called()

    def test_bare_name_is_looked_up_on_path(self) -> None:
        """Bare names should resolve through PATH."""
        with patch("pass_generator.process.shutil.which", return_value="/usr/bin/zip"):
            assert resolve_executable("zip") == "/usr/bin/zip"

    def test_unknown_name_raises_not_found(self) -> None:
        """An unresolvable name should raise ExecutableNotFoundError."""
        with pytest.raises(ExecutableNotFoundError) as exc_info:
            resolve_executable("definitely-not-a-real-tool-4f1c")

        assert exc_info.value.program == "definitely-not-a-real-tool-4f1c"
        assert "Executable not found" in str(exc_info.value)


class TestOutputCollector:
    """Tests for the collecting output handler."""

    def test_collects_streams_separately(self) -> None:
        """Chunks should be kept per stream, in order."""
        collector = OutputCollector()

        collector(ProcessOutput(OutputStream.STDOUT, b"hello "))
        collector(ProcessOutput(OutputStream.STDERR, b"oops"))
        collector(ProcessOutput(OutputStream.STDOUT, b"world"))

        assert collector.stdout == "hello world"
        assert collector.stderr == "oops"

    def test_invalid_utf8_is_replaced(self) -> None:
        """Undecodable bytes should not raise."""
        collector = OutputCollector()
        collector(ProcessOutput(OutputStream.STDERR, b"\xff"))

        assert collector.stderr == "\ufffd"


class TestExecute:
    """Tests for running external programs."""

    @pytest.mark.asyncio
    async def test_returns_exit_status(self) -> None:
        """The exit status of the child should be returned."""
        status = await execute(sys.executable, ["-c", "import sys; sys.exit(3)"])

        assert status == 3

    @pytest.mark.asyncio
    async def test_streams_output_to_handler(self) -> None:
        """Stdout and stderr should be delivered to the output handler."""
        collector = OutputCollector()

        status = await execute(
            sys.executable,
            ["-c", "import sys; sys.stdout.write('out'); sys.stderr.write('err')"],
            output=collector,
        )

        assert status == 0
        assert collector.stdout == "out"
        assert collector.stderr == "err"

    @pytest.mark.asyncio
    async def test_runs_in_working_directory(self, tmp_path: Path) -> None:
        """The cwd argument should become the child's working directory."""
        collector = OutputCollector()

        await execute(sys.executable, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path, output=collector)

        assert os.path.realpath(collector.stdout.strip()) == os.path.realpath(tmp_path)

    @pytest.mark.asyncio
    async def test_unknown_program_raises_not_found(self) -> None:
        """A bare name that cannot be resolved should fail before spawning."""
        with pytest.raises(ExecutableNotFoundError):
            await execute("definitely-not-a-real-tool-4f1c", [])

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self) -> None:
        """A process outliving the timeout should be killed and reported."""
        with pytest.raises(ProcessTimeoutError) as exc_info:
            await execute(sys.executable, ["-c", "import time; time.sleep(30)"], timeout=0.5)

        assert exc_info.value.timeout == 0.5

    @pytest.mark.asyncio
    async def test_zero_timeout_waits_forever(self) -> None:
        """A zero timeout should disable the timeout."""
        status = await execute(sys.executable, ["-c", "pass"], timeout=0)

        assert status == 0

    @pytest.mark.asyncio
    async def test_cancellation_kills_process(self, tmp_path: Path) -> None:
        """Cancelling the awaiting task should kill the child and propagate."""
        pid_file = tmp_path / "pid"
        task = asyncio.create_task(execute(sys.executable, ["-c", SLEEPER, str(pid_file)]))
        pid = await _wait_for_pid(pid_file)

        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert not _is_running(pid)

    @pytest.mark.asyncio
    async def test_failing_output_handler_kills_process(self, tmp_path: Path) -> None:
        """An exception from the output handler should kill the child and propagate."""
        pid_file = tmp_path / "pid"

        def output(chunk: ProcessOutput) -> None:
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError, match="handler failed"):
            await execute(sys.executable, ["-c", SLEEPER, str(pid_file)], output=output)

        assert not _is_running(int(pid_file.read_text()))

    @pytest.mark.asyncio
    async def test_password_arguments_are_not_logged(self) -> None:
        """Password arguments should be redacted in the start event."""
        log = MagicMock()

        await execute(sys.executable, ["-c", "pass", "pass:secret"], log=log)

        starting = log.debug.call_args_list[0]
        assert starting.args == ("process_starting",)
        assert "pass:secret" not in starting.kwargs["arguments"]
        assert "pass:[REDACTED]" in starting.kwargs["arguments"]
