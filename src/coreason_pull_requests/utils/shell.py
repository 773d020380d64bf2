# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from coreason_pull_requests.utils.logger import logger


@dataclass
class CommandResult:
    """Result of a shell command execution."""

    exit_code: int
    stdout: str
    stderr: str


class ShellError(RuntimeError):
    """Raised when a shell command fails."""

    def __init__(self, message: str, result: CommandResult):
        super().__init__(message)
        self.result = result


def _decode(output: object) -> str:
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="surrogateescape")
    return str(output) if output else ""


class ShellExecutor:
    """Executes shell commands."""

    def run(
        self,
        command: List[str],
        timeout: float = 300,
        check: bool = False,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        """
        Executes a shell command.

        Output is decoded as UTF-8 with ``surrogateescape`` so that bytes which
        are not valid UTF-8 survive decoding and can be detected by callers.

        Args:
            command: The command to execute as a list of arguments.
            timeout: Timeout in seconds.
            check: If True, raise ShellError if exit code is non-zero.
            cwd: Working directory for the command, defaults to the current one.

        Returns:
            CommandResult containing exit code, stdout, and stderr.
        """
        logger.debug(f"Executing: {' '.join(command)}")

        try:
            process = subprocess.run(
                command,
                capture_output=True,
                encoding="utf-8",
                errors="surrogateescape",
                check=False,  # We handle check manually
                timeout=timeout,
                cwd=cwd,
            )
        except subprocess.TimeoutExpired as e:
            stdout = _decode(e.stdout)
            stderr = _decode(e.stderr) or f"Command timed out after {timeout}s"
            result = CommandResult(exit_code=-1, stdout=stdout, stderr=stderr)
            if check:
                raise ShellError(f"Command timed out: {' '.join(command)}", result) from e
            return result
        except OSError as e:
            # e.g. the executable or the working directory does not exist
            result = CommandResult(exit_code=-1, stdout="", stderr=str(e))
            if check:
                raise ShellError(f"Failed to execute command: {e}", result) from e
            return result

        result = CommandResult(exit_code=process.returncode, stdout=process.stdout, stderr=process.stderr)

        if check and result.exit_code != 0:
            error_msg = f"Command failed with exit code {result.exit_code}"
            if result.stderr:
                error_msg += f": {result.stderr.strip()}"
            elif result.stdout:
                error_msg += f": {result.stdout.strip()}"
            raise ShellError(error_msg, result)

        return result
