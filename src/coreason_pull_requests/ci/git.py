# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

from pathlib import Path
from typing import List, Optional

from coreason_pull_requests.domain.scm import Commit
from coreason_pull_requests.exceptions import CommitRangeError, RepositoryError, WorkingDirectoryError
from coreason_pull_requests.utils.logger import logger
from coreason_pull_requests.utils.shell import ShellError, ShellExecutor

FIELD_SEPARATOR = "\x1f"
RECORD_SEPARATOR = "\x00"
# object id, parent ids, raw message
LOG_FORMAT = "%H%x1f%P%x1f%B"


def _decode_message(raw: str) -> Optional[str]:
    """Returns None for messages that are not valid UTF-8 (decoded with surrogateescape)."""
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return raw


def parse_log_output(output: str) -> List[Commit]:
    """
    Parses the output of ``git log -z --format=%H%x1f%P%x1f%B``.
    """
    commits: List[Commit] = []
    for record in output.split(RECORD_SEPARATOR):
        record = record.lstrip("\n")
        if not record:
            continue
        commit_id, parents, message = record.split(FIELD_SEPARATOR, 2)
        commits.append(
            Commit(
                id=commit_id,
                parent_count=len(parents.split()),
                message=_decode_message(message),
            )
        )
    return commits


class GitInterface:
    """
    Interface for reading commit history through the git CLI.
    """

    def __init__(
        self,
        shell_executor: Optional[ShellExecutor] = None,
        repo_path: Optional[Path] = None,
        timeout: float = 300,
    ) -> None:
        self.shell = shell_executor or ShellExecutor()
        self.repo_path = repo_path
        self.timeout = timeout

    def discover_repository(self, start: Optional[Path] = None) -> Path:
        """
        Finds the repository containing ``start`` (the current directory by default).

        Returns:
            The repository top level directory.

        Raises:
            WorkingDirectoryError: If the current directory cannot be resolved.
            RepositoryError: If no repository contains the directory.
        """
        if start is None:
            try:
                start = Path.cwd()
            except OSError as e:
                raise WorkingDirectoryError(f"cannot get current directory: {e}") from e

        try:
            result = self.shell.run(
                ["git", "rev-parse", "--show-toplevel"], timeout=self.timeout, check=True, cwd=start
            )
        except ShellError as e:
            raise RepositoryError(f"cannot open repository: {e}") from e

        self.repo_path = Path(result.stdout.strip())
        logger.debug(f"Using repository {self.repo_path}")
        return self.repo_path

    def list_commits(self, commit_range: str) -> List[Commit]:
        """
        Returns the commits of a range, most recent first.

        Args:
            commit_range: Any revision range git understands, e.g. ``v1.0..v1.1``.

        Raises:
            CommitRangeError: If git cannot resolve the range.
        """
        command = [
            "git",
            "log",
            "-z",
            "--no-show-signature",
            "--no-color",
            f"--format={LOG_FORMAT}",
            commit_range,
            "--",
        ]
        try:
            result = self.shell.run(command, timeout=self.timeout, check=True, cwd=self.repo_path)
        except ShellError as e:
            raise CommitRangeError(f"error pushing range {commit_range}: {e}") from e

        commits = parse_log_output(result.stdout)
        logger.debug(f"Range {commit_range} contains {len(commits)} commits")
        return commits
