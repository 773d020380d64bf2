# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests


class PullRequestsError(Exception):
    """Base exception for git-pull-requests."""

    pass


class SetupError(PullRequestsError):
    """Base exception for failures that happen before any commit is processed."""

    pass


class WorkingDirectoryError(SetupError):
    """Exception raised when the current working directory cannot be resolved."""

    pass


class RepositoryError(SetupError):
    """Exception raised when no git repository can be opened."""

    pass


class CommitRangeError(SetupError):
    """Exception raised when the commit range cannot be resolved by git."""

    pass


class BatchAbortedError(PullRequestsError):
    """Exception raised when some merge commits could not be parsed and skipping is not allowed."""

    def __init__(self, message: str, failed_count: int) -> None:
        super().__init__(message)
        self.failed_count = failed_count
