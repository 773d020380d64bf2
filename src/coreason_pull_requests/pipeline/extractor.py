# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

"""
Parses pull request metadata out of merge commit messages.

The recognized header is the one GitHub writes when a pull request is merged::

    Merge pull request #42 from alice/feature-x

    Add feature X

The body (everything after the header line) becomes the pull request name.
"""

import re
from typing import List, Optional, Tuple

from coreason_pull_requests.domain.scm import (
    MAX_PULL_REQUEST_ID,
    Commit,
    ExtractionError,
    ExtractionResult,
    PullRequestInfo,
)

# Non-greedy author, greedy branch: "alice/feature/login" is author "alice", branch "feature/login".
HEADER_PATTERN = re.compile(r"Merge pull request #([0-9]+) from (.+?)/(.+)")


def _split_lines(message: str) -> List[str]:
    lines = message.split("\n")
    if lines and lines[-1] == "":
        # a terminating newline does not open a new line
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_message(message: str) -> Tuple[Optional[str], str]:
    """
    Splits a commit message into its header line and its trimmed body.

    Returns:
        (header, body); header is None for an empty message.
    """
    lines = _split_lines(message)
    if not lines:
        return None, ""
    return lines[0], "\n".join(lines[1:]).strip()


def parse_pull_request_id(digits: str) -> int:
    """
    Parses a pull request number.

    Raises:
        ValueError: If the number does not fit the pull request id range.
    """
    value = int(digits)
    if value > MAX_PULL_REQUEST_ID:
        raise ValueError(f"number too large, maximum is {MAX_PULL_REQUEST_ID}")
    return value


def extract_pull_request(commit: Commit) -> ExtractionResult:
    """
    Extracts pull request metadata from a merge commit.

    Never raises on malformed input: failures are returned as ExtractionError values.
    """
    if commit.message is None:
        return ExtractionError(commit_id=commit.id, reason="missing message")

    header, body = split_message(commit.message)
    if header is None:
        return ExtractionError(commit_id=commit.id, reason="empty message")

    match = HEADER_PATTERN.search(header)
    if match is None:
        return ExtractionError(commit_id=commit.id, reason=f"invalid merge commit header line: {header}")

    digits, author, branch = match.groups()
    try:
        pr_id = parse_pull_request_id(digits)
    except ValueError as e:
        return ExtractionError(commit_id=commit.id, reason=f"invalid pull request id {digits}: {e}")

    return PullRequestInfo(id=pr_id, author=author, branch=branch, name=body)
