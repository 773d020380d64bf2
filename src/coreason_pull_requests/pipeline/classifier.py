# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

from typing import Iterable, Iterator

from coreason_pull_requests.domain.scm import Commit


def is_merge_commit(commit: Commit) -> bool:
    """A merge commit has exactly two parents."""
    return commit.parent_count == 2


def merge_commits(commits: Iterable[Commit]) -> Iterator[Commit]:
    """
    Lazily yields the merge commits of a commit stream.

    Other commits (root commits, regular commits, octopus merges) are dropped
    without any diagnostic.
    """
    return (commit for commit in commits if is_merge_commit(commit))
