# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

from typing import List, Optional

from coreason_pull_requests.ci.git import GitInterface
from coreason_pull_requests.config import Config
from coreason_pull_requests.domain.scm import PullRequestInfo
from coreason_pull_requests.events import EventEmitter, LoguruEmitter
from coreason_pull_requests.pipeline.aggregator import collect_pull_requests
from coreason_pull_requests.pipeline.classifier import merge_commits
from coreason_pull_requests.pipeline.extractor import extract_pull_request
from coreason_pull_requests.reporters import get_reporter


class ChangelogOrchestrator:
    """
    Runs the changelog pipeline:
    commit source -> merge classifier -> extractor -> aggregator -> reporter.

    Everything up to the aggregator runs in a single pass before any line is
    rendered, so an aborted batch never produces partial output.
    """

    def __init__(
        self,
        git_interface: Optional[GitInterface] = None,
        event_emitter: Optional[EventEmitter] = None,
    ) -> None:
        self.git = git_interface or GitInterface()
        self.event_emitter = event_emitter or LoguruEmitter()

    def collect(self, commit_range: str, allow_skip: bool = False) -> List[PullRequestInfo]:
        """
        Returns the pull requests merged in ``commit_range``, most recent first.

        Raises:
            SetupError: If the range cannot be read.
            BatchAbortedError: If some merge commits are invalid and skipping is not allowed.
        """
        commits = self.git.list_commits(commit_range)
        results = (extract_pull_request(commit) for commit in merge_commits(commits))
        return collect_pull_requests(results, allow_skip, self.event_emitter)

    def render(self, pull_requests: List[PullRequestInfo], config: Config) -> List[str]:
        reporter = get_reporter(config.output_format)
        return [reporter.format(pr, config) for pr in pull_requests]

    def run(self, commit_range: str, config: Config, allow_skip: bool = False) -> List[str]:
        return self.render(self.collect(commit_range, allow_skip), config)
