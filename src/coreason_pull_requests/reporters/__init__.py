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
Output formats.

Adding a format means adding an OutputFormat member and registering a
reporter class for it here. No other module knows about formats.
"""

from typing import Dict, Protocol, Type

from coreason_pull_requests.config import Config, OutputFormat
from coreason_pull_requests.domain.scm import PullRequestInfo
from coreason_pull_requests.reporters.markdown import MarkdownReporter


class Reporter(Protocol):
    """Renders one pull request as one line of text, without line terminator."""

    def format(self, info: PullRequestInfo, config: Config) -> str: ...  # pragma: no cover


REPORTERS: Dict[OutputFormat, Type[Reporter]] = {
    OutputFormat.MARKDOWN: MarkdownReporter,
}


def get_reporter(output_format: OutputFormat) -> Reporter:
    """Returns a reporter instance for the given output format."""
    try:
        reporter_cls = REPORTERS[output_format]
    except KeyError:
        raise ValueError(f"unknown format: {output_format}") from None
    return reporter_cls()


__all__ = ["MarkdownReporter", "REPORTERS", "Reporter", "get_reporter"]
