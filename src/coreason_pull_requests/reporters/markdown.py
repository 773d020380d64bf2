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
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from coreason_pull_requests.config import Config
from coreason_pull_requests.domain.scm import PullRequestInfo

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class MarkdownReporter:
    """
    Renders a pull request as a markdown list item::

         * myrepo#42 (by alice) - Add feature X
    """

    template_name = "markdown.j2"

    def __init__(self, template_dir: Optional[Union[str, Path]] = None) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
            autoescape=False,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self.template = self.env.get_template(self.template_name)

    def format(self, info: PullRequestInfo, config: Config) -> str:
        return self.template.render(
            pr=info,
            repo_name=config.repo_name or "",
            omit_author=config.omit_author,
        )
