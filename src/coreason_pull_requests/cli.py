# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

import sys
from typing import Optional

import typer

from coreason_pull_requests import __version__
from coreason_pull_requests.ci.git import GitInterface
from coreason_pull_requests.config import Config, OutputFormat, get_settings
from coreason_pull_requests.exceptions import BatchAbortedError, SetupError
from coreason_pull_requests.orchestrator import ChangelogOrchestrator
from coreason_pull_requests.utils.logger import configure_logging, logger

app = typer.Typer(
    name="git-pull-requests",
    help="Print the pull requests merged in a commit range as a changelog list.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-pull-requests {__version__}")
        raise typer.Exit()


@app.command()
def run(
    commit_range: str = typer.Argument(..., metavar="<commit-range>", help="Commit range, e.g. v1.0..v1.1."),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help="Skip invalid merge commits."),
    repo_name: Optional[str] = typer.Option(
        None, "--repo-name", metavar="<repo>", help="Set repository name to be used in output."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.MARKDOWN, "--format", metavar="<format>", help="Set output format."
    ),
    omit_author: bool = typer.Option(False, "--omit-author", help="Do not print commit author names."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show application version."
    ),
) -> None:
    """
    Prints one line per pull request merged in <commit-range>, most recent first.
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    config = Config(output_format=output_format, repo_name=repo_name, omit_author=omit_author)

    try:
        git = GitInterface(timeout=settings.git_timeout)
        git.discover_repository()
        orchestrator = ChangelogOrchestrator(git_interface=git)
        lines = orchestrator.run(commit_range, config, allow_skip=skip_invalid)
    except SetupError as e:
        logger.error(str(e))
        sys.exit(1)
    except BatchAbortedError:
        # already reported by the aggregator
        sys.exit(1)

    for line in lines:
        typer.echo(line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
