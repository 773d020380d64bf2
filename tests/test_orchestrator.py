from typing import List
from unittest.mock import MagicMock

import pytest

from coreason_pull_requests.config import Config
from coreason_pull_requests.domain.scm import Commit, PullRequestInfo
from coreason_pull_requests.events import EventCollector, EventType
from coreason_pull_requests.exceptions import BatchAbortedError, CommitRangeError
from coreason_pull_requests.orchestrator import ChangelogOrchestrator

GOOD = Commit(id="m1", parent_count=2, message="Merge pull request #42 from alice/feature-x\n\nAdd feature X\n")
OLDER = Commit(id="m0", parent_count=2, message="Merge pull request #41 from bob/fix/crash\n\nFix crash\n")
BAD = Commit(id="m2", parent_count=2, message="Merge branch 'main'")
REGULAR = Commit(id="c1", parent_count=1, message="Not a merge")


def _orchestrator(commits: List[Commit], collector: EventCollector) -> ChangelogOrchestrator:
    git = MagicMock()
    git.list_commits.return_value = commits
    return ChangelogOrchestrator(git_interface=git, event_emitter=collector)


@pytest.fixture
def collector() -> EventCollector:
    return EventCollector()


def test_scenario_default(collector: EventCollector) -> None:
    orchestrator = _orchestrator([GOOD], collector)
    assert orchestrator.run("a..b", Config()) == [" * #42 (by alice) - Add feature X"]
    orchestrator.git.list_commits.assert_called_once_with("a..b")


def test_scenario_omit_author(collector: EventCollector) -> None:
    orchestrator = _orchestrator([GOOD], collector)
    assert orchestrator.run("a..b", Config(omit_author=True)) == [" * #42 - Add feature X"]


def test_scenario_repo_name(collector: EventCollector) -> None:
    orchestrator = _orchestrator([GOOD], collector)
    assert orchestrator.run("a..b", Config(repo_name="myrepo")) == [" * myrepo#42 (by alice) - Add feature X"]


def test_scenario_invalid_aborts(collector: EventCollector) -> None:
    orchestrator = _orchestrator([BAD], collector)
    with pytest.raises(BatchAbortedError):
        orchestrator.run("a..b", Config())
    assert collector.get_events()[-1].type == EventType.BATCH_ABORTED


def test_scenario_invalid_skipped(collector: EventCollector) -> None:
    orchestrator = _orchestrator([BAD], collector)
    assert orchestrator.run("a..b", Config(), allow_skip=True) == []
    assert collector.get_events()[-1].type == EventType.COMMITS_SKIPPED


def test_non_merge_commits_are_silently_ignored(collector: EventCollector) -> None:
    orchestrator = _orchestrator([REGULAR, GOOD, REGULAR, OLDER], collector)
    prs = orchestrator.collect("a..b")
    assert [pr.id for pr in prs] == [42, 41]
    assert prs[1] == PullRequestInfo(id=41, author="bob", branch="fix/crash", name="Fix crash")
    assert collector.get_events() == []


def test_skip_keeps_order(collector: EventCollector) -> None:
    orchestrator = _orchestrator([GOOD, BAD, OLDER], collector)
    lines = orchestrator.run("a..b", Config(omit_author=True), allow_skip=True)
    assert lines == [" * #42 - Add feature X", " * #41 - Fix crash"]


def test_run_is_idempotent(collector: EventCollector) -> None:
    orchestrator = _orchestrator([GOOD, REGULAR, OLDER], collector)
    config = Config(repo_name="r")
    assert orchestrator.run("a..b", config) == orchestrator.run("a..b", config)


def test_setup_error_propagates(collector: EventCollector) -> None:
    git = MagicMock()
    git.list_commits.side_effect = CommitRangeError("error pushing range x: bad")
    orchestrator = ChangelogOrchestrator(git_interface=git, event_emitter=collector)
    with pytest.raises(CommitRangeError):
        orchestrator.run("x", Config())
    assert collector.get_events() == []
