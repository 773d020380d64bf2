import pytest

from coreason_pull_requests.domain.scm import Commit
from coreason_pull_requests.pipeline.classifier import is_merge_commit, merge_commits

MERGE_MESSAGE = "Merge pull request #1 from a/b"


@pytest.mark.parametrize("parent_count,expected", [(0, False), (1, False), (2, True), (3, False), (8, False)])
def test_is_merge_commit(parent_count: int, expected: bool) -> None:
    """Only commits with exactly two parents are merges, whatever the message says."""
    commit = Commit(id="c", parent_count=parent_count, message=MERGE_MESSAGE)
    assert is_merge_commit(commit) is expected


def test_merge_commits_keeps_order() -> None:
    commits = [
        Commit(id="4", parent_count=2, message=MERGE_MESSAGE),
        Commit(id="3", parent_count=1, message=MERGE_MESSAGE),
        Commit(id="2", parent_count=2, message="anything"),
        Commit(id="1", parent_count=0, message="root"),
    ]
    assert [c.id for c in merge_commits(commits)] == ["4", "2"]


def test_merge_commits_is_lazy() -> None:
    def source():
        yield Commit(id="1", parent_count=2, message=MERGE_MESSAGE)
        raise AssertionError("consumed too far")

    assert next(merge_commits(source())).id == "1"
