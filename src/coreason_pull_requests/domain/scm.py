# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

from typing import Optional, Union

from pydantic import BaseModel, Field

# Pull request numbers are stored as unsigned 32-bit integers.
MAX_PULL_REQUEST_ID = 2**32 - 1


class Commit(BaseModel):
    """Represents a commit handed out by the commit source."""

    model_config = {"frozen": True}

    id: str = Field(..., description="Stable commit identifier (object id)")
    parent_count: int = Field(..., ge=0, description="Number of parent commits")
    message: Optional[str] = Field(None, description="Commit message, None when it is not valid UTF-8")


class PullRequestInfo(BaseModel):
    """Pull request metadata parsed from a merge commit."""

    model_config = {"frozen": True}

    id: int = Field(..., ge=0, le=MAX_PULL_REQUEST_ID, description="Pull request number")
    author: str = Field(..., min_length=1, description="Owner of the source branch")
    branch: str = Field(..., min_length=1, description="Source branch name")
    name: str = Field("", description="Pull request title, taken from the merge commit body")


class ExtractionError(BaseModel):
    """A merge commit whose message could not be parsed."""

    model_config = {"frozen": True}

    commit_id: str = Field(..., description="Identifier of the offending commit")
    reason: str = Field(..., description="Human readable reason")

    def __str__(self) -> str:
        return f"merge commit {self.commit_id}: {self.reason}"


ExtractionResult = Union[PullRequestInfo, ExtractionError]
