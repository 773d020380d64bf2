# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

from typing import Iterable, List, Optional

from coreason_pull_requests.domain.scm import ExtractionError, ExtractionResult, PullRequestInfo
from coreason_pull_requests.events import EventEmitter, EventType, LoguruEmitter, PipelineEvent
from coreason_pull_requests.exceptions import BatchAbortedError

SKIP_MESSAGE = "Some commits couldn't be parsed, skipping them"
ABORT_MESSAGE = "Some commits couldn't be parsed, aborting"


def collect_pull_requests(
    results: Iterable[ExtractionResult],
    allow_skip: bool,
    event_emitter: Optional[EventEmitter] = None,
) -> List[PullRequestInfo]:
    """
    Materializes extraction results into the list of pull requests to print.

    Every result is consumed before deciding anything: one failed commit either
    aborts the whole batch or, when skipping is allowed, is dropped.

    Args:
        results: Extraction results in commit source order (most recent first).
        allow_skip: Drop failed commits instead of aborting.
        event_emitter: Receiver of the diagnostics, logs through loguru by default.

    Returns:
        The successfully extracted pull requests, in input order.

    Raises:
        BatchAbortedError: If any extraction failed and skipping is not allowed.
    """
    emitter = event_emitter or LoguruEmitter()

    pull_requests: List[PullRequestInfo] = []
    failed_count = 0
    for result in results:
        if isinstance(result, ExtractionError):
            failed_count += 1
            emitter.emit(
                PipelineEvent(
                    type=EventType.EXTRACTION_FAILED,
                    message=f"Error parsing commit: {result}",
                    payload={"commit_id": result.commit_id, "reason": result.reason},
                )
            )
        else:
            pull_requests.append(result)

    if failed_count:
        payload = {"failed": failed_count, "parsed": len(pull_requests)}
        if allow_skip:
            emitter.emit(PipelineEvent(type=EventType.COMMITS_SKIPPED, message=SKIP_MESSAGE, payload=payload))
        else:
            emitter.emit(PipelineEvent(type=EventType.BATCH_ABORTED, message=ABORT_MESSAGE, payload=payload))
            raise BatchAbortedError(ABORT_MESSAGE, failed_count)

    return pull_requests
