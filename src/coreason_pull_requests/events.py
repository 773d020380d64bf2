# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Protocol

from coreason_pull_requests.utils.logger import logger


class EventType(Enum):
    EXTRACTION_FAILED = "extraction_failed"
    COMMITS_SKIPPED = "commits_skipped"
    BATCH_ABORTED = "batch_aborted"


@dataclass
class PipelineEvent:
    type: EventType
    message: str
    timestamp: float = field(default_factory=time.time)
    payload: Dict[str, Any] = field(default_factory=dict)


class EventEmitter(Protocol):
    def emit(self, event: PipelineEvent) -> None:
        """Emits a pipeline event."""
        ...  # pragma: no cover


class LoguruEmitter:
    """Adapter that logs events to Loguru."""

    LEVELS: Dict[EventType, str] = {
        EventType.EXTRACTION_FAILED: "WARNING",
        EventType.COMMITS_SKIPPED: "WARNING",
        EventType.BATCH_ABORTED: "ERROR",
    }

    def emit(self, event: PipelineEvent) -> None:
        logger.log(self.LEVELS.get(event.type, "INFO"), event.message)


class EventCollector:
    """Collects events in memory."""

    def __init__(self) -> None:
        self.events: List[PipelineEvent] = []

    def emit(self, event: PipelineEvent) -> None:
        self.events.append(event)

    def get_events(self) -> List[PipelineEvent]:
        return self.events

