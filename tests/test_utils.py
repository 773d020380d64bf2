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
from pathlib import Path
from unittest.mock import patch

from coreason_pull_requests.utils.logger import LOG_FORMAT, _ensure_log_directory, configure_logging, logger


def test_logger_exports() -> None:
    """Test that logger is exported."""
    assert logger is not None


def test_ensure_log_directory(tmp_path: Path) -> None:
    """Test _ensure_log_directory creates missing parents."""
    log_file = tmp_path / "nested" / "logs" / "run.log"
    _ensure_log_directory(log_file)
    assert log_file.parent.is_dir()


def test_ensure_log_directory_existing() -> None:
    with patch("pathlib.Path.exists", return_value=True):
        with patch("pathlib.Path.mkdir") as mock_mkdir:
            _ensure_log_directory(Path("logs/run.log"))
            mock_mkdir.assert_not_called()


def test_configure_logging_stderr_only() -> None:
    with patch("coreason_pull_requests.utils.logger.logger") as mock_logger:
        configure_logging("ERROR")

    mock_logger.remove.assert_called_once_with()
    mock_logger.add.assert_called_once_with(sys.stderr, level="ERROR", format=LOG_FORMAT, colorize=False)


def test_configure_logging_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    with patch("coreason_pull_requests.utils.logger.logger") as mock_logger:
        configure_logging("INFO", log_file)

    assert mock_logger.add.call_count == 2
    file_call = mock_logger.add.call_args_list[1]
    assert file_call.args[0] == str(log_file)
    assert file_call.kwargs["level"] == "DEBUG"
    assert log_file.parent.is_dir()


def test_file_sink_receives_messages(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    try:
        configure_logging("CRITICAL", log_file)
        logger.warning("written to file")
        logger.remove()
        assert "written to file" in log_file.read_text()
    finally:
        configure_logging()
