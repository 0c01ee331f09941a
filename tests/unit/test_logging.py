"""Tests for setup_logging."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import pytest

from ornament import setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def added_handlers() -> Iterator[list[logging.Handler]]:
    """Collects handlers a test attached, then detaches and closes them."""
    root = logging.getLogger()
    level = root.level
    added: list[logging.Handler] = []
    yield added
    for handler in added:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def _setup_and_collect(added: list[logging.Handler], *args: object) -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging(*args)  # type: ignore[arg-type]
    added.extend(h for h in root.handlers if h not in before)


class TestSetupLogging:
    def test_console_only(self, added_handlers: list[logging.Handler]) -> None:
        """Without a file only a console handler is attached."""
        _setup_and_collect(added_handlers, "WARNING")
        assert len(added_handlers) == 1
        assert added_handlers[0].level == logging.WARNING
        assert not isinstance(added_handlers[0], RotatingFileHandler)

    def test_rotating_file(
        self, tmp_path: Path, added_handlers: list[logging.Handler]
    ) -> None:
        """A log file adds a rotating handler and creates its directory."""
        log_file = tmp_path / "logs" / "ornament.log"
        _setup_and_collect(added_handlers, "INFO", log_file)
        rotating = [h for h in added_handlers if isinstance(h, RotatingFileHandler)]
        assert len(rotating) == 1
        assert rotating[0].maxBytes == 10 * 1024 * 1024
        assert log_file.parent.is_dir()
