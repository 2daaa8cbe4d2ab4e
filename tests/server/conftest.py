"""Pytest fixtures for server module testing."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from tests.server.helpers import ControlledRMCReader


@pytest.fixture(autouse=True)
def rmc_controller() -> Iterator[ControlledRMCReader]:
    controller = ControlledRMCReader()
    with patch("server.receiver.RMCReader", return_value=controller) as reader_class:
        controller.reader_class = reader_class  # type: ignore[attr-defined]
        yield controller
    controller.message_queue.put(None)
