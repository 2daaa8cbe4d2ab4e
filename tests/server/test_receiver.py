"""Tests for the background receiver and fix broadcaster."""

import asyncio
import logging
from unittest.mock import MagicMock

import pytest

from server.config import ServerConfig
from server.formatters import format_rmc_message
from server.receiver import FixBroadcaster, RmcReceiver
from tests.server.helpers import ControlledRMCReader, make_rmc


def test_drop_oldest_overflow() -> None:
    broadcaster = FixBroadcaster(MagicMock())
    message_queue = broadcaster.subscribe(maxsize=2)
    broadcaster._deliver("message_one")
    broadcaster._deliver("message_two")
    broadcaster._deliver("message_three")
    assert message_queue.qsize() == 2
    assert message_queue.get_nowait() == "message_two"
    assert message_queue.get_nowait() == "message_three"


def test_publish_formats_and_hands_off_to_loop() -> None:
    loop = MagicMock(spec=asyncio.AbstractEventLoop)
    broadcaster = FixBroadcaster(loop)
    broadcaster.publish(make_rmc())
    loop.call_soon_threadsafe.assert_called_once_with(
        broadcaster._deliver, format_rmc_message(make_rmc())
    )


def test_unsubscribed_queue_gets_nothing() -> None:
    broadcaster = FixBroadcaster(MagicMock())
    kept = broadcaster.subscribe(maxsize=2)
    dropped = broadcaster.subscribe(maxsize=2)
    broadcaster.unsubscribe(dropped)
    broadcaster._deliver("message")
    assert kept.qsize() == 1
    assert dropped.empty()
    assert broadcaster.subscriber_count == 1


def test_run_publishes_until_stream_ends(rmc_controller: ControlledRMCReader) -> None:
    loop = MagicMock(spec=asyncio.AbstractEventLoop)
    receiver = RmcReceiver(ServerConfig(), FixBroadcaster(loop))
    rmc_controller.message_queue.put(make_rmc())
    rmc_controller.message_queue.put(make_rmc(valid=False))
    rmc_controller.message_queue.put(None)
    receiver.run()
    assert loop.call_soon_threadsafe.call_count == 2


def test_stop_before_connect_cancels_reader(
    rmc_controller: ControlledRMCReader,
) -> None:
    receiver = RmcReceiver(ServerConfig(), FixBroadcaster(MagicMock()))
    receiver.stop()
    receiver.run()
    assert rmc_controller.cancelled is True


def test_connection_failure_is_logged(
    rmc_controller: ControlledRMCReader, caplog: pytest.LogCaptureFixture
) -> None:
    rmc_controller.reader_class.side_effect = OSError("unreachable")  # type: ignore[attr-defined]
    receiver = RmcReceiver(
        ServerConfig(gpsd_host="gnss.local", gpsd_port=2948),
        FixBroadcaster(MagicMock()),
    )
    with caplog.at_level(logging.ERROR, logger="server.receiver"):
        receiver.run()
    assert len(caplog.records) == 1
    assert "gnss.local:2948" in caplog.records[0].getMessage()
    assert "unreachable" in caplog.records[0].getMessage()
