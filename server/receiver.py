"""Background receiver: reads fixes from gpsd and fans them out to clients."""

import asyncio
import logging
import threading

from navfix.gnss import RMCReader
from navfix.nmea.types import RmcData
from server.config import ServerConfig
from server.formatters import format_rmc_message

__all__ = ["FixBroadcaster", "RmcReceiver", "run_rmc_loop"]

logger = logging.getLogger(__name__)


class FixBroadcaster:
    """Per-client queues of formatted RMC messages, owned by one event loop.

    ``subscribe`` and ``unsubscribe`` run on the loop. ``publish`` may be
    called from any thread; delivery is handed to the loop, so the subscriber
    list is only ever touched there.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._subscribers: list[asyncio.Queue[str]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, maxsize: int) -> asyncio.Queue[str]:
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=maxsize)
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._subscribers.remove(queue)

    def publish(self, data: RmcData) -> None:
        """Format a fix and queue it for every subscriber."""
        self._loop.call_soon_threadsafe(self._deliver, format_rmc_message(data))

    def _deliver(self, message: str) -> None:
        for queue in self._subscribers:
            # Drop the oldest fix so a slow client always sees the latest one
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(message)


def run_rmc_loop(broadcaster: FixBroadcaster, reader: RMCReader) -> None:
    """Read RMC fixes continuously and publish them.

    The caller owns *reader* and must use it as an open context manager. The
    loop exits when ``reader.cancel()`` is called, which causes the underlying
    ``RMCReader.read()`` to raise ``EOFError``.

    Args:
        broadcaster: Destination for every decoded fix.
        reader: An open ``RMCReader`` instance managed by the caller.
    """
    try:
        for data in reader:
            broadcaster.publish(data)
    except EOFError:
        logger.info("RMC stream ended")
        return


class RmcReceiver:
    """Owns the gpsd connection for the lifetime of the server.

    ``run`` blocks and belongs on a worker thread: it connects, streams fixes
    into the broadcaster and returns when ``stop`` is called or the stream
    ends. A gpsd that cannot be reached is logged, not raised, so the web
    server keeps serving; clients then see the idle-timeout close.
    """

    def __init__(self, config: ServerConfig, broadcaster: FixBroadcaster) -> None:
        self._config = config
        self._broadcaster = broadcaster
        self._lock = threading.Lock()
        self._reader: RMCReader | None = None
        self._stopped = False

    def run(self) -> None:
        host, port = self._config.gpsd_host, self._config.gpsd_port
        try:
            with RMCReader(host=host, port=port) as reader:
                with self._lock:
                    self._reader = reader
                    # stop() may have run while we were connecting
                    if self._stopped:
                        reader.cancel()
                run_rmc_loop(self._broadcaster, reader)
        except OSError as e:
            logger.error("Cannot read fixes from gpsd at %s:%d: %s", host, port, e)
        finally:
            with self._lock:
                self._reader = None

    def stop(self) -> None:
        """Make ``run`` return; safe to call from any thread, at any time."""
        with self._lock:
            self._stopped = True
            if self._reader is not None:
                self._reader.cancel()
