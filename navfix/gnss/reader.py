"""RMCReader: gpsd raw-NMEA client yielding decoded RMC fixes.

Connects to a local gpsd instance over TCP (localhost:2947) instead of
opening the serial port directly. This allows the reader to coexist with
gpsd, which may also be feeding Chrony for time synchronization.

Reading strategy:
    gpsd is asked for raw NMEA (``"nmea":true``) and passes the receiver's
    sentences through one per line. gpsd's own JSON reports (VERSION,
    DEVICES, WATCH) are interleaved with them and are skipped, as are all
    sentence types other than RMC. A sentence that fails framing or decoding
    is logged and skipped; one corrupted line never ends the stream.
"""

import contextlib
import logging
import socket
from collections.abc import Iterable, Iterator
from types import TracebackType
from typing import IO, Any

from navfix.nmea.errors import NmeaError
from navfix.nmea.rmc import parse_rmc
from navfix.nmea.sentence import SentenceType, parse_nmea_sentence
from navfix.nmea.types import RmcData

__all__ = ["RMCReader", "decode_rmc_line", "iter_rmc"]

logger = logging.getLogger(__name__)

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # socket read timeout; determines maximum cancel() latency

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'


# --- helpers ------------------------------------------------------------------


def decode_rmc_line(line: str) -> RmcData | None:
    """Decode one line if it is an RMC sentence, otherwise return ``None``.

    Blank lines, non-NMEA lines and other sentence types are ignored
    silently. Lines that look like NMEA but fail framing, checksum or RMC
    decoding are logged at WARNING and ignored.
    """
    line = line.strip()
    if not line.startswith("$"):
        return None
    try:
        sentence = parse_nmea_sentence(line)
        if sentence.message_id != SentenceType.RMC:
            return None
        return parse_rmc(sentence)
    except NmeaError as e:
        logger.warning("Skipping sentence: %s", e)
        return None


def iter_rmc(lines: Iterable[str]) -> Iterator[RmcData]:
    """Yield a decoded record for every valid RMC sentence in ``lines``.

    Works with any iterable of text lines, e.g. an open log file::

        with open("drive.nmea") as f:
            for fix in iter_rmc(f):
                process(fix)
    """
    for line in lines:
        data = decode_rmc_line(line)
        if data is not None:
            yield data


# --- public API ---------------------------------------------------------------


class RMCReader:
    """Context manager for reading RMC fixes from a gpsd raw-NMEA stream.

    Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with RMCReader() as reader:
            for fix in reader:
                process(fix)

    Single read (useful for one-shot or polling scenarios)::

        with RMCReader() as reader:
            fix = reader.read()

    ``fix.valid`` is ``False`` when the receiver flags the fix invalid;
    such records are still emitted so consumers can show receiver state.

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled: bool = False

    def __enter__(self) -> "RMCReader":
        """Open the gpsd connection and request raw NMEA."""
        self._sock = socket.create_connection((self._host, self._port))
        try:
            self._sock.settimeout(_TIMEOUT)
            self._sock.sendall(_WATCH_CMD)
        except OSError:
            self._sock.close()
            self._sock = None
            raise
        self._stream = self._sock.makefile("rb")
        self._cancelled = False
        logger.info("Connected to gpsd at %s:%d", self._host, self._port)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the gpsd connection."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and shuts down the socket so that any
        in-progress ``readline()`` unblocks immediately and raises
        ``EOFError``, allowing background threads to exit without waiting
        for the next timeout cycle.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _recv_raw(self, stream: IO[Any]) -> bytes | None:
        """Read one raw line from gpsd; returns ``None`` on timeout retry.

        Raises:
            EOFError: If the stream ended or the connection was closed.
        """
        try:
            raw: bytes = stream.readline()
            if not raw:
                raise EOFError("gpsd stream ended.")
            return raw
        except TimeoutError:
            return None
        except OSError as e:
            raise EOFError("gpsd connection closed.") from e

    def _read_line(self) -> str | None:
        """Read and decode one text line; returns ``None`` on timeout retry.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the stream ended or was closed.
        """
        if self._stream is None:
            raise RuntimeError("RMCReader must be used as a context manager.")
        if self._cancelled:
            raise EOFError("gpsd read cancelled.")
        raw = self._recv_raw(self._stream)
        if raw is None and self._cancelled:
            raise EOFError("gpsd read cancelled.")
        if raw is None:
            return None
        return raw.decode("ascii", errors="ignore").strip()

    def read(self) -> RmcData:
        """Block until the next RMC sentence and return it decoded.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._sock is None:
            raise RuntimeError("RMCReader must be used as a context manager.")
        while True:
            line = self._read_line()
            if line is None:
                continue
            result = decode_rmc_line(line)
            if result is not None:
                return result

    def __iter__(self) -> Iterator[RmcData]:
        """Yield RMC fixes indefinitely, one per RMC sentence.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.
        """
        while True:
            yield self.read()
