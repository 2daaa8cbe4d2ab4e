"""FastAPI web server streaming decoded RMC fixes over WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive a stream
of JSON messages, one ``type="rmc"`` message per RMC sentence the receiver
emits (typically 1 Hz). gpsd is reached at ``NAVFIX_GPSD_HOST`` /
``NAVFIX_GPSD_PORT`` (default ``localhost:2947``).
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from server.config import ServerConfig
from server.receiver import FixBroadcaster, RmcReceiver

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    broadcaster = FixBroadcaster(loop)
    application.state.broadcaster = broadcaster
    receiver = RmcReceiver(ServerConfig.from_env(), broadcaster)
    executor = ThreadPoolExecutor(max_workers=1)
    worker = loop.run_in_executor(executor, receiver.run)
    try:
        yield
    finally:
        receiver.stop()
        await worker
        executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream RMC JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the receiver thread. The connection closes with code 1001, and
    the client should reconnect, if no message arrives within
    ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    broadcaster: FixBroadcaster = websocket.app.state.broadcaster
    queue = broadcaster.subscribe(maxsize=_QUEUE_MAX_SIZE)
    try:
        await websocket.accept()
        logger.debug("WebSocket client connected")
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.unsubscribe(queue)
