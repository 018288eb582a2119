"""
Length-prefixed realization server.

Each connection carries exactly one exchange: the client sends a 4-byte
big-endian byte count followed by that many bytes of UTF-8 JSON request; the
server answers the same way with the realized text, or with a message
starting "Exception: " when anything goes wrong, then closes the connection.

Connections are handled as asyncio tasks; the pipeline itself runs on a
bounded thread pool so a slow realization never stalls the accept loop.
"""

from __future__ import annotations

import asyncio
import logging
import struct
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from realiser_core.contracts import RequestProcessor, parse_request
from realiser_core.errors import ProtocolError, RealisationError
from realiser_service.settings import ServiceSettings, get_service_settings

logger = logging.getLogger(__name__)

HEADER = struct.Struct(">i")
EXCEPTION_PREFIX = "Exception: "


# =============================================================================
# Framing
# =============================================================================


def encode_frame(text: str) -> bytes:
    """Prefix the UTF-8 encoding of `text` with its length."""
    data = text.encode("utf-8")
    return HEADER.pack(len(data)) + data


async def read_frame(
    reader: asyncio.StreamReader, max_bytes: int, allow_empty: bool = False
) -> str:
    """
    Read one length-prefixed UTF-8 message.

    Requests must carry a payload; replies (`allow_empty`) may be empty.

    Raises:
        ProtocolError: on a short read, an empty or oversized payload, or
            bytes that are not UTF-8
    """
    try:
        header = await reader.readexactly(HEADER.size)
    except asyncio.IncompleteReadError as e:
        raise ProtocolError("Client did not send data.") from e
    (length,) = HEADER.unpack(header)

    if length == 0 and allow_empty:
        return ""
    if length < 1:
        raise ProtocolError("Client did not send data.")
    if length > max_bytes:
        raise ProtocolError(
            f"Request of {length} bytes exceeds limit of {max_bytes} bytes",
            details={"length": length, "limit": max_bytes},
        )

    try:
        data = await reader.readexactly(length)
    except asyncio.IncompleteReadError as e:
        raise ProtocolError(
            f"Expected {length} bytes but connection closed after {len(e.partial)}"
        ) from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProtocolError(f"Request is not valid UTF-8: {e}") from e


async def write_frame(writer: asyncio.StreamWriter, text: str) -> None:
    writer.write(encode_frame(text))
    await writer.drain()


# =============================================================================
# Server
# =============================================================================


class WireServer:
    """
    One-exchange-per-connection realization server.

    Args:
        processor: Executes requests; built from settings by default.
        settings: Bind address, limits and pool size; the global ones by default.
    """

    def __init__(
        self,
        processor: Optional[RequestProcessor] = None,
        settings: Optional[ServiceSettings] = None,
    ):
        self.settings = settings or get_service_settings()
        self.processor = processor or RequestProcessor(recording_dir=self.settings.recording_dir)
        self._server: Optional[asyncio.AbstractServer] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def port(self) -> int:
        """Bound port; differs from the configured one when that was 0."""
        if self._server is None or not self._server.sockets:
            return self.settings.port
        return self._server.sockets[0].getsockname()[1]

    @property
    def is_serving(self) -> bool:
        return self._server is not None and self._server.is_serving()

    async def start(self) -> None:
        """Bind and start accepting connections."""
        if self._server is not None:
            return
        self._executor = ThreadPoolExecutor(
            max_workers=self.settings.max_workers, thread_name_prefix="realiser"
        )
        self._server = await asyncio.start_server(
            self._handle_connection, self.settings.host, self.settings.port
        )
        logger.info("Realiser server listening on %s:%d", self.settings.host, self.port)

    async def serve_forever(self) -> None:
        """Accept connections until `stop()` is called or the task is cancelled."""
        await self.start()
        assert self._server is not None
        try:
            await self._server.serve_forever()
        except asyncio.CancelledError:
            logger.info("Realiser server stopped")
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop accepting connections and release the worker pool."""
        server, self._server = self._server, None
        if server is not None:
            server.close()
            await server.wait_closed()
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False)

    def handle_payload(self, payload: str) -> str:
        """Validate and execute one request; runs on a worker thread."""
        request = parse_request(payload)
        return self.processor.process(request).strip()

    async def _handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        peer = writer.get_extra_info("peername")
        logger.debug("Client connected from %s", peer)

        try:
            payload = await asyncio.wait_for(
                read_frame(reader, self.settings.max_request_bytes),
                timeout=self.settings.read_timeout_s,
            )
            loop = asyncio.get_running_loop()
            reply = await loop.run_in_executor(self._executor, self.handle_payload, payload)
            logger.debug("Sending realisation to %s: %r", peer, reply)
        except asyncio.TimeoutError:
            logger.warning("Timed out reading request from %s", peer)
            reply = EXCEPTION_PREFIX + "Timed out waiting for request data."
        except RealisationError as e:
            logger.warning("Request from %s failed: %s", peer, e.to_log_message())
            reply = EXCEPTION_PREFIX + e.message
        except Exception as e:
            logger.exception("Unexpected failure handling request from %s", peer)
            reply = EXCEPTION_PREFIX + str(e)

        try:
            await write_frame(writer, reply)
        except (ConnectionError, OSError) as e:
            logger.info("Could not send reply to %s: %s", peer, e)
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except (ConnectionError, OSError) as e:
                logger.debug("Error closing connection to %s: %s", peer, e)


def run_server(settings: Optional[ServiceSettings] = None) -> None:
    """Serve until interrupted."""
    server = WireServer(settings=settings)
    try:
        asyncio.run(server.serve_forever())
    except KeyboardInterrupt:
        logger.info("Interrupted")
