"""Client side of the length-prefixed wire protocol."""

from __future__ import annotations

import asyncio

from realiser_service.wire import encode_frame, read_frame

MAX_REPLY_BYTES = 2**31 - 1


async def exchange(host: str, port: int, payload: str, timeout: float = 30.0) -> str:
    """
    Send one request and return the server's reply.

    Replies starting with "Exception: " are returned as-is; callers decide
    whether to treat them as failures.

    Raises:
        ProtocolError: if the reply is malformed
        OSError: if the server cannot be reached
    """
    reader, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout)
    try:
        writer.write(encode_frame(payload))
        await writer.drain()
        return await asyncio.wait_for(
            read_frame(reader, MAX_REPLY_BYTES, allow_empty=True), timeout
        )
    finally:
        writer.close()
        await writer.wait_closed()


def send_request(host: str, port: int, payload: str, timeout: float = 30.0) -> str:
    """Blocking wrapper around `exchange()`."""
    return asyncio.run(exchange(host, port, payload, timeout))
