"""Tests for the length-prefixed wire server and client."""

from __future__ import annotations

import asyncio

import pytest

from realiser_core.contracts import RequestProcessor
from realiser_core.errors import ProtocolError
from realiser_core.realiser import Realiser
from realiser_service.client import exchange
from realiser_service.settings import ServiceSettings
from realiser_service.wire import HEADER, WireServer, encode_frame, read_frame


def make_server(settings, **overrides) -> WireServer:
    service_settings = ServiceSettings(host="127.0.0.1", port=0, **overrides)
    processor = RequestProcessor(realiser=Realiser(settings=settings))
    return WireServer(processor=processor, settings=service_settings)


async def run_exchange(server: WireServer, payload: str) -> str:
    await server.start()
    try:
        return await exchange("127.0.0.1", server.port, payload, timeout=5.0)
    finally:
        await server.stop()


def test_encode_frame_prefixes_byte_length() -> None:
    frame = encode_frame("héllo")
    assert frame[:4] == b"\x00\x00\x00\x06"
    assert frame[4:].decode("utf-8") == "héllo"


def test_realise_round_trip(settings, dog_barks_payload) -> None:
    reply = asyncio.run(run_exchange(make_server(settings), dog_barks_payload))
    assert reply == "The dog barks."


def test_noop(settings) -> None:
    assert asyncio.run(run_exchange(make_server(settings), '{"op": "noop"}')) == "OK"


def test_malformed_tree_is_reported(settings, malformed_tree_payload) -> None:
    reply = asyncio.run(run_exchange(make_server(settings), malformed_tree_payload))
    assert reply == "Exception: Element has no category"


def test_invalid_json_is_reported(settings) -> None:
    reply = asyncio.run(run_exchange(make_server(settings), "{not json"))
    assert reply.startswith("Exception: Invalid request")


def test_empty_request_is_reported(settings) -> None:
    reply = asyncio.run(run_exchange(make_server(settings), ""))
    assert reply == "Exception: Client did not send data."


def test_oversized_request_is_refused(settings) -> None:
    server = make_server(settings, max_request_bytes=16)

    async def scenario() -> str:
        await server.start()
        try:
            reader, writer = await asyncio.open_connection("127.0.0.1", server.port)
            writer.write(HEADER.pack(1000))
            await writer.drain()
            reply = await asyncio.wait_for(read_frame(reader, 1024, allow_empty=True), 5.0)
            writer.close()
            return reply
        finally:
            await server.stop()

    reply = asyncio.run(scenario())
    assert reply == "Exception: Request of 1000 bytes exceeds limit of 16 bytes"


def test_concurrent_connections(settings, dog_barks_payload) -> None:
    server = make_server(settings, max_workers=2)

    async def scenario() -> list[str]:
        await server.start()
        try:
            return await asyncio.gather(
                *(exchange("127.0.0.1", server.port, dog_barks_payload, timeout=5.0) for _ in range(6))
            )
        finally:
            await server.stop()

    assert asyncio.run(scenario()) == ["The dog barks."] * 6


def test_server_lifecycle(settings) -> None:
    server = make_server(settings)

    async def scenario() -> tuple[bool, bool, int]:
        await server.start()
        serving, port = server.is_serving, server.port
        await server.stop()
        return serving, server.is_serving, port

    serving, stopped_serving, port = asyncio.run(scenario())
    assert serving is True
    assert stopped_serving is False
    assert port > 0


def test_handle_payload_trims_the_reply(settings, dog_barks_payload) -> None:
    assert make_server(settings).handle_payload(dog_barks_payload) == "The dog barks."


class TestReadFrame:
    @staticmethod
    def read(data: bytes, max_bytes: int = 1024, allow_empty: bool = False) -> str:
        async def scenario() -> str:
            reader = asyncio.StreamReader()
            reader.feed_data(data)
            reader.feed_eof()
            return await read_frame(reader, max_bytes, allow_empty=allow_empty)

        return asyncio.run(scenario())

    def test_complete_frame(self) -> None:
        assert self.read(encode_frame("hello")) == "hello"

    def test_short_header(self) -> None:
        with pytest.raises(ProtocolError, match="Client did not send data."):
            self.read(b"\x00\x00")

    def test_short_payload(self) -> None:
        with pytest.raises(ProtocolError, match="Expected 5 bytes"):
            self.read(HEADER.pack(5) + b"ab")

    def test_zero_length(self) -> None:
        with pytest.raises(ProtocolError, match="Client did not send data."):
            self.read(HEADER.pack(0))
        assert self.read(HEADER.pack(0), allow_empty=True) == ""

    def test_negative_length(self) -> None:
        with pytest.raises(ProtocolError):
            self.read(HEADER.pack(-1))

    def test_oversized(self) -> None:
        with pytest.raises(ProtocolError, match="exceeds limit"):
            self.read(HEADER.pack(2048) + b"x" * 2048)

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ProtocolError, match="UTF-8"):
            self.read(HEADER.pack(2) + b"\xff\xfe")
