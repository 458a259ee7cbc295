"""Tests for the client protocol and the in-memory stub."""
from __future__ import annotations

import pytest

from ai_content_writer.client import ChatClient, StubChatClient
from ai_content_writer.errors import ServerError
from ai_content_writer.types.response import ChatCompletion


def test_stub_satisfies_protocol() -> None:
    assert isinstance(StubChatClient(), ChatClient)


def test_stub_replays_script_in_order() -> None:
    client = StubChatClient(
        [ServerError("first"), ChatCompletion.of_text("second")]
    )
    with pytest.raises(ServerError, match="first"):
        client.complete({"n": 1})
    assert client.complete({"n": 2}).content == "second"
    assert client.requests == [{"n": 1}, {"n": 2}]
    assert client.calls == 2


def test_stub_repeats_last_entry() -> None:
    client = StubChatClient([ChatCompletion.of_text("only")])
    assert [client.complete({}).content for _ in range(3)] == ["only"] * 3


def test_empty_stub_returns_empty_completion() -> None:
    assert StubChatClient().complete({}).choices == ()


def test_stub_close() -> None:
    client = StubChatClient()
    client.close()
    assert client.closed is True
