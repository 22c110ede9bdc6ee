from types import SimpleNamespace
from typing import Any

import discord
import pytest

from atos_bot.clients import DiscordAPIError, DiscordMessenger


def _http_exception(status: int, reason: str) -> discord.HTTPException:
    response = SimpleNamespace(status=status, reason=reason)
    return discord.HTTPException(response, {"code": 0, "message": reason})  # type: ignore[arg-type]


class FakePartialMessage:
    def __init__(self, channel: "FakeChannel", message_id: int) -> None:
        self.channel = channel
        self.id = message_id

    async def delete(self) -> None:
        if self.channel.error is not None:
            raise self.channel.error
        self.channel.deleted.append(self.id)


class FakeChannel:
    def __init__(self, channel_id: int, error: discord.HTTPException | None = None) -> None:
        self.id = channel_id
        self.error = error
        self.deleted: list[int] = []
        self.sent: list[str] = []

    def get_partial_message(self, message_id: int) -> FakePartialMessage:
        return FakePartialMessage(self, message_id)

    async def send(self, content: str) -> Any:
        if self.error is not None:
            raise self.error
        self.sent.append(content)
        return SimpleNamespace(id=555, content=content)


class FakeClient:
    def __init__(self, error: discord.HTTPException | None = None) -> None:
        self.error = error
        self.channels: dict[int, FakeChannel] = {}

    def get_partial_messageable(self, channel_id: int) -> FakeChannel:
        return self.channels.setdefault(channel_id, FakeChannel(channel_id, self.error))


@pytest.mark.asyncio
async def test_delete_message_targets_channel_and_message() -> None:
    client = FakeClient()
    messenger = DiscordMessenger(client)  # type: ignore[arg-type]

    await messenger.delete_message(20, 10)

    assert client.channels[20].deleted == [10]


@pytest.mark.asyncio
async def test_delete_message_wraps_http_errors() -> None:
    client = FakeClient(error=_http_exception(403, "Forbidden"))
    messenger = DiscordMessenger(client)  # type: ignore[arg-type]

    with pytest.raises(DiscordAPIError) as exc:
        await messenger.delete_message(20, 10)

    assert "status=403" in str(exc.value)
    assert isinstance(exc.value.__cause__, discord.HTTPException)


@pytest.mark.asyncio
async def test_create_message_posts_content() -> None:
    client = FakeClient()
    messenger = DiscordMessenger(client)  # type: ignore[arg-type]

    message_id = await messenger.create_message(20, "[<@30>] hello")

    assert message_id == 555
    assert client.channels[20].sent == ["[<@30>] hello"]


@pytest.mark.asyncio
async def test_create_message_wraps_http_errors() -> None:
    client = FakeClient(error=_http_exception(500, "Internal Server Error"))
    messenger = DiscordMessenger(client)  # type: ignore[arg-type]

    with pytest.raises(DiscordAPIError) as exc:
        await messenger.create_message(20, "hello")

    assert "status=500" in str(exc.value)


@pytest.mark.asyncio
async def test_create_message_validates_content() -> None:
    messenger = DiscordMessenger(FakeClient())  # type: ignore[arg-type]

    with pytest.raises(ValueError):
        await messenger.create_message(20, "   ")
