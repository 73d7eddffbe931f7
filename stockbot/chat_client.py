import httpx
from typing import Dict, Any

from .config import DISCORD_API_URL, CHAT_CLIENT_TIMEOUT
from .contracts import ChatEndpoints, RichReport
from .errors import ChatPlatformError
from .models import BotReply
from .logger import bot_logger


def to_embed(report: RichReport) -> Dict[str, Any]:
    """Renders a RichReport as a Discord embed object."""
    embed = {
        "title": report.title,
        "description": report.subtitle,
        "fields": [f.model_dump() for f in report.fields],
    }
    if report.color:
        embed["color"] = int(report.color.lstrip("#"), 16)
    return embed


def to_message_payload(reply: BotReply) -> Dict[str, Any]:
    if reply.report is not None:
        return {"embeds": [to_embed(reply.report)]}
    return {"content": reply.text}


class DiscordClient:
    """
    Posts bot replies to a Discord channel through the REST API.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DISCORD_API_URL,
        timeout: int = CHAT_CLIENT_TIMEOUT,
    ):
        headers = {"Authorization": f"Bot {token}"}
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers)
        self.base_url = base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.aclose()

    async def send_reply(self, channel_id: str, reply: BotReply, correlation_id: str) -> Dict[str, Any]:
        """
        Sends `reply` to the channel and returns the created message.

        Raises:
            ChatPlatformError: if the message could not be delivered.
        """
        url = ChatEndpoints.CHANNEL_MESSAGES.format(channel_id=channel_id)
        try:
            response = await self._client.post(
                url,
                json=to_message_payload(reply),
                headers={"X-Correlation-ID": correlation_id},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            bot_logger.error(
                f"Chat platform rejected reply to channel {channel_id}: {e.response.status_code}, correlation_id={correlation_id}"
            )
            raise ChatPlatformError(f"HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            bot_logger.error(f"Could not reach chat platform: {e}, correlation_id={correlation_id}")
            raise ChatPlatformError(str(e))

        try:
            return response.json()
        except ValueError as e:
            bot_logger.error(f"Chat platform sent an invalid JSON body: {e}, correlation_id={correlation_id}")
            raise ChatPlatformError("Invalid JSON in chat platform response")
