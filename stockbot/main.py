from fastapi import FastAPI, Response
import uvicorn
import uuid

from .config import load_settings
from .contracts import ServiceEndpoints
from .models import ChatMessage, BotReply
from .bot import StockBot
from .provider_client import AlphaVantageClient
from .chat_client import DiscordClient
from .errors import ChatPlatformError
from .logger import bot_logger


app = FastAPI()
settings = load_settings()


async def _forward_reply(channel_id: str, reply: BotReply) -> None:
    """
    Posts the reply to the chat channel. A delivery failure is logged and
    does not affect the webhook response.
    """
    correlation_id = str(uuid.uuid4())
    try:
        async with DiscordClient(
            token=settings.chat_token,
            base_url=settings.chat_api_url,
            timeout=settings.chat_timeout,
        ) as chat_client:
            await chat_client.send_reply(channel_id, reply, correlation_id)
    except ChatPlatformError as e:
        bot_logger.error(f"Reply to channel {channel_id} was not delivered: {e}, correlation_id={correlation_id}")


@app.get(ServiceEndpoints.HEALTH)
async def health():
    return {"status": "ok", "activity": settings.activity}


@app.post(ServiceEndpoints.MESSAGES, response_model=BotReply, response_model_exclude_none=True)
async def receive_message(message: ChatMessage):
    """
    Receives a chat message and answers with the bot's reply.
    Responds 204 when the message is not meant for the bot.
    """
    async with AlphaVantageClient(
        base_url=settings.provider_base_url,
        timeout=settings.provider_timeout,
    ) as provider:
        reply = await StockBot(settings, provider).handle_message(message)

    if reply is None:
        return Response(status_code=204)

    if settings.chat_token and message.channel_id:
        await _forward_reply(message.channel_id, reply)

    return reply


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=80)
