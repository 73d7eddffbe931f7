import uuid
from typing import Optional
from pydantic import ValidationError

from .config import BotSettings
from .contracts import RichReport
from .models import ChatMessage, StockRequest, HelpRequest, BotReply
from .parser import parse_message
from .query_selector import build_query
from .series_locator import locate_entry
from .report_builder import build_report
from .help_text import help_text
from .provider_client import AlphaVantageClient
from .errors import StockBotError, UnknownSymbol, InvalidSelector, ProviderError
from .logger import bot_logger


class StockBot:
    """
    Turns one chat message into one reply:
    parse -> build query -> fetch -> locate entry -> build report.

    Holds no per-message state, so a single instance can serve concurrent
    messages.
    """

    def __init__(self, settings: BotSettings, provider: AlphaVantageClient):
        self._settings = settings
        self._provider = provider

    async def handle_message(self, message: ChatMessage) -> Optional[BotReply]:
        """
        Returns the reply for `message`, or None when the bot should stay silent
        (bot author or no prefix). Errors are turned into a text reply.
        """
        if message.author_is_bot:
            return None

        correlation_id = str(uuid.uuid4())

        try:
            request = parse_message(message.content, self._settings.prefix)
            if request is None:
                return None

            if isinstance(request, HelpRequest):
                bot_logger.info(f"Help requested, correlation_id={correlation_id}")
                return BotReply(text=help_text(self._settings.prefix))

            report = await self.lookup(request, correlation_id)
            return BotReply(report=report)

        except StockBotError as e:
            bot_logger.warning({
                "event": "request_failed",
                "error": type(e).__name__,
                "content": message.content,
                "correlation_id": correlation_id,
            })
            return BotReply(text=e.user_message)

    async def lookup(self, request: StockRequest, correlation_id: str) -> RichReport:
        """
        Fetches the series for `request` and builds the report for the entry
        its selector points at.

        Raises:
            UnknownSymbol: the provider has no series for the symbol.
            InvalidSelector: no timestamp matches the selector.
            ProviderError: the provider failed or sent malformed records.
        """
        params, series_key = build_query(request.symbol, request.command, self._settings.api_key)
        data = await self._provider.fetch_series(params, correlation_id)

        # Unknown symbols come back as an 'Error Message' body with no series
        series = data.get(series_key)
        if not series or not isinstance(series, dict):
            raise UnknownSymbol(request.symbol)

        try:
            match = locate_entry(series, request.selector)
        except ValidationError as e:
            bot_logger.error(f"Malformed record in {series_key}: {e}, correlation_id={correlation_id}")
            raise ProviderError(f"Malformed record in {series_key}")

        if match is None:
            raise InvalidSelector(request.selector, self._settings.prefix)

        report = build_report(request.symbol, series_key, match)
        bot_logger.info({
            "event": "report_built",
            "symbol": request.symbol,
            "series": series_key,
            "key": match.key,
            "previous_key": match.previous_key,
            "correlation_id": correlation_id,
        })
        return report
