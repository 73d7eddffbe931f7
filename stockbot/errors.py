class StockBotError(Exception):
    """
    Base class for every error the bot recovers from locally.
    The message is the text shown to the chat user.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message


class MissingArguments(StockBotError):
    """Raised when a stock request has fewer than two arguments after the symbol."""

    def __init__(self):
        super().__init__("Missing command(s).")


class InvalidCommand(StockBotError):
    """Raised when the granularity command is not one of the recognized ones."""

    def __init__(self, command: str, prefix: str = "@"):
        self.command = command
        super().__init__(f"Invalid command. See {prefix}help for details.")


class UnknownSymbol(StockBotError):
    """Raised when the provider returns no series for the requested symbol."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"The stock you requested, **{symbol}**, does not exist.")


class InvalidSelector(StockBotError):
    """Raised when no timestamp in the series matches the requested date/time."""

    def __init__(self, selector: str, prefix: str = "@"):
        self.selector = selector
        super().__init__(
            f"The date/time you requested, **{selector}**, is invalid.\n"
            "Either this is because it is too far into the future or the past, or you messed up.\n"
            "Please note that the stock market opens at 09:30 EST, and closes at 16:00 EST.\n"
            f"Refer to the help command ({prefix}help)."
        )


class ProviderError(StockBotError):
    """Raised when the data provider is unreachable or answers with something unusable."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__("The stock data provider is unavailable right now. Please try again later.")


class ChatPlatformError(Exception):
    """Raised when a reply could not be posted to the chat platform."""
    pass
