import re
from typing import Optional, Union

from .models import GranularityCommand, StockRequest, HelpRequest
from .errors import MissingArguments, InvalidCommand

_TOKEN_SEPARATOR = re.compile(r"\s+")

HELP_KEYWORD = "HELP"


def parse_message(content: str, prefix: str) -> Optional[Union[StockRequest, HelpRequest]]:
    """
    Parses `[prefix][symbol] [command] [date-time]` into a request.

    Returns None when the message is not addressed to the bot, a HelpRequest
    for `[prefix]help`, and a StockRequest otherwise.

    Raises:
        MissingArguments: fewer than two arguments follow the symbol.
        InvalidCommand: the command is not a known granularity.
    """
    if not content.startswith(prefix):
        return None

    args = _TOKEN_SEPARATOR.split(content.rstrip())
    symbol = args.pop(0)[len(prefix):].upper()

    if symbol == HELP_KEYWORD:
        return HelpRequest()

    if len(args) < 2:
        raise MissingArguments()

    command = args.pop(0).lower()
    try:
        granularity = GranularityCommand(command)
    except ValueError:
        raise InvalidCommand(command, prefix)

    # Anything after the selector is ignored
    selector = args.pop(0)

    return StockRequest(symbol=symbol, command=granularity, selector=selector)
