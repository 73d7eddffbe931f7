from pydantic import BaseModel, Field, model_validator
from typing import Optional
from decimal import Decimal
from enum import Enum

from .contracts import RichReport

# --- Inbound ---

class ChatMessage(BaseModel):
    """A message forwarded by the chat platform."""
    content: str
    author_is_bot: bool = False
    # Discord snowflake; digits only since it is placed in the request path
    channel_id: Optional[str] = Field(default=None, pattern=r"^\d+$")

# --- Parsed Commands ---

class GranularityCommand(str, Enum):
    DAILY = "d"
    INTRADAY = "t"
    MONTHLY = "m"

class StockRequest(BaseModel):
    symbol: str
    command: GranularityCommand
    selector: str

class HelpRequest(BaseModel):
    pass

# --- Derived Figures ---

class StockSummary(BaseModel):
    """
    Rounded figures derived from one OHLCV record and, when available,
    the close of the period before it.
    """
    difference: Decimal
    range: Decimal
    change_amount: Optional[Decimal] = None
    percent_change: Optional[Decimal] = None

    @property
    def change_available(self) -> bool:
        return self.percent_change is not None

    @property
    def is_positive(self) -> bool:
        return self.change_available and self.percent_change > 0

# --- Outbound ---

class BotReply(BaseModel):
    """Either a plain text reply or a rich report, never both."""
    text: Optional[str] = None
    report: Optional[RichReport] = None

    @model_validator(mode="after")
    def exactly_one_payload(self):
        if (self.text is None) == (self.report is None):
            raise ValueError("BotReply needs exactly one of 'text' or 'report'")
        return self
