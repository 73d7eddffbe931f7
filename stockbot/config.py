import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
from typing import Optional

# Load environment variables from .env file
load_dotenv()

# Chat Platform
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "@")
DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN")
DISCORD_API_URL = os.getenv("DISCORD_API_URL", "https://discord.com/api/v10")
CHAT_CLIENT_TIMEOUT = int(os.getenv("CHAT_CLIENT_TIMEOUT", 10))
BOT_ACTIVITY = os.getenv("BOT_ACTIVITY", "with stocks")

# Data Provider (Alpha Vantage)
ALPHAVANTAGE_API_KEY = os.getenv("ALPHAVANTAGE_API_KEY", "demo")
ALPHAVANTAGE_BASE_URL = os.getenv("ALPHAVANTAGE_BASE_URL", "https://www.alphavantage.co")
PROVIDER_TIMEOUT = int(os.getenv("PROVIDER_TIMEOUT", 10))

# Logging
LOG_FILE = os.getenv("LOG_FILE", "stock_bot.log")


class BotSettings(BaseModel):
    """
    Immutable snapshot of the configuration a single bot pipeline runs with.
    Built once at construction time and passed explicitly instead of reading
    module globals from inside the pipeline.
    """
    model_config = ConfigDict(frozen=True)

    prefix: str = "@"
    api_key: str = "demo"
    provider_base_url: str = "https://www.alphavantage.co"
    provider_timeout: int = 10
    chat_token: Optional[str] = None
    chat_api_url: str = "https://discord.com/api/v10"
    chat_timeout: int = 10
    activity: str = "with stocks"


def load_settings() -> BotSettings:
    """Builds BotSettings from the values loaded above."""
    return BotSettings(
        prefix=COMMAND_PREFIX,
        api_key=ALPHAVANTAGE_API_KEY,
        provider_base_url=ALPHAVANTAGE_BASE_URL,
        provider_timeout=PROVIDER_TIMEOUT,
        chat_token=DISCORD_BOT_TOKEN,
        chat_api_url=DISCORD_API_URL,
        chat_timeout=CHAT_CLIENT_TIMEOUT,
        activity=BOT_ACTIVITY,
    )
