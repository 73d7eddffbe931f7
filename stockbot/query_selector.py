from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from .models import GranularityCommand


class QuerySpec(BaseModel):
    """How one granularity is requested from the provider and where its series lives."""
    model_config = ConfigDict(frozen=True)

    function: str
    series_key: str
    interval: Optional[str] = None
    full_output: bool = False


QUERY_SPECS: Dict[GranularityCommand, QuerySpec] = {
    GranularityCommand.DAILY: QuerySpec(
        function="TIME_SERIES_DAILY",
        series_key="Time Series (Daily)",
        full_output=True,
    ),
    GranularityCommand.INTRADAY: QuerySpec(
        function="TIME_SERIES_INTRADAY",
        series_key="Time Series (1min)",
        interval="1min",
        full_output=True,
    ),
    # The monthly series is always returned in full
    GranularityCommand.MONTHLY: QuerySpec(
        function="TIME_SERIES_MONTHLY",
        series_key="Monthly Time Series",
    ),
}


def build_query(symbol: str, command: GranularityCommand, api_key: str) -> Tuple[Dict[str, str], str]:
    """
    Returns the provider query parameters for `symbol` at the given
    granularity, and the key the provider nests the series under.
    """
    spec = QUERY_SPECS[command]
    params = {"function": spec.function, "symbol": symbol}
    if spec.interval:
        params["interval"] = spec.interval
    if spec.full_output:
        params["outputsize"] = "full"
    params["apikey"] = api_key
    return params, spec.series_key
