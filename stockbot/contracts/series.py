from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal


class OHLCVRecord(BaseModel):
    """
    A single period of a provider time series.
    The provider keys every value with a numbered label and sends them as strings.
    """
    model_config = ConfigDict(populate_by_name=True)

    open: Decimal = Field(..., alias="1. open")
    high: Decimal = Field(..., alias="2. high")
    low: Decimal = Field(..., alias="3. low")
    close: Decimal = Field(..., alias="4. close")
    volume: int = Field(..., alias="5. volume")


class SeriesMatch(BaseModel):
    """The entry a selector resolved to, plus its chronological predecessor."""
    key: str
    record: OHLCVRecord
    previous_key: Optional[str] = None
    previous_record: Optional[OHLCVRecord] = None
