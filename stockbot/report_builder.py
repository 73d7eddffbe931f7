from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .contracts import OHLCVRecord, SeriesMatch, ReportField, RichReport
from .models import StockSummary

FOUR_PLACES = Decimal("0.0001")

POSITIVE_COLOR = "#00ae86"
NEGATIVE_COLOR = "#e74c3c"

CHANGE_UNAVAILABLE = "*Unavailable*"


def round4(value: Decimal) -> Decimal:
    """Rounds half-up to 4 places; a rounded zero is never negative."""
    rounded = value.quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)
    return abs(rounded) if rounded == 0 else rounded


def signed(value: Decimal) -> str:
    """Formats with an explicit '+' for strictly positive values (4 -> '+4.0000')."""
    text = f"{value:f}"
    return f"+{text}" if value > 0 else text


def compute_summary(record: OHLCVRecord, previous_close: Optional[Decimal] = None) -> StockSummary:
    """
    Derives difference, range and, when the previous close is known,
    change amount and percent change. All figures are rounded to 4 places.
    """
    summary = StockSummary(
        difference=round4(record.close - record.open),
        range=round4(record.high - record.low),
    )
    # Without a usable previous close, change is reported as unavailable
    if previous_close is None or previous_close == 0:
        return summary

    summary.change_amount = round4(record.close - previous_close)
    summary.percent_change = round4(record.close / previous_close * 100 - 100)
    return summary


def build_report(symbol: str, series_key: str, match: SeriesMatch) -> RichReport:
    """
    Assembles the reply for a located entry.

    Field order: Open, Close, Difference, High, Low, Range, Volume, Change.
    The color is only set when a change could be computed.
    """
    record = match.record
    previous_close = match.previous_record.close if match.previous_record else None
    summary = compute_summary(record, previous_close)

    report = RichReport(
        title=f"**{symbol}** Stock Data",
        subtitle=f"*From {series_key}, at {match.key}*",
        fields=[
            ReportField(name="Open", value=f"{record.open} USD", inline=True),
            ReportField(name="Close", value=f"{record.close} USD", inline=True),
            ReportField(name="Difference", value=f"{signed(summary.difference)} USD", inline=True),
            ReportField(name="High", value=f"{record.high} USD", inline=True),
            ReportField(name="Low", value=f"{record.low} USD", inline=True),
            ReportField(name="Range", value=f"{summary.range:f} USD", inline=True),
            ReportField(name="Volume", value=str(record.volume)),
        ],
    )

    if summary.change_available:
        report.color = POSITIVE_COLOR if summary.is_positive else NEGATIVE_COLOR
        report.fields.append(ReportField(
            name=f"Change (*from {match.previous_key}*)",
            value=f"{signed(summary.change_amount)} USD ({signed(summary.percent_change)}%)",
        ))
    else:
        report.fields.append(ReportField(name="Change", value=CHANGE_UNAVAILABLE))

    return report
