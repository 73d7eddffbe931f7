from typing import Any, Callable, Mapping, Optional

from .contracts import OHLCVRecord, SeriesMatch

LATEST_SELECTOR = "now"

TimestampMatcher = Callable[[str, str], bool]


def timestamp_matches(key: str, selector: str) -> bool:
    """
    Loose substring match between a series key and a user selector.

    Seconds are always `:00` in the provider's intraday keys, so they are
    dropped first; otherwise `hh:mm` input would be confused with `mm:ss`.
    The first key that matches wins, even when the selector is ambiguous.
    """
    if key.endswith(":00"):
        key = key[:-3]
    return selector in key


def locate_entry(
    series: Mapping[str, Any],
    selector: str,
    matcher: TimestampMatcher = timestamp_matches,
) -> Optional[SeriesMatch]:
    """
    Finds the entry `selector` refers to in a most-recent-first series.

    `now` resolves to the first entry. The predecessor is the entry right after
    the match in iteration order, i.e. the previous period. Returns None when
    nothing matches.
    """
    keys = iter(series)
    for key in keys:
        if selector == LATEST_SELECTOR or matcher(key, selector):
            previous_key = next(keys, None)
            return SeriesMatch(
                key=key,
                record=OHLCVRecord.model_validate(series[key]),
                previous_key=previous_key,
                previous_record=(
                    OHLCVRecord.model_validate(series[previous_key])
                    if previous_key is not None else None
                ),
            )
    return None
