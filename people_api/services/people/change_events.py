import logging
import re
from datetime import datetime, timedelta
from typing import List, Optional

from people_api.models.person import ChangeEvent

logger = logging.getLogger(__name__)

# Date, optional time with any number of fractional digits, optional Z or
# numeric offset. Covers stored strings and neo4j temporal iso_format() output.
_TIMESTAMP = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})"
    r"(?:[T ](?P<time>\d{2}:\d{2}:\d{2})(?:\.\d+)?)?"
    r"(?P<offset>Z|[+-]\d{2}:?\d{2})?$"
)
OUTPUT_LAYOUT = "%Y-%m-%dT%H:%M:%SZ"


def _parse(value: str) -> Optional[datetime]:
    match = _TIMESTAMP.match(value)
    if not match:
        return None
    try:
        parsed = datetime.strptime(
            f"{match['date']}T{match['time'] or '00:00:00'}", "%Y-%m-%dT%H:%M:%S"
        )
    except ValueError:
        return None
    offset = match["offset"]
    if offset and offset != "Z":
        digits = offset[1:].replace(":", "")
        delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
        parsed = parsed - delta if offset[0] == "+" else parsed + delta
    return parsed


def format_timestamp(raw: str) -> str:
    """Reformat a stored timestamp to the public UTC layout.

    Fractional seconds are dropped and offsets are shifted to UTC. Anything
    that doesn't parse is returned unchanged: the dates are decoration on the
    document and must not fail the request.
    """
    parsed = _parse(raw.strip())
    if parsed is None:
        logger.warning("Unparseable change event timestamp %r; passing it through unchanged", raw)
        return raw
    return parsed.strftime(OUTPUT_LAYOUT)


def change_events(started_at: Optional[str], ended_at: Optional[str]) -> List[ChangeEvent]:
    """Turn a (start, end) pair into zero, one or two change events, start first."""
    events: List[ChangeEvent] = []
    if started_at and started_at.strip():
        events.append(ChangeEvent(started_at=format_timestamp(started_at)))
    if ended_at and ended_at.strip():
        events.append(ChangeEvent(ended_at=format_timestamp(ended_at)))
    return events
