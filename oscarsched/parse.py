"""
Parsing (OSCAR section detail HTML -> model objects).

OSCAR's section detail pages contain two tables this module reads:

- "Scheduled Meeting Times": one row per meeting
      Type | Time | Days | Where | Date Range | Schedule Type | Instructors
- "Registration Availability": seat and waitlist numbers
      (label) | Capacity | Actual | Remaining

Fetching the pages is not done here; callers pass the HTML text.

Important rules (DO NOT CHANGE):
- 1 table row = 1 Meeting
- rows without a fixed time or days ("TBA") are skipped, not guessed
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from oscarsched.model import Meeting, Section

logger = logging.getLogger(__name__)


MEETINGS_CAPTION = "scheduled meeting times"
AVAILABILITY_CAPTION = "registration availability"

# header text in the meetings table -> Meeting field
MEETING_COLUMNS = {
    "time": "time",
    "days": "days",
    "where": "location",
    "schedule type": "type",
    "instructors": "instructor",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _clean(text: str) -> str:
    """Collapse runs of whitespace (OSCAR pads names with several spaces)."""
    return re.sub(r"\s+", " ", text.replace("\xa0", " ")).strip()


def _find_table(soup: BeautifulSoup, caption: str) -> Optional[Tag]:
    """
    Find a data table by its caption, falling back to the summary attribute.
    """
    for table in soup.select("table.datadisplaytable"):
        cap = table.find("caption")
        if cap and caption in _clean(cap.get_text()).lower():
            return table
        if caption in (table.get("summary") or "").lower():
            return table
    return None


def _split_time(time_str: str) -> Optional[tuple]:
    """
    "8:05 am - 8:55 am" -> ("8:05am", "8:55am")
    """
    if "-" not in time_str:
        return None
    start, end = [t.replace(" ", "") for t in time_str.split("-", 1)]
    if not start or not end:
        return None
    return start, end


def _primary_instructor(text: str) -> str:
    """
    "Monica Sweat (P), Tommy Rogers" -> "Monica Sweat"
    """
    first = text.split(",")[0]
    return _clean(re.sub(r"\(\s*P\s*\)", "", first))


# ---------------------------------------------------------------------------
# Meetings
# ---------------------------------------------------------------------------


def parse_meeting_rows(html: str) -> List[Dict[str, str]]:
    """
    Extract the meeting table as a list of Meeting keyword dicts.

    Returns an empty list if the page has no meetings table.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = _find_table(soup, MEETINGS_CAPTION)
    if table is None:
        return []

    rows = table.find_all("tr")
    if not rows:
        return []

    # Map column positions by header text so column order does not matter
    headers = [_clean(th.get_text()).lower() for th in rows[0].find_all("th")]
    positions = {MEETING_COLUMNS[h]: i for i, h in enumerate(headers) if h in MEETING_COLUMNS}

    out: List[Dict[str, str]] = []
    for row in rows[1:]:
        cells = [_clean(td.get_text(" ")) for td in row.find_all("td")]
        if len(cells) < len(headers):
            continue

        raw = {name: cells[i] for name, i in positions.items()}

        times = _split_time(raw.get("time", ""))
        days = raw.get("days", "")
        if times is None or not days or days.upper() == "TBA":
            logger.debug("skipping meeting row without fixed time/days: %s", cells)
            continue

        out.append(
            {
                "instructor": _primary_instructor(raw.get("instructor", "")),
                "days": days.lower(),
                "start_time": times[0],
                "end_time": times[1],
                "type": raw.get("type", "").rstrip("*").strip().lower(),
                "location": raw.get("location", ""),
            }
        )

    return out


def parse_meetings(html: str) -> List[Meeting]:
    """Build one Meeting per parsed row. Invalid rows raise, they are not skipped."""
    return [Meeting(**row) for row in parse_meeting_rows(html)]


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------


def parse_availability(html: str) -> Dict[str, Optional[int]]:
    """
    Extract seat and waitlist numbers.

    Returns:
        {"seats_limit": 50, "seats_taken": 48, "waitlist_limit": 10, "waitlist_taken": 0}

    Keys whose row is missing (older terms have no waitlist) are None.
    """
    counts: Dict[str, Optional[int]] = {
        "seats_limit": None,
        "seats_taken": None,
        "waitlist_limit": None,
        "waitlist_taken": None,
    }

    soup = BeautifulSoup(html, "html.parser")
    table = _find_table(soup, AVAILABILITY_CAPTION)
    if table is None:
        return counts

    for row in table.find_all("tr"):
        label_el = row.find("th")
        cells = row.find_all("td")
        if label_el is None or len(cells) < 2:
            continue

        label = _clean(label_el.get_text()).lower()
        if label.startswith("waitlist"):
            prefix = "waitlist"
        elif label.startswith("seats"):
            prefix = "seats"
        else:
            continue

        try:
            limit = int(_clean(cells[0].get_text()))
            taken = int(_clean(cells[1].get_text()))
        except ValueError:
            logger.debug("skipping non-numeric availability row: %s", label)
            continue

        counts[f"{prefix}_limit"] = limit
        counts[f"{prefix}_taken"] = taken

    return counts


def refresh_counts(section: Section, html: str) -> Dict[str, Optional[int]]:
    """
    Apply the availability numbers on a detail page to `section`.

    Missing seat numbers make Section.set_counts raise InvalidCountError;
    missing waitlist numbers leave the stored waitlist counts untouched.
    """
    counts = parse_availability(html)
    section.set_counts(**counts)
    return counts
