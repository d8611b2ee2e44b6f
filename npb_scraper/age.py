# age.py
from __future__ import annotations

import re
from datetime import date
from typing import Optional

# e.g. "1992年7月21日" inside "1992年7月21日 (33歳)" or similar
BIRTH_DATE_RE = re.compile(r"([0-9]+)年([0-9]+)月([0-9]+)日")


def parse_birth_date(text: Optional[str]) -> Optional[tuple[int, int, int]]:
    """Return (year, month, day) from Japanese date text, or None."""
    if not text:
        return None
    m = BIRTH_DATE_RE.search(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def calculate_age(text: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """
    Age in completed years as of ``today`` (defaults to the local date).

    Only calendar components are compared: one year is subtracted when this
    year's birthday (month, then day) has not been reached yet.
    """
    parsed = parse_birth_date(text)
    if parsed is None:
        return None
    year, month, day = parsed
    today = today or date.today()

    age = today.year - year
    if today.month < month or (today.month == month and today.day < day):
        age -= 1
    return age


def age_suffix(text: Optional[str], today: Optional[date] = None) -> str:
    """Age suffix such as " 33歳" for a birth-date value, or an empty string."""
    age = calculate_age(text, today)
    if age is None:
        return ""
    return f" {age}歳"
