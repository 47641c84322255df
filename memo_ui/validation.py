"""
Date validation for the memo form
Checks run in a fixed order and stop at the first failure
"""
import calendar
import re
from datetime import date
from typing import Optional

DATE_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII)

INVALID_FORMAT = "Formato de data inválido. Use dd/mm/aaaa"
INVALID_MONTH = "Mês inválido."
INVALID_DAY = "Dia inválido."
DATE_IN_PAST = "A data não pode estar no passado"
EMPTY_TITLE = "O lembrete não pode estar vazio."


def validate_memo_date(text: str, today: Optional[date] = None) -> Optional[str]:
    """
    Validate a dd/mm/yyyy date typed into the memo form

    Args:
        text: raw date text
        today: reference day for the past-date check (defaults to date.today())

    Returns:
        The error message to show, or None when the date is acceptable
    """
    match = DATE_PATTERN.fullmatch(text or "")
    if not match:
        return INVALID_FORMAT

    day, month, year = (int(part) for part in match.groups())

    if not 1 <= month <= 12:
        return INVALID_MONTH

    # Year 0000 passes the regex but has no calendar
    if year < 1:
        return INVALID_FORMAT

    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        return INVALID_DAY

    if date(year, month, day) < (today or date.today()):
        return DATE_IN_PAST

    return None


def validate_memo_title(title: str) -> Optional[str]:
    """Blank or whitespace-only titles are rejected"""
    if not (title or "").strip():
        return EMPTY_TITLE
    return None
