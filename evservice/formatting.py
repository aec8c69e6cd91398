"""
Vietnamese display helpers: currency, phone numbers and dates.
"""
import logging
import re
from datetime import date, datetime
from typing import Union

logger = logging.getLogger(__name__)

MOBILE_PATTERN = re.compile(r"^(09|08|07|05|03)[0-9]{8}$")
LANDLINE_PATTERN = re.compile(r"^(02[4-9]|024|028|023|025|026|027|029|022)[0-9]{7,8}$")

INVALID_DATE = "Ngày không hợp lệ"
INVALID_DATETIME = "Ngày giờ không hợp lệ"


def _group_thousands(amount: float) -> str:
    return f"{round(amount):,}".replace(",", ".")


def format_vnd(amount) -> str:
    """1500000 -> '1.500.000 ₫'"""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount != amount:
        return "0 ₫"
    return f"{_group_thousands(amount)} ₫"


def format_vnd_number(amount) -> str:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount != amount:
        return "0"
    return _group_thousands(amount)


def _digits(phone: str) -> str:
    return re.sub(r"\D", "", phone or "")


def is_valid_vietnamese_phone(phone: str) -> bool:
    cleaned = _digits(phone)
    return bool(MOBILE_PATTERN.match(cleaned) or LANDLINE_PATTERN.match(cleaned))


def format_vietnamese_phone(phone: str) -> str:
    """Mobile as '0xxx xxx xxx', landline as '0xx xxxx xxxx'; anything else unchanged."""
    cleaned = _digits(phone)
    if len(cleaned) == 10 and re.match(r"^(09|08|07|05|03)", cleaned):
        return f"{cleaned[:4]} {cleaned[4:7]} {cleaned[7:]}"
    if len(cleaned) >= 10 and cleaned.startswith("02"):
        return f"{cleaned[:3]} {cleaned[3:7]} {cleaned[7:]}"
    return phone


def _to_datetime(value: Union[str, date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    # fromisoformat only learned the trailing Z in 3.11
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def format_vietnamese_date(value, fmt: str = "%d/%m/%Y") -> str:
    try:
        return _to_datetime(value).strftime(fmt)
    except (TypeError, ValueError):
        logger.debug("Invalid date: %r", value)
        return INVALID_DATE


def format_vietnamese_datetime(value) -> str:
    try:
        return _to_datetime(value).strftime("%d/%m/%Y %H:%M")
    except (TypeError, ValueError):
        logger.debug("Invalid datetime: %r", value)
        return INVALID_DATETIME
