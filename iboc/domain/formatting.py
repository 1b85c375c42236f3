"""pt-BR display formatting shared by the PDF reports and the public pages."""

import re
from datetime import date, datetime

_UNSAFE_FILENAME = re.compile(r"[^\w\-]+", re.ASCII)


def format_money(value: float) -> str:
    """1234.5 -> 'R$ 1.234,50'. Negative values keep the sign after the symbol."""
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {sign}{grouped}"


def format_date(value: date | datetime) -> str:
    return value.strftime("%d/%m/%Y")


def format_datetime(value: datetime) -> str:
    return value.strftime("%d/%m/%Y às %H:%M")


def safe_file_stem(text: str) -> str:
    """Collapse anything that is not an ASCII letter, digit, '_' or '-' into '_'."""
    return _UNSAFE_FILENAME.sub("_", text).strip("_") or "arquivo"
