# core/formatters.py

# all pure utilities & date/datetime helpers
# must never import from models!

import datetime
from typing import Iterable

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_heading(title: str, width: int = 43) -> str:
    line = "-" * width

    return f"{title}\n{line}"


def format_listing(title: str, lines: Iterable[str], width: int = 43) -> str:
    heading = format_heading(title, width)
    body = "\n".join(lines)

    return f"{heading}\n{body}" if body else heading


# === name formatters ===


def format_full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def format_sort_name(first_name: str, last_name: str) -> str:
    return f"{last_name}, {first_name}"


# === date formatters ===


def format_birth_date(birth_date: datetime.date) -> str:
    # e.g. "Jan 1, 2001"; avoids the platform-specific %-d directive
    return f"{birth_date.strftime('%b')} {birth_date.day}, {birth_date.year}"


def format_term(quarter: str, year: str) -> str:
    return f"{quarter} {year}"


# === number formatters ===


def format_gpa(gpa: float) -> str:
    return f"{gpa:.2f}"
