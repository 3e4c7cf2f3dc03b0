import calendar
import re
from datetime import date, datetime
from typing import Optional

from app.constants import EARLIEST_DATE, MONTHS
from app.core.errors import ValidationError
from app.core.timeutil import now_ph

# 3-9 个字母的月份 - 1-2 位日 - 4 位年
DATE_PATTERN = re.compile(r"[A-Za-z]{3,9}-\d{1,2}-\d{4}")


def _too_early() -> ValidationError:
    return ValidationError(
        f"Dates earlier than {EARLIEST_DATE.strftime('%B')} {EARLIEST_DATE.day}, "
        f"{EARLIEST_DATE.year} are not supported."
    )


def check_date(value: str, now: Optional[datetime] = None) -> date:
    """校验路径里的 Month-Day-Year 日期，返回对应的 date"""
    if not DATE_PATTERN.fullmatch(value):
        raise ValidationError(
            "Please adhere to the proper format: Month-Day-Year, e.g. August-26-2020."
        )

    month, day, year = value.split("-")
    month_name = month.lower()
    if month_name not in MONTHS:
        raise ValidationError("Please send a valid month.")

    month_index = MONTHS.index(month_name) + 1
    year_num, day_num = int(year), int(day)
    # 0000 这类年份 date() 都建不出来，先按最早日期拒绝
    if year_num < EARLIEST_DATE.year:
        raise _too_early()

    month_days = calendar.monthrange(year_num, month_index)[1]

    if day_num <= 0 or day_num > month_days:
        raise ValidationError(f"Days of {month_name.capitalize()} are only {month_days}.")

    given = date(year_num, month_index, day_num)

    if given < EARLIEST_DATE:
        raise _too_early()

    today = (now or now_ph()).date()
    if given > today:
        raise ValidationError(
            "Whoa there, time traveler! We don't have results from the future yet. "
            "Try a date that's not ahead of today."
        )

    return given


def format_date(d: date) -> str:
    """date -> 'october-19-2026'，用于拼结果页 URL"""
    return f"{MONTHS[d.month - 1]}-{d.day}-{d.year}"


def display_date(d: date) -> str:
    return d.strftime("%m/%d/%Y")
