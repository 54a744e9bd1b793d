import logging
from datetime import date
from types import SimpleNamespace

import jdatetime

from libraries.sdncal.tab_islamic.tabular_converter import TabularIslamicConverter
from libraries.sdncal.tab_islamic_date import GREGORIAN_ORDINAL_OFFSET, TabIslamicDate
from libraries.sdncal.util.twelve_months_year import TwelveMonthsYear

logger = logging.getLogger(__name__)


def sdn_to_tab_islamic(sdn):
    """
    Calculate the tabular Islamic (year, month, day) of a serial day number.
    (0, 0, 0) means the day precedes the Islamic epoch.
    """
    return TabularIslamicConverter.from_sdn(sdn)


def tab_islamic_to_sdn(year, month, day):
    """
    Determine the serial day number of a tabular Islamic date, 0 when it is out of range.
    """
    return TabularIslamicConverter.to_sdn(year, month, day)


def tab_islamic_month_name(month):
    return TabularIslamicConverter.month_name(month)


def tab_islamic_to_jd(year, month, day):
    """
    Determine Julian day from tabular Islamic date, honouring ``TabIslamicDate.islamic_offset``
    """
    return TabIslamicDate(year, month, day).to_sdn()


def jd_to_tab_islamic(jd):
    """
    Calculate tabular Islamic date from Julian day, honouring ``TabIslamicDate.islamic_offset``
    """
    t = TabIslamicDate(sdn=jd)

    return (t.year, t.month, t.day_of_month)


def gregorian_to_jd(value):
    return value.toordinal() + GREGORIAN_ORDINAL_OFFSET


def jd_to_gregorian(jd):
    return date.fromordinal(jd - GREGORIAN_ORDINAL_OFFSET)


def gregorian_to_tab_islamic(value):
    return jd_to_tab_islamic(gregorian_to_jd(value))


def tab_islamic_to_gregorian(year, month, day):
    """
    Returns the Gregorian ``date`` of a tabular Islamic date, or None if the date does not exist.
    """
    t = TabIslamicDate(year, month, day)
    if not t.is_valid():
        logger.debug("Rejected tabular Islamic date %s", t)
        return None
    return t.to_gregorian()


def jalali_to_tab_islamic(jdate):
    return gregorian_to_tab_islamic(jdate.togregorian())


def tab_islamic_to_jalali(year, month, day):
    gregorian = tab_islamic_to_gregorian(year, month, day)
    if gregorian is None:
        return None
    return jdatetime.date.fromgregorian(date=gregorian)


def tab_islamic_month_starts(year):
    """
    Gregorian dates on which each month of a tabular Islamic year begins
    """
    return [t.to_gregorian() for t in TwelveMonthsYear.month_starts_of_year(year, TabIslamicDate)]


def get_today_tab_islamic_date():
    y, m, d = gregorian_to_tab_islamic(date.today())
    return SimpleNamespace(year=y, month=m, day=d)


def format_tab_islamic(year, month, day, fmt="%Y/%m/%d"):
    """
    Renders a tabular Islamic date with a small strftime subset:
    %Y year, %m zero-padded month, %d zero-padded day, %B month name, %% literal percent.
    """
    directives = {
        "Y": str(year),
        "m": f"{month:02d}",
        "d": f"{day:02d}",
        "B": tab_islamic_month_name(month),
        "%": "%",
    }
    out = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%" and i + 1 < len(fmt) and fmt[i + 1] in directives:
            out.append(directives[fmt[i + 1]])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def tab_islamic_datetime_str(gregorian_dt):
    # 1) Convert just the date to tabular Islamic
    y, m, d = gregorian_to_tab_islamic(gregorian_dt.date())
    # 2) Format the time with Python's datetime (which handles %I correctly)
    time_str = gregorian_dt.strftime('%I:%M %p')  # e.g. "10:33 PM"
    # 3) Build the final string
    return f"{format_tab_islamic(y, m, d)} {time_str}"
