import datetime
import logging

from django import template
from django.conf import settings

from config.constants import DEFAULT_TAB_ISLAMIC_FORMAT, WEEKDAY_NAMES
from libraries.sdncal.calendar_utils import format_tab_islamic, tab_islamic_month_name as month_name
from libraries.sdncal.tab_islamic_date import TabIslamicDate

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter
def to_tab_islamic(dt, fmt=None):
    """
    Convert a Python datetime/date to a tabular Islamic formatted string.
    Usage in template: {{ some_datetime|to_tab_islamic:"%d %B %Y" }}
    """
    if not dt:
        return ""
    if fmt is None:
        fmt = getattr(settings, 'TAB_ISLAMIC_DATE_FORMAT', DEFAULT_TAB_ISLAMIC_FORMAT)
    # datetime is a subclass of date, keep only the calendar day
    if isinstance(dt, datetime.datetime):
        dt = dt.date()
    t = TabIslamicDate.from_gregorian(dt)
    if t.year == 0:
        logger.debug("%s precedes the Islamic epoch", dt)
        return ""
    return format_tab_islamic(t.year, t.month, t.day_of_month, fmt)


@register.filter
def tab_islamic_month_name(month):
    """
    Usage in template: {{ month_number|tab_islamic_month_name }}
    """
    try:
        return month_name(int(month))
    except (TypeError, ValueError):
        return ""


@register.simple_tag
def tab_islamic_now():
    today = datetime.date.today()
    t = TabIslamicDate.from_gregorian(today)

    # return both pieces in a dict
    return {
        'dayname': WEEKDAY_NAMES[t.weekday()],
        'date_str': format_tab_islamic(t.year, t.month, t.day_of_month, '%Y-%m-%d'),
    }
