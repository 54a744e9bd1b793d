from datetime import date, datetime

import pytest
from django.apps import apps
from django.template import Context, Template

from core.templatetags import tab_islamic
from libraries.sdncal.tab_islamic_date import TabIslamicDate


def test_to_tab_islamic_filter():
    assert tab_islamic.to_tab_islamic(date(2024, 3, 20)) == "1445/09/10"
    assert tab_islamic.to_tab_islamic(datetime(2024, 3, 20, 23, 59), "%d %B %Y") == "10 Prairial 1445"


def test_to_tab_islamic_uses_configured_format(settings):
    settings.TAB_ISLAMIC_DATE_FORMAT = "%d-%m-%Y"
    assert tab_islamic.to_tab_islamic(date(2024, 3, 20)) == "10-09-1445"


@pytest.mark.parametrize("value", [None, "", date(600, 1, 1)])
def test_to_tab_islamic_empty_results(value):
    assert tab_islamic.to_tab_islamic(value) == ""


@pytest.mark.parametrize("value, expected", [
    (1, "Vendemiaire"),
    ("13", "Extra"),
    (0, ""),
    ("abc", ""),
    (None, ""),
])
def test_month_name_filter(value, expected):
    assert tab_islamic.tab_islamic_month_name(value) == expected


def test_now_tag(monkeypatch):
    class FixedDate(date):
        @classmethod
        def today(cls):
            return cls(2024, 3, 20)

    monkeypatch.setattr(tab_islamic.datetime, "date", FixedDate)
    assert tab_islamic.tab_islamic_now() == {'dayname': 'Wednesday', 'date_str': '1445-09-10'}


def test_template_rendering():
    template = Template(
        '{% load tab_islamic %}{{ day|to_tab_islamic:"%d %B %Y" }}|{{ 13|tab_islamic_month_name }}'
    )
    assert template.render(Context({'day': date(2024, 3, 20)})) == "10 Prairial 1445|Extra"


def test_app_applies_configured_offset(settings):
    original = TabIslamicDate.islamic_offset
    settings.TAB_ISLAMIC_DAY_OFFSET = 2
    try:
        apps.get_app_config("core").ready()
        assert TabIslamicDate.islamic_offset == 2
        assert tab_islamic.to_tab_islamic(date(2024, 3, 20)) == "1445/09/12"
    finally:
        TabIslamicDate.islamic_offset = original
