from datetime import date as gregorian_date

from libraries.sdncal.abstract_date import AbstractDate
from libraries.sdncal.tab_islamic.tabular_converter import MONTH_END_DAYS, TabularIslamicConverter
from libraries.sdncal.util.twelve_months_year import TwelveMonthsYear
from libraries.sdncal.year_month_date import YearMonthDate

GREGORIAN_ORDINAL_OFFSET = 1721425  # SDN of proleptic Gregorian ordinal 0


class TabIslamicDate(AbstractDate, YearMonthDate):

    def __init__(self, year=None, month=None, day_of_month=None, sdn=None, date=None):
        super().__init__(year=year, month=month, day_of_month=day_of_month, sdn=sdn, date=date)

    def to_sdn(self):
        sdn = TabularIslamicConverter.to_sdn(self.year, self.month, self.day_of_month)
        if sdn == 0:
            return 0
        return sdn - TabIslamicDate.islamic_offset

    def from_sdn(self, sdn):
        return TabularIslamicConverter.from_sdn(sdn + TabIslamicDate.islamic_offset)

    def month_start_of_months_distance(self, months_distance):
        return TwelveMonthsYear.month_start_of_months_distance(self, months_distance, TabIslamicDate)

    def months_distance_to(self, date):
        return TwelveMonthsYear.months_distance_to(self, date)

    def days_in_month(self):
        return TabularIslamicConverter.month_length(self.year, self.month)

    def month_name(self):
        return TabularIslamicConverter.month_name(self.month)

    def is_leap_year(self):
        return TabularIslamicConverter.is_leap_year(self.year)

    def day_of_year(self):
        previous_months = 0 if self.month == 1 else MONTH_END_DAYS[self.month - 2]
        return previous_months + self.day_of_month

    def to_gregorian(self):
        sdn = self.to_sdn()
        if sdn == 0:
            return None
        return gregorian_date.fromordinal(sdn - GREGORIAN_ORDINAL_OFFSET)

    @staticmethod
    def from_gregorian(value):
        return TabIslamicDate(sdn=value.toordinal() + GREGORIAN_ORDINAL_OFFSET)

    # Days added before converting, to follow a local sighting that runs ahead of
    # (positive) or behind (negative) the tabular calendar.
    islamic_offset = 0
