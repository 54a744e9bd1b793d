import logging

logger = logging.getLogger(__name__)

ISLAMIC_SDN_OFFSET = 1948440  # SDN of 1 Muharram 1 AH
CALENDAR_CYCLE_YEARS = 30
DAYS_PER_30_YEARS = 10631
MONTHS_PER_YEAR = 12

# Cumulative day count at the end of each year of a 30-year cycle.
YEAR_END_DAYS = (
    354, 709, 1063, 1417, 1772, 2126, 2481, 2835, 3189, 3544,
    3898, 4252, 4607, 4961, 5315, 5670, 6024, 6379, 6733, 7087,
    7442, 7796, 8150, 8505, 8859, 9214, 9568, 9922, 10277, 10631,
)

# Cumulative day count at the end of each month. The 355th day only exists in
# leap years; a common year rolls over to the next year before reaching it.
MONTH_END_DAYS = (30, 59, 89, 118, 148, 177, 207, 236, 266, 295, 325, 355)

# 14 entries so that 13 is "Extra"; the older 13-entry table dropped "Thermidor".
MONTH_NAMES = (
    "",
    "Vendemiaire",
    "Brumaire",
    "Frimaire",
    "Nivose",
    "Pluviose",
    "Ventose",
    "Germinal",
    "Floreal",
    "Prairial",
    "Messidor",
    "Thermidor",
    "Fructidor",
    "Extra",
)


class CalendarTableError(RuntimeError):
    """
    Raised when a lookup table cannot place a value that the arithmetic already
    bounded. This means the tables are corrupt, never that the input is bad.
    """


class TabularIslamicConverter:

    @staticmethod
    def find_position(table, value: int) -> int:
        """
        Returns the 1-based position of the first entry in ``table`` strictly greater than ``value``.

        :param table: Ascending cumulative day counts.
        :param value: Zero-based day offset into the period covered by ``table``.
        :return: Position in the range 1..len(table).
        """
        for i, end_day in enumerate(table):
            if value < end_day:
                return i + 1

        logger.critical("No table entry above %d (table ends at %d)", value, table[-1])
        raise CalendarTableError(f"day offset {value} is past the end of the lookup table")

    @staticmethod
    def period_base_day(table, position: int) -> int:
        # cumulative total through the previous period
        return 0 if position == 1 else table[position - 2]

    @staticmethod
    def from_sdn(sdn: int) -> tuple:
        if sdn < ISLAMIC_SDN_OFFSET:
            return 0, 0, 0

        offset = sdn - ISLAMIC_SDN_OFFSET
        cycle_num = offset // DAYS_PER_30_YEARS
        day_in_cycle = offset - cycle_num * DAYS_PER_30_YEARS

        year_in_cycle = TabularIslamicConverter.find_position(YEAR_END_DAYS, day_in_cycle)
        year = cycle_num * CALENDAR_CYCLE_YEARS + year_in_cycle

        day_in_year = day_in_cycle - TabularIslamicConverter.period_base_day(YEAR_END_DAYS, year_in_cycle)
        month = TabularIslamicConverter.find_position(MONTH_END_DAYS, day_in_year)

        day = day_in_year - TabularIslamicConverter.period_base_day(MONTH_END_DAYS, month) + 1
        return year, month, day

    @staticmethod
    def to_sdn(year: int, month: int, day: int) -> int:
        """
        Returns the SDN of a Tabular Islamic date, or 0 when the date is out of range.

        Day 30 of month 12 is accepted in every year. In a common year it lands on
        the first day of the next year, so callers that need a strict answer should
        convert back and compare.
        """
        if year < 1 or not 1 <= month <= MONTHS_PER_YEAR:
            return 0

        month_base_day = TabularIslamicConverter.period_base_day(MONTH_END_DAYS, month)
        if day < 1 or day > MONTH_END_DAYS[month - 1] - month_base_day:
            return 0

        cycle_num, year_index = divmod(year - 1, CALENDAR_CYCLE_YEARS)
        year_base_day = TabularIslamicConverter.period_base_day(YEAR_END_DAYS, year_index + 1)
        day_in_cycle = year_base_day + month_base_day + (day - 1)

        return ISLAMIC_SDN_OFFSET + cycle_num * DAYS_PER_30_YEARS + day_in_cycle

    @staticmethod
    def month_name(month: int) -> str:
        if 0 <= month < len(MONTH_NAMES):
            return MONTH_NAMES[month]
        return ""

    @staticmethod
    def year_length(year: int) -> int:
        if year < 1:
            return 0
        year_in_cycle = (year - 1) % CALENDAR_CYCLE_YEARS + 1
        return YEAR_END_DAYS[year_in_cycle - 1] - TabularIslamicConverter.period_base_day(YEAR_END_DAYS, year_in_cycle)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return TabularIslamicConverter.year_length(year) == MONTH_END_DAYS[-1]

    @staticmethod
    def month_length(year: int, month: int) -> int:
        year_length = TabularIslamicConverter.year_length(year)
        if not year_length or not 1 <= month <= MONTHS_PER_YEAR:
            return 0
        month_end = min(MONTH_END_DAYS[month - 1], year_length)
        return month_end - TabularIslamicConverter.period_base_day(MONTH_END_DAYS, month)
