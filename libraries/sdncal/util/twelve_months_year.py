from libraries.sdncal.abstract_date import AbstractDate

MONTHS_PER_YEAR = 12


class TwelveMonthsYear:
    @staticmethod
    def month_start_of_months_distance(base_date: AbstractDate, months_distance: int, create_date):
        """
        Returns the first day of the month that lies ``months_distance`` months away from ``base_date``.

        :param base_date: The date to count from.
        :param months_distance: Number of months to move, negative to go back.
        :param create_date: Callable taking (year, month, day) and returning a date.
        """
        year, month_index = divmod(base_date.year * MONTHS_PER_YEAR + base_date.month - 1 + months_distance,
                                   MONTHS_PER_YEAR)
        return create_date(year, month_index + 1, 1)

    @staticmethod
    def months_distance_to(base_date: AbstractDate, to_date: AbstractDate) -> int:
        return (to_date.year - base_date.year) * MONTHS_PER_YEAR + to_date.month - base_date.month

    @staticmethod
    def month_starts_of_year(year: int, create_date) -> list:
        return [create_date(year, month, 1) for month in range(1, MONTHS_PER_YEAR + 1)]
