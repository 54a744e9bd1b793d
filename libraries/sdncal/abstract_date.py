class AbstractDate:
    """
    Abstract class representing a date on a calendar that maps onto the Serial Day Number axis.
    """

    def __init__(self, year=None, month=None, day_of_month=None, sdn=None, date=None):
        if date is not None:
            sdn = date.to_sdn()
        if sdn is not None:
            self.year, self.month, self.day_of_month = self.from_sdn(sdn)
        else:
            self.year = year
            self.month = month
            self.day_of_month = day_of_month

    def as_tuple(self):
        return self.year, self.month, self.day_of_month

    def to_sdn(self):
        raise NotImplementedError("Subclasses must implement this method")

    def from_sdn(self, sdn):
        raise NotImplementedError("Subclasses must implement this method")

    def is_valid(self):
        """
        A date is valid when it converts to a day number and back to the same triple.
        """
        sdn = self.to_sdn()
        return sdn != 0 and tuple(self.from_sdn(sdn)) == self.as_tuple()

    def weekday(self):
        """
        Day of the week, 0 for Sunday through 6 for Saturday, or None when the date has no day number.
        """
        sdn = self.to_sdn()
        if sdn == 0:
            return None
        return (sdn + 1) % 7

    def __eq__(self, other):
        if other is None or not isinstance(other, AbstractDate):
            return False
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        result = self.year
        result = 31 * result + self.month
        result = 31 * result + self.day_of_month
        return result

    def __repr__(self):
        return f"{type(self).__name__}({self.year}, {self.month}, {self.day_of_month})"
