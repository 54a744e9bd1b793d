# Day-of-week names indexed by AbstractDate.weekday(): 0 = Sunday
WEEKDAY_NAMES = [
    'Sunday',
    'Monday',
    'Tuesday',
    'Wednesday',
    'Thursday',
    'Friday',
    'Saturday',
]

DEFAULT_TAB_ISLAMIC_FORMAT = '%Y/%m/%d'
