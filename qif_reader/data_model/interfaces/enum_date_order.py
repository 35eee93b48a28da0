from enum import Enum


class EnumDateOrder(Enum):
    """
    Order of the day, month and year components in a QIF date line.
    """
    DAY_MONTH_YEAR = "dmy"
    MONTH_DAY_YEAR = "mdy"
    YEAR_MONTH_DAY = "ymd"
