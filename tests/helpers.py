from datetime import datetime, timezone


def ms(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> int:
    """
    Milliseconds since the epoch for a UTC wall-clock time.
    """
    return int(datetime(year, month, day, hour, minute, tzinfo=timezone.utc).timestamp()) * 1000


MATH_ROW = "C1\tMath\t-\t-\t-\t3\t1-2\t-\tR1\t-\t10|11|"
