from datetime import datetime, timezone


def ms(year: int, month: int, day: int) -> float:
    """Epoch milliseconds for midnight UTC on the given day."""
    return datetime(year, month, day, tzinfo=timezone.utc).timestamp() * 1000
