"""Formatting helpers for run logs."""


def count_str(n: int, noun: str) -> str:
    """Format a count with thousands separators and a naively pluralized noun.

    >>> count_str(1, "result")
    '1 result'
    >>> count_str(12345, "signature")
    '12,345 signatures'
    """
    return f"{n:,} {noun}" if n == 1 else f"{n:,} {noun}s"


def duration_str(seconds: float) -> str:
    """Format a search duration, dropping leading units that are zero.

    >>> duration_str(0.5)
    '0.50s'
    >>> duration_str(3725.25)
    '1h 02m 05.25s'
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{int(hours)}h {int(minutes):02}m {secs:05.2f}s"
    if minutes:
        return f"{int(minutes)}m {secs:05.2f}s"
    return f"{secs:.2f}s"
