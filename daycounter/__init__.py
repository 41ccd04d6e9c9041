"""daycounter - track named dates and count the days to (or since) them."""

__version__ = "1.0.0"
