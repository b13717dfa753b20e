"""Times of day, UTC offsets, time zone resolution and UNIX timestamps."""

__version__ = "0.1.0"
__all__ = ["offset", "step", "system", "time", "timestamp", "units", "utils", "zoned"]