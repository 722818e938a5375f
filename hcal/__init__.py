"""Historic calendars with region-specific Julian to Gregorian reform dates."""

__version__ = "1.0.0"