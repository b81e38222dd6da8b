"""episode-guide: terminal browser for series episodes and standalone movies."""

__version__ = "0.3.0"
