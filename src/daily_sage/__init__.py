"""daily-sage: AI-assisted personal health routines, tips and journal."""

__version__ = "0.1.0"
