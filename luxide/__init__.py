"""Path tracer utilities: intervals, angles, progress tracking, readers-writer locks, a background event loop and timestamps."""

__version__ = "0.1.0"