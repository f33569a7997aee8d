"""General-purpose containers, calendar dates, prefix completion, caches and I/O channels."""

__version__ = "0.1.0"