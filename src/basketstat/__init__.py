"""Box score ingestion and trend analysis for youth basketball coaching."""

__version__ = "0.1.0"
