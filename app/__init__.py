"""Domain Insight: scoring service for analysis-engine responses."""

__version__ = "1.0.0"
