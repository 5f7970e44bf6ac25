"""Count URL views in nginx access logs, in total or per day."""

__version__ = "0.1.0"
