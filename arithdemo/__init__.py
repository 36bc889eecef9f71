"""Left-to-right integer calculator with status-code and counter helpers."""

__version__ = "0.1.0"
__all__ = ["calculator", "counter", "status_codes"]