"""Logging helpers for annostrip."""
from annostrip.logging.factory import DefaultLoggerFactory
from annostrip.logging.helpers import JsonLogFormatter, get_logger, setup_base_logger, trace_io

__all__ = [
    "DefaultLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "setup_base_logger",
    "trace_io",
]
