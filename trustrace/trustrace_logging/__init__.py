"""
Structured logging for TrustRace.

Use get_logger() in every module for aggregation-friendly output.
"""

from trustrace.trustrace_logging.logger import bind_address, get_logger

__all__ = ["bind_address", "get_logger"]
