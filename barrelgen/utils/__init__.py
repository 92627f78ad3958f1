"""Utility modules for auto-barrel"""

from .logging_setup import configure_logging, get_logger, log_with_context, TRACE_LEVEL

__all__ = ['configure_logging', 'get_logger', 'log_with_context', 'TRACE_LEVEL']
