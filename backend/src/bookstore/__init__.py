"""
Bookstore catalog - validated book catalog entries.

Host applications load settings with bookstore.config.get_settings() and
call bookstore.config.configure_logging() once at startup to route the
catalog's debug logging through the configured log level.
"""

__version__ = "0.1.0"
