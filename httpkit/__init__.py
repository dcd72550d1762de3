"""Building blocks for HTTP clients: request options, header and cookie parsing, timeouts, responses and a thread pool."""

__version__ = "1.11.2"

__all__ = ["cookies", "options", "response", "threadpool", "timeout", "util"]