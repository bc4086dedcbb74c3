"""CGI request echo page."""

__version__ = "0.1.0"
