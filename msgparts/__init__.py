"""Multipart messages with typed parts encoded in network byte order."""

__version__ = "4.2.0"
__all__ = ["codec", "message"]