"""Routes package for the chatroute HTTP API."""

from chatroute.web.routes import routing, usage

__all__ = ["routing", "usage"]
