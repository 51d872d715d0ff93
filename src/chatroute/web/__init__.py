"""HTTP surface for chatroute."""

from fastapi import FastAPI

from chatroute import __version__


def create_app() -> FastAPI:
    """Build the FastAPI app with all route modules mounted."""
    from chatroute.web.routes import routing, usage

    app = FastAPI(title="chatroute", version=__version__)
    app.include_router(routing.router)
    app.include_router(usage.router)
    return app
