"""HTTP API for the realiser."""

from realiser_service.api.main import app

__all__ = ["app"]
