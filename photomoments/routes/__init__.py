"""Flask routes package."""
from photomoments.routes.api import api_bp

__all__ = ['api_bp']
