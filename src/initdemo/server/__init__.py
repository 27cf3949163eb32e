from .app import create_app
from .handler import RequestHandler

__all__ = ["create_app", "RequestHandler"]
