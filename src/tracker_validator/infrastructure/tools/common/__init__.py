from .base_http_client import BaseHttpClient

__all__ = ["BaseHttpClient"]
