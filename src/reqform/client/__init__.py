"""src/reqform/client/__init__.py"""

from .factory import RequestFactory, create, from_message, from_parts
from .request import Request

__all__ = [
    "Request",
    "RequestFactory",
    "create",
    "from_message",
    "from_parts",
]
