"""
Integrations with third-party libraries like Pydantic and FastAPI.
"""

from .pydantic import from_dataclass, PydanticDocument
from .fastapi import get_wsdl_document

__all__ = ["from_dataclass", "PydanticDocument", "get_wsdl_document"]
