"""
openwsdl: A lightweight Python package to extract the types, messages and
operations of WSDL 1.1 service descriptions into structured data.
"""

from .exceptions import (
    AttributeNotFound,
    DuplicateDefinitionError,
    ElementNotFound,
    EmptyElement,
    NotAnElement,
    UnsupportedError,
    WsdlError,
    WsdlParseError,
)
from .exporter import Exporter
from .models import (
    UNBOUNDED,
    ComplexType,
    Document,
    Field,
    Message,
    Operation,
    SimpleKind,
    SimpleType,
    TypeAttribute,
)
from .names import split_namespace
from .parser import WsdlParser, extract

__all__ = [
    "extract",
    "WsdlParser",
    "Document",
    "ComplexType",
    "SimpleType",
    "SimpleKind",
    "TypeAttribute",
    "Field",
    "Message",
    "Operation",
    "UNBOUNDED",
    "Exporter",
    "split_namespace",
    "WsdlError",
    "WsdlParseError",
    "ElementNotFound",
    "AttributeNotFound",
    "NotAnElement",
    "EmptyElement",
    "UnsupportedError",
    "DuplicateDefinitionError",
]
