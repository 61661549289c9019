from dataclasses import dataclass, field, fields as dataclass_fields, is_dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

UNBOUNDED = "unbounded"

# An occurrence bound: a non-negative count or UNBOUNDED.
Occurrence = Union[int, str]


class SimpleKind(str, Enum):
    """
    Primitive XML Schema types recognized in field declarations, plus COMPLEX
    for a reference to another declared type.
    """

    BOOLEAN = "boolean"
    STRING = "string"
    FLOAT = "float"
    INT = "int"
    DATE_TIME = "dateTime"
    COMPLEX = "complex"


@dataclass(frozen=True)
class SimpleType:
    """
    A field's resolved type. `name` is only set for COMPLEX references and holds
    the referenced type's local name.
    """

    kind: SimpleKind
    name: Optional[str] = None

    @property
    def is_complex(self) -> bool:
        return self.kind is SimpleKind.COMPLEX


@dataclass(frozen=True)
class TypeAttribute:
    """
    Cardinality and nullability of a field.

    Attributes:
        nillable (bool):
            True when the field may be absent or null. Fields declared with
            minOccurs=0, maxOccurs=1 are folded into this flag.
        min_occurs (Optional[Occurrence]):
            Lower occurrence bound, None when not declared or folded away.
        max_occurs (Optional[Occurrence]):
            Upper occurrence bound, None when not declared or folded away.
    """

    nillable: bool = False
    min_occurs: Optional[Occurrence] = None
    max_occurs: Optional[Occurrence] = None

    @property
    def is_repeated(self) -> bool:
        if self.max_occurs == UNBOUNDED:
            return True
        return isinstance(self.max_occurs, int) and self.max_occurs > 1


@dataclass(frozen=True)
class Field:
    attribute: TypeAttribute
    type: SimpleType


@dataclass(frozen=True)
class ComplexType:
    """
    A complexType declaration reduced to its field table, keyed by field name.
    The table is read-only once the type is built.
    """

    fields: Mapping[str, Field] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", _freeze(self.fields))


Type = Union[SimpleType, ComplexType]


@dataclass(frozen=True)
class Message:
    """
    An abstract WSDL message. Only the first part is recorded.
    """

    part_name: str
    part_element: str


@dataclass(frozen=True)
class Operation:
    """
    A portType operation signature. Message references are local names;
    `faults` stays None until the first fault is declared.
    """

    name: str
    input: Optional[str] = None
    output: Optional[str] = None
    faults: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.faults is not None:
            object.__setattr__(self, "faults", tuple(self.faults))


@dataclass(frozen=True)
class Document:
    """
    Structured representation of an extracted WSDL document.

    The document and every table in it are read-only: mappings are exposed
    as MappingProxyType views over private copies of the inputs.

    Attributes:
        name (str):
            The name of the service element.
        target_namespace (str):
            The targetNamespace declared on the definitions root.
        types (Mapping[str, Type]):
            Declared schema types keyed by type name.
        messages (Mapping[str, Message]):
            Abstract messages keyed by message name.
        operations (Mapping[str, Operation]):
            portType operations keyed by operation name.
    """

    name: str
    target_namespace: str
    types: Mapping[str, Type] = field(default_factory=dict)
    messages: Mapping[str, Message] = field(default_factory=dict)
    operations: Mapping[str, Operation] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("types", "messages", "operations"):
            object.__setattr__(self, name, _freeze(getattr(self, name)))

    def to_dict(self) -> dict:
        """
        Converts the extracted document into a standard Python dictionary.
        Returns:
            dict: Nested dictionaries and lists; enum members become their values.
        """
        return _to_plain(self)


def _freeze(table: Mapping) -> Mapping:
    return MappingProxyType(dict(table))


def _to_plain(value: Any) -> Any:
    # dataclasses.asdict cannot deep-copy MappingProxyType, so walk by hand
    if is_dataclass(value):
        return {f.name: _to_plain(getattr(value, f.name)) for f in dataclass_fields(value)}
    if isinstance(value, Mapping):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value
