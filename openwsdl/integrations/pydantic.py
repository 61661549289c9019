from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from openwsdl.models import Document, SimpleKind

PydanticOccurrence = Union[int, Literal["unbounded"]]


class PydanticSimpleType(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: SimpleKind
    name: Optional[str] = None


class PydanticTypeAttribute(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    nillable: bool = False
    min_occurs: Optional[PydanticOccurrence] = None
    max_occurs: Optional[PydanticOccurrence] = None


class PydanticField(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    attribute: PydanticTypeAttribute
    type: PydanticSimpleType


class PydanticComplexType(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    fields: Dict[str, PydanticField]


class PydanticMessage(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    part_name: str
    part_element: str


class PydanticOperation(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    input: Optional[str] = None
    output: Optional[str] = None
    faults: Optional[List[str]] = None


class PydanticDocument(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    target_namespace: str
    types: Dict[str, Union[PydanticComplexType, PydanticSimpleType]] = {}
    messages: Dict[str, PydanticMessage] = {}
    operations: Dict[str, PydanticOperation] = {}


def from_dataclass(document: Document) -> PydanticDocument:
    """
    Converts a core openwsdl Document into its Pydantic equivalent.
    """
    return PydanticDocument.model_validate(document.to_dict())
