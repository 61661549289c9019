import logging
import re
from typing import Any, Dict, Iterator, List, Optional

from lxml import etree

from openwsdl.exceptions import (
    AttributeNotFound,
    DuplicateDefinitionError,
    ElementNotFound,
    EmptyElement,
    NotAnElement,
    UnsupportedError,
    WsdlParseError,
)
from openwsdl.models import (
    UNBOUNDED,
    ComplexType,
    Document,
    Field,
    Message,
    Occurrence,
    Operation,
    SimpleKind,
    SimpleType,
    Type,
    TypeAttribute,
)
from openwsdl.names import local_name, split_namespace

logger = logging.getLogger(__name__)


class WsdlParser:
    """
    Core extractor turning a WSDL 1.1 document into a typed Document.

    The document is read in a single pass: target namespace, schema types,
    messages, portType operations and finally the service name. The first
    structural problem raises a WsdlError and aborts the whole extraction.
    """

    _PRIMITIVES: Dict[str, SimpleKind] = {
        "boolean": SimpleKind.BOOLEAN,
        "string": SimpleKind.STRING,
        "int": SimpleKind.INT,
        "float": SimpleKind.FLOAT,
        "dateTime": SimpleKind.DATE_TIME,
    }
    _occurs_pattern = re.compile(r"\A\+?[0-9]+\Z")

    def __init__(self, data: bytes, strict: bool = False):
        """
        Args:
            data: Raw bytes of the WSDL document.
            strict: Reject duplicate type, field, message and operation names,
                and repeated input/output members, instead of keeping the last one.
        """
        self.data = data
        self.strict = strict

    def parse(self) -> Document:
        root = self._load_tree()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("elements: %s", etree.tostring(root, encoding="unicode"))

        target_namespace = self._require_attribute(root, "targetNamespace")
        types = self._parse_types(root)
        messages = self._parse_messages(root)
        operations = self._parse_operations(root)
        service_name = self._require_attribute(
            self._require_child(root, "service"), "name"
        )

        logger.debug("service name: %s", service_name)
        logger.debug("parsed types: %r", types)
        logger.debug("parsed messages: %r", messages)
        logger.debug("parsed operations: %r", operations)

        return Document(
            name=service_name,
            target_namespace=target_namespace,
            types=types,
            messages=messages,
            operations=operations,
        )

    def _load_tree(self) -> Any:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            return etree.fromstring(self.data, parser)
        except (etree.XMLSyntaxError, ValueError) as e:
            raise WsdlParseError(e) from e

    # --- tree helpers ---

    @staticmethod
    def _elements(node: Any) -> Iterator[Any]:
        return (child for child in node if local_name(child) is not None)

    @staticmethod
    def _require_child(node: Any, tag: str) -> Any:
        for child in WsdlParser._elements(node):
            if local_name(child) == tag:
                return child
        raise ElementNotFound(tag)

    @staticmethod
    def _require_attribute(node: Any, attribute: str) -> str:
        value = node.get(attribute)
        if value is None:
            raise AttributeNotFound(attribute)
        return value

    @staticmethod
    def _first_element(node: Any) -> Any:
        """First child element, skipping comments and processing instructions."""
        child = next(WsdlParser._elements(node), None)
        if child is None:
            raise EmptyElement(local_name(node) or "")
        return child

    @staticmethod
    def _first_node(node: Any) -> Any:
        """First child node, which must be an element."""
        # lxml holds leading character data in .text rather than as a child node
        if (node.text or "").strip():
            raise NotAnElement(local_name(node) or "")
        if len(node) == 0:
            raise EmptyElement(local_name(node) or "")
        child = node[0]
        if local_name(child) is None:
            raise NotAnElement(local_name(node) or "")
        return child

    def _insert(self, table: Dict[str, Any], kind: str, name: str, value: Any) -> None:
        if self.strict and name in table:
            raise DuplicateDefinitionError(kind, name)
        table[name] = value

    # --- types ---

    def _parse_types(self, root: Any) -> Dict[str, Type]:
        schema = self._first_element(self._require_child(root, "types"))
        types: Dict[str, Type] = {}
        for declaration in self._elements(schema):
            name = self._require_attribute(declaration, "name")
            logger.debug("type: %s <%s>", name, local_name(declaration))
            self._insert(types, "type", name, self._parse_complex_type(declaration))
        return types

    def _parse_complex_type(self, declaration: Any) -> ComplexType:
        # Both <complexType name="X"> and <element name="X"><complexType> are accepted
        tag = local_name(declaration)
        if tag == "complexType":
            body = declaration
        else:
            body = self._first_node(declaration)

        if local_name(body) != "complexType":
            raise UnsupportedError(
                f"Type '{declaration.get('name')}' is declared as <{local_name(body)}>, "
                "only complexType declarations are supported"
            )

        fields: Dict[str, Field] = {}
        for element in self._elements(self._first_node(body)):
            field_name = self._require_attribute(element, "name")
            self._insert(fields, "field", field_name, self._parse_field(element))
        return ComplexType(fields=fields)

    def _parse_field(self, element: Any) -> Field:
        field_type = self._require_attribute(element, "type")
        nillable = element.get("nillable") == "true"
        min_occurs = self._parse_occurs(element, "minOccurs")
        max_occurs = self._parse_occurs(element, "maxOccurs")

        # Optional and required single values are expressed through nillable only
        if min_occurs == 0 and max_occurs == 1:
            nillable, min_occurs, max_occurs = True, None, None
        elif min_occurs == 1 and max_occurs == 1:
            nillable, min_occurs, max_occurs = False, None, None

        logger.debug("field %s -> %s", element.get("name"), field_type)
        return Field(
            attribute=TypeAttribute(
                nillable=nillable, min_occurs=min_occurs, max_occurs=max_occurs
            ),
            type=self.resolve_type(field_type),
        )

    def _parse_occurs(self, element: Any, attribute: str) -> Optional[Occurrence]:
        value = element.get(attribute)
        if value is None:
            return None
        if value == UNBOUNDED:
            return UNBOUNDED
        if not self._occurs_pattern.match(value):
            raise UnsupportedError(
                f"Invalid {attribute} value '{value}' on field '{element.get('name')}'"
            )
        return int(value)

    @classmethod
    def resolve_type(cls, qualified_name: str) -> SimpleType:
        """
        Maps a declared field type such as 'xsd:string' or 'tns:Address' to a
        SimpleType. Unrecognized local names become COMPLEX references.
        """
        name = split_namespace(qualified_name)
        kind = cls._PRIMITIVES.get(name)
        if kind is None:
            return SimpleType(SimpleKind.COMPLEX, name)
        return SimpleType(kind)

    # --- messages ---

    def _parse_messages(self, root: Any) -> Dict[str, Message]:
        messages: Dict[str, Message] = {}
        for message in self._elements(root):
            if local_name(message) != "message":
                continue
            name = self._require_attribute(message, "name")
            part = self._first_element(message)
            self._insert(
                messages,
                "message",
                name,
                Message(
                    part_name=self._require_attribute(part, "name"),
                    part_element=split_namespace(self._require_attribute(part, "element")),
                ),
            )
        return messages

    # --- operations ---

    def _parse_operations(self, root: Any) -> Dict[str, Operation]:
        port_type = self._require_child(root, "portType")
        operations: Dict[str, Operation] = {}
        for operation in self._elements(port_type):
            name = self._require_attribute(operation, "name")
            self._insert(operations, "operation", name, self._parse_operation(name, operation))
        return operations

    def _parse_operation(self, name: str, operation: Any) -> Operation:
        input_message: Optional[str] = None
        output_message: Optional[str] = None
        faults: Optional[List[str]] = None

        for member in self._elements(operation):
            reference = member.get("message")
            if reference is None:
                continue
            message = split_namespace(reference)
            tag = local_name(member)
            if tag == "input":
                if self.strict and input_message is not None:
                    raise DuplicateDefinitionError("input", name)
                input_message = message
            elif tag == "output":
                if self.strict and output_message is not None:
                    raise DuplicateDefinitionError("output", name)
                output_message = message
            elif tag == "fault":
                if faults is None:
                    faults = []
                faults.append(message)
            else:
                raise ElementNotFound("operation member")

        return Operation(name=name, input=input_message, output=output_message, faults=faults)


def extract(data: bytes, strict: bool = False) -> Document:
    """
    Extracts the typed model of a WSDL document.

    Args:
        data: Raw bytes of the WSDL document.
        strict: Raise DuplicateDefinitionError on repeated names instead of
            letting the last definition win.

    Returns:
        Document: The complete extracted model.

    Raises:
        WsdlError: On the first structural problem found in document order.
    """
    return WsdlParser(data, strict=strict).parse()
