class WsdlError(Exception):
    """
    Base class for every failure raised while extracting a WSDL document.
    Extraction stops at the first error; no partial document is returned.
    """


class WsdlParseError(WsdlError):
    """The input is not well-formed XML. The lxml error is chained as __cause__."""

    def __init__(self, cause: Exception):
        super().__init__(f"Malformed XML: {cause}")
        self.cause = cause


class ElementNotFound(WsdlError):
    def __init__(self, tag: str):
        super().__init__(f"Required element not found: '{tag}'")
        self.tag = tag


class AttributeNotFound(WsdlError):
    def __init__(self, attribute: str):
        super().__init__(f"Required attribute not found: '{attribute}'")
        self.attribute = attribute


class NotAnElement(WsdlError):
    def __init__(self, context: str = ""):
        message = "Expected an element node"
        if context:
            message = f"{message} inside '{context}'"
        super().__init__(message)


class EmptyElement(WsdlError):
    def __init__(self, context: str = ""):
        message = "Expected at least one child element"
        if context:
            message = f"{message} inside '{context}'"
        super().__init__(message)


class UnsupportedError(WsdlError):
    """A construct the extractor cannot model, such as a simpleType declaration."""


class DuplicateDefinitionError(WsdlError):
    """Raised in strict mode when a name is defined twice in the same table."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"Duplicate {kind} definition: '{name}'")
        self.kind = kind
        self.name = name
