import json
from typing import Any, Dict, List

import yaml

from openwsdl.models import UNBOUNDED, ComplexType, Document, Field, SimpleKind, SimpleType, Type


class Exporter:
    """
    Utility to export the types of an extracted WSDL document as OpenAPI 3.0.0
    or JSON Schema component definitions.
    """

    _PRIMITIVE_SCHEMAS: Dict[SimpleKind, Dict[str, Any]] = {
        SimpleKind.STRING: {"type": "string"},
        SimpleKind.INT: {"type": "integer"},
        SimpleKind.FLOAT: {"type": "number"},
        SimpleKind.BOOLEAN: {"type": "boolean"},
        SimpleKind.DATE_TIME: {"type": "string", "format": "date-time"},
    }

    @staticmethod
    def _map_simple_type_to_openapi(simple_type: SimpleType) -> Dict[str, Any]:
        """
        Maps a resolved field type to its OpenAPI schema representation.
        """
        if simple_type.is_complex:
            return {"$ref": f"#/components/schemas/{simple_type.name}"}
        return dict(Exporter._PRIMITIVE_SCHEMAS[simple_type.kind])

    @staticmethod
    def _map_field_to_openapi(field: Field) -> Dict[str, Any]:
        attribute = field.attribute
        schema = Exporter._map_simple_type_to_openapi(field.type)

        if attribute.is_repeated:
            schema = {"type": "array", "items": schema}
            if isinstance(attribute.min_occurs, int):
                schema["minItems"] = attribute.min_occurs
            if attribute.max_occurs != UNBOUNDED:
                schema["maxItems"] = attribute.max_occurs

        if attribute.nillable:
            # A $ref cannot carry siblings in OpenAPI 3.0, so wrap it
            if "$ref" in schema:
                schema = {"allOf": [schema]}
            schema["nullable"] = True
        return schema

    @staticmethod
    def _is_required(field: Field) -> bool:
        return not field.attribute.nillable and field.attribute.min_occurs != 0

    @staticmethod
    def generate_schema(type_: Type) -> Dict[str, Any]:
        """
        Generates a JSON Schema component for an extracted type.
        """
        if isinstance(type_, SimpleType):
            return Exporter._map_simple_type_to_openapi(type_)
        if not isinstance(type_, ComplexType):
            raise ValueError(f"{type_!r} is not an extracted WSDL type")

        properties = {}
        required: List[str] = []
        for name in sorted(type_.fields):
            field = type_.fields[name]
            properties[name] = Exporter._map_field_to_openapi(field)
            if Exporter._is_required(field):
                required.append(name)

        schema: Dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    @staticmethod
    def to_openapi(document: Document) -> Dict[str, Any]:
        """
        Generates a complete OpenAPI 3.0.0 specification for the document's types.
        """
        schemas = {
            name: Exporter.generate_schema(document.types[name])
            for name in sorted(document.types)
        }

        return {
            "openapi": "3.0.0",
            "info": {
                "title": document.name,
                "version": "1.0.0",
                "description": f"Types extracted from the WSDL target namespace {document.target_namespace}.",
            },
            "components": {"schemas": schemas},
            "paths": {},  # Operations are not mapped to HTTP paths
        }

    @staticmethod
    def export_json(document: Document, path: str):
        """
        Saves the OpenAPI spec to a JSON file.
        """
        spec = Exporter.to_openapi(document)
        with open(path, "w") as f:
            json.dump(spec, f, indent=2)

    @staticmethod
    def export_yaml(document: Document, path: str):
        """
        Saves the OpenAPI spec to a YAML file.
        """
        spec = Exporter.to_openapi(document)
        with open(path, "w") as f:
            yaml.dump(spec, f, sort_keys=False)
