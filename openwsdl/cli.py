import argparse
import json
import logging
import sys

import yaml

from openwsdl.exceptions import WsdlError
from openwsdl.exporter import Exporter
from openwsdl.integrations.pydantic import from_dataclass
from openwsdl.models import Document
from openwsdl.parser import extract


def _load(args) -> Document:
    with open(args.file, "rb") as f:
        raw_data = f.read()
    return extract(raw_data, strict=args.strict)


def _format_operation(operation) -> str:
    line = f"{operation.name}: {operation.input or '-'} -> {operation.output or '-'}"
    if operation.faults:
        line += f" [faults: {', '.join(operation.faults)}]"
    return line


def handle_parse(args):
    """Handles the 'parse' subcommand: Outputs the extracted document as JSON."""
    try:
        document = _load(args)
        print(from_dataclass(document).model_dump_json(indent=2))
    except (OSError, WsdlError) as e:
        print(f"Error parsing file: {e}", file=sys.stderr)
        sys.exit(1)


def handle_operations(args):
    """Handles the 'operations' subcommand: Lists operation signatures."""
    try:
        document = _load(args)
    except (OSError, WsdlError) as e:
        print(f"Error parsing file: {e}", file=sys.stderr)
        sys.exit(1)

    for name in sorted(document.operations):
        print(_format_operation(document.operations[name]))


def handle_export(args):
    """Handles the 'export' subcommand: Writes the types as an OpenAPI document."""
    try:
        document = _load(args)
        if args.output:
            if args.format == "yaml":
                Exporter.export_yaml(document, args.output)
            else:
                Exporter.export_json(document, args.output)
            print(f"Exported OpenAPI {args.format.upper()} to {args.output}")
        elif args.format == "yaml":
            print(yaml.dump(Exporter.to_openapi(document), sort_keys=False))
        else:
            print(json.dumps(Exporter.to_openapi(document), indent=2))
    except (OSError, WsdlError) as e:
        print(f"Error exporting file: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="openwsdl",
        description="openwsdl CLI - Extract types, messages and operations from WSDL documents."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="Path to the WSDL file.")
    common.add_argument(
        "--strict", action="store_true", help="Reject duplicate definitions instead of keeping the last one."
    )

    # Subcommand: parse
    parse_parser = subparsers.add_parser("parse", parents=[common], help="Extract a file and output JSON.")
    parse_parser.set_defaults(func=handle_parse)

    # Subcommand: operations
    operations_parser = subparsers.add_parser("operations", parents=[common], help="List operation signatures.")
    operations_parser.set_defaults(func=handle_operations)

    # Subcommand: export
    export_parser = subparsers.add_parser("export", parents=[common], help="Export the types as OpenAPI.")
    export_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Export format (default: json)")
    export_parser.add_argument("--output", help="Output file path (default: stdout)")
    export_parser.set_defaults(func=handle_export)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    args.func(args)

if __name__ == "__main__":
    main()
