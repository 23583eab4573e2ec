"""
Flowgraph command line tool.

Usage:
    flowgraph export workflow.json spec.json                  # backend shape
    flowgraph export workflow.json spec.json --shape simple
    flowgraph import spec.json workflow.json                  # any document to a graph document
    flowgraph validate workflow.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_settings
from .converters import (
    export_workflow,
    find_unresolved_references,
    load_workflow_document,
    workflow_to_document,
)
from .enum import ExportShape
from .exceptions import WorkflowError
from .utils.serialization import load_json, save_json

logger = logging.getLogger(__name__)


def _cmd_export(args: argparse.Namespace) -> int:
    settings = get_settings()
    workflow = load_workflow_document(load_json(args.input), settings)
    spec = export_workflow(workflow, ExportShape(args.shape) if args.shape else None, settings)
    save_json(spec, args.output, indent=settings.json_indent)
    print(f"Exported '{workflow.name}' ({len(workflow.nodes)} nodes) to {args.output}")
    return 0


def _cmd_import(args: argparse.Namespace) -> int:
    settings = get_settings()
    workflow = load_workflow_document(load_json(args.input), settings)
    save_json(workflow_to_document(workflow), args.output, indent=settings.json_indent)
    print(f"Imported '{workflow.name}' ({len(workflow.nodes)} nodes, {len(workflow.edges)} edges) to {args.output}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    workflow = load_workflow_document(load_json(args.input))
    errors = workflow.validate()
    for node_id, port, reference in find_unresolved_references(workflow):
        logger.warning(f"Node '{node_id}' port '{port}' references unknown node: {reference}")
    if errors:
        for error in errors:
            print(f"  ✗ {error}")
        print(f"{len(errors)} problem(s) found in '{workflow.name}'")
        return 1
    print(f"  ✓ '{workflow.name}' is valid")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flowgraph", description="Convert and check workflow documents")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export a workflow as a workflow spec")
    export_parser.add_argument("input", help="Workflow graph document or spec (JSON)")
    export_parser.add_argument("output", help="Where to write the spec")
    export_parser.add_argument(
        "--shape",
        choices=[shape.value for shape in ExportShape],
        default=None,
        help="Spec shape (default: FLOWGRAPH_DEFAULT_EXPORT_SHAPE or backend)",
    )
    export_parser.set_defaults(handler=_cmd_export)

    import_parser = subparsers.add_parser("import", help="Convert any workflow document to a graph document")
    import_parser.add_argument("input", help="Workflow spec or graph document (JSON)")
    import_parser.add_argument("output", help="Where to write the graph document")
    import_parser.set_defaults(handler=_cmd_import)

    validate_parser = subparsers.add_parser("validate", help="Check a workflow document for structural problems")
    validate_parser.add_argument("input", help="Workflow spec or graph document (JSON)")
    validate_parser.set_defaults(handler=_cmd_validate)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.handler(args)
    except (WorkflowError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
