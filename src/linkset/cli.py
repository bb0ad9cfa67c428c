"""Linkset CLI: validate, reformat and query linkset documents."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for linkset commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        linkset_version = get_version("linkset")
    except PackageNotFoundError:
        linkset_version = "dev"

    parser = argparse.ArgumentParser(
        prog="linkset",
        description="Linkset: parse, validate and query application/linkset+json documents"
    )
    parser.add_argument("--version", action="version", version=f"linkset {linkset_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr."
    )
    parent_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject comments, trailing commas and other non-standard JSON on input."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Parse and validate a linkset document",
        parents=[parent_parser]
    )
    validate_parser.add_argument("path", type=Path, help="Path to linkset JSON file")

    # format command
    format_parser = subparsers.add_parser(
        "format",
        help="Re-emit a linkset document as canonical JSON",
        parents=[parent_parser]
    )
    format_parser.add_argument("path", type=Path, help="Path to linkset JSON file")
    format_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout"
    )
    format_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation width; 0 for compact output"
    )

    # rels command
    rels_parser = subparsers.add_parser(
        "rels",
        help="List distinct relation types in document order",
        parents=[parent_parser]
    )
    rels_parser.add_argument("path", type=Path, help="Path to linkset JSON file")

    # query command
    query_parser = subparsers.add_parser(
        "query",
        help="Print links matching a relation type or media type",
        parents=[parent_parser]
    )
    query_parser.add_argument("path", type=Path, help="Path to linkset JSON file")
    query_filter = query_parser.add_mutually_exclusive_group(required=True)
    query_filter.add_argument("--rel", default=None, help="Relation type (case-insensitive)")
    query_filter.add_argument("--type", dest="media_type", default=None, help="Media type (case-insensitive)")
    query_parser.add_argument(
        "--first",
        action="store_true",
        help="Print only the first matching link (requires --rel)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Lazy import: only import the library when a command is invoked
    from .api import dump, load
    from .errors import LinksetError
    from .options import LinksetOptions
    from .parser import LinksetParser
    from ._internal.canonical_json import canonical_dumps
    from .kernel.wire import link_to_json

    indent = getattr(args, "indent", 2)
    options = LinksetOptions(lenient=not args.strict, indent=indent or None)
    linkset_parser = LinksetParser(options)

    try:
        if args.command == "validate":
            try:
                document = load(args.path, parser=linkset_parser)
            except LinksetError as e:
                if not args.quiet:
                    print("[FAILED] Validation complete")
                    print(f"  Status: FAILED")
                    print(f"  Code: {e.code.value}")
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)
            if not args.quiet:
                print("[OK] Validation complete")
                print(f"  Status: OK")
                print(f"  Links: {len(document.links)}")
        elif args.command == "format":
            document = load(args.path, parser=linkset_parser)
            if args.output is not None:
                out_path = dump(document, args.output, parser=linkset_parser)
                if not args.quiet:
                    print("[OK] Format complete")
                    print(f"  Output: {out_path}")
            else:
                print(linkset_parser.serialize(document))
        elif args.command == "rels":
            document = load(args.path, parser=linkset_parser)
            for rel in document.all_relation_types():
                print(rel)
        elif args.command == "query":
            if args.first and args.rel is None:
                print("Error: --first requires --rel.", file=sys.stderr)
                sys.exit(1)
            document = load(args.path, parser=linkset_parser)
            if args.first:
                link = document.first_link_by_relation(args.rel)
                links = [link] if link is not None else []
            elif args.rel is not None:
                links = document.links_by_relation(args.rel)
            else:
                links = document.links_by_media_type(args.media_type)
            print(canonical_dumps([link_to_json(link) for link in links], indent=options.indent))
            if not links:
                sys.exit(1)
        else:
            parser.print_help()
            sys.exit(1)
    except LinksetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
