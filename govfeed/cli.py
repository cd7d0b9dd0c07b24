"""Command-line interface for taxonomy validation and feed descriptions.

Subcommands
-----------
``lint TAXONOMY``
    Validate a taxonomy file, optionally exporting its JSON Schema and the
    validated data as JSON.
``describe --taxonomy TAXONOMY URL...``
    Print the description of each feed URL.
``options --taxonomy TAXONOMY DIMENSION``
    Print the option set of a filter dimension as JSON.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import msgspec

from govfeed.filters import (
    FeedDescriptionBuilder,
    FeedRoutes,
    FilterDimension,
    FilterOptionsCatalog,
    UnrecognizedFeedError,
)
from govfeed.filters.options import DEFAULT_LOCALE
from govfeed.filters.routes import DEFAULT_PATH_PREFIX, PATH_PREFIX_PATTERN
from govfeed.taxonomy import (
    TaxonomyIndex,
    TaxonomyValidationError,
    load_taxonomy,
    write_taxonomy_schema,
)


def _print_issues(path: Path, exc: TaxonomyValidationError) -> None:
    print(f"Taxonomy validation failed for {path}:")
    for issue in exc.issues:
        print(f"  - {issue}")


def _lint(args: argparse.Namespace) -> int:
    taxonomy_path: Path = args.taxonomy
    try:
        taxonomy = load_taxonomy(taxonomy_path)
    except TaxonomyValidationError as exc:
        _print_issues(taxonomy_path, exc)
        return 1

    if args.schema_out:
        write_taxonomy_schema(args.schema_out)

    if args.json_out:
        args.json_out.write_bytes(msgspec.json.encode(taxonomy))

    print(
        f"taxonomy {taxonomy_path} is valid "
        f"({len(taxonomy.organisations)} organisations / "
        f"{len(taxonomy.topics) + len(taxonomy.topical_events)} topics / "
        f"{len(taxonomy.policies)} policies)"
    )
    return 0


def _load_index(path: Path) -> TaxonomyIndex | None:
    try:
        return TaxonomyIndex.from_path(path)
    except TaxonomyValidationError as exc:
        _print_issues(path, exc)
        return None


def _describe(args: argparse.Namespace) -> int:
    index = _load_index(args.taxonomy)
    if index is None:
        return 1

    builder = FeedDescriptionBuilder.from_index(
        index, locale=args.locale, routes=FeedRoutes(args.prefix)
    )
    status = 0
    for url in args.urls:
        try:
            print(builder.build(url).text())
        except UnrecognizedFeedError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
    return status


def _options(args: argparse.Namespace) -> int:
    index = _load_index(args.taxonomy)
    if index is None:
        return 1

    catalog = FilterOptionsCatalog(index, locale=args.locale)
    options = catalog.options_for(args.dimension)
    print(msgspec.json.format(msgspec.json.encode(options)).decode("utf-8"))
    return 0


def _path_prefix(raw: str) -> str:
    if PATH_PREFIX_PATTERN.match(raw) is None:
        msg = f"expected one path segment like '/government', got: {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    return raw


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="govfeed", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    lint = subparsers.add_parser("lint", help="validate a taxonomy file")
    lint.add_argument("taxonomy", type=Path, help="YAML taxonomy to validate")
    lint.add_argument(
        "--schema-out",
        type=Path,
        default=None,
        help="Optional path to write the generated JSON Schema",
    )
    lint.add_argument(
        "--json-out",
        type=Path,
        default=None,
        help="Optional path to write the validated taxonomy as JSON",
    )
    lint.set_defaults(handler=_lint)

    describe = subparsers.add_parser("describe", help="describe feed URLs")
    _add_taxonomy_arguments(describe)
    describe.add_argument(
        "--prefix",
        type=_path_prefix,
        default=DEFAULT_PATH_PREFIX,
        help="path prefix of the global feeds",
    )
    describe.add_argument("urls", nargs="+", metavar="URL", help="feed URL")
    describe.set_defaults(handler=_describe)

    options = subparsers.add_parser(
        "options", help="print the option set of a filter dimension"
    )
    _add_taxonomy_arguments(options)
    options.add_argument(
        "dimension",
        choices=[dimension.value for dimension in FilterDimension],
        help="filter dimension",
    )
    options.set_defaults(handler=_options)

    return parser


def _add_taxonomy_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--taxonomy", type=Path, required=True, help="YAML taxonomy file"
    )
    parser.add_argument("--locale", default=DEFAULT_LOCALE, help="label locale")


def main(argv: list[str] | None = None) -> int:
    """Run the govfeed command line.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when validation or description fails.

    """
    args = _build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
