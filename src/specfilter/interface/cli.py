"""CLI for filtering a JSON product catalog with composed predicates."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.errors import InvalidCriterionError
from ..domain.filter_engine import filter_items
from ..domain.predicates import Predicate, and_, not_, or_
from ..domain.products import ColorSpecification, Product, SizeSpecification


def load_products(path: Path) -> list[Product]:
    """Load products from a JSON file. Exits with status 1 on missing file or invalid JSON/schema."""
    if not path.exists():
        print(f"Error: catalog file not found: {path}", file=sys.stderr)
        print("Create data/products.json or pass --file <path>.", file=sys.stderr)
        sys.exit(1)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f"Error: invalid JSON in {path}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: cannot read catalog file {path}: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(raw, list):
        print("Error: JSON file must contain a list of product objects.", file=sys.stderr)
        sys.exit(1)
    products: list[Product] = []
    for i, item in enumerate(raw):
        try:
            products.append(Product.model_validate(item))
        except ValidationError as e:
            print(f"Error: invalid product at index {i}: {e}", file=sys.stderr)
            sys.exit(1)
    return products


def build_predicate(
    colors: list[str],
    sizes: list[str],
    match: str = "all",
    negate: bool = False,
) -> Predicate[Product]:
    """Combine one leaf per requested colour/size with AND (``all``) or OR (``any``)."""
    leaves: list[Predicate[Product]] = [ColorSpecification(c) for c in colors]
    leaves += [SizeSpecification(s) for s in sizes]
    predicate: Predicate[Product] = and_(*leaves) if match == "all" else or_(*leaves)
    if negate:
        predicate = not_(predicate)
    return predicate


def _load_settings() -> RuntimeSettings:
    """Return runtime settings. Exits with status 1 on an invalid environment."""
    try:
        return get_settings()
    except ValidationError as e:
        print(f"Error: invalid SPECFILTER_ settings: {e}", file=sys.stderr)
        sys.exit(1)


def _catalog_path(file_arg: Path | None, settings: RuntimeSettings) -> Path:
    return file_arg if file_arg is not None else settings.catalog_path


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Filter a product catalog")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="Show every product in the catalog")
    list_parser.add_argument("--file", type=Path, default=None, help="Path to JSON catalog")

    filter_parser = subparsers.add_parser("filter", help="Show products matching the given criteria")
    filter_parser.add_argument("--file", type=Path, default=None, help="Path to JSON catalog")
    filter_parser.add_argument("--color", action="append", default=[], help="Colour to match (repeatable)")
    filter_parser.add_argument("--size", action="append", default=[], help="Size to match (repeatable)")
    filter_parser.add_argument(
        "--match",
        choices=["all", "any"],
        default="all",
        help="Combine criteria with AND (all, default) or OR (any)",
    )
    filter_parser.add_argument("--negate", action="store_true", help="Invert the combined criteria")
    filter_parser.add_argument("--json", action="store_true", help="Print matches as a JSON array")

    args = parser.parse_args(argv)
    settings = _load_settings()
    logging.basicConfig(level=settings.log_level)

    if args.command == "list":
        for product in load_products(_catalog_path(args.file, settings)):
            print(f"{product.name} ({product.color.value}, {product.size.value})")
    elif args.command == "filter":
        try:
            predicate = build_predicate(args.color, args.size, args.match, args.negate)
        except InvalidCriterionError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        products = load_products(_catalog_path(args.file, settings))
        matched = filter_items(products, predicate)
        if args.json:
            print(json.dumps([p.model_dump(mode="json") for p in matched], indent=2))
        else:
            for product in matched:
                print(product.name)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
