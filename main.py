#!/usr/bin/env python3
"""
Command-line entry point for unit conversion.
"""

# Usage overview:
#   python main.py km mi 5            convert one value
#   python main.py --table °C 100     convert to every unit in the category
#   python main.py --table --csv output celsius 100
#   python main.py --list             list categories and their unit ids

import argparse
import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from convertit import (
    conversion_table,
    convert,
    default_registry,
    is_error,
    save_conversion_table,
)

EXIT_OK = 0
EXIT_UNKNOWN_UNIT = 1
EXIT_CONVERSION_ERROR = 2


def build_parser():
    parser = argparse.ArgumentParser(
        description="Convert a value between units of measure."
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="FROM TO VALUE",
        help="source unit, target unit and value (target is optional with --table)",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="convert VALUE from FROM to every unit in its category",
    )
    parser.add_argument(
        "--csv",
        metavar="DIR",
        help="also save the conversion table as CSV under DIR (implies --table)",
    )
    parser.add_argument(
        "--list", action="store_true", help="list categories and their unit ids"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log routing decisions"
    )
    return parser


def print_units(registry):
    for category in registry.categories():
        units = registry.units_in_category(category.id)
        print(f"{category.name} ({category.conversion_type.value}):")
        print("  " + ", ".join(u.id for u in units))


def _resolve(registry, query):
    unit = registry.find_unit(query)
    if unit is None:
        logging.error("Unknown unit: %r", query)
    return unit


def run_table(registry, from_query, value, csv_dir=None):
    unit = _resolve(registry, from_query)
    if unit is None:
        return EXIT_UNKNOWN_UNIT

    table = conversion_table(unit, value, registry=registry)
    print(table.to_string(index=False))
    if csv_dir:
        save_conversion_table(table, csv_dir, f"{unit.id}_conversions.csv")
    return EXIT_OK


def run_conversion(registry, from_query, to_query, value):
    from_unit = _resolve(registry, from_query)
    to_unit = _resolve(registry, to_query)
    if from_unit is None or to_unit is None:
        return EXIT_UNKNOWN_UNIT

    result = convert(from_unit, to_unit, value, registry=registry)
    print(result)
    if is_error(result):
        logging.warning("%s -> %s failed: %s", from_unit.id, to_unit.id, result)
        return EXIT_CONVERSION_ERROR
    return EXIT_OK


def main(argv=None):
    """Parse arguments, run the requested action and return an exit code."""
    parser = build_parser()
    options = parser.parse_args(argv)
    if options.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    registry = default_registry()

    if options.list:
        print_units(registry)
        return EXIT_OK

    args = options.args
    if options.table or options.csv:
        if len(args) not in (2, 3):
            parser.error("--table expects FROM [TO] VALUE")
        return run_table(registry, args[0], args[-1], options.csv)

    if len(args) != 3:
        parser.error("expected FROM TO VALUE")
    return run_conversion(registry, *args)


if __name__ == "__main__":
    sys.exit(main())
