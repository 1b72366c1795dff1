"""Argument parsing functionality for EnvGate."""

import argparse

from catalog.loader import MODULE_TRANSFORMATIONS


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="envgate",
        description=(
            "EnvGate - resolve the transforms and polyfills required by a set of target environments"
        ),
        add_help=True,
    )

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("-t", "--target",
                        dest="TARGETS",
                        help="Target environment and minimum version, i.e: chrome=55 (can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("-i", "--include",
                        dest="INCLUDE",
                        help="Always include this plugin or built-in (can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("-e", "--exclude",
                        dest="EXCLUDE",
                        help="Never include this plugin or built-in unless also included (can be used multiple times)",
                        action="append",
                        type=str,
                        default=[])
    parser.add_argument("--loose",
                        dest="LOOSE",
                        help="Enable loose mode for every emitted transform",
                        action="store_true",
                        default=None)
    parser.add_argument("--modules",
                        dest="MODULE_TYPE",
                        help="Module format transform to apply (default: commonjs)",
                        action="store",
                        type=str,
                        choices=sorted(MODULE_TRANSFORMATIONS) + ["false"])
    parser.add_argument("--use-built-ins",
                        dest="USE_BUILT_INS",
                        help="Polyfill injection mode (default: off)",
                        action="store",
                        type=str.lower,
                        choices=["off", "entry", "usage"])
    parser.add_argument("--no-syntax",
                        dest="USE_SYNTAX",
                        help="Include every transform regardless of targets",
                        action="store_false",
                        default=None)
    parser.add_argument("--debug",
                        dest="DEBUG",
                        help="Print the targets and the reason each transform was selected",
                        action="store_true",
                        default=None)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output JSON file (default: stdout)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: $ENVGATE_LOG_LEVEL or INFO)",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    return parser.parse_args(argv)
