"""EnvGate - target environment compatibility resolver

    Reads preset options from a config file and/or the command line, resolves
    which transforms and polyfills the targets need, and writes the ordered
    transform list as JSON.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from args import parse_args
from cli_config import load_config, merge_cli_overrides
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from resolution.preset import PresetResolver
from versioning.errors import EnvGateError


def serialize_result(result):
    """Render a PresetResult as a JSON-compatible dict.

    Callables (the entry-mode debug hook) are dropped.
    """
    plugins = []
    for unit, options in result.plugins:
        clean = {k: v for k, v in options.items() if not callable(v)}
        plugins.append([unit.identifier, clean])
    return {
        "targets": result.targets,
        "plugins": plugins,
    }


def export_json(payload, path):
    """Exports the resolution result to a JSON file.

    Args:
        payload (dict): Serialized result.
        path (str): File path to export the JSON.
    """
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(payload, file, indent=2)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _setup_logging(args):
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.LOG_LEVEL_ENV] = str(args.LOG_LEVEL).upper()
    configure_logging()
    if getattr(args, "QUIET", False):
        logging.getLogger().setLevel(logging.ERROR)
    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        logging.getLogger().addHandler(handler)


def main(argv=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    _setup_logging(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        options = merge_cli_overrides(load_config(args.CONFIG), args)
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except EnvGateError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.INVALID_INPUT.value)

    try:
        result = PresetResolver().build_preset(options)
    except EnvGateError as e:
        logging.error("%s", e)
        sys.exit(ExitCodes.INVALID_INPUT.value)

    payload = serialize_result(result)
    if getattr(args, "OUTPUT", None):
        export_json(payload, args.OUTPUT)
    elif not args.QUIET:
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="main",
                outcome="success"
            )
        )
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
