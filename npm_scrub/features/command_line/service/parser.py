import argparse
from typing import List

from npm_scrub.core.common.errors import ConfigurationError, MISSING_PATH_MESSAGE
from npm_scrub.features.manifest_cleaner.domain.models import CleanOptions

from ..domain.models import ParsedArguments

INVALID_FIELDS_ARGUMENT_MESSAGE = (
    "Invalid argument --fields.\n"
    "The --fields flag should be followed by the specific fields that should "
    "be removed but none was found"
)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse reports problems by exiting; we want ConfigurationError instead."""

    def error(self, message):
        if "required" in message:
            raise ConfigurationError(MISSING_PATH_MESSAGE)
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="npm-scrub",
        description="Remove npm install metadata (\"_\" fields) from package.json files.",
        allow_abbrev=False,
    )
    parser.add_argument("path", help="Directory to walk, or a package.json file")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Rewrite every package.json, even when no field was removed",
    )
    parser.add_argument(
        "--fields",
        nargs="*",
        default=None,
        metavar="FIELD",
        help="Remove exactly these fields instead of every \"_\" field",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every visited node")
    return parser


def parse_arguments(argv: List[str]) -> ParsedArguments:
    """
    Turns raw argv (without the program name) into ParsedArguments.
    The path must come first. The flags after it may come in any order,
    and unknown arguments end up in `ignored`.
    """
    if len(argv) < 1:
        raise ConfigurationError(MISSING_PATH_MESSAGE)

    # --fields takes every value up to the next flag, so a trailing path
    # would be read as a field name
    if argv[0].startswith("-"):
        if argv[0] in ("-h", "--help"):
            build_parser().parse_known_args(argv)
        raise ConfigurationError(MISSING_PATH_MESSAGE)

    namespace, ignored = build_parser().parse_known_args(argv)

    if namespace.fields is not None and len(namespace.fields) == 0:
        raise ConfigurationError(INVALID_FIELDS_ARGUMENT_MESSAGE)

    return ParsedArguments(
        path=namespace.path,
        options=CleanOptions(force=namespace.force, fields=namespace.fields),
        ignored=tuple(ignored),
        verbose=namespace.verbose,
    )
