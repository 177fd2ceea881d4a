import logging
import sys
from typing import List, Optional

from npm_scrub.core.common.enums import NodeKind
from npm_scrub.core.common.errors import ConfigurationError, ProcessingError
from npm_scrub.core.logging_setup import configure_logging
from npm_scrub.features.manifest_cleaner.domain.models import ProcessingResult
from npm_scrub.features.tree_walker.service.api import run

from .parser import parse_arguments

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_REJECTED = 2


def format_result(result: ProcessingResult) -> str:
    mark = "✔" if result.success else "✘"
    if not result.success:
        return f"{mark} {result.path}: {result.err}"
    if result.kind == NodeKind.FILE:
        state = "rewritten" if result.rewritten else "unchanged"
        return f"{mark} {result.path} ({state})"
    return f"{mark} {result.path}"


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        args = parse_arguments(argv)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_REJECTED

    configure_logging(args.verbose)

    if args.ignored:
        logger.warning(f"Ignoring unknown argument(s): {' '.join(args.ignored)}")

    try:
        results = run(args.path, args.options)
    except ProcessingError as e:
        print(str(e), file=sys.stderr)
        return EXIT_REJECTED

    for result in results:
        # Directory markers are noise on a node_modules tree
        if result.kind == NodeKind.DIRECTORY and result.success:
            logger.debug(format_result(result))
            continue
        print(format_result(result))

    return EXIT_OK if all(r.success for r in results) else EXIT_FAILURES


if __name__ == "__main__":
    sys.exit(main())
