from dataclasses import dataclass
from typing import Tuple

from npm_scrub.features.manifest_cleaner.domain.models import CleanOptions

@dataclass(frozen=True)
class ParsedArguments:
    """
    What the command line asked for.
    Unknown arguments are kept in `ignored` rather than rejected.
    """
    path: str
    options: CleanOptions
    ignored: Tuple[str, ...] = ()
    verbose: bool = False
