from typing import Any, Dict, Optional, Tuple

from npm_scrub.core.config.settings import settings
from ..domain.interfaces import IFieldPolicy

class FieldPolicy(IFieldPolicy):
    """
    Central logic for which manifest fields get stripped.
    """

    def should_remove(self, key: str, fields: Optional[Tuple[str, ...]]) -> bool:
        # 1. Explicit list wins: exact string match only
        if fields is not None:
            return key in fields

        # 2. Default: npm's private install metadata (_where, _resolved, ...)
        return key.startswith(settings.PRIVATE_FIELD_PREFIX)

    def strip(self, manifest: Dict[str, Any], fields: Optional[Tuple[str, ...]]) -> bool:
        doomed = [key for key in manifest if self.should_remove(key, fields)]
        for key in doomed:
            del manifest[key]
        return bool(doomed)
