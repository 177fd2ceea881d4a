import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from npm_scrub.core.common.enums import NodeKind
from npm_scrub.core.common.errors import ProcessingError
from npm_scrub.core.config.settings import settings

from ..domain.interfaces import IFieldPolicy, IManifestStore
from ..domain.models import CleanOptions, ProcessingResult
from ..data.field_policy import FieldPolicy
from ..data.manifest_store import LocalManifestStore

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class ManifestProcessor:
    """
    Cleans a single package.json.
    Reading -> Parsing -> Mutating -> (Skip | Writing) -> Done.
    Every failure is captured into a failed ProcessingResult.
    """

    def __init__(self,
                 store: Optional[IManifestStore] = None,
                 policy: Optional[IFieldPolicy] = None):
        self.store = store or LocalManifestStore()
        self.policy = policy or FieldPolicy()

    async def process_file(self, file_path: Path, options: CleanOptions) -> ProcessingResult:
        try:
            rewritten = await self._clean(file_path, options)
        except ProcessingError as e:
            logger.warning(str(e))
            return ProcessingResult.failed(file_path, NodeKind.FILE, e)

        return ProcessingResult.file_ok(file_path, rewritten)

    async def _clean(self, file_path: Path, options: CleanOptions) -> bool:
        # 1. Read
        try:
            data = await self.store.read_text(file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ProcessingError(f'Can\'t read file at "{file_path}"', e)

        # 2. Parse
        manifest = self._parse(file_path, data)

        # 3. Mutate
        removed_any = self.policy.strip(manifest, options.fields)

        # 4. Skip
        if not removed_any and not options.force:
            logger.debug(f"Nothing to remove in {file_path}")
            return False

        # 5. Write
        content = self.serialize(
            manifest,
            line_ending=self.detect_line_ending(data),
            keep_trailing_newline=data.endswith("\n"),
        )
        try:
            await self.store.write_text(file_path, content)
        except OSError as e:
            raise ProcessingError(f'Can\'t write processed file to "{file_path}"', e)

        logger.debug(f"Rewrote {file_path}")
        return True

    def _parse(self, file_path: Path, data: str) -> Dict[str, Any]:
        try:
            manifest = json.loads(data, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # RecursionError: nesting deeper than the decoder can follow
            raise ProcessingError(f'Malformed package.json file at "{file_path}"', e)

        if not isinstance(manifest, dict):
            raise ProcessingError(
                f'Malformed package.json file at "{file_path}"',
                TypeError(f"expected a JSON object, got {type(manifest).__name__}"),
            )
        return manifest

    @staticmethod
    def detect_line_ending(data: str) -> str:
        return "\r\n" if "\r\n" in data else "\n"

    @staticmethod
    def serialize(manifest: Dict[str, Any],
                  line_ending: str = "\n",
                  keep_trailing_newline: bool = False) -> str:
        # json.dumps escapes newlines inside strings, so every "\n" here is layout
        content = json.dumps(manifest, indent=settings.JSON_INDENT, ensure_ascii=False)
        if line_ending != "\n":
            content = content.replace("\n", line_ending)
        if keep_trailing_newline:
            content += line_ending
        return content
