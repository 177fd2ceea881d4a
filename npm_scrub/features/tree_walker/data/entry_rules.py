from npm_scrub.core.config.settings import settings

class EntryRules:
    """
    Decides which plain files inside a directory are worth processing.
    """

    @classmethod
    def is_manifest(cls, name: str) -> bool:
        """
        Case-sensitive exact match on the base name, no normalization.
        """
        return name == settings.MANIFEST_FILENAME
