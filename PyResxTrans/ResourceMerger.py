import logging

from PyResxTrans.Language import Language, LanguageCatalog
from PyResxTrans.ResourceError import NoProviderError
from PyResxTrans.ResourceTable import ResourceEntry, ResourceTable
from PyResxTrans.TranslationClient import TranslationClient

class ResourceMerger:
    """
    Combines a source table with an existing translation, requesting translations only for new keys
    """
    def __init__(self, catalog : LanguageCatalog, client : TranslationClient|None = None, logger : logging.Logger|None = None):
        self.catalog : LanguageCatalog = catalog
        self.client : TranslationClient|None = client
        self.logger : logging.Logger = logger or logging.getLogger(__name__)
        self.translated_count : int = 0
        self.reused_count : int = 0

    def Merge(self, source : ResourceTable, existing : ResourceTable|None, language : Language) -> ResourceTable:
        """
        Build the output table for a language.

        Keys already present in the existing translation keep their existing value, even if the
        source text has changed. New keys are translated, or copied unchanged for the native
        language. Keys that are no longer in the source are dropped. The result follows the
        order of the source table.
        An existing value that is not text is treated as missing.

        Any TranslationError raised by the client propagates, so no partial table is returned.
        NoProviderError is raised only if a key needs translating and there is no client.
        """
        self.translated_count = 0
        self.reused_count = 0

        result = ResourceTable()
        if not source:
            return result

        passthrough = self.catalog.IsNativeLanguage(language)

        for entry in source:
            reused = existing[entry.key] if existing is not None and entry.key in existing else None
            if reused is not None and not reused.is_text:
                self.logger.warning(f"Existing {language} value for '{entry.key}' is not text and will be replaced")
                reused = None

            if reused is not None:
                value = reused.value
                self.reused_count += 1

            elif passthrough:
                value = entry.value

            elif self.client is None:
                raise NoProviderError()

            else:
                value = self.client.Translate(entry.value, language.code)
                self.translated_count += 1

            result.AddEntry(ResourceEntry(entry.key, value, comment=entry.comment))

        if existing is not None:
            pruned = [key for key in existing.keys if key not in source]
            if pruned:
                self.logger.info(f"Removed {len(pruned)} {language} entries that are no longer in the source")

        return result
