from dataclasses import dataclass
import logging
import os

from PyResxTrans.Formats import GetFileHandler
from PyResxTrans.Helpers import GetOutputPath
from PyResxTrans.Helpers.Parse import ParseLanguageCodes
from PyResxTrans.Language import Language, LanguageCatalog
from PyResxTrans.Options import Options
from PyResxTrans.ResourceError import MissingInputFileError, ResourceError, ResourceParseError, TranslationError
from PyResxTrans.ResourceFileHandler import ResourceFileHandler
from PyResxTrans.ResourceMerger import ResourceMerger
from PyResxTrans.ResourceTable import LoadResourceTable, LoadResourceTableIfExists, ResourceTable, SaveResourceTable
from PyResxTrans.TranslationClient import TranslationClient

@dataclass
class LanguageResult:
    language: Language
    outputpath: str
    status: str
    translated_count: int = 0
    reused_count: int = 0
    error: str|None = None

    @property
    def succeeded(self) -> bool:
        return self.status == 'translated'

class ResourceProject:
    """
    Translates one source resource file into a series of languages, writing a file per language
    """
    def __init__(self, options : Options, logger : logging.Logger|None = None):
        self.options : Options = options
        self.logger : logging.Logger = logger or logging.getLogger(__name__)
        self.catalog : LanguageCatalog = LanguageCatalog(options.native_language)
        self.sourcepath : str|None = None
        self.handler : ResourceFileHandler|None = None
        self.source : ResourceTable|None = None

    def LoadSource(self, filepath : str, input_format : str|None = None) -> ResourceTable:
        """
        Load the source file and select the entries that should be translated
        """
        if not filepath or not os.path.exists(filepath):
            raise MissingInputFileError(filepath)

        self.sourcepath = os.path.normpath(filepath)
        self.handler = GetFileHandler(self.sourcepath, input_format or self.options.input_format)

        table = LoadResourceTable(self.sourcepath, self.handler)
        self.source = table.FilterTranslatable(self.options.include_blank_resources)

        self.logger.info(f"Loaded {len(self.source)} text resources from {self.sourcepath} ({len(table)} entries)")
        return self.source

    def ResolveLanguages(self, codes : str|list[str]) -> list[Language]:
        """
        Get the translatable languages for the requested codes, in the order they were requested
        """
        languages : list[Language] = []
        for code in ParseLanguageCodes(codes):
            language = self.catalog.Resolve(code)
            if not language.is_translatable:
                self.logger.debug(f"Language code '{code}' is not supported, skipping")
                continue

            if language not in languages:
                languages.append(language)

        return languages

    def GetOutputPath(self, language : Language) -> str:
        if not self.sourcepath:
            raise ValueError("No source file loaded")

        return GetOutputPath(self.sourcepath, language.code)

    def TranslateLanguages(self, codes : str|list[str], client : TranslationClient|None) -> list[LanguageResult]:
        """
        Translate the source into each requested language.

        A failure for one language is reported and the remaining languages are still processed.
        """
        if self.source is None:
            raise ValueError("No source file loaded")

        languages = self.ResolveLanguages(codes)
        if not languages:
            self.logger.warning(f"No supported languages found in {codes}")
            return []

        if not self.source:
            self.logger.warning(f"No text resources found in {self.sourcepath}")
            return []

        results : list[LanguageResult] = []
        for language in languages:
            outputpath = self.GetOutputPath(language)
            try:
                results.append(self.TranslateLanguage(language, client))

            except TranslationError as e:
                self.logger.error(f"Translation to {language} failed, {outputpath} was not updated: {e}")
                results.append(LanguageResult(language, outputpath, 'failed', error=str(e)))

            except ResourceParseError as e:
                self.logger.warning(f"Could not parse {e.path or outputpath}, skipping {language}: {e}")
                results.append(LanguageResult(language, outputpath, 'failed', error=str(e)))

            except (ResourceError, OSError) as e:
                self.logger.error(f"Error translating to {language}: {e}")
                results.append(LanguageResult(language, outputpath, 'failed', error=str(e)))

            except Exception as e:
                self.logger.exception(f"Unexpected error translating to {language}: {e}")
                results.append(LanguageResult(language, outputpath, 'failed', error=str(e)))

        succeeded = len([result for result in results if result.succeeded])
        self.logger.info(f"Translated {succeeded} of {len(results)} languages")
        return results

    def TranslateLanguage(self, language : Language, client : TranslationClient|None) -> LanguageResult:
        """
        Merge the source with any existing translation for the language and save the result
        """
        if self.source is None or self.handler is None:
            raise ValueError("No source file loaded")

        outputpath = self.GetOutputPath(language)

        existing = LoadResourceTableIfExists(outputpath, self.handler)
        if existing is None:
            self.logger.info(f"{outputpath} not found. New file will be created.")

        merger = ResourceMerger(self.catalog, client, logger=self.logger)
        result = merger.Merge(self.source, existing, language)

        SaveResourceTable(outputpath, result, self.handler)

        self.logger.info(f"Saved {len(result)} {language} resources to {outputpath} ({merger.translated_count} translated, {merger.reused_count} reused)")

        return LanguageResult(language, outputpath, 'translated', merger.translated_count, merger.reused_count)
