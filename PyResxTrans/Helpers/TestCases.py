import os
import tempfile
import unittest
from collections.abc import Mapping
from copy import deepcopy

from PyResxTrans.Language import LanguageCatalog
from PyResxTrans.Options import Options
from PyResxTrans.ResourceError import TranslationResponseError
from PyResxTrans.SettingsType import SettingType, SettingsType
from PyResxTrans.TranslationClient import TranslationClient
from PyResxTrans.TranslationProvider import TranslationProvider

class DummyTranslationClient(TranslationClient):
    """
    Translation client that returns scripted translations and records each request.

    Texts listed in `failures` raise a TranslationResponseError; texts with no
    scripted translation are returned as "<text> [<code>]".
    """
    def __init__(self, translations : Mapping[str, str]|None = None, failures : list[str]|None = None, settings : Mapping[str, SettingType]|None = None):
        super().__init__(settings or { 'max_retries': 0, 'backoff_time': 0.0 })
        self.translations : dict[str, str] = dict(translations or {})
        self.failures : list[str] = list(failures or [])
        self.requests : list[tuple[str, str]] = []
        self.closed : bool = False

    def _request_translation(self, text : str, target_language : str) -> str|None:
        self.requests.append((text, target_language))

        if text in self.failures:
            raise TranslationResponseError(f"Unable to translate '{text}'")

        return self.translations.get(text, f"{text} [{target_language}]")

    def _close(self) -> None:
        self.closed = True

class DummyProvider(TranslationProvider):
    name = "Dummy Provider"

    def __init__(self, settings : SettingsType):
        super().__init__("Dummy Provider", SettingsType({
            'translations': settings.get_dict('translations'),
            'max_retries': 0,
            'backoff_time': 0.0,
        }))

    def GetTranslationClient(self, settings : Mapping[str, SettingType]) -> TranslationClient:
        client_settings : dict = deepcopy(self.settings)
        client_settings.update(settings)
        translations = client_settings.pop('translations', {})
        return DummyTranslationClient(translations, settings=client_settings)

class ResourceTestCase(unittest.TestCase):
    """
    Test case with a temporary working directory and default options
    """
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.directory = self.temp_dir.name
        self.options = Options({ 'provider': 'Dummy Provider', 'native_language': 'en', 'max_retries': 0, 'backoff_time': 0.0 })
        self.catalog = LanguageCatalog('en')

    def tearDown(self):
        self.temp_dir.cleanup()

    def WriteFile(self, filename : str, content : str) -> str:
        path = os.path.join(self.directory, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def ReadFile(self, path : str) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
