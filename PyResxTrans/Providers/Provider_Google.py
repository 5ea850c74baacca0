import os
from copy import deepcopy
from collections.abc import Mapping

from PyResxTrans.Options import env_float
from PyResxTrans.SettingsType import SettingType, SettingsType
from PyResxTrans.Providers.Google.GoogleTranslateClient import GoogleTranslateClient
from PyResxTrans.TranslationClient import TranslationClient
from PyResxTrans.TranslationProvider import TranslationProvider

default_server_url = "https://translate.googleapis.com/translate_a/single"

class Provider_GoogleTranslate(TranslationProvider):
    name = "Google Translate"

    def __init__(self, settings : SettingsType):
        super().__init__(self.name, SettingsType({
            'server_url': settings.get_str('server_url', os.getenv('GOOGLE_TRANSLATE_URL', default_server_url)),
            'timeout': settings.get_float('timeout', env_float('GOOGLE_TIMEOUT', 30.0)),
        }))

    @property
    def server_url(self) -> str|None:
        return self.settings.get_str('server_url')

    def GetTranslationClient(self, settings : Mapping[str, SettingType]) -> TranslationClient:
        client_settings : dict = deepcopy(self.settings)
        client_settings.update(settings)
        return GoogleTranslateClient(client_settings)

    def ValidateSettings(self) -> bool:
        if not self.server_url:
            self.validation_message = "Google Translate URL must be set"
            return False

        return True
