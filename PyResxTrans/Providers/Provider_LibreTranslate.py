import os
from copy import deepcopy
from collections.abc import Mapping

from PyResxTrans.Options import env_float
from PyResxTrans.SettingsType import SettingType, SettingsType
from PyResxTrans.Providers.LibreTranslate.LibreTranslateClient import LibreTranslateClient
from PyResxTrans.TranslationClient import TranslationClient
from PyResxTrans.TranslationProvider import TranslationProvider

class Provider_LibreTranslate(TranslationProvider):
    name = "LibreTranslate"

    def __init__(self, settings : SettingsType):
        super().__init__(self.name, SettingsType({
            'server_address': settings.get_str('server_address', os.getenv('LIBRETRANSLATE_SERVER_ADDRESS', "http://localhost:5000")),
            'endpoint': settings.get_str('endpoint', os.getenv('LIBRETRANSLATE_ENDPOINT', "/translate")),
            'api_key': settings.get_str('api_key', os.getenv('LIBRETRANSLATE_API_KEY')),
            'timeout': settings.get_float('timeout', env_float('LIBRETRANSLATE_TIMEOUT', 300.0)),
        }))

    @property
    def server_address(self) -> str|None:
        return self.settings.get_str('server_address')

    def GetTranslationClient(self, settings : Mapping[str, SettingType]) -> TranslationClient:
        client_settings : dict = deepcopy(self.settings)
        client_settings.update(settings)
        return LibreTranslateClient(client_settings)

    def ValidateSettings(self) -> bool:
        if not self.server_address:
            self.validation_message = "Server address must be provided"
            return False

        return True
