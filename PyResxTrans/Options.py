from __future__ import annotations
from collections.abc import Mapping
from copy import deepcopy
import json
import logging
import os
import dotenv

from PyResxTrans.Helpers.Resources import GetConfigPath
from PyResxTrans.SettingsType import SettingType, SettingsType
from PyResxTrans.version import __version__

settings_path = GetConfigPath('settings.json')

# Values in a .env file in the working directory act as environment variables
dotenv.load_dotenv()

def _getenv(key : str, default : SettingType = None) -> SettingType:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value

def env_bool(key : str, default : bool = False) -> bool:
    return SettingsType({ key: _getenv(key, default) }).get_bool(key)

def env_int(key : str, default : int|None = None) -> int|None:
    return SettingsType({ key: _getenv(key, default) }).get_int(key)

def env_float(key : str, default : float|None = None) -> float|None:
    return SettingsType({ key: _getenv(key, default) }).get_float(key)

def env_str(key : str, default : str|None = None) -> str|None:
    return SettingsType({ key: _getenv(key, default) }).get_str(key)

default_settings = {
    'version': __version__,
    'provider': env_str('PROVIDER', "Google Translate"),
    'provider_settings': SettingsType({}),
    'native_language': env_str('NATIVE_LANGUAGE', 'en'),
    'input_format': env_str('INPUT_FORMAT', None),
    'include_blank_resources': env_bool('INCLUDE_BLANK_RESOURCES', False),
    'rate_limit': env_float('RATE_LIMIT', None),
    'max_retries': env_int('MAX_RETRIES', 2),
    'backoff_time': env_float('BACKOFF_TIME', 3.0),
}

class Options(SettingsType):
    """
    Settings for a translation run: defaults from the environment, then saved settings, then explicit values
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        super().__init__()

        self.update(deepcopy(default_settings))

        if settings:
            self.update({ key : deepcopy(value) for key, value in settings.items() })

        self.update(kwargs)

    @property
    def version(self) -> str:
        return self.get_str('version') or ''

    @property
    def provider(self) -> str:
        """ the name of the translation provider """
        return self.get_str('provider') or ''

    @provider.setter
    def provider(self, value: str):
        self['provider'] = value

    @property
    def provider_settings(self) -> SettingsType:
        return self.get_dict('provider_settings')

    @property
    def native_language(self) -> str:
        return self.get_str('native_language') or 'en'

    @property
    def input_format(self) -> str|None:
        return self.get_str('input_format')

    @property
    def include_blank_resources(self) -> bool:
        return self.get_bool('include_blank_resources', False)

    def GetProviderSettings(self, provider : str) -> SettingsType:
        """ Get a copy of the settings for a specific provider """
        if not provider:
            return SettingsType()

        return SettingsType(deepcopy(self.provider_settings.get_dict(provider)))

    def UpdateProviderSettings(self, provider : str, settings : Mapping[str, SettingType]) -> None:
        """ Create or update the settings for a provider """
        provider_settings = self.provider_settings.get_dict(provider)
        provider_settings.update(settings)
        self.provider_settings[provider] = provider_settings

    def GetClientSettings(self) -> SettingsType:
        """
        Settings that govern how the translation client makes requests
        """
        return SettingsType({
            'source_language': self.native_language,
            'rate_limit': self.get('rate_limit'),
            'max_retries': self.get('max_retries'),
            'backoff_time': self.get('backoff_time'),
        })

    def LoadSettings(self) -> bool:
        """
        Apply saved settings, ignoring any keys that are not known settings
        """
        if not os.path.exists(settings_path):
            return False

        try:
            with open(settings_path, "r", encoding="utf-8") as settings_file:
                saved = json.load(settings_file)

        except (OSError, ValueError) as e:
            logging.error(f"Error loading settings from {settings_path}: {e}")
            return False

        if not isinstance(saved, dict) or not saved:
            return False

        unknown = [key for key in saved if key not in default_settings]
        if unknown:
            logging.debug(f"Ignoring unknown settings in {settings_path}: {', '.join(unknown)}")

        self.update({ key : value for key, value in saved.items() if key in default_settings and key != 'version' })
        return True

