import importlib
import logging
import pkgutil
from collections.abc import Mapping

from PyResxTrans.Options import Options
from PyResxTrans.ResourceError import NoProviderError, ProviderError
from PyResxTrans.SettingsType import SettingType, SettingsType
from PyResxTrans.TranslationClient import TranslationClient

class TranslationProvider:
    """
    Base class for translation services.

    A provider is registered by subclassing with a unique `name`. Every module in
    the Providers package is imported the first time the list of providers is requested.
    """
    name : str = ""

    _providers_imported : bool = False

    def __init__(self, name : str, settings : Mapping[str, SettingType]):
        self.name : str = name
        self.settings : SettingsType = SettingsType(settings)
        self.validation_message : str|None = None

    def GetTranslationClient(self, settings : Mapping[str, SettingType]) -> TranslationClient:
        """
        Returns a new instance of the translation client for this provider
        """
        raise NotImplementedError

    def ValidateSettings(self) -> bool:
        """
        Check that the provider has the settings it needs, setting validation_message if not
        """
        return True

    @classmethod
    def get_providers(cls) -> dict[str, type['TranslationProvider']]:
        """
        Map each registered provider name to its class
        """
        if not TranslationProvider._providers_imported:
            TranslationProvider._providers_imported = True
            cls.import_providers(f"{__package__}.Providers")

        providers : dict[str, type[TranslationProvider]] = {}
        pending = list(TranslationProvider.__subclasses__())
        while pending:
            provider = pending.pop(0)
            if provider.name:
                providers.setdefault(provider.name, provider)
            pending.extend(provider.__subclasses__())

        return providers

    @classmethod
    def get_provider(cls, options : Options) -> 'TranslationProvider':
        """
        Create the provider selected in the options, with its saved settings
        """
        if not isinstance(options, Options):
            raise ValueError("Options object required")

        if not options.provider:
            raise NoProviderError()

        return cls.create_provider(options.provider, options.GetProviderSettings(options.provider))

    @classmethod
    def create_provider(cls, name : str, provider_settings : Mapping[str, SettingType]) -> 'TranslationProvider':
        provider = cls.get_providers().get(name)
        if not provider:
            raise ProviderError(f"Unknown translation provider: {name}")

        return provider(SettingsType(provider_settings))

    @classmethod
    def import_providers(cls, package_name : str):
        """
        Import every module in the providers package. A module that fails to import is logged and skipped.
        """
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__, package.__name__ + '.'):
            try:
                logging.debug(f"Importing provider: {module_name}")
                importlib.import_module(module_name)

            except ImportError as e:
                logging.error(f"Error importing provider {module_name}: {e}")
