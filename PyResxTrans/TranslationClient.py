import logging
import time
from collections.abc import Mapping

from PyResxTrans.ResourceError import NoTranslationError, TranslationAbortedError, TranslationImpossibleError, TranslationResponseError
from PyResxTrans.SettingsType import SettingType, SettingsType

class TranslationClient:
    """
    Handles communication with the translation provider
    """
    def __init__(self, settings : Mapping[str, SettingType]):
        self.settings : SettingsType = SettingsType(settings)
        self.aborted : bool = False
        self.request_count : int = 0

    @property
    def source_language(self) -> str:
        return self.settings.get_str('source_language') or 'en'

    @property
    def rate_limit(self) -> float|None:
        return self.settings.get_float('rate_limit')

    @property
    def max_retries(self) -> int:
        return self.settings.get_int('max_retries', 2) or 0

    @property
    def backoff_time(self) -> float:
        return self.settings.get_float('backoff_time', 3.0) or 0.0

    @property
    def timeout(self) -> float:
        return self.settings.get_float('timeout') or 30.0

    def Translate(self, text : str, target_language : str) -> str:
        """
        Translate a single string into the target language code.

        Raises a TranslationError if no translation could be obtained.
        """
        if not text or not text.strip():
            return text

        start_time = time.monotonic()

        translated = None
        for retry in range(self.max_retries + 1):
            if self.aborted:
                raise TranslationAbortedError()

            try:
                self.request_count += 1
                translated = self._request_translation(text, target_language)
                break

            except TranslationImpossibleError:
                raise

            except TranslationResponseError as e:
                if retry >= self.max_retries or self.aborted:
                    raise

                logging.warning(f"{e}... retrying in {self.backoff_time} seconds ({retry + 1}/{self.max_retries})")
                time.sleep(self.backoff_time)

        if not translated:
            raise NoTranslationError(f"No translation returned for '{text}'", text=text)

        logging.debug(f"Given text is {text} and target language is {target_language}. Result - {translated}")

        # If a rate limit is specified ensure a minimum duration for each request
        rate_limit = self.rate_limit
        if rate_limit and rate_limit > 0.0:
            minimum_duration = 60.0 / rate_limit

            elapsed_time = time.monotonic() - start_time
            if elapsed_time < minimum_duration:
                sleep_time = minimum_duration - elapsed_time
                logging.debug(f"Sleeping for {sleep_time:.2f} seconds to respect rate limit")
                time.sleep(sleep_time)

        return translated

    def AbortTranslation(self) -> None:
        self.aborted = True
        self._close()

    def Close(self) -> None:
        """
        Release any connection held by the client. A later request opens a new one.
        """
        self._close()

    def _request_translation(self, text : str, target_language : str) -> str|None:
        """
        Make a request to the provider to translate the text
        """
        _ = text, target_language
        raise NotImplementedError

    def _close(self) -> None:
        pass
