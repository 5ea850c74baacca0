import logging
from typing import Any
import httpx

from PyResxTrans.Helpers.Parse import ParseErrorMessageFromText
from PyResxTrans.ResourceError import TranslationImpossibleError, TranslationResponseError
from PyResxTrans.SettingsType import SettingType
from PyResxTrans.TranslationClient import TranslationClient

class GoogleTranslateClient(TranslationClient):
    """
    Requests translations from the public Google Translate endpoint
    """
    def __init__(self, settings : dict[str, SettingType], transport : httpx.BaseTransport|None = None):
        super().__init__(settings)
        self.transport = transport
        self.client : httpx.Client|None = None

    @property
    def server_url(self) -> str|None:
        return self.settings.get_str('server_url')

    def _request_translation(self, text : str, target_language : str) -> str|None:
        if not self.server_url:
            raise TranslationImpossibleError("Google Translate URL is not set")

        params = {
            'client': 'gtx',
            'sl': self.source_language,
            'tl': target_language,
            'dt': 't',
            'q': text,
        }

        try:
            self.client = self.client or httpx.Client(timeout=self.timeout, follow_redirects=True, transport=self.transport)
            result : httpx.Response = self.client.get(self.server_url, params=params)

        except httpx.TransportError as e:
            raise TranslationResponseError(f"Network error communicating with Google Translate: {e}", error=e)

        if result.is_error:
            message = ParseErrorMessageFromText(result.text) or result.reason_phrase
            if result.is_client_error and result.status_code != 429:
                raise TranslationImpossibleError(f"Client error: {result.status_code} {message}")

            raise TranslationResponseError(f"Server error: {result.status_code} {message}", response=result)

        logging.debug(f"Response:\n{result.text}")

        try:
            return self._parse_response(result.json())

        except (ValueError, TypeError, IndexError, KeyError) as e:
            raise TranslationResponseError(f"Unexpected response from Google Translate: {e}", response=result, error=e)

    def _parse_response(self, content : Any) -> str:
        """
        The translation is split into sentences, each one a list starting with the translated text
        """
        segments = content[0]
        if not isinstance(segments, list):
            raise ValueError("no translated segments")

        return "".join(segment[0] for segment in segments if segment and segment[0])

    def _close(self) -> None:
        if self.client:
            self.client.close()
            self.client = None
