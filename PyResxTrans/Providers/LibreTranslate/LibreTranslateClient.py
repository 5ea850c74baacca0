import logging
import httpx

from PyResxTrans.Helpers.Parse import ParseErrorMessageFromText
from PyResxTrans.ResourceError import TranslationImpossibleError, TranslationResponseError
from PyResxTrans.SettingsType import SettingType
from PyResxTrans.TranslationClient import TranslationClient

class LibreTranslateClient(TranslationClient):
    """
    Handles communication with a LibreTranslate server to request translations
    """
    def __init__(self, settings : dict[str, SettingType], transport : httpx.BaseTransport|None = None):
        super().__init__(settings)
        self.transport = transport
        self.client : httpx.Client|None = None

        logging.info(f"Translating with server at {self.server_address}{self.endpoint}")

    @property
    def server_address(self) -> str|None:
        return self.settings.get_str('server_address')

    @property
    def endpoint(self) -> str:
        return self.settings.get_str('endpoint') or '/translate'

    @property
    def api_key(self) -> str|None:
        return self.settings.get_str('api_key')

    @property
    def timeout(self) -> float:
        return self.settings.get_float('timeout') or 300.0

    def _request_translation(self, text : str, target_language : str) -> str|None:
        if not self.server_address:
            raise TranslationImpossibleError("Server address is not set")

        request_body = {
            'q': text,
            'source': self.source_language,
            'target': target_language,
            'format': 'text',
        }

        if self.api_key:
            request_body['api_key'] = self.api_key

        logging.debug(f"Request Body:\n{request_body}")

        try:
            if not self.client:
                self.client = httpx.Client(base_url=self.server_address, follow_redirects=True, timeout=self.timeout,
                                           headers={'Content-Type': 'application/json'}, transport=self.transport)

            result : httpx.Response = self.client.post(self.endpoint, json=request_body)

        except httpx.ConnectError as e:
            raise TranslationResponseError(f"Failed to connect to server at {self.server_address}{self.endpoint}", error=e)

        except httpx.TransportError as e:
            raise TranslationResponseError(f"Network error communicating with server: {e}", error=e)

        if result.is_error:
            parsed_message = ParseErrorMessageFromText(result.text)
            summary_text = parsed_message if parsed_message else result.text
            if result.is_client_error and result.status_code != 429:
                raise TranslationImpossibleError(f"Client error: {result.status_code} {summary_text}")

            raise TranslationResponseError(f"Server error: {result.status_code} {summary_text}", response=result)

        logging.debug(f"Response:\n{result.text}")

        try:
            content = result.json()

        except ValueError as e:
            raise TranslationResponseError(f"Unable to parse server response: {e}", response=result, error=e)

        translated = content.get('translatedText') if isinstance(content, dict) else None
        if not isinstance(translated, str):
            raise TranslationResponseError("No text returned in the response", response=result)

        return translated

    def _close(self) -> None:
        if self.client:
            self.client.close()
            self.client = None
