from typing import Any

class ResourceError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.error = error
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return self.message
        elif self.error:
            return str(self.error)
        return super().__str__()

class MissingInputFileError(ResourceError):
    def __init__(self, path : str):
        super().__init__(f"No file found to translate from: {path}")
        self.path = path

class ResourceParseError(ResourceError):
    """Error raised when a resource file cannot be parsed."""
    def __init__(self, message : str, path : str|None = None, error : Exception|None = None):
        super().__init__(message, error)
        self.path = path

class NoProviderError(ResourceError):
    def __init__(self):
        super().__init__("Provider not specified in options")

class ProviderError(ResourceError):
    def __init__(self, message : str|None = None, provider : Any = None, error : Exception|None = None):
        super().__init__(message, error)
        self.provider = provider

class TranslationError(ResourceError):
    def __init__(self, message : str, text : str|None = None, error : Exception|None = None):
        super().__init__(message, error)
        self.text = text

class TranslationAbortedError(TranslationError):
    def __init__(self):
        super().__init__("Translation aborted")

class TranslationImpossibleError(TranslationError):
    """ No chance of retry succeeding """
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error=error)

class TranslationResponseError(TranslationError):
    def __init__(self, message : str, response : Any = None, error : Exception|None = None):
        super().__init__(message, error=error)
        self.response = response

class NoTranslationError(TranslationError):
    def __init__(self, message : str, text : str|None = None):
        super().__init__(message, text=text)
