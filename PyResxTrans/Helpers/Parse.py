from typing import Any
import json
import logging
import regex

def ParseLanguageCodes(codes : str|list[str]|None) -> list[str]:
    """
    Parse a comma separated list of language codes, e.g. "es, zh-CN,fr"
    """
    if not codes:
        return []

    if isinstance(codes, str):
        codes = [codes]

    return [code.strip() for item in codes for code in regex.split(r"[,;\s]+", item) if code.strip()]

def ParseErrorMessageFromText(value : Any) -> str|None:
    """
    Try to extract a human-friendly error message from an HTTP response body.

    Handles JSON bodies such as {"error": "..."}, {"error": {"message": "..."}}
    or {"message": "..."}, and text with an embedded "message": "..." pair.
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None

    if isinstance(data, dict):
        error = data.get('error')
        if isinstance(error, str) and error.strip():
            return error.strip()

        if isinstance(error, dict):
            for key in ('message', 'Message', 'detail', 'description'):
                message = error.get(key)
                if isinstance(message, str) and message.strip():
                    return message.strip()

        for key in ('message', 'detail', 'description', 'error_message'):
            message = data.get(key)
            if isinstance(message, str) and message.strip():
                return message.strip()

    match = regex.search(r'"message"\s*:\s*"((?:[^"\\]|\\.)*)"', text)
    if match:
        raw = match.group(1)
        try:
            return json.loads(f'"{raw}"')
        except json.JSONDecodeError as e:
            logging.debug(f"Unable to unescape error message: {e}")
            return raw

    return None
