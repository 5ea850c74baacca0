import json
from typing import Iterator, TextIO

from PyResxTrans.ResourceError import ResourceParseError
from PyResxTrans.ResourceFileHandler import ResourceFileHandler
from PyResxTrans.ResourceTable import ResourceEntry

class JsonFileHandler(ResourceFileHandler):
    """
    File handler for flat JSON string tables, e.g. { "greeting": "Hello" }.

    Values that are not strings are kept as non-text entries so that they are
    skipped for translation.
    """

    def parse_file(self, file_obj: TextIO) -> Iterator[ResourceEntry]:
        yield from self.parse_string(file_obj.read())

    def parse_string(self, content: str) -> Iterator[ResourceEntry]:
        try:
            document = json.loads(content)

        except json.JSONDecodeError as e:
            raise ResourceParseError(f"Failed to parse JSON: {e}", error=e)

        if not isinstance(document, dict):
            raise ResourceParseError(f"Expected a JSON object, found {type(document).__name__}")

        for key, value in document.items():
            if isinstance(value, str):
                yield ResourceEntry(key, value)
            else:
                yield ResourceEntry(key, json.dumps(value, ensure_ascii=False), is_text=False)

    def compose_entries(self, entries: list[ResourceEntry]) -> str:
        document = { entry.key : entry.value if entry.is_text else json.loads(entry.value) for entry in entries }
        return json.dumps(document, ensure_ascii=False, indent=4) + '\n'

    def get_file_extensions(self) -> list[str]:
        return ['.json']
