from __future__ import annotations
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
import logging
import os
import shutil
import tempfile

from PyResxTrans.ResourceError import MissingInputFileError, ResourceParseError
from PyResxTrans.ResourceFileHandler import ResourceFileHandler

default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8-sig')
fallback_encoding = os.getenv('FALLBACK_ENCODING', 'iso-8859-1')
output_encoding = 'utf-8'

# Keys starting with these prefixes hold designer metadata rather than text
design_time_prefix = '$'
binary_metadata_prefix = '>>'

# Windows Forms stores the form title under a metadata key, but it still needs translating
form_title_key = '$this.Text'

@dataclass(frozen=True)
class ResourceEntry:
    key : str
    value : str
    is_text : bool = True
    comment : str|None = None

    @property
    def is_metadata(self) -> bool:
        return self.key.startswith(design_time_prefix) or self.key.startswith(binary_metadata_prefix)

class ResourceTable:
    """
    Ordered collection of resource entries with unique keys
    """
    def __init__(self, entries : Iterable[ResourceEntry]|None = None):
        self._entries : dict[str, ResourceEntry] = {}
        for entry in entries or []:
            self.AddEntry(entry)

    @classmethod
    def FromDict(cls, values : Mapping[str, str]) -> ResourceTable:
        return cls(ResourceEntry(key, value) for key, value in values.items())

    @property
    def entries(self) -> list[ResourceEntry]:
        return list(self._entries.values())

    @property
    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResourceEntry]:
        return iter(list(self._entries.values()))

    def __contains__(self, key : object) -> bool:
        return key in self._entries

    def __getitem__(self, key : str) -> ResourceEntry:
        return self._entries[key]

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, ResourceTable):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"ResourceTable({self.ToDict()!r})"

    def Add(self, key : str, value : str, is_text : bool = True, comment : str|None = None) -> None:
        self.AddEntry(ResourceEntry(key, value, is_text, comment))

    def AddEntry(self, entry : ResourceEntry) -> None:
        """
        Add an entry to the table. A repeated key replaces the earlier value but keeps its position.
        """
        if entry.key in self._entries:
            logging.debug(f"Duplicate resource key '{entry.key}', keeping the last value")
        self._entries[entry.key] = entry

    def GetValue(self, key : str, default : str|None = None) -> str|None:
        entry = self._entries.get(key)
        return entry.value if entry else default

    def ToDict(self) -> dict[str, str]:
        return { entry.key : entry.value for entry in self._entries.values() }

    def FilterTranslatable(self, include_blank : bool = False) -> ResourceTable:
        """
        Get the entries that hold user-facing text, sorted by key.

        Metadata keys are excluded except for the form title, and blank values
        are excluded unless include_blank is set.
        """
        selected : dict[str, ResourceEntry] = {}
        for entry in self._entries.values():
            if not entry.is_text:
                continue

            if entry.key == form_title_key:
                selected[entry.key] = entry
                continue

            if entry.is_metadata:
                continue

            if entry.value or include_blank:
                selected[entry.key] = entry

        return ResourceTable(selected[key] for key in sorted(selected))

def LoadResourceTable(path : str, handler : ResourceFileHandler) -> ResourceTable:
    """
    Load a resource file into a table
    """
    if not os.path.exists(path):
        raise MissingInputFileError(path)

    try:
        return ResourceTable(_parse_resource_file(path, handler))

    except ResourceParseError as e:
        e.path = e.path or path
        raise

def _parse_resource_file(path : str, handler : ResourceFileHandler) -> list[ResourceEntry]:
    try:
        with open(path, 'r', encoding=default_encoding) as f:
            return list(handler.parse_file(f))

    except UnicodeDecodeError as e:
        logging.warning(f"Error decoding {path}... trying with fallback encoding: {e}")

    with open(path, 'r', encoding=fallback_encoding) as f:
        return list(handler.parse_file(f))

def LoadResourceTableIfExists(path : str, handler : ResourceFileHandler) -> ResourceTable|None:
    """
    Load a resource file if there is one, or return None
    """
    if not os.path.exists(path):
        return None

    return LoadResourceTable(path, handler)

def SaveResourceTable(path : str, table : ResourceTable, handler : ResourceFileHandler) -> None:
    """
    Write a table to a resource file, replacing any existing file.

    The file is written in full to a temporary file and moved into place, so the
    target is never left partially written.
    """
    content = handler.compose_entries(table.entries)

    path = os.path.normpath(path)
    directory = os.path.dirname(os.path.abspath(path))

    temp_file = tempfile.NamedTemporaryFile('w', encoding=output_encoding, dir=directory, prefix='.', suffix='.tmp', delete=False, newline='')
    temp_path = temp_file.name

    try:
        with temp_file:
            temp_file.write(content)

        _match_file_mode(temp_path, path)
        os.replace(temp_path, path)

    except Exception:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

def _match_file_mode(temp_path : str, path : str) -> None:
    # Temporary files are created owner-only
    if os.path.exists(path):
        shutil.copymode(path, temp_path)
    else:
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(temp_path, 0o666 & ~umask)
