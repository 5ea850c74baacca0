from typing import Iterator, TextIO
import xml.etree.ElementTree as ET

from PyResxTrans.ResourceError import ResourceParseError
from PyResxTrans.ResourceFileHandler import ResourceFileHandler
from PyResxTrans.ResourceTable import ResourceEntry

XML_SPACE = '{http://www.w3.org/XML/1998/namespace}space'

string_type_prefix = 'System.String'

resx_headers : list[tuple[str, str]] = [
    ('resmimetype', 'text/microsoft-resx'),
    ('version', '2.0'),
    ('reader', 'System.Resources.ResXResourceReader, System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089'),
    ('writer', 'System.Resources.ResXResourceWriter, System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089'),
]

class ResxFileHandler(ResourceFileHandler):
    """
    File handler for .NET XML resource files (.resx).

    Only <data> elements are read. Elements with a mimetype or a type other
    than System.String hold serialized objects and are marked as non-text.
    """

    def parse_file(self, file_obj: TextIO) -> Iterator[ResourceEntry]:
        yield from self.parse_string(file_obj.read())

    def parse_string(self, content: str) -> Iterator[ResourceEntry]:
        try:
            root = ET.fromstring(content)

        except ET.ParseError as e:
            raise ResourceParseError(f"Failed to parse resx: {e}", error=e)

        if root.tag != 'root':
            raise ResourceParseError(f"Not a resx file: unexpected root element <{root.tag}>")

        for data in root.findall('data'):
            key = data.get('name')
            if not key:
                raise ResourceParseError("Resource entry without a name")

            value_element = data.find('value')
            comment_element = data.find('comment')

            yield ResourceEntry(
                key=key,
                value=(value_element.text or '') if value_element is not None else '',
                is_text=self._is_text_entry(data),
                comment=comment_element.text if comment_element is not None else None
            )

    def compose_entries(self, entries: list[ResourceEntry]) -> str:
        root = ET.Element('root')

        for name, value in resx_headers:
            header = ET.SubElement(root, 'resheader', name=name)
            ET.SubElement(header, 'value').text = value

        for entry in entries:
            data = ET.SubElement(root, 'data', { 'name': entry.key, XML_SPACE: 'preserve' })
            ET.SubElement(data, 'value').text = entry.value
            if entry.comment:
                ET.SubElement(data, 'comment').text = entry.comment

        ET.indent(root, space="  ")

        content = ET.tostring(root, encoding='unicode')
        return f'<?xml version="1.0" encoding="utf-8"?>\n{content}\n'

    def get_file_extensions(self) -> list[str]:
        return ['.resx']

    def _is_text_entry(self, data : ET.Element) -> bool:
        if data.get('mimetype'):
            return False

        data_type = data.get('type')
        return not data_type or data_type.startswith(string_type_prefix)
