import json
import unittest
import xml.etree.ElementTree as ET

from PyResxTrans.Formats import GetFileHandler
from PyResxTrans.Formats.JsonFileHandler import JsonFileHandler
from PyResxTrans.Formats.ResxFileHandler import ResxFileHandler
from PyResxTrans.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name
from PyResxTrans.ResourceError import ResourceParseError
from PyResxTrans.ResourceTable import ResourceEntry

sample_resx = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <xsd:schema id="root" xmlns="" xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:msdata="urn:schemas-microsoft-com:xml-msdata">
    <xsd:element name="root" msdata:IsDataSet="true">
      <xsd:complexType>
        <xsd:choice maxOccurs="unbounded">
          <xsd:element name="data">
            <xsd:complexType>
              <xsd:attribute name="name" type="xsd:string" />
            </xsd:complexType>
          </xsd:element>
        </xsd:choice>
      </xsd:complexType>
    </xsd:element>
  </xsd:schema>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <data name="greeting" xml:space="preserve">
    <value>Hello &amp; welcome</value>
    <comment>Shown on the start page</comment>
  </data>
  <data name="$this.Text" xml:space="preserve">
    <value>Main Form</value>
  </data>
  <data name="&gt;&gt;button1.Type" xml:space="preserve">
    <value>System.Windows.Forms.Button, System.Windows.Forms</value>
  </data>
  <data name="button1.Location" type="System.Drawing.Point, System.Drawing">
    <value>12, 34</value>
  </data>
  <data name="icon" mimetype="application/x-microsoft.net.object.bytearray.base64">
    <value>AAABAAEAEBA=</value>
  </data>
  <data name="label.Text" type="System.String, mscorlib">
    <value>  Name:  </value>
  </data>
  <data name="empty" xml:space="preserve">
    <value />
  </data>
</root>
"""

class TestResxFileHandler(unittest.TestCase):
    def setUp(self):
        self.handler = ResxFileHandler()

    def test_Parse(self):
        log_test_name("Parse resx")
        entries = list(self.handler.parse_string(sample_resx))

        keys = [entry.key for entry in entries]
        expected = ["greeting", "$this.Text", ">>button1.Type", "button1.Location", "icon", "label.Text", "empty"]
        log_input_expected_result("sample_resx", expected, keys)
        self.assertEqual(keys, expected)

        lookup = { entry.key : entry for entry in entries }
        self.assertEqual(lookup["greeting"].value, "Hello & welcome")
        self.assertEqual(lookup["greeting"].comment, "Shown on the start page")
        self.assertEqual(lookup["label.Text"].value, "  Name:  ")
        self.assertEqual(lookup["empty"].value, "")
        self.assertTrue(lookup["greeting"].is_text)
        self.assertTrue(lookup["label.Text"].is_text)
        self.assertFalse(lookup["button1.Location"].is_text)
        self.assertFalse(lookup["icon"].is_text)
        self.assertTrue(lookup[">>button1.Type"].is_metadata)

    def test_ParseErrors(self):
        log_test_name("Parse resx errors")
        bad_inputs = [
            "<root><data name='a'><value>A</value></root>",
            "not xml at all",
            "<resources><string name='a'>A</string></resources>",
            "<root><data><value>A</value></data></root>",
        ]

        for content in bad_inputs:
            with self.subTest(content=content):
                with self.assertRaises(ResourceParseError) as cm:
                    list(self.handler.parse_string(content))

                log_input_expected_error(content, ResourceParseError, cm.exception)

    def test_Compose(self):
        log_test_name("Compose resx")
        entries = [
            ResourceEntry("greeting", "Bonjour <tout le monde> & co"),
            ResourceEntry("label", "  Nom :  ", comment="Label"),
        ]

        content = self.handler.compose_entries(entries)

        self.assertTrue(content.startswith('<?xml version="1.0" encoding="utf-8"?>'))

        root = ET.fromstring(content)
        self.assertEqual(root.tag, 'root')
        headers = { header.get('name') : header.findtext('value') for header in root.findall('resheader') }
        self.assertEqual(headers['resmimetype'], 'text/microsoft-resx')
        self.assertEqual(headers['version'], '2.0')

        data = root.findall('data')
        self.assertEqual([element.get('name') for element in data], ["greeting", "label"])
        self.assertEqual(data[0].get('{http://www.w3.org/XML/1998/namespace}space'), 'preserve')
        self.assertIsNone(data[0].find('comment'))
        self.assertEqual(data[1].findtext('comment'), "Label")

        parsed = list(self.handler.parse_string(content))
        log_input_expected_result(entries, entries, parsed)
        self.assertEqual(parsed, entries)

class TestJsonFileHandler(unittest.TestCase):
    def setUp(self):
        self.handler = JsonFileHandler()

    def test_Parse(self):
        log_test_name("Parse json")
        content = '{ "greeting": "Hello", "count": 3, "options": { "a": 1 }, "blank": "" }'

        entries = list(self.handler.parse_string(content))

        expected = [
            ResourceEntry("greeting", "Hello"),
            ResourceEntry("count", "3", is_text=False),
            ResourceEntry("options", '{"a": 1}', is_text=False),
            ResourceEntry("blank", ""),
        ]
        log_input_expected_result(content, expected, entries)
        self.assertEqual(entries, expected)

    def test_ParseErrors(self):
        log_test_name("Parse json errors")
        for content in ['{ "a": ', '["a", "b"]', '"text"']:
            with self.subTest(content=content):
                with self.assertRaises(ResourceParseError) as cm:
                    list(self.handler.parse_string(content))

                log_input_expected_error(content, ResourceParseError, cm.exception)

    def test_Compose(self):
        log_test_name("Compose json")
        entries = [
            ResourceEntry("greeting", "Grüß dich"),
            ResourceEntry("count", "3", is_text=False),
        ]

        content = self.handler.compose_entries(entries)

        self.assertIn("Grüß dich", content)
        self.assertTrue(content.endswith('\n'))
        self.assertEqual(json.loads(content), { "greeting": "Grüß dich", "count": 3 })

class TestGetFileHandler(unittest.TestCase):
    def test_GetFileHandler(self):
        log_test_name("GetFileHandler")
        cases = [
            (("Strings.resx", None), ResxFileHandler),
            (("Strings.RESX", None), ResxFileHandler),
            (("Strings.json", None), JsonFileHandler),
            (("Strings.json", "resx"), ResxFileHandler),
            (("Strings.resx", "JSON"), JsonFileHandler),
            (("Strings.resx", "yaml"), ResxFileHandler),
            (("Strings.txt", None), ResxFileHandler),
            ((None, None), ResxFileHandler),
        ]

        for (filepath, format_name), expected in cases:
            with self.subTest(filepath=filepath, format_name=format_name):
                handler = GetFileHandler(filepath, format_name)
                log_input_expected_result((filepath, format_name), expected.__name__, type(handler).__name__)
                self.assertIsInstance(handler, expected)

if __name__ == '__main__':
    unittest.main()
