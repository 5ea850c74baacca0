import os
import unittest
from unittest.mock import patch

from PyResxTrans.Formats.JsonFileHandler import JsonFileHandler
from PyResxTrans.Formats.ResxFileHandler import ResxFileHandler
from PyResxTrans.Helpers.TestCases import ResourceTestCase
from PyResxTrans.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name
from PyResxTrans.ResourceError import MissingInputFileError, ResourceParseError
from PyResxTrans.ResourceTable import ResourceEntry, ResourceTable, LoadResourceTable, LoadResourceTableIfExists, SaveResourceTable

class TestResourceTable(unittest.TestCase):
    def test_FilterTranslatable(self):
        log_test_name("FilterTranslatable")
        table = ResourceTable.FromDict({
            "$meta": "x",
            ">>type": "y",
            "greeting": "hi",
            "$this.Text": "Form Title",
            "blank": "",
        })

        result = table.FilterTranslatable(include_blank=False)

        expected = { "$this.Text": "Form Title", "greeting": "hi" }
        log_input_expected_result(table, expected, result.ToDict())
        self.assertEqual(result.ToDict(), expected)

    def test_FilterIncludeBlank(self):
        log_test_name("FilterTranslatable with blanks")
        table = ResourceTable.FromDict({ "blank": "", "$blank": "", "$this.Text": "", "greeting": "hi" })

        self.assertEqual(table.FilterTranslatable(include_blank=True).ToDict(), { "$this.Text": "", "blank": "", "greeting": "hi" })
        self.assertEqual(table.FilterTranslatable(include_blank=False).ToDict(), { "$this.Text": "", "greeting": "hi" })

    def test_FilterNonText(self):
        log_test_name("FilterTranslatable skips non-text")
        table = ResourceTable([
            ResourceEntry("icon", "AAAB", is_text=False),
            ResourceEntry("$this.Text", "Title", is_text=False),
            ResourceEntry("label", "Label"),
        ])

        self.assertEqual(table.FilterTranslatable().keys, ["label"])

    def test_FilterSortsByKey(self):
        log_test_name("FilterTranslatable ordering")
        table = ResourceTable.FromDict({ "zebra": "Z", "Apple": "A", "mango": "M", "banana": "B" })

        result = table.FilterTranslatable()

        expected = ["Apple", "banana", "mango", "zebra"]
        log_input_expected_result(table.keys, expected, result.keys)
        self.assertEqual(result.keys, expected)
        self.assertEqual(table.keys, ["zebra", "Apple", "mango", "banana"])

    def test_DuplicateKeys(self):
        log_test_name("Duplicate keys")
        table = ResourceTable([ResourceEntry("a", "1"), ResourceEntry("b", "2"), ResourceEntry("a", "3")])

        self.assertEqual(len(table), 2)
        self.assertEqual(table.keys, ["a", "b"])
        self.assertEqual(table.GetValue("a"), "3")

    def test_Lookup(self):
        table = ResourceTable.FromDict({ "a": "A" })
        self.assertIn("a", table)
        self.assertNotIn("b", table)
        self.assertEqual(table["a"].value, "A")
        self.assertIsNone(table.GetValue("b"))
        self.assertEqual(table.GetValue("b", "default"), "default")
        self.assertFalse(ResourceTable())

    def test_Equality(self):
        self.assertEqual(ResourceTable.FromDict({ "a": "A", "b": "B" }), ResourceTable.FromDict({ "a": "A", "b": "B" }))
        self.assertNotEqual(ResourceTable.FromDict({ "a": "A", "b": "B" }), ResourceTable.FromDict({ "b": "B", "a": "A" }))
        self.assertNotEqual(ResourceTable.FromDict({ "a": "A" }), ResourceTable.FromDict({ "a": "X" }))

class TestResourceFiles(ResourceTestCase):
    def test_LoadMissingFile(self):
        log_test_name("Load missing file")
        path = os.path.join(self.directory, "Missing.resx")

        with self.assertRaises(MissingInputFileError) as cm:
            LoadResourceTable(path, ResxFileHandler())

        log_input_expected_error(path, MissingInputFileError, cm.exception)
        self.assertIsNone(LoadResourceTableIfExists(path, ResxFileHandler()))

    def test_LoadMalformedFile(self):
        log_test_name("Load malformed file")
        path = self.WriteFile("Broken.resx", "<root><data name='a'><value>A</value></root>")

        with self.assertRaises(ResourceParseError) as cm:
            LoadResourceTableIfExists(path, ResxFileHandler())

        log_input_expected_error(path, ResourceParseError, cm.exception)
        self.assertEqual(cm.exception.path, path)

    def test_SaveAndLoad(self):
        log_test_name("Save and load")
        path = os.path.join(self.directory, "Strings.fr.json")
        table = ResourceTable.FromDict({ "b": "Bonjour", "a": "Au revoir" })

        SaveResourceTable(path, table, JsonFileHandler())
        loaded = LoadResourceTable(path, JsonFileHandler())

        log_input_expected_result(path, table, loaded)
        self.assertEqual(loaded, table)
        self.assertEqual(os.listdir(self.directory), ["Strings.fr.json"])

    def test_SaveOverwrites(self):
        log_test_name("Save overwrites existing file")
        path = self.WriteFile("Strings.de.json", '{ "old": "Alt" }')

        SaveResourceTable(path, ResourceTable.FromDict({ "new": "Neu" }), JsonFileHandler())

        self.assertEqual(LoadResourceTable(path, JsonFileHandler()).ToDict(), { "new": "Neu" })

    def test_FailedSaveLeavesFileIntact(self):
        log_test_name("Failed save leaves existing file intact")
        original = '{ "old": "Alt" }'
        path = self.WriteFile("Strings.de.json", original)

        with patch('PyResxTrans.ResourceTable.os.replace', side_effect=OSError("disk full")):
            with self.assertRaises(OSError):
                SaveResourceTable(path, ResourceTable.FromDict({ "new": "Neu" }), JsonFileHandler())

        self.assertEqual(self.ReadFile(path), original)
        self.assertEqual(os.listdir(self.directory), ["Strings.de.json"])

    def test_FallbackEncoding(self):
        log_test_name("Fallback encoding")
        path = os.path.join(self.directory, "Latin.json")
        with open(path, 'w', encoding='iso-8859-1') as f:
            f.write('{ "greeting": "Olá" }')

        table = LoadResourceTable(path, JsonFileHandler())
        self.assertEqual(table.GetValue("greeting"), "Olá")

    def test_FallbackEncodingParseError(self):
        log_test_name("Parse error after fallback encoding")
        path = os.path.join(self.directory, "Latin.json")
        with open(path, 'w', encoding='iso-8859-1') as f:
            f.write('{ "greeting": "Olá" ')

        with self.assertRaises(ResourceParseError) as cm:
            LoadResourceTable(path, JsonFileHandler())

        log_input_expected_error(path, ResourceParseError, cm.exception)
        self.assertEqual(cm.exception.path, path)

if __name__ == '__main__':
    unittest.main()
