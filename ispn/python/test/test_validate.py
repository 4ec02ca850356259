#!python
# Copyright (c) 2022 The OpenCitations Index Authors.
#
# Permission to use, copy, modify, and/or distribute this software for any purpose
# with or without fee is hereby granted, provided that the above copyright notice
# and this permission notice appear in all copies.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES WITH
# REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF MERCHANTABILITY AND
# FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY SPECIAL, DIRECT, INDIRECT,
# OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES WHATSOEVER RESULTING FROM LOSS OF USE,
# DATA OR PROFITS, WHETHER IN AN ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS
# ACTION, ARISING OUT OF OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS
# SOFTWARE.

import configparser
import shutil
import unittest

from csv import DictReader
from os.path import dirname, exists, join
from tempfile import TemporaryDirectory
from unittest.mock import patch

from oc.ispn.identifier.ean import EAN8Manager, EAN13Manager
from oc.ispn.identifier.isbn import ISBNManager
from oc.ispn.validate.base import SCHEMES, get_manager
from oc.ispn.validate.batch import BatchValidator


class ValidateTest(unittest.TestCase):
    """This class aim at testing the methods of the classes
    belonging to package oc.ispn.validate"""

    def setUp(self):
        self.test_dir = join(dirname(__file__), "data")
        self.isbn_input = join(self.test_dir, "isbn.csv")
        self.ean13_input = join(self.test_dir, "ean13.csv")
        self.tmp = TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_get_manager(self):
        self.assertIsInstance(get_manager("isbn"), ISBNManager)
        self.assertIsInstance(get_manager("EAN13"), EAN13Manager)
        for scheme in SCHEMES:
            self.assertTrue(callable(get_manager(scheme).is_valid))
        with self.assertRaises(ValueError):
            get_manager("isbn13")

    def test_get_manager_from_config(self):
        config = configparser.ConfigParser()
        config.read_dict({"ean13": {"manager": "oc.ispn.identifier.ean:EAN8Manager"}})
        with patch("oc.ispn.validate.base.get_config", return_value=config):
            self.assertIsInstance(get_manager("ean13"), EAN8Manager)
            self.assertIsInstance(get_manager("isbn"), ISBNManager)

    def test_validate_file(self):
        output = join(self.tmp.name, "isbn.csv")
        validator = BatchValidator("isbn")
        self.assertEqual((2, 3), validator.validate_file(self.isbn_input, output, True))

        with open(output, encoding="utf-8") as f:
            rows = list(DictReader(f))
        self.assertEqual(5, len(rows))
        self.assertEqual(["True", "True", "False", "False", "False"], [r["valid"] for r in rows])
        self.assertEqual("Frankenstein", rows[1]["title"])

    def test_validate_file_in_chunks(self):
        output = join(self.tmp.name, "isbn.csv")
        validator = BatchValidator("isbn")
        validator._chunksize = 2
        self.assertEqual((2, 3), validator.validate_file(self.isbn_input, output, True))

        with open(output, encoding="utf-8") as f:
            rows = list(DictReader(f))
        self.assertEqual(5, len(rows))

    def test_validate_file_column(self):
        validator = BatchValidator("ean13", column="ean")
        self.assertEqual((1, 2), validator.validate_file(self.ean13_input, disable_tqdm=True))

        with self.assertRaises(KeyError):
            BatchValidator("ean13").validate_file(self.ean13_input, disable_tqdm=True)

    def test_validate_directory(self):
        input_dir = join(self.tmp.name, "input")
        output_dir = join(self.tmp.name, "output")
        shutil.copytree(self.test_dir, input_dir, ignore=shutil.ignore_patterns("ean13.csv"))

        summary = BatchValidator("isbn").validate_directory(input_dir, output_dir, True)
        self.assertEqual({"isbn.csv": (2, 3)}, summary)
        self.assertTrue(exists(join(output_dir, "isbn.csv")))

    def test_validate_directory_with_empty_file(self):
        input_dir = join(self.tmp.name, "input")
        output_dir = join(self.tmp.name, "output")
        shutil.copytree(self.test_dir, input_dir, ignore=shutil.ignore_patterns("ean13.csv"))
        open(join(input_dir, "a.csv"), "w").close()

        with self.assertLogs("opencitations.ispn", level="WARNING") as cm:
            summary = BatchValidator("isbn").validate_directory(input_dir, output_dir, True)
        self.assertEqual({"a.csv": (0, 0), "isbn.csv": (2, 3)}, summary)
        self.assertTrue(exists(join(output_dir, "isbn.csv")))
        self.assertFalse(exists(join(output_dir, "a.csv")))
        self.assertIn("empty file", cm.output[0])
