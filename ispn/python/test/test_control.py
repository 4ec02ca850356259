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

import unittest

from oc.ispn import check_control_number, get_control_number, process
from oc.ispn.identifier.control import (
    FORMATS,
    WEIGHTS,
    multiply_weights,
    strip_formatting,
    strip_prefix,
)


class ControlNumberTest(unittest.TestCase):
    """This class aim at testing the weighted modulo check shared by the
    product number schemes."""

    def test_weight_tables(self):
        for scheme, weights in WEIGHTS.items():
            length, _, _ = FORMATS[scheme]
            self.assertEqual(length - 1, len(weights), scheme)

    def test_strip_formatting(self):
        self.assertEqual("4006381333931", strip_formatting("4006-381/333 9\t3\n1"))
        clean = strip_formatting(" 0317-8471 ")
        self.assertEqual(clean, strip_formatting(clean))

    def test_strip_prefix(self):
        self.assertEqual("03178471", strip_prefix("issn03178471", "ISSN"))
        self.assertEqual("03178471", strip_prefix("03178471", "ISSN"))
        self.assertEqual("0317ISSN", strip_prefix("0317ISSN", "ISSN"))

    def test_multiply_weights(self):
        self.assertEqual(89, multiply_weights("4006381333931", WEIGHTS["ean13"]))
        self.assertEqual(120, multiply_weights("03178471", WEIGHTS["issn"]))

    def test_get_control_number(self):
        self.assertEqual(1, get_control_number("400638133393", WEIGHTS["ean13"]))
        self.assertEqual(7, get_control_number("10614141123456789", WEIGHTS["sscc"]))
        self.assertEqual(1, get_control_number("0317847", WEIGHTS["issn"], 11, 11))
        self.assertEqual(10, get_control_number("1474175", WEIGHTS["issn"], 11, 11))
        # A remainder of 0 gives 0, not the modulo
        self.assertEqual(0, get_control_number("0000000", WEIGHTS["ean8"]))

    def test_check_control_number(self):
        self.assertTrue(check_control_number("4006381333931", WEIGHTS["ean13"]))
        self.assertFalse(check_control_number("4006381333930", WEIGHTS["ean13"]))
        self.assertTrue(check_control_number("1474175X", WEIGHTS["issn"], 11, 11))
        self.assertFalse(check_control_number("14741750", WEIGHTS["issn"], 11, 11))
        self.assertFalse(check_control_number("9638507X", WEIGHTS["ean8"]))
        self.assertFalse(check_control_number("963850740", WEIGHTS["ean8"]))
        self.assertFalse(check_control_number("9638507", WEIGHTS["ean8"]))
        self.assertFalse(check_control_number("96A85074", WEIGHTS["ean8"]))

    def test_check_control_number_without_weights(self):
        # Only the control digit, with a zero weighted sum
        self.assertTrue(check_control_number("0", ()))
        self.assertFalse(check_control_number("7", ()))
        self.assertFalse(check_control_number("", ()))

    def test_process(self):
        weights = WEIGHTS["ean13"]
        self.assertTrue(process("4006381333931", 13, weights))
        self.assertTrue(process("4006-381-333-931\n", 13, weights))
        self.assertFalse(process("4006381333932", 13, weights))
        self.assertFalse(process("4006381333931", 12, weights))
        self.assertFalse(process("4006381333931", 14, weights))
        self.assertFalse(process("40063813339310", 13, weights))
        self.assertFalse(process("", 13, weights))
        self.assertFalse(process("400638133393¹", 13, weights))

    def test_process_other_parameters(self):
        self.assertTrue(process("0317-8471", 8, WEIGHTS["issn"], 11, 11))
        self.assertFalse(process("1474-175X", 8, WEIGHTS["issn"], 11, 11))
