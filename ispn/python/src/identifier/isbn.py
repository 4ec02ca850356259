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

from oc.ispn.identifier.base import IdentifierManager
from oc.ispn.identifier.control import strip_formatting, strip_prefix

ALPHABET = frozenset("0123456789 IXSBN-")


class ISBNManager(IdentifierManager):
    """This class implements an identifier manager for ISBN-10 identifiers,
    written with the literal "ISBN" in front (e.g. "ISBN 0-306-40615-2")."""

    def __init__(self):
        super(ISBNManager, self).__init__()
        self._p = "isbn:"

    def is_valid(self, id_string):
        if not isinstance(id_string, str):
            return self._reject(id_string, "not a string")
        if not set(id_string) <= ALPHABET:
            return self._reject(id_string, "invalid characters")
        if not id_string.startswith("ISBN"):
            return self._reject(id_string, "missing ISBN prefix")

        isbn = self.normalise(id_string)
        if len(isbn) != 10:
            return self._reject(id_string, "10 characters expected")
        if not isbn[:9].isdigit() or not (isbn[9].isdigit() or isbn[9] == "X"):
            return self._reject(id_string, "9 digits and a digit or X expected")

        if not ISBNManager.__check_digit(isbn):
            return self._reject(id_string, "wrong check digit")
        return True

    def normalise(self, id_string, include_prefix=False):
        try:
            isbn_string = strip_prefix(strip_formatting(id_string).upper(), "ISBN")
            return "%s%s" % (self._p if include_prefix else "", isbn_string)
        except AttributeError:  # Not a string
            return None

    @staticmethod
    def __check_digit(isbn):
        total = sum(int(x) * (10 - i) for i, x in enumerate(isbn[:9]))
        total += 10 if isbn[9] == "X" else int(isbn[9])
        return total % 11 == 0
