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

"""Validation of International Standard Product Numbers: ISBN, ISSN, ISMN,
EAN/UCC-8, EAN/UCC-13, EAN/UCC-14, UCC-12 (U.P.C.) and SSCC.

Every function takes the identifier as a string and returns True if it is
well formed and its check digit is correct, False otherwise."""

from oc.ispn.identifier.control import (
    check_control_number,
    get_control_number,
    process,
)
from oc.ispn.identifier.isbn import ISBNManager
from oc.ispn.identifier.issn import ISSNManager
from oc.ispn.identifier.ismn import ISMNManager
from oc.ispn.identifier.ean import (
    EAN8Manager,
    EAN13Manager,
    EAN14Manager,
    UCC12Manager,
    SSCCManager,
)

__all__ = [
    "isbn",
    "issn",
    "ismn",
    "ean8",
    "ean13",
    "ean14",
    "ucc12",
    "sscc",
    "process",
    "check_control_number",
    "get_control_number",
]

_isbn = ISBNManager()
_issn = ISSNManager()
_ismn = ISMNManager()
_ean8 = EAN8Manager()
_ean13 = EAN13Manager()
_ean14 = EAN14Manager()
_ucc12 = UCC12Manager()
_sscc = SSCCManager()


def isbn(id_string):
    """ISBN-10, e.g. "ISBN 0-306-40615-2". The "ISBN" prefix is mandatory."""
    return _isbn.is_valid(id_string)


def issn(id_string):
    """ISSN, e.g. "0317-8471" or "ISSN 1474-175X"."""
    return _issn.is_valid(id_string)


def ismn(id_string):
    """ISMN, e.g. "ISMN M-2306-7118-7"."""
    return _ismn.is_valid(id_string)


def ean8(id_string):
    return _ean8.is_valid(id_string)


def ean13(id_string):
    return _ean13.is_valid(id_string)


def ean14(id_string):
    return _ean14.is_valid(id_string)


def ucc12(id_string):
    """UCC-12, the U.P.C. barcode number."""
    return _ucc12.is_valid(id_string)


def sscc(id_string):
    """SSCC, the Serial Shipping Container Code of logistic units."""
    return _sscc.is_valid(id_string)
