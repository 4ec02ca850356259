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
from oc.ispn.identifier.control import FORMATS, WEIGHTS, process, strip_formatting


class EANManager(IdentifierManager):
    """This class implements an identifier manager for the EAN/UCC family of
    trade item numbers, which share a modulo 10 check digit and differ only in
    their length and weights."""

    def __init__(self, scheme):
        """EAN manager constructor.

        Args:
            scheme (str): one of "ean8", "ean13", "ean14", "ucc12" or "sscc"
        """
        super(EANManager, self).__init__()
        self._p = scheme + ":"
        self._length, self._modulo, self._subtract = FORMATS[scheme]
        self._weights = WEIGHTS[scheme]

    def is_valid(self, id_string):
        if not isinstance(id_string, str):
            return self._reject(id_string, "not a string")
        if not process(
            id_string, self._length, self._weights, self._modulo, self._subtract
        ):
            return self._reject(id_string, "wrong length or check digit")
        return True

    def normalise(self, id_string, include_prefix=False):
        try:
            return "%s%s" % (
                self._p if include_prefix else "",
                strip_formatting(id_string),
            )
        except AttributeError:
            return None


class EAN8Manager(EANManager):
    def __init__(self):
        super(EAN8Manager, self).__init__("ean8")


class EAN13Manager(EANManager):
    def __init__(self):
        super(EAN13Manager, self).__init__("ean13")


class EAN14Manager(EANManager):
    def __init__(self):
        super(EAN14Manager, self).__init__("ean14")


class UCC12Manager(EANManager):
    """UCC-12, better known as U.P.C."""

    def __init__(self):
        super(UCC12Manager, self).__init__("ucc12")


class SSCCManager(EANManager):
    """Serial Shipping Container Code, used to identify logistic units."""

    def __init__(self):
        super(SSCCManager, self).__init__("sscc")
