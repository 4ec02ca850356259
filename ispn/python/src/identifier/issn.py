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
from oc.ispn.identifier.control import (
    FORMATS,
    WEIGHTS,
    check_control_number,
    strip_formatting,
    strip_prefix,
)


class ISSNManager(IdentifierManager):
    """This class implements an identifier manager for issn identifier"""

    def __init__(self):
        """ISSN manager constructor."""
        self._p = "issn:"
        super(ISSNManager, self).__init__()

    def is_valid(self, id_string):
        """It returns the validity of an issn.

        Args:
            id_string (str): the issn to validate

        Returns:
            bool: true if the issn is valid, false otherwise.
        """
        issn = self.normalise(id_string)
        if issn is None:
            return self._reject(id_string, "not a string")

        length, modulo, subtract = FORMATS["issn"]
        issn_num = issn.replace("X", "0")
        if not (issn_num.isascii() and issn_num.isdigit()) or len(issn) != length:
            return self._reject(id_string, "8 digits expected")

        if not check_control_number(issn, WEIGHTS["issn"], modulo, subtract):
            return self._reject(id_string, "wrong check digit")
        return True

    def normalise(self, id_string, include_prefix=False):
        """It normalizes the ISSN.

        Args:
            id_string (str): the issn to normalize.
            include_prefix (bool, optional): indicates if include the prefix. Defaults to False.

        Returns:
            str: the normalized issn
        """
        try:
            issn_string = strip_prefix(strip_formatting(id_string.upper()), "ISSN")
            return "%s%s" % (self._p if include_prefix else "", issn_string)
        except AttributeError:  # Any non string ISSN will return None
            return None
