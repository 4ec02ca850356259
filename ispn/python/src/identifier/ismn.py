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


class ISMNManager(IdentifierManager):
    """This class implements an identifier manager for ismn identifier. The
    leading "M" of a ten characters ISMN is read as the digit 3, which makes
    the check digit computation the same of the EAN family."""

    def __init__(self):
        """ISMN manager constructor."""
        self._p = "ismn:"
        super(ISMNManager, self).__init__()

    def is_valid(self, id_string):
        """It returns the validity of an ismn.

        Args:
            id_string (str): the ismn to validate (e.g. "ISMN M-2306-7118-7")

        Returns:
            bool: true if the ismn is valid, false otherwise.
        """
        ismn = self.normalise(id_string)
        if ismn is None:
            return self._reject(id_string, "not a string")

        length, modulo, subtract = FORMATS["ismn"]
        if not (ismn.isascii() and ismn.isdigit()) or len(ismn) != length:
            return self._reject(id_string, "10 digits expected")

        if not check_control_number(ismn, WEIGHTS["ismn"], modulo, subtract):
            return self._reject(id_string, "wrong check digit")
        return True

    def normalise(self, id_string, include_prefix=False):
        """It normalizes the ISMN, replacing the leading "M" with "3".

        Args:
            id_string (str): the ismn to normalize.
            include_prefix (bool, optional): indicates if include the prefix. Defaults to False.

        Returns:
            str: the normalized ismn
        """
        try:
            ismn_string = strip_prefix(strip_formatting(id_string), "ISMN")
            if ismn_string[:1] in ("M", "m"):
                ismn_string = "3" + ismn_string[1:]
            return "%s%s" % (self._p if include_prefix else "", ismn_string)
        except AttributeError:  # Any non string ISMN will return None
            return None
