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

import importlib

from oc.ispn.utils.config import get_config

SCHEMES = {
    "isbn": "oc.ispn.identifier.isbn:ISBNManager",
    "issn": "oc.ispn.identifier.issn:ISSNManager",
    "ismn": "oc.ispn.identifier.ismn:ISMNManager",
    "ean8": "oc.ispn.identifier.ean:EAN8Manager",
    "ean13": "oc.ispn.identifier.ean:EAN13Manager",
    "ean14": "oc.ispn.identifier.ean:EAN14Manager",
    "ucc12": "oc.ispn.identifier.ean:UCC12Manager",
    "sscc": "oc.ispn.identifier.ean:SSCCManager",
}


def get_manager(scheme):
    """It returns the identifier manager of a scheme. The class can be
    overridden with the option "manager" of the scheme section in the
    configuration, written as "module:classname".

    Args:
        scheme (str): the scheme name, e.g. "ean13"

    Raises:
        ValueError: if the scheme is not supported

    Returns:
        IdentifierManager: a new manager for the scheme
    """
    scheme = scheme.lower()
    if scheme not in SCHEMES:
        raise ValueError("Unsupported identifier scheme: " + scheme)

    module, classname = (
        get_config().get(scheme, "manager", fallback=SCHEMES[scheme]).split(":")
    )
    return getattr(importlib.import_module(module), classname)()
