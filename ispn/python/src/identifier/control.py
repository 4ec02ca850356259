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

from oc.ispn.utils.logging import get_logger

FORMATTING = ("-", "/", " ", "\t", "\n")

WEIGHTS = {
    "issn": (8, 7, 6, 5, 4, 3, 2),
    "ismn": (3, 1, 3, 1, 3, 1, 3, 1, 3),
    "ean8": (3, 1, 3, 1, 3, 1, 3),
    "ean13": (1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3),
    "ean14": (3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3),
    "ucc12": (3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3),
    "sscc": (3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3),
}

# scheme -> (length, modulo, subtract)
FORMATS = {
    "issn": (8, 11, 11),
    "ismn": (10, 10, 10),
    "ean8": (8, 10, 10),
    "ean13": (13, 10, 10),
    "ean14": (14, 10, 10),
    "ucc12": (12, 10, 10),
    "sscc": (18, 10, 10),
}


def strip_formatting(id_string):
    """It removes the formatting characters (hyphen, slash, space, tab and
    newline) from an identifier.

    Args:
        id_string (str): the identifier to clean

    Returns:
        str: the identifier without formatting characters
    """
    for c in FORMATTING:
        id_string = id_string.replace(c, "")
    return id_string


def strip_prefix(id_string, prefix):
    """It removes a leading, case-insensitive, occurrence of prefix."""
    if id_string.upper().startswith(prefix.upper()):
        return id_string[len(prefix) :]
    return id_string


def multiply_weights(number, weights):
    """It returns the sum of the digits of number multiplied by the weight
    in the same position. Positions beyond the weights are not considered.

    Args:
        number (str): the digits
        weights (tuple): the weights to apply

    Returns:
        int: the weighted sum
    """
    return sum(int(digit) * w for digit, w in zip(number, weights))


def get_control_number(number, weights, modulo=10, subtract=10):
    """It computes the control number expected for the digits covered by weights.

    Args:
        number (str): the digits, the control digit may be present or not
        weights (tuple): the weights to apply
        modulo (int, optional): the modulus. Defaults to 10.
        subtract (int, optional): the value the remainder is subtracted from. Defaults to 10.

    Returns:
        int: the control number, 10 is possible only when modulo is greater than 10
    """
    _, mod = divmod(multiply_weights(number, weights), modulo)
    return (subtract - mod) % modulo


def check_control_number(number, weights, modulo=10, subtract=10):
    """It checks the last character of number against the control number
    computed on the previous digits. An "X" in last position stands for 10.

    Args:
        number (str): the digits including the control digit
        weights (tuple): the weights, one for each digit but the control one
        modulo (int, optional): the modulus. Defaults to 10.
        subtract (int, optional): the value the remainder is subtracted from. Defaults to 10.

    Returns:
        bool: true if the control digit is correct, false otherwise
    """
    if (
        len(number) != len(weights) + 1
        or not number.isascii()
        or (len(number) > 1 and not number[:-1].isdigit())
    ):
        return False

    target = number[-1]
    control = get_control_number(number, weights, modulo, subtract)
    if target == "X":
        return control == 10
    return target.isdigit() and control == int(target)


def process(data, length, weights, modulo=10, subtract=10):
    """It validates a purely numeric identifier of the given length. It does all
    the work for EAN-8, EAN-13, EAN-14, UCC-12 and SSCC and can be reused for any
    similar weighted checksum.

    Args:
        data (str): the identifier
        length (int): the required number of digits
        weights (tuple): the weights to apply to all but the last digit
        modulo (int, optional): the modulus. Defaults to 10.
        subtract (int, optional): the value the remainder is subtracted from. Defaults to 10.

    Returns:
        bool: true if the identifier is valid, false otherwise
    """
    data = strip_formatting(data)
    if not (data.isascii() and data.isdigit()) or len(data) != length:
        get_logger().debug("Rejected %r: %d digits expected", data, length)
        return False
    return check_control_number(data, weights, modulo, subtract)
