# Copyright 2025 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT
from typing import List

import binary2strings as b2s

MIN_STRING_LENGTH = 4


def extract_strings(data: bytes, min_len: int = MIN_STRING_LENGTH) -> List[str]:
    """
    Extract printable ASCII strings from binary data using binary2strings.

    Args:
        data (bytes): Raw file contents.
        min_len (int): Minimum length of strings to be considered valid.

    Returns:
        List[str]: The strings found, in the order they appear in the data.
    """
    found = []
    for string, _type, _span, _is_interesting in b2s.extract_all_strings(data):
        # binary2strings also reports UTF-8 and wide strings; only plain ASCII paths matter here
        if len(string) >= min_len and string.isascii() and string.isprintable():
            found.append(string)
    return found


def searchable_text(data: bytes, min_len: int = MIN_STRING_LENGTH) -> str:
    """Return text that can be searched for embedded paths.

    Valid UTF-8 is returned as-is; anything else is reduced to its embedded strings, one
    per line, the way `strings` would print them.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return "\n".join(extract_strings(data, min_len))
