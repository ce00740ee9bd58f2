# Copyright 2025 David Corbett
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Checking transcriptions against fonts.

Only the character map is read. Whether a font actually forms the
ligatures a transcription asks for is up to the font.
"""


from __future__ import annotations


__all__ = [
    'load_cmap',
    'missing_characters',
]


import unicodedata
from typing import TYPE_CHECKING

import fontTools.ttLib
import fontTools.ttLib.ttFont


if TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Sequence
    import os


def load_cmap(path: str | os.PathLike[str]) -> Mapping[int, str]:
    """Loads the Unicode character map of a font.

    Args:
        path: The path to an OpenType or TrueType font.

    Returns:
        A mapping of code points to glyph names.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a font or the font has no Unicode
            character map.
    """
    try:
        with fontTools.ttLib.ttFont.TTFont(path, lazy=True) as tt_font:
            cmap = tt_font.getBestCmap()
    except fontTools.ttLib.TTLibError as e:
        raise ValueError(f'{path}: {e}') from e
    if cmap is None:
        raise ValueError(f'{path} has no Unicode character map')
    return cmap


def _needs_glyph(c: str) -> bool:
    return unicodedata.category(c) not in {'Cc', 'Cf', 'Zl', 'Zp', 'Zs'}


def missing_characters(text: str, cmap: Mapping[int, str]) -> Sequence[str]:
    """Returns the characters of a text that a font cannot display.

    Whitespace, controls, and format characters such as the zero width
    joiner are never reported, since fonts are not expected to draw
    them.

    Args:
        text: A transcription.
        cmap: The character map of a font.

    Returns:
        The missing characters, in order of first appearance.
    """
    return list(dict.fromkeys(c for c in text if _needs_glyph(c) and ord(c) not in cmap))
