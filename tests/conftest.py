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

from __future__ import annotations

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
import pytest

from tengwar.characters import DC_OVER_DOT_3
from tengwar.characters import TINCO


#: The characters in the test font, by glyph name.
FONT_CHARACTERS = {
    'space': ' ',
    'a': 'a',
    'tinco': TINCO,
    'over-dot-3': DC_OVER_DOT_3,
}


@pytest.fixture(scope='session')
def font_path(tmp_path_factory):
    """Returns the path to a font with empty glyphs for
    `FONT_CHARACTERS`.
    """
    glyph_order = ['.notdef', *FONT_CHARACTERS]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(c): name for name, c in FONT_CHARACTERS.items()})
    fb.setupGlyf({name: TTGlyphPen(None).glyph() for name in glyph_order})
    fb.setupHorizontalMetrics({name: (500, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({'familyName': 'Test', 'styleName': 'Regular'})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    path = tmp_path_factory.mktemp('fonts') / 'test.ttf'
    fb.save(str(path))
    return path
