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

import pytest

from tengwar.characters import CALMA
from tengwar.characters import DC_OVER_DOT_3
from tengwar.characters import TINCO
from tengwar.characters import ZWJ
from tengwar.fonts import load_cmap
from tengwar.fonts import missing_characters


def test_load_cmap(font_path):
    cmap = load_cmap(font_path)
    assert cmap[ord(TINCO)] == 'tinco'
    assert cmap[ord(DC_OVER_DOT_3)] == 'over-dot-3'
    assert ord(CALMA) not in cmap


def test_missing_characters(font_path):
    cmap = load_cmap(font_path)
    assert missing_characters(TINCO + DC_OVER_DOT_3 + ' a', cmap) == []
    assert missing_characters('b' + CALMA + 'a' + CALMA + 'b', cmap) == ['b', CALMA]


def test_invisible_characters_are_never_missing():
    assert missing_characters(f'{TINCO}{ZWJ}{TINCO} \t\n', {ord(TINCO): 'tinco'}) == []


def test_not_a_font(tmp_path):
    path = tmp_path / 'font.ttf'
    path.write_bytes(b'This is not a font. ' * 8)
    with pytest.raises(ValueError):
        load_cmap(path)


def test_missing_font(tmp_path):
    with pytest.raises(OSError):
        load_cmap(tmp_path / 'missing.ttf')
