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

from tengwar.characters import DC_OVER_DOT_1
from tengwar.characters import DC_OVER_LINE
from tengwar.characters import DC_UNDER_DOT_1
from tengwar.characters import DC_UNDER_LINE_H
from tengwar.characters import DC_UNDER_RING
from tengwar.characters import NUMERALS
from tengwar.characters import SEQUENCE
from tengwar.characters import TINCO
from tengwar.numeral import Numeral
from tengwar.numeral import parse_sequence


@pytest.mark.parametrize('base_10', [False, True])
@pytest.mark.parametrize('lines', [False, True])
def test_read_inverts_str(base_10, lines):
    for value in [*range(-200, 200), 1727, 1728, 9999, 123456789]:
        for ordinal in [False, True]:
            numeral = Numeral(value, base_10, ordinal, lines)
            assert Numeral.read(str(numeral)) == numeral


def test_digits():
    assert Numeral(0).digits() == [0]
    assert Numeral(144).digits() == [0, 0, 1]
    assert Numeral(-144, base_10=True).digits() == [4, 4, 1]


def test_one_digit():
    assert str(Numeral(11)) == NUMERALS[11] + DC_UNDER_DOT_1
    assert str(Numeral(9, base_10=True)) == NUMERALS[9] + DC_OVER_DOT_1


def test_base_12_ones_unmarked():
    assert str(Numeral(13)) == NUMERALS[1] + DC_UNDER_RING + NUMERALS[1] + DC_UNDER_DOT_1


def test_base_10_ones_marked():
    assert str(Numeral(13, base_10=True)) == NUMERALS[3] + DC_UNDER_RING + DC_OVER_DOT_1 + NUMERALS[1] + DC_OVER_DOT_1


def test_lines():
    assert str(Numeral(13, lines=True)) == NUMERALS[1] + DC_UNDER_RING + DC_UNDER_LINE_H + NUMERALS[1] + DC_UNDER_LINE_H
    assert str(Numeral(13, base_10=True, lines=True)) == NUMERALS[3] + DC_UNDER_RING + DC_OVER_LINE + NUMERALS[1] + DC_OVER_LINE


@pytest.mark.parametrize('text, expected', [
    ('12', (Numeral(12), 2)),
    ('#12', (Numeral(12, base_10=True), 3)),
    ('12@', (Numeral(12, ordinal=True), 3)),
    ('#-3@', (Numeral(-3, base_10=True, ordinal=True), 4)),
    ('007 bond', (Numeral(7), 3)),
    ('x12', None),
    ('#', None),
    ('-', None),
])
def test_parse(text, expected):
    assert Numeral.parse(text) == expected


def test_read_rejects_garbage():
    with pytest.raises(ValueError):
        Numeral.read('')
    with pytest.raises(ValueError):
        Numeral.read(TINCO)
    with pytest.raises(ValueError):
        Numeral.read(NUMERALS[1] + NUMERALS[2])


@pytest.mark.parametrize('text, expected', [
    ('1#', (SEQUENCE[0], 2)),
    ('24#', (SEQUENCE[23], 3)),
    ('7#.', (SEQUENCE[6], 2)),
    ('25#', (f'{Numeral(25)}#', 3)),
    ('00#', (f'{Numeral(0)}#', 3)),
    ('1', None),
    ('123#', None),
])
def test_parse_sequence(text, expected):
    assert parse_sequence(text) == expected
