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

from typing import override

from tengwar.characters import CALMA
from tengwar.characters import PUNCT_EXCLAM
from tengwar.characters import TEHTA_A
from tengwar.characters import TINCO
from tengwar.glyph import Glyph
from tengwar.modes import MATCHED_NONE
from tengwar.modes import MatchedPart
from tengwar.modes import MatchedToken
from tengwar.modes import Mode
from tengwar.modes import Skip
from tengwar.modes.quenya import Quenya
from tengwar.numeral import Numeral
from tengwar.tokenizer import Tokenizer
from tengwar.tokenizer import fold_case


class Nothing(Mode):
    """A mode that recognizes nothing and remembers what it was offered.
    """

    def __init__(self):
        super().__init__()
        self.chunks = []

    @override
    def process(self, chunk):
        self.chunks.append(chunk)
        return MATCHED_NONE


class Toy(Mode):
    """A mode in which ``t`` is tinco, becoming calma at the end of a
    word, ``a`` is the A tehta on the preceding tinco, ``abc`` is one
    whole glyph, and ``%`` passes itself and the next character through.
    """

    @override
    def process(self, chunk):
        if chunk == '%':
            return Skip(2)
        if self.current is None:
            if chunk == 'abc':
                return self.emit(self.new_glyph(TINCO, TEHTA_A), 3)
            if chunk == 't':
                self.current = self.new_glyph(TINCO, final_base=CALMA)
                return MatchedPart(1)
            return MATCHED_NONE
        if chunk == 'a' and self.current.tehta is None:
            self.current.tehta = TEHTA_A
            return MatchedPart(1)
        if chunk == 't':
            return self.commit()
        return MATCHED_NONE


def test_fold_case():
    assert fold_case('A') == 'a'
    assert fold_case('Ñ') == 'ñ'
    assert fold_case('ß') == 'ß'
    # The lowercase form of İ has two code points.
    assert fold_case('İ') == 'İ'


def test_pass_through_keeps_case():
    assert list(Tokenizer('Ab', Nothing())) == ['A', 'b']


def test_punctuation_fallback():
    assert list(Tokenizer('!', Nothing())) == [PUNCT_EXCLAM]


def test_numeral_fallback():
    assert list(Tokenizer('x#12@', Nothing())) == ['x', Numeral(12, base_10=True, ordinal=True)]


def test_window_narrows_and_resets():
    mode = Nothing()
    list(Tokenizer('abcd', mode))
    assert mode.chunks == ['abc', 'ab', 'a', 'bcd', 'bc', 'b', 'cd', 'c', 'd']


def test_window_sees_lowercase():
    mode = Nothing()
    list(Tokenizer('AB', mode))
    assert mode.chunks == ['ab', 'a', 'b']


def test_normalization():
    mode = Nothing()
    assert list(Tokenizer('e\u0301', mode)) == ['\u00E9']
    assert mode.chunks == ['\u00E9']


def test_whole_token():
    tokens = list(Tokenizer('abc', Toy()))
    assert len(tokens) == 1
    assert isinstance(tokens[0], Glyph)
    assert tokens[0].base == TINCO
    assert tokens[0].tehta == TEHTA_A


def test_final_base():
    tokens = list(Tokenizer('tat', Toy()))
    assert [token.base for token in tokens] == [TINCO, CALMA]
    tokens = list(Tokenizer('t+t', Toy()))
    assert [getattr(token, 'base', token) for token in tokens] == [CALMA, '+', CALMA]


def test_skip_commits_first():
    tokens = list(Tokenizer('t%Xyt', Toy()))
    assert [getattr(token, 'base', token) for token in tokens] == [CALMA, '%', 'X', 'y', CALMA]


def test_escape():
    tokens = list(Tokenizer('\\calma', Quenya()))
    assert tokens[0] == 'c'
    assert all(isinstance(token, Glyph) for token in tokens[1:])


def test_trailing_escape_marker():
    tokens = list(Tokenizer('ta\\', Quenya()))
    assert tokens[-1] == '\\'
    assert isinstance(tokens[0], Glyph)


def test_silent_word_break():
    tokens = list(Tokenizer('ta\\ ta', Quenya()))
    assert len(tokens) == 3
    assert tokens[1] == ''


def test_empty():
    assert list(Tokenizer('', Quenya())) == []


def test_match_token_without_advancing():
    mode = Toy()
    assert mode.process('t') == MatchedPart(1)
    action = mode.process('t')
    assert isinstance(action, MatchedToken)
    assert action.length == 0
