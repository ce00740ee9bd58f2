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

"""The Mode of Beleriand, for writing Sindarin.

Vowels are full letters rather than tehtar, so every glyph is complete
as soon as it is found.
"""


from __future__ import annotations


__all__ = [
    'Beleriand',
    'CONSONANTS',
    'DIPHTHONGS',
    'VOWELS',
]


from typing import Final
from typing import Optional
from typing import TYPE_CHECKING
from typing import override

from tengwar.characters import AHA
from tengwar.characters import ALDA
from tengwar.characters import AMPA
from tengwar.characters import ANCA
from tengwar.characters import ANDO
from tengwar.characters import ANGA
from tengwar.characters import ANNA
from tengwar.characters import ANTO
from tengwar.characters import ARA
from tengwar.characters import ARDA
from tengwar.characters import CALMA
from tengwar.characters import ESSE
from tengwar.characters import FORMEN
from tengwar.characters import HWESTA_SINDARINWA
from tengwar.characters import HYARMEN
from tengwar.characters import LAMBE
from tengwar.characters import MALTA
from tengwar.characters import NUMEN
from tengwar.characters import ORE
from tengwar.characters import OSSE
from tengwar.characters import PARMA
from tengwar.characters import ROMEN
from tengwar.characters import SILME
from tengwar.characters import SILME_NUQ
from tengwar.characters import TEHTA_ANDAITH
from tengwar.characters import TEHTA_Y
from tengwar.characters import TELCO
from tengwar.characters import THULE
from tengwar.characters import TINCO
from tengwar.characters import UMBAR
from tengwar.characters import URE
from tengwar.characters import VALA
from tengwar.characters import VALA_HOOKED
from tengwar.characters import WILYA
from tengwar.characters import YANTA
from tengwar.modes import MATCHED_NONE
from tengwar.modes import Mode
from tengwar.modes import lookup_consonant


if TYPE_CHECKING:
    from collections.abc import Mapping

    from tengwar.glyph import Glyph
    from tengwar.modes import ParseAction


#: A mapping of consonant spellings to base characters.
CONSONANTS: Final[Mapping[str, str]] = {
    't': TINCO,
    'd': ANDO,
    'þ': THULE,
    'θ': THULE,
    'th': THULE,
    'ð': ANTO,
    'dh': ANTO,
    'nn': NUMEN,
    'n': ORE,
    'p': PARMA,
    'b': UMBAR,
    'f': FORMEN,
    'ph': FORMEN,
    'φ': FORMEN,
    'v': AMPA,
    'mm': MALTA,
    'm': VALA,
    'c': CALMA,
    'k': CALMA,
    'g': ANGA,
    'ch': AHA,
    'kh': AHA,
    'gh': ANCA,
    'w': WILYA,
    'r': ROMEN,
    'l': LAMBE,
    's': SILME,
    'ss': ESSE,
    'z': ESSE,
    'ß': ESSE,
    'h': HYARMEN,
    'hw': HWESTA_SINDARINWA,
}


#: Consonants written differently at the start of a word.
_INITIAL_CONSONANTS: Final[Mapping[str, str]] = {
    'lh': ALDA,
    'rh': ARDA,
}


#: Consonants written the same way anywhere in a word, which take
#: priority over the nasal bar.
_SPECIAL_CONSONANTS: Final[Mapping[str, str]] = {
    'mh': VALA_HOOKED,
    'j': ARA,
}


#: Consonants written differently at the end of a word, by spelling.
_FINAL_FORMS: Final[Mapping[str, str]] = {
    'f': AMPA,
}


_VOWEL_LETTERS: Final[Mapping[str, str]] = {
    'a': OSSE,
    'e': YANTA,
    'i': TELCO,
    'o': ANNA,
    'u': URE,
    'y': SILME_NUQ,
}


#: A mapping of vowel spellings to vowel letters and whether they are
#: long.
VOWELS: Final[Mapping[str, tuple[str, bool]]] = {
    **{
        spelling: (_VOWEL_LETTERS[vowel], False)
        for vowel, spellings in [
            ('a', 'aä'),
            ('e', 'eë'),
            ('i', 'iï'),
            ('o', 'oö'),
            ('u', 'uü'),
            ('y', 'yÿ'),
        ]
        for spelling in spellings
    },
    **{
        spelling: (_VOWEL_LETTERS[vowel], True)
        for vowel, spellings in [
            ('a', ['á', 'â', 'ā', 'aa']),
            ('e', ['é', 'ê', 'ē', 'ee']),
            ('i', ['í', 'î', 'ī', 'ii']),
            ('o', ['ó', 'ô', 'ō', 'oo']),
            ('u', ['ú', 'û', 'ū', 'uu']),
            ('y', ['ý', 'ŷ', 'ȳ', 'yy']),
        ]
        for spelling in spellings
    },
}


#: A mapping of diphthong spellings to vowel letters and whether the
#: second element is a ``u`` rather than an ``i``.
DIPHTHONGS: Final[Mapping[str, tuple[str, bool]]] = {
    'ai': (OSSE, False),
    'ei': (YANTA, False),
    'ui': (URE, False),
    'au': (OSSE, True),
    'aw': (OSSE, True),
}


class Beleriand(Mode):
    """The Mode of Beleriand.

    Órë is n and vala is m; their doubled forms are númen and malta. A
    long vowel takes an acute. The only glyph that waits for more input
    is the silmë of an ``x``, which follows its calma.
    """

    def _consonant(self, chunk: str) -> Optional[Glyph]:
        if self.initial and (base := _INITIAL_CONSONANTS.get(chunk)) is not None:
            return self.new_glyph(base)
        if (base := _SPECIAL_CONSONANTS.get(chunk)) is not None:
            return self.new_glyph(base)
        if (found := lookup_consonant(CONSONANTS, chunk, doubled=False)) is not None:
            return self.new_glyph(found[0], final_base=_FINAL_FORMS.get(chunk))
        if len(chunk) > 1 and chunk[0] in 'mn':
            if (found := lookup_consonant(CONSONANTS, chunk[1:], doubled=False)) is not None:
                return self.new_glyph(found[0], nasal=True, final_base=_FINAL_FORMS.get(chunk[1:]))
        return None

    def _initial_ara(self, chunk: str) -> bool:
        """Returns whether a chunk starts with a consonantal ``i``.
        """
        return (
            self.initial
            and len(chunk) > 1
            and chunk[0] == 'i'
            and chunk[1] in VOWELS
            and chunk[:2] not in VOWELS
            and chunk[:2] not in DIPHTHONGS
        )

    def _vowel(self, chunk: str) -> Optional[Glyph]:
        if (diphthong := DIPHTHONGS.get(chunk)) is not None:
            letter, labial = diphthong
            if labial:
                return self.new_glyph(letter, labial=True)
            return self.new_glyph(letter, TEHTA_Y)
        if (vowel := VOWELS.get(chunk)) is not None:
            letter, long = vowel
            return self.new_glyph(letter, TEHTA_ANDAITH if long else None)
        return None

    @override
    def process(self, chunk: str) -> ParseAction:
        if self.current is not None:
            return self.commit()
        if chunk == 'x':
            self.current = self.new_glyph(SILME)
            return self.emit(self.new_glyph(CALMA), 1)
        if (glyph := self._consonant(chunk)) is not None:
            return self.emit(glyph, len(chunk))
        if self._initial_ara(chunk):
            return self.emit(self.new_glyph(ARA), 1)
        if (glyph := self._vowel(chunk)) is not None:
            return self.emit(glyph, len(chunk))
        return MATCHED_NONE
