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

"""The Mode of Gondor, for writing Sindarin.

Each vowel is written as a tehta over the consonant after it. A vowel
that no consonant follows is written over a short carrier.
"""


from __future__ import annotations


__all__ = [
    'CONSONANTS',
    'DIPHTHONGS',
    'Gondor',
    'VOWELS',
]


from typing import Final
from typing import Optional
from typing import TYPE_CHECKING
from typing import override

from tengwar.characters import ALDA
from tengwar.characters import AMPA
from tengwar.characters import ANDO
from tengwar.characters import ANNA
from tengwar.characters import ANTO
from tengwar.characters import ARDA
from tengwar.characters import ESSE
from tengwar.characters import FORMEN
from tengwar.characters import HWESTA
from tengwar.characters import HWESTA_SINDARINWA
from tengwar.characters import HYARMEN
from tengwar.characters import LAMBE
from tengwar.characters import MALTA
from tengwar.characters import MALTA_HOOKED
from tengwar.characters import NUMEN
from tengwar.characters import NWALME
from tengwar.characters import ORE
from tengwar.characters import PARMA
from tengwar.characters import QESSE
from tengwar.characters import ROMEN
from tengwar.characters import SILME
from tengwar.characters import TEHTA_A
from tengwar.characters import TEHTA_E
from tengwar.characters import TEHTA_I
from tengwar.characters import TEHTA_O
from tengwar.characters import TEHTA_U
from tengwar.characters import TEHTA_Y
from tengwar.characters import THULE
from tengwar.characters import TINCO
from tengwar.characters import UMBAR
from tengwar.characters import UNGWE
from tengwar.characters import UNQUE
from tengwar.characters import URE
from tengwar.characters import WILYA
from tengwar.characters import YANTA
from tengwar.modes import MATCHED_NONE
from tengwar.modes import MatchedPart
from tengwar.modes import MatchedToken
from tengwar.modes import Mode
from tengwar.modes import lookup_consonant


if TYPE_CHECKING:
    from collections.abc import Mapping

    from tengwar.characters import Tehta
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
    'n': NUMEN,
    'r': ROMEN,
    'p': PARMA,
    'b': UMBAR,
    'f': FORMEN,
    'ph': FORMEN,
    'φ': FORMEN,
    'v': AMPA,
    'm': MALTA,
    'c': QESSE,
    'k': QESSE,
    'g': UNGWE,
    'ch': HWESTA,
    'kh': HWESTA,
    'gh': UNQUE,
    'ñ': NWALME,
    'w': WILYA,
    'l': LAMBE,
    's': SILME,
    'ss': ESSE,
    'z': ESSE,
    'ß': ESSE,
    'h': HYARMEN,
    'hw': HWESTA_SINDARINWA,
    'j': YANTA,
}


#: Consonants written differently at the start of a word.
_INITIAL_CONSONANTS: Final[Mapping[str, str]] = {
    'lh': ALDA,
    'rh': ARDA,
}


#: Consonants written the same way anywhere in a word, which take
#: priority over the nasal bar.
_SPECIAL_CONSONANTS: Final[Mapping[str, str]] = {
    'mh': MALTA_HOOKED,
}


#: Consonants written differently at the end of a word, by spelling.
_FINAL_FORMS: Final[Mapping[str, str]] = {
    'r': ORE,
    'f': AMPA,
}


#: The consonants that take a labial mark for a following ``w``.
_LABIALIZABLE: Final[frozenset[str]] = frozenset({ANDO, UNGWE})


#: A mapping of diphthong spellings to carriers and tehtar.
DIPHTHONGS: Final[Mapping[str, tuple[str, Tehta]]] = {
    'ae': (YANTA, TEHTA_A),
    'æ': (YANTA, TEHTA_A),
    'oe': (YANTA, TEHTA_O),
    'œ': (YANTA, TEHTA_O),
    'ai': (ANNA, TEHTA_A),
    'ei': (ANNA, TEHTA_E),
    'ui': (ANNA, TEHTA_U),
    'au': (URE, TEHTA_A),
    'aw': (URE, TEHTA_A),
}


#: A mapping of vowel spellings to tehtar and whether they are long.
VOWELS: Final[Mapping[str, tuple[Tehta, bool]]] = {
    **{
        spelling: (tehta, False)
        for spellings, tehta in [
            ('aä', TEHTA_A),
            ('eë', TEHTA_E),
            ('iï', TEHTA_I),
            ('oö', TEHTA_O),
            ('uü', TEHTA_U),
            ('yÿ', TEHTA_Y),
        ]
        for spelling in spellings
    },
    **{
        spelling: (tehta, True)
        for spellings, tehta in [
            (['á', 'â', 'ā', 'aa'], TEHTA_A),
            (['é', 'ê', 'ē', 'ee'], TEHTA_E),
            (['í', 'î', 'ī', 'ii'], TEHTA_I),
            (['ó', 'ô', 'ō', 'oo'], TEHTA_O),
            (['ú', 'û', 'ū', 'uu'], TEHTA_U),
            (['ý', 'ŷ', 'ȳ', 'yy'], TEHTA_Y),
        ]
        for spelling in spellings
    },
}


class Gondor(Mode):
    """The Mode of Gondor.

    A glyph is a vowel followed by a consonant, either of which may be
    missing. Since the vowel is read first, a long carrier for it goes
    before the consonant. Rómen and formen become órë and ampa at the
    end of a word.
    """

    @override
    def new_glyph(self, base: Optional[str] = None, tehta: Optional[Tehta] = None, **kwargs) -> Glyph:
        return super().new_glyph(base, tehta, tehta_first=True, **kwargs)

    def _consonant(self, chunk: str) -> Optional[Glyph]:
        """Finds a consonant, including any nasal bar.

        Args:
            chunk: A chunk of input.

        Returns:
            A glyph with only consonant attributes set, or ``None`` if
            `chunk` is not a consonant.
        """
        if self.initial and (base := _INITIAL_CONSONANTS.get(chunk)) is not None:
            return self.new_glyph(base)
        if (base := _SPECIAL_CONSONANTS.get(chunk)) is not None:
            return self.new_glyph(base)
        if len(chunk) > 1 and chunk[0] in 'mn':
            if (found := lookup_consonant(CONSONANTS, chunk[1:], doubled=False)) is not None:
                return self.new_glyph(found[0], nasal=True, final_base=_FINAL_FORMS.get(chunk[1:]))
        if (found := lookup_consonant(CONSONANTS, chunk)) is not None:
            base, long_cons = found
            return self.new_glyph(base, long_cons=long_cons, final_base=_FINAL_FORMS.get(chunk))
        return None

    def _initial_yanta(self, chunk: str) -> bool:
        """Returns whether a chunk starts with a consonantal ``i``.

        An ``i`` at the start of a word is a consonant before a vowel,
        unless it forms a single vowel or a diphthong with that vowel.
        """
        return (
            self.initial
            and len(chunk) > 1
            and chunk[0] == 'i'
            and chunk[1] in VOWELS
            and chunk[:2] not in VOWELS
            and chunk[:2] not in DIPHTHONGS
        )

    def _modify(self, current: Glyph, chunk: str) -> Optional[ParseAction]:
        """Tries to add a modifier to the consonant under construction.
        """
        assert current.base is not None
        match chunk:
            case 'w' if current.base in _LABIALIZABLE and not current.labial:
                current.labial = True
                return MatchedPart(1)
            case 's' | 'z' if not current.rince and self.policy.may_host_sibilant(current.base):
                current.rince = True
                return MatchedPart(1)
            case 'ss':
                return self.commit()
            case 'x':
                committed = self.commit().token
                self.current = self.new_glyph(QESSE, rince=True)
                return MatchedToken(committed, 1)
        return None

    def _continue(self, current: Glyph, chunk: str) -> ParseAction:
        if current.base is not None:
            return self._modify(current, chunk) or MATCHED_NONE
        if chunk == 'x':
            current.base = QESSE
            current.rince = True
            return MatchedPart(1)
        if (consonant := self._consonant(chunk)) is not None:
            current.integrate_consonant(consonant)
            return MatchedPart(len(chunk))
        return MATCHED_NONE

    def _start(self, chunk: str) -> ParseAction:
        if chunk == 'x':
            self.current = self.new_glyph(QESSE, rince=True)
            return MatchedPart(1)
        if (consonant := self._consonant(chunk)) is not None:
            self.current = consonant
            return MatchedPart(len(chunk))
        if self._initial_yanta(chunk):
            self.current = self.new_glyph(YANTA)
            return MatchedPart(1)
        if (diphthong := DIPHTHONGS.get(chunk)) is not None:
            carrier, tehta = diphthong
            self.current = self.new_glyph(carrier, tehta)
            return MatchedPart(len(chunk))
        if (vowel := VOWELS.get(chunk)) is not None:
            tehta, long = vowel
            self.current = self.new_glyph(tehta=tehta, long=long)
            return MatchedPart(len(chunk))
        return MATCHED_NONE

    @override
    def process(self, chunk: str) -> ParseAction:
        if self.current is not None:
            return self._continue(self.current, chunk)
        return self._start(chunk)
