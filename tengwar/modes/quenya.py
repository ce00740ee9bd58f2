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

"""The Classical Mode, for writing Quenya.

Each vowel is written as a tehta over the consonant before it, or over
a short carrier if no consonant precedes it.
"""


from __future__ import annotations


__all__ = [
    'CONSONANTS',
    'DIPHTHONGS',
    'Quenya',
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
from tengwar.characters import ARDA
from tengwar.characters import CALMA
from tengwar.characters import ESSE
from tengwar.characters import FORMEN
from tengwar.characters import HALLA
from tengwar.characters import HWESTA
from tengwar.characters import HYARMEN
from tengwar.characters import LAMBE
from tengwar.characters import MALTA
from tengwar.characters import NOLDO
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
from tengwar.characters import THULE
from tengwar.characters import TINCO
from tengwar.characters import UMBAR
from tengwar.characters import UNGWE
from tengwar.characters import UNQUE
from tengwar.characters import URE
from tengwar.characters import VALA
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
    'nd': ANDO,
    'þ': THULE,
    'θ': THULE,
    'th': THULE,
    'nt': ANTO,
    'n': NUMEN,
    'r': ORE,
    'p': PARMA,
    'b': UMBAR,
    'mb': UMBAR,
    'f': FORMEN,
    'mp': AMPA,
    'm': MALTA,
    'v': VALA,
    'c': CALMA,
    'k': CALMA,
    'g': ANGA,
    'ng': ANGA,
    'ch': AHA,
    'kh': AHA,
    'nc': ANCA,
    'nk': ANCA,
    'ñ': NOLDO,
    'y': ANNA,
    'ʒ': ANNA,
    'q': QESSE,
    'qu': QESSE,
    'cw': QESSE,
    'kw': QESSE,
    'ngw': UNGWE,
    'hw': HWESTA,
    'nq': UNQUE,
    'nqu': UNQUE,
    'ñw': NWALME,
    'w': WILYA,
    'rd': ARDA,
    'l': LAMBE,
    'ld': ALDA,
    's': SILME,
    'ss': ESSE,
    'z': ESSE,
    'ß': ESSE,
    'h': HYARMEN,
}


#: Consonants written differently at the start of a word.
_INITIAL_CONSONANTS: Final[Mapping[str, str]] = {
    'ng': NOLDO,
    'ngw': NWALME,
    'nw': NWALME,
}


#: Consonants written differently after another glyph in the same word.
_MEDIAL_REPLACEMENTS: Final[Mapping[str, str]] = {
    HYARMEN: AHA,
}


#: A mapping of diphthong spellings to carriers and tehtar.
DIPHTHONGS: Final[Mapping[str, tuple[str, Tehta]]] = {
    'ai': (YANTA, TEHTA_A),
    'oi': (YANTA, TEHTA_O),
    'ui': (YANTA, TEHTA_U),
    'au': (URE, TEHTA_A),
    'eu': (URE, TEHTA_E),
    'iu': (URE, TEHTA_I),
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
        ]
        for spelling in spellings
    },
}


class Quenya(Mode):
    """The Classical Mode.

    A glyph is a consonant followed by a vowel, either of which may be
    missing. Órë becomes rómen before a vowel. A following ``s`` is
    written as a sa-rincë on a consonant with no vowel if the consonant
    allows it.
    """

    def _consonant(self, chunk: str) -> Optional[Glyph]:
        if self.initial and (base := _INITIAL_CONSONANTS.get(chunk)) is not None:
            return self.new_glyph(base)
        if (found := lookup_consonant(CONSONANTS, chunk)) is None:
            return None
        base, long_cons = found
        if not self.initial:
            base = _MEDIAL_REPLACEMENTS.get(base, base)
        return self.new_glyph(base, long_cons=long_cons, palatal=chunk == 'y')

    def _continue(self, current: Glyph, chunk: str) -> ParseAction:
        match chunk:
            case 's' | 'z':
                if current.base is not None and current.tehta is None and not current.rince and self.policy.may_host_sibilant(current.base):
                    current.rince = True
                    return MatchedPart(1)
                return self.commit()
            case 'ss':
                return self.commit()
            case 'x':
                committed = self.commit().token
                self.current = self.new_glyph(CALMA, rince=True)
                return MatchedToken(committed, 1)
        if current.tehta is not None:
            return MATCHED_NONE
        if chunk == 'y':
            current.palatal = True
            return MatchedPart(1)
        if current.base == HYARMEN and chunk[0] in 'lr':
            current.base = HALLA
            return self.commit()
        if chunk in DIPHTHONGS:
            if not current.rince:
                current.replace_base(ORE, ROMEN)
            return self.commit()
        if (vowel := VOWELS.get(chunk)) is not None:
            current.tehta, current.long = vowel
            if not current.rince:
                current.replace_base(ORE, ROMEN)
            return MatchedPart(len(chunk))
        return MATCHED_NONE

    def _start(self, chunk: str) -> ParseAction:
        if chunk == 'x':
            self.current = self.new_glyph(CALMA, rince=True)
            return MatchedPart(1)
        if (glyph := self._consonant(chunk)) is not None:
            self.current = glyph
            return MatchedPart(len(chunk))
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
