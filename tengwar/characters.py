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

"""Code points and the static tables built from them.

Every Tengwar character is in the Private Use Area, following the
mapping of the Free Tengwar Font Project. Any use of a Tengwar code
point that does not come from this module is an error.
"""


from __future__ import annotations


__all__ = [
    'CARRIER_LONG',
    'CARRIER_SHORT',
    'CARRIER_SHORT_LIG',
    'CODE_POINTS',
    'NAMES',
    'NUMERALS',
    'PUNCTUATION',
    'SEQUENCE',
    'TEHTAR',
    'TEMAR',
    'TENGWAR',
    'Tehta',
    'Tema',
    'Tyelle',
    'ZWJ',
    'describe',
    'find_tyelle',
]


from collections.abc import Mapping
from collections.abc import Sequence
from typing import Final
from typing import NamedTuple
from typing import Optional

import fontTools.agl


#: The zero width joiner, which requests a ligature from the font.
ZWJ: Final[str] = '\u200D'


class Tyelle(NamedTuple):
    """The stem shape of a regular tengwa.

    A tyellë is a row of the table of regular tengwar. It is determined
    by which way the stem extends from the bow and by whether the bow is
    doubled.

    Attributes:
        stem_dn: Whether the stem extends below the line.
        stem_up: Whether the stem extends above the line.
        doubled: Whether the bow is doubled.
    """

    stem_dn: bool
    stem_up: bool
    doubled: bool

    @property
    def is_descending(self) -> bool:
        return self.stem_dn and not self.stem_up

    @property
    def is_ascending(self) -> bool:
        return self.stem_up and not self.stem_dn

    @property
    def is_extended(self) -> bool:
        return self.stem_dn and self.stem_up

    @property
    def is_short(self) -> bool:
        return not (self.stem_dn or self.stem_up)


class Tema(NamedTuple):
    """A series of regular tengwar sharing a bow shape.

    Attributes:
        name: The name of the series.
        left: Whether the bow faces left, leaving the stem on the right
            edge of the tengwa.
        open: Whether the bow is open.
        single_dn: The tengwa with a descending stem and one bow.
        double_dn: The tengwa with a descending stem and two bows.
        single_up: The tengwa with an ascending stem and one bow.
        double_up: The tengwa with an ascending stem and two bows.
        double_sh: The tengwa with a short stem and two bows.
        single_sh: The tengwa with a short stem and one bow.
        single_ex: The tengwa with an extended stem and one bow.
        double_ex: The tengwa with an extended stem and two bows.
    """

    name: str
    left: bool
    open: bool
    single_dn: str
    double_dn: str
    single_up: str
    double_up: str
    double_sh: str
    single_sh: str
    single_ex: str
    double_ex: str

    @property
    def tengwar(self) -> Sequence[str]:
        return self[3:]

    def __contains__(self, c: object) -> bool:
        return c in self.tengwar

    def find_tyelle(self, c: str) -> Optional[Tyelle]:
        """Returns the stem shape of a tengwa in this series.

        Args:
            c: A character.

        Returns:
            The tyellë of `c`, or ``None`` if `c` is not in this series.
        """
        if c not in self.tengwar:
            return None
        index = self.tengwar.index(c)
        return _TYELLER[index]

    def get(self, tyelle: Tyelle) -> str:
        """Returns the tengwa of this series with a given stem shape.
        """
        return self.tengwar[_TYELLER.index(tyelle)]


_TYELLER: Final[Sequence[Tyelle]] = [
    Tyelle(stem_dn=True, stem_up=False, doubled=False),
    Tyelle(stem_dn=True, stem_up=False, doubled=True),
    Tyelle(stem_dn=False, stem_up=True, doubled=False),
    Tyelle(stem_dn=False, stem_up=True, doubled=True),
    Tyelle(stem_dn=False, stem_up=False, doubled=True),
    Tyelle(stem_dn=False, stem_up=False, doubled=False),
    Tyelle(stem_dn=True, stem_up=True, doubled=False),
    Tyelle(stem_dn=True, stem_up=True, doubled=True),
]


#: The T-series, with an open bow to the right.
TEMA_TINCO: Final[Tema] = Tema(
    'tinco', False, True,
    '\uE000', '\uE004', '\uE008', '\uE00C', '\uE010', '\uE014', '\uE018', '\uE01C',
)


#: The P-series, with a closed bow to the right.
TEMA_PARMA: Final[Tema] = Tema(
    'parma', False, False,
    '\uE001', '\uE005', '\uE009', '\uE00D', '\uE011', '\uE015', '\uE019', '\uE01D',
)


#: The C-series, with an open bow to the left.
TEMA_CALMA: Final[Tema] = Tema(
    'calma', True, True,
    '\uE002', '\uE006', '\uE00A', '\uE00E', '\uE012', '\uE016', '\uE01A', '\uE01E',
)


#: The Q-series, with a closed bow to the left.
TEMA_QESSE: Final[Tema] = Tema(
    'qesse', True, False,
    '\uE003', '\uE007', '\uE00B', '\uE00F', '\uE013', '\uE017', '\uE01B', '\uE01F',
)


#: The four témar, in traditional order.
TEMAR: Final[Sequence[Tema]] = [TEMA_TINCO, TEMA_PARMA, TEMA_CALMA, TEMA_QESSE]


def find_tyelle(c: str) -> Optional[tuple[Tema, Tyelle]]:
    """Finds the series and stem shape of a regular tengwa.

    Args:
        c: A character.

    Returns:
        A tuple of the téma and tyellë of `c`, or ``None`` if `c` is not
        a regular tengwa.
    """
    for tema in TEMAR:
        if (tyelle := tema.find_tyelle(c)) is not None:
            return tema, tyelle
    return None


TINCO: Final[str] = TEMA_TINCO.single_dn
PARMA: Final[str] = TEMA_PARMA.single_dn
CALMA: Final[str] = TEMA_CALMA.single_dn
QESSE: Final[str] = TEMA_QESSE.single_dn
ANDO: Final[str] = TEMA_TINCO.double_dn
UMBAR: Final[str] = TEMA_PARMA.double_dn
ANGA: Final[str] = TEMA_CALMA.double_dn
UNGWE: Final[str] = TEMA_QESSE.double_dn
THULE: Final[str] = TEMA_TINCO.single_up
FORMEN: Final[str] = TEMA_PARMA.single_up
AHA: Final[str] = TEMA_CALMA.single_up
HWESTA: Final[str] = TEMA_QESSE.single_up
ANTO: Final[str] = TEMA_TINCO.double_up
AMPA: Final[str] = TEMA_PARMA.double_up
ANCA: Final[str] = TEMA_CALMA.double_up
UNQUE: Final[str] = TEMA_QESSE.double_up
NUMEN: Final[str] = TEMA_TINCO.double_sh
MALTA: Final[str] = TEMA_PARMA.double_sh
NOLDO: Final[str] = TEMA_CALMA.double_sh
NWALME: Final[str] = TEMA_QESSE.double_sh
ORE: Final[str] = TEMA_TINCO.single_sh
VALA: Final[str] = TEMA_PARMA.single_sh
ANNA: Final[str] = TEMA_CALMA.single_sh
WILYA: Final[str] = TEMA_QESSE.single_sh

ROMEN: Final[str] = '\uE020'
ARDA: Final[str] = '\uE021'
LAMBE: Final[str] = '\uE022'
ALDA: Final[str] = '\uE023'
SILME: Final[str] = '\uE024'
SILME_NUQ: Final[str] = '\uE025'
ESSE: Final[str] = '\uE026'
ESSE_NUQ: Final[str] = '\uE027'
HYARMEN: Final[str] = '\uE028'
HWESTA_SINDARINWA: Final[str] = '\uE029'
YANTA: Final[str] = '\uE02A'
URE: Final[str] = '\uE02B'
ARA: Final[str] = '\uE02C'
HALLA: Final[str] = '\uE02D'
TELCO: Final[str] = '\uE02E'
OSSE_REVERSED: Final[str] = '\uE030'
OSSE: Final[str] = '\uE032'
TELCO_LIG: Final[str] = '\uE034'
ANNA_OPEN: Final[str] = '\uE036'
MALTA_HOOKED: Final[str] = '\uE03A'
VALA_HOOKED: Final[str] = '\uE03B'


#: The carrier for a long vowel.
CARRIER_LONG: Final[str] = ARA


#: The carrier for a short vowel.
CARRIER_SHORT: Final[str] = TELCO


#: A variant of `CARRIER_SHORT` that joins to the following tengwa.
CARRIER_SHORT_LIG: Final[str] = TELCO_LIG


DC_OVER_DOT_3: Final[str] = '\uE040'
DC_UNDER_DOT_3: Final[str] = '\uE041'
DC_OVER_DOT_2: Final[str] = '\uE042'
DC_UNDER_DOT_2: Final[str] = '\uE043'
DC_OVER_DOT_1: Final[str] = '\uE044'
DC_UNDER_DOT_1: Final[str] = '\uE045'
DC_OVER_ACUTE_1: Final[str] = '\uE046'
DC_UNDER_ACUTE_1: Final[str] = '\uE047'
DC_OVER_ACUTE_2: Final[str] = '\uE048'
DC_UNDER_ACUTE_2: Final[str] = '\uE049'
DC_OVER_HOOK_R_1: Final[str] = '\uE04A'
DC_UNDER_HOOK_R_1: Final[str] = '\uE04B'
DC_OVER_HOOK_L_1: Final[str] = '\uE04C'
DC_UNDER_HOOK_L_1: Final[str] = '\uE04D'
DC_OVER_HOOK_R_2: Final[str] = '\uE04E'
DC_OVER_HOOK_L_2: Final[str] = '\uE04F'
DC_OVER_LINE: Final[str] = '\uE050'
DC_UNDER_LINE_H: Final[str] = '\uE051'
DC_OVER_WAVE: Final[str] = '\uE052'
DC_OVER_BREVE: Final[str] = '\uE053'
DC_OVER_GRAVE: Final[str] = '\uE054'
DC_OVER_CIRCUMFLEX: Final[str] = '\uE055'
DC_OVER_DOT_3_INV: Final[str] = '\uE056'
DC_UNDER_LINE_V: Final[str] = '\uE057'
DC_INNER_DOT_1: Final[str] = '\uE05A'
DC_UNDER_RING: Final[str] = '\uE07D'


#: The ornate flourish for a sibilant at the end of a word.
SA_RINCE_FINAL: Final[str] = '\uE058'


#: The small hook for a following sibilant.
SA_RINCE: Final[str] = '\uE059'


#: The mark of a labialized consonant.
MOD_LABIAL: Final[str] = DC_OVER_WAVE


#: The mark of a lengthened consonant.
MOD_LONG_CONS: Final[str] = DC_UNDER_LINE_H


#: The mark of a nasalized consonant.
MOD_NASAL: Final[str] = DC_OVER_LINE


#: The mark of a palatalized consonant.
MOD_PALATAL: Final[str] = DC_UNDER_DOT_2


#: The mark of a consonant with no following vowel.
MOD_NO_VOWEL: Final[str] = DC_UNDER_DOT_1


PUNCT_DOT_1: Final[str] = '\uE060'
PUNCT_DOT_2: Final[str] = '\uE061'
PUNCT_DOT_3: Final[str] = '\uE062'
PUNCT_DOT_4: Final[str] = '\uE063'
PUNCT_DOT_5: Final[str] = '\uE064'
PUNCT_EXCLAM: Final[str] = '\uE065'
PUNCT_INTERR: Final[str] = '\uE066'
PUNCT_PAREN: Final[str] = '\uE067'
PUNCT_LINE_1: Final[str] = '\uE068'
PUNCT_LINE_2: Final[str] = '\uE069'
PUNCT_PAREN_L: Final[str] = '\uE06A'
PUNCT_PAREN_R: Final[str] = '\uE06B'
PUNCT_THORIN: Final[str] = '\uE06C'


#: The digits from zero to twelve. The index of each is its value.
NUMERALS: Final[Sequence[str]] = [chr(cp) for cp in range(0xE070, 0xE07C + 1)]


#: The 24 regular tengwar in traditional order, used as sequence
#: indices the way Latin letters are used in “a.”, “b.”, “c.”.
SEQUENCE: Final[Sequence[str]] = [chr(cp) for cp in range(0xE000, 0xE017 + 1)]


class Tehta(NamedTuple):
    """A vowel diacritic.

    A tehta has one of three shapes. A single tehta has no special long
    form, so a long vowel needs a long carrier. A double tehta is
    written twice for a long vowel. An alternate tehta has a distinct
    mark for a long vowel, and may also be written twice.

    Attributes:
        base: The mark of the short vowel.
        alternate: The distinct mark of the long vowel, if any.
        can_double: Whether `base` may be written twice for a long
            vowel.
    """

    base: str
    alternate: Optional[str] = None
    can_double: bool = False

    @classmethod
    def single(cls, base: str) -> Tehta:
        return cls(base)

    @classmethod
    def double(cls, base: str) -> Tehta:
        return cls(base, can_double=True)

    @classmethod
    def altern(cls, base: str, alternate: str) -> Tehta:
        return cls(base, alternate, True)

    @property
    def needs_carrier(self) -> bool:
        """Returns whether a long vowel with this tehta always needs a
        long carrier.
        """
        return not self.can_double and self.alternate is None


TEHTA_A: Final[Tehta] = Tehta.single(DC_OVER_DOT_3)
TEHTA_E: Final[Tehta] = Tehta.altern(DC_OVER_ACUTE_1, DC_OVER_ACUTE_2)
TEHTA_I: Final[Tehta] = Tehta.single(DC_OVER_DOT_1)
TEHTA_O: Final[Tehta] = Tehta.altern(DC_OVER_HOOK_R_1, DC_OVER_HOOK_R_2)
TEHTA_U: Final[Tehta] = Tehta.altern(DC_OVER_HOOK_L_1, DC_OVER_HOOK_L_2)
TEHTA_Y: Final[Tehta] = Tehta.single(DC_OVER_DOT_2)


#: The simpler alternative to `TEHTA_A`, resembling a circumflex.
TEHTA_YANTA: Final[Tehta] = Tehta.single(DC_OVER_CIRCUMFLEX)


#: The acute mark of a long full-letter vowel in the Mode of Beleriand.
TEHTA_ANDAITH: Final[Tehta] = Tehta.single(DC_OVER_ACUTE_1)


#: A mapping of Latin punctuation to Tengwar punctuation.
PUNCTUATION: Final[Mapping[str, str]] = {
    "'": PUNCT_DOT_1,
    '.': PUNCT_DOT_1,
    ',': PUNCT_DOT_1,
    '·': PUNCT_DOT_1,
    ':': PUNCT_DOT_2,
    ';': PUNCT_DOT_2,
    '⁝': PUNCT_DOT_3,
    '︙': PUNCT_DOT_3,
    '⁘': PUNCT_DOT_4,
    '⁛': PUNCT_DOT_4,
    '…': PUNCT_DOT_4,
    '⸭': PUNCT_DOT_5,
    '-': PUNCT_LINE_1,
    '=': PUNCT_LINE_2,
    '?': PUNCT_INTERR,
    '!': PUNCT_EXCLAM,
    '|': PUNCT_PAREN,
    '‖': PUNCT_PAREN,
    '(': PUNCT_PAREN_L,
    '[': PUNCT_PAREN_L,
    '“': PUNCT_PAREN_L,
    ')': PUNCT_PAREN_R,
    ']': PUNCT_PAREN_R,
    '”': PUNCT_PAREN_R,
    '„': PUNCT_PAREN_R,
}


#: A mapping of base characters to their names.
_TENGWA_NAMES: Final[Mapping[str, str]] = {
    **{
        tema.tengwar[i]: name
        for i, names in enumerate([
            ['tinco', 'parma', 'calma', 'qesse'],
            ['ando', 'umbar', 'anga', 'ungwe'],
            ['thule', 'formen', 'aha', 'hwesta'],
            ['anto', 'ampa', 'anca', 'unque'],
            ['numen', 'malta', 'noldo', 'nwalme'],
            ['ore', 'vala', 'anna', 'wilya'],
            ['tinco-extended', 'parma-extended', 'calma-extended', 'qesse-extended'],
            ['ando-extended', 'umbar-extended', 'anga-extended', 'ungwe-extended'],
        ])
        for tema, name in zip(TEMAR, names)
    },
    ROMEN: 'romen',
    ARDA: 'arda',
    LAMBE: 'lambe',
    ALDA: 'alda',
    SILME: 'silme',
    SILME_NUQ: 'silme-nuquerna',
    ESSE: 'esse',
    ESSE_NUQ: 'esse-nuquerna',
    HYARMEN: 'hyarmen',
    HWESTA_SINDARINWA: 'hwesta-sindarinwa',
    YANTA: 'yanta',
    URE: 'ure',
    ARA: 'ara',
    HALLA: 'halla',
    TELCO: 'telco',
    OSSE_REVERSED: 'osse-reversed',
    OSSE: 'osse',
    TELCO_LIG: 'telco-ligating',
    ANNA_OPEN: 'anna-open',
    MALTA_HOOKED: 'malta-hooked',
    VALA_HOOKED: 'vala-hooked',
}


#: A mapping of names to base characters, as used in rule files.
TENGWAR: Final[Mapping[str, str]] = {name: c for c, name in _TENGWA_NAMES.items()}


#: A mapping of names to tehtar, as used in rule files.
TEHTAR: Final[Mapping[str, Tehta]] = {
    'a': TEHTA_A,
    'e': TEHTA_E,
    'i': TEHTA_I,
    'o': TEHTA_O,
    'u': TEHTA_U,
    'y': TEHTA_Y,
    'yanta': TEHTA_YANTA,
    'andaith': TEHTA_ANDAITH,
}


#: A mapping of every named code point to its name.
NAMES: Final[Mapping[str, str]] = {
    **_TENGWA_NAMES,
    DC_OVER_DOT_3: 'over-dot-3',
    DC_UNDER_DOT_3: 'under-dot-3',
    DC_OVER_DOT_2: 'over-dot-2',
    DC_UNDER_DOT_2: 'under-dot-2',
    DC_OVER_DOT_1: 'over-dot-1',
    DC_UNDER_DOT_1: 'under-dot-1',
    DC_OVER_ACUTE_1: 'over-acute-1',
    DC_UNDER_ACUTE_1: 'under-acute-1',
    DC_OVER_ACUTE_2: 'over-acute-2',
    DC_UNDER_ACUTE_2: 'under-acute-2',
    DC_OVER_HOOK_R_1: 'over-hook-r-1',
    DC_UNDER_HOOK_R_1: 'under-hook-r-1',
    DC_OVER_HOOK_L_1: 'over-hook-l-1',
    DC_UNDER_HOOK_L_1: 'under-hook-l-1',
    DC_OVER_HOOK_R_2: 'over-hook-r-2',
    DC_OVER_HOOK_L_2: 'over-hook-l-2',
    DC_OVER_LINE: 'over-line',
    DC_UNDER_LINE_H: 'under-line-h',
    DC_OVER_WAVE: 'over-wave',
    DC_OVER_BREVE: 'over-breve',
    DC_OVER_GRAVE: 'over-grave',
    DC_OVER_CIRCUMFLEX: 'over-circumflex',
    DC_OVER_DOT_3_INV: 'over-dot-3-inverted',
    DC_UNDER_LINE_V: 'under-line-v',
    DC_INNER_DOT_1: 'inner-dot-1',
    DC_UNDER_RING: 'under-ring',
    SA_RINCE_FINAL: 'sa-rince-final',
    SA_RINCE: 'sa-rince',
    PUNCT_DOT_1: 'punct-dot-1',
    PUNCT_DOT_2: 'punct-dot-2',
    PUNCT_DOT_3: 'punct-dot-3',
    PUNCT_DOT_4: 'punct-dot-4',
    PUNCT_DOT_5: 'punct-dot-5',
    PUNCT_EXCLAM: 'punct-exclam',
    PUNCT_INTERR: 'punct-interr',
    PUNCT_PAREN: 'punct-paren',
    PUNCT_LINE_1: 'punct-line-1',
    PUNCT_LINE_2: 'punct-line-2',
    PUNCT_PAREN_L: 'punct-paren-l',
    PUNCT_PAREN_R: 'punct-paren-r',
    PUNCT_THORIN: 'punct-thorin',
    **{digit: f'num-{value:X}' for value, digit in enumerate(NUMERALS)},
    ZWJ: 'zwj',
}


#: A mapping of names to code points; the inverse of `NAMES`.
CODE_POINTS: Final[Mapping[str, str]] = {name: c for c, name in NAMES.items()}


def _agl_name(c: str) -> Optional[str]:
    """Returns the Adobe Glyph List name of an ASCII character.

    Args:
        c: A character.

    Returns:
        The Adobe Glyph List name of `c`, or ``None`` if `c` is not
        ASCII or has no AGL name.
    """
    return fontTools.agl.UV2AGL.get(ord(c)) if ord(c) <= 0x7F else None


def _u_name(c: str) -> str:
    """Returns the name of a character with the ``uni`` or ``u`` prefix.
    """
    cp = ord(c)
    return '{}{:04X}'.format('uni' if cp <= 0xFFFF else 'u', cp)


def describe(text: str) -> Sequence[str]:
    """Returns a readable name for each character of a string.

    Tengwar characters get this project’s names. ASCII characters get
    their Adobe Glyph List names. Anything else gets a name derived from
    its code point.

    Args:
        text: A string, typically the output of a transcription.
    """
    return [NAMES.get(c) or _agl_name(c) or _u_name(c) for c in text]
