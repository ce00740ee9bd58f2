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

"""Rendering policies.

A policy answers questions about how tengwar look: which have inverted
forms, which sa-rincë suits a tengwa, and which pairs can join. A policy
is stateless; it only looks at the characters it is given.
"""


from __future__ import annotations


__all__ = [
    'LigatureSide',
    'PLAIN',
    'Policy',
    'STANDARD',
    'SibilantStyle',
    'Standard',
]


import enum
from collections.abc import Mapping
from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import TYPE_CHECKING

from tengwar.characters import ALDA
from tengwar.characters import ARA
from tengwar.characters import ARDA
from tengwar.characters import ESSE
from tengwar.characters import ESSE_NUQ
from tengwar.characters import HALLA
from tengwar.characters import HWESTA_SINDARINWA
from tengwar.characters import HYARMEN
from tengwar.characters import LAMBE
from tengwar.characters import ROMEN
from tengwar.characters import SILME
from tengwar.characters import SILME_NUQ
from tengwar.characters import TELCO
from tengwar.characters import TELCO_LIG
from tengwar.characters import TINCO
from tengwar.characters import Tehta
from tengwar.characters import Tema
from tengwar.characters import Tyelle
from tengwar.characters import find_tyelle


if TYPE_CHECKING:
    from tengwar.glyph import Glyph


class SibilantStyle(enum.Enum):
    """The shape of a sa-rincë.
    """

    #: The small hook, written before any tehta.
    BASIC = enum.auto()

    #: The flourish for the end of a word, written after any tehta.
    ORNATE = enum.auto()


class LigatureSide(NamedTuple):
    """The visible edge of a glyph where it might join a neighbor.

    Attributes:
        char: The character at the edge: the base, or a long carrier
            written on that side of the base.
        tehta: The tehta written on `char`, if any.
        doubled: Whether `tehta` is written twice or in its long form.
    """

    char: str
    tehta: Optional[Tehta]
    doubled: bool

    @property
    def regular(self) -> Optional[tuple[Tema, Tyelle]]:
        """Returns the téma and tyellë of `char` if it is a regular
        tengwa.
        """
        return find_tyelle(self.char)

    @classmethod
    def _of(cls, glyph: Glyph, right: bool) -> LigatureSide:
        from tengwar.glyph import Placement
        placement = glyph.resolve_placement()
        carrier = Placement.ON_CARRIER_AFTER if right else Placement.ON_CARRIER_BEFORE
        if placement == carrier:
            return cls(ARA, glyph.tehta, False)
        if placement is None and glyph.long and glyph.base is not None and glyph.tehta_first != right:
            return cls(ARA, None, False)
        if placement is None or placement.on_carrier:
            return cls(glyph.resolved_base(), None, False)
        return cls(glyph.resolved_base(), glyph.tehta, glyph.long)

    @classmethod
    def right_of(cls, glyph: Glyph) -> LigatureSide:
        """Returns the right edge of a glyph.
        """
        return cls._of(glyph, True)

    @classmethod
    def left_of(cls, glyph: Glyph) -> LigatureSide:
        """Returns the left edge of a glyph.
        """
        return cls._of(glyph, False)


class Policy:
    """A policy with no special behavior.

    No tengwa has an inverted form, every sa-rincë is basic, and nothing
    joins. Subclasses override the methods for the behavior they want.
    """

    def inverted_form_of(self, base: str) -> Optional[str]:
        """Returns the inverted form of a tengwa.

        An inverted form extends downwards, leaving room above for a
        tehta.

        Args:
            base: A base character.

        Returns:
            The inverted form of `base`, or ``None`` if it has none.
        """
        return None

    def has_inverted_form(self, base: str) -> bool:
        return self.inverted_form_of(base) is not None

    def may_host_sibilant(self, base: str) -> bool:
        """Returns whether a tengwa may take a sa-rincë.
        """
        return True

    def sibilant_style(self, base: str, final: bool) -> SibilantStyle:
        """Chooses the sa-rincë for a tengwa.

        Args:
            base: The base character the sa-rincë attaches to.
            final: Whether the glyph ends its word and may use the
                ornate form.
        """
        return SibilantStyle.BASIC

    def ara_ligates_with(self, base: str) -> bool:
        """Returns whether a tengwa may join a following long carrier.
        """
        return False

    def carrier_ligates_with(self, base: str) -> bool:
        """Returns whether a preceding short carrier may join a tengwa.
        """
        return False

    def sides_ligate(self, left: LigatureSide, right: LigatureSide, level: int) -> bool:
        """Returns whether two glyph edges may join.

        Args:
            left: The right edge of the first glyph.
            right: The left edge of the second glyph.
            level: The ligature aggressiveness; 0 means never join.
        """
        return False

    def glyphs_ligate(self, left: Glyph, right: Glyph, level: int) -> bool:
        """Returns whether a zero width joiner should join two glyphs.

        Args:
            left: The first glyph.
            right: The glyph after `left`.
            level: The ligature aggressiveness; 0 means never join.
        """
        if level <= 0 or left.base is None or right.base is None:
            return False
        return self.sides_ligate(LigatureSide.right_of(left), LigatureSide.left_of(right), level)


class Standard(Policy):
    """The policy that suits the Free Tengwar Font Project fonts.
    """

    _INVERTED_FORMS: Final[Mapping[str, str]] = {
        SILME: SILME_NUQ,
        ESSE: ESSE_NUQ,
    }

    _NO_SIBILANT: Final[frozenset[str]] = frozenset({ROMEN, ARDA, SILME, SILME_NUQ, ESSE, ESSE_NUQ})

    _ORNATE_IRREGULARS: Final[frozenset[str]] = frozenset({LAMBE, ALDA, HYARMEN})

    _SIBILANT_BODIES: Final[frozenset[str]] = frozenset({SILME, ESSE})

    _SIBILANT_PARTNERS: Final[frozenset[str]] = frozenset({ROMEN, ARDA, SILME, SILME_NUQ, ESSE, ESSE_NUQ})

    def inverted_form_of(self, base: str) -> Optional[str]:
        return self._INVERTED_FORMS.get(base)

    def may_host_sibilant(self, base: str) -> bool:
        return base not in self._NO_SIBILANT

    def sibilant_style(self, base: str, final: bool) -> SibilantStyle:
        if final and self.may_host_sibilant(base):
            if base in self._ORNATE_IRREGULARS:
                return SibilantStyle.ORNATE
            if (regular := find_tyelle(base)) is not None and not regular[1].is_extended:
                return SibilantStyle.ORNATE
        return SibilantStyle.BASIC

    def ara_ligates_with(self, base: str) -> bool:
        return (
            TINCO <= base <= HWESTA_SINDARINWA
            and base not in {SILME_NUQ, ESSE_NUQ, ESSE}
        )

    def carrier_ligates_with(self, base: str) -> bool:
        if (regular := find_tyelle(base)) is not None:
            tema, tyelle = regular
            return tema.left or not (tyelle.is_ascending or tyelle.is_extended)
        return base not in {ARA, HALLA, TELCO, TELCO_LIG}

    def sides_ligate(self, left: LigatureSide, right: LigatureSide, level: int) -> bool:
        if left.tehta is not None and right.tehta is not None:
            if left.tehta != right.tehta or left.doubled or right.doubled:
                return False
        if left.char in self._SIBILANT_BODIES:
            if right.regular is not None:
                return level >= 2
            return right.char in self._SIBILANT_PARTNERS and level >= 3
        if (left_regular := left.regular) is not None and (right_regular := right.regular) is not None:
            return left_regular[0].left and not right_regular[0].left and right_regular[1].is_descending and level >= 3
        return False


#: The policy with no special behavior.
PLAIN: Final[Policy] = Policy()


#: The default policy.
STANDARD: Final[Policy] = Standard()
