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

"""Glyphs and the placement of their tehtar.
"""


from __future__ import annotations


__all__ = [
    'Glyph',
    'Placement',
    'VowelStyle',
]


import enum
from typing import Optional
from typing import TYPE_CHECKING

from tengwar.characters import CARRIER_LONG
from tengwar.characters import CARRIER_SHORT
from tengwar.characters import CARRIER_SHORT_LIG
from tengwar.characters import MOD_LABIAL
from tengwar.characters import MOD_LONG_CONS
from tengwar.characters import MOD_NASAL
from tengwar.characters import MOD_NO_VOWEL
from tengwar.characters import MOD_PALATAL
from tengwar.characters import SA_RINCE
from tengwar.characters import SA_RINCE_FINAL
from tengwar.characters import TEHTA_A
from tengwar.characters import TEHTA_YANTA
from tengwar.characters import ZWJ
from tengwar.characters import Tehta
from tengwar.policy import STANDARD
from tengwar.policy import SibilantStyle


if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from tengwar.policy import Policy


@enum.unique
class VowelStyle(enum.StrEnum):
    """How to write a long vowel.
    """

    #: Always put the tehta on a long carrier.
    SEPARATE = enum.auto()

    #: Write the tehta twice where the tehta allows it.
    DOUBLED = enum.auto()

    #: Use the tehta’s distinct long mark where it has one.
    UNIQUE = enum.auto()


class Placement(enum.Enum):
    """Where a tehta is written relative to its glyph’s base.
    """

    #: The tehta is written once on the base.
    ON_BASE_ONCE = enum.auto()

    #: The tehta is written twice on the base.
    ON_BASE_TWICE = enum.auto()

    #: The tehta is written on a long carrier before the base.
    ON_CARRIER_BEFORE = enum.auto()

    #: The tehta is written on a long carrier after the base.
    ON_CARRIER_AFTER = enum.auto()

    @property
    def on_carrier(self) -> bool:
        return self in {Placement.ON_CARRIER_BEFORE, Placement.ON_CARRIER_AFTER}


class Glyph:
    """A base tengwa with all of its modifications.

    A glyph is created by a mode, which mutates it while it is under
    construction. After the mode commits it, only the transcriber’s
    post-pass changes it, and only in the attributes that depend on
    transcription settings or on the following token.

    Attributes:
        base: The base character, or ``None`` to use a carrier.
        tehta: The vowel diacritic, if any.
        long: Whether the vowel is long.
        nasal: Whether the consonant is nasalized, which is marked with
            an overbar.
        labial: Whether the consonant is labialized, which is marked
            with a wavy overbar.
        palatal: Whether the consonant is palatalized, which is marked
            with two dots below.
        long_cons: Whether the consonant is long, which is marked with
            an underbar.
        rince: Whether a sibilant follows, which is marked with a
            sa-rincë.
        rince_final: Whether the sa-rincë may use its ornate final form.
        nuquerna: Whether to invert the base when it holds a tehta.
        tehta_first: Whether the tehta represents a vowel that precedes
            the base, so that a separate long carrier goes before it.
        dot_under: Whether to mark the absence of a vowel with a dot
            below.
        ligate_short: Whether a short carrier should use its ligating
            form.
        ligate_zwj: How aggressively to join this glyph to its
            neighbors with zero width joiners; 0 means never.
        final_base: The base to use instead of `base` if this glyph
            turns out to end its word.
        vowels: How to write a long vowel.
        policy: The policy to consult about substitutions.
    """

    def __init__(
            self,
            base: Optional[str] = None,
            tehta: Optional[Tehta] = None,
            *,
            long: bool = False,
            nasal: bool = False,
            labial: bool = False,
            palatal: bool = False,
            long_cons: bool = False,
            rince: bool = False,
            rince_final: bool = False,
            nuquerna: bool = False,
            tehta_first: bool = False,
            dot_under: bool = False,
            ligate_short: bool = False,
            ligate_zwj: int = 0,
            final_base: Optional[str] = None,
            vowels: VowelStyle = VowelStyle.DOUBLED,
            policy: Policy = STANDARD,
    ) -> None:
        assert base is not None or tehta is not None, 'A glyph has neither a base nor a tehta'
        self.base = base
        self.tehta = tehta
        self.long = long
        self.nasal = nasal
        self.labial = labial
        self.palatal = palatal
        self.long_cons = long_cons
        self.rince = rince
        self.rince_final = rince_final
        self.nuquerna = nuquerna
        self.tehta_first = tehta_first
        self.dot_under = dot_under
        self.ligate_short = ligate_short
        self.ligate_zwj = ligate_zwj
        self.final_base = final_base
        self.vowels = vowels
        self.policy = policy

    def __repr__(self) -> str:
        flags = [
            name
            for name in ['long', 'nasal', 'labial', 'palatal', 'long_cons', 'rince', 'rince_final', 'nuquerna', 'tehta_first', 'dot_under', 'ligate_short']
            if getattr(self, name)
        ]
        return '<Glyph {}>'.format(', '.join(map(str, [
            self.base and f'{ord(self.base):04X}',
            self.tehta and f'{ord(self.tehta.base):04X}',
            *flags,
        ])))

    def integrate_consonant(self, other: Glyph) -> None:
        """Copies the consonant attributes of another glyph into this one.
        """
        self.base = other.base
        self.nasal = other.nasal
        self.labial = other.labial
        self.palatal = other.palatal
        self.long_cons = other.long_cons
        self.rince = other.rince
        self.final_base = other.final_base

    def integrate_vowel(self, other: Glyph) -> None:
        """Copies the vowel attributes of another glyph into this one.
        """
        self.tehta = other.tehta
        self.long = other.long

    def replace_base(self, old: str, new: str) -> bool:
        """Replaces this glyph’s base if it is a given character.

        Returns:
            Whether the base was replaced.
        """
        if self.base == old:
            self.base = new
            return True
        return False

    def is_short_carrier(self) -> bool:
        return self.base is None and not self.long

    def carries_tehta(self) -> bool:
        """Returns whether this glyph’s base holds a tehta.

        A tehta on a long carrier does not count, since the base itself
        still lacks a vowel mark.
        """
        placement = self.resolve_placement()
        return placement is not None and not placement.on_carrier

    def elide_a(self) -> None:
        """Removes the A tehta, leaving any base or carrier in place.
        """
        if self.tehta == TEHTA_A:
            self.tehta = None

    def set_alt_a(self) -> None:
        """Replaces the A tehta with its simpler alternative.
        """
        if self.tehta == TEHTA_A:
            self.tehta = TEHTA_YANTA

    def resolve_placement(self) -> Optional[Placement]:
        """Decides where this glyph’s tehta is written.

        A short vowel, or a vowel with no base to sit on, is written
        once. A long vowel is written twice or with its distinct mark
        when the vowel style and the tehta allow it. Otherwise it goes
        on a long carrier. A long vowel on a base that has an inverted
        form which is not being used always goes on a long carrier,
        since the upright base has no room for a long mark.

        Returns:
            The placement of the tehta, or ``None`` if there is no
            tehta.
        """
        if self.tehta is None:
            return None
        if not self.long or self.base is None:
            return Placement.ON_BASE_ONCE
        carrier = Placement.ON_CARRIER_BEFORE if self.tehta_first else Placement.ON_CARRIER_AFTER
        if self.policy.has_inverted_form(self.base) and not self.nuquerna:
            return carrier
        match self.vowels:
            case VowelStyle.DOUBLED if self.tehta.can_double:
                return Placement.ON_BASE_TWICE
            case VowelStyle.UNIQUE if self.tehta.alternate is not None:
                return Placement.ON_BASE_ONCE
        return carrier

    def resolved_base(self) -> str:
        """Returns the character to write as this glyph’s base.

        If no base is set, this is the appropriate carrier.
        """
        if self.base is None:
            if self.long:
                return CARRIER_LONG
            return CARRIER_SHORT_LIG if self.ligate_short else CARRIER_SHORT
        if self.nuquerna and (placement := self.resolve_placement()) is not None and not placement.on_carrier:
            return self.policy.inverted_form_of(self.base) or self.base
        return self.base

    def telco_ligates(self) -> bool:
        """Returns whether a short carrier before this glyph may join it.
        """
        return self.policy.carrier_ligates_with(self.resolved_base())

    def ligates_with(self, other: Glyph) -> bool:
        """Returns whether this glyph joins the following glyph.
        """
        return self.policy.glyphs_ligate(self, other, self.ligate_zwj)

    def _sibilant_mark(self) -> tuple[str, bool]:
        """Returns the sa-rincë of this glyph and whether it is written
        after the tehta.
        """
        base = self.resolved_base()
        if self.policy.sibilant_style(base, self.rince_final) == SibilantStyle.ORNATE:
            return SA_RINCE_FINAL, True
        return SA_RINCE, False

    def render(self) -> str:
        """Returns the characters of this glyph in writing order.

        The base comes first, or a long carrier holding a tehta that
        leads it. Modifiers follow in a fixed order: nasal, long,
        labial, then palatal. The basic sa-rincë is written before the
        tehta and the ornate one after it, since some fonts misplace a
        tehta after a basic sa-rincë otherwise.
        """
        out: MutableSequence[str] = []
        placement = self.resolve_placement()
        tehta = self.tehta
        # An elided long vowel still leaves its carrier.
        bare_carrier = placement is None and self.long and self.base is not None
        if placement == Placement.ON_CARRIER_BEFORE:
            assert tehta is not None
            out += [CARRIER_LONG, tehta.base]
        elif bare_carrier and self.tehta_first:
            out.append(CARRIER_LONG)
        base = self.resolved_base()
        out.append(base)
        if self.nasal:
            out.append(MOD_NASAL)
        if self.long_cons:
            out.append(MOD_LONG_CONS)
        if self.labial:
            out.append(MOD_LABIAL)
        if self.palatal:
            out.append(MOD_PALATAL)
        if self.dot_under:
            out.append(MOD_NO_VOWEL)
        rince, rince_after_tehta = self._sibilant_mark() if self.rince else ('', False)
        if placement is None or placement.on_carrier:
            out.append(rince)
            rince = ''
        elif not rince_after_tehta:
            out.append(rince)
            rince = ''
        match placement:
            case Placement.ON_BASE_ONCE:
                assert tehta is not None
                use_alternate = self.long and self.base is not None and self.vowels == VowelStyle.UNIQUE
                out.append(tehta.alternate if use_alternate and tehta.alternate else tehta.base)
            case Placement.ON_BASE_TWICE:
                assert tehta is not None
                out += [tehta.base, tehta.base]
            case Placement.ON_CARRIER_AFTER:
                assert tehta is not None
                if self.ligate_zwj and self.policy.ara_ligates_with(base):
                    out.append(ZWJ)
                out += [CARRIER_LONG, tehta.base]
            case None if bare_carrier and not self.tehta_first:
                if self.ligate_zwj and self.policy.ara_ligates_with(base):
                    out.append(ZWJ)
                out.append(CARRIER_LONG)
        out.append(rince)
        return ''.join(out)

    def __str__(self) -> str:
        return self.render()
