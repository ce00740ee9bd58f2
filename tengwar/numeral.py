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

"""Tengwar numerals and sequence indices.

Numbers are duodecimal unless marked otherwise. Digits are written
least significant first, each with a mark showing the base.
"""


from __future__ import annotations


__all__ = [
    'Numeral',
    'SEQUENCE_SUFFIX',
    'parse_sequence',
]


import re
from typing import Final
from typing import NamedTuple
from typing import Optional

from tengwar.characters import DC_OVER_DOT_1
from tengwar.characters import DC_OVER_LINE
from tengwar.characters import DC_UNDER_DOT_1
from tengwar.characters import DC_UNDER_LINE_H
from tengwar.characters import DC_UNDER_RING
from tengwar.characters import NUMERALS
from tengwar.characters import SEQUENCE
from tengwar.characters import TEMA_TINCO


#: The input prefix of a decimal number.
DECIMAL_PREFIX: Final[str] = '#'


#: The input suffix of an ordinal number.
ORDINAL_SUFFIX: Final[str] = '@'


#: The input suffix of a sequence index.
SEQUENCE_SUFFIX: Final[str] = '#'


#: The output prefix of a negative number.
NEGATIVE_PREFIX: Final[str] = '-'


#: The output suffix of an ordinal number.
ORDINAL_MARK: Final[str] = TEMA_TINCO.single_ex


_NUMERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r'(#?)(-?[0-9]+)(@?)')


_SEQUENCE_PATTERN: Final[re.Pattern[str]] = re.compile(r'([0-9]{1,2})#')


class Numeral(NamedTuple):
    """A number to write with Tengwar digits.

    Attributes:
        value: The value.
        base_10: Whether to write the number in base 10 instead of base
            12.
        ordinal: Whether the number is ordinal (“first”) instead of
            cardinal (“one”).
        lines: Whether to mark the base with lines instead of dots.
    """

    value: int
    base_10: bool = False
    ordinal: bool = False
    lines: bool = False

    @property
    def base(self) -> int:
        return 10 if self.base_10 else 12

    @property
    def _marker(self) -> tuple[str, bool]:
        """Returns the base marker and whether the ones digit gets it
        when the number has more than one digit.
        """
        if self.base_10:
            return DC_OVER_LINE if self.lines else DC_OVER_DOT_1, True
        if self.lines:
            return DC_UNDER_LINE_H, True
        return DC_UNDER_DOT_1, False

    def digits(self) -> list[int]:
        """Returns the digits of the absolute value, least significant
        first.
        """
        n = abs(self.value)
        digits = []
        while True:
            n, digit = divmod(n, self.base)
            digits.append(digit)
            if n == 0:
                return digits

    @classmethod
    def parse(cls, text: str) -> Optional[tuple[Numeral, int]]:
        """Parses a number at the start of a string.

        The syntax is an optional ``#`` for base 10, an optional ``-``,
        one or more ASCII digits, and an optional ``@`` for an ordinal.
        The digits are always read as decimal; the base only affects how
        the number is written.

        Args:
            text: The string, which may continue after the number.

        Returns:
            A tuple of the number and the number of characters it takes
            up, or ``None`` if `text` does not start with a number.
        """
        if (match := _NUMERAL_PATTERN.match(text)) is None:
            return None
        return cls(int(match[2]), base_10=bool(match[1]), ordinal=bool(match[3])), match.end()

    def __str__(self) -> str:
        marker, mark_ones = self._marker
        out = []
        if self.value < 0:
            out.append(NEGATIVE_PREFIX)
        match self.digits():
            case [digit]:
                out += [NUMERALS[digit], marker]
            case [first, *rest]:
                out += [NUMERALS[first], DC_UNDER_RING]
                if mark_ones:
                    out.append(marker)
                for digit in rest:
                    out += [NUMERALS[digit], marker]
        if self.ordinal:
            out.append(ORDINAL_MARK)
        return ''.join(out)

    @classmethod
    def read(cls, text: str) -> Numeral:
        """Reads a number written with Tengwar digits.

        This is the inverse of `str`.

        Args:
            text: The output of ``str`` on a `Numeral`.

        Raises:
            ValueError: If `text` is not a written number.
        """
        negative = text.startswith(NEGATIVE_PREFIX)
        ordinal = text.endswith(ORDINAL_MARK)
        lines = DC_OVER_LINE in text or DC_UNDER_LINE_H in text
        base_10 = DC_OVER_DOT_1 in text or DC_OVER_LINE in text
        digits = [NUMERALS.index(c) for c in text if c in NUMERALS]
        if not digits:
            raise ValueError(f'Not a number: {text!r}')
        base = 10 if base_10 else 12
        value = sum(digit * base ** i for i, digit in enumerate(digits))
        numeral = cls(-value if negative else value, base_10, ordinal, lines)
        if str(numeral) != text:
            raise ValueError(f'Not a number: {text!r}')
        return numeral


def parse_sequence(text: str) -> Optional[tuple[str, int]]:
    """Parses a sequence index at the start of a string.

    A sequence index is one or two digits followed by ``#``. The indices
    1 through 24 are written as the regular tengwar in traditional
    order, the way Latin letters are used in “a.”, “b.”, “c.”. Other
    values are written as a number followed by a literal ``#``.

    Args:
        text: The string, which may continue after the index.

    Returns:
        A tuple of the rendered index and the number of characters it
        takes up, or ``None`` if `text` does not start with an index.
    """
    if (match := _SEQUENCE_PATTERN.match(text)) is None:
        return None
    value = int(match[1])
    if 1 <= value <= len(SEQUENCE):
        return SEQUENCE[value - 1], match.end()
    return f'{Numeral(value)}{SEQUENCE_SUFFIX}', match.end()
