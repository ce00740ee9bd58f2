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

"""Transcription settings and the passes after tokenization.
"""


from __future__ import annotations


__all__ = [
    'MAX_LIGATE_ZWJ',
    'TokenIter',
    'TranscriberSettings',
    'render',
    'transcribe',
]


from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import TYPE_CHECKING

from tengwar.characters import ZWJ
from tengwar.glyph import Glyph
from tengwar.glyph import VowelStyle
from tengwar.modes import Mode
from tengwar.modes import get_mode
from tengwar.tokenizer import Tokenizer


if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Iterator

    from tengwar.modes import Token


#: The ligature level at which every supported zero width joiner is
#: used.
MAX_LIGATE_ZWJ: Final[int] = 3


class TranscriberSettings(NamedTuple):
    """Settings for one transcription.

    Attributes:
        alt_a: Whether to write the A tehta as a circumflex.
        alt_rince: Whether to use the ornate sa-rincë at the end of a
            word where it fits.
        dot_plain: Whether to put a dot below a consonant with no vowel.
        elide_a: Whether to leave out the A tehta.
        ligate_short: Whether a short carrier joins the glyph after it
            where it can.
        ligate_zwj: How aggressively to join glyphs with zero width
            joiners: 0 never, 1 only a tengwa and its long carrier, 2
            also silmë and essë with a following regular tengwa, and
            `MAX_LIGATE_ZWJ` everywhere the font supports it.
        nuquerna: Whether to invert silmë and essë under a tehta.
        vowels: How to write a long vowel.
    """

    alt_a: bool = False
    alt_rince: bool = False
    dot_plain: bool = False
    elide_a: bool = False
    ligate_short: bool = False
    ligate_zwj: int = 0
    nuquerna: bool = False
    vowels: VowelStyle = VowelStyle.DOUBLED

    def all_ligatures(self) -> TranscriberSettings:
        """Returns a copy of these settings with every ligature enabled.
        """
        return self._replace(ligate_short=True, ligate_zwj=MAX_LIGATE_ZWJ)

    def apply(self, glyph: Glyph) -> None:
        """Applies the settings that do not depend on context to a
        glyph.
        """
        glyph.ligate_zwj = self.ligate_zwj
        glyph.nuquerna = self.nuquerna
        glyph.vowels = self.vowels
        if self.dot_plain and glyph.base is not None and not glyph.carries_tehta():
            glyph.dot_under = True
        if self.elide_a:
            glyph.elide_a()
        elif self.alt_a:
            glyph.set_alt_a()


class TokenIter:
    """An iterator that applies transcription settings to tokens.

    It keeps one token of lookahead. A glyph followed by another glyph
    cannot use the final sa-rincë, but it may use the ligating short
    carrier if the glyph after it allows it.
    """

    def __init__(self, tokens: Iterable[Token], settings: TranscriberSettings = TranscriberSettings()) -> None:
        self._tokens = iter(tokens)
        self.settings = settings
        self._next = self._pull()

    def _pull(self) -> Optional[Token]:
        token = next(self._tokens, None)
        if isinstance(token, Glyph):
            self.settings.apply(token)
        return token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if (token := self._next) is None:
            raise StopIteration
        self._next = self._pull()
        if isinstance(token, Glyph):
            if isinstance(self._next, Glyph):
                token.rince_final = False
                token.ligate_short = self.settings.ligate_short and self._next.telco_ligates()
            else:
                token.rince_final = self.settings.alt_rince
                token.ligate_short = False
        return token


def render(tokens: Iterable[Token]) -> str:
    """Renders tokens as text.

    A zero width joiner goes between two adjacent glyphs that join.

    Args:
        tokens: The tokens, after the settings have been applied.
    """
    out = []
    previous = None
    for token in tokens:
        if isinstance(previous, Glyph) and isinstance(token, Glyph) and previous.ligates_with(token):
            out.append(ZWJ)
        out.append(str(token))
        previous = token
    return ''.join(out)


def transcribe(
        text: str,
        mode: Mode | str = 'quenya',
        settings: TranscriberSettings = TranscriberSettings(),
) -> str:
    """Transcribes text into the Tengwar.

    Args:
        text: The text to transcribe.
        mode: A mode, or the name of a built-in mode. A mode instance
            keeps state between glyphs, so it should not be shared
            between transcriptions.
        settings: The settings.

    Raises:
        ValueError: If `mode` is a string that does not name a mode.
    """
    if isinstance(mode, str):
        mode = get_mode(mode)
    return render(TokenIter(Tokenizer(text, mode), settings))
