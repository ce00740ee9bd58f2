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

r"""The mode system.

A mode is a set of rules for writing one language with the Tengwar. The
tokenizer offers a mode chunks of lowercase input, at most
`Mode.max_chunk` characters long, and the mode answers with a parse
action saying what it did with the chunk.

A mode holds at most one glyph under construction. Consonants, vowels,
and modifiers are added to it until the mode cannot extend it any
further, at which point the mode or the tokenizer commits it.

The parse actions are as follows.

1. `MatchedNone`: Nothing in the chunk could be used. The tokenizer
   offers a narrower chunk, or gives up on the current position if the
   chunk was one character long.

2. `MatchedPart`: Some characters were absorbed into the glyph under
   construction.

3. `MatchedToken`: A token is complete. The tokenizer emits it and
   advances past the characters it covers, which may be none if the
   token was a glyph committed to make room for a new one.

4. `Skip`: Some characters must pass through unchanged. Any glyph under
   construction is committed first.

5. `Escape`: An escape marker was found. The tokenizer advances past it
   and passes the characters after it through unchanged.

This module defines the base class of all modes. The built-in modes are
defined in the other modules in this package.
"""


from __future__ import annotations


__all__ = [
    'Escape',
    'MATCHED_NONE',
    'MODE_NAMES',
    'MatchedNone',
    'MatchedPart',
    'MatchedToken',
    'Mode',
    'Skip',
    'Token',
    'get_mode',
    'lookup_consonant',
]


from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import TYPE_CHECKING

from tengwar.characters import PUNCTUATION
from tengwar.glyph import Glyph
from tengwar.numeral import Numeral
from tengwar.numeral import parse_sequence
from tengwar.policy import STANDARD


if TYPE_CHECKING:
    from collections.abc import Mapping

    from tengwar.characters import Tehta
    from tengwar.policy import Policy


#: The escape marker.
ESCAPE: Final[str] = '\\'


type Token = str | Glyph | Numeral


class MatchedNone:
    """The parse action for a chunk the mode could not use.
    """

    def __repr__(self) -> str:
        return 'MATCHED_NONE'


#: The only `MatchedNone`.
MATCHED_NONE: Final[MatchedNone] = MatchedNone()


class MatchedPart(NamedTuple):
    """The parse action for characters absorbed into the glyph under
    construction.

    Attributes:
        length: The number of characters absorbed.
    """

    length: int


class MatchedToken(NamedTuple):
    """The parse action for a complete token.

    Attributes:
        token: The token.
        length: The number of characters to advance past.
    """

    token: Token
    length: int


class Skip(NamedTuple):
    """The parse action for characters to pass through unchanged.

    Attributes:
        count: The number of characters.
    """

    count: int


class Escape(NamedTuple):
    """The parse action for an escape marker.

    Attributes:
        length: The length of the marker.
        skip: The number of characters after the marker to pass through
            unchanged.
    """

    length: int
    skip: int


type ParseAction = MatchedNone | MatchedPart | MatchedToken | Skip | Escape


class Mode:
    """A set of rules for writing a language with the Tengwar.

    Subclasses must override `process`.

    Attributes:
        max_chunk: The length of the widest chunk that the tokenizer
            offers to `process`.
        policy: The policy given to every glyph this mode creates.
        current: The glyph under construction, if any.
        previous: The last glyph committed in the current word, or
            ``None`` if the next glyph starts a word.
    """

    max_chunk: int = 3

    def __init__(self, policy: Policy = STANDARD) -> None:
        self.policy = policy
        self.current: Optional[Glyph] = None
        self.previous: Optional[Glyph] = None

    @property
    def initial(self) -> bool:
        """Returns whether the glyph under construction, or the next one
        if there is none, starts a word.
        """
        return self.previous is None

    def new_glyph(self, base: Optional[str] = None, tehta: Optional[Tehta] = None, **kwargs) -> Glyph:
        return Glyph(base, tehta, policy=self.policy, **kwargs)

    def finish_current(self) -> Optional[Glyph]:
        """Commits the glyph under construction.

        If there is none, the next glyph starts a new word.

        Returns:
            The committed glyph, or ``None`` if there was none.
        """
        self.previous = self.current
        self.current = None
        return self.previous

    def commit(self) -> MatchedToken:
        """Commits the glyph under construction without consuming any
        input.
        """
        assert self.current is not None, 'There is no glyph to commit'
        return MatchedToken(self.finish_current(), 0)

    def emit(self, glyph: Glyph, length: int) -> MatchedToken:
        """Emits a complete glyph without touching the glyph under
        construction.
        """
        self.previous = glyph
        return MatchedToken(glyph, length)

    def break_word(self) -> None:
        self.previous = None

    def escape(self, chunk: str) -> Optional[ParseAction]:
        """Handles an escape marker at the start of a chunk.

        A marker followed by whitespace is a silent word break: nothing
        is written, but the glyph under construction is committed and
        the next glyph starts a word. A marker followed by anything else
        passes that character through unchanged. A marker at the end of
        the input is itself passed through.

        The tokenizer checks for a marker before calling `process`, so
        the lookahead does not depend on `max_chunk`.

        Args:
            chunk: The next two characters of lowercase input, or one at
                the end of the input.

        Returns:
            The parse action, or ``None`` if the chunk does not start
            with an escape marker.
        """
        if not chunk.startswith(ESCAPE):
            return None
        if len(chunk) == 1:
            return Skip(1)
        if self.current is not None:
            return self.commit()
        if chunk[1].isspace():
            self.break_word()
            return MatchedToken('', 2)
        return Escape(1, 1)

    def find_secondary(self, text: str) -> Optional[tuple[Token, int]]:
        """Finds something other than a glyph at the start of a string.

        This is tried when no glyph can be made at the current position.
        Sequence indices come first, then numbers, then punctuation.

        Args:
            text: The rest of the lowercase input.

        Returns:
            A tuple of a token and the number of characters it covers,
            or ``None``.
        """
        if (sequence := parse_sequence(text)) is not None:
            return sequence
        if (numeral := Numeral.parse(text)) is not None:
            return numeral
        if text and (punctuation := PUNCTUATION.get(text[0])) is not None:
            return punctuation, 1
        return None

    def finalize(self, token: Token, next: Optional[Token]) -> None:
        """Applies the last corrections to a token once the token after
        it is known.

        A glyph that ends its word takes its final base, if it has one.

        Args:
            token: The token to correct in place.
            next: The token after `token`, or ``None`` at the end of the
                input.
        """
        if isinstance(token, Glyph) and token.final_base is not None and not isinstance(next, Glyph):
            token.base = token.final_base

    def process(self, chunk: str) -> ParseAction:
        """Processes a chunk of input.

        Args:
            chunk: A nonempty chunk of lowercase input, no longer than
                `max_chunk`.

        Returns:
            What the mode did with `chunk`.
        """
        raise NotImplementedError


def lookup_consonant[T](
        table: Mapping[str, T],
        chunk: str,
        *,
        doubled: bool = True,
) -> Optional[tuple[T, bool]]:
    """Looks up a consonant in a table.

    Args:
        table: A mapping of spellings to consonants.
        chunk: A spelling to look up.
        doubled: Whether a doubled letter found in `table` is a long
            consonant.

    Returns:
        A tuple of the consonant and whether it is long,
        or ``None`` if `chunk` is not a consonant.
    """
    if (base := table.get(chunk)) is not None:
        return base, False
    if doubled and len(chunk) == 2 and chunk[0] == chunk[1] and (base := table.get(chunk[0])) is not None:
        return base, True
    return None


#: The names of the built-in modes and their aliases.
MODE_NAMES: Final[Mapping[str, str]] = {
    'quenya': 'quenya',
    'q': 'quenya',
    'classical': 'quenya',
    'c': 'quenya',
    'gondor': 'gondor',
    'g': 'gondor',
    'beleriand': 'beleriand',
    'b': 'beleriand',
}


def get_mode(name: str, policy: Policy = STANDARD) -> Mode:
    """Creates a built-in mode by name.

    Args:
        name: The name of a mode or one of its aliases, in any case.
        policy: The policy for the mode to use.

    Raises:
        ValueError: If `name` does not name a mode.
    """
    match MODE_NAMES.get(name.lower()):
        case 'quenya':
            from tengwar.modes.quenya import Quenya
            return Quenya(policy)
        case 'gondor':
            from tengwar.modes.gondor import Gondor
            return Gondor(policy)
        case 'beleriand':
            from tengwar.modes.beleriand import Beleriand
            return Beleriand(policy)
    raise ValueError(f'Unknown mode: {name!r}')
