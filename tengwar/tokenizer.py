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

"""The greedy parser that turns text into tokens.
"""


from __future__ import annotations


__all__ = [
    'Tokenizer',
    'fold_case',
]


import unicodedata
from typing import Optional
from typing import TYPE_CHECKING

from tengwar.modes import Escape
from tengwar.modes import MatchedNone
from tengwar.modes import MatchedPart
from tengwar.modes import MatchedToken
from tengwar.modes import Skip


if TYPE_CHECKING:
    from collections.abc import Iterator

    from tengwar.modes import Mode
    from tengwar.modes import Token


def fold_case(c: str) -> str:
    """Returns the form of a character that modes match against.

    Args:
        c: A single character.
    """
    lower = c.lower()
    return lower if len(lower) == 1 else c


class Tokenizer:
    """An iterator of tokens parsed from text by a mode.

    The tokenizer keeps a read head and a window width. It offers the
    mode the window at the head, narrowing it whenever the mode finds
    nothing, and resetting it whenever the head moves. When even a one
    character window fails, the mode may finish its glyph under
    construction; otherwise the tokenizer looks for a number or
    punctuation, and finally passes one character through unchanged.
    An escape marker at the head is handled before any window is
    offered.

    The tokenizer keeps one token of lookahead so that the mode can
    correct a token based on the one after it.

    Attributes:
        mode: The mode.
    """

    def __init__(self, text: str, mode: Mode) -> None:
        self._chars = unicodedata.normalize('NFC', text)
        self._lower = ''.join(map(fold_case, self._chars))
        assert len(self._chars) == len(self._lower)
        self.mode = mode
        self._head = 0
        self._size = 0
        self._skip = 0
        self._next: Optional[Token] = None
        self._advance(0)

    def _advance(self, n: int) -> None:
        self._head += n
        self._size = min(len(self._chars) - self._head, self.mode.max_chunk)

    def _step(self) -> Optional[Token]:
        """Performs one step of parsing.

        Returns:
            A token, or ``None`` if another step is needed.

        Raises:
            StopIteration: If there are no more tokens.
        """
        head = self._head
        if len(self._chars) <= head:
            if (glyph := self.mode.finish_current()) is not None:
                return glyph
            raise StopIteration
        if self._skip:
            if (glyph := self.mode.finish_current()) is not None:
                self._advance(0)
                return glyph
            self._advance(1)
            self._skip -= 1
            return self._chars[head]
        if self._size:
            action = self.mode.escape(self._lower[head:head + 2])
            if action is None:
                action = self.mode.process(self._lower[head:head + self._size])
            match action:
                case MatchedNone():
                    self._size -= 1
                case MatchedPart(length):
                    self._advance(length)
                case MatchedToken(token, length):
                    self._advance(length)
                    return token
                case Skip(count):
                    finished = self.mode.finish_current()
                    self._skip += count
                    return finished
                case Escape(length, skip):
                    self._advance(length)
                    self._skip += skip
            return None
        if (glyph := self.mode.finish_current()) is not None:
            self._advance(0)
            return glyph
        if (secondary := self.mode.find_secondary(self._lower[head:])) is not None:
            token, length = secondary
            self._advance(length)
            return token
        self._advance(1)
        return self._chars[head]

    def _step_to_next(self) -> Optional[Token]:
        try:
            while (token := self._step()) is None:
                pass
        except StopIteration:
            return None
        return token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self._next if self._next is not None else self._step_to_next()
        if token is None:
            raise StopIteration
        self._next = self._step_to_next()
        self.mode.finalize(token, self._next)
        return token
