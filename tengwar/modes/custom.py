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

"""Modes defined by rule files.

A rule file is a TOML or JSON table with the following keys. Only
``consonants`` is required.

``chunks``
    The widest chunk to look at, as a positive integer. The default is
    3.

``vowels_first``
    Whether a vowel is written over the consonant after it instead of
    the one before it. The default is false.

``doubled_consonants``
    Whether a doubled consonant letter is written as one long
    consonant. The default is true.

``checks_new``
    The checks to try, in order, when no glyph is under construction.
    The default is ``["nasal", "consonant", "diphthong", "vowel"]``.

``checks_mod``
    The checks to try, in order, when a glyph is under construction.
    The default is ``["rince", "labial", "palatal", "diphthong",
    "vowel", "nasal", "consonant"]``.

``consonants``
    A table of spellings to consonants. A consonant is either the name
    of a tengwa or a table with the key ``tengwa`` and optionally any of
    the boolean keys ``nasal``, ``labial``, ``palatal``, ``long_cons``,
    and ``rince``.

``vowels``
    A table of spellings to vowels. A vowel is either the name of a
    tehta or a table with the key ``tehta`` and optionally the boolean
    key ``long``. A tehta is either a name from `TEHTAR` or a table with
    the key ``base`` and optionally ``alternate`` and ``can_double``,
    where the marks are named as in `CODE_POINTS`.

``diphthongs``
    A table of spellings to diphthongs. A diphthong is a table with the
    keys ``tengwa`` and ``tehta`` and optionally ``labial``.

``modifiers``
    A table of check names (``rince``, ``labial``, ``palatal``) to
    lists of spellings that apply them. The default spellings are ``s``
    and ``z`` for a sa-rincë, ``w`` for the labial mark, and ``y`` for
    the palatal mark. ``nasal`` lists the prefixes that nasalize a
    following consonant; the default is ``m`` and ``n``.

``replacements``
    A list of tables with the keys ``old`` and ``new``, which are tengwa
    names, and ``position``, which is ``initial``, ``medial``, or
    ``final``. A consonant is replaced at the start of a word, after
    another glyph in the same word, or at the end of a word.
"""


from __future__ import annotations


__all__ = [
    'Check',
    'CustomMode',
    'Position',
    'Replacement',
]


import copy
import enum
import json
from typing import Any
from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import TYPE_CHECKING
from typing import override

import toml

from tengwar.characters import CODE_POINTS
from tengwar.characters import TEHTAR
from tengwar.characters import TENGWAR
from tengwar.characters import Tehta
from tengwar.modes import MATCHED_NONE
from tengwar.modes import MatchedPart
from tengwar.modes import Mode
from tengwar.modes import lookup_consonant
from tengwar.policy import STANDARD


if TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Sequence
    import os

    from tengwar.glyph import Glyph
    from tengwar.modes import ParseAction
    from tengwar.policy import Policy


@enum.unique
class Check(enum.StrEnum):
    """A kind of rule that a custom mode tries on a chunk.
    """

    CONSONANT = enum.auto()
    DIPHTHONG = enum.auto()
    VOWEL = enum.auto()
    RINCE = enum.auto()
    LABIAL = enum.auto()
    NASAL = enum.auto()
    PALATAL = enum.auto()


@enum.unique
class Position(enum.StrEnum):
    """Where in a word a replacement applies.
    """

    INITIAL = enum.auto()
    MEDIAL = enum.auto()
    FINAL = enum.auto()


class Replacement(NamedTuple):
    """A position-sensitive substitution of one tengwa for another.
    """

    old: str
    new: str
    position: Position


class _Consonant(NamedTuple):
    base: str
    nasal: bool = False
    labial: bool = False
    palatal: bool = False
    long_cons: bool = False
    rince: bool = False


_DEFAULT_CHECKS_NEW: Final[Sequence[Check]] = [
    Check.NASAL,
    Check.CONSONANT,
    Check.DIPHTHONG,
    Check.VOWEL,
]


_DEFAULT_CHECKS_MOD: Final[Sequence[Check]] = [
    Check.RINCE,
    Check.LABIAL,
    Check.PALATAL,
    Check.DIPHTHONG,
    Check.VOWEL,
    Check.NASAL,
    Check.CONSONANT,
]


_DEFAULT_MODIFIERS: Final[Mapping[Check, Sequence[str]]] = {
    Check.RINCE: ['s', 'z'],
    Check.LABIAL: ['w'],
    Check.PALATAL: ['y'],
    Check.NASAL: ['m', 'n'],
}


_KEYS: Final[frozenset[str]] = frozenset({
    'chunks',
    'vowels_first',
    'doubled_consonants',
    'checks_new',
    'checks_mod',
    'consonants',
    'vowels',
    'diphthongs',
    'modifiers',
    'replacements',
})


_CONSONANT_FLAGS: Final[Sequence[str]] = ['nasal', 'labial', 'palatal', 'long_cons', 'rince']


def _tengwa(name: str) -> str:
    try:
        return TENGWAR[name]
    except KeyError:
        raise KeyError(f'Unknown tengwa: {name!r}') from None


def _code_point(name: str) -> str:
    try:
        return CODE_POINTS[name]
    except KeyError:
        raise KeyError(f'Unknown character: {name!r}') from None


def _tehta(entry: Any, key: str) -> Tehta:
    if isinstance(entry, str):
        try:
            return TEHTAR[entry]
        except KeyError:
            raise KeyError(f'Unknown tehta: {entry!r}') from None
    if not isinstance(entry, dict) or 'base' not in entry:
        raise ValueError(f'Invalid tehta for {key!r}: {entry!r}')
    alternate = entry.get('alternate')
    return Tehta(
        _code_point(entry['base']),
        alternate and _code_point(alternate),
        bool(entry.get('can_double', False)),
    )


def _table(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f'{key!r} must be a table')
    for spelling in value:
        if not spelling:
            raise ValueError(f'Empty spelling in {key!r}')
    return value


def _checks(data: Mapping[str, Any], key: str, default: Sequence[Check]) -> Sequence[Check]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list):
        raise ValueError(f'{key!r} must be a list')
    try:
        return [Check(check) for check in value]
    except ValueError:
        raise ValueError(f'Unknown check in {key!r}: {value!r}') from None


class CustomMode(Mode):
    """A mode whose rules come from a table.

    Attributes:
        vowels_first: Whether a vowel is written over the consonant after
            it.
        doubled_consonants: Whether a doubled consonant letter is a long
            consonant.
        checks_new: The checks to try when no glyph is under
            construction.
        checks_mod: The checks to try when a glyph is under construction.
        consonants: A mapping of spellings to consonants.
        vowels: A mapping of spellings to tehtar and whether they are
            long.
        diphthongs: A mapping of spellings to carriers, tehtar, and
            whether the carriers are labialized.
        modifiers: A mapping of modifier checks to their spellings.
        replacements: The position-sensitive substitutions.
    """

    def __init__(
            self,
            consonants: Mapping[str, _Consonant],
            vowels: Mapping[str, tuple[Tehta, bool]],
            diphthongs: Mapping[str, tuple[str, Tehta, bool]],
            *,
            chunks: int = 3,
            vowels_first: bool = False,
            doubled_consonants: bool = True,
            checks_new: Sequence[Check] = _DEFAULT_CHECKS_NEW,
            checks_mod: Sequence[Check] = _DEFAULT_CHECKS_MOD,
            modifiers: Mapping[Check, Sequence[str]] = _DEFAULT_MODIFIERS,
            replacements: Sequence[Replacement] = (),
            policy: Policy = STANDARD,
    ) -> None:
        super().__init__(policy)
        self.max_chunk = chunks
        self.vowels_first = vowels_first
        self.doubled_consonants = doubled_consonants
        self.checks_new = checks_new
        self.checks_mod = checks_mod
        self.consonants = consonants
        self.vowels = vowels
        self.diphthongs = diphthongs
        self.modifiers = {**_DEFAULT_MODIFIERS, **modifiers}
        self.replacements = replacements

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], policy: Policy = STANDARD) -> CustomMode:
        """Builds a mode from a parsed rule file.

        Raises:
            KeyError: If a tengwa, tehta, or character name is unknown.
            ValueError: If the rule file is malformed.
        """
        if not isinstance(data, dict):
            raise ValueError('A rule file must contain a table')
        for key in data:
            if key not in _KEYS:
                raise ValueError(f'Unknown key: {key!r}')
        chunks = data.get('chunks', 3)
        if not isinstance(chunks, int) or isinstance(chunks, bool) or chunks < 1:
            raise ValueError(f"'chunks' must be a positive integer, not {chunks!r}")
        if 'consonants' not in data:
            raise ValueError("Missing key: 'consonants'")

        consonants = {}
        for spelling, entry in _table(data, 'consonants').items():
            if isinstance(entry, str):
                consonants[spelling] = _Consonant(_tengwa(entry))
            elif isinstance(entry, dict) and 'tengwa' in entry:
                consonants[spelling] = _Consonant(
                    _tengwa(entry['tengwa']),
                    *[bool(entry.get(flag, False)) for flag in _CONSONANT_FLAGS],
                )
            else:
                raise ValueError(f'Invalid consonant for {spelling!r}: {entry!r}')

        vowels = {}
        for spelling, entry in _table(data, 'vowels').items():
            if isinstance(entry, dict) and 'tehta' in entry:
                vowels[spelling] = _tehta(entry['tehta'], spelling), bool(entry.get('long', False))
            else:
                vowels[spelling] = _tehta(entry, spelling), False

        diphthongs = {}
        for spelling, entry in _table(data, 'diphthongs').items():
            if not isinstance(entry, dict) or 'tengwa' not in entry or 'tehta' not in entry:
                raise ValueError(f'Invalid diphthong for {spelling!r}: {entry!r}')
            diphthongs[spelling] = _tengwa(entry['tengwa']), _tehta(entry['tehta'], spelling), bool(entry.get('labial', False))

        modifiers = {}
        for name, spellings in _table(data, 'modifiers').items():
            try:
                check = Check(name)
            except ValueError:
                raise ValueError(f'Unknown modifier: {name!r}') from None
            if check not in _DEFAULT_MODIFIERS or not isinstance(spellings, list):
                raise ValueError(f'Invalid modifier: {name!r}')
            modifiers[check] = [str(spelling) for spelling in spellings]

        replacements = []
        for entry in data.get('replacements', []):
            if not isinstance(entry, dict) or {'old', 'new', 'position'} - entry.keys():
                raise ValueError(f'Invalid replacement: {entry!r}')
            try:
                position = Position(entry['position'])
            except ValueError:
                raise ValueError(f'Unknown position: {entry["position"]!r}') from None
            replacements.append(Replacement(_tengwa(entry['old']), _tengwa(entry['new']), position))

        return cls(
            consonants,
            vowels,
            diphthongs,
            chunks=chunks,
            vowels_first=bool(data.get('vowels_first', False)),
            doubled_consonants=bool(data.get('doubled_consonants', True)),
            checks_new=_checks(data, 'checks_new', _DEFAULT_CHECKS_NEW),
            checks_mod=_checks(data, 'checks_mod', _DEFAULT_CHECKS_MOD),
            modifiers=modifiers,
            replacements=replacements,
            policy=policy,
        )

    @classmethod
    def load(cls, path: str | os.PathLike[str], policy: Policy = STANDARD) -> CustomMode:
        """Loads a mode from a rule file.

        A file whose name ends in ``.json`` is read as JSON; any other
        file is read as TOML.

        Raises:
            KeyError: If a tengwa, tehta, or character name is unknown.
            OSError: If the file cannot be read.
            ValueError: If the file is malformed.
        """
        with open(path, encoding='utf-8') as f:
            if str(path).endswith('.json'):
                data = json.load(f)
            else:
                data = toml.load(f)
        return cls.from_dict(data, policy)

    def fresh(self) -> CustomMode:
        """Returns a mode with the same rules and nothing parsed yet.

        The rule tables are shared, not copied.
        """
        mode = copy.copy(self)
        mode.current = None
        mode.previous = None
        return mode

    def _glyph(self, consonant: _Consonant, *, nasal: bool = False, **kwargs) -> Glyph:
        base = consonant.base
        for replacement in self.replacements:
            if replacement.old == base and replacement.position != Position.FINAL:
                if (replacement.position == Position.INITIAL) == self.initial:
                    base = replacement.new
                    break
        final_base = next(
            (
                replacement.new
                for replacement in self.replacements
                if replacement.old == base and replacement.position == Position.FINAL
            ),
            None,
        )
        return self.new_glyph(
            base,
            nasal=consonant.nasal or nasal,
            labial=consonant.labial,
            palatal=consonant.palatal,
            long_cons=consonant.long_cons,
            rince=consonant.rince,
            final_base=final_base,
            tehta_first=self.vowels_first,
            **kwargs,
        )

    def _consonant(self, chunk: str) -> Optional[Glyph]:
        if (found := lookup_consonant(self.consonants, chunk, doubled=self.doubled_consonants)) is None:
            return None
        consonant, long_cons = found
        return self._glyph(consonant._replace(long_cons=True) if long_cons else consonant)

    def _nasal(self, chunk: str) -> Optional[Glyph]:
        for prefix in self.modifiers[Check.NASAL]:
            if len(chunk) > len(prefix) and chunk.startswith(prefix):
                if (consonant := self.consonants.get(chunk[len(prefix):])) is not None:
                    return self._glyph(consonant, nasal=True)
        return None

    def _vowel(self, chunk: str) -> Optional[Glyph]:
        if (vowel := self.vowels.get(chunk)) is None:
            return None
        tehta, long = vowel
        return self.new_glyph(tehta=tehta, long=long, tehta_first=self.vowels_first)

    def _diphthong(self, chunk: str) -> Optional[Glyph]:
        if (diphthong := self.diphthongs.get(chunk)) is None:
            return None
        carrier, tehta, labial = diphthong
        return self.new_glyph(carrier, tehta, labial=labial, tehta_first=self.vowels_first)

    def _start(self, chunk: str) -> ParseAction:
        for check in self.checks_new:
            match check:
                case Check.CONSONANT:
                    glyph = self._consonant(chunk)
                case Check.NASAL:
                    glyph = self._nasal(chunk)
                case Check.DIPHTHONG:
                    glyph = self._diphthong(chunk)
                case Check.VOWEL:
                    glyph = self._vowel(chunk)
                case _:
                    glyph = None
            if glyph is not None:
                self.current = glyph
                return MatchedPart(len(chunk))
        return MATCHED_NONE

    def _continue(self, current: Glyph, chunk: str) -> ParseAction:
        needs_consonant = self.vowels_first and current.base is None
        needs_vowel = not self.vowels_first and current.base is not None and current.tehta is None
        has_consonant = current.base is not None
        for check in self.checks_mod:
            match check:
                case Check.RINCE if has_consonant and chunk in self.modifiers[Check.RINCE]:
                    if not current.rince and (self.vowels_first or current.tehta is None) and self.policy.may_host_sibilant(current.base):
                        current.rince = True
                        return MatchedPart(len(chunk))
                case Check.LABIAL if has_consonant and not current.labial and chunk in self.modifiers[Check.LABIAL]:
                    if self.vowels_first or current.tehta is None:
                        current.labial = True
                        return MatchedPart(len(chunk))
                case Check.PALATAL if needs_vowel and not current.palatal and chunk in self.modifiers[Check.PALATAL]:
                    current.palatal = True
                    return MatchedPart(len(chunk))
                case Check.DIPHTHONG if needs_vowel and chunk in self.diphthongs:
                    return self.commit()
                case Check.VOWEL if needs_vowel:
                    if (vowel := self._vowel(chunk)) is not None:
                        current.integrate_vowel(vowel)
                        return MatchedPart(len(chunk))
                case Check.NASAL if needs_consonant:
                    if (consonant := self._nasal(chunk)) is not None:
                        current.integrate_consonant(consonant)
                        return MatchedPart(len(chunk))
                case Check.CONSONANT if needs_consonant:
                    if (consonant := self._consonant(chunk)) is not None:
                        current.integrate_consonant(consonant)
                        return MatchedPart(len(chunk))
        return MATCHED_NONE

    @override
    def process(self, chunk: str) -> ParseAction:
        if self.current is not None:
            return self._continue(self.current, chunk)
        return self._start(chunk)
