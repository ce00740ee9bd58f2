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

from __future__ import annotations

import pytest

from tengwar.characters import ANDO
from tengwar.characters import CALMA
from tengwar.characters import NWALME
from tengwar.characters import TEHTA_A
from tengwar.characters import TINCO
from tengwar.characters import YANTA
from tengwar.modes import ESCAPE
from tengwar.modes import Escape
from tengwar.modes import MATCHED_NONE
from tengwar.modes import MODE_NAMES
from tengwar.modes import MatchedPart
from tengwar.modes import MatchedToken
from tengwar.modes import Mode
from tengwar.modes import Skip
from tengwar.modes import get_mode
from tengwar.modes import lookup_consonant
from tengwar.modes.beleriand import Beleriand
from tengwar.modes.gondor import Gondor
from tengwar.modes.quenya import Quenya
from tengwar.policy import PLAIN
from tengwar.transcriber import transcribe


@pytest.mark.parametrize('name, cls', [
    ('quenya', Quenya),
    ('Q', Quenya),
    ('classical', Quenya),
    ('c', Quenya),
    ('GONDOR', Gondor),
    ('g', Gondor),
    ('Beleriand', Beleriand),
    ('b', Beleriand),
])
def test_get_mode(name, cls):
    mode = get_mode(name)
    assert type(mode) is cls
    assert mode.current is None
    assert mode.initial


def test_get_mode_policy():
    assert get_mode('q', PLAIN).policy is PLAIN


def test_unknown_mode():
    with pytest.raises(ValueError, match='klingon'):
        get_mode('klingon')


def test_mode_names_are_complete():
    assert set(MODE_NAMES.values()) == {'quenya', 'gondor', 'beleriand'}


def test_process_is_abstract():
    with pytest.raises(NotImplementedError):
        Mode().process('a')


def test_lookup_consonant():
    table = {'t': TINCO, 'nd': ANDO}
    assert lookup_consonant(table, 't') == (TINCO, False)
    assert lookup_consonant(table, 'tt') == (TINCO, True)
    assert lookup_consonant(table, 'tt', doubled=False) is None
    assert lookup_consonant(table, 'nd') == (ANDO, False)
    assert lookup_consonant(table, 'nn') is None
    assert lookup_consonant(table, 'x') is None


def test_escape_actions():
    mode = Quenya()
    assert mode.escape('abc') is None
    assert mode.escape(ESCAPE) == Skip(1)
    assert mode.escape(ESCAPE + 'ab') == Escape(1, 1)
    assert mode.escape(ESCAPE + ' a') == MatchedToken('', 2)
    assert mode.initial


def test_escape_commits_first():
    mode = Quenya()
    assert mode.process('t') == MatchedPart(1)
    action = mode.escape(ESCAPE + ' ')
    assert isinstance(action, MatchedToken)
    assert action.token.base == TINCO
    assert action.length == 0
    assert mode.current is None


def test_maximal_munch():
    mode = Quenya()
    assert mode.process('ngw') == MatchedPart(3)
    assert mode.process('ng') == MATCHED_NONE
    assert transcribe('ngwa', 'quenya') == NWALME + TEHTA_A.base


def test_x_is_two_consonants():
    mode = Quenya()
    assert mode.process('x') == MatchedPart(1)
    assert mode.current.base == CALMA
    assert mode.current.rince


@pytest.mark.parametrize('mode, spellings', [
    ('quenya', ['calma', 'kalma']),
    ('quenya', ['þúlë', 'thúlë', 'thûlë', 'thūlë', 'thuulë']),
    ('quenya', ['ñoldo', 'ngoldo']),
    ('quenya', ['ñwalmë', 'ngwalmë', 'nwalmë']),
    ('quenya', ['quenya', 'qenya', 'kwenya', 'cwenya']),
    ('quenya', ['essë', 'eze', 'eße']),
    ('quenya', ['mixa', 'micsa', 'miksa', 'mikza']),
    ('quenya', ['aha', 'acha', 'akha']),
    ('quenya', ['lé', 'lê', 'lē', 'lee']),
    ('gondor', ['edhellen', 'eðellen']),
    ('gondor', ['aphadon', 'afadon', 'aφadon']),
    ('gondor', ['parf', 'parv']),
    ('gondor', ['iorhael', 'jorhael', 'iorhæl']),
    ('gondor', ['áth', 'âth', 'āth', 'aath', 'aaþ']),
    ('beleriand', ['edhellen', 'eðellen']),
    ('beleriand', ['iorhael', 'jorhael']),
    ('beleriand', ['á', 'â', 'ā', 'aa']),
    ('beleriand', ['au', 'aw']),
])
def test_equivalent_spellings(mode, spellings):
    expected = transcribe(spellings[0], mode)
    for spelling in spellings[1:]:
        assert transcribe(spelling, mode) == expected, spelling


@pytest.mark.parametrize('mode, a, b', [
    ('quenya', 'tha', 'ta'),
    ('quenya', 'ala', 'alda'),
    ('quenya', 'ngoldo', 'goldo'),
    ('gondor', 'thol', 'dhol'),
    ('gondor', 'iorhael', 'yorhael'),
    ('gondor', 'lhûg', 'lûg'),
    ('beleriand', 'thol', 'dhol'),
    ('beleriand', 'nen', 'nnen'),
    ('beleriand', 'iorhael', 'yorhael'),
])
def test_distinct_spellings(mode, a, b):
    assert transcribe(a, mode) != transcribe(b, mode)


@pytest.mark.parametrize('mode, word', [
    ('quenya', 'Elen síla lúmenn’ omentielvo'),
    ('quenya', 'Ñoldor'),
    ('gondor', 'Ennyn Durin Aran Moria'),
    ('gondor', 'Ísildur'),
    ('beleriand', 'Pedo mellon a minno'),
])
def test_case_insensitive(mode, word):
    expected = transcribe(word.lower(), mode)
    assert transcribe(word.upper(), mode) == expected
    assert transcribe(word, mode) == expected


def test_literal_case_preserved():
    assert transcribe('J', 'quenya') == 'J'
    assert transcribe('j', 'quenya') == 'j'


def test_initial_yanta_only_at_start():
    assert transcribe('io', 'gondor').startswith(YANTA)
    assert YANTA not in transcribe('dio', 'gondor')


def test_word_final_formen():
    mode = 'gondor'
    final = transcribe('alaf', mode)
    assert transcribe('alaf.', mode).startswith(final)
    assert transcribe('alaf ', mode) == final + ' '
    assert transcribe('alaf\\?', mode) == final + '?'
