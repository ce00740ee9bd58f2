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

import json

import pytest

from tengwar.characters import AHA
from tengwar.characters import AMPA
from tengwar.characters import ARA
from tengwar.characters import DC_OVER_DOT_1
from tengwar.characters import FORMEN
from tengwar.characters import HYARMEN
from tengwar.characters import MOD_NASAL
from tengwar.characters import SA_RINCE
from tengwar.characters import TEHTA_A
from tengwar.characters import TELCO
from tengwar.characters import TINCO
from tengwar.characters import YANTA
from tengwar.modes import MatchedPart
from tengwar.modes.custom import CustomMode
from tengwar.transcriber import transcribe


QUENYA_LIKE = '''\
[consonants]
c = "calma"
l = "lambe"
m = "malta"
t = "tinco"

[vowels]
a = "a"
e = "e"
'''


REPLACEMENTS = '''\
[consonants]
f = "formen"
h = "hyarmen"

[vowels]
a = "a"

[[replacements]]
old = "formen"
new = "ampa"
position = "final"

[[replacements]]
old = "hyarmen"
new = "aha"
position = "medial"
'''


def from_toml(tmp_path, text):
    path = tmp_path / 'mode.toml'
    path.write_text(text, encoding='utf-8')
    return CustomMode.load(path)


def from_json(tmp_path, rules):
    path = tmp_path / 'mode.json'
    path.write_text(json.dumps(rules), encoding='utf-8')
    return CustomMode.load(path)


@pytest.mark.parametrize('word', ['calma', 'ette', 'calma ette', 'tt'])
def test_quenya_like(tmp_path, word):
    assert transcribe(word, from_toml(tmp_path, QUENYA_LIKE)) == transcribe(word, 'quenya')


def test_vowels_first(tmp_path):
    mode = from_json(tmp_path, {
        'vowels_first': True,
        'consonants': {'d': 'ando', 'n': 'numen'},
        'vowels': {'a': 'a'},
    })
    assert mode.vowels_first
    assert transcribe('adan', mode) == transcribe('adan', 'gondor')


def test_nasal(tmp_path):
    mode = from_toml(tmp_path, QUENYA_LIKE)
    assert transcribe('anta', mode) == TELCO + TEHTA_A.base + TINCO + MOD_NASAL + TEHTA_A.base


def test_long_vowel(tmp_path):
    mode = from_json(tmp_path, {
        'consonants': {'t': 'tinco'},
        'vowels': {'á': {'tehta': 'a', 'long': True}},
    })
    assert transcribe('tá', mode) == TINCO + ARA + TEHTA_A.base


def test_tehta_by_code_points(tmp_path):
    mode = from_json(tmp_path, {
        'consonants': {'t': 'tinco'},
        'vowels': {'o': {'tehta': {'base': 'over-dot-1'}}},
    })
    assert transcribe('to', mode) == TINCO + DC_OVER_DOT_1


def test_diphthong(tmp_path):
    mode = from_json(tmp_path, {
        'consonants': {'t': 'tinco'},
        'diphthongs': {'ai': {'tengwa': 'yanta', 'tehta': 'a'}},
    })
    assert transcribe('tai', mode) == TINCO + YANTA + TEHTA_A.base


def test_sibilant_after_diphthong(tmp_path):
    mode = from_json(tmp_path, {
        'vowels_first': True,
        'consonants': {'d': 'ando'},
        'vowels': {'a': 'a'},
        'diphthongs': {'ai': {'tengwa': 'anna', 'tehta': 'a'}},
    })
    assert transcribe('dais', mode) == transcribe('dais', 'gondor')
    assert transcribe('ais', mode).endswith(SA_RINCE + TEHTA_A.base)


def test_final_replacement(tmp_path):
    assert transcribe('faf', from_toml(tmp_path, REPLACEMENTS)) == FORMEN + TEHTA_A.base + AMPA


def test_medial_replacement(tmp_path):
    assert transcribe('haha', from_toml(tmp_path, REPLACEMENTS)) == HYARMEN + TEHTA_A.base + AHA + TEHTA_A.base


def test_modifiers(tmp_path):
    assert transcribe('ts', from_toml(tmp_path, QUENYA_LIKE)) == TINCO + SA_RINCE
    rules = QUENYA_LIKE + '\n[modifiers]\nrince = ["x"]\n'
    assert transcribe('tx', from_toml(tmp_path, rules)) == TINCO + SA_RINCE
    assert transcribe('ts', from_toml(tmp_path, rules)) == TINCO + 's'


def test_chunks(tmp_path):
    assert from_toml(tmp_path, 'chunks = 1\n' + QUENYA_LIKE).max_chunk == 1


@pytest.mark.parametrize('rules, error, message', [
    ({'colour': 'blue', 'consonants': {}}, ValueError, 'Unknown key'),
    ({'chunks': 0, 'consonants': {}}, ValueError, 'chunks'),
    ({'chunks': True, 'consonants': {}}, ValueError, 'chunks'),
    ({'vowels': {'a': 'a'}}, ValueError, 'consonants'),
    ({'consonants': ['t']}, ValueError, 'must be a table'),
    ({'consonants': {'t': 'tengwa'}}, KeyError, 'Unknown tengwa'),
    ({'consonants': {'t': 1}}, ValueError, 'Invalid consonant'),
    ({'consonants': {'t': {'nasal': True}}}, ValueError, 'Invalid consonant'),
    ({'consonants': {'': 'tinco'}}, ValueError, 'Empty spelling'),
    ({'consonants': {}, 'vowels': {'a': 'ä'}}, KeyError, 'Unknown tehta'),
    ({'consonants': {}, 'vowels': {'a': {'tehta': {'base': 'dot'}}}}, KeyError, 'Unknown character'),
    ({'consonants': {}, 'vowels': {'a': {'tehta': {'alternate': 'over-dot-1'}}}}, ValueError, 'Invalid tehta'),
    ({'consonants': {}, 'diphthongs': {'ai': {'tengwa': 'yanta'}}}, ValueError, 'Invalid diphthong'),
    ({'consonants': {}, 'checks_new': ['consonant', 'spelling']}, ValueError, 'Unknown check'),
    ({'consonants': {}, 'checks_mod': 'vowel'}, ValueError, 'must be a list'),
    ({'consonants': {}, 'modifiers': {'consonant': ['c']}}, ValueError, 'Invalid modifier'),
    ({'consonants': {}, 'modifiers': {'tehta': ['c']}}, ValueError, 'Unknown modifier'),
    ({'consonants': {}, 'replacements': [{'old': 'tinco', 'new': 'calma'}]}, ValueError, 'Invalid replacement'),
    ({'consonants': {}, 'replacements': [{'old': 'tinco', 'new': 'calma', 'position': 'last'}]}, ValueError, 'Unknown position'),
    (['consonants'], ValueError, 'must contain a table'),
])
def test_errors(tmp_path, rules, error, message):
    with pytest.raises(error, match=message):
        from_json(tmp_path, rules)


def test_malformed_toml(tmp_path):
    with pytest.raises(ValueError):
        from_toml(tmp_path, 'this is not a rule file\n')


def test_malformed_json(tmp_path):
    path = tmp_path / 'mode.json'
    path.write_text('{"consonants": ', encoding='utf-8')
    with pytest.raises(ValueError):
        CustomMode.load(path)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        CustomMode.load(tmp_path / 'missing.toml')


def test_escape_with_one_character_chunks(tmp_path):
    mode = from_toml(tmp_path, 'chunks = 1\n' + QUENYA_LIKE)
    assert transcribe('\\ta', mode) == 't' + TELCO + TEHTA_A.base
    assert transcribe('\\ta', mode.fresh()) == transcribe('\\ta', 'quenya')


def test_fresh(tmp_path):
    mode = from_toml(tmp_path, QUENYA_LIKE)
    assert mode.process('t') == MatchedPart(1)
    fresh = mode.fresh()
    assert fresh.current is None
    assert fresh.initial
    assert fresh.consonants is mode.consonants
    assert fresh.max_chunk == mode.max_chunk
    assert mode.current is not None
