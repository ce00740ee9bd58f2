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

"""Transcription of Latin text into the Tengwar.

Text is transcribed in three passes. A `Tokenizer` asks a mode to turn
chunks of input into tokens. A `TokenIter` applies the
`TranscriberSettings` to each glyph, looking one token ahead. Finally,
`render` joins the tokens into a string of Private Use Area characters
in the Free Tengwar Font Project encoding. `transcribe` does all three.
"""


from __future__ import annotations


__all__ = [
    'CustomMode',
    'Glyph',
    'Mode',
    'Numeral',
    'Placement',
    'Policy',
    'Tokenizer',
    'TokenIter',
    'TranscriberSettings',
    'VowelStyle',
    'describe',
    'get_mode',
    'render',
    'transcribe',
]


from tengwar.characters import describe
from tengwar.glyph import Glyph
from tengwar.glyph import Placement
from tengwar.glyph import VowelStyle
from tengwar.modes import Mode
from tengwar.modes import get_mode
from tengwar.modes.custom import CustomMode
from tengwar.numeral import Numeral
from tengwar.policy import Policy
from tengwar.tokenizer import Tokenizer
from tengwar.transcriber import TokenIter
from tengwar.transcriber import TranscriberSettings
from tengwar.transcriber import render
from tengwar.transcriber import transcribe
