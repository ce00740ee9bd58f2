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

"""The command line interface.
"""


from __future__ import annotations


__all__ = ['main']


import argparse
import sys
from typing import Optional
from typing import TYPE_CHECKING

from tengwar.characters import describe
from tengwar.fonts import load_cmap
from tengwar.fonts import missing_characters
from tengwar.glyph import VowelStyle
from tengwar.modes import get_mode
from tengwar.modes.custom import CustomMode
from tengwar.transcriber import TranscriberSettings
from tengwar.transcriber import transcribe


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Iterable
    from collections.abc import Mapping
    from collections.abc import Sequence

    from tengwar.modes import Mode


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tengwar', description='Transcribe text into the Tengwar.')
    parser.add_argument('text', nargs='*', help='The text to transcribe. Without it, each line of standard input is transcribed.')
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument('-Q', '--quenya', dest='mode', action='store_const', const='quenya', help='Use the Classical Mode (the default).')
    modes.add_argument('-G', '--gondor', dest='mode', action='store_const', const='gondor', help='Use the Mode of Gondor.')
    modes.add_argument('-B', '--beleriand', dest='mode', action='store_const', const='beleriand', help='Use the Mode of Beleriand.')
    modes.add_argument('-M', '--mode', metavar='NAME', help='Use a built-in mode by name.')
    modes.add_argument('--custom', metavar='FILE', help='Use a mode from a TOML or JSON rule file.')
    parser.add_argument('-a', '--alt-a', action='store_true', help='Write the A tehta as a circumflex.')
    parser.add_argument('-r', '--alt-rince', action='store_true', help='Use the ornate sa-rincë at the end of a word.')
    parser.add_argument('-d', '--dot-plain', action='store_true', help='Put a dot below a consonant with no vowel.')
    parser.add_argument('-e', '--elide-a', action='store_true', help='Leave out the A tehta.')
    parser.add_argument('-n', '--nuquerna', action='store_true', help='Invert silmë and essë under a tehta.')
    parser.add_argument(
        '-l',
        '--long',
        default=VowelStyle.DOUBLED,
        type=VowelStyle,
        help=f'How to write a long vowel; one of {{{", ".join(s.value for s in VowelStyle)}}} (default: %(default)s).',
    )
    parser.add_argument('-s', '--ligate-short', action='store_true', help='Join a short carrier to the glyph after it.')
    parser.add_argument('-z', '--ligate-zwj', action='count', default=0, help='Join glyphs with zero width joiners. Repeat to join more.')
    parser.add_argument('--ligate-all', action='store_true', help='Use every ligature.')
    parser.add_argument('--names', action='store_true', help='Print the names of the output characters instead of the characters.')
    parser.add_argument('--font', metavar='FONT', help='Report output characters that a font lacks.')
    return parser


def make_settings(args: argparse.Namespace) -> TranscriberSettings:
    settings = TranscriberSettings(
        alt_a=args.alt_a,
        alt_rince=args.alt_rince,
        dot_plain=args.dot_plain,
        elide_a=args.elide_a,
        ligate_short=args.ligate_short,
        ligate_zwj=args.ligate_zwj,
        nuquerna=args.nuquerna,
        vowels=args.long,
    )
    if args.ligate_all:
        settings = settings.all_ligatures()
    return settings


def make_mode_factory(args: argparse.Namespace) -> Callable[[], Mode]:
    """Returns a function that makes a fresh mode for each text.

    Raises:
        KeyError: If the rule file names an unknown character.
        OSError: If the rule file cannot be read.
        ValueError: If the mode name is unknown or the rule file is
            malformed.
    """
    if args.custom is not None:
        return CustomMode.load(args.custom).fresh
    name = args.mode or 'quenya'
    get_mode(name)
    return lambda: get_mode(name)


def _texts(args: argparse.Namespace) -> Iterable[str]:
    if args.text:
        yield ' '.join(args.text)
    else:
        for line in sys.stdin:
            yield line.rstrip('\n')


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = make_parser()
    args = parser.parse_args(argv)
    try:
        new_mode = make_mode_factory(args)
    except (KeyError, OSError, ValueError) as e:
        parser.error(str(e))
    cmap: Optional[Mapping[int, str]] = None
    if args.font is not None:
        try:
            cmap = load_cmap(args.font)
        except (OSError, ValueError) as e:
            parser.error(str(e))
    settings = make_settings(args)
    missing_any = False
    for text in _texts(args):
        output = transcribe(text, new_mode(), settings)
        if args.names:
            print(' '.join(describe(output)))
        else:
            print(output)
        if cmap is not None and (missing := missing_characters(output, cmap)):
            missing_any = True
            print(f'Missing from {args.font}: {" ".join(describe("".join(missing)))}', file=sys.stderr)
    if missing_any:
        sys.exit(1)


if __name__ == '__main__':
    main()
