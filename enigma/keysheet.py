"""Key-sheet string syntaxes.

Plugboard settings come in two flavours:

* Heer / Luftwaffe (army): letter pairs, e.g. ``'PO ML IU KJ NH YT GB VF RE DC'``
* Kriegsmarine (navy): 1-based number pairs joined by ``/``, e.g.
  ``'18/26 17/4 21/6 3/16 19/14 22/7 8/1 12/25 5/9 10/15'``

The syntax is picked by the presence of a ``/``. Parsing only checks the
textual form; range, duplicate and pair-count rules belong to the Plugboard.
"""
import re

from .errors import InvalidPlugboardSettings, InvalidRingSetting
from .utils import ALPHABET, alpha_ord, is_letter

_army_re = re.compile(r'^[A-Za-z]{2}$')
_navy_re = re.compile(r'^(\d+)/(\d+)$')


def parse_plugboard_settings(settings):
    if not settings or not settings.strip():
        return []

    if '/' not in settings:
        return [_parse_army_pair(token) for token in settings.split()]
    return [_parse_navy_pair(token) for token in settings.split()]


def _parse_army_pair(token):
    if not _army_re.match(token):
        raise InvalidPlugboardSettings("invalid settings string: {!r}".format(token))
    return alpha_ord(token[0]), alpha_ord(token[1])


def _parse_navy_pair(token):
    m = _navy_re.match(token)
    if not m:
        raise InvalidPlugboardSettings("invalid settings string: {!r}".format(token))
    return int(m.group(1)) - 1, int(m.group(2)) - 1


def format_army(pairs):
    return ' '.join(ALPHABET[a] + ALPHABET[b] for a, b in pairs)


def format_navy(pairs):
    return ' '.join('{}/{}'.format(a + 1, b + 1) for a, b in pairs)


def parse_ring_settings(value):
    """Accept ``'1 20 11'``, ``'B U L'`` or a list of those tokens.

    Ring settings are 0-based throughout: numbers are taken as-is (0-25) and
    letters map A=0 .. Z=25, so ``'1 20 11'`` and ``'B U L'`` are the same
    setting. Printed key sheets number the ring 01-26; subtract one.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split()

    result = []
    for token in value:
        if isinstance(token, str):
            token = token.strip()
            if token.isdecimal():
                token = int(token)
            elif is_letter(token):
                token = alpha_ord(token)
            else:
                raise InvalidRingSetting("invalid ring setting {!r}".format(token))
        result.append(token)
    return result
