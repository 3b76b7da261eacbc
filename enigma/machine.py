import logging

import numpy as np

from .errors import (InvalidCharacter, InvalidDisplay, InvalidDisplayLength,
                     InvalidRotorCount, RotorRingCountMismatch)
from .keysheet import parse_ring_settings
from .plugboard import Plugboard
from .rotor_data import create_reflector, create_rotor
from .rotors import check_ring_setting
from .utils import alpha_chr, alpha_ord, is_letter

logger = logging.getLogger(__name__)


class EnigmaMachine(object):
    """A fully assembled Enigma: 3 or 4 rotors, a reflector and a plugboard.

    Rotors are given leftmost first, the order they are read off a key sheet.
    Only the three rightmost rotors can move; the fourth wheel of the M4 sits
    where no pawl reaches it. Rotors are addressed by index (0 = leftmost).
    """

    def __init__(self, rotors, reflector, plugboard=None):
        rotors = list(rotors)
        if len(rotors) not in (3, 4):
            raise InvalidRotorCount("rotor count must be 3 or 4, got {}".format(len(rotors)))

        self._rotors = rotors
        self._reflector = reflector
        self._plugboard = plugboard if plugboard is not None else Plugboard()

        # the only rotors ever pushed by a pawl
        self._r_rotor = rotors[-1]
        self._m_rotor = rotors[-2]
        self._l_rotor = rotors[-3]

        logger.debug("machine assembled: %s", self.army_str())

    @classmethod
    def from_key_sheet(cls, rotors, ring_settings=None, reflector='B',
                       plugboard_settings=None, rotor_table=None,
                       reflector_table=None):
        """Build a machine from historical type names, as found on a key sheet.

        `rotors` is a list of names or a space separated string ("II IV V").
        `ring_settings` may be a list of 0-25 values, a string such as
        "1 20 11" or "B U L", or None for all zero. `plugboard_settings` takes
        either the army or navy syntax.
        """
        if isinstance(rotors, str):
            rotors = rotors.split()
        if len(rotors) not in (3, 4):
            raise InvalidRotorCount("rotor count must be 3 or 4, got {}".format(len(rotors)))

        ring_settings = parse_ring_settings(ring_settings)
        if not ring_settings:
            ring_settings = [0] * len(rotors)
        elif len(ring_settings) != len(rotors):
            raise RotorRingCountMismatch("rotor/ring setting count mismatch")

        rotor_list = [create_rotor(name, ring, rotor_table)
                      for name, ring in zip(rotors, ring_settings)]

        return cls(rotor_list,
                   create_reflector(reflector, reflector_table),
                   Plugboard.from_key_sheet(plugboard_settings))

    # configuration

    @property
    def num_rotors(self):
        return len(self._rotors)

    @property
    def rotor_names(self):
        return [r.name for r in self._rotors]

    @property
    def reflector_name(self):
        return self._reflector.name

    @property
    def plugboard(self):
        return self._plugboard

    def set_display(self, val):
        if not isinstance(val, str):
            raise InvalidDisplay("invalid display value {!r}".format(val))
        if len(val) != len(self._rotors):
            raise InvalidDisplayLength(
                "display needs {} letters, got {!r}".format(len(self._rotors), val))
        if not all(is_letter(c) for c in val):
            raise InvalidDisplay("invalid display value {!r}".format(val))

        for rotor, c in zip(self._rotors, val):
            rotor.set_display(c)

    def get_display(self):
        return ''.join(r.get_display() for r in self._rotors)

    def get_ring_setting(self, rotor):
        return self._rotors[rotor].get_ring_setting()

    def set_ring_setting(self, rotor, ring_setting):
        self._rotors[rotor].set_ring_setting(ring_setting)

    def get_ring_settings(self):
        return [r.get_ring_setting() for r in self._rotors]

    def set_ring_settings(self, settings):
        settings = parse_ring_settings(settings)
        if len(settings) != len(self._rotors):
            raise RotorRingCountMismatch("set_ring_settings rotor/settings size mismatch")

        settings = [check_ring_setting(s) for s in settings]
        for rotor, s in zip(self._rotors, settings):
            rotor.set_ring_setting(s)

    # operation

    def key_press(self, c):
        """Press a key; returns the lamp that lights."""
        try:
            n = alpha_ord(c)
        except ValueError:
            raise InvalidCharacter("invalid key {!r}".format(c)) from None

        self._step_rotors()
        return alpha_chr(self._electric_signal(n))

    def step(self, n):
        """key_press() working in signal numbers (0-25) instead of letters."""
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or not 0 <= n < 26:
            raise InvalidCharacter("invalid signal {!r}".format(n))

        self._step_rotors()
        return self._electric_signal(int(n))

    def process_text(self, text, replace_char='X'):
        """Run text through the machine one key press per letter.

        Each character is upper-cased on its own, and anything that does not
        come out as a single A-Z letter is swapped for `replace_char` before it
        is keyed, or dropped when it is None. 'ß' upper-cases to 'SS' but
        still counts as one non-letter.
        """
        if replace_char is not None and not is_letter(replace_char):
            raise InvalidCharacter("invalid replace character {!r}".format(replace_char))

        out = []
        for c in text:
            if not is_letter(c):
                if replace_char is None:
                    continue
                c = replace_char
            out.append(self.key_press(c))

        return ''.join(out)

    def process_data(self, data):
        return np.array([self.step(n) for n in data], dtype=int)

    def _step_rotors(self):
        # The rightmost rotor's ratchet is always over a pawl, so it always
        # moves. The middle rotor moves if the right rotor's notch is over the
        # 2nd pawl or its own notch is over the 3rd pawl; the latter also moves
        # the third rotor. Both notch tests read the state before anything
        # moves, which is what gives the middle rotor its double step.
        l_rotate = self._m_rotor.notch_over_pawl()
        m_rotate = l_rotate or self._r_rotor.notch_over_pawl()

        self._r_rotor.rotate()
        if m_rotate:
            self._m_rotor.rotate()
        if l_rotate:
            self._l_rotor.rotate()

    def _electric_signal(self, n):
        n = self._plugboard.signal(n)

        for rotor in reversed(self._rotors):
            n = rotor.signal_in(n)

        # the reflector sends the signal straight back
        n = self._reflector.signal_in(n)

        for rotor in self._rotors:
            n = rotor.signal_out(n)

        return self._plugboard.signal(n)

    # state dumps

    def army_str(self):
        return self._str(army=True)

    def navy_str(self):
        return self._str(army=False)

    def _str(self, army):
        parts = [self._reflector.name]
        parts.extend('{}/{}'.format(r.name, r.get_ring_setting()) for r in self._rotors)
        parts.append(self.get_display())

        plugs = self._plugboard.army_str() if army else self._plugboard.navy_str()
        if plugs:
            parts.append(plugs)

        return ' '.join(parts)

    def __str__(self):
        return self.army_str()

    def __repr__(self):
        return "<EnigmaMachine {}>".format(self.army_str())
