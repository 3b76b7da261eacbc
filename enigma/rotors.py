import logging

import numpy as np

from .errors import (InvalidDisplay, InvalidRingSetting, InvalidStepping,
                     InvalidWiring, InvalidWiringLength)
from .utils import ALPHABET, alpha_mod

logger = logging.getLogger(__name__)


def check_ring_setting(ring_setting):
    if isinstance(ring_setting, bool) or not isinstance(ring_setting, (int, np.integer)):
        raise InvalidRingSetting("invalid ring setting {!r}".format(ring_setting))
    if ring_setting < 0 or ring_setting > 25:
        raise InvalidRingSetting("ring setting {} out of range 0-25".format(ring_setting))
    return int(ring_setting)


class Rotor(object):
    """One wheel of the machine: a rotor, the entry wheel or a reflector.

    The wiring string gives the contact reached by a signal entering at each
    pin from the right, pins numbered 0-25 from the top. The ring setting
    fixes the alphabet ring to the wheel: 0 puts "A" over pin 0, 1 puts "B"
    there. `stepping` lists the letters shown in the window while a notch sits
    over the pawl. A rotor without stepping never kicks its neighbour, which
    is how reflectors and the M4's fourth wheel are modelled.
    """

    def __init__(self, name, wiring, ring_setting=0, stepping=None):
        self.name = name

        if not isinstance(wiring, str):
            raise InvalidWiring("wiring must be a string")
        if len(wiring) != 26:
            raise InvalidWiringLength("invalid wiring length {}".format(len(wiring)))

        wiring = wiring.upper()
        if any(c not in ALPHABET for c in wiring):
            raise InvalidWiring("invalid wiring {!r}".format(wiring))

        entry = np.array([ord(c) - ord('A') for c in wiring], dtype=int)
        if not np.array_equal(np.sort(entry), np.arange(26)):
            raise InvalidWiring("invalid wiring; duplicate letter")

        self.wiring = wiring

        # pin -> contact going right to left, contact -> pin on the way back
        self._entry_map = entry
        self._exit_map = np.argsort(entry)

        ring_setting = check_ring_setting(ring_setting)

        if stepping is None:
            self._notches = frozenset()
        else:
            stepping = stepping.upper()
            if any(c not in ALPHABET for c in stepping):
                raise InvalidStepping("invalid stepping {!r}".format(stepping))
            self._notches = frozenset(stepping)

        self.pos = 0
        self.rotations = 0
        self._build_display_maps(ring_setting)
        self.set_display('A')

    @property
    def notches(self):
        return self._notches

    def _build_display_maps(self, ring_setting):
        self.ring_setting = ring_setting
        self._display_to_pos = {}
        self._pos_to_display = {}
        for n, letter in enumerate(ALPHABET):
            pos = alpha_mod(n - ring_setting)
            self._display_to_pos[letter] = pos
            self._pos_to_display[pos] = letter

    def set_ring_setting(self, ring_setting):
        ring_setting = check_ring_setting(ring_setting)

        # keep the same letter in the window
        shown = self.get_display()
        self._build_display_maps(ring_setting)
        self.pos = self._display_to_pos[shown]
        logger.debug("rotor %s ring setting -> %d", self.name, ring_setting)

    def get_ring_setting(self):
        return self.ring_setting

    def set_display(self, val):
        if not isinstance(val, str) or val.upper() not in self._display_to_pos:
            raise InvalidDisplay("invalid display value {!r}".format(val))

        self.pos = self._display_to_pos[val.upper()]
        self.rotations = 0

    def get_display(self):
        return self._pos_to_display[self.pos]

    def signal_in(self, n):
        pin = alpha_mod(n + self.pos)
        contact = self._entry_map[pin]
        return alpha_mod(contact - self.pos)

    def signal_out(self, n):
        contact = alpha_mod(n + self.pos)
        pin = self._exit_map[contact]
        return alpha_mod(pin - self.pos)

    def notch_over_pawl(self):
        return self._pos_to_display[self.pos] in self._notches

    def rotate(self):
        self.pos = alpha_mod(self.pos + 1)
        self.rotations += 1

    def __repr__(self):
        return "<Rotor {} ring={} display={}>".format(
            self.name, self.ring_setting, self.get_display())
