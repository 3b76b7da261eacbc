import logging

import numpy as np

from .errors import DuplicateConnection, InvalidPair, TooManyPairs
from .keysheet import format_army, format_navy, parse_plugboard_settings

logger = logging.getLogger(__name__)


class Plugboard(object):
    """Cable connections swapping letters before and after the entry wheel.

    Each cable crosses a pair of wires in both directions, so the same lookup
    serves keyboard -> rotors and rotors -> lamps. Ten cables were issued with
    each machine.
    """

    MAX_PAIRS = 10

    def __init__(self, pairs=None):
        self._wiring_map = np.arange(26)
        if pairs:
            self.construct_wiring(pairs)

    @classmethod
    def from_key_sheet(cls, settings=None):
        return cls(parse_plugboard_settings(settings))

    def construct_wiring(self, pairs):
        pairs = list(pairs)
        if len(pairs) > self.MAX_PAIRS:
            raise TooManyPairs("too many pairs: {} (max {})".format(len(pairs), self.MAX_PAIRS))

        plugs = []
        for pair in pairs:
            try:
                a, b = pair
            except (TypeError, ValueError):
                raise InvalidPair("invalid wiring pair {!r}".format(pair)) from None
            for n in (a, b):
                _check_plug(n)
            plugs.extend((int(a), int(b)))

        counts = np.bincount(np.array(plugs, dtype=int), minlength=26)
        if (counts > 1).any():
            dup = int(np.flatnonzero(counts > 1)[0])
            raise DuplicateConnection("duplicate connection on plug {}".format(dup))

        wiring = np.arange(26)
        for a, b in zip(plugs[::2], plugs[1::2]):
            wiring[a] = b
            wiring[b] = a
        self._wiring_map = wiring
        logger.debug("plugboard wired: %s", self.army_str() or "(none)")

    def signal(self, n):
        return int(self._wiring_map[n])

    def get_pairs(self):
        return [(i, int(j)) for i, j in enumerate(self._wiring_map) if i < j]

    def army_str(self):
        return format_army(self.get_pairs())

    def navy_str(self):
        return format_navy(self.get_pairs())

    # hill-climbing support

    def get_wiring(self):
        return self._wiring_map.copy()

    def set_wiring(self, wiring):
        wiring = np.asarray(wiring, dtype=int)
        if wiring.shape != (26,) or not np.array_equal(np.sort(wiring), np.arange(26)):
            raise InvalidPair("wiring must be a permutation of 0-25")
        if not np.array_equal(wiring[wiring], np.arange(26)):
            raise InvalidPair("wiring must be self-inverse")
        if np.count_nonzero(wiring != np.arange(26)) > 2 * self.MAX_PAIRS:
            raise TooManyPairs("too many pairs in wiring")
        self._wiring_map = wiring.copy()

    def is_wired(self, n):
        return bool(self._wiring_map[n] != n)

    def is_free(self, n):
        return bool(self._wiring_map[n] == n)

    def is_connected(self, x, y):
        return bool(self._wiring_map[x] == y and self._wiring_map[y] == x)

    def disconnect(self, n):
        _check_plug(n)
        x = self._wiring_map[n]
        self._wiring_map[x] = x
        self._wiring_map[n] = n

    def connect(self, x, y):
        """Connect plug x to plug y, pulling any cable already in either."""
        _check_plug(x)
        _check_plug(y)

        wiring = self._wiring_map.copy()
        m, n = wiring[x], wiring[y]
        wiring[m] = m
        wiring[n] = n
        wiring[x] = y
        wiring[y] = x

        if np.count_nonzero(wiring != np.arange(26)) > 2 * self.MAX_PAIRS:
            raise TooManyPairs("all {} cables are in use".format(self.MAX_PAIRS))
        self._wiring_map = wiring

    def unplug_all(self):
        self._wiring_map = np.arange(26)

    def saved_state(self):
        return PlugboardStateSaver(self)

    def __repr__(self):
        return "<Plugboard {}>".format(self.army_str())


class PlugboardStateSaver(object):
    """Restore a plugboard's wiring when the block exits, however it exits.

        with PlugboardStateSaver(pb):
            pb.connect(0, 1)
            ...
    """

    def __init__(self, plugboard):
        self.plugboard = plugboard
        self._state = None

    def __enter__(self):
        self._state = self.plugboard.get_wiring()
        return self.plugboard

    def __exit__(self, exc_type, exc, tb):
        self.plugboard.set_wiring(self._state)
        return False


def _check_plug(n):
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or not 0 <= n < 26:
        raise InvalidPair("invalid plug {!r}".format(n))
