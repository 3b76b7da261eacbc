from types import MappingProxyType

from .errors import UnknownReflectorType, UnknownRotorType
from .rotors import Rotor

# name: (wiring, stepping)
ROTORS = MappingProxyType({
    'I':     ('EKMFLGDQVZNTOWYHXUSPAIBRCJ', 'Q'),
    'II':    ('AJDKSIRUXBLHWTMCQGZNPYFVOE', 'E'),
    'III':   ('BDFHJLCPRTXVZNYEIWGAKMUSQO', 'V'),
    'IV':    ('ESOVPZJAYQUIRHXLNFTGKDCMWB', 'J'),
    'V':     ('VZBRGITYUPSDNHLXAWMJQOFECK', 'Z'),
    'VI':    ('JPGVOUMFYQBENHZRDKASXLICTW', 'ZM'),
    'VII':   ('NZJHGRCXMYSWBOUFAIVLPEKQDT', 'ZM'),
    'VIII':  ('FKQHTLXOCBJSPDZRAMEWNIUYGV', 'ZM'),
    'Beta':  ('LEYJVCNIXWPBQMDRTAKZGFUHOS', None),
    'Gamma': ('FSOKANUERHMBTIYCWLQPZXVGJD', None),
})

REFLECTORS = MappingProxyType({
    'A':      'EJMZALYXVBWFCRQUONTSPIKHGD',
    'B':      'YRUHQSLDPXNGOKMIEBFZCWVJAT',
    'C':      'FVPJIAOYEDRZXWGCTKUQSBNMHL',
    'B-Thin': 'ENKQAUYWJICOPBLMDXZVFTHRGS',
    'C-Thin': 'RDOBJNTKVEHMLFCWZAXGYIPSUQ',
})


def create_rotor(name, ring_setting=0, rotor_table=None):
    table = ROTORS if rotor_table is None else rotor_table
    try:
        wiring, stepping = table[name]
    except KeyError:
        raise UnknownRotorType("unknown rotor type: {}".format(name)) from None

    return Rotor(name, wiring, ring_setting, stepping)


def create_reflector(name, reflector_table=None):
    table = REFLECTORS if reflector_table is None else reflector_table
    try:
        wiring = table[name]
    except KeyError:
        raise UnknownReflectorType("unknown reflector type: {}".format(name)) from None

    return Rotor(name, wiring)
