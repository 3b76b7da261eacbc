from .errors import (ConfigError, DuplicateConnection, EnigmaError,
                     InvalidCharacter, InvalidDisplay, InvalidDisplayLength,
                     InvalidPair, InvalidPlugboardSettings, InvalidRingSetting,
                     InvalidRotorCount, InvalidStepping, InvalidWiring,
                     InvalidWiringLength, MachineError, PlugboardError,
                     RotorError, RotorRingCountMismatch, TooManyPairs,
                     UnknownReflectorType, UnknownRotorType)
from .machine import EnigmaMachine
from .plugboard import Plugboard, PlugboardStateSaver
from .rotor_data import REFLECTORS, ROTORS, create_reflector, create_rotor
from .rotors import Rotor

__version__ = '0.1.0'
