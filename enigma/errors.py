class EnigmaError(Exception):
    pass


class ConfigError(EnigmaError, ValueError):
    pass


# rotors & reflectors

class RotorError(EnigmaError):
    pass


class InvalidWiring(RotorError, ValueError):
    pass


class InvalidWiringLength(InvalidWiring):
    pass


class InvalidRingSetting(RotorError, ValueError):
    pass


class InvalidStepping(RotorError, ValueError):
    pass


class InvalidDisplay(RotorError, ValueError):
    pass


class UnknownRotorType(RotorError, KeyError):
    pass


class UnknownReflectorType(RotorError, KeyError):
    pass


# plugboard

class PlugboardError(EnigmaError):
    pass


class TooManyPairs(PlugboardError, ValueError):
    pass


class InvalidPair(PlugboardError, ValueError):
    pass


class DuplicateConnection(PlugboardError, ValueError):
    pass


class InvalidPlugboardSettings(PlugboardError, ValueError):
    pass


# machine

class MachineError(EnigmaError):
    pass


class InvalidRotorCount(MachineError, ValueError):
    pass


class RotorRingCountMismatch(MachineError, ValueError):
    pass


class InvalidDisplayLength(MachineError, ValueError):
    pass


class InvalidCharacter(MachineError, ValueError):
    pass
