import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .errors import ConfigError
from .machine import EnigmaMachine


@dataclass
class KeySheet:
    """One day's machine settings, as read off a key sheet.

    A JSON key sheet looks like::

        {"rotors": ["II", "IV", "V"], "ring_settings": [1, 20, 11],
         "reflector": "B", "plugboard": "AV BS CG DL FU HZ IN KM OW RX",
         "display": "WXC"}

    Only ``rotors`` is required.
    """

    rotors: List[str]
    ring_settings: Union[List[int], str, None] = None
    reflector: str = 'B'
    plugboard: Optional[str] = None
    display: Optional[str] = None
    extra: dict = field(default_factory=dict, repr=False)

    REQUIRED = frozenset({'rotors'})

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigError("key sheet must be a JSON object")

        missing = cls.REQUIRED - data.keys()
        if missing:
            raise ConfigError("missing keys in key sheet: {}".format(', '.join(sorted(missing))))

        known = {'rotors', 'ring_settings', 'reflector', 'plugboard', 'display'}
        kwargs = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}

        rotors = kwargs['rotors']
        if isinstance(rotors, str):
            kwargs['rotors'] = rotors.split()
        elif not isinstance(rotors, list):
            raise ConfigError("rotors must be a list or a space separated string")

        return cls(extra=extra, **kwargs)

    def build_machine(self):
        machine = EnigmaMachine.from_key_sheet(
            self.rotors,
            ring_settings=self.ring_settings,
            reflector=self.reflector,
            plugboard_settings=self.plugboard,
        )
        if self.display:
            machine.set_display(self.display)
        return machine


def load_key_sheet(path: Union[str, Path]) -> KeySheet:
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except OSError as exc:
        raise ConfigError("cannot read key sheet {}: {}".format(path, exc)) from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError("invalid JSON in {}: {}".format(path, exc)) from exc
    return KeySheet.from_dict(data)
