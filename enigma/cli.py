import argparse
import logging
import sys

from .config import KeySheet, load_key_sheet
from .errors import EnigmaError
from .utils import remove_spaces

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"

EPILOG = """\
Ring settings are 0-based (A=0), not the 01-26 printed on key sheets.

Example, decrypting the message key then the message:

  enigma-sim -r "II IV V" -i "1 20 11" -p "AV BS CG DL FU HZ IN KM OW RX" \\
      -s WXC -t KCH
  enigma-sim -r "II IV V" -i "1 20 11" -p "AV BS CG DL FU HZ IN KM OW RX" \\
      -s BLA -t NIBLFMYMLLUFWCASCSSNVHAZ
"""


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser():
    p = argparse.ArgumentParser(
        prog='enigma-sim',
        description="Encrypt or decrypt text with a simulated Enigma machine.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument('-k', '--key-file', metavar='FILE',
                   help="JSON key sheet; the options below override its values")
    p.add_argument('-r', '--rotors', metavar='NAMES',
                   help="rotor types, leftmost first, e.g. 'II IV V' or 'Beta II IV I'")
    p.add_argument('-i', '--ring-settings', metavar='RINGS',
                   help="0-based ring settings, numbers 0-25 or letters A-Z; '1 20 11' "
                        "is the same as 'B U L' (key sheet 02 21 12)")
    p.add_argument('-u', '--reflector', metavar='NAME',
                   help="reflector type (default: B)")
    p.add_argument('-p', '--plugboard', metavar='PLUGS',
                   help="plugboard settings, 'AV BS CG' or '1/22 2/19 3/7'")
    p.add_argument('-s', '--start', metavar='DISPLAY',
                   help="starting display, one letter per rotor (default: all A)")
    p.add_argument('-t', '--text', metavar='TEXT',
                   help="text to process; read from stdin if omitted")
    p.add_argument('-x', '--replace-char', default='X', metavar='CHAR',
                   help="character keyed in place of non-letters (default: X)")
    p.add_argument('-z', '--delete-chars', action='store_true',
                   help="drop non-letters instead of replacing them")
    p.add_argument('-g', '--ungroup', action='store_true',
                   help="strip all whitespace from the input first, for ciphertext "
                        "written in letter groups")
    p.add_argument('-b', '--block', type=int, default=0, metavar='N',
                   help="print output in groups of N letters (0: no grouping)")
    p.add_argument('-v', '--verbose', action='store_true',
                   help="log machine state to stderr")
    return p


def key_sheet_from_args(args):
    data = {}
    if args.key_file:
        data.update(vars(load_key_sheet(args.key_file)))
        data.pop('extra', None)

    overrides = {
        'rotors': args.rotors,
        'ring_settings': args.ring_settings,
        'reflector': args.reflector,
        'plugboard': args.plugboard,
        'display': args.start,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return KeySheet.from_dict(data)


def group(text, block):
    if block <= 0:
        return text
    return ' '.join(text[i:i + block] for i in range(0, len(text), block))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.key_file and not args.rotors:
        parser.error("either --key-file or --rotors is required")

    try:
        machine = key_sheet_from_args(args).build_machine()
    except EnigmaError as exc:
        parser.error(str(exc))

    logger.info("starting state: %s", machine.army_str())

    text = args.text if args.text is not None else sys.stdin.read()
    text = remove_spaces(text) if args.ungroup else text.strip()
    replace_char = None if args.delete_chars else args.replace_char

    try:
        result = machine.process_text(text, replace_char=replace_char)
    except EnigmaError as exc:
        parser.error(str(exc))

    logger.info("final state: %s", machine.army_str())
    print(group(result, args.block))
    return 0
