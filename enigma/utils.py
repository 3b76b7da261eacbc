import string

ALPHABET = string.ascii_uppercase

# magic 65 from text encoding
_ORD_A = ord('A')


def alpha_mod(dividend):
    """Modulo 26 that maps negative dividends into [0, 25].

    Offsets are subtracted all over the signal path, so intermediates are
    often negative: -1 must come back as 25.
    """
    return int(dividend) % 26


def is_letter(c):
    """True if `c` is one character that upper-cases to a single A-Z letter.

    Some characters grow when upper-cased ('ß' -> 'SS', 'ﬁ' -> 'FI'), and a
    plain ``in ALPHABET`` would accept 'ST' as a substring.
    """
    if not isinstance(c, str) or len(c) != 1:
        return False
    c = c.upper()
    return len(c) == 1 and c in ALPHABET


def alpha_ord(x):
    if not isinstance(x, str) or len(x) != 1:
        raise ValueError("expected a single character, got {!r}".format(x))
    if not is_letter(x):
        raise ValueError("{!r} is not a letter A-Z".format(x))

    return ord(x.upper()) - _ORD_A


def alpha_chr(n):
    if not 0 <= n < 26:
        raise ValueError("signal {} out of range 0-25".format(n))
    return chr(int(n) + _ORD_A)


def remove_spaces(s):
    return ''.join(s.split())
