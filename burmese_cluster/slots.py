"""
Slot record and character classification for Burmese grapheme clusters.

A cluster is stored as 17 slots, each holding at most one code point. The
stacked slot may additionally hold ``STACKING_IN_PROGRESS`` when a virama has
been seen but the consonant below it has not arrived yet.
"""
from dataclasses import dataclass, fields, replace


class _StackingInProgress:
    __slots__ = ()

    def __repr__(self):
        return "STACKING_IN_PROGRESS"


STACKING_IN_PROGRESS = _StackingInProgress()

# U+E000..U+E055 shadows U+1000..U+1055
PRIVATE_USE_OFFSET = 0xE000 - 0x1000
PRIVATE_USE_FIRST = 0xE000
PRIVATE_USE_LAST = 0xE055

# Code points of the Myanmar block that are not used for Burmese
NOT_BURMESE = frozenset([0x1022, 0x1028, 0x1033, 0x1034, 0x1035])

NGA = 0x1004
RA = 0x101B
ASAT = 0x103A
VIRAMA = 0x1039

# Emitted in place of an absent main letter
PLACEHOLDER = "\u200c"

# Marks routed to a slot other than main
MODIFIERS = frozenset(list(range(0x102B, 0x1033)) + list(range(0x1036, 0x103F)))


@dataclass
class Slots:
    kinzi: object = None
    main: object = None
    stacked: object = None
    asat1: object = None
    medial_y: object = None
    medial_r: object = None
    medial_w: object = None
    medial_h: object = None
    diacritic_e: object = None
    diacritic_i: object = None
    diacritic_u: object = None
    diacritic_ai: object = None
    anusvara: object = None
    vowel_a: object = None
    dot_below: object = None
    asat2: object = None
    visarga: object = None

    def copy(self):
        return replace(self)

    def any_set(self, *names):
        """Returns True if any of the named slots holds a value."""
        return any(getattr(self, name) is not None for name in names)

    def items(self):
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


def code_point(c):
    """Accepts an int code point or a one-character string."""
    if isinstance(c, str):
        return ord(c)
    return c


def can_set_kinzi(c):
    # MYANMAR LETTER NGA and RA
    return c == NGA or c == RA


def can_set_stacked(c):
    if c is None:
        return False
    return ((0x1000 <= c <= 0x1021 and c != 0x101D)
            or c == 0x103F
            or 0x1050 <= c <= 0x1055)


def is_private_use(c):
    if c is None or c is STACKING_IN_PROGRESS:
        return False
    return PRIVATE_USE_FIRST <= c <= PRIVATE_USE_LAST


def can_add(c):
    return ((0x1000 <= c <= 0x1055 and c not in NOT_BURMESE)
            or can_set_kinzi(c - PRIVATE_USE_OFFSET))
