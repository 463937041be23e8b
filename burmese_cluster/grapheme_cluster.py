"""
A GraphemeCluster is a graphical unit of Burmese text consisting of a letter and
optional modifiers.

The definition follows the table in Unicode Technical Note #11 (Representing
Myanmar in Unicode: Details and Examples, Version 4), restricted to the
character combinations used for writing the Burmese language. In Unicode
terms a GraphemeCluster is a tailored extended grapheme cluster.

render() returns the canonical character sequence of the cluster, following
the canonical diacritic storage order of UTN #11.
"""
import logging
import unicodedata

from . import slots as _slots
from .errors import UnexpectedCharacterError, describe
from .rule_engine import Standardizer
from .slots import (
    ASAT,
    PLACEHOLDER,
    PRIVATE_USE_OFFSET,
    STACKING_IN_PROGRESS,
    VIRAMA,
    Slots,
    code_point,
)

_logger = logging.getLogger(__name__)


def _is_combining_mark(c):
    return unicodedata.category(chr(c)) in ("Mc", "Mn")


class GraphemeCluster:
    def __init__(self, throw_on_error=False, logger=None, standardizer=None):
        """
        Constructs an empty cluster.
        :param throw_on_error: raise UnexpectedCharacterError after logging instead of ignoring the character
        :param logger: logging.Logger receiving diagnostics. Defaults to the module logger.
        :param standardizer: Standardizer applied after every mutation.
        """
        self.throw_on_error = throw_on_error
        self.logger = logger if logger is not None else _logger
        self.standardizer = standardizer if standardizer is not None else Standardizer()
        self._composing = False
        self._slots = Slots()

    # Predicates

    @staticmethod
    def can_set_kinzi(c):
        """True iff the character can appear in the kinzi slot (NGA or RA)."""
        return _slots.can_set_kinzi(code_point(c))

    @staticmethod
    def can_set_stacked(c):
        """True iff the character can be used as a stacked consonant."""
        return _slots.can_set_stacked(code_point(c))

    @staticmethod
    def is_private_use(c):
        return _slots.is_private_use(code_point(c))

    @staticmethod
    def can_add(c):
        """True iff the character can be added to a cluster with add()."""
        return _slots.can_add(code_point(c))

    # State

    def clear(self):
        """Resets the cluster to its initial empty state. The error policy is kept."""
        self._composing = False
        self._slots = Slots()

    def is_empty(self):
        return not self._composing

    def is_complete(self):
        """A cluster is complete once it has a main letter and no virama awaits its consonant."""
        return self._slots.main is not None and not self.is_stacking()

    def is_stacking(self):
        return self._slots.stacked is STACKING_IN_PROGRESS

    @property
    def slots(self):
        """Snapshot of the current slot values."""
        return self._slots.copy()

    def _unexpected_character(self, c, slot):
        msg = describe(c, slot)
        self.logger.warning(msg)
        if self.throw_on_error:
            raise UnexpectedCharacterError(c, slot)

    # Mutation

    def set_kinzi(self, c):
        c = code_point(c)
        if not _slots.can_set_kinzi(c):
            self._unexpected_character(c, "kinzi")
            return
        self._slots.kinzi = c
        self._composing = True
        self._standardize()

    def set_stacked(self, c):
        c = code_point(c)
        if not _slots.can_set_stacked(c):
            self._unexpected_character(c, "stacked")
            return
        self._slots.stacked = c
        self._composing = True
        self._standardize()

    def add(self, c):
        """
        Adds a character to the cluster, routing it to its slot.
        :param c: code point or one-character string
        """
        c = code_point(c)
        if not _slots.can_add(c):
            self._unexpected_character(c, "non-Burmese")
            return

        s = self._slots
        if c == 0x102B or c == 0x102C:
            s.vowel_a = c
        elif c == 0x102D or c == 0x102E:
            if c == 0x102E:
                s.diacritic_ai = None
            s.diacritic_i = c
            s.asat1 = None
        elif c == 0x102F or c == 0x1030:
            s.diacritic_u = c
        elif c == 0x1031:
            s.diacritic_e = c
        elif c == 0x1032:
            s.diacritic_ai = c
            s.asat1 = None
            if s.diacritic_i == 0x102E:
                s.diacritic_i = None
            s.anusvara = None
        elif c == 0x1036:
            s.anusvara = c
            s.asat1 = None
            s.diacritic_ai = None
        elif c == 0x1037:
            s.dot_below = c
        elif c == 0x1038:
            s.visarga = c
        elif c == VIRAMA:
            s.stacked = STACKING_IN_PROGRESS
        elif c == ASAT:
            # After AA the mark is the second asat of the -aw vowel
            if s.vowel_a is None:
                s.asat1 = c
                s.diacritic_i = None
                s.diacritic_ai = None
                s.anusvara = None
            else:
                s.asat2 = c
        elif c == 0x103B:
            s.medial_y = c
        elif c == 0x103C:
            s.medial_r = c
        elif c == 0x103D:
            s.medial_w = c
        elif c == 0x103E:
            s.medial_h = c
        else:
            if _slots.is_private_use(c):
                self.set_kinzi(c - PRIVATE_USE_OFFSET)
                return
            if s.stacked is STACKING_IN_PROGRESS:
                self.set_stacked(c)
                return
            if _is_combining_mark(c):
                self._unexpected_character(c, "main")
                return
            s.main = c

        self._composing = True
        self._standardize()

    def _standardize(self):
        if self.logger.isEnabledFor(logging.DEBUG):
            rules = self.standardizer.matching_rules(self._slots)
            if rules:
                self.logger.debug("Standardizing %r: %s", self, ", ".join(rules))
        self._slots = self.standardizer.apply(self._slots)

    # Output

    @staticmethod
    def _append_if_present(buffer, c):
        if c is not None and not _slots.is_private_use(c):
            buffer.append(chr(c))

    def append_to(self, buffer):
        """
        Appends the cluster in canonical storage order to a list of strings.
        Nothing is appended for an empty cluster.
        """
        if not self._composing:
            return buffer
        s = self._slots
        append = self._append_if_present

        if s.main is None:
            buffer.append(PLACEHOLDER)

        if s.kinzi is not None:
            buffer.append(chr(s.kinzi) + "\u103a\u1039")

        append(buffer, s.main)

        if s.stacked is not None:
            buffer.append("\u1039")
            if s.stacked is not STACKING_IN_PROGRESS:
                buffer.append(chr(s.stacked))

        delayed_asat = None
        if s.medial_y is None and s.medial_r is None and s.medial_w is None:
            delayed_asat = s.asat1
            append(buffer, s.medial_h)
        else:
            for c in (s.asat1, s.medial_y, s.medial_r, s.medial_w, s.medial_h):
                append(buffer, c)

        if not s.any_set("diacritic_e", "diacritic_i", "diacritic_u",
                         "diacritic_ai", "anusvara", "vowel_a"):
            append(buffer, s.dot_below)
            append(buffer, delayed_asat)
        else:
            append(buffer, delayed_asat)
            for c in (s.diacritic_e, s.diacritic_i, s.diacritic_u, s.diacritic_ai,
                      s.anusvara, s.vowel_a, s.dot_below, s.asat2):
                append(buffer, c)

        append(buffer, s.visarga)
        return buffer

    def render(self):
        return "".join(self.append_to([]))

    def __str__(self):
        return self.render()

    def __repr__(self):
        values = ", ".join(f"{name}=U+{c:04X}" if isinstance(c, int) else f"{name}={c!r}"
                           for name, c in self._slots.items() if c is not None)
        return f"GraphemeCluster({values})"
