from collections import namedtuple
from dataclasses import replace

from .slots import STACKING_IN_PROGRESS, can_set_kinzi

# guard: Slots -> bool, rewrite: Slots -> Slots
Rule = namedtuple("Rule", ["name", "guard", "rewrite", "fall_through"])


def _kinzi_from_asat_virama(s):
    return (s.kinzi is None
            and can_set_kinzi(s.main)
            and s.stacked is STACKING_IN_PROGRESS
            and s.asat1 is not None)


def _stacked_ca_medial_ya(s):
    return s.stacked == 0x1005 and s.medial_y is not None


def _main_ca_medial_ya(s):
    return s.main == 0x1005 and s.stacked is None and s.medial_y is not None


def _sa_medial_ra(s):
    return s.main == 0x101E and s.medial_r is not None


def _o_from_e_aa_asat(s):
    return (s.main == 0x1029
            and s.diacritic_e == 0x1031
            and s.vowel_a == 0x102C
            and s.asat2 is not None)


def _letter_u(s):
    if s.any_set("kinzi", "stacked", "asat1",
                 "medial_y", "medial_r", "medial_w", "medial_h",
                 "diacritic_e", "diacritic_u", "diacritic_ai", "vowel_a"):
        return replace(s, main=0x1009)
    if s.any_set("diacritic_i", "anusvara"):
        return replace(s, main=0x1026, diacritic_i=None, anusvara=None)
    return s


def _digit_zero(s):
    if s.medial_y is None and s.medial_r is None and s.vowel_a == 0x102C:
        s = replace(s, main=0x1010, vowel_a=None)
        if s.asat2 is not None:
            s = replace(s, asat1=s.asat2, asat2=None)
        return s
    if s.any_set("kinzi", "stacked", "asat1",
                 "medial_y", "medial_r", "medial_w", "medial_h",
                 "diacritic_e", "diacritic_i", "diacritic_u", "diacritic_ai",
                 "anusvara", "vowel_a", "dot_below", "visarga"):
        return replace(s, main=0x101D)
    return s


DEFAULT_RULES = [
    # NGA/RA + asat + virama written as a syllable is the kinzi form
    Rule("kinzi_from_asat_virama", _kinzi_from_asat_virama,
         lambda s: replace(s, kinzi=s.main, main=None, stacked=None, asat1=None), False),
    Rule("stacked_ca_medial_ya", _stacked_ca_medial_ya,
         lambda s: replace(s, stacked=0x1008, medial_y=None), False),
    Rule("main_ca_medial_ya", _main_ca_medial_ya,
         lambda s: replace(s, main=0x1008, medial_y=None), False),
    # SA + medial RA is the independent vowel I; may go on to become O
    Rule("sa_medial_ra", _sa_medial_ra,
         lambda s: replace(s, main=0x1029, medial_r=None), True),
    Rule("o_from_e_aa_asat", _o_from_e_aa_asat,
         lambda s: replace(s, main=0x102A, diacritic_e=None, vowel_a=None, asat2=None), False),
    Rule("letter_u", lambda s: s.main == 0x1025, _letter_u, False),
    # DIGIT ZERO is visually identical to WA, and with AA to TA
    Rule("digit_zero", lambda s: s.main == 0x1040, _digit_zero, False),
]


class Standardizer:
    def __init__(self, rules=None):
        """
        Initialize the standardizer.
        :param rules: ordered list of Rule. The first rule whose guard holds is applied;
                      evaluation continues past it only if the rule falls through.
        """
        self.rules = list(DEFAULT_RULES if rules is None else rules)

    def apply(self, slots):
        """
        Rewrite alternative spellings in a slot record into their canonical encoding.
        Returns a new record; the given one is left untouched.
        """
        for rule in self.rules:
            if not rule.guard(slots):
                continue
            slots = rule.rewrite(slots)
            if not rule.fall_through:
                break
        return slots

    def matching_rules(self, slots):
        """Names of the rules whose guard currently holds, in evaluation order."""
        return [rule.name for rule in self.rules if rule.guard(slots)]
