"""Unit tests for the standardization rule cascade."""

import logging

import pytest

from burmese_cluster import STACKING_IN_PROGRESS, GraphemeCluster, Rule, Slots, Standardizer
from burmese_cluster.rule_engine import DEFAULT_RULES


class TestRespellings:
    """Alternative spellings collapse into one canonical code point."""

    @pytest.mark.parametrize("text, expected", [
        # DIGIT ZERO + AA is TA
        ("၀ာ", "တ"),
        # CA + medial YA is NYA
        ("စျ", "ဈ"),
        # U + I is UU
        ("ဥိ", "ဦ"),
        ("ဥံ", "ဦ"),
        # U with other marks is NYA
        ("ဥာ", "ဉာ"),
        ("ဥ်", "ဉ်"),
        ("ဥွ", "ဉွ"),
        ("ဥ", "ဥ"),
        # SA + medial RA is I, and with E, AA and asat it is O
        ("သြ", "ဩ"),
        ("သြော်", "ဪ"),
        ("ဩော်", "ဪ"),
        # DIGIT ZERO with marks is WA
        ("၀ု", "ဝု"),
        ("၀ျာ", "ဝျာ"),
        ("၀", "၀"),
        # stacked CA + medial YA
        ("က္စျ", "က္ဈ"),
        ("စ္ကျ", "စ္ကျ"),
    ])
    def test_respelling(self, compose, text, expected):
        assert compose(text).render() == expected

    def test_digit_zero_aa_clears_vowel(self, compose):
        cluster = compose("၀ာ")
        assert cluster.slots.main == 0x1010
        assert cluster.slots.vowel_a is None

    def test_digit_zero_aa_then_asat(self, compose):
        assert compose("၀ာ်").render() == "တ်"

    def test_ca_medial_ya_clears_medial(self, compose):
        cluster = compose("စျ")
        assert cluster.slots.main == 0x1008
        assert cluster.slots.medial_y is None

    def test_u_i_clears_diacritic(self, compose):
        cluster = compose("ဥိ")
        assert cluster.slots.main == 0x1026
        assert cluster.slots.diacritic_i is None
        assert cluster.slots.anusvara is None

    def test_medial_ra_falls_through_in_one_step(self, compose):
        # The last mark triggers both the I and the O rewrite
        cluster = compose("သော်")
        assert cluster.slots.asat2 == 0x103A
        cluster.add(0x103C)
        assert cluster.slots.main == 0x102A
        assert cluster.render() == "ဪ"


class TestKinziRule:
    """NGA/RA + asat + virama typed as a syllable becomes the kinzi."""

    @pytest.mark.parametrize("letter", ["င", "ရ"])
    def test_asat_virama_becomes_kinzi(self, compose, letter):
        cluster = compose(letter + "်္")
        assert cluster.slots.kinzi == ord(letter)
        assert cluster.slots.main is None
        assert cluster.slots.stacked is None
        assert cluster.slots.asat1 is None
        assert not cluster.is_complete()
        cluster.add(0x1000)
        assert cluster.is_complete()
        assert cluster.render() == letter + "်္က"

    def test_other_letters_stay_stacked(self, compose):
        cluster = compose("က်္")
        assert cluster.slots.kinzi is None
        assert cluster.is_stacking()
        cluster.add(0x1000)
        assert cluster.render() == "က္က်"

    def test_existing_kinzi_blocks_rule(self):
        cluster = GraphemeCluster()
        cluster.set_kinzi(0x101B)
        for c in (0x1004, 0x103A, 0x1039):
            cluster.add(c)
        assert cluster.slots.kinzi == 0x101B
        assert cluster.slots.main == 0x1004
        assert cluster.is_stacking()


class TestStandardizer:
    """Tests for the cascade mechanics."""

    def test_apply_returns_new_record(self):
        slots = Slots(main=0x1005, medial_y=0x103B)
        result = Standardizer().apply(slots)
        assert result.main == 0x1008
        assert slots.main == 0x1005
        assert slots.medial_y == 0x103B

    def test_digit_zero_moves_asat2(self):
        slots = Slots(main=0x1040, vowel_a=0x102C, asat2=0x103A)
        result = Standardizer().apply(slots)
        assert result == Slots(main=0x1010, asat1=0x103A)

    def test_first_match_stops(self):
        # Both CA rules could apply to the main letter; only the stacked one runs
        slots = Slots(main=0x1005, stacked=0x1005, medial_y=0x103B)
        result = Standardizer().apply(slots)
        assert result.stacked == 0x1008
        assert result.main == 0x1005

    def test_no_match_is_identity(self):
        slots = Slots(main=0x1000, diacritic_u=0x102F)
        assert Standardizer().apply(slots) == slots

    def test_matching_rules(self):
        std = Standardizer()
        assert std.matching_rules(Slots(main=0x1040)) == ["digit_zero"]
        assert std.matching_rules(Slots(main=0x101E, medial_r=0x103C)) == ["sa_medial_ra"]
        assert std.matching_rules(Slots(main=0x1000)) == []

    def test_matching_rules_logged_at_debug(self, caplog):
        cluster = GraphemeCluster(logger=logging.getLogger("tests.rules"))
        with caplog.at_level(logging.DEBUG, logger="tests.rules"):
            cluster.add(0x1005)
            assert caplog.records == []
            cluster.add(0x103B)
        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 1
        assert "main_ca_medial_ya" in messages[0]
        assert "medial_y=U+103B" in messages[0]

    def test_rule_order(self):
        names = [rule.name for rule in DEFAULT_RULES]
        assert names == [
            "kinzi_from_asat_virama",
            "stacked_ca_medial_ya",
            "main_ca_medial_ya",
            "sa_medial_ra",
            "o_from_e_aa_asat",
            "letter_u",
            "digit_zero",
        ]
        assert [rule.name for rule in DEFAULT_RULES if rule.fall_through] == ["sa_medial_ra"]

    def test_custom_rules(self):
        swap = Rule("ka_to_kha", lambda s: s.main == 0x1000,
                    lambda s: Slots(**dict(s.items(), main=0x1001)), False)
        cluster = GraphemeCluster(standardizer=Standardizer([swap]))
        cluster.add(0x1000)
        assert cluster.render() == "ခ"

    def test_sentinel_never_matches_code_point_rules(self):
        slots = Slots(main=0x1000, stacked=STACKING_IN_PROGRESS, medial_y=0x103B)
        assert Standardizer().apply(slots) == slots

    @pytest.mark.parametrize("text", [
        "၀ာ",
        "စျ",
        "ဥိ",
        "ဥာ",
        "သြော်",
        "င်္ကျို",
        "မ္ဘာ",
        "ကျွော်",
        "၀ံ",
    ])
    def test_idempotent(self, compose, text):
        cluster = compose(text)
        standardized = cluster.slots
        assert Standardizer().apply(standardized) == standardized
