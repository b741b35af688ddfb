"""Tests for the wounds table engine."""

from fractions import Fraction

from src.dice.hits import hits_table
from src.dice.types import BlastSpec, DicePlusNumber, HitsParams, RerollModifier, WoundsParams
from src.dice.wounds import wounds_table


class TestWoundsTable:
    """Tests for wounds_table function."""

    def test_one_attack(self):
        """Test attack 1, melee 4+, defense 4+."""
        hits = hits_table(HitsParams(attack=1, melee=4))
        assert wounds_table(WoundsParams(hits_table=hits, defense=4)) == {
            0: Fraction(3, 4),
            1: Fraction(1, 4),
        }

    def test_two_attacks(self):
        """Test attack 2, melee 4+, defense 4+."""
        hits = hits_table(HitsParams(attack=2, melee=4))
        assert wounds_table(WoundsParams(hits_table=hits, defense=4)) == {
            0: Fraction(9, 16),
            1: Fraction(6, 16),
            2: Fraction(1, 16),
        }

    def test_elite_and_vicious(self):
        """Test attack 3, melee 6+, defense 3+, elite and vicious."""
        hits = hits_table(HitsParams(attack=3, melee=6, elite=True))
        assert wounds_table(WoundsParams(hits_table=hits, defense=3, vicious=True)) == {
            0: Fraction(20796875, 34012224),
            1: Fraction(3705625, 11337408),
            2: Fraction(660275, 11337408),
            3: Fraction(117649, 34012224),
        }

    def test_defense_rerolls(self):
        """Test a certain hit wounding on 4+ with one reroll."""
        reroll = RerollModifier(DicePlusNumber(plus=1))
        params = WoundsParams(hits_table={0: Fraction(0), 1: Fraction(1)}, defense=4, rerolls=[reroll])
        assert wounds_table(params) == {0: Fraction(1, 4), 1: Fraction(3, 4)}

    def test_blasted_hits(self):
        """Test wounds from a blast table still sum to one."""
        hits = hits_table(HitsParams(attack=3, melee=3, blast=BlastSpec(dice=3)))
        table = wounds_table(WoundsParams(hits_table=hits, defense=5))
        assert list(table) == list(range(10))
        assert sum(table.values()) == 1

    def test_empty_hits_table(self):
        """Test that no hit outcomes give no wound outcomes."""
        assert wounds_table(WoundsParams(hits_table={}, defense=4)) == {}
