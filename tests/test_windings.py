#!/usr/bin/env python
#
import numpy as np
import pytest
import outrunnertools.windings
from outrunnertools.windings import (SlotPoleCombination,
                                     SLOTS_POLES_COMBINATIONS)


def test_catalog():
    assert len(SLOTS_POLES_COMBINATIONS) == 13
    assert SLOTS_POLES_COMBINATIONS[0] == (12, 14, 'distributed', 84, 7)
    assert SLOTS_POLES_COMBINATIONS[-1] == (6, 8, 'concentrated', 24, 2)


def test_check_catalog():
    assert outrunnertools.windings.check_catalog() == []
    wrong = SlotPoleCombination(12, 14, 'distributed', 42, 7)
    assert outrunnertools.windings.check_catalog([wrong]) == [wrong]


def test_min_diameter_needed():
    assert outrunnertools.windings.min_diameter_needed(12) == pytest.approx(
        60/np.pi)


def test_configuration():
    c = outrunnertools.windings.calculate_configuration(30, 40, 800)
    assert (c.slots, c.poles) == (21, 22)
    assert c.winding == 'distributed'
    assert c.lcm == 462
    assert c.cogging_factor == 22
    assert c.pole_pitch == pytest.approx(np.pi*35/22)
    assert c.score == pytest.approx(2.288077, abs=1e-6)


def test_configuration_target_kv():
    c1 = outrunnertools.windings.calculate_configuration(30, 40, 800)
    c2 = outrunnertools.windings.calculate_configuration(30, 40, 2000)
    for c in (c1, c2):
        assert SlotPoleCombination(*c[:5]) in SLOTS_POLES_COMBINATIONS
    assert c1.score - c2.score == pytest.approx(0.24)


def test_rank_configurations():
    r = outrunnertools.windings.rank_configurations(30, 40, 800)
    # 27 and 36 slots do not fit into 40 mm
    assert len(r) == 11
    assert {c.slots for c in r}.isdisjoint({27, 36})
    scores = [c.score for c in r]
    assert scores == sorted(scores, reverse=True)
    assert [(c.slots, c.poles) for c in r[:3]] == [
        (21, 22), (24, 22), (15, 14)]


def test_ties_keep_catalog_order():
    combinations = (SlotPoleCombination(12, 14, 'distributed', 84, 7),
                    SlotPoleCombination(12, 14, 'concentrated', 84, 7))
    c = outrunnertools.windings.calculate_configuration(
        30, 40, 800, combinations=combinations)
    assert c.winding == 'distributed'


def test_fallback_configuration():
    c = outrunnertools.windings.calculate_configuration(5, 9, 1000)
    assert (c.slots, c.poles, c.winding) == (12, 14, 'distributed')
    assert c.cogging_factor == 7
    assert c.lcm == 84
    assert c.score is None
    assert c.pole_pitch == pytest.approx(np.pi*7/14)
