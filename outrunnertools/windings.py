# -*- coding: utf-8 -*-
"""
    outrunnertools.windings
    ~~~~~~~~~~~~~~~~~~~~~~~

    Slot/pole combinations of outrunner windings

 Conventions

 Number of slots: Q
 Number of poles (magnets): 2p
 Number of phases: m = 3
 Cogging periods per revolution: lcm(Q, 2p)
"""
import logging
from collections import namedtuple
import numpy as np

logger = logging.getLogger(__name__)

SlotPoleCombination = namedtuple(
    'SlotPoleCombination',
    ['slots', 'poles', 'winding', 'lcm', 'cogging_factor'])

ScoredConfiguration = namedtuple(
    'ScoredConfiguration',
    SlotPoleCombination._fields + ('pole_pitch', 'score'))

# known good combinations, lcm and cogging factor are tabulated values
SLOTS_POLES_COMBINATIONS = (
    SlotPoleCombination(12, 14, 'distributed', 84, 7),
    SlotPoleCombination(9, 10, 'concentrated', 90, 10),
    SlotPoleCombination(12, 10, 'distributed', 60, 5),
    SlotPoleCombination(24, 22, 'distributed', 264, 11),
    SlotPoleCombination(36, 42, 'distributed', 252, 6),
    SlotPoleCombination(9, 8, 'concentrated', 72, 8),
    SlotPoleCombination(9, 12, 'concentrated', 36, 3),
    SlotPoleCombination(15, 14, 'distributed', 210, 14),
    SlotPoleCombination(18, 16, 'distributed', 144, 8),
    SlotPoleCombination(18, 20, 'distributed', 180, 10),
    SlotPoleCombination(27, 24, 'distributed', 216, 8),
    SlotPoleCombination(21, 22, 'distributed', 462, 22),
    SlotPoleCombination(6, 8, 'concentrated', 24, 2))

# used if no combination fits into the diameter range
FALLBACK_COMBINATION = SlotPoleCombination(12, 14, 'distributed', 84, 7)

MIN_SLOT_PITCH = 5.0  # mm
# weights of cogging, kv and size score
SCORE_WEIGHTS = (0.4, 0.4, 0.2)


def min_diameter_needed(slots, min_slot_pitch=MIN_SLOT_PITCH):
    """returns the smallest diameter in mm that fits *slots* slots"""
    return slots*min_slot_pitch/np.pi


def score(combination, avg_diameter, target_kv,
          min_slot_pitch=MIN_SLOT_PITCH):
    """returns the weighted score of a slot/pole combination

    Args:
      combination: SlotPoleCombination
      avg_diameter: mean of target diameter range (mm)
      target_kv: target KV (RPM/V)
    """
    needed = min_diameter_needed(combination.slots, min_slot_pitch)
    # higher lcm: lower cogging torque
    cogging = combination.lcm/100
    # more poles allow lower KV
    kv = 1 - abs(target_kv - 1000/combination.poles)/2000
    size = 1 - abs(avg_diameter - needed)/avg_diameter
    wc, wk, ws = SCORE_WEIGHTS
    return wc*cogging + wk*kv + ws*size


def rank_configurations(min_diameter, max_diameter, target_kv,
                        combinations=SLOTS_POLES_COMBINATIONS,
                        min_slot_pitch=MIN_SLOT_PITCH):
    """returns list of ScoredConfiguration that fit into max_diameter
    ordered by descending score (ties keep catalog order)"""
    avg_diameter = (min_diameter + max_diameter)/2
    scored = []
    for c in combinations:
        needed = min_diameter_needed(c.slots, min_slot_pitch)
        if needed > max_diameter:
            logger.debug("%dS%dP needs %.2f mm > %.2f mm",
                         c.slots, c.poles, needed, max_diameter)
            continue
        s = score(c, avg_diameter, target_kv, min_slot_pitch)
        logger.debug("%dS%dP score %f", c.slots, c.poles, s)
        scored.append(ScoredConfiguration(
            *c, pole_pitch=np.pi*avg_diameter/c.poles, score=s))
    return sorted(scored, key=lambda c: c.score, reverse=True)


def calculate_configuration(min_diameter, max_diameter, target_kv,
                            combinations=SLOTS_POLES_COMBINATIONS,
                            min_slot_pitch=MIN_SLOT_PITCH):
    """returns the best suited ScoredConfiguration for the diameter range

    Args:
      min_diameter: minimum target diameter (mm)
      max_diameter: maximum target diameter (mm)
      target_kv: target motor KV (RPM/V)
    """
    ranking = rank_configurations(min_diameter, max_diameter, target_kv,
                                  combinations, min_slot_pitch)
    if ranking:
        best = ranking[0]
        logger.info("selected %dS%dP (%s) score %.4f",
                    best.slots, best.poles, best.winding, best.score)
        return best

    avg_diameter = (min_diameter + max_diameter)/2
    logger.warning("no slot/pole combination fits into %.1f mm, use %dS%dP",
                   max_diameter, FALLBACK_COMBINATION.slots,
                   FALLBACK_COMBINATION.poles)
    return ScoredConfiguration(
        *FALLBACK_COMBINATION,
        pole_pitch=np.pi*avg_diameter/FALLBACK_COMBINATION.poles,
        score=None)


def check_catalog(combinations=SLOTS_POLES_COMBINATIONS):
    """returns list of combinations whose tabulated lcm differs
    from lcm(slots, poles)"""
    mismatch = [c for c in combinations
                if int(np.lcm(c.slots, c.poles)) != c.lcm]
    for c in mismatch:
        logger.warning("%dS%dP: tabulated lcm %d, computed %d",
                       c.slots, c.poles, c.lcm,
                       np.lcm(c.slots, c.poles))
    return mismatch
