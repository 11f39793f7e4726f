"""Birth/survival rules for the binary automaton."""
from enum import IntEnum

import numpy as np


class BinaryRule(IntEnum):
    """Classic binary B/S notation rules."""
    TWO_THREE = 0          # B23/S23
    CONWAY_LIFE = 1        # B3/S23
    HIGHLIFE = 2           # B36/S23
    SEEDS = 3              # B2/S
    DAY_NIGHT = 4          # B3678/S34678
    MAZE = 5               # B3/S12345
    LIFE_WITHOUT_DEATH = 6 # B3/S012345678


# (birth_neighbors, survive_neighbors)
RULES = {
    BinaryRule.TWO_THREE: ([2, 3], [2, 3]),
    BinaryRule.CONWAY_LIFE: ([3], [2, 3]),
    BinaryRule.HIGHLIFE: ([3, 6], [2, 3]),
    BinaryRule.SEEDS: ([2], []),
    BinaryRule.DAY_NIGHT: ([3, 6, 7, 8], [3, 4, 6, 7, 8]),
    BinaryRule.MAZE: ([3], [1, 2, 3, 4, 5]),
    BinaryRule.LIFE_WITHOUT_DEATH: ([3], [0, 1, 2, 3, 4, 5, 6, 7, 8]),
}

RULE_NAMES = {
    BinaryRule.TWO_THREE: "Two-Three",
    BinaryRule.CONWAY_LIFE: "Conway's Life",
    BinaryRule.HIGHLIFE: "HighLife",
    BinaryRule.SEEDS: "Seeds",
    BinaryRule.DAY_NIGHT: "Day & Night",
    BinaryRule.MAZE: "Maze",
    BinaryRule.LIFE_WITHOUT_DEATH: "Life Without Death",
}


def get_bs_tables():
    """Get birth/survival lookup tables for all binary rules.

    Returns:
        Tuple of (birth_table, survive_table), each a bool array of shape
        (number of rules, 9) indexed by rule id and alive neighbour count.
    """
    birth_table = np.zeros((len(BinaryRule), 9), dtype=bool)
    survive_table = np.zeros((len(BinaryRule), 9), dtype=bool)

    for rule_id, (birth, survive) in RULES.items():
        birth_table[rule_id, birth] = True
        survive_table[rule_id, survive] = True

    return birth_table, survive_table


BIRTH_TABLE, SURVIVE_TABLE = get_bs_tables()


def notation(rule: BinaryRule) -> str:
    """Return the B/S notation of a rule, e.g. ``B3/S23``."""
    birth, survive = RULES[BinaryRule(rule)]
    return "B{}/S{}".format("".join(map(str, birth)), "".join(map(str, survive)))


def rule_name(rule: BinaryRule) -> str:
    """Get human-readable name of a rule."""
    rule = BinaryRule(rule)
    return f"{RULE_NAMES[rule]} ({notation(rule)})"


def next_state(alive: bool, count: int, rule: BinaryRule = BinaryRule.TWO_THREE) -> bool:
    """Apply a rule to a single cell.

    Args:
        alive: Current state of the cell
        count: Number of alive neighbours (0-8)
        rule: Rule to apply

    Returns:
        Whether the cell is alive on the next tick
    """
    if not 0 <= count <= 8:
        raise ValueError(f"Neighbour count must be between 0 and 8, got {count}")
    table = SURVIVE_TABLE if alive else BIRTH_TABLE
    return bool(table[int(rule), count])
