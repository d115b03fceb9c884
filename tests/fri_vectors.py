"""
FRI folding reference vectors over GF(293).

Worked example: a degree-5 polynomial folded three times down to a constant.
DO NOT MODIFY - other implementations pin against these values.
"""

# ============================================================================
# Polynomial folding
# ============================================================================

# p0 = 3 + 1x + 2x^2 + 7x^3 + 3x^4 + 5x^5
P0_COEFFS = [3, 1, 2, 7, 3, 5]

# Folding challenges, one per layer
BETAS = [4, 3, 2]

# Expected polynomial after each fold
FOLDED_COEFFS = [
    [7, 30, 23],   # fold(p0, 4)
    [97, 23],      # fold(p1, 3)
    [143],         # fold(p2, 2)
]

# ============================================================================
# Domain folding
# ============================================================================

INPUT_DOMAIN = [5, 7, 13, 20, 1, 1, 1, 1]

# Expected domain after each squaring step
FOLDED_DOMAINS = [
    [25, 49, 169, 107],
    [39, 57],
    [56],
]

# ============================================================================
# Layer evaluation
# ============================================================================

# p0 evaluated at [5, 9]
EVAL_DOMAIN = [5, 9]
P0_EVALUATIONS = [267, 249]

# Evaluations of each folded polynomial over the matching folded domain
LAYER_EVALUATIONS = [
    [189, 151, 93, 207],
    [115, 236],
    [143],
]
