"""
Battle constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# GLYPHS
# =============================================================================
EMPTY_GLYPH = "."
WALL_GLYPH = "ᚙ"
WALL_UNIT_GLYPH = "█"         # default glyph for wall-type enemies
VITTLE_GLYPH = "ౚ"
UNKNOWN_OBJECT_GLYPH = "?"

# =============================================================================
# LEVEL OBJECTS
# =============================================================================
VITTLE = "vittle"
VITTLE_HEAL = 10              # fixed HP restored by a vittle

# =============================================================================
# STATUS EFFECTS
# =============================================================================
BURN_DURATION = 3             # ticks
SLUJ_DURATION = 4             # ticks, reset on every reapplication

# Sluj level -> (trigger every Nth tick, damage). Levels above the table use
# SLUJ_MAX_DAMAGE every tick.
SLUJ_TABLE = {
    1: (4, 1),
    2: (3, 1),
    3: (2, 1),
    4: (1, 1),
    5: (1, 2),
}
SLUJ_MAX_DAMAGE = 3

# =============================================================================
# GEOMETRY
# =============================================================================
# Swarm reaches all eight neighbours, in this order.
ADJACENT_OFFSETS = [
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
]

# Enemy melee checks up, down, left, right.
ORTHOGONAL_OFFSETS = [(0, -1), (0, 1), (-1, 0), (1, 0)]

# =============================================================================
# PACING (seconds)
# =============================================================================
SHORT_PAUSE = 0.3             # after an attack resolves
COLLAPSE_DELAY = 1.5          # between wall collapse and level completion
