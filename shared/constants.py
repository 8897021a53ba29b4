"""
Game constants for the dice duel.
All delays are in seconds.
"""

# Table layout
PLAYER_COUNT = 2
DICE_PER_PLAYER = 3

# Dice
DEFAULT_FACE_COUNT = 6
MIN_FACE_COUNT = 2
MAX_FACE_COUNT = 100

# Roll animation: each draw waits a little longer than the last
ANIMATION_ROLLS = 20
ANIMATION_BASE_DELAY = 0.001
ANIMATION_DELAY_FACTOR = 1.4

# Display
UNSET_FACE_TEXT = "?"
DIE_FACE_GLYPHS = {
    1: "⚀",
    2: "⚁",
    3: "⚂",
    4: "⚃",
    5: "⚄",
    6: "⚅",
}
DICE_POSITION_NAMES = ["first", "second", "third"]
