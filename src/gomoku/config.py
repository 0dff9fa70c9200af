# src/gomoku/config.py

from __future__ import annotations

BOARD_SIZE = 20
WIN_LENGTH = 5

# Cell evaluator weights
STEP_SCORE = 10     # per friendly stone walked over
FORCING_SCORE = 40  # one-sided run worth this much is a four (win now / block now)

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
SHOW_SCORES = False  # overlay the AI's last score grid on the board

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5

# The human (white) moves first, like the original window game
HUMAN_FIRST = True

LOG_LEVEL = "WARNING"
