"""Shared constants for terminal output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# SGR codes for the default terminal colors
SGR_DEFAULT_FG = "39"
SGR_DEFAULT_BG = "49"

# SGR codes for the display toggles
SGR_BOLD = "1"
SGR_UNDERLINE = "4"
SGR_REVERSE = "7"

# Dimensions used when a size cannot be detected
DEFAULT_COLS = 80
DEFAULT_ROWS = 24

# Blank character used by default cells
BLANK_CHAR = " "
