"""
ChainCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "ChainCalc"
VERSION = "1.0.0"

# Calculator Settings
ERROR_SENTINEL = "Error"
MAX_FRACTION_DIGITS = 6
OPERATORS = ("÷", "×", "-", "+")

# When True, an operator pressed right after "=" continues from the result
# instead of starting a fresh calculation.
CONTINUE_FROM_RESULT = False

# Thousands separators on the window display only (never fed back to the core)
DISPLAY_GROUPING = False
GROUP_SEPARATOR = ","

# Keypad layout. "0span" is a zero key two columns wide, "" an empty cell.
BUTTON_ROWS = [
    ["AC", "+/-", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["0span", ".", "=", ""],
]
FUNCTION_KEYS = ("AC", "+/-", "%")

# Display Settings
WINDOW_WIDTH = 340
WINDOW_HEIGHT = 520
DISPLAY_FONT = ("Consolas", 40, "bold")
EXPRESSION_FONT = ("Consolas", 16)
BUTTON_FONT = ("Segoe UI", 20)
LABEL_FONT = ("Segoe UI", 11)

# LIGHT palette
LIGHT = {
    "bg":           "#F2F2F2",
    "display_bg":   "#F2F2F2",
    "display_fg":   "#1A1A1A",
    "subtext":      "#8A8A8A",
    "digit_bg":     "#FFFFFF",
    "digit_fg":     "#1A1A1A",
    "function_bg":  "#D4D4D2",
    "function_fg":  "#1A1A1A",
    "operator_bg":  "#FF9F0A",
    "operator_fg":  "#FFFFFF",
    "active_bg":    "#C8C8C8",
    "danger":       "#B03A2E",
}

# DARK palette, black background with orange operators
DARK = {
    "bg":           "#000000",
    "display_bg":   "#000000",
    "display_fg":   "#FFFFFF",
    "subtext":      "#8E8E93",
    "digit_bg":     "#333333",
    "digit_fg":     "#FFFFFF",
    "function_bg":  "#A5A5A5",
    "function_fg":  "#000000",
    "operator_bg":  "#FF9F0A",
    "operator_fg":  "#FFFFFF",
    "active_bg":    "#4D4D4D",
    "danger":       "#E55A4E",
}


def get_theme(dark: bool) -> dict:
    """Return the active colour palette."""
    return DARK if dark else LIGHT


# Settings persistence (theme preference only)
SETTINGS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.json")
DEFAULT_DARK_MODE = True

# Web Portal settings
WEB_ENABLED = True
WEB_HOST = '127.0.0.1'
WEB_PORT = 8888
