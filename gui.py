"""
GUI for ChainCalc
Tkinter keypad that feeds one label per key press into the calculator
"""
import tkinter as tk
import json
import config
from calculator import Calculator
from formatting import group_digits


def button_kind(label):
    """Colour category for a keypad label"""
    if label in config.OPERATORS or label == "=":
        return "operator"
    if label in config.FUNCTION_KEYS:
        return "function"
    return "digit"


class ChainCalcGUI:
    def __init__(self, root, calculator=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")
        self.root.resizable(False, False)

        self.calculator = calculator if calculator else Calculator()

        # ── Theme state (load before any widget is created) ───────────────
        settings = self._load_settings()
        self.dark_mode: bool = settings.get("dark_mode", config.DEFAULT_DARK_MODE)
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.refresh_display()

    # ── Settings persistence ─────────────────────────────────────────────
    def _load_settings(self):
        try:
            with open(config.SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(config.SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def apply_theme(self):
        """Refresh T, then destroy+rebuild all widgets."""
        self.T = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        self.refresh_display()

    def _toggle_dark_mode(self):
        """Persist dark_mode setting and apply theme immediately."""
        self.dark_mode = not self.dark_mode
        self._save_settings({"dark_mode": self.dark_mode})
        self.apply_theme()

    def _key_btn(self, parent, label, kind="digit", **kw):
        """Create a flat keypad button that presses `label`."""
        T = self.T
        bg, fg = T[f"{kind}_bg"], T[f"{kind}_fg"]
        return tk.Button(
            parent, text=label, command=lambda: self.on_button_click(label),
            font=config.BUTTON_FONT,
            bg=bg, fg=fg,
            activebackground=T["active_bg"], activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=0,
            **kw
        )

    def create_widgets(self):
        """Create display and keypad"""
        T = self.T

        # Top bar: theme toggle
        top_frame = tk.Frame(self.root, bg=T["bg"])
        top_frame.pack(fill=tk.X, padx=8, pady=(6, 0))
        tk.Button(
            top_frame, text="◐", font=config.LABEL_FONT,
            bg=T["bg"], fg=T["subtext"],
            activebackground=T["bg"], activeforeground=T["display_fg"],
            relief=tk.FLAT, bd=0, cursor="hand2",
            command=self._toggle_dark_mode
        ).pack(side=tk.LEFT)

        # Display: last expression above the buffer
        display_frame = tk.Frame(self.root, bg=T["display_bg"])
        display_frame.pack(fill=tk.X, padx=8, pady=(4, 8))

        self.expression_label = tk.Label(
            display_frame, text="",
            font=config.EXPRESSION_FONT,
            bg=T["display_bg"], fg=T["subtext"],
            anchor=tk.E, padx=6
        )
        self.expression_label.pack(side=tk.TOP, fill=tk.X)

        self.display = tk.Label(
            display_frame, text="0",
            font=config.DISPLAY_FONT,
            bg=T["display_bg"], fg=T["display_fg"],
            anchor=tk.E, padx=6
        )
        self.display.pack(side=tk.TOP, fill=tk.X)

        # Keypad
        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(fill=tk.BOTH, expand=True, padx=8, pady=(0, 8))
        for col in range(4):
            keypad.grid_columnconfigure(col, weight=1, uniform="key")

        for r, row in enumerate(config.BUTTON_ROWS):
            keypad.grid_rowconfigure(r, weight=1, uniform="key")
            for c, label in enumerate(row):
                if not label:
                    continue
                if label == "0span":
                    btn = self._key_btn(keypad, "0", anchor=tk.W, padx=28)
                    btn.grid(row=r, column=c, columnspan=2, sticky="nsew", padx=4, pady=4)
                    continue
                btn = self._key_btn(keypad, label, kind=button_kind(label))
                btn.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)

    def refresh_display(self):
        """Show the calculator's display and last expression"""
        text = self.calculator.get_display()
        if config.DISPLAY_GROUPING:
            text = group_digits(text)
        colour = self.T["danger"] if self.calculator.is_error() else self.T["display_fg"]
        self.display.config(text=text, fg=colour)
        self.expression_label.config(text=self.calculator.get_last_expression())

    def on_button_click(self, label):
        """Handle keypad button clicks"""
        self.calculator.press(label)
        self.refresh_display()

    def on_key_press(self, event):
        """Handle keyboard input"""
        key = event.char
        if key and key in '0123456789.%+-':
            self.on_button_click(key)
        elif key == '*':
            self.on_button_click('×')
        elif key == '/':
            self.on_button_click('÷')
        elif key in ['\r', '\n', '=']:
            self.on_button_click('=')
        elif key == 'n':
            self.on_button_click('+/-')
        elif event.keysym == 'Escape':
            self.on_button_click('AC')
