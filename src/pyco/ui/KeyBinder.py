# src/pyco/ui/KeyBinder.py
"""KeyBinder.py
==================
Translates curses key codes into the logical `Event` values consumed by the
editor core.

Keybindings are configurable through the ``[keybindings]`` table of the
configuration. Each action accepts a single key string (``"ctrl+s"``), a
``|``-separated string (``"ctrl+s|f2"``), an integer key code, or a list of
any of these. Unbound printable bytes (0x20..0x7E) become `PrintableChar`
events; every other unbound code is dropped as `NoEvent`.

Arrow keys normally arrive already decoded by curses (``keypad(True)``).
For terminals that deliver raw escape sequences, `get_key_input` reads the
bytes that follow ESC and resolves them through `ESCAPE_SEQUENCE_MAP`.
"""

import curses
import logging
from typing import Any, Optional

from pyco.core import Events
from pyco.core.Editing import is_printable
from pyco.core.Events import Event
from pyco.utils.logging_config import KEY_LOGGER

ESC = 27
DEFAULT_INPUT_TIMEOUT_MS = 100


# ==================== KeyBinder Class ====================
class KeyBinder:
    """Maps raw key codes to editor events.

    Attributes:
        config: Editor configuration.
        stdscr: The curses window input is read from.
        keybindings (dict): Action name -> list of key codes.
        action_map (dict): Key code -> Event.
    """

    # Keys do NOT include the leading ESC; get_key_input() consumes it.
    ESCAPE_SEQUENCE_MAP: dict[str, str] = {
        "[A": "up", "[B": "down", "[C": "right", "[D": "left",
        "OA": "up", "OB": "down", "OC": "right", "OD": "left",
    }

    ACTION_EVENTS: dict[str, Event] = {
        "quit": Events.QUIT,
        "save_file": Events.SAVE,
        "handle_up": Events.MOVE_UP,
        "handle_down": Events.MOVE_DOWN,
        "handle_left": Events.MOVE_LEFT,
        "handle_right": Events.MOVE_RIGHT,
        "handle_enter": Events.ENTER,
        "handle_backspace": Events.BACKSPACE,
    }

    def __init__(self, config: dict[str, Any], stdscr: Optional["curses.window"] = None):
        self.config = config
        self.stdscr = stdscr
        self.input_timeout_ms = self._load_input_timeout()
        self.keybindings = self._load_keybindings()
        self.action_map = self._setup_action_map()
        logging.debug("KeyBinder initialized with %d bound keys", len(self.action_map))

    def _load_input_timeout(self) -> int:
        editor_cfg = self.config.get("editor", {})
        if not isinstance(editor_cfg, dict):
            return DEFAULT_INPUT_TIMEOUT_MS
        raw = editor_cfg.get("input_timeout_ms", DEFAULT_INPUT_TIMEOUT_MS)
        try:
            if isinstance(raw, bool):
                raise ValueError(raw)
            return max(0, int(raw))
        except (TypeError, ValueError):
            logging.warning(
                "Invalid editor.input_timeout_ms %r; using %d ms.", raw, DEFAULT_INPUT_TIMEOUT_MS
            )
            return DEFAULT_INPUT_TIMEOUT_MS

    def _load_keybindings(self) -> dict[str, list[int]]:
        """Resolves configured key specs to key codes for every known action."""
        default_keybindings: dict[str, list[int | str]] = {
            "quit": ["ctrl+q"],
            "save_file": ["ctrl+s"],
            "handle_up": ["up"],
            "handle_down": ["down"],
            "handle_left": ["left"],
            "handle_right": ["right"],
            "handle_enter": ["enter", 10, 13],
            "handle_backspace": ["backspace", 8, 127],
        }

        user_keybindings: dict[str, object] = self.config.get("keybindings", {})
        if not isinstance(user_keybindings, dict):
            logging.error("[keybindings] must be a table, got %r; using defaults.", user_keybindings)
            user_keybindings = {}
        parsed: dict[str, list[int]] = {}

        for action, default_spec in default_keybindings.items():
            spec: object = user_keybindings.get(action, default_spec)
            if not spec:
                logging.debug("Keybinding for action %r is disabled or empty.", action)
                continue

            if isinstance(spec, list):
                items = spec
            elif isinstance(spec, str) and "|" in spec:
                items = [s.strip() for s in spec.split("|")]
            else:
                items = [spec]

            codes: list[int] = []
            for item in items:
                try:
                    code = self._decode_keystring(item)  # type: ignore[arg-type]
                except ValueError as e:
                    logging.error(
                        "Error parsing keybinding item %r for action %r: %s. "
                        "This binding will be ignored.",
                        item, action, e,
                    )
                    continue
                if code not in codes:
                    codes.append(code)

            if codes:
                parsed[action] = codes
            else:
                logging.warning("No valid key codes for action %r; it will not be bound.", action)

        logging.debug("Loaded keybindings: %s", parsed)
        return parsed

    def _decode_keystring(self, key_input: str | int) -> int:
        """Decodes ``"ctrl+s"``, ``"f2"``, ``"up"``, ``"x"`` or an int into a key code.

        Raises:
            ValueError: If the key string is empty or not understood.
        """
        if isinstance(key_input, bool):
            raise ValueError(f"Invalid key type: {type(key_input).__name__}")
        if isinstance(key_input, int):
            return key_input
        if not isinstance(key_input, str):
            raise ValueError(f"Invalid key type: {type(key_input).__name__}")

        s = key_input.strip().lower()
        if not s:
            raise ValueError("Key string cannot be empty.")

        named_keys_map: dict[str, int] = {
            "up": curses.KEY_UP,
            "down": curses.KEY_DOWN,
            "left": curses.KEY_LEFT,
            "right": curses.KEY_RIGHT,
            "enter": curses.KEY_ENTER,
            "return": curses.KEY_ENTER,
            "backspace": curses.KEY_BACKSPACE,
            "esc": ESC,
            "escape": ESC,
            "tab": 9,
            "space": ord(" "),
        }
        if s in named_keys_map:
            return named_keys_map[s]

        if s.startswith("f") and s[1:].isdigit():
            number = int(s[1:])
            if 1 <= number <= 12:
                return curses.KEY_F0 + number
            raise ValueError(f"Unknown function key: {key_input!r}")

        if s.startswith("ctrl+"):
            base = s[len("ctrl+"):]
            if len(base) == 1 and "a" <= base <= "z":
                return ord(base) - ord("a") + 1
            raise ValueError(f"Unsupported ctrl combination: {key_input!r}")

        if len(s) == 1:
            return ord(key_input.strip())

        raise ValueError(f"Unknown key string: {key_input!r}")

    def _setup_action_map(self) -> dict[int, Event]:
        action_map: dict[int, Event] = {}
        for action, codes in self.keybindings.items():
            event = self.ACTION_EVENTS[action]
            for code in codes:
                if code in action_map and action_map[code] != event:
                    logging.warning(
                        "Key code %r bound to several actions; %r wins.", code, action
                    )
                action_map[code] = event
        return action_map

    def translate(self, key: int | str) -> Event:
        """Turns one key code (or logical key name) into an event."""
        if isinstance(key, str):
            try:
                key = self._decode_keystring(key)
            except ValueError:
                logging.debug("translate: unknown key name %r", key)
                return Events.NO_EVENT

        if key == curses.ERR or key == -1:
            return Events.NO_EVENT
        if key == curses.KEY_RESIZE:
            rows, cols = self.stdscr.getmaxyx() if self.stdscr else (0, 0)
            return Event.resize(rows, cols)
        if key in self.action_map:
            return self.action_map[key]
        if is_printable(key):
            return Event.printable(key)

        logging.debug("translate: ignoring unbound key code %r", key)
        return Events.NO_EVENT

    def get_key_input(self, window: Optional["curses.window"] = None) -> int | str:
        """Reads one key, resolving ESC-prefixed arrow sequences.

        Returns the curses key code, a logical key name for a known escape
        sequence, or `curses.ERR` on timeout.
        """
        target = window or self.stdscr
        try:
            ch = target.getch()
            if ch != ESC:
                return ch

            seq = ""
            target.timeout(0)
            try:
                while len(seq) < 8:
                    nx = target.getch()
                    if nx == curses.ERR:
                        break
                    seq += chr(nx) if 0 <= nx <= 255 else ""
            finally:
                target.timeout(self.input_timeout_ms)

            mapped = self.ESCAPE_SEQUENCE_MAP.get(seq)
            if mapped:
                return mapped
            if seq:
                logging.debug("get_key_input: unknown escape sequence: ESC + %r", seq)
            return ESC

        except curses.error:
            return curses.ERR

    def read_event(self) -> Event:
        key = self.get_key_input()
        event = self.translate(key)
        if key != curses.ERR:
            KEY_LOGGER.debug("key=%r -> %s", key, event.kind.value)
        return event
