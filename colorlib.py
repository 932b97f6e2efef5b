#!/usr/bin/env python3

# Copyright (c) 2026 colorlib contributors
# SPDX-License-Identifier: ISC

"""
colorlib -- ANSI escape strings with deferred cleanup and terminal restore

Builds ANSI escape sequences (colors, text styles, cursor and screen
control) as ready-to-print strings, and puts the terminal back into a sane
state when the process exits, including when it is killed by a signal.

Static codes live in tables that are filled in by init_color():

  print(Fore.RED + "error" + Style.RESET)

Parameterized codes are produced on demand and owned by a two-generation
tracker rather than by the caller:

  print(fore_color24(255, 0, 0) + "red" + Style.RESET_ALL())

Style.RESET_ALL() (or gc_reset()) is a soft reset. It returns the reset code
and retires the strings produced so far, but only frees them on the *next*
soft reset or at exit. Strings built in the same statement as the reset stay
usable for that statement. A dynamic string kept across two soft resets is
released, and using it raises ReleasedStringError.

Importing the module runs

  init_color(None, True, True, True, COLOR_FLAG_INIT_DEFAULT)

unless COLORLIB_NO_AUTO_INIT=1 is set in the environment. That installs the
signal handlers and the exit hook, and only fills in the Default table. Call
init_color() again with COLOR_FLAG_INIT_ALL (or a narrower mask) to get the
other tables.

Not thread-safe. The tracker assumes one owner of terminal state per process.

Zero external dependencies.
"""

import atexit
import operator
import os
import signal
import sys
import threading

# ---------------------------------------------------------------------------
# Init flags
# ---------------------------------------------------------------------------

COLOR_FLAG_NONE = 0

COLOR_FLAG_INIT_FORE = 1 << 0
COLOR_FLAG_INIT_BACK = 1 << 1
COLOR_FLAG_INIT_STYLE = 1 << 2
COLOR_FLAG_INIT_DISABLE = 1 << 3
COLOR_FLAG_INIT_DEFAULT = 1 << 4
COLOR_FLAG_INIT_FONT = 1 << 5
COLOR_FLAG_INIT_MISC = 1 << 6
COLOR_FLAG_INIT_CURSOR = 1 << 7
COLOR_FLAG_INIT_SCREEN = 1 << 8

COLOR_FLAG_INIT_ALL = (
    COLOR_FLAG_INIT_FORE
    | COLOR_FLAG_INIT_BACK
    | COLOR_FLAG_INIT_STYLE
    | COLOR_FLAG_INIT_DISABLE
    | COLOR_FLAG_INIT_DEFAULT
    | COLOR_FLAG_INIT_FONT
    | COLOR_FLAG_INIT_MISC
    | COLOR_FLAG_INIT_CURSOR
    | COLOR_FLAG_INIT_SCREEN
)

COLOR_FLAG_DEFAULT = COLOR_FLAG_INIT_ALL


DEFAULT_ESC_CHAR = "\x1b"

# Returned by every soft reset. A constant, never tracked.
RESET_CODE = "\x1b[0m"

# Written by the signal handler. Pre-encoded so the handler formats nothing,
# and independent of the configured escape prefix.
_SIGNAL_RESET = b"\x1b[0m\n"

# Legal range for cursor rows, columns and move counts
_CURSOR_MIN = 1
_CURSOR_MAX = 999


# ---------------------------------------------------------------------------
# Tracked strings
# ---------------------------------------------------------------------------


class ReleasedStringError(ValueError):
    """A dynamic escape string was used after its tracker released it."""


class EscapeString:
    """Dynamic escape sequence whose lifetime is owned by a Tracker.

    Behaves like the str it wraps for str(), format() and f-strings, +, len(),
    'in' and == until the tracker releases it. Every one of those raises
    ReleasedStringError afterwards.
    """

    __slots__ = ("_text", "_tracked")

    def __init__(self, text):
        self._text = text
        self._tracked = False

    @property
    def released(self):
        return self._text is None

    @property
    def tracked(self):
        """True while a Tracker holds this string in one of its generations."""
        return self._tracked

    def _release(self):
        self._text = None
        self._tracked = False

    def _get(self):
        if self._text is None:
            raise ReleasedStringError("escape string used after it was released")
        return self._text

    def __str__(self):
        return self._get()

    def __format__(self, format_spec):
        return format(self._get(), format_spec)

    def __add__(self, other):
        if isinstance(other, EscapeString):
            other = other._get()
        if not isinstance(other, str):
            return NotImplemented
        return self._get() + other

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return other + self._get()

    def __len__(self):
        return len(self._get())

    def __contains__(self, item):
        if isinstance(item, EscapeString):
            item = item._get()
        return item in self._get()

    def __eq__(self, other):
        if isinstance(other, EscapeString):
            return self._get() == other._get()
        if isinstance(other, str):
            return self._get() == other
        return NotImplemented

    # Content can go away on release
    __hash__ = None

    def __repr__(self):
        if self._text is None:
            return "<EscapeString (released)>"
        return f"EscapeString({self._text!r})"


# ---------------------------------------------------------------------------
# Tracker -- two-generation deferred free
# ---------------------------------------------------------------------------


def _free(generation):
    for buf in generation:
        buf._release()
    del generation[:]


class Tracker:
    """Registry of dynamic escape strings, kept in two generations.

    New strings go into the active generation. reset() frees the trash
    generation, turns the active generation into the new trash, and leaves
    the active one empty. clean_all() frees both.

    Order within a generation means nothing.
    """

    __slots__ = ("_active", "_trash")

    def __init__(self):
        self._active = []
        self._trash = []

    @property
    def active(self):
        return tuple(self._active)

    @property
    def trash(self):
        return tuple(self._trash)

    def __len__(self):
        return len(self._active) + len(self._trash)

    def add(self, buf):
        """Take ownership of 'buf' and put it in the active generation.

        A plain str is wrapped in a new EscapeString first. Returns the
        tracked EscapeString, or None if 'buf' is None or the bookkeeping
        entry could not be stored. In the second case the string is released
        right away, so nothing leaks.
        """
        if buf is None:
            return None
        if isinstance(buf, str):
            buf = EscapeString(buf)
        elif not isinstance(buf, EscapeString):
            raise TypeError(
                f"can only track str or EscapeString, not {type(buf).__name__}"
            )
        if buf.released:
            raise ValueError("cannot track a released escape string")
        if buf.tracked:
            raise ValueError("escape string is already tracked")

        try:
            self._active.append(buf)
        except MemoryError:
            buf._release()
            return None

        buf._tracked = True
        return buf

    def reset(self):
        """Soft reset: free trash, retire active to trash, return RESET_CODE."""
        _free(self._trash)
        self._trash = self._active
        self._active = []
        return RESET_CODE

    def clean_all(self):
        """Free both generations. Safe to call repeatedly."""
        _free(self._active)
        _free(self._trash)

    def __repr__(self):
        return f"<Tracker, {len(self._active)} active, {len(self._trash)} trash>"


# ---------------------------------------------------------------------------
# Static code tables
# ---------------------------------------------------------------------------


class _Table:
    """Named collection of fixed escape codes.

    Entries are reachable as attributes (Fore.RED), by index (Fore[1]) and
    through .array. Every entry is "" until init_color() populates the table
    for the flag in _FLAG.
    """

    _FLAG = COLOR_FLAG_NONE

    # (name, code without the escape prefix) pairs, in index order
    _CODES = ()

    def __init__(self):
        self._fill([""] * len(self._CODES))

    def _fill(self, values):
        self.array = values
        for (name, _), value in zip(self._CODES, values):
            setattr(self, name, value)

    def _populate(self, esc_char):
        self._fill([esc_char + code for _, code in self._CODES])

    @classmethod
    def names(cls):
        return [name for name, _ in cls._CODES]

    def __getitem__(self, i):
        return self.array[i]

    def __len__(self):
        return len(self.array)

    def __iter__(self):
        return iter(self.array)

    def __repr__(self):
        populated = any(self.array)
        name = type(self).__name__.lstrip("_")
        note = "" if populated else ", not populated"
        return f"<{name} table, {len(self.array)} entries{note}>"


class _Fore(_Table):
    _FLAG = COLOR_FLAG_INIT_FORE
    _CODES = (
        ("BLACK", "[30m"),
        ("RED", "[31m"),
        ("GREEN", "[32m"),
        ("YELLOW", "[33m"),
        ("BLUE", "[34m"),
        ("MAGENTA", "[35m"),
        ("CYAN", "[36m"),
        ("WHITE", "[37m"),
        ("BRIGHT_BLACK", "[90m"),
        ("BRIGHT_RED", "[91m"),
        ("BRIGHT_GREEN", "[92m"),
        ("BRIGHT_YELLOW", "[93m"),
        ("BRIGHT_BLUE", "[94m"),
        ("BRIGHT_MAGENTA", "[95m"),
        ("BRIGHT_CYAN", "[96m"),
        ("BRIGHT_WHITE", "[97m"),
    )


class _Back(_Table):
    _FLAG = COLOR_FLAG_INIT_BACK
    _CODES = (
        ("BLACK", "[40m"),
        ("RED", "[41m"),
        ("GREEN", "[42m"),
        ("YELLOW", "[43m"),
        ("BLUE", "[44m"),
        ("MAGENTA", "[45m"),
        ("CYAN", "[46m"),
        ("WHITE", "[47m"),
        ("BRIGHT_BLACK", "[100m"),
        ("BRIGHT_RED", "[101m"),
        ("BRIGHT_GREEN", "[102m"),
        ("BRIGHT_YELLOW", "[103m"),
        ("BRIGHT_BLUE", "[104m"),
        ("BRIGHT_MAGENTA", "[105m"),
        ("BRIGHT_CYAN", "[106m"),
        ("BRIGHT_WHITE", "[107m"),
    )


class _Style(_Table):
    _FLAG = COLOR_FLAG_INIT_STYLE
    _CODES = (
        ("RESET", "[0m"),
        ("BOLD", "[1m"),
        ("BRIGHT", "[1m"),
        ("DIM", "[2m"),
        ("LOW", "[2m"),
        ("ITALIC", "[3m"),
        ("UNDERLINE", "[4m"),
        ("BLINK", "[5m"),
        ("BLINK_SPEED", "[6m"),
        ("REVERSE", "[7m"),
        ("HIDDEN", "[8m"),
        ("INVISIBLE", "[8m"),
        ("STRIKETHROUGH", "[9m"),
        ("UNDERLINE_DOUBLE", "[21m"),
    )

    def __init__(self, tracker):
        super().__init__()
        self._tracker = tracker

    def RESET_ALL(self):
        """Soft reset. Same as gc_reset() on the owning tracker."""
        return self._tracker.reset()


class _Disable(_Table):
    _FLAG = COLOR_FLAG_INIT_DISABLE
    _CODES = (
        ("BOLD", "[21m"),
        ("INTENSITY", "[22m"),
        ("ITALIC", "[23m"),
        ("FRAKTUR", "[23m"),
        ("UNDERLINE", "[24m"),
        ("BLINK", "[25m"),
        ("REVERSE", "[27m"),
        ("HIDDEN", "[28m"),
        ("INVISIBLE", "[28m"),
        ("STRIKETHROUGH", "[29m"),
        ("PROPORTIONAL_SPACING", "[50m"),
        ("FRAMED_ENCIRCLED", "[54m"),
        ("OVERLINED", "[55m"),
        ("SUB_SUP_SCRIPT", "[75m"),
    )


class _Default(_Table):
    _FLAG = COLOR_FLAG_INIT_DEFAULT
    _CODES = (
        ("FONT", "[10m"),
        ("FORE", "[39m"),
        ("BACK", "[49m"),
        ("UNDERLINE", "[59m"),
    )


class _Font(_Table):
    _FLAG = COLOR_FLAG_INIT_FONT
    _CODES = tuple(
        (f"ALTERNATIVE_{n}", f"[{n}m") for n in range(11, 20)
    ) + (("FRAKTUR", "[20m"),)


class _Misc(_Table):
    _FLAG = COLOR_FLAG_INIT_MISC
    _CODES = (
        ("PROPORTIONAL_SPACE", "[26m"),
        ("FRAMED", "[51m"),
        ("ENCIRCLED", "[52m"),
        ("OVERLINED", "[53m"),
        ("IDEOGRAMME_UNDERLINE", "[60m"),
        ("IDEOGRAMME_RIGHT_SIDE_LINE", "[60m"),
        ("IDEOGRAMME_DOUBLE_UNDERLINE", "[61m"),
        ("IDEOGRAMME_DOUBLE_LINE_ON_THE_RIGHT_SIDE", "[61m"),
        ("IDEOGRAMME_OVERLINE", "[62m"),
        ("IDEOGRAMME_LEFT_SIDE_LINE", "[62m"),
        ("IDEOGRAMME_DOUBLE_OVERLINE", "[63m"),
        ("IDEOGRAMME_DOUBLE_LINE_ON_THE_LEFT_SIDE", "[63m"),
        ("IDEOGRAMME_STRESS_MARKING", "[64m"),
        ("NO_IDEOGRAM_ATTRIBUTES", "[65m"),
        ("IDEOGRAM_RESET_ATTRIBUTES", "[65m"),
        # mintty extensions
        ("SUPERSCRIPT", "[73m"),
        ("SUBSCRIPT", "[74m"),
    )


class _Cursor(_Table):
    _FLAG = COLOR_FLAG_INIT_CURSOR
    _CODES = (
        ("HOME", "[H"),
        ("DSR", "[6n"),  # device status report
        ("SCP", "[s"),  # save position
        ("RCP", "[u"),  # restore position
        ("HIDE", "[?25l"),
        ("SHOW", "[?25h"),
    )


class _Screen(_Table):
    _FLAG = COLOR_FLAG_INIT_SCREEN
    _CODES = (
        ("CLEAR", "[2J"),
        ("CLEAR_BUFF", "[3J"),  # scrollback
        ("LINE_ERASE_CUR", "[K"),
        ("LINE_ERASE_ALL", "[2K"),
    )


# ---------------------------------------------------------------------------
# Signal restore path
# ---------------------------------------------------------------------------

SIGNALS_TO_HANDLE = tuple(
    getattr(signal, name)
    for name in (
        "SIGINT",
        "SIGQUIT",
        "SIGTERM",
        "SIGABRT",
        "SIGSEGV",
        "SIGFPE",
        "SIGILL",
    )
    # SIGQUIT does not exist on Windows
    if hasattr(signal, name)
)

# Raised by faulting machine code. A Python-level handler never runs for a
# real fault: the interpreter returns to the faulting instruction, which
# faults again. These keep their default disposition.
_SYNCHRONOUS_SIGNALS = frozenset(
    getattr(signal, name)
    for name in ("SIGSEGV", "SIGFPE", "SIGILL")
    if hasattr(signal, name)
)


def handle_signal(signum, frame):
    """Reset the terminal and exit with status 128 + signum.

    Writes a fixed byte string straight to file descriptor 2 and leaves with
    os._exit(). No tracker, formatter, buffered stream or atexit hook is
    involved, so this is safe to run in the middle of any other operation.
    Tracked strings are not freed on this path, and the cursor is not shown.
    """
    try:
        os.write(2, _SIGNAL_RESET)
    except OSError:
        pass
    os._exit(128 + signum)


# ---------------------------------------------------------------------------
# Range checks
# ---------------------------------------------------------------------------


def _in_range(value, low, high):
    """Return 'value' as an int if low <= value <= high, and None otherwise.

    Non-integers raise TypeError (via operator.index()).
    """
    value = operator.index(value)
    if low <= value <= high:
        return value
    return None


def _cursor_arg(n):
    return _in_range(n, _CURSOR_MIN, _CURSOR_MAX)


def _byte(n):
    return _in_range(n, 0, 255)


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class Config:
    """Process-wide settings, written by init_color() and read afterwards."""

    __slots__ = ("esc_char", "cursor_auto_show", "auto_clean", "intercept_sig", "flags")

    def __init__(
        self,
        esc_char=DEFAULT_ESC_CHAR,
        cursor_auto_show=True,
        auto_clean=True,
        intercept_sig=True,
        flags=COLOR_FLAG_INIT_DEFAULT,
    ):
        self.esc_char = esc_char
        self.cursor_auto_show = cursor_auto_show
        self.auto_clean = auto_clean
        self.intercept_sig = intercept_sig
        self.flags = flags

    def __repr__(self):
        return (
            f"Config(esc_char={self.esc_char!r}, "
            f"cursor_auto_show={self.cursor_auto_show}, "
            f"auto_clean={self.auto_clean}, "
            f"intercept_sig={self.intercept_sig}, flags={self.flags:#x})"
        )


class Controller:
    """Owns the tracker, the configuration and the static tables.

    The module-level API talks to a single process-wide instance (see
    controller()). Separate instances are only useful for testing.

    warnings:
      List of warning strings generated so far. Kept regardless of
      warn_to_stderr.

    warn_to_stderr:
      If True (the default), warnings are also printed to stderr as they
      are generated.
    """

    def __init__(self, warn_to_stderr=True):
        self.tracker = Tracker()
        self.config = Config()
        self.warnings = []
        self.warn_to_stderr = warn_to_stderr

        self.fore = _Fore()
        self.back = _Back()
        self.style = _Style(self.tracker)
        self.disable = _Disable()
        self.default = _Default()
        self.font = _Font()
        self.misc = _Misc()
        self.cursor = _Cursor()
        self.screen = _Screen()

        # Signal number -> handler that was active before ours
        self._old_handlers = {}
        self._exit_registered = False

    @property
    def tables(self):
        return (
            self.fore,
            self.back,
            self.style,
            self.disable,
            self.default,
            self.font,
            self.misc,
            self.cursor,
            self.screen,
        )

    @property
    def installed_signals(self):
        """Signals currently routed to handle_signal()."""
        return tuple(self._old_handlers)

    def init(
        self,
        esc_char=None,
        cursor_auto_show=True,
        auto_clean=True,
        intercept_sig=True,
        flags=COLOR_FLAG_DEFAULT,
    ):
        """Configure the controller. See init_color()."""
        if esc_char is None:
            esc_char = DEFAULT_ESC_CHAR
        if not isinstance(esc_char, str):
            raise TypeError(
                f"escape prefix must be a string, not {type(esc_char).__name__}"
            )

        self.config = Config(
            esc_char,
            bool(cursor_auto_show),
            bool(auto_clean),
            bool(intercept_sig),
            operator.index(flags),
        )

        for table in self.tables:
            if self.config.flags & table._FLAG:
                table._populate(esc_char)

        if intercept_sig:
            self._install_signals()
        else:
            self.restore_signals()

        # One hook per controller however often init() runs. It reads the
        # configuration that is current at exit.
        if auto_clean and not self._exit_registered:
            atexit.register(self._at_exit)
            self._exit_registered = True

    def _install_signals(self):
        if threading.current_thread() is not threading.main_thread():
            self._warn(
                "signal handlers can only be installed from the main thread, "
                "not intercepting signals"
            )
            return

        for sig in SIGNALS_TO_HANDLE:
            if sig in _SYNCHRONOUS_SIGNALS:
                continue
            old = signal.signal(sig, handle_signal)
            # Keep the handler from before the first install
            self._old_handlers.setdefault(sig, old)

    def restore_signals(self):
        """Put back the signal handlers that were active before init()."""
        for sig, old in self._old_handlers.items():
            # None means the handler was not installed from Python
            signal.signal(sig, signal.SIG_DFL if old is None else old)
        self._old_handlers.clear()

    def _at_exit(self):
        if self.config.auto_clean:
            self.auto_clean()

    def auto_clean(self):
        """Release every tracked string, then reset the terminal.

        Writes the reset code, and the show-cursor code if cursor auto-show
        is enabled, to stdout.
        """
        self.tracker.clean_all()

        esc = self.config.esc_char
        self._write_raw(esc + "[0m")
        if self.config.cursor_auto_show:
            self._write_raw(esc + "[?25h")
        self._flush()

    def _warn(self, msg):
        msg = "warning: " + msg
        self.warnings.append(msg)
        if self.warn_to_stderr:
            sys.stderr.write("colorlib " + msg + "\n")

    # --- Output ---

    def _write_raw(self, s):
        # stdout may already be closed or broken this late in the process
        try:
            sys.stdout.write(s)
        except (OSError, ValueError):
            pass

    def _flush(self):
        try:
            sys.stdout.flush()
        except (OSError, ValueError):
            pass

    # --- Dynamic escape strings ---

    def _make(self, template, *args):
        try:
            buf = EscapeString(template.format(self.config.esc_char, *args))
        except MemoryError:
            return None
        return self.tracker.add(buf)

    def custom_code(self, code):
        code = _byte(code)
        if code is None:
            return None
        return self._make("{}[{}m", code)

    def cursor_cup(self, row, column):
        row = _cursor_arg(row)
        column = _cursor_arg(column)
        if row is None or column is None:
            return None
        return self._make("{}[{};{}H", row, column)

    def _cursor_move(self, n, final):
        n = _cursor_arg(n)
        if n is None:
            return None
        return self._make("{}[{}" + final, n)

    def cursor_cuu(self, n):
        return self._cursor_move(n, "A")

    def cursor_cud(self, n):
        return self._cursor_move(n, "B")

    def cursor_cuf(self, n):
        return self._cursor_move(n, "C")

    def cursor_cub(self, n):
        return self._cursor_move(n, "D")

    def _color8(self, sgr, color):
        color = _byte(color)
        if color is None:
            return None
        return self._make("{}[{};5;{}m", sgr, color)

    def _color24(self, sgr, r, g, b):
        rgb = (_byte(r), _byte(g), _byte(b))
        if None in rgb:
            return None
        return self._make("{}[{};2;{};{};{}m", sgr, *rgb)

    def fore_color8(self, color):
        return self._color8(38, color)

    def back_color8(self, color):
        return self._color8(48, color)

    def underline_color8(self, color):
        return self._color8(58, color)

    def fore_color24(self, r, g, b):
        return self._color24(38, r, g, b)

    def back_color24(self, r, g, b):
        return self._color24(48, r, g, b)

    def underline_color24(self, r, g, b):
        return self._color24(58, r, g, b)

    def __repr__(self):
        signals = "intercepted" if self._old_handlers else "not intercepted"
        return f"<Controller, {self.config!r}, {self.tracker!r}, signals {signals}>"


# ---------------------------------------------------------------------------
# Module-level API
# ---------------------------------------------------------------------------

_controller = Controller()


def controller():
    """Return the process-wide Controller behind the module-level API."""
    return _controller


Fore = _controller.fore
Back = _controller.back
Style = _controller.style
Disable = _controller.disable
Default = _controller.default
Font = _controller.font
Misc = _controller.misc
Cursor = _controller.cursor
Screen = _controller.screen


def init_color(
    esc_char=None,
    cursor_auto_show=True,
    auto_clean=True,
    intercept_sig=True,
    flags=COLOR_FLAG_DEFAULT,
):
    """Configure the library and populate the static tables.

    esc_char:
      Escape prefix put in front of every code, e.g. "\\x1b" or "\\033".
      None means DEFAULT_ESC_CHAR.

    cursor_auto_show:
      If True, the exit hook also shows the cursor.

    auto_clean:
      If True, an exit hook releases all tracked strings and resets the
      terminal. Registered once however often init_color() is called.

    intercept_sig:
      If True, fatal signals reset the terminal and exit with status
      128 + signal number. See handle_signal(). If False, handlers left by
      an earlier init_color() are restored.

    flags:
      Bitwise OR of COLOR_FLAG_INIT_* selecting the tables to populate.
    """
    _controller.init(esc_char, cursor_auto_show, auto_clean, intercept_sig, flags)


def restore_signals():
    _controller.restore_signals()


def get_ansi_esc_char():
    return _controller.config.esc_char


def get_cursor_auto_show():
    return _controller.config.cursor_auto_show


def get_auto_clean():
    return _controller.config.auto_clean


def auto_clean():
    """Release all tracked strings and reset the terminal now."""
    _controller.auto_clean()


def gc_add(buf):
    """Track 'buf' (an EscapeString, or a str to wrap in one). See Tracker.add()."""
    return _controller.tracker.add(buf)


def gc_reset():
    """Soft reset. Returns RESET_CODE and retires the current strings."""
    return _controller.tracker.reset()


def gc_clean_all():
    _controller.tracker.clean_all()


def write(msg):
    """Write 'msg' to stdout without a trailing newline."""
    sys.stdout.write(str(msg))


def custom_code(code):
    """Return ESC[<code>m, or None if 'code' is not in 0-255."""
    return _controller.custom_code(code)


def cursor_cup(row, column):
    """Return ESC[<row>;<column>H, or None unless both are in 1-999."""
    return _controller.cursor_cup(row, column)


def cursor_cuu(n):
    """Cursor up. None unless 'n' is in 1-999."""
    return _controller.cursor_cuu(n)


def cursor_cud(n):
    """Cursor down. None unless 'n' is in 1-999."""
    return _controller.cursor_cud(n)


def cursor_cuf(n):
    """Cursor forward. None unless 'n' is in 1-999."""
    return _controller.cursor_cuf(n)


def cursor_cub(n):
    """Cursor back. None unless 'n' is in 1-999."""
    return _controller.cursor_cub(n)


def fore_color8(color):
    return _controller.fore_color8(color)


def back_color8(color):
    return _controller.back_color8(color)


def underline_color8(color):
    return _controller.underline_color8(color)


def fore_color24(r, g, b):
    return _controller.fore_color24(r, g, b)


def back_color24(r, g, b):
    return _controller.back_color24(r, g, b)


def underline_color24(r, g, b):
    return _controller.underline_color24(r, g, b)


if os.environ.get("COLORLIB_NO_AUTO_INIT", "") != "1":
    init_color(None, True, True, True, COLOR_FLAG_INIT_DEFAULT)
