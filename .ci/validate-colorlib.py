#!/usr/bin/env python3
"""Validate colorlib and colortest on all platforms.

Exercises the tracker's soft reset, the escape-string factory, table
population, the exit path in a child interpreter, and the colortest render
routine, without needing a terminal.

Run from the project root: python .ci/validate-colorlib.py
"""

import io
import os
import subprocess
import sys

# Ensure the project root (CWD) is on the import path, since Python
# adds the script's directory (.ci/) rather than CWD by default.
sys.path.insert(0, os.getcwd())

# Keep this process free of colorlib's signal handlers and exit hook
os.environ["COLORLIB_NO_AUTO_INIT"] = "1"


def check_colorlib_units():
    """Tracker, factory and tables -- no terminal required."""
    import colorlib

    c = colorlib.Controller(warn_to_stderr=False)
    c.init(intercept_sig=False, auto_clean=False, flags=colorlib.COLOR_FLAG_INIT_ALL)

    # Factory output and range checks
    assert c.fore_color24(255, 0, 0) == "\x1b[38;2;255;0;0m", "24-bit fore"
    assert c.cursor_cup(999, 1) == "\x1b[999;1H", "cursor_cup upper bound"
    assert c.cursor_cup(1000, 1) is None, "cursor_cup out of range"
    assert c.back_color8(256) is None, "8-bit color out of range"
    assert len(c.tracker) == 2, "only successful calls are tracked"

    # Soft reset keeps strings alive for one more generation
    s = c.cursor_cuu(3)
    assert c.style.RESET_ALL() == "\x1b[0m", "reset code"
    assert str(s) == "\x1b[3A", "string valid after one reset"
    c.style.RESET_ALL()
    assert s.released, "string released after two resets"
    try:
        str(s)
    except colorlib.ReleasedStringError:
        pass
    else:
        raise AssertionError("released string still readable")

    c.tracker.clean_all()
    c.tracker.clean_all()
    assert len(c.tracker) == 0, "clean_all idempotent"

    # Every table populated
    for table in c.tables:
        assert all(entry.startswith("\x1b[") for entry in table), repr(table)
    assert c.fore.RED == "\x1b[31m", "Fore.RED"
    assert c.cursor.SHOW == "\x1b[?25h", "Cursor.SHOW"

    print("colorlib unit checks passed")


def check_exit_path():
    """Normal exit writes reset and show-cursor after the program's output."""
    env = dict(os.environ)
    del env["COLORLIB_NO_AUTO_INIT"]
    env["PYTHONPATH"] = os.getcwd()

    out = subprocess.check_output(
        [
            sys.executable,
            "-c",
            "import colorlib; colorlib.write(colorlib.fore_color8(1))",
        ],
        env=env,
    )
    assert out == b"\x1b[38;5;1m\x1b[0m\x1b[?25h", repr(out)

    print("exit path passed")


def check_colortest_headless():
    """Render test into a buffer with no animation delay."""
    import colortest

    out = io.StringIO()
    colortest.color_support_test(out, delay=0)
    text = out.getvalue()
    assert "=== END OF TEST ===" in text, "render test incomplete"
    assert "\x1b[48;5;196m" in text, "256-color palette missing"

    print("colortest headless render passed")


if __name__ == "__main__":
    check_colorlib_units()
    check_exit_path()
    check_colortest_headless()
    print("All checks passed")
