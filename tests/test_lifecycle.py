# Copyright (c) 2026 colorlib contributors
# SPDX-License-Identifier: ISC
#
# Lifecycle tests: init_color() configuration, exit hook registration and
# ordering, auto_clean() output, import-time initialization, and warnings.

import threading

import pytest

import colorlib
from conftest import ESC, run_python


# -- configuration -------------------------------------------------------------


def test_default_config(ctl):
    config = ctl.config
    assert config.esc_char == ESC
    assert config.cursor_auto_show
    assert config.auto_clean
    assert config.intercept_sig
    assert config.flags == colorlib.COLOR_FLAG_INIT_DEFAULT


def test_init_sets_config(ctl, no_atexit):
    ctl.init("\\033", 0, 1, 0, colorlib.COLOR_FLAG_INIT_FORE)

    assert ctl.config.esc_char == "\\033"
    assert ctl.config.cursor_auto_show is False
    assert ctl.config.auto_clean is True
    assert ctl.config.intercept_sig is False
    assert ctl.config.flags == colorlib.COLOR_FLAG_INIT_FORE
    assert "esc_char='\\\\033'" in repr(ctl.config)


def test_init_none_prefix_means_esc(ctl):
    ctl.init(None, intercept_sig=False, auto_clean=False)
    assert ctl.config.esc_char == colorlib.DEFAULT_ESC_CHAR == "\x1b"


def test_init_rejects_non_string_prefix(ctl):
    with pytest.raises(TypeError):
        ctl.init(b"\x1b", intercept_sig=False, auto_clean=False)


def test_module_getters():
    colorlib.init_color("\\e", False, False, False, colorlib.COLOR_FLAG_NONE)
    assert colorlib.get_ansi_esc_char() == "\\e"
    assert colorlib.get_cursor_auto_show() is False
    assert colorlib.get_auto_clean() is False


# -- exit hook -----------------------------------------------------------------


def test_auto_clean_registers_exit_hook_once(ctl, no_atexit):
    ctl.init(intercept_sig=False)
    ctl.init(intercept_sig=False)
    ctl.init(intercept_sig=False, flags=colorlib.COLOR_FLAG_INIT_ALL)

    assert no_atexit == [ctl._at_exit]


def test_no_exit_hook_without_auto_clean(ctl, no_atexit):
    ctl.init(intercept_sig=False, auto_clean=False)
    assert no_atexit == []


def test_exit_hook_follows_current_config(ctl, no_atexit, capsys):
    ctl.init(intercept_sig=False)
    ctl.init(intercept_sig=False, auto_clean=False)

    s = ctl.fore_color8(1)
    no_atexit[0]()

    assert capsys.readouterr().out == ""
    assert not s.released


def test_exit_hook_twice_is_safe(ctl, no_atexit, capsys):
    ctl.init(intercept_sig=False)
    ctl.fore_color8(1)

    ctl._at_exit()
    ctl._at_exit()

    assert capsys.readouterr().out == (ESC + "[0m" + ESC + "[?25h") * 2
    assert len(ctl.tracker) == 0


def test_auto_clean_releases_then_resets(ctl, capsys):
    s = ctl.fore_color24(1, 2, 3)
    ctl.tracker.reset()
    t = ctl.cursor_cuu(4)

    ctl.auto_clean()

    assert s.released and t.released
    assert len(ctl.tracker) == 0
    assert capsys.readouterr().out == ESC + "[0m" + ESC + "[?25h"


def test_auto_clean_without_cursor_show(ctl, no_atexit, capsys):
    ctl.init(cursor_auto_show=False, intercept_sig=False)
    ctl.auto_clean()
    assert capsys.readouterr().out == ESC + "[0m"


def test_auto_clean_uses_configured_prefix(ctl, no_atexit, capsys):
    ctl.init("<esc>", intercept_sig=False)
    ctl.auto_clean()
    assert capsys.readouterr().out == "<esc>[0m<esc>[?25h"


def test_auto_clean_survives_closed_stdout(ctl, monkeypatch):
    class _Closed:
        def write(self, s):
            raise ValueError("I/O operation on closed file")

        def flush(self):
            raise OSError("broken pipe")

    monkeypatch.setattr(colorlib.sys, "stdout", _Closed())
    ctl.fore_color8(1)
    ctl.auto_clean()
    assert len(ctl.tracker) == 0


def test_normal_exit_order():
    """Tracked strings are released before the reset and show-cursor codes
    are written."""
    code = """\
import sys
import colorlib

_clean_all = colorlib.Tracker.clean_all

def clean_all(self):
    sys.stdout.write("<released {}>".format(len(self)))
    _clean_all(self)

colorlib.Tracker.clean_all = clean_all

colorlib.write(colorlib.fore_color24(255, 0, 0))
colorlib.write("text")
colorlib.write(colorlib.gc_reset())
colorlib.cursor_cup(5, 5)
"""
    proc = run_python(code)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == (
        b"\x1b[38;2;255;0;0mtext\x1b[0m" b"<released 2>" b"\x1b[0m" b"\x1b[?25h"
    )


def test_normal_exit_after_reinit_without_cursor_show():
    code = """\
import colorlib
colorlib.init_color(None, False, True, True, colorlib.COLOR_FLAG_INIT_ALL)
colorlib.write(colorlib.Fore.RED + "x")
"""
    proc = run_python(code)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"\x1b[31mx\x1b[0m"


def test_no_exit_output_without_auto_init():
    proc = run_python("import colorlib; colorlib.write('x')", auto_init=False)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"x"


# -- import-time initialization ------------------------------------------------


def test_import_time_init():
    code = """\
import signal
import colorlib

c = colorlib.controller()
assert c.config.esc_char == "\\x1b"
assert c.config.cursor_auto_show and c.config.auto_clean and c.config.intercept_sig
assert c.config.flags == colorlib.COLOR_FLAG_INIT_DEFAULT
assert colorlib.Default.FORE == "\\x1b[39m"
assert colorlib.Fore.RED == ""
assert signal.getsignal(signal.SIGINT) is colorlib.handle_signal
print("ok", end="")
"""
    proc = run_python(code)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout == b"ok\x1b[0m\x1b[?25h"


# -- warnings ------------------------------------------------------------------


def test_init_off_main_thread_warns(ctl, no_atexit, capsys):
    ctl.warn_to_stderr = True

    thread = threading.Thread(target=ctl.init)
    thread.start()
    thread.join()

    assert ctl.installed_signals == ()
    assert len(ctl.warnings) == 1
    assert "main thread" in ctl.warnings[0]
    assert capsys.readouterr().err == "colorlib " + ctl.warnings[0] + "\n"


def test_quiet_warnings(ctl, no_atexit, capsys):
    thread = threading.Thread(target=ctl.init)
    thread.start()
    thread.join()

    assert ctl.warnings
    assert capsys.readouterr().err == ""


def test_controller_repr(ctl):
    assert "0 active" in repr(ctl)
    assert "not intercepted" in repr(ctl)
