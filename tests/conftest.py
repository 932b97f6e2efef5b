# Copyright (c) 2026 colorlib contributors
# SPDX-License-Identifier: ISC
#
# Shared fixtures and helpers for the colorlib pytest suite.

import os
import subprocess
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Ensure colorlib is importable from the project root
sys.path.insert(0, PROJECT_ROOT)

# Importing colorlib must not install signal handlers or an exit hook in the
# test process. Tests that want those run them in a subprocess.
os.environ["COLORLIB_NO_AUTO_INIT"] = "1"

import colorlib  # noqa: E402

ESC = "\x1b"

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ctl():
    """A private Controller, so tests don't share tracker state."""
    c = colorlib.Controller(warn_to_stderr=False)
    yield c
    c.restore_signals()
    c.tracker.clean_all()


@pytest.fixture(autouse=True)
def _reset_global_controller():
    """Put the process-wide controller back to a quiet state after each test.

    Leaves auto_clean off so that no test arms the real exit hook for the
    pytest process.
    """
    yield
    c = colorlib.controller()
    c.restore_signals()
    c.tracker.clean_all()
    c.init(intercept_sig=False, auto_clean=False, flags=colorlib.COLOR_FLAG_NONE)


@pytest.fixture
def no_atexit(monkeypatch):
    """Record atexit registrations instead of performing them."""
    registered = []
    monkeypatch.setattr(colorlib.atexit, "register", registered.append)
    return registered


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def run_python(code, auto_init=True):
    """Run 'code' in a fresh interpreter with colorlib importable.

    Returns the CompletedProcess, with stdout and stderr as bytes.
    """
    env = dict(os.environ)
    env["PYTHONPATH"] = PROJECT_ROOT
    env["PYTHONIOENCODING"] = "utf-8"
    if auto_init:
        env.pop("COLORLIB_NO_AUTO_INIT", None)
    else:
        env["COLORLIB_NO_AUTO_INIT"] = "1"

    return subprocess.run(
        [sys.executable, "-c", code],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
        cwd=PROJECT_ROOT,
        timeout=30,
    )
