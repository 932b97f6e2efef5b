#!/usr/bin/env python3

# Copyright (c) 2026 colorlib contributors
# SPDX-License-Identifier: ISC

"""
Prints every color, style and cursor feature of colorlib, to check what the
terminal supports.

Sample usage:

  $ colortest
  $ colortest --delay 0 --no-signals

The exit status on errors is 1.
"""

import argparse
import sys
import time

import colorlib
from colorlib import (
    Back,
    Cursor,
    Font,
    Fore,
    Screen,
    Style,
    back_color8,
    back_color24,
    cursor_cud,
    cursor_cuf,
    cursor_cuu,
    fore_color24,
    underline_color8,
    underline_color24,
)

_COLOR_NAMES = ("BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE")


def color_support_test(out=None, delay=0.1):
    """Print the full render test to 'out' (default: sys.stdout).

    'delay' is the pause in seconds between frames of the cursor animation.
    Populates every table first, keeping the current escape prefix and exit
    settings.
    """
    if out is None:
        out = sys.stdout

    config = colorlib.controller().config
    colorlib.init_color(
        config.esc_char,
        config.cursor_auto_show,
        config.auto_clean,
        config.intercept_sig,
        colorlib.COLOR_FLAG_INIT_ALL,
    )

    def w(*parts):
        out.write("".join(str(part) for part in parts))

    w(Screen.CLEAR, Screen.CLEAR_BUFF, Screen.LINE_ERASE_ALL, Screen.LINE_ERASE_CUR)
    w(Style.BOLD, "=== FULL RENDER TEST OF THE LIB ===", Style.RESET, "\n\n")

    w(Style.RESET, "--- Basic Colors---\n")
    w("       ", *(f" {name:<7}" for name in _COLOR_NAMES), "\n")
    w("Classic", *(f"{Fore[i]} {'Text':<7}{Style.RESET}" for i in range(8)), "\n")
    w("Bright ", *(f"{Fore[i]} {'Text':<7}{Style.RESET}" for i in range(8, 16)))
    w("\n\n")
    w(
        "Back   ",
        *(f"{Fore.BLACK}{Back[i]} {'Text':<7}{Style.RESET}" for i in range(8)),
        "\n",
    )
    w(
        "Back Br",
        *(f"{Fore.BLACK}{Back[i]} {'Text':<7}{Style.RESET}" for i in range(8, 16)),
        "\n\n",
    )

    w(Style.RESET, "--- Styles ---\n")
    styles = (
        (Style.BOLD, "BOLD"),
        (Style.DIM, "DIM"),
        (Style.ITALIC, "ITALIC"),
        (Style.UNDERLINE, "UNDERLINE"),
        (Style.BLINK, "BLINK"),
        (Style.REVERSE, "REVERSE"),
        (Style.HIDDEN, "HIDDEN"),
        (Style.STRIKETHROUGH, "STRIKE"),
        (Style.UNDERLINE_DOUBLE, "DOUBLE UL"),
    )
    for i, (code, name) in enumerate(styles):
        w(code, name, Style.RESET, " | ")
        if (i + 1) % 3 == 0:
            w("\n")
    w("\n\n")

    w(Style.RESET, "--- Fonts ---\n")
    for i, code in enumerate(Font):
        w(code, f"Police {i + 1}", Style.RESET, "  ")
    w("\n\n")

    w(Style.RESET, "--- 8-Bit Colors (Compact) ---\n")
    for i in range(256):
        w(back_color8(i), "\n" if i % 32 == 0 else "", " ")
        if i == 0:
            w(" ")
    w(Style.RESET, "\n\n")

    w("Test ", underline_color8(60), Style.UNDERLINE, "Underline 8-Bit", Style.RESET)
    w("\n\n")

    # Each gradient line retires the strings of the line before it
    w(Style.RESET_ALL(), "--- TrueColor Gradients (RGB) ---\n")
    w(
        "Fore : ",
        *(f"{fore_color24(255, g, 0)}█{Style.RESET}" for g in range(0, 256, 5)),
    )
    w(Style.RESET_ALL(), "\n")
    w(
        "Fore : ",
        *(f"{fore_color24(0, g, 255)}█{Style.RESET}" for g in range(255, -1, -5)),
    )
    w(Style.RESET_ALL(), "\n")
    w(
        "Back : ",
        *(f"{back_color24(r, 0, 255)} {Style.RESET}" for r in range(0, 256, 5)),
    )
    w(Style.RESET_ALL(), "\n")
    w(
        "Back : ",
        *(f"{back_color24(0, 255 - i, i)} {Style.RESET}" for i in range(0, 256, 5)),
    )
    w(Style.RESET_ALL(), "\n")

    w("\nTest ", underline_color24(255, 0, 255), Style.UNDERLINE, "Underline 24-Bit")
    w(Style.RESET_ALL(), "\n\n")

    w(Style.RESET, "--- Cursor And Animation ---\n")
    out.flush()

    w(Cursor.HIDE, Cursor.SCP, "\n")
    w(Fore.CYAN, "+------------+\n", "| Loading... |\n", "+------------+\n")
    w(Style.RESET)
    w(cursor_cuu(2), cursor_cuf(2))

    for _ in range(10):
        w(Back.GREEN, " ")
        out.flush()
        time.sleep(delay)

    w(Cursor.RCP, cursor_cud(4), Cursor.SHOW)
    w("Animation Ended.\n")

    w(Style.RESET_ALL(), "\n=== END OF TEST ===\n")
    out.flush()


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter, description=__doc__
    )

    parser.add_argument(
        "--esc-char",
        help="Escape prefix to put in front of every code, e.g. '\\033' or "
        "'\\x1b' (default: the ESC control character)",
    )

    parser.add_argument(
        "--no-cursor-auto-show",
        dest="cursor_auto_show",
        action="store_false",
        help="Do not show the cursor again at exit",
    )

    parser.add_argument(
        "--no-auto-clean",
        dest="auto_clean",
        action="store_false",
        help="Do not reset the terminal at exit",
    )

    parser.add_argument(
        "--no-signals",
        dest="intercept_sig",
        action="store_false",
        help="Do not reset the terminal on Ctrl-C and other fatal signals",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        metavar="SECONDS",
        help="Pause between animation frames (default: 0.1)",
    )

    args = parser.parse_args()

    if args.delay < 0:
        sys.exit(f"error: negative delay: {args.delay}")

    esc_char = args.esc_char
    if esc_char is not None:
        # Let the shell-friendly spellings through, e.g. '\033' and '\e'
        esc_char = esc_char.replace("\\e", "\\x1b")
        try:
            esc_char = esc_char.encode("latin-1").decode("unicode_escape")
        except (UnicodeError, ValueError) as e:
            sys.exit(f"error: malformed escape prefix '{args.esc_char}': {e}")

    colorlib.init_color(
        esc_char,
        args.cursor_auto_show,
        args.auto_clean,
        args.intercept_sig,
        colorlib.COLOR_FLAG_INIT_ALL,
    )

    color_support_test(delay=args.delay)


if __name__ == "__main__":
    main()
