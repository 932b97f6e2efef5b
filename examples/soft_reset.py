# Shows the soft-reset caller contract: dynamic strings stay usable through
# the statement that prints the reset code, and are gone one reset later.
#
# Usage: python examples/soft_reset.py

import colorlib
from colorlib import Fore, Style, fore_color24

colorlib.init_color(flags=colorlib.COLOR_FLAG_INIT_ALL)

orange = fore_color24(255, 128, 0)
print(orange + "orange" + Style.RESET_ALL())

# Retired, but not freed yet
print(f"{orange}still orange{Style.RESET}")

Style.RESET_ALL()
try:
    print(orange + "never printed")
except colorlib.ReleasedStringError as e:
    print(Fore.RED + f"released: {e}" + Style.RESET)
