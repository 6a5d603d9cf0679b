from __future__ import annotations
from colorama import Fore, Style, just_fix_windows_console

# no-op outside legacy Windows consoles
just_fix_windows_console()

_CODES = {
    'gray': Fore.LIGHTBLACK_EX,
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'reset': Style.RESET_ALL,
}

def get_color_code(name: str, enabled: bool = True) -> str:
    """Get ANSI color code by name, returns empty string if colors disabled."""
    if not enabled:
        return ''
    return _CODES.get(name, '')
