"""ANSI color decorations for terminal output."""

from typing import Callable

from colorama import Fore

# Named decorations used by the formatter
DECORATIONS = {
    'blue': Fore.BLUE,
    'bright_yellow': Fore.LIGHTYELLOW_EX,
    'red': Fore.RED,
    'yellow': Fore.YELLOW,
    'cyan': Fore.CYAN,
}


def colorize(text: str, decoration: str, enabled: bool = True) -> str:
    """Wrap text in the named color, or return it unchanged when disabled."""
    if not enabled:
        return text
    try:
        code = DECORATIONS[decoration]
    except KeyError:
        raise ValueError(f'Unknown decoration: {decoration}') from None
    return f'{code}{text}{Fore.RESET}'


def _identity(text: str) -> str:
    return text


def decorator(decoration: str, enabled: bool = True) -> Callable[[str], str]:
    """Return a one-argument function applying the named decoration."""
    if not enabled:
        return _identity
    if decoration not in DECORATIONS:
        raise ValueError(f'Unknown decoration: {decoration}')

    def apply(text: str) -> str:
        return colorize(text, decoration)

    return apply
