import re
import sys
from typing import Optional, TextIO
from .constants import MESSAGES

_INTEGER = re.compile(r'[+-]?\d+')

class InvalidInput(ValueError):
    """Raised when a prompt receives something it cannot accept."""

    def __init__(self, message: str = MESSAGES['INVALID_INPUT']):
        super().__init__(message)

class Console:
    """Thin wrapper around the input and output streams of a session."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = '') -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        # An empty read means the stream is exhausted
        if not line:
            raise EOFError
        return line.rstrip('\r\n')

def parse_int(text: str) -> int:
    """Parse a whole-line integer, rejecting trailing garbage."""
    token = text.strip()
    if not _INTEGER.fullmatch(token):
        raise InvalidInput()
    return int(token)

def read_int(console: Console, prompt: str, minimum: Optional[int] = None) -> int:
    value = parse_int(console.ask(prompt))
    if minimum is not None and value < minimum:
        raise InvalidInput()
    return value

def read_menu_choice(console: Console, prompt: str, min_choice: int, max_choice: int) -> int:
    value = parse_int(console.ask(prompt))
    if not min_choice <= value <= max_choice:
        raise InvalidInput()
    return value

def read_yes_no(console: Console, prompt: str) -> bool:
    answer = console.ask(prompt).strip().lower()
    if answer == 'y':
        return True
    if answer == 'n':
        return False
    raise InvalidInput()
