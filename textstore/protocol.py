from dataclasses import dataclass
from enum import Enum

WELCOME = "WELCOME: Connected to TCP Server Pro"
ENCODING = "utf-8"


class CommandKind(Enum):
    TIME = "TIME"
    ECHO = "ECHO"
    LIST = "LIST"
    READ = "READ"
    CREATE = "CREATE"
    WRITE = "WRITE"
    APPEND = "APPEND"
    DELETE = "DELETE"
    STATS = "STATS"
    UPTIME = "UPTIME"

    @classmethod
    def lookup(cls, name):
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class Command:
    name: str
    args: tuple = ()


def parse_command(message):
    """
    Turns one raw message into a Command, or None if there is nothing
    to parse. Tokens are split on single spaces, so "a  b" keeps an
    empty token between a and b.
    """
    if message is None:
        return None
    if isinstance(message, bytes):
        message = message.decode(ENCODING, errors="replace")
    text = message.strip()
    if not text:
        return None
    tokens = text.split(" ")
    return Command(tokens[0].upper(), tuple(tokens[1:]))


def format_response(lines):
    return "".join(f"{line}\n" for line in lines)
