import threading
import time
from datetime import datetime, timezone

from .errors import (
    AlreadyExists,
    CommandError,
    MalformedCommand,
    MissingArgument,
    NotFound,
    UnknownCommand,
)
from .protocol import WELCOME, CommandKind, parse_command
from .storage import Storage


class StoreEngine:
    """
    Owns the shared Storage and the server start time, and runs one
    command at a time against them.

    Every call to execute() holds the same lock from parsing to the
    last reply line, so a command never sees another one half applied.
    """

    def __init__(self, storage=None, started_at=None, clock=time.time, now=datetime.now):
        self._storage = Storage() if storage is None else storage
        self._clock = clock
        self._now = now
        self.started_at = clock() if started_at is None else started_at
        self._lock = threading.Lock()
        self._handlers = {
            CommandKind.TIME: self._time,
            CommandKind.ECHO: self._echo,
            CommandKind.LIST: self._list,
            CommandKind.READ: self._read,
            CommandKind.CREATE: self._create,
            CommandKind.WRITE: self._write,
            CommandKind.APPEND: self._append,
            CommandKind.DELETE: self._delete,
            CommandKind.STATS: self._stats,
            CommandKind.UPTIME: self._uptime,
        }

    def welcome(self):
        return WELCOME

    def uptime(self):
        return max(0, int(self._clock() - self.started_at))

    def execute(self, message):
        with self._lock:
            try:
                return self._execute(message)
            except CommandError as e:
                return [str(e)]

    def _execute(self, message):
        command = parse_command(message)
        if command is None:
            raise MalformedCommand()
        kind = CommandKind.lookup(command.name)
        if kind is None:
            raise UnknownCommand(command.name)
        return self._handlers[kind](list(command.args))

    def _time(self, args):
        now = self._now()
        # UTC date, local time of day
        return [f"{now.astimezone(timezone.utc):%Y-%m-%d} {now:%X}"]

    def _echo(self, args):
        return [" ".join(args)]

    def _list(self, args):
        return ["📁 Directory listing:"] + [f"  📄 {name}" for name in self._storage.names()]

    def _read(self, args):
        name = _filename(args, "READ needs filename")
        content = self._storage.get(name)
        if content is None:
            raise NotFound(f"File '{name}' not found")
        return [f"📖 {name}:", content]

    def _create(self, args):
        name = _filename(args, "CREATE needs filename")
        if not self._storage.create(name):
            raise AlreadyExists(name)
        return [f"OK: Created {name}"]

    def _write(self, args):
        name = _filename(args, "WRITE needs filename and content")
        self._storage.set(name, " ".join(args[1:]))
        return [f"OK: Written to {name}"]

    def _append(self, args):
        name = _filename(args, "APPEND needs filename and content")
        self._storage.append(name, " ".join(args[1:]))
        return [f"OK: Appended to {name}"]

    def _delete(self, args):
        name = _filename(args, "DELETE needs filename")
        if not self._storage.delete(name):
            raise NotFound(f"'{name}' not found")
        return [f"OK: Deleted {name}"]

    def _stats(self, args):
        # command counts are not tracked
        return [
            "Commands handled: N/A",
            f"Files: {len(self._storage)}",
            f"Server uptime (s): {self.uptime()}",
        ]

    def _uptime(self, args):
        return [f"Server uptime (s): {self.uptime()}"]


def _filename(args, usage):
    name = args[0] if args else ""
    if not name:
        raise MissingArgument(usage)
    return name
