class CommandError(Exception):
    """A user-input error; str(error) is the line sent back to the client."""


class MalformedCommand(CommandError):
    def __init__(self):
        super().__init__("ERROR: invalid command")


class UnknownCommand(CommandError):
    def __init__(self, name):
        super().__init__(f"ERROR: Unknown command '{name}'")


class MissingArgument(CommandError):
    def __init__(self, usage):
        super().__init__(f"ERROR: {usage}")


class NotFound(CommandError):
    def __init__(self, message):
        super().__init__(f"ERROR: {message}")


class AlreadyExists(CommandError):
    def __init__(self, name):
        super().__init__(f"ERROR: File '{name}' already exists")
