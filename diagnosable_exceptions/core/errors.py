"""Core error types shared by every layer.

Registration conflicts are raised, not returned: claiming a name twice is a
programming error detected when a module declares its vocabulary, not an
anticipated runtime failure.
"""


class AlreadyRegisteredError(ValueError):
    """Raised when a process-wide unique name is claimed a second time.

    Attributes:
        kind: Which registry rejected the name ("error code", "context key").
        name: The rejected name.
    """

    def __init__(self, *, kind: str, name: str) -> None:
        """Initialize the conflict error.

        Args:
            kind: Registry label.
            name: Name that was already registered.
        """
        super().__init__(f"{kind.capitalize()} '{name}' has already been registered.")
        self.kind = kind
        self.name = name
