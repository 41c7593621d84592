class RegistryError(Exception):
    """Base exception for awsregistry."""

    pass


class IdentifierNotFoundError(RegistryError, LookupError):
    """Raised by strict lookups when a name or discriminant is not defined."""

    def __init__(self, kind: str, name):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind} identifier: {name!r}")


class DuplicateIdentifierError(RegistryError):
    """Raised when a name table is incomplete or two names collide case-insensitively."""

    pass


class ConfigError(RegistryError, ValueError):
    """Raised when configuration values are invalid."""

    pass


class SnapshotFormatError(RegistryError):
    """Raised when a snapshot file is not a {kind: {name: discriminant}} mapping."""

    pass
