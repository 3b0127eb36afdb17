"""Exceptions raised while classifying and resolving paths."""


class PathError(ValueError):
    """Base class for all path resolution failures."""


class InvalidRoot(PathError):  # noqa: N818
    """The root prefix is malformed (e.g. a UNC path missing its server or share)."""


class PathTooLong(PathError):  # noqa: N818
    """The canonical Win32 form exceeds the length bound."""


class AmbiguousDriveStream(PathError):  # noqa: N818
    """Drive-relative syntax that could also name an alternate data stream."""


class InvalidCurrentDirectory(PathError):  # noqa: N818
    """Attempted to set a current directory that is verbatim, relative or missing."""


class ConfigError(ValueError):
    """The resolver configuration is invalid."""
