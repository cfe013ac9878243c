from typing import Optional


class GlobPatternError(ValueError):
    """
    Exception raised when an include or exclude glob pattern cannot be compiled.

    Unlike problems with ignore files, an invalid glob given by the user is fatal:
    the tree is never built with a half-understood pattern.

    Attributes:
        pattern (str): The offending glob pattern.
        reason (str): Short description of what is wrong with it.

    Example:
        >>> error = GlobPatternError("[abc", "unclosed character class")
        >>> str(error)
        "Invalid glob pattern '[abc': unclosed character class"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern '{pattern}': {reason}")


class ConfigError(ValueError):
    """
    Exception raised when the configuration file exists but cannot be used.

    The CLI reports this as a warning and carries on with an empty configuration.

    Attributes:
        path (Optional[str]): Location of the configuration file, if known.

    Example:
        >>> error = ConfigError("expected a JSON object", "/home/me/.config/fstree/config.json")
        >>> str(error)
        'expected a JSON object'
        >>> error.path
        '/home/me/.config/fstree/config.json'
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)
