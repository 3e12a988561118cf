"""Error types raised while loading, validating and expanding specifications."""


class SpecError(Exception):
    """Base class for every error the engine raises."""


class InputError(SpecError):
    """The input file is missing or has an unsupported extension."""


class ConfigError(InputError):
    """The job configuration file is missing or malformed."""


class DecodeError(SpecError):
    """The document could not be decoded into a Service."""


class SecurityConfigError(SpecError):
    """A grouped security declaration is malformed."""


class ValidationError(SpecError):
    """A structural rule violation, optionally annotated with a source position.

    ``path`` is the dotted key of the offending category ("operations",
    "type", "modifiers", "retry"). ``line`` and ``column`` are 1-based and
    only set when the position could be recovered from the document.
    """

    def __init__(self, message: str, path: str = "", line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line
        self.column = column

    def wrap(self, prefix: str) -> "ValidationError":
        """Return a copy whose message is qualified with ``prefix``."""
        return ValidationError(f"{prefix}: {self.message}", path=self.path, line=self.line, column=self.column)

    def with_position(self, line: int, column: int) -> "ValidationError":
        return ValidationError(self.message, path=self.path, line=line, column=column)

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}, column {self.column}: {self.message}"
        return self.message
