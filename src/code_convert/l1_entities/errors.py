"""Domain error types. Every one of them ends the run."""


class ConversionError(Exception):
    """Base class for failures of a conversion run."""


class MissingCredentialError(ConversionError):
    """Raised when no bearer token was passed or found in the environment."""


class InputNotFoundError(ConversionError):
    """Raised when the input file does not exist."""


class InputReadError(ConversionError):
    """Raised when the input file exists but cannot be read as text."""


class RemoteAPIError(ConversionError):
    """Raised when the remote endpoint reports an error or cannot be reached."""


class EmptyResponseError(ConversionError):
    """Raised when a response carries no usable content."""


class OutputWriteError(ConversionError):
    """Raised when the converted code cannot be written."""


class OutputPathConflictError(ConversionError):
    """Raised when the derived output path is the input file itself."""

    def __init__(self, path) -> None:
        super().__init__(f'Output path {path} would overwrite the input file')
