#!/usr/bin/env python3
"""Exceptions raised by the icon pipeline.

Every failure derives from AppIconizerError and carries enough context
(source path, failing width, underlying cause) to be diagnosed from the
message alone.
"""


class AppIconizerError(Exception):
    """Base class for all icon generation failures."""

    def __init__(self, message, source=None, width=None):
        super().__init__(message)
        self.source = source
        self.width = width
        # Set by the pipeline when output had already been started
        self.output_path = None
        self.written = []

    def __str__(self):
        message = super().__str__()
        details = []
        if self.source is not None:
            details.append(f"source={self.source}")
        if self.width is not None:
            details.append(f"width={self.width}")
        cause = self.__cause__
        if cause is not None:
            details.append(f"cause={type(cause).__name__}: {cause}")
        if details:
            return f"{message} ({', '.join(details)})"
        return message


class SourceNotFoundError(AppIconizerError, FileNotFoundError):
    pass


class DecodeError(AppIconizerError, ValueError):
    """Source exists but is not a readable image."""


class UnknownProfileError(AppIconizerError, ValueError):
    pass


class EncodeError(AppIconizerError, ValueError):
    """PNG encoding of a rendition failed."""


class SinkOpenError(AppIconizerError, OSError):
    """Output directory or archive could not be created."""


class SinkWriteError(AppIconizerError, OSError):
    """A single rendition could not be stored."""


class FinalizeError(AppIconizerError, OSError):
    """Archive could not be closed; its contents are not trustworthy."""


class CancelledError(AppIconizerError):
    """Run was cancelled between renditions."""
