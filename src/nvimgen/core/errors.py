# topmark:header:start
#
#   project      : NvimGen
#   file         : errors.py
#   file_relpath : src/nvimgen/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the NvimGen emitter core.

Both error kinds abort a generation as a whole; no partial output is produced.
The public [`generate`][nvimgen.emitter.generate.generate] entry point catches
them and reports them on the returned result instead of propagating.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all emitter errors."""


class EncodingError(GeneratorError):
    """A value's runtime shape contradicts its declared type.

    Examples are non-finite numbers, non-string array elements, enum values
    outside their declared set, or an option id that the catalog does not know.

    Attributes:
        option_id (str | None): Id of the option being encoded, when known.
    """

    def __init__(self, message: str, *, option_id: str | None = None) -> None:
        super().__init__(message)
        self.option_id = option_id

    def __str__(self) -> str:
        message = super().__str__()
        if self.option_id is None:
            return message
        return f"{self.option_id}: {message}"


class LayoutError(GeneratorError):
    """An unrecognized layout mode was requested."""
