# topmark:header:start
#
#   project      : NvimGen
#   file         : encoder.py
#   file_relpath : src/nvimgen/emitter/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value encoder: typed values to dialect literal text.

This is the only place where escaping rules live. Section builders and
dialects never splice raw user text into output; they ask a
[`ValueEncoder`][nvimgen.emitter.encoder.ValueEncoder] bound to the active
dialect for a literal.

Encoding rules:
    * boolean: the dialect's keywords; anything but ``bool`` fails.
    * number: decimal text; ``bool``, NaN, infinities and integers outside the
      exactly representable range fail. Values are never clamped.
    * string / enum: delimiter-quoted; backslash is escaped before the delimiter,
      newline and carriage return use escape sequences, everything else passes
      through. Enum values must belong to the declared set.
    * format strings: additionally double a ``%`` that cannot start a directive
      (end of text or followed by whitespace). ``%%`` pairs are kept as they are.
    * string-array: a sequence literal of individually encoded strings.

A value whose runtime shape contradicts its declared type raises
[`EncodingError`][nvimgen.core.errors.EncodingError].
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

from nvimgen.config.logging import get_logger
from nvimgen.constants import MAX_SAFE_INTEGER
from nvimgen.core.errors import EncodingError
from nvimgen.model import OptionType

if TYPE_CHECKING:
    from nvimgen.config.logging import NvimgenLogger
    from nvimgen.dialects.base import Dialect
    from nvimgen.model import OptionSpec

logger: NvimgenLogger = get_logger(__name__)

# A literal percent pair, or a lone percent that cannot introduce a directive.
_RE_PERCENT: Final[re.Pattern[str]] = re.compile(r"%%|%(?=\s|\Z)")


def _describe(value: object) -> str:
    return f"{type(value).__name__} {value!r}"


class ValueEncoder:
    """Encode typed values as literal text of one dialect.

    Args:
        dialect (Dialect): The dialect supplying delimiters and keywords.
    """

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect

    def encode(
        self,
        value: object,
        declared_type: OptionType,
        *,
        enum_values: Sequence[str] = (),
        format_string: bool = False,
    ) -> str:
        """Encode ``value`` according to ``declared_type``.

        Args:
            value (object): The runtime value.
            declared_type (OptionType): The declared type tag.
            enum_values (Sequence[str]): Permitted values for enum types.
            format_string (bool): Apply format-string percent handling to strings.

        Returns:
            str: The literal text.

        Raises:
            EncodingError: If ``value`` does not have the shape ``declared_type``
                requires, or the tag itself is not handled.
        """
        if declared_type is OptionType.BOOLEAN:
            return self.boolean(value)
        if declared_type is OptionType.NUMBER:
            return self.number(value)
        if declared_type is OptionType.STRING:
            return self.string(value, format_string=format_string)
        if declared_type is OptionType.ENUM:
            return self.enum(value, enum_values)
        if declared_type is OptionType.STRING_ARRAY:
            return self.string_array(value)
        raise EncodingError(f"unhandled option type {declared_type!r}")

    def encode_option(self, spec: OptionSpec, value: object) -> str:
        """Encode ``value`` for the catalog option ``spec``.

        Errors are re-raised with the option id attached.
        """
        try:
            literal: str = self.encode(
                value,
                spec.type,
                enum_values=spec.enum_values,
                format_string=spec.format_string,
            )
        except EncodingError as exc:
            raise EncodingError(str(exc), option_id=spec.id) from exc
        logger.trace("Encoded option %s=%r as %s", spec.id, value, literal)
        return literal

    def boolean(self, value: object) -> str:
        """Return the dialect's boolean keyword for ``value``."""
        if not isinstance(value, bool):
            raise EncodingError(f"expected a boolean, got {_describe(value)}")
        return self.dialect.boolean_literal(value)

    def number(self, value: object) -> str:
        """Return ``value`` as decimal text."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodingError(f"expected a number, got {_describe(value)}")
        if isinstance(value, float):
            if not math.isfinite(value):
                raise EncodingError(f"number is not finite: {value!r}")
            text: str = repr(value)
            # Both dialects require a fractional part before an exponent.
            if "e" in text and "." not in text:
                mantissa, exponent = text.split("e")
                text = f"{mantissa}.0e{exponent}"
            return text
        if abs(value) > MAX_SAFE_INTEGER:
            raise EncodingError(f"integer {value} is outside the representable range")
        return str(int(value))

    def escape(self, text: str, *, format_string: bool = False) -> str:
        """Return ``text`` escaped for use between the dialect's string delimiters."""
        delimiter: str = self.dialect.string_delimiter
        escaped: str = text.replace("\\", "\\\\").replace(delimiter, f"\\{delimiter}")
        for raw, sequence in self.dialect.control_escapes:
            escaped = escaped.replace(raw, sequence)
        if format_string:
            escaped = _RE_PERCENT.sub("%%", escaped)
        return escaped

    def string(self, value: object, *, format_string: bool = False) -> str:
        """Return ``value`` as a quoted string literal."""
        if not isinstance(value, str):
            raise EncodingError(f"expected a string, got {_describe(value)}")
        delimiter: str = self.dialect.string_delimiter
        return f"{delimiter}{self.escape(value, format_string=format_string)}{delimiter}"

    def enum(self, value: object, enum_values: Sequence[str]) -> str:
        """Return ``value`` as a string literal after checking set membership."""
        if not isinstance(value, str):
            raise EncodingError(f"expected an enum string, got {_describe(value)}")
        if value not in enum_values:
            allowed: str = ", ".join(repr(v) for v in enum_values)
            raise EncodingError(f"{value!r} is not one of: {allowed}")
        return self.string(value)

    def string_array(self, value: object) -> str:
        """Return ``value`` as a sequence literal of string literals."""
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise EncodingError(f"expected a list of strings, got {_describe(value)}")
        items: list[str] = []
        for index, element in enumerate(value):
            if not isinstance(element, str):
                raise EncodingError(
                    f"list element {index} is not a string: {_describe(element)}"
                )
            items.append(self.string(element))
        return self.dialect.sequence_literal(items)

    # ---- Unquoted contexts (legacy command syntax) -------------------------

    def map_lhs(self, text: str) -> str:
        """Return a mapping trigger usable as a bare command argument."""
        return self.map_rhs(text).replace(" ", "<Space>")

    def map_rhs(self, text: str) -> str:
        """Return a mapping right-hand side that cannot end the command early."""
        return text.replace("|", "<Bar>").replace("\r", "<CR>").replace("\n", "<NL>")

    def command_argument(self, text: str) -> str:
        """Return a bare command argument with spaces and bars escaped."""
        return text.replace(" ", "\\ ").replace("|", "\\|")

    def comment_text(self, text: str) -> str:
        """Return ``text`` folded onto one line for use inside a comment."""
        return " ".join(text.splitlines())


def encode(
    value: object,
    declared_type: OptionType,
    *,
    dialect: Dialect | None = None,
    enum_values: Sequence[str] = (),
    format_string: bool = False,
) -> str:
    """Encode a single value (native dialect unless ``dialect`` is given).

    Convenience wrapper around :meth:`ValueEncoder.encode`.
    """
    if dialect is None:
        from nvimgen.dialects import resolve_dialect

        dialect = resolve_dialect(legacy_mode=False)
    return ValueEncoder(dialect).encode(
        value,
        declared_type,
        enum_values=enum_values,
        format_string=format_string,
    )
