"""Free-text search term validation and matching."""

import math
import re
from typing import Any

from core.models.errors import ValidationError
from core.utils.constants import ERROR_CODE_INVALID_SEARCH, MAX_INT64


class SearchTerm:
    """Validate user search text and turn it into safe matchers.

    Only letters, digits, whitespace and hyphens (any script) are accepted,
    so a term can never carry pattern syntax. The accepted text is still
    escaped before compiling, and the resulting pattern is matched
    case-insensitively as a literal substring.
    """

    @staticmethod
    def is_safe(term: str) -> bool:
        """Return True when every character is a letter, digit, whitespace or '-'."""
        return bool(term) and all(
            char.isalnum() or char.isspace() or char == "-" for char in term
        )

    @staticmethod
    def validate(raw: Any) -> str | None:
        """Validate a raw ``search`` query value.

        Returns:
            The stripped term, or None when the parameter is absent or blank

        Raises:
            ValidationError: If the value is not a string or contains
                characters outside the allowed class
        """
        if raw is None:
            return None

        if not isinstance(raw, str):
            raise ValidationError(
                message="Invalid search parameter",
                error_code=ERROR_CODE_INVALID_SEARCH,
                details={"search": "must be a single string"},
            )

        term = raw.strip()
        if not term:
            return None

        if not SearchTerm.is_safe(term):
            raise ValidationError(
                message="Invalid search parameter",
                error_code=ERROR_CODE_INVALID_SEARCH,
                details={"search": "only letters, digits, spaces and '-' are allowed"},
            )

        return term

    @staticmethod
    def pattern(term: str) -> re.Pattern[str]:
        """Compile a case-insensitive literal-substring pattern for ``term``."""
        return re.compile(re.escape(term), re.IGNORECASE)

    @staticmethod
    def as_number(term: str) -> int | None:
        """Return the term as an order number when it is a finite integral number.

        Only ASCII number syntax is read, and values outside the signed 64-bit
        range never match an order.
        """
        if not term.isascii() or "_" in term:
            return None

        try:
            number = float(term)
        except ValueError:
            return None

        if not math.isfinite(number) or not number.is_integer():
            return None

        if abs(number) > MAX_INT64:
            return None

        return int(number)
