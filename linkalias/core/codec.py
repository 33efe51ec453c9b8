"""Base62 encoding of identifiers."""

import string


class Base62Codec:
    """Convert identifiers to short alphanumeric codes and back."""

    # a-z -> 0..25, A-Z -> 26..51, 0-9 -> 52..61
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    BASE = len(ALPHABET)

    _VALUES = {char: value for value, char in enumerate(ALPHABET)}

    def encode(self, num: int) -> str:
        """Convert a non-negative integer to a base62 string.

        Args:
            num: Integer to convert

        Returns:
            Base62 string, most significant symbol first. ``0`` encodes to
            the empty string.

        Raises:
            ValueError: If num is negative
        """
        if num < 0:
            raise ValueError(f"Cannot encode negative number: {num}")

        result = []
        while num > 0:
            result.append(self.ALPHABET[num % self.BASE])
            num = num // self.BASE

        return ''.join(reversed(result))

    def decode(self, code: str) -> int:
        """Convert a base62 string to an integer.

        Characters outside the alphabet are skipped rather than rejected,
        so ``decode("ab-c") == decode("abc")``. Use ``is_valid_format`` to
        check a code strictly.

        Args:
            code: Base62 string

        Returns:
            Integer value
        """
        result = 0
        for char in code:
            value = self._VALUES.get(char)
            if value is None:
                continue
            result = result * self.BASE + value

        return result

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code is non-empty and uses only base62 characters."""
        return bool(code) and all(c in Base62Codec._VALUES for c in code)
