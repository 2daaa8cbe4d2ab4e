"""Exceptions raised while framing and decoding NMEA sentences.

Every error derives from ``NmeaError``, which is itself a ``ValueError``:
a sentence that cannot be decoded is bad input, and callers that only care
about "did this line decode" can catch either.

Hierarchy:
    NmeaError
    ├── InvalidSentence     framing failed ($, *, header or checksum digits)
    ├── ChecksumMismatch    XOR checksum does not match the transmitted one
    ├── WrongSentenceType   sentence carries a different type tag
    ├── MalformedField      a non-empty field violates its grammar
    └── TruncatedSentence   input ended before a required delimiter
"""


class NmeaError(ValueError):
    """Base class for all sentence framing and decoding failures."""


class InvalidSentence(NmeaError):
    """The raw line is not a structurally valid NMEA sentence."""

    def __init__(self, sentence: str, reason: str) -> None:
        super().__init__(f"Invalid NMEA sentence {sentence!r}: {reason}")
        self.sentence = sentence
        self.reason = reason


class ChecksumMismatch(NmeaError):
    """The transmitted checksum differs from the calculated one."""

    def __init__(self, expected: int, calculated: int) -> None:
        super().__init__(
            f"Checksum mismatch: sentence says {expected:02X}, "
            f"calculated {calculated:02X}"
        )
        self.expected = expected
        self.calculated = calculated


class WrongSentenceType(NmeaError):
    """A decoder was handed a sentence of another type.

    Attributes:
        expected: Type tag the decoder handles (e.g. ``"RMC"``).
        found: Type tag the sentence actually carries.
    """

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(
            f"Wrong sentence type: expected {expected}, found {found}"
        )
        self.expected = expected
        self.found = found


class MalformedField(NmeaError):
    """A non-empty field could not be decoded.

    Attributes:
        field: Name of the field that failed (e.g. ``"status_of_fix"``).
        value: Raw token as it appeared in the sentence.
        reason: Short description of what was wrong.
    """

    def __init__(self, field: str, value: str, reason: str) -> None:
        super().__init__(f"Malformed {field} field {value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason


class TruncatedSentence(NmeaError):
    """The field data ended before all mandatory fields were present.

    Attributes:
        field: The last field read before input ran out.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Sentence truncated after {field} field")
        self.field = field
