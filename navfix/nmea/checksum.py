"""NMEA checksum calculation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B
    ^                         checksum content                             ^^
    start                                                   checksum (0x2B = 43)

Splitting a raw line into content and checksum is framing, and lives in
``navfix.nmea.sentence`` together with ``validate_checksum``.
"""


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPRMC,,V,,,,,,,,,,N")
        83
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result
