"""LZ-String compression in its raw, UTF-16 and Base64 flavours.

Strings are handled as sequences of UTF-16 code units. Characters outside the
Basic Multilingual Plane are therefore compressed as surrogate pairs and come
back intact after decompression.
"""

from __future__ import annotations

import sys
from array import array
from collections.abc import Callable, Sequence

__all__ = [
    "compress",
    "compress_to_utf16",
    "compress_to_base64",
    "decompress",
    "decompress_from_utf16",
    "decompress_from_base64",
]

_KEY_BASE64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
_BASE64_REVERSE = {char: index for index, char in enumerate(_KEY_BASE64)}


def _to_units(text: str) -> list[int]:
    """Split a string into its UTF-16 code units."""
    units = array("H")
    units.frombytes(text.encode("utf-16-le", "surrogatepass"))
    if sys.byteorder == "big":
        units.byteswap()
    return units.tolist()


def _from_units(units: str) -> str:
    """Join code units (one per character) back into a regular string."""
    return units.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


class _Encoder:
    """Packs variable-width codes into output characters, LSB of each code first."""

    def __init__(self, bits_per_char: int, char_from_int: Callable[[int], str]) -> None:
        self._bits_per_char = bits_per_char
        self._char_from_int = char_from_int
        self._output: list[str] = []
        self._value = 0
        self._position = 0
        self.num_bits = 2
        self._enlarge_in = 2

    def write(self, value: int, width: int) -> None:
        for _ in range(width):
            self._value = (self._value << 1) | (value & 1)
            value >>= 1
            if self._position == self._bits_per_char - 1:
                self._position = 0
                self._output.append(self._char_from_int(self._value))
                self._value = 0
            else:
                self._position += 1

    def count_code(self) -> None:
        self._enlarge_in -= 1
        if self._enlarge_in == 0:
            self._enlarge_in = 1 << self.num_bits
            self.num_bits += 1

    def finish(self) -> str:
        while True:
            self._value <<= 1
            if self._position == self._bits_per_char - 1:
                self._output.append(self._char_from_int(self._value))
                break
            self._position += 1
        return "".join(self._output)


def _compress(uncompressed: str, bits_per_char: int, char_from_int: Callable[[int], str]) -> str:
    text = "".join(map(chr, _to_units(uncompressed)))
    encoder = _Encoder(bits_per_char, char_from_int)
    dictionary: dict[str, int] = {}
    pending: set[str] = set()
    dict_size = 3

    def emit(phrase: str) -> None:
        if phrase in pending:
            code = ord(phrase[0])
            if code < 256:
                encoder.write(0, encoder.num_bits)
                encoder.write(code, 8)
            else:
                encoder.write(1, encoder.num_bits)
                encoder.write(code, 16)
            encoder.count_code()
            pending.discard(phrase)
        else:
            encoder.write(dictionary[phrase], encoder.num_bits)
        encoder.count_code()

    phrase = ""
    for char in text:
        if char not in dictionary:
            dictionary[char] = dict_size
            dict_size += 1
            pending.add(char)

        extended = phrase + char
        if extended in dictionary:
            phrase = extended
        else:
            emit(phrase)
            dictionary[extended] = dict_size
            dict_size += 1
            phrase = char

    if phrase:
        emit(phrase)

    encoder.write(2, encoder.num_bits)
    return encoder.finish()


class _Decoder:
    """Reads variable-width codes from a sequence of input values."""

    def __init__(self, values: Sequence[int], reset_value: int, transform: Callable[[int], int]) -> None:
        self._values = values
        self._reset_value = reset_value
        self._transform = transform
        self.index = 0
        self._value = self._next()
        self._position = reset_value

    def _next(self) -> int:
        raw = self._values[self.index] if self.index < len(self._values) else 0
        self.index += 1
        return self._transform(raw)

    def read(self, width: int) -> int:
        bits = 0
        for shift in range(width):
            resb = self._value & self._position
            self._position >>= 1
            if self._position == 0:
                self._position = self._reset_value
                self._value = self._next()
            if resb > 0:
                bits |= 1 << shift
        return bits


def _decompress(compressed: str, reset_value: int, transform: Callable[[int], int]) -> str:
    values = _to_units(compressed)
    length = len(values)
    decoder = _Decoder(values, reset_value, transform)

    # Slots 0-2 are reserved for the control codes and never read.
    dictionary: list[str] = ["0", "1", "2"]
    enlarge_in = 4
    num_bits = 3

    first = decoder.read(2)
    if first == 0:
        char = chr(decoder.read(8))
    elif first == 1:
        char = chr(decoder.read(16))
    elif first == 2:
        return ""
    else:
        char = ""

    dictionary.append(char)
    previous = char
    result: list[str] = [char]

    while True:
        if decoder.index > length:
            return ""

        code = decoder.read(num_bits)
        if code in (0, 1):
            dictionary.append(chr(decoder.read(8 if code == 0 else 16)))
            code = len(dictionary) - 1
            enlarge_in -= 1
        elif code == 2:
            return _from_units("".join(result))

        if enlarge_in == 0:
            enlarge_in = 1 << num_bits
            num_bits += 1

        if code < len(dictionary) and dictionary[code]:
            entry = dictionary[code]
        elif code == len(dictionary) and previous:
            entry = previous + previous[0]
        else:
            return ""

        result.append(entry)
        dictionary.append(previous + entry[0])
        enlarge_in -= 1
        previous = entry

        if enlarge_in == 0:
            enlarge_in = 1 << num_bits
            num_bits += 1


def compress(uncompressed: str) -> str:
    """Compress to a string of 16-bit characters."""
    return _compress(uncompressed, 16, chr)


def compress_to_utf16(uncompressed: str) -> str:
    """Compress to printable 15-bit characters, terminated by a space."""
    if not uncompressed:
        return ""
    return _compress(uncompressed, 15, lambda value: chr(value + 32)) + " "


def compress_to_base64(uncompressed: str) -> str:
    """Compress to a padded Base64 string."""
    if not uncompressed:
        return ""
    result = _compress(uncompressed, 6, _KEY_BASE64.__getitem__)
    remainder = len(result) % 4
    return result + "=" * (4 - remainder) if remainder else result


def decompress(compressed: str) -> str:
    """Decompress the output of :func:`compress`; invalid data gives ``""``."""
    if not compressed:
        return ""
    return _decompress(compressed, 32768, lambda value: value)


def decompress_from_utf16(compressed: str) -> str:
    """Decompress the output of :func:`compress_to_utf16`."""
    if not compressed:
        return ""
    return _decompress(compressed, 16384, lambda value: value - 32)


def decompress_from_base64(compressed: str) -> str:
    """Decompress the output of :func:`compress_to_base64`."""
    if not compressed:
        return ""
    return _decompress(compressed, 32, lambda value: _BASE64_REVERSE.get(chr(value), 0))