"""The rolling byte cipher used for files stored inside a data pack."""

from __future__ import annotations

_KEY_A = b"4RaS9D7KaEbxcp2o5r6t"
_KEY_B = b"3tRaUxLmEaSn"


def _swap_nybbles(value: int) -> int:
    return ((value & 0xF) << 4) | (value >> 4)


class Cipher:
    """Keystream state for one packed file, seeded from the file's size."""

    def __init__(self, file_size: int):
        self.string_no = (file_size & 0x1FC) >> 2
        self.pos_b = self.string_no % 9 + 1
        self.pos_a = self.string_no % self.pos_b + 1
        self.nybble_swap = False

    def _advance(self) -> None:
        self.pos_a += 1
        self.pos_b += 1
        if self.pos_a <= 19 or self.pos_b <= 11:
            if self.pos_a > 19:
                self.pos_a = 1
                self.nybble_swap = not self.nybble_swap
            if self.pos_b > 11:
                self.pos_b = 1
                self.nybble_swap = not self.nybble_swap
        else:
            self.string_no = (self.string_no + 1) & 0x7F
            if self.nybble_swap:
                self.nybble_swap = False
                self.pos_a = self.string_no % 12 + 6
                self.pos_b = self.string_no % 5 + 4
            else:
                self.nybble_swap = True
                self.pos_a = self.string_no % 15 + 3
                self.pos_b = self.string_no % 7 + 1

    def decrypt_byte(self, value: int) -> int:
        """Decrypt one stored byte and advance the keystream."""
        data = (_KEY_B[self.pos_b] ^ self.string_no ^ value) & 0xFF
        if self.nybble_swap:
            data = _swap_nybbles(data)
        data ^= _KEY_A[self.pos_a]
        self._advance()
        return data

    def encrypt_byte(self, value: int) -> int:
        """Encrypt one plain byte and advance the keystream."""
        data = (value & 0xFF) ^ _KEY_A[self.pos_a]
        if self.nybble_swap:
            data = _swap_nybbles(data)
        data ^= _KEY_B[self.pos_b] ^ self.string_no
        self._advance()
        return data & 0xFF

    def skip(self, count: int) -> None:
        """Advance the keystream as if ``count`` bytes had been processed."""
        for _ in range(count):
            self._advance()