"""
Rolling hash computation for window-based change detection.

Each window of a text is treated as a base-256 number reduced modulo a
large prime. The first window is hashed directly; every following window
is derived from the previous one in constant time by removing the
outgoing byte, shifting one position and adding the incoming byte.

Equal windows always hash equal. Different windows may collide, in which
case the range locator treats them as unchanged.
"""

BASE = 256
MODULUS = 1_000_000_007


class Hasher:
    """
    Computes rolling window hashes over byte sequences.

    Hash values are normalized into [0, MODULUS) by Python's modulo, and the
    same formula is used for every sequence, so hashes of two texts can be
    compared position by position.
    """

    def __init__(self, base: int = BASE, modulus: int = MODULUS):
        self.base = base
        self.modulus = modulus

    def hash_window(self, text: bytes, window_size: int) -> int:
        """
        Hash the first `window_size` bytes of a text directly.

        Args:
            text: Bytes to hash
            window_size: Number of leading bytes in the window

        Returns:
            Hash of text[0:window_size]
        """
        value = 0
        for i in range(window_size):
            value = (value * self.base + text[i]) % self.modulus
        return value

    def window_hashes(self, text: bytes, window_size: int) -> list[int]:
        """
        Compute the hash of every window of a text.

        Args:
            text: Bytes to scan
            window_size: Window length, must be positive

        Returns:
            One hash per window start offset 0..len(text)-window_size.
            Empty when the text is shorter than the window.
        """
        if window_size <= 0:
            raise ValueError(f"window size must be positive, got {window_size}")

        n = len(text)
        if n < window_size:
            return []

        # Weight of the outgoing byte: base^(window_size-1)
        high = pow(self.base, window_size - 1, self.modulus)

        current = self.hash_window(text, window_size)
        hashes = [current]

        for i in range(1, n - window_size + 1):
            current = (current - high * text[i - 1]) % self.modulus
            current = (current * self.base + text[i + window_size - 1]) % self.modulus
            hashes.append(current)

        return hashes
