"""
Tests for the rolling window hasher.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from diffing.hasher import BASE, MODULUS, Hasher


class TestWindowHashes:
    """Tests for rolling hash sequences."""

    def test_one_hash_per_window_start(self):
        """Test that a text of n bytes has n - w + 1 windows."""
        hashes = Hasher().window_hashes(b"abcabcabcabc", 8)

        assert len(hashes) == 5

    def test_first_hash_is_positional_number(self):
        """Test the first window against the direct base-256 formula."""
        text = b"abcdefgh"
        expected = sum(byte * BASE ** (7 - i) for i, byte in enumerate(text)) % MODULUS

        assert Hasher().window_hashes(text, 8)[0] == expected

    def test_rolled_hashes_match_direct_hashes(self):
        """Test that every rolled hash equals hashing its window from scratch."""
        hasher = Hasher()
        text = b"The quick brown fox jumps over the lazy dog \xff\x00\x80"

        for window in (1, 2, 8, 13):
            rolled = hasher.window_hashes(text, window)
            direct = [
                hasher.hash_window(text[i:i + window], window)
                for i in range(len(text) - window + 1)
            ]
            assert rolled == direct

    def test_hashes_stay_in_modulus_range(self):
        """Test that hashes are normalized into [0, MODULUS)."""
        hashes = Hasher().window_hashes(bytes(range(256)) * 4, 8)

        assert all(0 <= value < MODULUS for value in hashes)

    def test_equal_windows_hash_equal(self):
        """Test that repeated content produces repeated hashes."""
        hashes = Hasher().window_hashes(b"abcabcabcabcabc", 3)

        assert hashes[0] == hashes[3] == hashes[6] == hashes[9]
        assert hashes[0] != hashes[1]

    def test_text_shorter_than_window(self):
        """Test that short texts have no windows."""
        assert Hasher().window_hashes(b"abc", 8) == []

    def test_text_equal_to_window(self):
        """Test that a text exactly one window long has one hash."""
        assert len(Hasher().window_hashes(b"abcdefgh", 8)) == 1

    def test_non_positive_window_rejected(self):
        """Test that a zero window size is rejected."""
        with pytest.raises(ValueError):
            Hasher().window_hashes(b"abc", 0)
