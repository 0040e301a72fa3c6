"""Tests for display-width measurement and fixed-width name cells."""

import unittest

from pylsh import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_wide_characters_count_twice_and_ansi_counts_zero(self) -> None:
        self.assertEqual(ansi_mod.display_width("ab"), 2)
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.display_width("\033[31mab\033[0m"), 2)
        self.assertEqual(ansi_mod.display_width("é"), 1)


class FitToWidthTests(unittest.TestCase):
    def test_short_names_are_padded(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abc", 6), "abc   ")

    def test_exact_fit_is_unchanged(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abcdef", 6), "abcdef")

    def test_long_names_are_truncated_with_marker(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abcdefgh", 6), "abcde~")

    def test_wide_character_never_straddles_the_boundary(self) -> None:
        fitted = ansi_mod.fit_to_width("a日本語", 4)

        self.assertEqual(ansi_mod.display_width(fitted), 4)
        self.assertEqual(fitted, "a日~")

    def test_control_characters_are_neutralized(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("a\x1b[2Jb", 6), "a?[2Jb")

    def test_non_positive_width_is_empty(self) -> None:
        self.assertEqual(ansi_mod.fit_to_width("abc", 0), "")


if __name__ == "__main__":
    unittest.main()
