import random

import pytest
from termcolor import cprint

from models.compare import CompareOptions
from models.diff import LineKind
from services.line_differ import LineDiffer, common_subsequence
from services.line_tokenizer import split_lines


def kinds(side):
    return [slot.kind for slot in side]


def reference_lcs_length(a, b):
    """Quadratic dynamic-programming LCS length."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = table[i + 1][j + 1] + 1
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])
    return table[0][0]


U, I, D, P = LineKind.UNCHANGED, LineKind.INSERTED, LineKind.DELETED, LineKind.PLACEHOLDER


class TestCommonSubsequence:
    """Test suite for the Myers longest common subsequence."""

    def test_identical_sequences(self):
        """Test that identical sequences match at every index."""
        cprint(f"\n--- {self.test_identical_sequences.__doc__}", "yellow")

        assert common_subsequence(["a", "b", "c"], ["a", "b", "c"]) == [(0, 0), (1, 1), (2, 2)]

    def test_empty_inputs(self):
        """Test that an empty side has no common subsequence."""
        cprint(f"\n--- {self.test_empty_inputs.__doc__}", "yellow")

        assert common_subsequence([], []) == []
        assert common_subsequence([], ["a"]) == []
        assert common_subsequence(["a"], []) == []

    def test_disjoint_sequences(self):
        """Test that disjoint sequences share nothing."""
        cprint(f"\n--- {self.test_disjoint_sequences.__doc__}", "yellow")

        assert common_subsequence(["a", "b"], ["c", "d"]) == []

    def test_single_replacement(self):
        """Test the anchors around a single replaced element."""
        cprint(f"\n--- {self.test_single_replacement.__doc__}", "yellow")

        assert common_subsequence(["a", "b", "c"], ["a", "x", "c"]) == [(0, 0), (2, 2)]

    def test_classic_example_is_minimal(self):
        """Test the ABCABBA / CBABAC example has an LCS of length 4."""
        cprint(f"\n--- {self.test_classic_example_is_minimal.__doc__}", "yellow")

        a = list("ABCABBA")
        b = list("CBABAC")
        pairs = common_subsequence(a, b)

        assert len(pairs) == 4
        for (i1, j1), (i2, j2) in zip(pairs, pairs[1:]):
            assert i1 < i2 and j1 < j2
        for i, j in pairs:
            assert a[i] == b[j]

    def test_repeated_lines(self):
        """Test long runs of repeated lines."""
        cprint(f"\n--- {self.test_repeated_lines.__doc__}", "yellow")

        a = ["x"] * 50
        b = ["x"] * 30 + ["y"] + ["x"] * 20

        pairs = common_subsequence(a, b)
        assert len(pairs) == 50
        assert all(b[j] == "x" for _, j in pairs)

    def test_swapped_arguments_give_swapped_pairs(self):
        """Test that swapping the arguments swaps every matched pair."""
        cprint(f"\n--- {self.test_swapped_arguments_give_swapped_pairs.__doc__}", "yellow")

        a = ["c", "a", "a", "c", "b"]
        b = ["a", "c", "a"]
        assert common_subsequence(b, a) == [(j, i) for i, j in common_subsequence(a, b)]

    @pytest.mark.parametrize("alphabet", ["ab", "abc", "abcde"])
    def test_random_inputs_match_reference_length(self, alphabet):
        """Test LCS length and validity against a dynamic-programming reference."""
        cprint(f"\n--- {self.test_random_inputs_match_reference_length.__doc__}", "yellow")

        rng = random.Random(31337)
        for _ in range(500):
            a = [rng.choice(alphabet) for _ in range(rng.randint(0, 9))]
            b = [rng.choice(alphabet) for _ in range(rng.randint(0, 9))]
            pairs = common_subsequence(a, b)

            assert len(pairs) == reference_lcs_length(a, b)
            assert all(a[i] == b[j] for i, j in pairs)
            for (i1, j1), (i2, j2) in zip(pairs, pairs[1:]):
                assert i1 < i2 and j1 < j2
            assert common_subsequence(b, a) == [(j, i) for i, j in pairs]


class TestLineDiffer:
    """Test suite for the length-aligned classification."""

    def diff(self, old_text, new_text, options=None):
        return LineDiffer(options).diff(split_lines(old_text), split_lines(new_text))

    def test_identical_texts_have_no_padding(self):
        """Test that identical texts classify every line as unchanged."""
        cprint(f"\n--- {self.test_identical_texts_have_no_padding.__doc__}", "yellow")

        old_side, new_side = self.diff("a\nb\nc", "a\nb\nc")
        assert kinds(old_side) == [U, U, U]
        assert kinds(new_side) == [U, U, U]

    def test_sides_are_length_aligned(self):
        """Test that both sides always have the same length."""
        cprint(f"\n--- {self.test_sides_are_length_aligned.__doc__}", "yellow")

        pairs = [
            ("a\nb", "a\nb\nc"),
            ("a\nb\nc\nd", "x"),
            ("", "a\nb"),
            ("p\nq\nr", "q\ns\nt\nu\nr"),
        ]
        for old_text, new_text in pairs:
            old_side, new_side = self.diff(old_text, new_text)
            assert len(old_side) == len(new_side)

    def test_appended_line_is_padded_on_old_side(self):
        """Test that an insertion at the end pads the old side."""
        cprint(f"\n--- {self.test_appended_line_is_padded_on_old_side.__doc__}", "yellow")

        old_side, new_side = self.diff("a\nb", "a\nb\nc")
        assert kinds(old_side) == [U, U, P]
        assert kinds(new_side) == [U, U, I]
        assert old_side[2].line is None
        assert new_side[2].text == "c"

    def test_disjoint_texts_form_one_run(self):
        """Test that disjoint texts form a single padded change run."""
        cprint(f"\n--- {self.test_disjoint_texts_form_one_run.__doc__}", "yellow")

        old_side, new_side = self.diff("a\nb", "c")
        assert kinds(old_side) == [D, D]
        assert kinds(new_side) == [I, P]

    def test_change_runs_sit_between_anchors(self):
        """Test that change runs stay between their surrounding anchors."""
        cprint(f"\n--- {self.test_change_runs_sit_between_anchors.__doc__}", "yellow")

        old_side, new_side = self.diff("a\nb\nc\nd", "a\nx\nc\ny\nz")
        assert kinds(old_side) == [U, D, U, D, P]
        assert kinds(new_side) == [U, I, U, I, I]
        assert [slot.text for slot in new_side] == ["a", "x", "c", "y", "z"]

    def test_slots_keep_their_line_numbers(self):
        """Test that classified slots carry their source line numbers."""
        cprint(f"\n--- {self.test_slots_keep_their_line_numbers.__doc__}", "yellow")

        old_side, new_side = self.diff("a\nb", "a\nb\nc")
        assert [slot.line.number for slot in old_side if slot.line is not None] == [1, 2]
        assert [slot.line.number for slot in new_side if slot.line is not None] == [1, 2, 3]

    def test_ignore_case(self):
        """Test that ignore_case compares lines case-insensitively."""
        cprint(f"\n--- {self.test_ignore_case.__doc__}", "yellow")

        options = CompareOptions(ignore_case=True)
        old_side, new_side = self.diff("Hello\nWorld", "hello\nWORLD", options)
        assert kinds(old_side) == [U, U]
        assert [slot.text for slot in old_side] == ["Hello", "World"]
        assert [slot.text for slot in new_side] == ["hello", "WORLD"]

    def test_ignore_whitespace(self):
        """Test that ignore_whitespace ignores surrounding whitespace."""
        cprint(f"\n--- {self.test_ignore_whitespace.__doc__}", "yellow")

        options = CompareOptions(ignore_whitespace=True)
        old_side, _ = self.diff("  a\nb\t", "a  \nb", options)
        assert kinds(old_side) == [U, U]

    def test_no_normalization_by_default(self):
        """Test that whitespace and case differences count by default."""
        cprint(f"\n--- {self.test_no_normalization_by_default.__doc__}", "yellow")

        old_side, new_side = self.diff("a \nB", "a\nb")
        assert kinds(old_side) == [D, D]
        assert kinds(new_side) == [I, I]
