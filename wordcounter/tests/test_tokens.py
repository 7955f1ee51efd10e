import unittest

from wordcounter.tokens import (
    SEPARATORS, is_separator_run, next_token, tokenize)


class TestNextToken(unittest.TestCase):

    def test_word_and_separator_runs(self):
        text = "Hello, world!?"
        self.assertEqual(next_token(text, 0), "Hello")
        self.assertEqual(next_token(text, 5), ", ")
        self.assertEqual(next_token(text, 7), "world")
        self.assertEqual(next_token(text, 12), "!?")

    def test_starts_inside_run(self):
        self.assertEqual(next_token("abc--def", 1), "bc")
        self.assertEqual(next_token("abc--def", 4), "-")

    def test_run_to_end_of_text(self):
        self.assertEqual(next_token("word", 0), "word")
        self.assertEqual(next_token("a ...", 1), " ...")

    def test_non_separator_punctuation_is_word(self):
        self.assertEqual(next_token("don't (really)", 0), "don't")
        self.assertEqual(next_token("don't (really)", 6), "(really)")
        self.assertEqual(next_token("tab\there", 0), "tab\there")

    def test_custom_separators(self):
        self.assertEqual(next_token("a+b c", 0, {"+"}), "a")
        self.assertEqual(next_token("a+b c", 2, {"+"}), "b c")

    def test_position_out_of_range(self):
        with self.assertRaises(AssertionError):
            next_token("abc", 3)
        with self.assertRaises(AssertionError):
            next_token("abc", -1)
        with self.assertRaises(AssertionError):
            next_token("", 0)

    def test_none_inputs(self):
        with self.assertRaises(AssertionError):
            next_token(None, 0)
        with self.assertRaises(AssertionError):
            next_token("abc", 0, None)


class TestTokenize(unittest.TestCase):

    def test_sentence(self):
        self.assertEqual(
            list(tokenize("the cat sat on the mat.")),
            ["the", " ", "cat", " ", "sat", " ", "on", " ", "the", " ",
             "mat", "."])

    def test_reconstructs_text(self):
        lines = [
            "the cat sat on the mat.",
            "  leading and trailing  ",
            "--/;:!?.,",
            "one",
            "What? No - really: yes/no; ok.",
        ]
        for line in lines:
            tokens = list(tokenize(line))
            self.assertEqual("".join(tokens), line)
            for token in tokens:
                self.assertTrue(token)
                categories = {char in SEPARATORS for char in token}
                self.assertEqual(len(categories), 1)

    def test_runs_alternate(self):
        tokens = list(tokenize("a, b. c!"))
        kinds = [is_separator_run(token) for token in tokens]
        for first, second in zip(kinds, kinds[1:]):
            self.assertNotEqual(first, second)

    def test_empty_text(self):
        self.assertEqual(list(tokenize("")), [])


if __name__ == "__main__":
    unittest.main()
