import unittest

from lipsum.text import capitalize, join_title, join_words, strip_punctuation


class TestJoinWords(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(join_words([]), "")

    def test_capitalizes_first_word(self):
        self.assertEqual(join_words(["lorem", "ipsum"]), "Lorem ipsum.")

    def test_keeps_terminal_punctuation(self):
        self.assertEqual(join_words(["foo", "bar."]), "Foo bar.")
        self.assertEqual(join_words(["foo", "bar!"]), "Foo bar!")
        self.assertEqual(join_words(["foo", "bar?"]), "Foo bar?")

    def test_replaces_trailing_comma(self):
        self.assertEqual(join_words(["foo", "bar,"]), "Foo bar.")

    def test_strips_all_trailing_ascii_punctuation(self):
        self.assertEqual(join_words(["foo", "bar;:-"]), "Foo bar.")
        self.assertEqual(join_words(["foo", "'bar'"]), "Foo 'bar.")

    def test_capitalizes_after_sentence_end(self):
        self.assertEqual(join_words(["foo.", "bar", "baz!", "quux?", "end"]),
                         "Foo. Bar baz! Quux? End.")

    def test_no_capitalization_after_comma(self):
        self.assertEqual(join_words(["foo,", "bar"]), "Foo, bar.")

    def test_unicode_first_character(self):
        self.assertEqual(join_words(["élan", "vital"]), "Élan vital.")

    def test_accepts_iterators(self):
        self.assertEqual(join_words(iter(["a", "b"])), "A b.")

    def test_bare_join(self):
        self.assertEqual(join_words(["foo.", "bar,"], bare=True), "foo. bar,")
        self.assertEqual(join_words([], bare=True), "")


class TestTitle(unittest.TestCase):

    def test_capitalize(self):
        self.assertEqual(capitalize("ipsum"), "Ipsum")
        self.assertEqual(capitalize(""), "")
        self.assertEqual(capitalize("Ipsum"), "Ipsum")

    def test_strip_punctuation(self):
        self.assertEqual(list(strip_punctuation(["'foo,", "--", "bar."])), ["foo", "bar"])

    def test_join_title(self):
        self.assertEqual(join_title(["sed", "ut", "perspiciatis", "unde"]),
                         "Sed ut Perspiciatis unde")

    def test_join_title_has_no_terminal_punctuation(self):
        self.assertFalse(join_title(["lorem", "ipsum"]).endswith("."))


if __name__ == "__main__":
    unittest.main()
