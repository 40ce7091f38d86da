import unittest

from src.docref.domain.uri import is_absolute, resolve_against


class IsAbsoluteTests(unittest.TestCase):
    def test_absolute_urls(self):
        for url in (
            "http://abc.com",
            "https://abc.com",
            "ftp://abc.com",
            "//abc.com",
            "#abc",
            "data:image/svg+xml;base64,abc+==",
            "MAILTO:someone@abc.com",
        ):
            with self.subTest(url=url):
                self.assertTrue(is_absolute(url))

    def test_empty_url_counts_as_absolute(self):
        self.assertTrue(is_absolute(""))
        self.assertTrue(is_absolute(None))

    def test_relative_urls(self):
        for url in ("/abc.jpg", "a/abc.jpg", "../abc.jpg", "./abc.jpg", "abc.jpg?x=1"):
            with self.subTest(url=url):
                self.assertFalse(is_absolute(url))


class ResolveAgainstTests(unittest.TestCase):
    def test_empty_url(self):
        self.assertEqual(resolve_against("abc.jpg", ""), "")

    def test_sibling_at_root(self):
        self.assertEqual(resolve_against("abc.jpg", "abc.txt"), "abc.txt")

    def test_sibling_in_directory(self):
        self.assertEqual(resolve_against("a/abc.jpg", "abc.txt"), "a/abc.txt")

    def test_parent_segment_collapses(self):
        self.assertEqual(resolve_against("a/abc.jpg", "../abc.txt"), "abc.txt")

    def test_current_segment_collapses(self):
        self.assertEqual(resolve_against("a/b/abc.css", "./img/../x.png"), "a/b/x.png")

    def test_root_relative_is_unchanged(self):
        self.assertEqual(resolve_against("a/b/abc.css", "/img/x.png"), "/img/x.png")

    def test_trailing_slash_is_kept(self):
        self.assertEqual(resolve_against("a/index.html", "docs/"), "a/docs/")
