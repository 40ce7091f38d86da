import unittest

from bs4 import BeautifulSoup

from src.docref.application.policies import identity_policy, keep_policy
from src.docref.domain.html_refs import (
    extract_html_links,
    extract_html_refs,
    extract_html_style_refs,
    rewrite_html_links,
    rewrite_html_refs,
    rewrite_html_style_refs,
)
from tests.utils.fixtures import read_fixture


def _attrs(html: str, tag: str, attr: str) -> list:
    soup = BeautifulSoup(html, "lxml")
    return [elem.get(attr) for elem in soup.find_all(tag)]


class HtmlExtractTests(unittest.TestCase):
    def setUp(self):
        self.body = read_fixture("f1.html")

    def test_resources_in_rule_order(self):
        refs = extract_html_refs(self.body, "fixture/f1.html")
        self.assertEqual(
            refs,
            [
                "/a.css",
                "/a.ico",
                "fixture/b/a.jpg",
                "fixture/b/a.jpg",
                "fixture/a.js",
                "https://www.example.com/a.html",
            ],
        )

    def test_resources_without_document_key(self):
        refs = extract_html_refs(self.body)
        self.assertEqual(refs[2:5], ["b/a.jpg", "b/a.jpg", "a.js"])

    def test_links(self):
        self.assertEqual(extract_html_links(self.body, "fixture/f1.html"), ["#ccc", "fixture/b.html"])

    def test_style_bodies(self):
        self.assertEqual(extract_html_style_refs(self.body, "fixture/f1.html"), ["fixture/img/hero.jpg"])

    def test_accepts_parsed_document(self):
        soup = BeautifulSoup(self.body, "lxml")
        self.assertEqual(extract_html_links(soup), ["#ccc", "b.html"])

    def test_anchor_exclusion(self):
        self.assertEqual(extract_html_refs('<a href="x.css">x</a>', "index.html"), [])
        self.assertEqual(
            extract_html_links('<img src="x.png"><script src="x.js"></script><link rel="stylesheet" href="x.css">'),
            [],
        )

    def test_other_link_relations_are_ignored(self):
        self.assertEqual(extract_html_refs('<link rel="preload" href="font.woff2">'), [])


class HtmlRewriteTests(unittest.TestCase):
    def setUp(self):
        self.body = read_fixture("f1.html")
        self.normalized = str(BeautifulSoup(self.body, "lxml"))

    def test_refs_null_setter(self):
        self.assertEqual(rewrite_html_refs(self.body, "fixture/f1.html", keep_policy), self.normalized)

    def test_links_null_setter(self):
        self.assertEqual(rewrite_html_links(self.body, "abc", keep_policy), self.normalized)

    def test_empty_string_setter_leaves_attributes(self):
        def empty(url, mime, absolute):
            return ""

        self.assertEqual(rewrite_html_refs(self.body, "fixture/f1.html", empty), self.normalized)
        self.assertEqual(rewrite_html_links(self.body, "fixture/f1.html", empty), self.normalized)

    def test_empty_attribute_is_passed_to_policy(self):
        calls = []

        def record(url, mime, absolute):
            calls.append((url, mime, absolute))
            return url + "#" + mime

        out = rewrite_html_refs('<img src=""><img>', None, record)
        self.assertEqual(calls, [("", "text/plain", True)])
        self.assertEqual(_attrs(out, "img", "src"), ["#text/plain", None])

    def test_refs_append_mime(self):
        out = rewrite_html_refs(self.body, "fixture/f1.html", lambda url, mime, absolute: f"{url}#{mime}")
        soup = BeautifulSoup(out, "lxml")
        self.assertEqual(soup.select_one('link[rel="stylesheet"]')["href"], "/a.css#text/css")
        self.assertEqual(soup.select_one('link[rel="shortcut icon"]')["href"], "/a.ico#image/x-icon")
        self.assertEqual(soup.select_one('link[rel="alternate"]')["href"], "feed.xml")
        self.assertEqual(_attrs(out, "img", "src"), ["fixture/b/a.jpg#image/jpeg", "fixture/b/a.jpg#image/jpeg", "#text/plain"])
        self.assertEqual(_attrs(out, "script", "src"), ["fixture/a.js#application/javascript", None])
        self.assertEqual(_attrs(out, "iframe", "src"), ["https://www.example.com/a.html#text/html"])
        self.assertEqual(_attrs(out, "a", "href"), ["#ccc", "b.html", None])

    def test_refs_policy_arguments(self):
        calls = []

        def record(url, mime, absolute):
            calls.append((url, mime, absolute))
            return None

        rewrite_html_refs(self.body, "fixture/f1.html", record)
        self.assertEqual(
            calls,
            [
                ("/a.css", "text/css", False),
                ("/a.ico", "image/x-icon", False),
                ("fixture/b/a.jpg", "image/jpeg", False),
                ("fixture/b/a.jpg", "image/jpeg", False),
                ("", "text/plain", True),
                ("fixture/a.js", "application/javascript", False),
                ("https://www.example.com/a.html", "text/html", True),
            ],
        )

    def test_links_without_document_key(self):
        out = rewrite_html_links(self.body, None, lambda url, mime, absolute: url + "?hello=world")
        self.assertEqual(_attrs(out, "a", "href"), ["#ccc?hello=world", "b.html?hello=world", None])
        self.assertEqual(_attrs(out, "img", "src"), ["b/a.jpg", "b/a.jpg", ""])

    def test_style_bodies(self):
        out = rewrite_html_style_refs(self.body, "fixture/f1.html", lambda url, mime, absolute: url + "?v=1")
        self.assertIn("url(fixture/img/hero.jpg?v=1)", out)
        self.assertEqual(_attrs(out, "img", "src"), ["b/a.jpg", "b/a.jpg", ""])

    def test_round_trip_with_identity_policy(self):
        before = extract_html_refs(self.body, "f1.html")
        rewritten = rewrite_html_refs(self.body, "f1.html", identity_policy)
        self.assertEqual(extract_html_refs(rewritten, "f1.html"), before)
        self.assertEqual(before[:3], ["/a.css", "/a.ico", "b/a.jpg"])
