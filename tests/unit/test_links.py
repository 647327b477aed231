"""Unit tests for inline link stripping and footnote collection."""

import pytest

from vitae.contexts.templating.links import LinkCollector, has_inline_link, sanitize_links


class TestLinkStripping:
    """Links dropped, display text kept."""

    @pytest.mark.unit
    def test_single_link(self):
        assert sanitize_links("See [my site](https://example.com).") == "See my site."

    @pytest.mark.unit
    def test_multiple_links(self):
        text = "[A](https://a.example) and [B](https://b.example)"
        assert sanitize_links(text) == "A and B"

    @pytest.mark.unit
    def test_url_with_parentheses(self):
        text = "[Bayes](https://en.wikipedia.org/wiki/Bayes_(disambiguation)) rule"
        assert sanitize_links(text) == "Bayes rule"

    @pytest.mark.unit
    def test_plain_brackets_untouched(self):
        text = "Array [1, 2, 3] and (parenthetical)"
        assert sanitize_links(text) == text

    @pytest.mark.unit
    def test_none_and_empty_pass_through(self):
        assert sanitize_links(None) is None
        assert sanitize_links("") == ""

    @pytest.mark.unit
    def test_has_inline_link(self):
        assert has_inline_link("a [b](c)")
        assert not has_inline_link("a [b] c")
        assert not has_inline_link(None)


class TestFootnotes:
    """PDF export: numbered markers plus collected URLs."""

    @pytest.mark.unit
    def test_numbers_in_order_of_appearance(self):
        links = LinkCollector()
        text = sanitize_links("[A](https://a.example) then [B](https://b.example)", links)

        assert text == "A<sup>1</sup> then B<sup>2</sup>"
        assert links.urls == ["https://a.example", "https://b.example"]

    @pytest.mark.unit
    def test_numbering_continues_across_calls(self):
        links = LinkCollector()
        sanitize_links("[A](https://a.example)", links)
        text = sanitize_links("[C](https://c.example)", links)

        assert text == "C<sup>2</sup>"
        assert len(links) == 2

    @pytest.mark.unit
    def test_repeated_url_reuses_number(self):
        links = LinkCollector()
        text = sanitize_links("[A](https://a.example) and [again](https://a.example)", links)

        assert text == "A<sup>1</sup> and again<sup>1</sup>"
        assert links.urls == ["https://a.example"]

    @pytest.mark.unit
    def test_empty_url_not_collected(self):
        links = LinkCollector()
        assert sanitize_links("[A]()", links) == "A"
        assert len(links) == 0

    @pytest.mark.unit
    def test_empty_display_not_collected(self):
        links = LinkCollector()
        assert sanitize_links("[](https://a.example)", links) == ""
        assert len(links) == 0


class TestUnbalancedBrackets:
    """Stray brackets don't stop later links from being stripped."""

    @pytest.mark.unit
    def test_half_open_interval_before_link(self):
        text = "Grades in [0, 1) range, see [site](https://x.example)"
        assert sanitize_links(text) == "Grades in [0, 1) range, see site"

    @pytest.mark.unit
    def test_unclosed_url_before_link(self):
        links = LinkCollector()
        text = sanitize_links("[a](broken and [b](https://b.example)", links)

        assert "[b](" not in text
        assert text.endswith("b<sup>1</sup>")
        assert links.urls == ["https://b.example"]

    @pytest.mark.unit
    def test_lone_bracket_left_alone(self):
        assert sanitize_links("a [ b") == "a [ b"
