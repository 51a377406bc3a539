"""
Tests for readme_check.links.extractor

Covers strict URL matching, markdown delimiters, trailing punctuation,
bracket balancing, ordering and duplicates.
"""

import pytest

from readme_check.links.extractor import extract_urls, iter_urls


class TestExtractUrls:
    def test_empty_text(self):
        assert extract_urls("") == []

    def test_text_without_urls(self):
        assert extract_urls("## Goals\n\nNo links here.") == []

    def test_markdown_link_excludes_closing_paren(self):
        text = "See the [docs](https://example.com/docs/intro) for details."
        assert extract_urls(text) == ["https://example.com/docs/intro"]

    def test_angle_bracket_autolink(self):
        assert extract_urls("<https://www.apache.org/licenses/LICENSE-2.0>") == [
            "https://www.apache.org/licenses/LICENSE-2.0"
        ]

    def test_trailing_period_trimmed(self):
        assert extract_urls("Visit https://example.com/docs.") == ["https://example.com/docs"]

    def test_trailing_bold_markers_trimmed(self):
        assert extract_urls("**https://example.com/a**") == ["https://example.com/a"]

    def test_balanced_parentheses_kept(self):
        url = "https://en.wikipedia.org/wiki/Terraform_(software)"
        assert extract_urls(f"Read {url} first") == [url]

    def test_balanced_parentheses_inside_markdown_link(self):
        url = "https://en.wikipedia.org/wiki/Terraform_(software)"
        assert extract_urls(f"[wiki]({url})") == [url]

    def test_query_and_fragment(self):
        url = "https://example.com/search?q=vpc&page=2#results"
        assert extract_urls(url) == [url]

    def test_localhost_with_port(self):
        assert extract_urls("curl http://localhost:8080/health") == ["http://localhost:8080/health"]

    def test_ipv4_host(self):
        assert extract_urls("http://10.0.0.1/status") == ["http://10.0.0.1/status"]

    def test_table_cell_link(self):
        text = "| [aws_vpc.this](https://registry.terraform.io/providers/hashicorp/aws/latest) | resource |"
        assert extract_urls(text) == ["https://registry.terraform.io/providers/hashicorp/aws/latest"]

    def test_bare_url_in_table_cell(self):
        assert extract_urls("| docs | https://example.com/a |") == ["https://example.com/a"]

    def test_link_text_and_target_both_extracted(self):
        text = "[https://example.com](https://example.com)"
        assert extract_urls(text) == ["https://example.com", "https://example.com"]

    def test_duplicates_kept_in_order(self):
        text = "https://b.example.org then https://a.example.org then https://b.example.org"
        assert extract_urls(text) == [
            "https://b.example.org",
            "https://a.example.org",
            "https://b.example.org",
        ]

    @pytest.mark.parametrize("text", [
        "example.com",
        "www.example.com/path",
        "https://",
        "https://localhostx",
        "https://example.c0m",
        "mailto:team@example.com",
    ])
    def test_rejects_non_urls(self, text):
        assert extract_urls(text) == []

    def test_scheme_is_case_insensitive(self):
        assert extract_urls("HTTPS://Example.COM/Path") == ["HTTPS://Example.COM/Path"]

    def test_iter_urls_is_lazy(self):
        urls = iter_urls("https://example.com and https://example.org")
        assert next(urls) == "https://example.com"
        assert next(urls) == "https://example.org"
        with pytest.raises(StopIteration):
            next(urls)
