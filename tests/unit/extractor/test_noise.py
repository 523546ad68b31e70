"""
Unit tests for the boilerplate predicates.
"""

import pytest
from bs4 import BeautifulSoup

from pagesift.extractor.noise import is_noise_element, is_noise_identifier


class TestIsNoiseIdentifier:
    """Test cases for is_noise_identifier."""

    @pytest.mark.parametrize(
        "identifier",
        ["sidebar", "Site-Header", "cookie-consent", "top-ad", "ad_slot", "adsense-unit", "main-nav", "hero"],
    )
    def test_noise_identifiers(self, identifier):
        assert is_noise_identifier(identifier) is True

    @pytest.mark.parametrize("identifier", ["content", "article-body", "download", "leader", "readme", "post"])
    def test_content_identifiers(self, identifier):
        """A bare "ad" inside a word is not an advertising marker."""
        assert is_noise_identifier(identifier) is False


class TestIsNoiseElement:
    """Test cases for is_noise_element."""

    def _element(self, html: str):
        return BeautifulSoup(html, "html.parser").find()

    def test_noise_tag(self):
        assert is_noise_element(self._element("<form><input></form>")) is True
        assert is_noise_element(self._element("<aside>x</aside>")) is True

    def test_noise_id(self):
        assert is_noise_element(self._element('<div id="comments">x</div>')) is True

    def test_any_noise_class_token(self):
        assert is_noise_element(self._element('<div class="wrapper share-bar">x</div>')) is True

    def test_plain_element(self):
        assert is_noise_element(self._element('<div class="entry" id="post-1">x</div>')) is False
