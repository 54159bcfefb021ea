import pytest

from wordpaste.core.detector import is_active


class TestWordDetection:
    def test_generator_meta_tag(self):
        """
        Verifies the Generator meta tag Word writes to the clipboard is recognized
        """
        html = '<html><head><meta name=Generator content="Microsoft Word 15"></head><body></body></html>'
        assert is_active(html)

    @pytest.mark.parametrize("meta", [
        '<meta name="Generator" content="Microsoft Word 12">',
        '<meta name=generator content=Microsoft Word 16/>',
        '<META NAME="GENERATOR" CONTENT="MICROSOFT WORD 14">',
    ])
    def test_generator_variants(self, meta):
        assert is_active(f"<html><head>{meta}</head></html>")

    def test_office_namespace(self):
        html = '<html xmlns:o="urn:schemas-microsoft-com:office:office"><body><p>Hi</p></body></html>'
        assert is_active(html)

    def test_fixture_documents(self, load_word_fixture):
        for name in ("bulleted_nested.html", "numbered_restart.html", "legal_outline.html", "mixed_content.html"):
            assert is_active(load_word_fixture(name)), name

    @pytest.mark.parametrize("html", [
        "",
        "<p>Plain paragraph</p>",
        '<html><head><meta name="generator" content="LibreOffice"></head></html>',
        '<html><head><meta name="Generator" content="Microsoft Excel 15"></head></html>',
        '<p class="MsoNormal">Copied class but no Word markers</p>',
    ])
    def test_non_word_markup(self, html):
        assert not is_active(html)
