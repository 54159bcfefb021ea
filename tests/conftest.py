import sys
import os
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "word"

WORD_DOCUMENT_TEMPLATE = """<html xmlns:o="urn:schemas-microsoft-com:office:office"
xmlns:w="urn:schemas-microsoft-com:office:word"
xmlns="http://www.w3.org/TR/REC-html40">
<head>
<meta http-equiv=Content-Type content="text/html; charset=utf-8">
<meta name=Generator content="Microsoft Word 15">
<style>
<!--
{styles}
-->
</style>
</head>
<body lang=EN-US>
<!--StartFragment-->{body}<!--EndFragment-->
</body>
</html>"""


@pytest.fixture
def load_word_fixture():
    """Returns a loader for the captured Word clipboard documents in fixtures/word."""
    def _load(name):
        with open(FIXTURES_DIR / name, "r", encoding="utf-8") as f:
            return f.read()
    return _load


@pytest.fixture
def word_document():
    """Wraps body markup and @list rules in a minimal Word clipboard document."""
    def _build(body, styles=""):
        return WORD_DOCUMENT_TEMPLATE.format(body=body, styles=styles)
    return _build
