"""
wordpaste - clean up HTML pasted from Microsoft Word

Rebuilds real <ul>/<ol> nesting from Word's mso-list paragraphs and strips
Word-only markup so rich-text editors get portable HTML.
"""

from .core.config import NormalizerConfig, DEFAULT_CONFIG
from .core.detector import is_active
from .core.normalizer import MSWordNormalizer, normalize
from .core.preprocess import ParsedHtml, parse_html, normalize_spacing
from .core.styles import ListStyle, StyleSheet, detect_list_style

__version__ = "1.0.0"
__all__ = [
    "MSWordNormalizer",
    "NormalizerConfig",
    "DEFAULT_CONFIG",
    "ParsedHtml",
    "ListStyle",
    "StyleSheet",
    "is_active",
    "normalize",
    "parse_html",
    "normalize_spacing",
    "detect_list_style",
]
