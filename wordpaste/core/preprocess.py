"""
String-level repairs applied to Word clipboard HTML before it is parsed.

Word's export relies on browser quirks: conditional comments that hide
content, namespace tags in the head, junk after </body> and whitespace that
only survives thanks to "spacerun" spans. The helpers below undo those so
that a generic HTML parser sees what Word rendered.
"""
import logging
import re
from typing import NamedTuple

from bs4 import Tag

from .dom import parse_document, inner_html

logger = logging.getLogger(__name__)

NBSP = '\u00a0'

VML_CONDITIONAL_OPEN = re.compile(r'<!--\[if gte vml 1\]>')
# Left behind once the opener above is gone.
ORPHAN_CONDITIONAL_CLOSE = re.compile(r'<!\[endif\]-->')
# "Downlevel-revealed" markers, e.g. <![if !supportLists]> ... <![endif]>
DOWNLEVEL_MARKER = re.compile(r'<!\[(?:if\s[^\]]*|endif)\]>', re.IGNORECASE)

# <o:SmartTagType> with optional attributes, with or without values.
SMART_TAG_TYPE = re.compile(r'<o:SmartTagType(?:\s+[^\s>=]+(?:="[^"]*")?)*\s*/?>', re.IGNORECASE)

SAFARI_SPACE_SPAN = re.compile(r'<span(?: class="Apple-converted-space"|)>(\s+)</span>')
SPACERUN_NEWLINES = re.compile(
    r'''(<span\s+style=['"]mso-spacerun:yes['"]>[^\S\r\n]*?)[\r\n]+([^\S\r\n]*</span>)'''
)
EMPTY_SPACERUN = re.compile(r'''<span\s+style=['"]mso-spacerun:yes['"]></span>''')
LETTER_SPACING_NEWLINES = re.compile(r'''(<span\s+style=['"]letter-spacing:[^'"]+?['"]>)[\r\n]+(</span>)''')
BLOCK_FILLER = re.compile('<o:p>(&nbsp;|\u00a0)</o:p>')
FORMATTING_WHITESPACE = re.compile(r'>([^\S\r\n]*[\r\n]\s*)<')

CSS_COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)
CSS_RULE = re.compile(r'[^\s{}][^{}]*\{[^{}]*\}')

BODY_CLOSE_TAG = '</body>'
HTML_CLOSE_TAG = '</html>'


class ParsedHtml(NamedTuple):
    body_string: str
    styles_string: str


def alternating_spaces(length):
    """Non-breaking/regular space run that survives whitespace collapsing."""
    return ((NBSP + ' ') * length)[:length]


def remove_conditional_markers(html_string):
    # Content inside "if gte vml" comments would be hidden from the parser.
    html_string = VML_CONDITIONAL_OPEN.sub('', html_string)
    html_string = ORPHAN_CONDITIONAL_CLOSE.sub('<!--[endif]-->', html_string)
    return DOWNLEVEL_MARKER.sub('', html_string)


def remove_smart_tag_types(html_string):
    return SMART_TAG_TYPE.sub('', html_string)


def clean_content_after_body(html_string):
    """Drop whatever Word appended between </body> and </html>."""
    body_close_index = html_string.find(BODY_CLOSE_TAG)
    if body_close_index < 0:
        return html_string

    body_end = body_close_index + len(BODY_CLOSE_TAG)
    html_close_index = html_string.find(HTML_CLOSE_TAG, body_end)

    tail = html_string[html_close_index:] if html_close_index >= 0 else ''
    return html_string[:body_end] + tail


def _safari_space(match):
    spaces = match.group(1)
    if len(spaces) == 1:
        return ' '
    return alternating_spaces(len(spaces))


def normalize_safari_space_spans(html_string):
    return SAFARI_SPACE_SPAN.sub(_safari_space, html_string)


def normalize_spacing(html_string):
    # Twice, to cover spans nested one level deep.
    html_string = normalize_safari_space_spans(normalize_safari_space_spans(html_string))

    # Newlines inside spacerun spans would be eaten by the last rule below.
    html_string = SPACERUN_NEWLINES.sub(r'\1\2', html_string)
    html_string = EMPTY_SPACERUN.sub('', html_string)
    html_string = LETTER_SPACING_NEWLINES.sub(r'\1 \2', html_string)

    html_string = html_string.replace(' </', NBSP + '</')
    html_string = html_string.replace(' <o:p></o:p>', NBSP + '<o:p></o:p>')

    # Filler of an empty paragraph. Safari writes a raw U+00A0 instead of &nbsp;.
    html_string = BLOCK_FILLER.sub('', html_string)

    return FORMATTING_WHITESPACE.sub('><', html_string)


def normalize_spacerun_spans(soup):
    for span in soup.find_all('span', style=lambda value: value and 'spacerun' in value):
        length = len(span.get_text())
        span.string = alternating_spaces(length)


def _has_css_rule(css_text):
    css_text = CSS_COMMENT.sub('', css_text).replace('<!--', '').replace('-->', '')
    return CSS_RULE.search(css_text) is not None


def extract_styles(soup):
    styles = []
    for style in soup.find_all('style'):
        if not isinstance(style, Tag):
            continue
        css_text = style.get_text()
        if _has_css_rule(css_text):
            styles.append(css_text)
    return ' '.join(styles)


def parse_html(html_string, parser='lxml'):
    """
    Repair Word clipboard HTML and split it into the body markup and the
    text of its embedded style sheets.

    Args:
        html_string: Full HTML document as found on the clipboard.
        parser: BeautifulSoup tree builder used for the document pass.

    Returns:
        ParsedHtml(body_string, styles_string)
    """
    html_string = remove_conditional_markers(html_string)
    html_string = remove_smart_tag_types(html_string)
    html_string = normalize_spacing(clean_content_after_body(html_string))

    soup = parse_document(html_string, parser)
    normalize_spacerun_spans(soup)

    # Read the body before anything else touches the tree.
    body = soup.body
    body_string = inner_html(body) if body else inner_html(soup)

    styles_string = extract_styles(soup)
    logger.debug(f"Preprocessed {len(html_string)} chars, {len(styles_string)} chars of styles")

    return ParsedHtml(body_string, styles_string)
