"""
Recovers list semantics from the style sheet Word embeds in clipboard HTML.

Word describes every list level in a CSS at-rule such as::

    @list l0:level2
        {mso-level-number-format:alpha-lower;
        mso-level-text:"%2\\)";
        mso-level-start-at:3;}

and tags each paragraph with ``mso-list:l0 level2 lfo1``. The helpers below
map a paragraph back to the container type, marker style and start index of
the list it belongs to.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import Comment, NavigableString

logger = logging.getLogger(__name__)

LIST_STYLE_TYPE = re.compile(r'mso-level-number-format:([^;]{0,100});', re.IGNORECASE)
LIST_START_INDEX = re.compile(r'mso-level-start-at:\s{0,100}([0-9]{0,10})\s{0,100};', re.IGNORECASE)

UNORDERED_FORMATS = ('bullet', 'image')

NUMBER_FORMAT_STYLES = {
    'alpha-upper': 'upper-alpha',
    'alpha-lower': 'lower-alpha',
    'roman-upper': 'upper-roman',
    'roman-lower': 'lower-roman',
    'circle': 'circle',
    'disc': 'disc',
    'square': 'square',
}

MIDDLE_DOT = chr(183)
# Word writes '§' for the black square marker.
SQUARE_MARKER = '§'


@dataclass
class ListStyle:
    type: str = 'ol'
    style: Optional[str] = None
    start_index: Optional[int] = None
    is_legal_style_list: bool = False
    # Start index comes from a restart override for this list instance
    start_override: bool = False


class StyleSheet:
    """Style text of one pasted document, with per-list lookups cached."""

    def __init__(self, text):
        self.text = text or ''
        self._rules = {}
        self._legal = {}

    def _search(self, pattern):
        return re.search(pattern, self.text, re.IGNORECASE)

    def level_rule(self, list_id, level, order=None):
        """Body of the ``@list l<id>:level<n>`` block, or None."""
        key = (list_id, level, order)
        if key not in self._rules:
            selector = f'@list l{re.escape(str(list_id))}:level{level}'
            if order is not None:
                selector += rf'\s+lfo{re.escape(str(order))}'
            match = self._search(selector + r'\s*(\{[^}]*)')
            self._rules[key] = match.group(1) if match else None
        return self._rules[key]

    def is_legal_style_list(self, list_id):
        """
        Multi-level lists in Word carry mso-level-number-format on their
        levels, except legal ("1.1.2") lists. A list with a legal level text
        and no number format anywhere is a legal list.
        """
        if list_id not in self._legal:
            list_ref = rf'@list\s+l{re.escape(str(list_id))}:level\d\s*\{{[^{{]*'
            legal_match = self._search(list_ref + r'mso-level-text:"%\d\\.')
            number_format_match = self._search(list_ref + r'mso-level-number-format:')
            self._legal[list_id] = bool(legal_match) and not number_format_match
        return self._legal[list_id]


def map_list_style_definition(value):
    if value.startswith('arabic-leading-zero'):
        return 'decimal-leading-zero'
    return NUMBER_FORMAT_STYLES.get(value)


def find_list_marker_node(element):
    # Leading text means the marker is not rendered in this paragraph.
    for child in element.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            if child.strip():
                return None
            continue
        break

    # The marker sits in a <span>; anchors and other tags may come first.
    return element.find('span', recursive=False)


def find_bulleted_list_style(element):
    marker_node = find_list_marker_node(element)
    if marker_node is None:
        return None

    marker = marker_node.get_text().strip()
    if marker == 'o':
        return 'circle'
    if marker[:1] == MIDDLE_DOT:
        return 'disc'
    if marker == SQUARE_MARKER:
        return 'square'
    return None


def detect_list_style(list_like_item, stylesheet):
    """
    Resolve the list container for a list-like paragraph.

    Args:
        list_like_item: ListItemCandidate with list_id, order, indent and element.
        stylesheet: StyleSheet (or raw style text) of the pasted document.

    Returns:
        ListStyle. Without a matching @list rule this is an ordered list with
        the default numbering and no start index.
    """
    if not isinstance(stylesheet, StyleSheet):
        stylesheet = StyleSheet(stylesheet)

    list_style = ListStyle()
    if list_like_item.list_id is None:
        return list_style

    list_style_type = 'decimal'
    rule = stylesheet.level_rule(list_like_item.list_id, list_like_item.indent)
    if rule:
        type_match = LIST_STYLE_TYPE.search(rule)
        if type_match and type_match.group(1):
            list_style_type = type_match.group(1).strip()
            list_style.type = 'ul' if list_style_type in UNORDERED_FORMATS else 'ol'

        # Word's bullet hint in CSS is unreliable; the rendered marker is not.
        if list_style_type == 'bullet':
            bulleted_style = find_bulleted_list_style(list_like_item.element)
            if bulleted_style:
                list_style_type = bulleted_style
        elif list_style.type == 'ol':
            list_style.start_index = _start_index(rule)
            override = stylesheet.level_rule(list_like_item.list_id, list_like_item.indent, list_like_item.order)
            override_start = _start_index(override) if override else None
            if override_start is not None:
                list_style.start_index = override_start
                list_style.start_override = True

        if stylesheet.is_legal_style_list(list_like_item.list_id):
            list_style.is_legal_style_list = True
            list_style.type = 'ol'
    else:
        logger.debug(f"No @list rule for l{list_like_item.list_id}:level{list_like_item.indent}")

    list_style.style = map_list_style_definition(list_style_type)
    return list_style


def _start_index(rule):
    match = LIST_START_INDEX.search(rule)
    if match and match.group(1):
        return int(match.group(1))
    return None
