"""
Rebuilds nested <ul>/<ol> markup from Word's flat list paragraphs.

Word does not nest list items. Each item is an ordinary block element whose
inline style carries ``mso-list:l<id> level<n> lfo<m>``. The reconstructor
walks those blocks in document order with a stack of open lists, one frame
per indentation depth, and moves every block into an <li> of the right list.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .config import DEFAULT_CONFIG
from .dom import is_list, parse_style, serialize_style
from .styles import StyleSheet, detect_list_style

logger = logging.getLogger(__name__)

LIST_LIKE_TAGS = ['p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'li', 'div']

LIST_ID = re.compile(r'(^|\s{1,100})l(\d+)', re.IGNORECASE)
LIST_ORDER = re.compile(r'\s{0,100}lfo(\d+)', re.IGNORECASE)
LIST_INDENT = re.compile(r'\s{0,100}level(\d+)', re.IGNORECASE)


@dataclass
class ListItemCandidate:
    element: Tag
    list_id: Optional[str] = None
    order: Optional[str] = None
    indent: Optional[int] = None


@dataclass
class ListLevelFrame:
    list_id: Optional[str]
    order: Optional[str]
    indent: int
    list_element: Tag
    list_item_elements: List[Tag] = field(default_factory=list)


def get_list_item_data(styles):
    """
    Read list id, list-format-override and level from an ``mso-list`` value.
    Values that do not carry all three become a single-level item.
    """
    list_style = styles.get('mso-list')
    if list_style is None:
        return {}

    id_match = LIST_ID.search(list_style)
    order_match = LIST_ORDER.search(list_style)
    indent_match = LIST_INDENT.search(list_style)

    if id_match and order_match and indent_match:
        return {
            'list_id': id_match.group(2),
            'order': order_match.group(1),
            'indent': int(indent_match.group(1)),
        }

    return {'indent': 1}


def is_list_continuation(item):
    """
    An item continues the open lists only when it directly follows a list
    container. The same list id after another block is a new list.
    """
    previous_sibling = item.element.previous_sibling
    if previous_sibling is None:
        # An <li> already sitting in a <ul>/<ol>.
        return is_list(item.element.parent)
    return is_list(previous_sibling)


def create_new_empty_list(soup, list_style, has_multi_level_list_plugin=False, legal_list_class='legal-list'):
    list_element = soup.new_tag(list_style.type)

    # Markers cannot differ per item, so the style goes on the container.
    if list_style.style:
        list_element['style'] = serialize_style({'list-style-type': list_style.style})

    if list_style.start_index and list_style.start_index > 1:
        list_element['start'] = str(list_style.start_index)

    if list_style.is_legal_style_list and has_multi_level_list_plugin:
        list_element['class'] = [legal_list_class]

    return list_element


def remove_mso_list_ignore_spans(element):
    """Drop the marker glyph Word renders in front of every list paragraph."""
    for span in element.find_all('span'):
        if span.decomposed:
            continue
        if parse_style(span.get('style', '')).get('mso-list', '').lower() == 'ignore':
            span.decompose()


class ListReconstructor:
    """
    One list reconstruction pass over a parsed fragment.

    The stack and the encountered-list counters live on the instance, so a
    new reconstructor is created for every document.
    """

    def __init__(self, soup: BeautifulSoup, stylesheet, config=None):
        self.soup = soup
        self.stylesheet = stylesheet if isinstance(stylesheet, StyleSheet) else StyleSheet(stylesheet)
        self.config = config if config is not None else DEFAULT_CONFIG
        self.stack: List[ListLevelFrame] = []
        # "<list id>:<level>" -> next ordinal of a top level list
        self.encountered_lists = {}

    def find_candidates(self):
        """Snapshot of the list-like elements, in document order."""
        candidates = []
        for element in self.soup.find_all(LIST_LIKE_TAGS):
            styles = parse_style(element.get('style', ''))
            if 'mso-list' not in styles:
                continue

            # Already nested correctly by Word.
            if element.parent is None or is_list(element.parent):
                continue

            candidates.append(ListItemCandidate(element=element, **get_list_item_data(styles)))
        return candidates

    def run(self):
        candidates = self.find_candidates()
        if not candidates:
            return 0

        logger.debug(f"Found {len(candidates)} list-like elements")
        for item in candidates:
            if item.indent is None:
                continue
            self._place(item)
        return len(candidates)

    def _place(self, item):
        stack = self.stack

        if not is_list_continuation(item):
            del stack[:]

        list_key = f"{item.list_id}:{item.indent}"

        # 0-based depth, at most one level below the deepest open list.
        indent = min(item.indent - 1, len(stack))

        # The list id changed at this depth: the nested lists below end here.
        if indent < len(stack) and stack[indent].list_id != item.list_id:
            del stack[indent:]

        if indent < len(stack) - 1:
            del stack[indent + 1:]
        else:
            list_style = detect_list_style(item, self.stylesheet)
            if indent > len(stack) - 1 or stack[indent].list_element.name != list_style.type:
                self._open_list(item, indent, list_style, list_key)

        frame = stack[indent]
        element = item.element
        list_item = element if element.name == 'li' else self.soup.new_tag('li')

        frame.list_element.append(list_item)
        frame.list_item_elements.append(list_item)

        # No counter when the top level list was opened by a deeper item.
        if indent == 0 and list_key in self.encountered_lists:
            self.encountered_lists[list_key] += 1

        if element is not list_item:
            list_item.append(element)

        remove_mso_list_ignore_spans(element)

    def _open_list(self, item, indent, list_style, list_key):
        stack = self.stack

        # A top level list seen earlier resumes its numbering.
        if (
            indent == 0
            and list_style.type == 'ol'
            and item.list_id is not None
            and self.encountered_lists.get(list_key)
            and not list_style.start_override
        ):
            list_style.start_index = self.encountered_lists[list_key]

        list_element = create_new_empty_list(
            self.soup,
            list_style,
            self.config.legal_list_support,
            self.config.legal_list_class,
        )

        if indent == 0:
            element = item.element
            if element.find_next_sibling() is None:
                element.parent.append(list_element)
            else:
                element.insert_before(list_element)
        else:
            parent_list_items = stack[indent - 1].list_item_elements
            if parent_list_items:
                parent_list_items[-1].append(list_element)

        frame = ListLevelFrame(
            list_id=item.list_id,
            order=item.order,
            indent=item.indent,
            list_element=list_element,
        )
        if indent < len(stack):
            stack[indent] = frame
        else:
            stack.append(frame)

        if indent == 0 and item.list_id is not None:
            self.encountered_lists[list_key] = list_style.start_index or 1

        logger.debug(
            f"Opened <{list_style.type}> at depth {indent} for list l{item.list_id} "
            f"(style={list_style.style}, start={list_style.start_index})"
        )


def transform_list_item_like_elements_into_lists(soup, styles_string, config=None):
    """Rebuild list structure in place. Returns the number of list-like elements found."""
    return ListReconstructor(soup, styles_string, config).run()
