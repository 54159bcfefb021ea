"""
Thin tree helpers over BeautifulSoup.

The list engine and the cleanup pass only need parsing, inline-style access,
a few node predicates and serialization. Everything else is the plain bs4
Tag API (find_all, new_tag, insert_before, append, decompose).
"""
import logging

from bs4 import BeautifulSoup, FeatureNotFound, Tag

logger = logging.getLogger(__name__)

LIST_TAGS = ('ul', 'ol')


def parse_document(markup, parser='lxml'):
    """Parse markup with the given tree builder, or html.parser when it is not installed."""
    try:
        return BeautifulSoup(markup, parser)
    except FeatureNotFound:
        logger.warning(f"Tree builder '{parser}' unavailable, falling back to html.parser")
        return BeautifulSoup(markup, 'html.parser')


def parse_fragment(markup, parser='html.parser'):
    """Parse a body fragment without adding <html>/<body> wrappers."""
    return parse_document(markup, parser)


def inner_html(node):
    return node.decode_contents()


def parse_style(style_string):
    """
    Split an inline style attribute into a {property: value} dict.
    Declarations without a property or a value are dropped.
    """
    styles = {}
    if not style_string:
        return styles

    for declaration in style_string.split(';'):
        prop, _, value = declaration.partition(':')
        prop = prop.strip()
        value = value.strip()
        if prop and value:
            styles[prop] = value
    return styles


def serialize_style(styles):
    return ';'.join(f"{prop}:{value}" for prop, value in styles.items())


def is_list(node):
    return isinstance(node, Tag) and node.name in LIST_TAGS


def is_element_empty(element):
    return not element.get_text() and not element.decode_contents().strip()
