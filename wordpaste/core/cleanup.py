import logging
import re

from .dom import is_element_empty

logger = logging.getLogger(__name__)

MSO_PREFIX = re.compile(r'\bmso', re.IGNORECASE)

# Removed with their content.
REMOVED_TAGS = ('w:sdt',)
# Removed only when they hold nothing.
REMOVED_WHEN_EMPTY_TAGS = ('w:sdtpr', 'o:p')


def remove_mso_classes(element):
    classes = element.get('class')
    if not classes:
        return
    if isinstance(classes, str):
        classes = classes.split()

    kept = [name for name in classes if not MSO_PREFIX.search(name)]
    if kept:
        element['class'] = kept
    else:
        del element['class']


def remove_mso_styles(element):
    """Strip every mso-* declaration from the inline style, keep the rest."""
    current_style = element.get('style')
    if current_style is None:
        return

    declarations = [declaration.strip() for declaration in current_style.split(';')]
    kept = [
        declaration for declaration in declarations
        if declaration and not MSO_PREFIX.search(declaration.split(':', 1)[0].strip())
    ]
    if kept:
        element['style'] = ';'.join(kept)
    else:
        del element['style']


def remove_ms_attributes(soup):
    """Remove Word classes, mso-* styles and Word-only elements from the tree."""
    elements_to_remove = []

    for element in soup.find_all(True):
        remove_mso_classes(element)
        remove_mso_styles(element)

        if element.name in REMOVED_TAGS:
            elements_to_remove.append(element)
        elif element.name in REMOVED_WHEN_EMPTY_TAGS and is_element_empty(element):
            elements_to_remove.append(element)

    for element in elements_to_remove:
        if element.decomposed:
            continue
        element.decompose()

    if elements_to_remove:
        logger.debug(f"Removed {len(elements_to_remove)} Word-only elements")
