import logging

from .cleanup import remove_ms_attributes
from .config import DEFAULT_CONFIG
from .detector import is_active
from .dom import inner_html, parse_fragment
from .lists import transform_list_item_like_elements_into_lists
from .preprocess import parse_html

logger = logging.getLogger(__name__)


class MSWordNormalizer:
    """
    Turns HTML copied out of Microsoft Word into a clean body fragment with
    real nested lists and no Word-specific markup.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else DEFAULT_CONFIG

    def is_active(self, html_string: str) -> bool:
        return is_active(html_string)

    def normalize(self, html_string: str) -> str:
        """
        Normalize a Word clipboard document.

        Args:
            html_string: Full HTML document (head with <style>, and body).

        Returns:
            str: innerHTML of the normalized body. Non-Word input is
            preprocessed and cleaned but its list structure is left alone.
        """
        body_string = html_string
        try:
            body_string, styles_string = parse_html(html_string, self.config.document_parser)
            soup = parse_fragment(body_string, self.config.fragment_parser)
            found = 0
            # List structure is only rebuilt for markup Word produced.
            if is_active(html_string):
                found = transform_list_item_like_elements_into_lists(soup, styles_string, self.config)
            remove_ms_attributes(soup)
        except Exception as e:
            # Hand back what we have rather than failing the paste.
            logger.error(f"Word paste normalization failed: {e}", exc_info=True)
            return body_string

        logger.debug(f"Normalized Word paste with {found} list items")
        return inner_html(soup)


def normalize(html_string, config=None):
    """Normalize Word clipboard HTML with a one-off normalizer."""
    return MSWordNormalizer(config).normalize(html_string)
