import re

MS_WORD_MATCHES = [
    re.compile(r'<meta\s*name="?generator"?\s*content="?microsoft\s*word\s*\d+"?/?>', re.IGNORECASE),
    re.compile(r'xmlns:o="urn:schemas-microsoft-com', re.IGNORECASE),
]


def is_active(html_string: str) -> bool:
    """Tell whether the markup was produced by Microsoft Word."""
    return any(regex.search(html_string) for regex in MS_WORD_MATCHES)
