import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class NormalizerConfig:
    """Options for a Word paste normalization run."""

    # Adds the legal-outline class to lists numbered like "1.1.2".
    # Off by default: only hosts with multi-level list support render it.
    legal_list_support = False
    legal_list_class = "legal-list"

    # BeautifulSoup tree builders
    document_parser = "lxml"
    fragment_parser = "html.parser"

    _KEYS = ("legal_list_support", "legal_list_class", "document_parser", "fragment_parser")

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if key not in self._KEYS:
                raise TypeError(f"Unknown normalizer option: {key}")
            setattr(self, key, value)

    @classmethod
    def from_file(cls, config_path):
        """
        Load overrides from a JSON object file kept by the host application.
        The normalizer itself never reads files. Falls back to the defaults
        when the file is missing or unreadable.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            logger.warning(f"Normalizer config not found at {config_path}, using defaults.")
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read normalizer config {config_path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.error(f"Normalizer config {config_path} must hold a JSON object.")
            return cls()

        overrides = {}
        for key, value in data.items():
            if key in cls._KEYS:
                overrides[key] = value
            else:
                logger.warning(f"Ignoring unknown normalizer option '{key}' in {config_path}")
        return cls(**overrides)

    def as_dict(self):
        return {key: getattr(self, key) for key in self._KEYS}

    def __repr__(self):
        return f"NormalizerConfig({self.as_dict()})"


# Shared default instance. Treat as read-only.
DEFAULT_CONFIG = NormalizerConfig()
