from cms.filters.service import FALLBACK_FORMAT, TextFormatService, install_default_formats

__all__ = [
    "FALLBACK_FORMAT",
    "TextFormatService",
    "install_default_formats",
]
