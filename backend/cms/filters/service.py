"""
Text format lookup.

The default format is the enabled format with the lowest weight (ties
broken by machine name). When nothing is configured the plain text
fallback is used so rich-text values always carry a format.
"""

import logging
from typing import List

from sqlmodel import Session, select

from cms.models.filter_format import DEFAULT_FILTER_FORMATS, FilterFormat

logger = logging.getLogger(__name__)

FALLBACK_FORMAT = "plain_text"


class TextFormatService:
    def __init__(self, session: Session):
        self.session = session

    def list_formats(self, include_disabled: bool = False) -> List[FilterFormat]:
        query = select(FilterFormat)
        if not include_disabled:
            query = query.where(FilterFormat.status == True)  # noqa: E712
        formats = self.session.exec(query).all()
        return sorted(formats, key=lambda f: (f.weight, f.format))

    def default_format_id(self) -> str:
        formats = self.list_formats()
        if not formats:
            logger.debug("No text formats configured, using %s", FALLBACK_FORMAT)
            return FALLBACK_FORMAT
        return formats[0].format


def install_default_formats(session: Session) -> None:
    """Create the default text formats that do not exist yet"""
    created = 0
    for values in DEFAULT_FILTER_FORMATS:
        if session.get(FilterFormat, values["format"]) is None:
            session.add(FilterFormat(**values))
            created += 1
    if created:
        session.commit()
        logger.info(f"Installed {created} default text formats")
