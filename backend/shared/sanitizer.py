"""
Free-text sanitization.

Wraps nh3 (the ammonia HTML sanitizer) with the two policies the backend
needs: a safe-HTML subset for user content and a strip-everything mode
for profile fields rendered as plain text.
"""

import html
from typing import Optional

import nh3

from .exceptions import EmptyContentError


class Sanitizer:
    """
    HTML sanitizer for user-supplied text.

    Stateless; construct one and inject it into the services that
    persist free text.
    """

    def sanitize(self, value: Optional[str]) -> str:
        """
        Remove dangerous markup, keeping nh3's default safe tag set.

        Script and style elements are dropped together with their content.
        """
        if value is None or not value.strip():
            return ""
        return nh3.clean(value)

    def strip_all_html(self, value: Optional[str]) -> str:
        """
        Remove every tag and return plain text with entities decoded.
        """
        if value is None or not value.strip():
            return ""
        stripped = nh3.clean(value, tags=set(), attributes={})
        return html.unescape(stripped)

    def sanitize_required(self, value: Optional[str], field: str = "Content") -> str:
        """
        Like sanitize, but the result must still hold visible text.

        Raises:
            EmptyContentError: If nothing but markup or whitespace remains.
        """
        cleaned = self.sanitize(value)
        if not self.strip_all_html(cleaned).strip():
            raise EmptyContentError(field)
        return cleaned

    def strip_all_html_required(self, value: Optional[str], field: str) -> str:
        """
        Like strip_all_html, but an empty result is rejected.

        Raises:
            EmptyContentError: If nothing but markup or whitespace remains.
        """
        text = self.strip_all_html(value).strip()
        if not text:
            raise EmptyContentError(field)
        return text
