import logging
import re
from typing import Optional
from markupsafe import Markup, escape

from app.constants import ADDRESS_POLICY, MARKUP_POLICY, SANITIZE_POLICIES
from app.schemas.diagram import DiagramInputs

logger = logging.getLogger(__name__)

# Characters that are not allowed anywhere in an XML 1.0 document.
_NON_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
_ADDRESS_CHARS = re.compile(r"[0-9./]+")


class SanitizeError(ValueError):
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def sanitize(raw: str, policy: str = MARKUP_POLICY) -> str:
    """
    Make one untrusted value safe to splice into the SVG as text content.

    ``markup`` strips tags and comments, then escapes whatever is left so no
    markup-significant character survives unescaped. ``address`` accepts
    only digits, dots and forward slashes and returns the value unchanged.
    """
    if policy not in SANITIZE_POLICIES:
        raise ValueError(f"Unknown sanitize policy: {policy}")

    if _NON_XML_CHARS.search(raw):
        raise SanitizeError("Value contains characters not allowed in SVG text")

    if policy == ADDRESS_POLICY:
        if not _ADDRESS_CHARS.fullmatch(raw):
            raise SanitizeError("Value may only contain digits, dots and '/'")
        return raw

    # striptags() also decodes entities, so check and escape the result again.
    text = Markup(raw).striptags()
    if _NON_XML_CHARS.search(text):
        raise SanitizeError("Value contains characters not allowed in SVG text")
    return str(escape(text))


def sanitize_inputs(inputs: DiagramInputs, policy: str = MARKUP_POLICY) -> DiagramInputs:
    """ Sanitize all five fields; the first failing field aborts the whole set. """
    cleaned = {}
    for field, value in inputs.model_dump().items():
        try:
            cleaned[field] = sanitize(value, policy)
        except SanitizeError as e:
            logger.warning(f"Rejected '{field}' under {policy} policy: {e}")
            raise SanitizeError(str(e), field=field) from e
    return DiagramInputs(**cleaned)
