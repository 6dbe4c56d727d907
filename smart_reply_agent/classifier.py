# smart_reply_agent/classifier.py

import logging

from .models import Category
from .templates import TEMPLATES, TemplateStore

logger = logging.getLogger(__name__)

# Checked in order, only when no template keyword matched.
FALLBACK_RULES = (
    (("meet", "schedule", "availability"), Category.MEETING_REQUEST),
    (("thank", "appreciate"), Category.THANK_YOU),
    (("issue", "problem", "not working"), Category.SUPPORT_REQUEST),
)


def classify(text: str, templates: TemplateStore = TEMPLATES) -> Category:
    """
    Keyword-based classification of an email body.

    - Walks the template store in order (Unknown excluded) and returns the
      first category with any keyword present as a substring.
    - Falls back to a few hardcoded heuristics.
    - Returns Category.UNKNOWN if nothing matched.
    """
    content = (text or "").lower()

    for category, template in templates:
        if category is Category.UNKNOWN:
            continue

        for keyword in template.keywords:
            if keyword.lower() in content:
                logger.debug("Keyword %r matched %s", keyword, category)
                return category

    for words, category in FALLBACK_RULES:
        if any(word in content for word in words):
            logger.debug("Fallback heuristic matched %s", category)
            return category

    return Category.UNKNOWN
