# smart_reply_agent/composer.py

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .extractor import extract_fields
from .models import Category, ExtractedFields
from .responses import generate_response
from .templates import TEMPLATES, TemplateStore, get_template

logger = logging.getLogger(__name__)

DEFAULT_SIGNATURE = "Your Name"

MEETING_AVAILABILITY = "I am available this Thursday at 2:00 PM or Friday at 10:00 AM (Eastern Time)."
FOLLOW_UP_STATUS = "We have made significant progress on the project since our last communication."
THANK_YOU_ACTION = "assist you with your request"
THANK_YOU_COMMENTS = "Your satisfaction is important to us, and I'm glad we were able to meet your expectations."
COMPLAINT_RESOLUTION = (
    "I have escalated this issue to our senior management team. We will be conducting a thorough "
    "investigation and will get back to you within 24 hours with a resolution."
)
INTRODUCTION_COLLABORATION = "working together in the future"

Replacements = List[Tuple[str, str]]

# category -> (topic, response) -> [(placeholder, value), ...], applied in order
CATEGORY_PLACEHOLDERS: Dict[Category, Callable[[str, str], Replacements]] = {
    Category.MEETING_REQUEST: lambda topic, response: [
        ("{acceptanceOrAlternative}", MEETING_AVAILABILITY),
    ],
    Category.FOLLOW_UP: lambda topic, response: [
        ("{statusUpdate}", FOLLOW_UP_STATUS),
    ],
    Category.THANK_YOU: lambda topic, response: [
        ("{action}", THANK_YOU_ACTION),
        ("{additionalComments}", THANK_YOU_COMMENTS),
    ],
    Category.COMPLAINT: lambda topic, response: [
        ("{issue}", topic),
        ("{resolutionSteps}", COMPLAINT_RESOLUTION),
    ],
    Category.SUPPORT_REQUEST: lambda topic, response: [
        ("{issue}", topic),
        ("{troubleshootingSteps}", response),
    ],
    Category.INTRODUCTION: lambda topic, response: [
        ("{responseToIntroduction}", response),
        ("{potentialCollaboration}", INTRODUCTION_COLLABORATION),
    ],
    Category.FEEDBACK: lambda topic, response: [
        ("{responseToFeedback}", response),
    ],
}


def _default_placeholders(topic: str, response: str) -> Replacements:
    return [("{customResponse}", response)]


def _replace_first(text: str, placeholder: str, value: str) -> str:
    # Only the first occurrence is filled; a repeated placeholder stays as-is.
    return text.replace(placeholder, value, 1)


def compose(
    text: str,
    category,
    your_name: str = DEFAULT_SIGNATURE,
    templates: TemplateStore = TEMPLATES,
    fields: Optional[ExtractedFields] = None,
) -> str:
    """
    Build the reply for `text` using the template of `category`.

    Common placeholders ({sender}, {topic}, {yourName}) are filled first,
    then the category-specific ones from CATEGORY_PLACEHOLDERS. Categories
    without an entry get {customResponse}. Pass `fields` to reuse an
    extraction already done by the caller.
    """
    try:
        category = Category(category)
    except ValueError:
        logger.debug("Composing with unrecognized category %r", category)

    template = get_template(category, templates)

    if fields is None:
        fields = extract_fields(text)
    sender, topic = fields.sender, fields.topic
    response = generate_response(text, category)

    reply = template.body
    reply = _replace_first(reply, "{sender}", sender)
    reply = _replace_first(reply, "{topic}", topic)
    reply = _replace_first(reply, "{yourName}", your_name)

    placeholders = CATEGORY_PLACEHOLDERS.get(category, _default_placeholders)
    for placeholder, value in placeholders(topic, response):
        reply = _replace_first(reply, placeholder, value)

    logger.debug("Composed %s reply for sender=%r topic=%r", category, sender, topic)
    return reply
