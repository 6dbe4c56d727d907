"""
Unit tests for reply composition.
"""
import re

import pytest

from smart_reply_agent.composer import (
    COMPLAINT_RESOLUTION,
    FOLLOW_UP_STATUS,
    INTRODUCTION_COLLABORATION,
    MEETING_AVAILABILITY,
    THANK_YOU_ACTION,
    THANK_YOU_COMMENTS,
    compose,
)
from smart_reply_agent.models import Category, ExtractedFields, ReplyTemplate
from smart_reply_agent.responses import CATEGORY_RESPONSES, FALLBACK_RESPONSE

PLACEHOLDER_RE = re.compile(r"\{[A-Za-z]+\}")

SUPPORT_EMAIL = (
    "Subject: Login page\n"
    "The login page keeps failing.\n"
    "Thanks,\n"
    "Raj Patel"
)


class TestCompose:

    def test_inquiry_end_to_end(self, inquiry_email):
        reply = compose(inquiry_email, Category.INQUIRY)

        assert reply.startswith("Dear Jane Doe,")
        assert "Thank you for your inquiry about Pricing." in reply
        assert CATEGORY_RESPONSES[Category.INQUIRY] in reply
        assert reply.endswith("Your Name")

    @pytest.mark.parametrize("category", list(Category))
    def test_no_placeholder_left(self, category, inquiry_email):
        reply = compose(inquiry_email, category)
        assert PLACEHOLDER_RE.search(reply) is None

    @pytest.mark.parametrize("category", list(Category))
    def test_empty_text_still_composes(self, category):
        reply = compose("", category)
        assert reply.startswith("Dear Sender,")
        assert PLACEHOLDER_RE.search(reply) is None

    def test_meeting_request_uses_fixed_availability(self, inquiry_email):
        reply = compose(inquiry_email, Category.MEETING_REQUEST)

        assert f"I would be happy to meet with you. {MEETING_AVAILABILITY}" in reply
        assert "Alternatively" not in reply

    def test_follow_up_uses_fixed_status(self, inquiry_email):
        reply = compose(inquiry_email, Category.FOLLOW_UP)

        assert FOLLOW_UP_STATUS in reply
        assert CATEGORY_RESPONSES[Category.FOLLOW_UP] not in reply

    def test_thank_you_literals(self, inquiry_email):
        reply = compose(inquiry_email, Category.THANK_YOU)

        assert f"It was my pleasure to {THANK_YOU_ACTION}." in reply
        assert THANK_YOU_COMMENTS in reply

    def test_complaint_uses_topic_as_issue(self, inquiry_email):
        reply = compose(inquiry_email, Category.COMPLAINT)

        assert "inconvenience you've experienced regarding Pricing." in reply
        assert COMPLAINT_RESOLUTION in reply
        assert "Sincerely,\nYour Name" in reply

    def test_support_request_uses_troubleshooting_steps(self):
        reply = compose(SUPPORT_EMAIL, Category.SUPPORT_REQUEST)

        assert reply.startswith("Dear Raj Patel,")
        assert "support team about Login page." in reply
        assert CATEGORY_RESPONSES[Category.SUPPORT_REQUEST] in reply
        assert reply.endswith("Your Name\nSupport Team")

    def test_introduction(self, inquiry_email):
        reply = compose(inquiry_email, Category.INTRODUCTION)

        assert CATEGORY_RESPONSES[Category.INTRODUCTION] in reply
        assert f"the possibility of {INTRODUCTION_COLLABORATION}." in reply

    def test_feedback(self, inquiry_email):
        reply = compose(inquiry_email, Category.FEEDBACK)
        assert CATEGORY_RESPONSES[Category.FEEDBACK] in reply

    def test_unknown(self, inquiry_email):
        reply = compose(inquiry_email, Category.UNKNOWN)
        assert "I have received your message regarding Pricing." in reply

    def test_label_string_is_accepted(self, inquiry_email):
        assert compose(inquiry_email, "Feedback") == compose(inquiry_email, Category.FEEDBACK)

    def test_unrecognized_category_uses_unknown_template(self, inquiry_email):
        reply = compose(inquiry_email, "Bogus")

        assert reply == compose(inquiry_email, Category.UNKNOWN)
        assert FALLBACK_RESPONSE not in reply

    def test_given_fields_are_used(self):
        fields = ExtractedFields(sender="Kim Lee", topic="Billing")
        reply = compose("", Category.FEEDBACK, fields=fields)

        assert reply.startswith("Dear Kim Lee,")
        assert "your feedback regarding Billing." in reply

    def test_custom_signature(self, inquiry_email):
        reply = compose(inquiry_email, Category.INQUIRY, your_name="Pat Lee")
        assert reply.endswith("Best regards,\nPat Lee")


class TestFirstOccurrenceOnly:
    """Each placeholder is filled once; later copies stay as written"""

    @pytest.fixture
    def store(self):
        body = "{sender} and {sender}: {customResponse} / {customResponse}"
        return ((Category.INQUIRY, ReplyTemplate("Repeated", body)),)

    def test_repeated_placeholders(self, store):
        reply = compose("Regards,\nAnn", Category.INQUIRY, templates=store)
        response = CATEGORY_RESPONSES[Category.INQUIRY]

        assert reply == f"Ann and {{sender}}: {response} / {{customResponse}}"
