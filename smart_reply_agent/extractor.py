# smart_reply_agent/extractor.py

import re

from .models import ExtractedFields

DEFAULT_SENDER = "Sender"
DEFAULT_TOPIC = "your recent email"

SIGNATURE_RE = re.compile(r"(?:regards|sincerely|best|thanks),?\s*\n*([A-Za-z\s]+)", re.IGNORECASE)
FROM_RE = re.compile(r"from:\s*([A-Za-z\s]+)", re.IGNORECASE)
SUBJECT_RE = re.compile(r"subject:\s*([^\n]+)", re.IGNORECASE)
SENTENCE_END_RE = re.compile(r"[.!?](?:\s|$)")


def extract_sender(text: str) -> str:
    """
    Guess the sender's name from a closing like "Regards,\\nJane Doe",
    then from a "From: Jane Doe" header. Falls back to "Sender".
    """
    text = text or ""

    for pattern in (SIGNATURE_RE, FROM_RE):
        match = pattern.search(text)
        if match:
            name = match.group(1).strip()
            if name:
                return name

    return DEFAULT_SENDER


def extract_topic(text: str) -> str:
    """
    Use the "Subject:" line if there is one, otherwise the first sentence
    when it is a reasonable length. Falls back to "your recent email".
    """
    text = text or ""

    match = SUBJECT_RE.search(text)
    if match:
        subject = match.group(1).strip()
        if subject:
            return subject

    first_sentence = SENTENCE_END_RE.split(text, maxsplit=1)[0].strip()
    if 10 < len(first_sentence) < 100:
        return first_sentence

    return DEFAULT_TOPIC


def extract_fields(text: str) -> ExtractedFields:
    return ExtractedFields(sender=extract_sender(text), topic=extract_topic(text))
