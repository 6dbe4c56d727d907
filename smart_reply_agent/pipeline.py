# smart_reply_agent/pipeline.py

import logging
from typing import Optional

from .classifier import classify
from .composer import compose
from .config import AppConfig, load_config
from .extractor import extract_fields
from .models import Category, GeneratedReply
from .templates import TEMPLATES

logger = logging.getLogger(__name__)


def process_email(
    text: str,
    category=None,
    config: Optional[AppConfig] = None,
) -> GeneratedReply:
    """
    - Use the forced `category` if one is given (Category or label)
    - Otherwise classify the email by keywords
    - Compose the reply from the category template
    """
    if config is None:
        config = load_config()

    forced = category is not None
    if forced:
        if not isinstance(category, Category):
            category = Category.from_label(category)
    else:
        category = classify(text)

    fields = extract_fields(text)
    reply = compose(text, category, your_name=config.signature, fields=fields)

    logger.info(
        "Generated %s reply (%s)",
        category,
        "forced" if forced else "detected",
    )

    return GeneratedReply(
        category=category,
        reply=reply,
        sender=fields.sender,
        topic=fields.topic,
        category_forced=forced,
    )


def print_summary(result: GeneratedReply) -> None:
    print("=" * 60)
    print("SMART REPLY SUMMARY")
    print("=" * 60)

    source = "selected manually" if result.category_forced else "auto-detected"
    print(f"Category : {result.category} ({source})")
    print(f"Sender   : {result.sender}")
    print(f"Topic    : {result.topic}")

    print("\nSuggested Reply Draft:")
    print("----------------------------------------")
    print(result.reply)
    print("----------------------------------------")


def print_templates() -> None:
    print("=" * 60)
    print("AVAILABLE TEMPLATES")
    print("=" * 60)

    for category, template in TEMPLATES:
        print(f"\n{category}")
        print(f"  {template.description}")
        if template.keywords:
            print(f"  Keywords: {', '.join(template.keywords)}")
