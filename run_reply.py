# run_reply.py

import argparse
import sys
from typing import List, Optional

from smart_reply_agent.config import load_config
from smart_reply_agent.email_source import get_default_email_source
from smart_reply_agent.logging_setup import setup_logging
from smart_reply_agent.models import Category
from smart_reply_agent.pipeline import print_summary, print_templates, process_email


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a reply draft for a received email.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="File holding the email text, or '-' to read stdin (default)",
    )
    parser.add_argument(
        "--category",
        type=Category.from_label,
        choices=list(Category),
        metavar="LABEL",
        help=(
            "Use this template instead of auto-detecting the email type: "
            + ", ".join(c.value for c in Category)
        ),
    )
    parser.add_argument("--signature", help="Name to sign the reply with")
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List the available templates and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (defaults to LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config()
    if args.signature:
        config.signature = args.signature
    setup_logging(args.log_level or config.log_level)

    if args.list_templates:
        print_templates()
        return 0

    source = get_default_email_source(args.path, encoding=config.input_encoding)
    try:
        text = source.get_email_text()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error while reading email: {e}", file=sys.stderr)
        return 1

    result = process_email(text, category=args.category, config=config)
    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
