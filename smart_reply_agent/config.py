# smart_reply_agent/config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .composer import DEFAULT_SIGNATURE


@dataclass
class AppConfig:
    signature: str = DEFAULT_SIGNATURE
    log_level: str = "INFO"
    input_encoding: str = "utf-8"


def load_config() -> AppConfig:
    """
    Build the app config from the environment (a local .env is loaded first).

    REPLY_SIGNATURE       name used for {yourName} (default "Your Name")
    LOG_LEVEL             DEBUG | INFO | WARNING | ERROR
    REPLY_INPUT_ENCODING  encoding for email files read by the CLI
    """
    load_dotenv()

    return AppConfig(
        signature=os.getenv("REPLY_SIGNATURE", DEFAULT_SIGNATURE).strip() or DEFAULT_SIGNATURE,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        input_encoding=os.getenv("REPLY_INPUT_ENCODING", "utf-8"),
    )
