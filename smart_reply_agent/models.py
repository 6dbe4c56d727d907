from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Category(str, Enum):
    INQUIRY = "Inquiry"
    MEETING_REQUEST = "Meeting Request"
    FOLLOW_UP = "Follow Up"
    THANK_YOU = "Thank You"
    COMPLAINT = "Complaint"
    SUPPORT_REQUEST = "Support Request"
    INTRODUCTION = "Introduction"
    FEEDBACK = "Feedback"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str) -> "Category":
        """
        Resolve a display label like "thank you" or "Thank You".
        Raises ValueError for anything outside the fixed set.
        """
        wanted = (label or "").strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        raise ValueError(f"Unknown category label: {label!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ReplyTemplate:
    description: str
    body: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExtractedFields:
    sender: str
    topic: str


@dataclass
class GeneratedReply:
    category: Category
    reply: str
    sender: str = ""
    topic: str = ""
    category_forced: bool = False
