from .models import ChatMessage, FileChange, Hunk, ReviewComment
from .review import ReviewService, create_review_service, parse_review_response

__version__ = "0.1.0"

__all__ = [
    "ChatMessage",
    "FileChange",
    "Hunk",
    "ReviewComment",
    "ReviewService",
    "create_review_service",
    "parse_review_response",
]
