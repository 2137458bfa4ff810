from .chat import ChatMessage
from .diff import FileChange, Hunk
from .review import ReviewComment

__all__ = [
    "ChatMessage",
    "FileChange",
    "Hunk",
    "ReviewComment",
]
