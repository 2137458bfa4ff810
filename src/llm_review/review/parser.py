# src/llm_review/review/parser.py
import re
from llm_review.models.diff import FileChange
from llm_review.models.review import ReviewComment


COMMENT_PATTERN = re.compile(r"\[(\d{1,18})\]: (.+)", re.ASCII)


def parse_review_response(content: str, file_change: FileChange) -> list[ReviewComment]:
    """Extract `[LINE]: comment` lines that point into one of the file's hunks.

    Lines in any other shape, or with a line number outside every hunk,
    are dropped without error.
    """
    comments = []

    for line in content.split("\n"):
        line = line.removesuffix("\r")
        match = COMMENT_PATTERN.fullmatch(line)
        if not match:
            continue

        line_number = int(match.group(1))
        if any(hunk.contains(line_number) for hunk in file_change.hunks):
            comments.append(ReviewComment(line=line_number, comment=match.group(2)))

    return comments
