from .diff import parse_file_changes
from .guidelines import load_project_prompts, read_project_prompts
from .parser import parse_review_response
from .prompts import build_diff_description, build_pr_info_messages, build_review_messages
from .service import ReviewService, create_review_service

__all__ = [
    "parse_file_changes",
    "load_project_prompts",
    "read_project_prompts",
    "parse_review_response",
    "build_diff_description",
    "build_pr_info_messages",
    "build_review_messages",
    "ReviewService",
    "create_review_service",
]
