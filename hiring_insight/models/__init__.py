from .posting import (
    CommentError,
    JobPosting,
    ParsedIssue,
    Position,
    RawComment,
    SkippedComment,
)

__all__ = [
    "CommentError",
    "JobPosting",
    "ParsedIssue",
    "Position",
    "RawComment",
    "SkippedComment",
]
