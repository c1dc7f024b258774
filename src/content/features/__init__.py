# Post features: quiz grading, share links, table of contents

from .quiz import QuizResult, grade_quiz
from .share import ShareLinks, build_share_links
from .toc import TocEntry, extract_table_of_contents

__all__ = [
    "QuizResult",
    "grade_quiz",
    "ShareLinks",
    "build_share_links",
    "TocEntry",
    "extract_table_of_contents",
]
