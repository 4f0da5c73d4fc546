from enum import Enum

class MangaState(str, Enum):
    """
    Manga state for approval.

    New entries require staff approval to discourage troll submissions.
    """
    DRAFT = "draft"
    PUBLISHED = "published"
    REJECTED = "rejected"
    SUBMITTED = "submitted"
