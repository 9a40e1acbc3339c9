"""
Review Hub - Domain Models
In-memory review records shared by the repository and the API layer
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

MOVIE = 'movie'
RESTAURANT = 'restaurant'
REVIEW_TYPES = (MOVIE, RESTAURANT)

ANONYMOUS_USER_NAME = 'Anonymous User'


def utcnow():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Review:
    """User review of a catalog item (movie or restaurant)"""

    id: str
    title: str
    content: str
    rating: int  # 1-5
    type: str  # movie, restaurant
    item_id: str
    item_name: str
    user_id: str
    user_name: str
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        if not 1 <= self.rating <= 5:
            raise ValueError(f"Invalid rating: {self.rating}. Must be 1-5")
        if self.type not in REVIEW_TYPES:
            raise ValueError(f"Invalid review type: {self.type}")
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")

    def revised(self, title, content, rating, updated_at=None):
        """Copy with the editable fields replaced and updated_at refreshed"""
        return replace(
            self,
            title=title,
            content=content,
            rating=rating,
            updated_at=updated_at or utcnow()
        )

    def to_dict(self):
        """Convert review to its JSON wire shape"""
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'rating': self.rating,
            'type': self.type,
            'itemId': self.item_id,
            'itemName': self.item_name,
            'userId': self.user_id,
            'userName': self.user_name,
            'createdAt': self.created_at.isoformat(),
            'updatedAt': self.updated_at.isoformat()
        }

    def __repr__(self):
        return f'<Review {self.id} {self.type}:{self.item_id}>'
