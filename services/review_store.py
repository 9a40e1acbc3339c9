"""
Review Repository
Authoritative in-process collection of reviews and the only mutation path for it
"""

import itertools
import threading
import uuid
from abc import ABC, abstractmethod

import structlog
from marshmallow import ValidationError as SchemaValidationError

from exceptions import NotFoundError, ValidationError
from models import ANONYMOUS_USER_NAME, Review, utcnow
from schemas import ReviewDraftSchema, ReviewPatchSchema

logger = structlog.get_logger(__name__)


class ReviewStore(ABC):
    """Storage interface for reviews.

    Listings are ordered by created_at descending (most recent first).
    Lookups and mutations of an unknown id raise NotFoundError; invalid
    drafts and patches raise ValidationError before anything is changed.
    """

    @abstractmethod
    def list_all(self):
        pass

    @abstractmethod
    def list_by_type(self, review_type):
        pass

    @abstractmethod
    def list_by_item(self, item_id):
        pass

    @abstractmethod
    def get(self, review_id):
        pass

    @abstractmethod
    def insert(self, draft):
        pass

    @abstractmethod
    def update(self, review_id, patch):
        pass

    @abstractmethod
    def delete(self, review_id):
        pass

    @abstractmethod
    def load(self, reviews):
        pass

    @abstractmethod
    def count(self):
        pass


def validate_payload(schema, payload):
    """Run a marshmallow schema, re-raising failures as our ValidationError"""
    try:
        return schema.load(payload)
    except SchemaValidationError as err:
        raise ValidationError(err.messages)


class InMemoryReviewStore(ReviewStore):
    """Dict-backed store guarded by a single re-entrant lock.

    Each stored review gets a sequence number at insert time; it breaks
    created_at ties so reviews added within the same clock tick still list
    newest first.
    """

    def __init__(self):
        self._reviews = {}
        self._sequence = {}
        self._counter = itertools.count(1)
        self._last_timestamp = None
        self._lock = threading.RLock()
        self._draft_schema = ReviewDraftSchema()
        self._patch_schema = ReviewPatchSchema()

    # Queries

    def list_all(self):
        with self._lock:
            return self._sorted(self._reviews.values())

    def list_by_type(self, review_type):
        with self._lock:
            return self._sorted(r for r in self._reviews.values() if r.type == review_type)

    def list_by_item(self, item_id):
        with self._lock:
            return self._sorted(r for r in self._reviews.values() if r.item_id == item_id)

    def get(self, review_id):
        with self._lock:
            review = self._reviews.get(review_id)
        if review is None:
            raise NotFoundError('review', review_id)
        return review

    def count(self):
        with self._lock:
            return len(self._reviews)

    # Mutations

    def insert(self, draft):
        data = validate_payload(self._draft_schema, draft)

        with self._lock:
            now = self._next_timestamp()
            review = Review(
                id=str(uuid.uuid4()),
                title=data['title'],
                content=data['content'],
                rating=data['rating'],
                type=data['type'],
                item_id=data['item_id'],
                item_name=data['item_name'],
                user_id=data.get('user_id') or f'user-{uuid.uuid4().hex[:12]}',
                user_name=data.get('user_name') or ANONYMOUS_USER_NAME,
                created_at=now,
                updated_at=now
            )
            self._store(review)

        logger.info("Review created",
                    review_id=review.id,
                    type=review.type,
                    item_id=review.item_id)
        return review

    def update(self, review_id, patch):
        with self._lock:
            current = self.get(review_id)
            data = validate_payload(self._patch_schema, patch)

            updated = current.revised(
                title=data['title'],
                content=data['content'],
                rating=data['rating'],
                updated_at=max(self._next_timestamp(), current.updated_at)
            )
            self._reviews[review_id] = updated

        logger.info("Review updated", review_id=review_id)
        return updated

    def delete(self, review_id):
        with self._lock:
            review = self.get(review_id)
            del self._reviews[review_id]
            del self._sequence[review_id]

        logger.info("Review deleted", review_id=review_id)
        return review

    def load(self, reviews):
        """Add pre-built reviews, keeping their ids and timestamps"""
        reviews = list(reviews)
        with self._lock:
            seen = set(self._reviews)
            for review in reviews:
                if review.id in seen:
                    raise ValidationError({'id': [f'Duplicate review id: {review.id}']})
                seen.add(review.id)

            for review in reviews:
                self._store(review)
                if self._last_timestamp is None or review.created_at > self._last_timestamp:
                    self._last_timestamp = review.created_at

        logger.info("Reviews loaded", count=len(reviews))
        return reviews

    # Internals

    def _store(self, review):
        self._reviews[review.id] = review
        self._sequence[review.id] = next(self._counter)

    def _next_timestamp(self):
        # Never hand out a timestamp older than the newest one already stored
        now = utcnow()
        if self._last_timestamp is not None and now < self._last_timestamp:
            now = self._last_timestamp
        self._last_timestamp = now
        return now

    def _sorted(self, reviews):
        return sorted(
            reviews,
            key=lambda r: (r.created_at, self._sequence[r.id]),
            reverse=True
        )
