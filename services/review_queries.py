"""
Review Query Facade
Maps external query shapes onto ReviewStore calls and shapes JSON-ready output
"""

from models import REVIEW_TYPES


class ReviewQueries:
    """Dispatch layer between the HTTP routes and the review store"""

    def __init__(self, store):
        self.store = store

    def list_reviews(self, review_type=None, item_id=None):
        """All reviews, or those of one type, or those of one catalog item"""
        if item_id is not None:
            reviews = self.store.list_by_item(item_id)
        elif review_type is not None:
            reviews = self.store.list_by_type(review_type)
        else:
            reviews = self.store.list_all()
        return [review.to_dict() for review in reviews]

    def get_review(self, review_id):
        return self.store.get(review_id).to_dict()

    def create_review(self, payload, identity=None):
        """Insert a review; the caller's identity fills in absent user fields"""
        draft = payload
        if identity is not None and isinstance(payload, dict):
            draft = dict(payload)
            if not draft.get('userId'):
                draft['userId'] = identity.uid
            if not draft.get('userName'):
                draft['userName'] = identity.name
        return self.store.insert(draft).to_dict()

    def update_review(self, review_id, payload):
        return self.store.update(review_id, payload).to_dict()

    def delete_review(self, review_id):
        return self.store.delete(review_id).to_dict()

    def summary(self):
        counts = {review_type: len(self.store.list_by_type(review_type))
                  for review_type in REVIEW_TYPES}
        counts['total'] = self.store.count()
        return counts
