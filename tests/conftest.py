import pytest

from app import create_app
from services.review_store import InMemoryReviewStore

TEST_CONFIG = {
    'TESTING': True,
    'SEED_DEMO_DATA': False,
    'JWT_SECRET_KEY': 'test-secret-key-with-enough-length-for-hs256',
    'LOG_LEVEL': 'WARNING',
}

SHAWSHANK_REVIEW = {
    'title': 'Great',
    'content': 'Loved it',
    'rating': 5,
    'type': 'movie',
    'itemId': '278',
    'itemName': 'The Shawshank Redemption',
}

PIZZA_REVIEW = {
    'title': 'Solid slice',
    'content': 'Crispy crust, quick service.',
    'rating': 4,
    'type': 'restaurant',
    'itemId': 'g9e0D-x0VJj0s3x7p5TQnw',
    'itemName': "Joe's Pizza",
}


@pytest.fixture
def store():
    return InMemoryReviewStore()


@pytest.fixture
def app(store):
    return create_app(TEST_CONFIG, review_store=store)


@pytest.fixture
def client(app):
    return app.test_client()
