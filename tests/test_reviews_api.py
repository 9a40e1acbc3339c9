"""
HTTP tests for the review endpoints.
"""

from app import create_app
from conftest import PIZZA_REVIEW, SHAWSHANK_REVIEW, TEST_CONFIG


def post_review(client, payload, **kwargs):
    return client.post('/api/reviews', json=payload, **kwargs)


def test_list_reviews_empty(client):
    response = client.get('/api/reviews')
    assert response.status_code == 200
    assert response.get_json() == []


def test_create_review_then_fetch(client):
    response = post_review(client, SHAWSHANK_REVIEW)

    assert response.status_code == 201
    created = response.get_json()
    assert created['id']
    assert created['rating'] == 5
    assert created['itemId'] == '278'
    assert created['createdAt'] == created['updatedAt']

    fetched = client.get(f"/api/reviews/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json() == created


def test_create_review_missing_rating(client):
    payload = dict(SHAWSHANK_REVIEW)
    del payload['rating']

    response = post_review(client, payload)

    assert response.status_code == 400
    body = response.get_json()
    assert body['code'] == 'VALIDATION_ERROR'
    assert 'rating' in body['details']


def test_create_review_without_body(client):
    response = client.post('/api/reviews', data='not json', content_type='application/json')
    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'


def test_create_review_stamps_token_identity(client):
    login = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'pw'})
    token = login.get_json()['token']

    response = post_review(client, SHAWSHANK_REVIEW, headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 201
    created = response.get_json()
    assert created['userId'] == login.get_json()['uid']
    assert created['userName'] == 'ada'


def test_create_review_body_user_wins_over_token(client):
    login = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'pw'})
    token = login.get_json()['token']

    payload = dict(SHAWSHANK_REVIEW, userId='explicit', userName='Explicit Name')
    response = post_review(client, payload, headers={'Authorization': f'Bearer {token}'})

    assert response.get_json()['userId'] == 'explicit'
    assert response.get_json()['userName'] == 'Explicit Name'


def test_create_review_ignores_invalid_token(client):
    response = post_review(client, SHAWSHANK_REVIEW, headers={'Authorization': 'Bearer garbage'})

    assert response.status_code == 201
    assert response.get_json()['userName'] == 'Anonymous User'


def test_list_by_type_and_item(client):
    movie = post_review(client, SHAWSHANK_REVIEW).get_json()
    restaurant = post_review(client, PIZZA_REVIEW).get_json()

    movies = client.get('/api/reviews/type/movie').get_json()
    restaurants = client.get('/api/reviews/type/restaurant').get_json()
    unknown = client.get('/api/reviews/type/book')
    by_item = client.get('/api/reviews/item/278').get_json()

    assert [r['id'] for r in movies] == [movie['id']]
    assert [r['id'] for r in restaurants] == [restaurant['id']]
    assert unknown.status_code == 200
    assert unknown.get_json() == []
    assert [r['id'] for r in by_item] == [movie['id']]


def test_list_all_newest_first(client):
    first = post_review(client, SHAWSHANK_REVIEW).get_json()
    second = post_review(client, PIZZA_REVIEW).get_json()

    listed = client.get('/api/reviews').get_json()

    assert [r['id'] for r in listed] == [second['id'], first['id']]


def test_get_unknown_review(client):
    response = client.get('/api/reviews/does-not-exist')
    assert response.status_code == 404
    assert response.get_json()['code'] == 'REVIEW_NOT_FOUND'


def test_update_review(client):
    created = post_review(client, SHAWSHANK_REVIEW).get_json()

    response = client.put(f"/api/reviews/{created['id']}", json={
        'title': 'Still great',
        'content': 'Watched it again',
        'rating': '4',
    })

    assert response.status_code == 200
    body = response.get_json()
    assert body['message'] == 'Review updated successfully'
    review = body['review']
    assert review['title'] == 'Still great'
    assert review['rating'] == 4
    assert review['createdAt'] == created['createdAt']
    assert review['itemName'] == created['itemName']


def test_update_review_missing_fields(client):
    created = post_review(client, SHAWSHANK_REVIEW).get_json()

    response = client.put(f"/api/reviews/{created['id']}", json={'title': 'Only title'})

    assert response.status_code == 400
    assert set(response.get_json()['details']) == {'content', 'rating'}


def test_update_unknown_review(client):
    response = client.put('/api/reviews/does-not-exist', json={
        'title': 't', 'content': 'c', 'rating': 3,
    })
    assert response.status_code == 404


def test_delete_twice(client):
    created = post_review(client, SHAWSHANK_REVIEW).get_json()

    first = client.delete(f"/api/reviews/{created['id']}")
    second = client.delete(f"/api/reviews/{created['id']}")

    assert first.status_code == 200
    assert first.get_json()['review']['id'] == created['id']
    assert second.status_code == 404
    assert client.get(f"/api/reviews/{created['id']}").status_code == 404


def test_demo_data_seeded_by_default():
    app = create_app(dict(TEST_CONFIG, SEED_DEMO_DATA=True))
    client = app.test_client()

    listed = client.get('/api/reviews').get_json()

    assert [r['id'] for r in listed] == ['mock-1', 'mock-2', 'mock-3']


def test_apps_do_not_share_reviews():
    first = create_app(dict(TEST_CONFIG)).test_client()
    second = create_app(dict(TEST_CONFIG)).test_client()

    post_review(first, SHAWSHANK_REVIEW)

    assert len(first.get('/api/reviews').get_json()) == 1
    assert second.get('/api/reviews').get_json() == []


def test_internal_failure_returns_generic_error(app, client, monkeypatch):
    def explode(review_id):
        raise RuntimeError('boom')

    monkeypatch.setattr(app.extensions['review_store'], 'get', explode)

    response = client.get('/api/reviews/anything')

    assert response.status_code == 500
    assert response.get_json()['code'] == 'REVIEW_FETCH_ERROR'
