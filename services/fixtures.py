"""
Fixture Store
Static movie and restaurant catalog standing in for the TMDB and Yelp APIs
"""

import copy
from datetime import timedelta

import structlog

from exceptions import NotFoundError, ValidationError
from models import MOVIE, RESTAURANT, Review, utcnow

logger = structlog.get_logger(__name__)

DEFAULT_LOCATION = 'New York'
DEFAULT_TERM = 'restaurants'
DEFAULT_RESTAURANT_LIMIT = 20
NOW_PLAYING_COUNT = 3

MOVIES = (
    {
        'id': '278',
        'title': 'The Shawshank Redemption',
        'overview': 'Two imprisoned men bond over a number of years, finding solace and eventual redemption through acts of common decency.',
        'poster_path': 'https://image.tmdb.org/t/p/w500/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg',
        'release_date': '1994-09-23',
        'vote_average': 9.3,
        'vote_count': 25000
    },
    {
        'id': '238',
        'title': 'The Godfather',
        'overview': 'The aging patriarch of an organized crime dynasty transfers control of his clandestine empire to his reluctant son.',
        'poster_path': 'https://image.tmdb.org/t/p/w500/3bhkrj58Vtu7enYsRolD1fZdja1.jpg',
        'release_date': '1972-03-14',
        'vote_average': 9.2,
        'vote_count': 18000
    },
    {
        'id': '157336',
        'title': 'Interstellar',
        'overview': "A team of explorers travel through a wormhole in space in an attempt to ensure humanity's survival.",
        'poster_path': 'https://image.tmdb.org/t/p/w500/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg',
        'release_date': '2014-11-07',
        'vote_average': 8.6,
        'vote_count': 32000
    },
    {
        'id': '680',
        'title': 'Pulp Fiction',
        'overview': 'The lives of two mob hitmen, a boxer, a gangster and his wife, and a pair of diner bandits intertwine in four tales of violence and redemption.',
        'poster_path': 'https://image.tmdb.org/t/p/w500/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg',
        'release_date': '1994-10-14',
        'vote_average': 8.9,
        'vote_count': 26000
    },
    {
        'id': '13',
        'title': 'Forrest Gump',
        'overview': 'The presidencies of Kennedy and Johnson, the Vietnam War, the Watergate scandal and other historical events unfold from the perspective of an Alabama man with an IQ of 75.',
        'poster_path': 'https://image.tmdb.org/t/p/w500/arw2vcBveWOVZr6pxd9XTd1TdQa.jpg',
        'release_date': '1994-06-23',
        'vote_average': 8.8,
        'vote_count': 25000
    },
)

# Extra fields merged into every movie detail response
MOVIE_DETAILS = {
    'runtime': 142,
    'genres': [{'id': 18, 'name': 'Drama'}],
    'production_companies': [{'name': 'Warner Bros.'}],
    'credits': {
        'cast': [
            {'name': 'Tim Robbins', 'character': 'Andy Dufresne'},
            {'name': 'Morgan Freeman', 'character': 'Ellis Boyd "Red" Redding'}
        ]
    }
}

RESTAURANTS = (
    {
        'id': 'g9e0D-x0VJj0s3x7p5TQnw',
        'name': "Joe's Pizza",
        'image_url': 'https://s3-media2.fl.yelpcdn.com/bphoto/7YJg_BAY-k6g6wR-aR6y7g/o.jpg',
        'review_count': 4582,
        'rating': 4.5,
        'price': '$',
        'phone': '+12123330000',
        'display_phone': '(212) 333-0000',
        'distance': 1200.5,
        'is_closed': False,
        'coordinates': {'latitude': 40.73061, 'longitude': -73.935242},
        'location': {
            'address1': '7 Carmine St',
            'city': 'New York',
            'state': 'NY',
            'zip_code': '10014',
            'country': 'US'
        },
        'categories': [
            {'alias': 'pizza', 'title': 'Pizza'}
        ]
    },
    {
        'id': 'WavvLdfdP6g8aZTtbBQHTw',
        'name': 'Momofuku Noodle Bar',
        'image_url': 'https://s3-media1.fl.yelpcdn.com/bphoto/I4j_Xq-7N4VROvE6OgTq5A/o.jpg',
        'review_count': 3215,
        'rating': 4.0,
        'price': '$$',
        'phone': '+12125332100',
        'display_phone': '(212) 533-2100',
        'distance': 850.2,
        'is_closed': False,
        'coordinates': {'latitude': 40.7315, 'longitude': -73.9958},
        'location': {
            'address1': '171 1st Ave',
            'city': 'New York',
            'state': 'NY',
            'zip_code': '10003',
            'country': 'US'
        },
        'categories': [
            {'alias': 'noodles', 'title': 'Noodles'},
            {'alias': 'ramen', 'title': 'Ramen'}
        ]
    },
    {
        'id': 'DkYS3gLOeAghmHl-7p0MKw',
        'name': 'Shake Shack',
        'image_url': 'https://s3-media3.fl.yelpcdn.com/bphoto/B7bB7-2Q0bB7bB7-2Q0bB7/bphoto.jpg',
        'review_count': 8921,
        'rating': 4.2,
        'price': '$$',
        'phone': '+12125550000',
        'display_phone': '(212) 555-0000',
        'distance': 650.8,
        'is_closed': False,
        'coordinates': {'latitude': 40.7415, 'longitude': -73.9856},
        'location': {
            'address1': 'Madison Square Park',
            'city': 'New York',
            'state': 'NY',
            'zip_code': '10010',
            'country': 'US'
        },
        'categories': [
            {'alias': 'burgers', 'title': 'Burgers'},
            {'alias': 'hotdogs', 'title': 'Fast Food'}
        ]
    },
)

SEARCH_REGION = {'center': {'longitude': -73.935242, 'latitude': 40.73061}}

# Third-party reviews shown next to a restaurant's detail page
RESTAURANT_REVIEWS = (
    {
        'id': 'xAG4O7l-t1ubbwVAlPnDKg',
        'rating': 5,
        'text': 'Amazing food and great service! Will definitely be back.',
        'time_created': '2024-01-15 13:22:11',
        'user': {'name': 'Sarah M.'}
    },
    {
        'id': 'yBG4O7l-t1ubbwVAlPnDKh',
        'rating': 4,
        'text': 'Good food but a bit pricey. Great atmosphere though.',
        'time_created': '2024-01-10 10:15:33',
        'user': {'name': 'Mike T.'}
    },
)

DEMO_REVIEWS = (
    {
        'id': 'mock-1',
        'title': 'Amazing Movie Experience',
        'content': 'This movie blew my mind! The acting was superb and the storyline was engaging from start to finish.',
        'rating': 5,
        'type': MOVIE,
        'item_id': '278',
        'item_name': 'The Shawshank Redemption',
        'user_id': 'user1',
        'user_name': 'John Doe'
    },
    {
        'id': 'mock-2',
        'title': 'Great Food, Average Service',
        'content': 'The food was delicious but the service could be improved. Will definitely come back for the pasta!',
        'rating': 3,
        'type': RESTAURANT,
        'item_id': 'g9e0D-x0VJj0s3x7p5TQnw',
        'item_name': "Joe's Pizza",
        'user_id': 'user2',
        'user_name': 'Jane Smith'
    },
    {
        'id': 'mock-3',
        'title': 'Must Watch Masterpiece',
        'content': 'One of the best movies I have ever seen. The cinematography and acting were outstanding.',
        'rating': 5,
        'type': MOVIE,
        'item_id': '238',
        'item_name': 'The Godfather',
        'user_id': 'user3',
        'user_name': 'Mike Johnson'
    },
)


def demo_reviews(now=None):
    """Build the demo reviews, one minute apart, newest first"""
    now = now or utcnow()
    reviews = []
    for offset, record in enumerate(DEMO_REVIEWS):
        stamp = now - timedelta(minutes=offset)
        reviews.append(Review(created_at=stamp, updated_at=stamp, **record))
    return reviews


def _movie_page(movies):
    return {
        'movies': movies,
        'page': 1,
        'total_pages': 1,
        'total_results': len(movies)
    }


class FixtureStore:
    """Answers catalog lookups against the hardcoded movie and restaurant lists.

    Returned records are deep copies, so callers cannot alter the fixtures.
    """

    def __init__(self, movies=MOVIES, restaurants=RESTAURANTS, restaurant_reviews=RESTAURANT_REVIEWS):
        self._movies = tuple(movies)
        self._restaurants = tuple(restaurants)
        self._restaurant_reviews = tuple(restaurant_reviews)

    # Movies

    def search_movies(self, query, limit=None):
        if not query:
            raise ValidationError({'query': ['Query parameter is required']})

        needle = query.lower()
        matches = [m for m in self._movies if needle in m['title'].lower()]
        if limit is not None:
            matches = matches[:limit]

        logger.info("Movie search", query=query, results=len(matches))
        return _movie_page(copy.deepcopy(matches))

    def popular_movies(self):
        return _movie_page(copy.deepcopy(list(self._movies)))

    def now_playing_movies(self):
        return _movie_page(copy.deepcopy(list(self._movies[:NOW_PLAYING_COUNT])))

    def get_movie(self, movie_id):
        movie = self._find(self._movies, movie_id, 'movie')
        details = copy.deepcopy(movie)
        details.update(copy.deepcopy(MOVIE_DETAILS))
        return details

    # Restaurants

    def search_restaurants(self, location=DEFAULT_LOCATION, term=DEFAULT_TERM,
                           limit=DEFAULT_RESTAURANT_LIMIT):
        matches = list(self._restaurants)
        if term and term != DEFAULT_TERM:
            needle = term.lower()
            matches = [
                r for r in matches
                if needle in r['name'].lower()
                or any(needle in c['title'].lower() for c in r['categories'])
            ]

        logger.info("Restaurant search", term=term, location=location, results=len(matches))
        return {
            'businesses': copy.deepcopy(matches[:limit]),
            'total': len(matches),
            'region': copy.deepcopy(SEARCH_REGION)
        }

    def get_restaurant(self, restaurant_id):
        return copy.deepcopy(self._find(self._restaurants, restaurant_id, 'restaurant'))

    def restaurant_reviews(self, restaurant_id):
        self._find(self._restaurants, restaurant_id, 'restaurant')
        return {'reviews': copy.deepcopy(list(self._restaurant_reviews))}

    @staticmethod
    def _find(records, record_id, kind):
        for record in records:
            if record['id'] == record_id:
                return record
        raise NotFoundError(kind, record_id)
