"""
Identity Provider
Yields the user identity stamped onto created reviews
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta

import jwt
import structlog

from models import utcnow

logger = structlog.get_logger(__name__)

TOKEN_ALGORITHM = 'HS256'
DEMO_EMAIL = 'user@example.com'
DEMO_NAME = 'Demo User'


@dataclass(frozen=True)
class Identity:
    uid: str
    email: str
    name: str

    def to_dict(self):
        return {'uid': self.uid, 'email': self.email, 'name': self.name}


class IdentityProvider(ABC):
    """Authentication backend interface"""

    @abstractmethod
    def verify(self, token):
        """Resolve a client token into an Identity"""

    @abstractmethod
    def login(self, email, password):
        pass

    @abstractmethod
    def register(self, email, password, name=None):
        pass

    @abstractmethod
    def issue_token(self, identity):
        pass

    @abstractmethod
    def decode(self, token):
        """Strictly decode a token previously issued by issue_token.

        Raises jwt.InvalidTokenError (or a subclass) when it cannot.
        """


def _local_part(email):
    return email.split('@')[0]


class MockIdentityProvider(IdentityProvider):
    """Development provider: every credential is accepted.

    Tokens are real signed JWTs so the API can recognise the caller on
    later requests, but no password is ever checked.
    """

    def __init__(self, secret, expires=timedelta(hours=8)):
        self.secret = secret
        self.expires = expires

    @staticmethod
    def uid_for(email):
        # Stable per email so repeated logins map to the same reviewer
        return 'mock-user-' + uuid.uuid5(uuid.NAMESPACE_URL, email.lower()).hex[:12]

    def verify(self, token):
        if token:
            try:
                return self.decode(token)
            except jwt.InvalidTokenError as e:
                logger.warning("Unverifiable token, using demo identity", error=str(e))

        return Identity(
            uid='mock-user-' + uuid.uuid4().hex[:12],
            email=DEMO_EMAIL,
            name=DEMO_NAME
        )

    def login(self, email, password):
        logger.info("Mock login", email=email)
        return Identity(uid=self.uid_for(email), email=email, name=_local_part(email))

    def register(self, email, password, name=None):
        logger.info("Mock registration", email=email)
        return Identity(uid=self.uid_for(email), email=email, name=name or _local_part(email))

    def issue_token(self, identity):
        now = utcnow()
        payload = {
            'sub': identity.uid,
            'email': identity.email,
            'name': identity.name,
            'iat': now,
            'exp': now + self.expires
        }
        return jwt.encode(payload, self.secret, algorithm=TOKEN_ALGORITHM)

    def decode(self, token):
        data = jwt.decode(
            token,
            self.secret,
            algorithms=[TOKEN_ALGORITHM],
            options={'require': ['sub', 'exp']}
        )
        return Identity(uid=data['sub'], email=data.get('email'), name=data.get('name'))
