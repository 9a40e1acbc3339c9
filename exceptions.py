"""
Review Hub - Exceptions raised by the review and catalog services
"""


class ReviewHubError(Exception):
    """Base class for service-level failures"""
    pass


class ValidationError(ReviewHubError):
    """Required field missing or invalid"""

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = {'_schema': [messages]}
        self.messages = messages
        fields = ', '.join(sorted(messages))
        super().__init__(f'Validation failed for: {fields}')


class NotFoundError(ReviewHubError):
    """Requested record does not exist"""

    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f'{kind.capitalize()} {identifier!r} not found')
