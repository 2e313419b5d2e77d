"""
Client-side session: the signed-in user and their bearer token.

Passed explicitly to the API client and the stores instead of being read
from ambient storage on every call.
"""
from healthhub.policy import Principal


class Session:

    def __init__(self, token=None, user=None):
        self.token = None
        self.user = None
        if token and user:
            self.init(token, user)

    def init(self, token, user):
        """Start a session from a login/register response"""
        self.token = token
        self.user = dict(user)

    def clear(self):
        self.token = None
        self.user = None

    @property
    def is_authenticated(self):
        return bool(self.token and self.user)

    @property
    def principal(self):
        if not self.is_authenticated:
            return None
        return Principal.from_user(self.user)

    def auth_headers(self):
        if not self.token:
            return {}
        return {'Authorization': f'Bearer {self.token}'}

    def __repr__(self):
        if not self.is_authenticated:
            return "<Session anonymous>"
        return f"<Session {self.user.get('email')} ({self.user.get('role')})>"
