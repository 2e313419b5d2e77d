import logging

import requests

from .api import ApiError

logger = logging.getLogger(__name__)


class AuthManager:
    """Sign-in/sign-out against the API, keeping the Session in step"""

    def __init__(self, api, session):
        self.api = api
        self.session = session

    def login(self, email, password):
        try:
            user, token = self.api.login(email, password)
        except (ApiError, requests.RequestException) as e:
            logger.error("Login failed: %s", e)
            return False
        self.session.init(token, user)
        return True

    def register(self, email, password, name, phone=None):
        data = {'email': email, 'password': password, 'name': name}
        if phone:
            data['phone'] = phone
        try:
            user, token = self.api.register(data)
        except (ApiError, requests.RequestException) as e:
            logger.error("Registration failed: %s", e)
            return False
        self.session.init(token, user)
        return True

    def logout(self):
        self.session.clear()
