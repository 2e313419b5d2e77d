"""
Doctor search over the in-memory directory.

The full list is fetched once; search, specialization filter and
pagination all run locally.
"""
import logging
import math
from collections import namedtuple

import requests

from .api import ApiError

logger = logging.getLogger(__name__)

ALL_SPECIALIZATIONS = 'All Specializations'
DEFAULT_PAGE_SIZE = 6

DoctorPage = namedtuple('DoctorPage', ['doctors', 'total_pages', 'total_count'])


class DoctorDirectory:

    def __init__(self, api):
        self.api = api
        self.doctors = []

    def load(self):
        try:
            self.doctors = list(self.api.list_doctors() or [])
        except (ApiError, requests.RequestException) as e:
            logger.error("Failed to fetch doctors: %s", e)
            return False
        return True

    def specializations(self):
        return sorted({doc.get('specialization') for doc in self.doctors if doc.get('specialization')})

    def filter(self, search='', specialization=''):
        result = list(self.doctors)

        term = (search or '').strip().lower()
        if term:
            result = [
                doc for doc in result
                if term in (doc.get('name') or '').lower()
                or term in (doc.get('specialization') or '').lower()
                or term in (doc.get('hospital') or '').lower()
            ]

        if specialization and specialization != ALL_SPECIALIZATIONS:
            result = [doc for doc in result if doc.get('specialization') == specialization]

        return result

    def query(self, search='', specialization='', page=1, page_size=DEFAULT_PAGE_SIZE):
        matches = self.filter(search, specialization)
        start = (max(page, 1) - 1) * page_size
        return DoctorPage(
            doctors=matches[start:start + page_size],
            total_pages=math.ceil(len(matches) / page_size),
            total_count=len(matches),
        )
