"""
Test settings: in-memory SQLite and fast hashing.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
SECRET_KEY = 'test-secret-key-not-for-production'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

OTP_FIXED_CODE = '787800'
DEFAULT_DELIVERY_CHARGE = Decimal('60')  # noqa: F405

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'test-cache',
    }
}
