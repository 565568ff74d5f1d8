"""
Production settings.
"""
from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F401,F403

DEBUG = False

if SECRET_KEY.startswith('django-insecure'):  # noqa: F405
    raise ImproperlyConfigured('DJANGO_SECRET_KEY must be set in production')

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
OTP_FIXED_CODE = ''
