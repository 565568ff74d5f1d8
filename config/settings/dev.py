"""
Development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = True
ALLOWED_HOSTS = ['*']

OTP_FIXED_CODE = os.environ.get('OTP_FIXED_CODE', '787800')  # noqa: F405

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
