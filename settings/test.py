"""Settings for the test suite (pytest-django and ``manage.py test``)."""

from .main import *

ENVIRONMENT = TESTING_ENVIRONMENT

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

JWT_SECRET_KEY = 'test-jwt-secret-key-for-the-test-suite-only'

FILE_UPLOAD_STORAGE = 'none'

LOG_LEVEL = 'WARNING'
LOGGING['loggers']['apps']['level'] = LOG_LEVEL
