import sys

from .base import *

INSTALLED_APPS += [
    'corsheaders',
    'rest_framework',
    'drf_spectacular',
    'apps.shared',
    'apps.accounts',
    'apps.weddings',
    'apps.guestbook',
]

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'apps.shared.auth.authentication.PrincipalJWTAuthentication',
    ],
    'EXCEPTION_HANDLER': 'apps.shared.exceptions.api_handler.custom_exception_handler',
    'UNAUTHENTICATED_USER': 'apps.shared.auth.principals.AnonymousPrincipal',
}

AUTH_USER_MODEL = 'accounts.User'

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# Environment
TESTING_ENVIRONMENT = 'testing'
PRODUCTION_ENVIRONMENT = 'production'
STAGING_ENVIRONMENT = 'staging'
DEVELOPMENT_ENVIRONMENT = 'development'

if 'test' in sys.argv:  # noqa: SIM108
    ENVIRONMENT = TESTING_ENVIRONMENT
else:
    ENVIRONMENT = env.str('ENVIRONMENT', default=DEVELOPMENT_ENVIRONMENT)

if ENVIRONMENT == TESTING_ENVIRONMENT:
    PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]

# CORS
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOWED_ORIGINS = [
    'http://localhost:5173',
    'http://127.0.0.1:5173',
    env('FRONTEND_URL', default='http://localhost:5173'),
]

if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True

CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'origin',
    'user-agent',
    'x-requested-with',
]

# Swagger
SPECTACULAR_SETTINGS = {
    'TITLE': 'Wedding Invitation API',
    'DESCRIPTION': 'Multi-tenant wedding invitations: tenants, content, RSVPs and wishes',
    'VERSION': 'v1',
    'SERVE_INCLUDE_SCHEMA': False,
}

# Access tokens
JWT_SECRET_KEY = env.str('JWT_SECRET_KEY', default=SECRET_KEY)
JWT_ALGORITHM = 'HS256'
JWT_ISSUER = 'wedding-invite-api'
ACCESS_TOKEN_LIFETIME_MINUTES = env.int('ACCESS_TOKEN_LIFETIME_MINUTES', default=7 * 24 * 60)

# Object storage for gallery photos ('s3' or 'none')
FILE_UPLOAD_STORAGE = env.str('FILE_UPLOAD_STORAGE', default='none')

AWS_ACCESS_KEY_ID = env.str('AWS_ACCESS_KEY_ID', default='')
AWS_SECRET_ACCESS_KEY = env.str('AWS_SECRET_ACCESS_KEY', default='')
AWS_S3_REGION_NAME = env.str('AWS_S3_REGION_NAME', default='ap-southeast-1')
S3_BUCKET_NAME = env.str('S3_BUCKET_NAME', default='wedding-gallery')
S3_PUBLIC_BASE_URL = env.str('S3_PUBLIC_BASE_URL', default='')

# Logging
LOG_LEVEL = env.str('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
    },
}
