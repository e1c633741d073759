from media_access.settings.base import *

DEBUG = True

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.mysql',
        'NAME': os.environ.get('DB_NAME', 'media_access'),
        'USER': os.environ.get('DB_USER', 'root'),
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),
        'HOST': os.environ.get('DB_HOST', 'media_access.mysql80'),
        'PORT': os.environ.get('DB_PORT', 3306),
        'ATOMIC_REQUESTS': False,
        'CONN_MAX_AGE': 60,
    }
}

JWT_AUTH.update({
    'JWT_SECRET_KEY': 'lms-secret',
    'JWT_ISSUER': 'http://localhost:18000/oauth2',
    'JWT_AUDIENCE': None,
    'JWT_VERIFY_AUDIENCE': False,
    'JWT_ISSUERS': [{
        'AUDIENCE': 'lms-key',
        'ISSUER': 'http://localhost:18000/oauth2',
        'SECRET_KEY': 'lms-secret',
    }],
})

# CORS CONFIG
CORS_ORIGIN_WHITELIST = [
    'http://localhost:3000',  # admin panel
    'http://localhost:5173',  # learner app
]
# END CORS

# CSRF CONFIG
CSRF_TRUSTED_ORIGINS = [
    'http://localhost:3000',  # admin panel
    'http://localhost:5173',  # learner app
]
# END CSRF CONFIG

LOGGING = get_logger_config(debug=DEBUG, dev_env=True, format_string=LOGGING_FORMAT_STRING)

# shell_plus
SHELL_PLUS_IMPORTS = [
    'from media_access.apps.entitlements import api as entitlements_api',
    'from media_access.apps.sales_hierarchy.api import get_sales_hierarchy_manager',
    'from pprint import pprint',
]
