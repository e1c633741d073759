import os
import tempfile

from media_access.settings.base import *

# IN-MEMORY TEST DATABASE
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'USER': '',
        'PASSWORD': '',
        'HOST': '',
        'PORT': '',
    },
}
# END IN-MEMORY TEST DATABASE

uploads_dir = tempfile.TemporaryDirectory()
MEDIA_UPLOADS_ROOT = os.environ.get('MEDIA_ACCESS_UPLOADS_ROOT', uploads_dir.name)

# Small chunks so that tests exercise multi-chunk streams with tiny files.
MEDIA_STREAM_CHUNK_SIZE = 4

JWT_AUTH.update({
    'JWT_SECRET_KEY': 'test-secret',
    'JWT_ISSUER': 'http://test-issuer/oauth2',
    'JWT_AUDIENCE': 'test-audience',
    'JWT_ISSUERS': [{
        'AUDIENCE': 'test-audience',
        'ISSUER': 'http://test-issuer/oauth2',
        'SECRET_KEY': 'test-secret',
    }],
})
