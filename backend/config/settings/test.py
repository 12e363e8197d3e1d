"""
Test settings for RAAS planning backend.
"""

import copy

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'ATOMIC_REQUESTS': True,
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

REST_FRAMEWORK = dict(REST_FRAMEWORK)
REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] = []
REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {}

LOGGING = copy.deepcopy(LOGGING)
LOGGING['root']['handlers'] = ['console']
for _name in ('django', 'domain', 'infrastructure', 'presentation'):
    LOGGING['loggers'][_name]['handlers'] = ['console']
    LOGGING['loggers'][_name]['level'] = 'WARNING'
