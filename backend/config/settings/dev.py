"""
Development settings for RAAS planning backend.
"""

import copy

from .base import *

# =============================================================================
# DEBUG
# =============================================================================
DEBUG = True

# =============================================================================
# ALLOWED HOSTS
# =============================================================================
ALLOWED_HOSTS = ['*']

# =============================================================================
# INSTALLED APPS - Development
# =============================================================================
INSTALLED_APPS = INSTALLED_APPS + [
    'debug_toolbar',
    'django_extensions',
]

# =============================================================================
# MIDDLEWARE - Development
# =============================================================================
MIDDLEWARE = ['debug_toolbar.middleware.DebugToolbarMiddleware'] + MIDDLEWARE

# =============================================================================
# DEBUG TOOLBAR
# =============================================================================
INTERNAL_IPS = ['127.0.0.1', 'localhost']

DEBUG_TOOLBAR_CONFIG = {
    'SHOW_TOOLBAR_CALLBACK': lambda request: DEBUG and not request.path.startswith('/api/'),
    'DISABLE_PANELS': {
        'debug_toolbar.panels.profiling.ProfilingPanel',
    },
}

# =============================================================================
# EMAIL - Development (Console)
# =============================================================================
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# =============================================================================
# CORS - Development (Allow all)
# =============================================================================
CORS_ALLOW_ALL_ORIGINS = True

# =============================================================================
# LOGGING - Development
# =============================================================================
LOGGING = copy.deepcopy(LOGGING)
LOGGING['root']['level'] = 'DEBUG'
for _name in ('domain', 'infrastructure', 'presentation'):
    LOGGING['loggers'][_name]['level'] = 'DEBUG'

# =============================================================================
# REST FRAMEWORK - Development Override (Disable Throttling)
# =============================================================================
REST_FRAMEWORK = dict(REST_FRAMEWORK)
REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] = []
REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {}
