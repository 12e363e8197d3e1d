"""
Tests for the environment settings modules.
"""

import importlib

from django.conf import settings


def test_test_settings_carry_no_development_apps():
    assert 'debug_toolbar' not in settings.INSTALLED_APPS
    assert 'django_extensions' not in settings.INSTALLED_APPS


def test_development_settings_leave_base_untouched():
    base = importlib.import_module('config.settings.base')
    dev = importlib.import_module('config.settings.dev')

    assert 'debug_toolbar' in dev.INSTALLED_APPS
    assert 'debug_toolbar' not in base.INSTALLED_APPS
    assert dev.REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] == []
    assert base.REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES']
    assert dev.LOGGING['root']['level'] == 'DEBUG'
    assert base.LOGGING['root']['level'] == 'WARNING'
