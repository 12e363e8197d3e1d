"""
The shipped migrations describe the current models.
"""

import pytest
from django.core.management import call_command


@pytest.mark.django_db
def test_models_have_no_pending_migrations(settings):
    settings.MIGRATION_MODULES = {}

    call_command('makemigrations', 'persistence', '--check', '--dry-run', verbosity=0)
