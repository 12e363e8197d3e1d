"""
Settings package.

`manage.py` and `wsgi.py` pick `config.settings.<DJANGO_ENV>` (dev, prod or
test; dev by default). Each environment module derives from `base` without
mutating it.
"""
