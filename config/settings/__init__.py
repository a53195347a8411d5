"""
Pick the settings module from DJANGO_ENV (local | production, default local).
"""
import os

env = os.environ.get("DJANGO_ENV", "local").lower()
if env == "production":
    from .production import *  # noqa
else:
    from .local import *  # noqa
