"""
WSGI config for picturebox project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "picturebox.settings")

application = get_wsgi_application()
