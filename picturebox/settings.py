"""
Django settings for picturebox project.

Values that change between deployments are read from environment variables.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-picturebox-development-key')

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'huey.contrib.djhuey',
    'media',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'picturebox.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'picturebox.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('PICTUREBOX_DB_PATH', BASE_DIR / 'db.sqlite3'),
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Uploaded media (reference files and thumbnails)
MEDIA_ROOT = os.environ.get('PICTUREBOX_MEDIA_DIR', BASE_DIR / 'uploads')
MEDIA_URL = '/uploads/media/'

# Huey task queue
HUEY = {
    'huey_class': 'huey.SqliteHuey',
    'name': 'picturebox',
    'filename': os.environ.get('PICTUREBOX_HUEY_DB', str(BASE_DIR / 'huey.sqlite3')),
    # Run tasks inline (no worker) while developing and testing
    'immediate': env_bool('PICTUREBOX_HUEY_IMMEDIATE', DEBUG),
}

# Contexts group media; each context has its own formats. Format names are
# registered as "<context>_<label>".
PICTUREBOX_CONTEXTS = {
    'default': {
        'formats': {
            'small': {'width': 100, 'quality': 70},
            'big': {'width': 500, 'quality': 70},
        },
    },
    'gallery': {
        'formats': {
            'small': {'width': 320, 'height': None, 'quality': 80},
            'medium': {'width': 800, 'height': None, 'quality': 80},
            'large': {'width': 1600, 'height': None, 'quality': 85},
        },
    },
}

PICTUREBOX_ADMIN_FORMAT = {'width': 200, 'height': None, 'quality': 80}

# Base path or absolute URL prepended to storage paths
PICTUREBOX_CDN_PATH = os.environ.get('PICTUREBOX_CDN_PATH', MEDIA_URL)

# 'inset' fits the image inside the format box, 'outbound' fills and crops
PICTUREBOX_RESIZER_MODE = os.environ.get('PICTUREBOX_RESIZER_MODE', 'inset')
PICTUREBOX_THUMBNAIL_QUALITY = int(os.environ.get('PICTUREBOX_THUMBNAIL_QUALITY', '80'))

PICTUREBOX_ALLOWED_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'webp']
PICTUREBOX_ALLOWED_MIME_TYPES = [
    'image/jpeg',
    'image/pjpeg',
    'image/png',
    'image/x-png',
    'image/gif',
    'image/webp',
]

PICTUREBOX_PATH_FIRST_LEVEL = 100000
PICTUREBOX_PATH_SECOND_LEVEL = 1000
