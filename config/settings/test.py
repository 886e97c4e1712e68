"""Test settings for the hotel booking project.

Used by pytest (see ``pyproject.toml``). Runs Celery tasks eagerly,
keeps emails in memory and uses a fast password hasher. The test database
is a temporary SQLite file unless DB_ENGINE selects another backend.
"""

import os
import tempfile

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

if DB_ENGINE == 'django.db.backends.sqlite3':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
            'OPTIONS': {'transaction_mode': 'IMMEDIATE', 'timeout': 20},
            # A file rather than shared-cache memory, so threads in concurrency
            # tests get their own connections and wait on the SQLite write lock.
            'TEST': {
                'NAME': os.path.join(tempfile.gettempdir(), f'hotel_booking_test_{os.getpid()}.sqlite3'),
            },
        }
    }

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}
