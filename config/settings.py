import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'sdncal-insecure-development-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'false').lower() == 'true'

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'core.apps.CoreConfig',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Days to shift tabular Islamic dates by, to follow a local moon sighting
TAB_ISLAMIC_DAY_OFFSET = int(os.environ.get('TAB_ISLAMIC_DAY_OFFSET', '0'))
TAB_ISLAMIC_DATE_FORMAT = '%Y/%m/%d'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s  [%(levelname)s]  %(name)s: %(message)s',
            'datefmt': '%H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'loggers': {
        'libraries.sdncal': {
            'handlers': ['console'],
            'level': os.environ.get('SDNCAL_LOG_LEVEL', 'WARNING'),
        },
        'core': {
            'handlers': ['console'],
            'level': os.environ.get('SDNCAL_LOG_LEVEL', 'WARNING'),
        },
    },
}
