from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent  # Assuming this file is in route_planner/tests/

SECRET_KEY = 'dummy-secret-key-for-testing-route-planner'
DEBUG = False
TESTING = True

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']  # 'testserver' is used by Django's test client

# In-memory database; the app itself declares no models
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_yasg',
    'route_planner',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

STATIC_URL = '/static/'

ROOT_URLCONF = 'route_planner.tests.urls'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
}

# Logging for tests
LOGGING = {
    'version': 1,
    'disable_existing_loggers': True,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'route_planner': {
            'handlers': ['console'],
            'level': 'DEBUG',  # More verbose for the app during tests
            'propagate': False,
        },
    }
}
