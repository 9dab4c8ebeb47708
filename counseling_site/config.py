"""
File: config.py
Purpose: Fixed per-site settings, loaded into Flask with app.config.from_object.
"""


class BaseConfig:
    SITE_NAME = None
    HOST = '0.0.0.0'
    PORT = None
    DEBUG = False
    TESTING = False
    LOG_REQUESTS = True   # request-info logging (method, path, status, duration)
    LOG_LEVEL = 'INFO'


class CounselingConfig(BaseConfig):
    SITE_NAME = 'counseling'
    PORT = 8000


class BasicConfig(BaseConfig):
    SITE_NAME = 'basic'
    PORT = 8080


CONFIGS = {
    'counseling': CounselingConfig,
    'basic': BasicConfig,
}

DEFAULT_SITE = 'counseling'
