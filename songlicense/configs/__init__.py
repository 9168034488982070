#!/usr/bin/env python

"""
    Configurations for Songlicense

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

import os


# Determine environment
TESTING = os.getenv("TESTING", "false").lower() == "true"

# API server configuration
SCHEME = 'http'
HOST = os.environ.get('SONGLICENSE_HOST', 'localhost')
PORT = int(os.environ.get('SONGLICENSE_PORT', 8080))
WORKERS = int(os.environ.get('SONGLICENSE_WORKERS', 1))
DEBUG = bool(int(os.environ.get('SONGLICENSE_DEBUG', 0)))
LOG_LEVEL = os.environ.get('SONGLICENSE_LOG_LEVEL', 'info')
SSL_CRT = os.environ.get('SONGLICENSE_SSL_CRT')
SSL_KEY = os.environ.get('SONGLICENSE_SSL_KEY')
SONGLICENSE_HTTP_HEADERS = {"User-Agent": "SonglicenseClient/1.0"}

OPTIONS = {
    'host': HOST,
    'port': PORT,
    'log_level': LOG_LEVEL,
    'reload': DEBUG,
    'workers': WORKERS,
}
if SSL_CRT and SSL_KEY:
    OPTIONS['ssl_keyfile'] = SSL_KEY
    OPTIONS['ssl_certfile'] = SSL_CRT
    SCHEME = 'https'

API_URL = os.environ.get('SONGLICENSE_API_URL', f"{SCHEME}://{HOST}:{PORT}/v1/api")

# Database configuration
DB_URI = (
    "sqlite:///:memory:" if TESTING else
    os.environ.get('SONGLICENSE_DB_URI', 'sqlite:///songlicense.db')
)

__all__ = ['SCHEME', 'HOST', 'PORT', 'DEBUG', 'OPTIONS', 'DB_URI', 'API_URL', 'TESTING']
