#!/usr/bin/env python

"""
    Songlicense, a record-keeping service for music licensing

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

__version__ = '0.1.0'
