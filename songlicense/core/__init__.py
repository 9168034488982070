#!/usr/bin/env python

"""
    Core module for Songlicense: storage, relationship upkeep and the
    command/query service

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""
