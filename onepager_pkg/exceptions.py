#!/usr/bin/env python3
"""
Build exception classes for Onepager.
"""

class BuildError(Exception):
    """Raised when a build cannot produce its output"""
    pass

class ContentError(BuildError):
    """Raised when the content document is missing, unreadable, or malformed"""
    pass

class TemplateError(BuildError):
    """Raised when the page template is missing, unreadable, or malformed"""
    pass
