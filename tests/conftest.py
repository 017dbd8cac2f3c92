"""Test configuration and fixtures for Onepager tests."""

import copy
import json
import logging
import os
import shutil
import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from onepager_pkg.settings import BuildConfig

SITE_DATA = {
    'personal': {
        'name': 'Jane Doe',
        'title': 'Backend Engineer',
        'logo': 'JD',
        'tagline': 'Building reliable systems',
        'description': 'I build data platforms.',
        'location': 'Berlin',
        'email': 'jane@example.com',
        'resumeUrl': 'https://example.com/resume.pdf',
    },
    'socialLinks': [
        {'name': 'GitHub', 'url': 'https://github.com/janedoe', 'icon': 'github'},
        {'name': 'Mastodon', 'url': 'https://example.social/@jane', 'icon': 'mastodon'},
    ],
    'services': {
        'title': 'Services',
        'subtitle': 'Book a session',
        'topmateUrl': 'https://topmate.io/janedoe',
        'offerings': [
            {'icon': '1', 'title': 'Architecture review', 'description': 'Design feedback.'},
            {'icon': '2', 'title': 'Mentoring', 'description': 'Career growth.'},
            {'icon': '3', 'title': 'Code review', 'description': 'Pull request feedback.'},
        ],
    },
    'about': {
        'title': 'About',
        'subtitle': 'Who I am',
        'description': ['First paragraph.', 'Second paragraph.'],
        'technologies': ['Python', 'PostgreSQL'],
        'interests': ['Open source'],
    },
    'projects': {
        'title': 'Projects',
        'subtitle': 'Selected work',
        'items': [
            {
                'title': 'Event Pipeline',
                'description': 'Streaming ingestion.',
                'technologies': ['Kafka'],
                'achievements': 'Cut latency by 60%',
            },
        ],
    },
    'sideProjects': {
        'title': 'Side Projects',
        'subtitle': 'For fun',
        'items': [
            {'name': 'onepager', 'year': '2024', 'technologies': ['Jinja2'], 'description': 'This site.'},
        ],
    },
    'experience': {
        'title': 'Experience',
        'subtitle': 'Where I worked',
        'items': [
            {
                'role': 'Senior Engineer',
                'company': 'Example Corp',
                'period': '2020 - Present',
                'technologies': ['AWS'],
                'achievements': ['Led a migration', 'Mentored five engineers'],
            },
        ],
    },
}

PLACEHOLDER_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{{PERSONAL_NAME}} - {{PERSONAL_TITLE}}</title>
    <!-- page header -->
</head>
<body>
    <header>{{PERSONAL_LOGO}} {{SOCIAL_LINKS}}</header>
    <h1>{{PERSONAL_NAME}}</h1>
    <p>{{PERSONAL_TAGLINE}}</p>
    {{SERVICES_SECTION}}
    {{ABOUT_SECTION}}
    {{PROJECTS_SECTION}}
    {{SIDE_PROJECTS_SECTION}}
    {{EXPERIENCE_SECTION}}
    <footer>&copy; {{CURRENT_YEAR}} {{PERSONAL_NAME}}, updated {{PRIVACY_DATE}}</footer>
</body>
</html>
"""

STYLES = """/* Layout */
body {
    margin: 0;
    color: #333;
}

.card > h2 + p {
    padding: 4px 8px;
}
"""

SCRIPTS = """// Theme toggle
function toggle(el) {
    if (el.hidden) {
        el.hidden = false;
    } else {
        el.hidden = true;
    }
}
"""

SITEMAP_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://example.com/</loc><lastmod>{{BUILD_DATE}}</lastmod></url>
  <url><loc>https://example.com/resume.pdf</loc><lastmod>{{BUILD_DATE}}</lastmod></url>
</urlset>
"""

SITEMAP_STYLESHEET = """<?xml version="1.0" encoding="UTF-8"?>
<xsl:stylesheet version="1.0" xmlns:xsl="http://www.w3.org/1999/XSL/Transform"/>
"""

BUILD_TIME = datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers added to the shared logger so each test starts clean."""
    yield
    logger = logging.getLogger('Onepager')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def site_data():
    """A complete content document."""
    return copy.deepcopy(SITE_DATA)


@pytest.fixture
def build_time():
    return BUILD_TIME


@pytest.fixture
def project_dir(temp_dir, site_data):
    """Create a project with content, template, assets and sitemap templates."""
    root = Path(temp_dir)
    (root / 'data').mkdir()
    (root / 'data' / 'site-data.json').write_text(json.dumps(site_data), encoding='utf-8')
    (root / 'index.template.html').write_text(PLACEHOLDER_TEMPLATE, encoding='utf-8')

    (root / 'assets' / 'css').mkdir(parents=True)
    (root / 'assets' / 'css' / 'styles.css').write_text(STYLES, encoding='utf-8')
    (root / 'assets' / 'js').mkdir(parents=True)
    (root / 'assets' / 'js' / 'scripts.js').write_text(SCRIPTS, encoding='utf-8')

    (root / 'templates').mkdir()
    (root / 'templates' / 'sitemap.template.xml').write_text(SITEMAP_TEMPLATE, encoding='utf-8')
    (root / 'templates' / 'sitemap.template.xsl').write_text(SITEMAP_STYLESHEET, encoding='utf-8')
    return root


@pytest.fixture
def build_config(project_dir):
    """Build configuration rooted at the project directory, without a log file."""
    return BuildConfig.from_settings({'log_dir': None}, root=project_dir)
