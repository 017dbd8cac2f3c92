"""
Template renderers for Onepager.

Two interchangeable strategies turn the content document and a template into
the page:

* ``PlaceholderRenderer`` fills ``{{TOKEN}}`` placeholders with fragments built
  by the generators in :mod:`onepager_pkg.sections`.
* ``JinjaRenderer`` binds the content document directly to a Jinja2 template,
  with ``icon()`` and ``chip()`` available as globals.
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from jinja2 import ChainableUndefined, Environment, FileSystemLoader, TemplateNotFound, TemplateSyntaxError
from jinja2 import TemplateError as JinjaTemplateError

from .exceptions import TemplateError
from .icons import social_icon, tech_chip
from .sections import (
    generate_about_section,
    generate_experience_section,
    generate_projects_section,
    generate_services_section,
    generate_side_projects_section,
    generate_social_links,
)

PLACEHOLDER_RE = re.compile(r'\{\{([A-Z][A-Z0-9_]*)\}\}')

PERSONAL_FIELDS = {
    'PERSONAL_NAME': 'name',
    'PERSONAL_TITLE': 'title',
    'PERSONAL_LOGO': 'logo',
    'PERSONAL_TAGLINE': 'tagline',
    'PERSONAL_DESCRIPTION': 'description',
    'PERSONAL_LOCATION': 'location',
    'PERSONAL_EMAIL': 'email',
    'PERSONAL_RESUME_URL': 'resumeUrl',
}

PRIVACY_DATE_FORMAT = '%B %d, %Y'


def date_values(now):
    """Values derived from the build time."""
    return {
        'current_year': str(now.year),
        'privacy_date': now.strftime(PRIVACY_DATE_FORMAT),
        'build_date': now.strftime('%Y-%m-%d'),
    }


def _text(value):
    return '' if value is None else str(value)


class PlaceholderRenderer:
    """Fill ``{{TOKEN}}`` placeholders with generated fragments."""

    name = 'placeholder'

    def __init__(self):
        self.logger = logging.getLogger('Onepager')

    def build_values(self, content, now):
        """Map every known placeholder token to its replacement text."""
        personal = content.get('personal') or {}
        values = {token: _text(personal.get(field)) for token, field in PERSONAL_FIELDS.items()}
        values.update({
            'SOCIAL_LINKS': generate_social_links(content.get('socialLinks')),
            'SERVICES_SECTION': generate_services_section(content.get('services')),
            'ABOUT_SECTION': generate_about_section(content.get('about')),
            'PROJECTS_SECTION': generate_projects_section(content.get('projects')),
            'SIDE_PROJECTS_SECTION': generate_side_projects_section(content.get('sideProjects')),
            'EXPERIENCE_SECTION': generate_experience_section(content.get('experience')),
        })
        dates = date_values(now)
        values['CURRENT_YEAR'] = dates['current_year']
        values['PRIVACY_DATE'] = dates['privacy_date']
        values['BUILD_DATE'] = dates['build_date']
        return values

    def substitute(self, template, values):
        """Replace each known token once; replacement text is not rescanned."""
        unresolved = []

        def replace(match):
            token = match.group(1)
            if token in values:
                return values[token]
            unresolved.append(token)
            return match.group(0)

        output = PLACEHOLDER_RE.sub(replace, template)
        if unresolved:
            self.logger.warning(f"Unresolved placeholders left in template: {', '.join(sorted(set(unresolved)))}")
        return output

    def render(self, content, template_path, now=None):
        now = now or datetime.now()
        try:
            with open(template_path, 'r', encoding='utf-8') as f:
                template = f.read()
        except FileNotFoundError:
            raise TemplateError(f"Template file not found: {template_path}")
        except (IOError, OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"Error reading template file {template_path}: {e}")

        self.logger.debug(f"Loaded template: {template_path}")
        return self.substitute(template, self.build_values(content, now))


class JinjaRenderer:
    """Render a Jinja2 template bound directly to the content document."""

    name = 'jinja'

    def __init__(self):
        self.logger = logging.getLogger('Onepager')

    def create_environment(self, templates_dir):
        # A fresh environment per build keeps edits visible in watch mode.
        env = Environment(loader=FileSystemLoader(str(templates_dir)), undefined=ChainableUndefined)
        env.globals['icon'] = social_icon
        env.globals['chip'] = tech_chip
        return env

    def render(self, content, template_path, now=None):
        now = now or datetime.now()
        template_path = Path(template_path)
        env = self.create_environment(template_path.parent)
        try:
            template = env.get_template(template_path.name)
        except TemplateNotFound:
            raise TemplateError(f"Template file not found: {template_path}")
        except TemplateSyntaxError as e:
            raise TemplateError(f"Template syntax error in {template_path} line {e.lineno}: {e.message}")

        self.logger.debug(f"Loaded template: {template_path}")

        context = dict(content)
        context.update(date_values(now))
        try:
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_path}: {e}")


RENDERERS = {
    PlaceholderRenderer.name: PlaceholderRenderer,
    JinjaRenderer.name: JinjaRenderer,
}


def get_renderer(name='placeholder'):
    """Return a renderer instance by strategy name."""
    try:
        return RENDERERS[name]()
    except KeyError:
        raise ValueError(f"Unknown renderer '{name}', expected one of {', '.join(RENDERERS)}")
