"""
Content document loading for Onepager.

The content document holds everything shown on the page: personal info,
social links, services, about text, projects, side projects and experience.
"""

import os
import json
import yaml
from typing import Dict, Any

from .exceptions import ContentError

CONTENT_SECTIONS = ('personal', 'socialLinks', 'services', 'about', 'projects', 'sideProjects', 'experience')


def load_content(path) -> Dict[str, Any]:
    """
    Load the content document from a JSON or YAML file.

    Args:
        path: Path to the content document

    Returns:
        The parsed document

    Raises:
        ContentError: If the file is missing, unreadable or not a mapping
    """
    path = str(path)
    file_ext = os.path.splitext(path)[1].lower()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if file_ext in ['.yml', '.yaml']:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError:
        raise ContentError(f"Content file not found: {path}")
    except PermissionError:
        raise ContentError(f"Permission denied reading content file: {path}")
    except yaml.YAMLError as e:
        raise ContentError(f"Invalid YAML in content file {path}: {e}")
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in content file {path}: {e}")
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise ContentError(f"Error reading content file {path}: {e}")

    if not isinstance(data, dict):
        raise ContentError(f"Content file {path} must contain a mapping at the top level")
    return data


def section_items(section, key='items'):
    """Return the list stored under ``key`` in a section, or an empty list."""
    if not isinstance(section, dict):
        return []
    return section.get(key) or []
