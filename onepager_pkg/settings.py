#!/usr/bin/env python3
"""
Settings loader for Onepager.
Supports configuration from onepager.yml, onepager.yaml, or onepager.json files.
"""

import os
import json
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

RENDERERS = ('placeholder', 'jinja')
MINIFIERS = ('regex', 'library')


class OnepagerSettings:
    """Load and manage Onepager configuration settings."""

    # Default configuration
    DEFAULT_SETTINGS = {
        'content': 'data/site-data.json',
        'template': 'index.template.html',
        'output': 'index.html',
        'css_source': 'assets/css/styles.css',
        'css_output': 'assets/css/styles.min.css',
        'js_source': 'assets/js/scripts.js',
        'js_output': 'assets/js/scripts.min.js',
        'sitemap_template': 'templates/sitemap.template.xml',
        'sitemap_stylesheet': 'templates/sitemap.template.xsl',
        'sitemap_dir': '.',
        'renderer': 'placeholder',
        'minify': True,
        'minifier': 'regex',
        'log_dir': 'logs',
        'watch': False
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['onepager.yml', 'onepager.yaml', 'onepager.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            try:
                loaded_settings = self._load_config_file(config_file)
                if loaded_settings:
                    if not isinstance(loaded_settings, dict):
                        raise ValueError("configuration must be a mapping")
                    # Merge with defaults, giving preference to loaded settings
                    self.settings.update(loaded_settings)
                    print(f"Loaded configuration from: {os.path.relpath(config_file)}")
            except (ValueError, IOError, OSError) as e:
                print(f"Warning: Failed to load config file {config_file}: {e}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    return yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    return json.load(f) or {}
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading configuration file: {config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        filename = f'onepager.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    # Custom YAML output with comments
                    f.write("# Onepager Configuration File\n")
                    f.write("# Paths are relative to this file's directory\n\n")
                    f.write("# Inputs\n")
                    f.write("content: data/site-data.json\n")
                    f.write("template: index.template.html\n\n")
                    f.write("# Output\n")
                    f.write("output: index.html\n\n")
                    f.write("# Assets\n")
                    f.write("css_source: assets/css/styles.css\n")
                    f.write("css_output: assets/css/styles.min.css\n")
                    f.write("js_source: assets/js/scripts.js\n")
                    f.write("js_output: assets/js/scripts.min.js\n\n")
                    f.write("# Sitemap\n")
                    f.write("sitemap_template: templates/sitemap.template.xml\n")
                    f.write("sitemap_stylesheet: templates/sitemap.template.xsl\n")
                    f.write("sitemap_dir: .\n\n")
                    f.write("# Build settings\n")
                    f.write("renderer: placeholder  # placeholder or jinja\n")
                    f.write("minify: true\n")
                    f.write("minifier: regex  # regex or library\n")
                    f.write("log_dir: logs\n")
                elif file_format == 'json':
                    sample_config = {k: v for k, v in self.DEFAULT_SETTINGS.items() if k != 'watch'}
                    json.dump(sample_config, f, indent=2)
                else:
                    raise ValueError(f"Unsupported config file format: {file_format}")
        except PermissionError:
            raise PermissionError(f"Permission denied creating configuration file: {config_path}")
        except (IOError, OSError) as e:
            raise IOError(f"Error writing configuration file {config_path}: {e}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        # Override with non-None command line arguments
        for key, value in args_dict.items():
            if value is not None:
                merged[key] = value

        return merged


@dataclass
class BuildConfig:
    """Resolved build configuration. Every path is absolute."""

    root: Path
    content_file: Path
    template_file: Path
    output_file: Path
    css_source: Path
    css_output: Path
    js_source: Path
    js_output: Path
    sitemap_template: Path
    sitemap_stylesheet: Path
    sitemap_dir: Path
    renderer: str = 'placeholder'
    minify: bool = True
    minifier: str = 'regex'
    log_dir: Optional[Path] = None

    def __post_init__(self):
        if self.renderer not in RENDERERS:
            raise ValueError(f"Unknown renderer '{self.renderer}', expected one of {', '.join(RENDERERS)}")
        if self.minifier not in MINIFIERS:
            raise ValueError(f"Unknown minifier '{self.minifier}', expected one of {', '.join(MINIFIERS)}")

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], root=None) -> 'BuildConfig':
        """Build a config from a settings dictionary, resolving paths against ``root``."""
        root = Path(root or os.getcwd()).resolve()

        def resolve(value):
            path = Path(os.path.expanduser(str(value)))
            return path if path.is_absolute() else root / path

        merged = {**OnepagerSettings.DEFAULT_SETTINGS, **settings}
        log_dir = merged.get('log_dir')
        return cls(
            root=root,
            content_file=resolve(merged['content']),
            template_file=resolve(merged['template']),
            output_file=resolve(merged['output']),
            css_source=resolve(merged['css_source']),
            css_output=resolve(merged['css_output']),
            js_source=resolve(merged['js_source']),
            js_output=resolve(merged['js_output']),
            sitemap_template=resolve(merged['sitemap_template']),
            sitemap_stylesheet=resolve(merged['sitemap_stylesheet']),
            sitemap_dir=resolve(merged['sitemap_dir']),
            renderer=merged['renderer'],
            minify=bool(merged['minify']),
            minifier=merged['minifier'],
            log_dir=resolve(log_dir) if log_dir else None,
        )

    @property
    def watched_files(self):
        return [self.content_file, self.template_file]
