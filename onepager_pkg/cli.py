#!/usr/bin/env python3
"""
Command-line interface for Onepager - single-page site builder.
"""

import os
import sys
import argparse
import shutil
import time
from typing import List, Optional

from . import __version__
from .core import Onepager, setup_logging
from .settings import BuildConfig, OnepagerSettings, MINIFIERS, RENDERERS
from .watch import watch

STARTER_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')

# Starter files shipped with the package, mapped to their place in a new project
STARTER_FILES = [
    ('site-data.json', 'data/site-data.json'),
    ('index.template.html', 'index.template.html'),
    ('index.jinja.html', 'index.jinja.html'),
    ('styles.css', 'assets/css/styles.css'),
    ('scripts.js', 'assets/js/scripts.js'),
    ('sitemap.template.xml', 'templates/sitemap.template.xml'),
    ('sitemap.template.xsl', 'templates/sitemap.template.xsl'),
]


def create_starter_structure(project_dir: Optional[str] = None) -> List[str]:
    """Create a starter project with content, templates, and assets. Existing files are kept."""
    project_dir = project_dir or os.getcwd()
    created = []

    for source_name, relative_dest in STARTER_FILES:
        src_path = os.path.join(STARTER_DIR, source_name)
        dest_path = os.path.join(project_dir, relative_dest)

        if os.path.exists(dest_path):
            print(f"File already exists: {relative_dest}")
            continue

        os.makedirs(os.path.dirname(dest_path), exist_ok=True)
        shutil.copy2(src_path, dest_path)
        created.append(relative_dest)
        print(f"Created: {relative_dest}")

    print("\n✅ Starter structure created successfully!")
    print("\nNext steps:")
    print("1. Edit your content in 'data/site-data.json'")
    print("2. Customize 'index.template.html' (or switch to 'index.jinja.html' with renderer: jinja)")
    print("3. Run 'onepager' to build index.html, or 'onepager --watch' while editing")
    return created


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Onepager - Single-Page Site Builder')
    parser.add_argument('--root', type=str,
                        help='Project directory (defaults to the current directory)')
    parser.add_argument('--content', type=str,
                        help='Content document (JSON or YAML)')
    parser.add_argument('--template', type=str,
                        help='HTML template to render')
    parser.add_argument('--output', type=str,
                        help='Path of the generated HTML file')
    parser.add_argument('--renderer', type=str, choices=RENDERERS,
                        help='Template strategy: placeholder tokens or Jinja2')
    parser.add_argument('--minify', dest='minify', action='store_true', default=None,
                        help='Minify CSS, JS, and the generated HTML')
    parser.add_argument('--no-minify', dest='minify', action='store_false', default=None,
                        help='Skip minification')
    parser.add_argument('--minifier', type=str, choices=MINIFIERS,
                        help='Minifier engine for CSS and JS')
    parser.add_argument('--watch', action='store_true', default=None,
                        help='Watch the content and template and rebuild on changes')
    parser.add_argument('--no-watch', dest='watch', action='store_false', default=None,
                        help='Build once even if the config file enables watch mode')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file and starter project')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def child_build_command(argv: List[str]) -> List[str]:
    """Command that runs a single build with the same options, never in watch mode."""
    args = [arg for arg in argv if arg not in ('--watch', '--no-watch')]
    return [sys.executable, '-m', 'onepager_pkg.cli'] + args + ['--no-watch']


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    argv = sys.argv[1:] if argv is None else list(argv)
    args = build_parser().parse_args(argv)
    root = os.path.abspath(os.path.expanduser(args.root)) if args.root else os.getcwd()

    # Handle init command
    if args.init:
        settings_loader = OnepagerSettings(root)
        config_path = settings_loader.create_sample_config(args.init)
        print(f"Created sample configuration file: {config_path}")

        print("\nCreating starter project structure...")
        create_starter_structure(root)
        return

    # Load settings from configuration file
    settings_loader = OnepagerSettings(root)
    settings_loader.load_settings()

    # Command line arguments take precedence
    args_dict = {k: v for k, v in vars(args).items() if k not in ('root', 'init')}
    final_settings = settings_loader.merge_with_args(args_dict)

    overall_start_time = time.time()

    try:
        config = BuildConfig.from_settings(final_settings, root)

        if final_settings.get('watch'):
            setup_logging(config.log_dir)
            watch(config, child_build_command(argv))
            return

        generator = Onepager(config)
        generator.build()

        total_time = time.time() - overall_start_time
        generator.logger.info(f"Site build completed in {total_time:.6f} seconds.")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
