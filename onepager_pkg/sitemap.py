"""Sitemap generation: fill the build date into the sitemap template and copy its stylesheet."""

import logging
import os
from datetime import date

BUILD_DATE_PLACEHOLDER = '{{BUILD_DATE}}'
SITEMAP_FILENAME = 'sitemap.xml'
STYLESHEET_FILENAME = 'sitemap.xsl'


def generate_sitemap(template_path, stylesheet_path, output_dir, today=None):
    """
    Write sitemap.xml and sitemap.xsl into ``output_dir``.

    Every ``{{BUILD_DATE}}`` in the sitemap template becomes ``today`` in
    ``YYYY-MM-DD`` form. The stylesheet is copied verbatim. Failures are
    logged as warnings and never raised.

    Returns:
        True if both files were written, False otherwise
    """
    logger = logging.getLogger('Onepager')
    today = today or date.today()

    try:
        with open(template_path, 'r', encoding='utf-8') as f:
            sitemap_content = f.read()
        with open(stylesheet_path, 'rb') as f:
            stylesheet_content = f.read()
        sitemap_content = sitemap_content.replace(BUILD_DATE_PLACEHOLDER, today.strftime('%Y-%m-%d'))

        os.makedirs(output_dir, exist_ok=True)
        sitemap_file = os.path.join(output_dir, SITEMAP_FILENAME)
        with open(sitemap_file, 'w', encoding='utf-8') as f:
            f.write(sitemap_content)

        with open(os.path.join(output_dir, STYLESHEET_FILENAME), 'wb') as f:
            f.write(stylesheet_content)
    except (IOError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping sitemap generation: {e}")
        return False

    logger.info("Generating XML sitemap")
    return True
