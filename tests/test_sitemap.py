"""Tests for sitemap generation."""

import logging
from datetime import date

from onepager_pkg.sitemap import generate_sitemap


class TestGenerateSitemap:
    """Test cases for generate_sitemap."""

    def test_build_date_filled(self, project_dir):
        """Test that both {{BUILD_DATE}} occurrences are replaced."""
        written = generate_sitemap(
            project_dir / 'templates' / 'sitemap.template.xml',
            project_dir / 'templates' / 'sitemap.template.xsl',
            project_dir,
            today=date(2026, 10, 19),
        )

        sitemap = (project_dir / 'sitemap.xml').read_text(encoding='utf-8')
        assert written is True
        assert sitemap.count('<lastmod>2026-10-19</lastmod>') == 2
        assert '{{BUILD_DATE}}' not in sitemap

    def test_stylesheet_copied_verbatim(self, project_dir):
        """Test that the XSL stylesheet is copied byte for byte."""
        stylesheet = project_dir / 'templates' / 'sitemap.template.xsl'
        stylesheet.write_text('<xsl:stylesheet>{{BUILD_DATE}}</xsl:stylesheet>\n', encoding='utf-8')

        generate_sitemap(project_dir / 'templates' / 'sitemap.template.xml', stylesheet, project_dir)

        assert (project_dir / 'sitemap.xsl').read_bytes() == stylesheet.read_bytes()

    def test_missing_template_is_warning(self, project_dir, caplog):
        """Test that a missing template logs a warning instead of raising."""
        with caplog.at_level(logging.WARNING, logger='Onepager'):
            written = generate_sitemap(
                project_dir / 'templates' / 'missing.xml',
                project_dir / 'templates' / 'sitemap.template.xsl',
                project_dir,
            )

        assert written is False
        assert 'Skipping sitemap generation' in caplog.text
        assert not (project_dir / 'sitemap.xml').exists()

    def test_missing_stylesheet_writes_nothing(self, project_dir):
        """Test that a missing stylesheet leaves no half-written sitemap."""
        written = generate_sitemap(
            project_dir / 'templates' / 'sitemap.template.xml',
            project_dir / 'templates' / 'missing.xsl',
            project_dir,
        )

        assert written is False
        assert not (project_dir / 'sitemap.xml').exists()
