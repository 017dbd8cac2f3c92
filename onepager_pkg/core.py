import os
import logging
from collections import namedtuple
from datetime import datetime

from .content import load_content
from .exceptions import BuildError
from .minify import get_minifiers, minify_html, size_reduction
from .renderer import get_renderer
from .sitemap import generate_sitemap

AssetReport = namedtuple('AssetReport', ['name', 'original_size', 'minified_size', 'savings'])
BuildReport = namedtuple('BuildReport', ['output_file', 'assets', 'sitemap_written'])


class InfoFilter(logging.Filter):
    """Filter to allow only selected INFO messages, plus warnings and errors, on the console."""
    def filter(self, record):
        if record.levelno >= logging.WARNING:
            return True
        allowed_messages = [
            "Starting site build",
            "Loading content",
            "Minifying CSS",
            "Minifying JavaScript",
            "Rendering template",
            "Minifying HTML",
            "minified (",
            "Writing",
            "Generating XML sitemap",
            "Build complete",
            "Summary:",
            "   CSS:",
            "   JS:",
            "   HTML:",
            "Site build completed in",
            "Starting watch mode",
            "Watching:",
            "Running initial build",
            "Watch mode active",
            "changed - rebuilding"
        ]
        return any(msg in record.getMessage() for msg in allowed_messages)


def setup_logging(log_dir=None):
    """Set up logging configuration for the shared Onepager logger."""
    logger = logging.getLogger('Onepager')
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        # Console handler with filter
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.addFilter(InfoFilter())
        console_formatter = logging.Formatter('%(message)s')
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        # File handler for all logs
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            log_filename = datetime.now().strftime('onepager_%Y-%m-%d_%H-%M-%S.log')
            log_filepath = os.path.join(log_dir, log_filename)

            file_handler = logging.FileHandler(log_filepath)
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

    return logger


def format_kb(size):
    return f"{size / 1024:.1f}KB"


class Onepager:
    def __init__(self, config, now=None):
        self.config = config
        self.now = now
        self.assets = []
        self.logger = setup_logging(config.log_dir)

    def read_text(self, path, label):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise BuildError(f"{label} file not found: {path}")
        except (IOError, OSError, UnicodeDecodeError) as e:
            raise BuildError(f"Error reading {label} file {path}: {e}")

    def write_text(self, path, text):
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
        except (IOError, OSError) as e:
            raise BuildError(f"Failed to write {path}: {e}")
        self.logger.debug(f"Wrote {path}")

    def record_asset(self, name, original, minified):
        report = AssetReport(name, len(original), len(minified), size_reduction(original, minified))
        self.assets.append(report)
        self.logger.info(f"{name} minified ({report.savings:.1f}% smaller)")
        return report

    def minify_asset(self, name, source, output, minifier):
        """Minify one source asset into its output path."""
        content = self.read_text(source, name)
        minified = minifier(content)
        self.write_text(output, minified)
        return self.record_asset(name, content, minified)

    def minify_assets(self):
        """Minify CSS and JS assets."""
        minify_css, minify_js = get_minifiers(self.config.minifier)

        self.logger.info("Minifying CSS...")
        self.minify_asset('CSS', self.config.css_source, self.config.css_output, minify_css)

        self.logger.info("Minifying JavaScript...")
        self.minify_asset('JS', self.config.js_source, self.config.js_output, minify_js)

    def render(self, content, now):
        """Render the page with the configured strategy."""
        renderer = get_renderer(self.config.renderer)
        self.logger.info(f"Rendering template with the {renderer.name} renderer...")
        return renderer.render(content, self.config.template_file, now=now)

    def log_summary(self):
        self.logger.info("Summary:")
        for report in self.assets:
            label = f"{report.name}:".ljust(5)
            self.logger.info(
                f"   {label} {format_kb(report.original_size)} -> {format_kb(report.minified_size)} "
                f"({report.savings:.1f}% smaller)"
            )

    def build(self):
        """Main build process."""
        self.assets = []
        now = self.now or datetime.now()
        self.logger.info("Starting site build...")

        self.logger.info("Loading content...")
        content = load_content(self.config.content_file)

        if self.config.minify:
            self.minify_assets()

        html = self.render(content, now)

        if self.config.minify:
            self.logger.info("Minifying HTML...")
            minified = minify_html(html)
            self.record_asset('HTML', html, minified)
            html = minified

        self.logger.info(f"Writing {os.path.basename(self.config.output_file)}...")
        self.write_text(self.config.output_file, html)

        sitemap_written = generate_sitemap(
            self.config.sitemap_template,
            self.config.sitemap_stylesheet,
            self.config.sitemap_dir,
            today=now.date(),
        )

        self.logger.info("Build complete!")
        if self.assets:
            self.log_summary()

        return BuildReport(self.config.output_file, list(self.assets), sitemap_written)
