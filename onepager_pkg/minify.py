"""
Pattern-based minifiers for CSS, JavaScript and HTML.

Each minifier is an ordered sequence of pure regex passes. Comment stripping
always runs before whitespace collapsing. The passes are textual only: they do
not validate their input, and malformed input comes out distorted rather than
raising.

Known limitation of the JavaScript passes: ``//`` inside a string literal that
is not preceded by ``:`` (for example ``"a//b"``) is treated as the start of a
comment. Use the ``library`` minifier (rjsmin) for sources that need it.
"""

import re

import csscompressor
import rjsmin

BLOCK_COMMENT_RE = re.compile(r'/\*[\s\S]*?\*/')
WHITESPACE_RE = re.compile(r'\s+')

CSS_PUNCTUATION_RE = re.compile(r'\s*([{};:,>+~])\s*')
CSS_TRAILING_SEMICOLON_RE = re.compile(r';+}')

JS_LINE_COMMENT_RE = re.compile(r'(?<!:)//[^\n]*')
JS_PUNCTUATION_RE = re.compile(r'\s*([=+\-*/<>!&|,;:{}()\[\]])\s*')
JS_KEYWORD_RE = re.compile(r'\b(if|else|for|while|function|return|var|let|const)([({])')

HTML_COMMENT_RE = re.compile(r'<!--(?!\[if\s)(?!<!)[\s\S]*?-->')
HTML_BETWEEN_TAGS_RE = re.compile(r'>\s+<')
HTML_WHITESPACE_RUN_RE = re.compile(r'\s{2,}')
HTML_AFTER_OPEN_TAG_RE = re.compile(r'(<[^/>][^>]*>)\s+')
HTML_BEFORE_CLOSE_TAG_RE = re.compile(r'\s+(</[^>]+>)')


def strip_block_comments(text):
    return BLOCK_COMMENT_RE.sub('', text)


def collapse_whitespace(text):
    return WHITESPACE_RE.sub(' ', text)


# CSS

def tighten_css_punctuation(css):
    return CSS_PUNCTUATION_RE.sub(r'\1', css)


def drop_trailing_semicolons(css):
    return CSS_TRAILING_SEMICOLON_RE.sub('}', css)


def minify_css(css):
    """Minify a CSS stylesheet."""
    css = strip_block_comments(css)
    css = collapse_whitespace(css)
    css = tighten_css_punctuation(css)
    css = drop_trailing_semicolons(css)
    return css.strip()


# JavaScript

def strip_js_line_comments(js):
    """Strip ``//`` comments unless the slashes follow a colon, as in ``http://``."""
    return JS_LINE_COMMENT_RE.sub('', js)


def tighten_js_punctuation(js):
    return JS_PUNCTUATION_RE.sub(r'\1', js)


def restore_keyword_spacing(js):
    """Put back the space between a reserved word and a following ``(`` or ``{``."""
    return JS_KEYWORD_RE.sub(r'\1 \2', js)


def minify_js(js):
    """Minify a JavaScript source."""
    js = strip_js_line_comments(js)
    js = strip_block_comments(js)
    js = collapse_whitespace(js)
    js = tighten_js_punctuation(js)
    js = restore_keyword_spacing(js)
    return js.strip()


# HTML

def strip_html_comments(html):
    """Strip comments, keeping conditional comments such as ``<!--[if IE]>``."""
    return HTML_COMMENT_RE.sub('', html)


def collapse_between_tags(html):
    return HTML_BETWEEN_TAGS_RE.sub('><', html)


def collapse_whitespace_runs(html):
    return HTML_WHITESPACE_RUN_RE.sub(' ', html)


def strip_after_open_tags(html):
    """Strip whitespace after opening tags; text after a closing tag keeps its space."""
    return HTML_AFTER_OPEN_TAG_RE.sub(r'\1', html)


def strip_before_close_tags(html):
    return HTML_BEFORE_CLOSE_TAG_RE.sub(r'\1', html)


def minify_html(html):
    """Minify an HTML document."""
    html = strip_html_comments(html)
    html = collapse_between_tags(html)
    html = collapse_whitespace_runs(html)
    html = strip_after_open_tags(html)
    html = strip_before_close_tags(html)
    return html.strip()


CSS_MINIFIERS = {
    'regex': minify_css,
    'library': csscompressor.compress,
}

JS_MINIFIERS = {
    'regex': minify_js,
    'library': rjsmin.jsmin,
}


def get_minifiers(engine='regex'):
    """Return the (css, js) minifier pair for an engine name."""
    try:
        return CSS_MINIFIERS[engine], JS_MINIFIERS[engine]
    except KeyError:
        raise ValueError(f"Unknown minifier '{engine}', expected one of {', '.join(CSS_MINIFIERS)}")


def size_reduction(original, minified):
    """Percentage saved by minification, rounded to one decimal place."""
    if not original:
        return 0.0
    return round((1 - len(minified) / len(original)) * 100, 1)
