"""
LaTeX-bearing content renderer

Question text, options, explanations, doubts and responses may embed math:
$$...$$ is display math, $...$ is inline math. Math segments are converted
to MathML, the surrounding text is HTML-escaped.
"""
import logging
import re

from django.utils.html import escape
from latex2mathml.converter import convert

logger = logging.getLogger(__name__)

# $$...$$ blocks are taken out of the text first; inline $...$ is only
# searched for in what remains between them.
DISPLAY_PATTERN = re.compile(r'\$\$([\s\S]*?)\$\$')
INLINE_PATTERN = re.compile(r'\$([^$]+?)\$')

ERROR_PLACEHOLDER = '<span class="latex-error">[LaTeX Error]</span>'


def render_math(latex, display=False):
    """Render a single math segment, or the error placeholder if it is malformed"""
    try:
        return convert(latex.strip(), display='block' if display else 'inline')
    except Exception as e:
        logger.debug(f"Could not render LaTeX segment {latex!r}: {e}")
        return ERROR_PLACEHOLDER


def _render_inline(text):
    parts = []
    position = 0
    for match in INLINE_PATTERN.finditer(text):
        parts.append(escape(text[position:match.start()]))
        parts.append(render_math(match.group(1)))
        position = match.end()
    parts.append(escape(text[position:]))
    return ''.join(parts)


def render_latex(text):
    """
    Render text with embedded $...$ / $$...$$ math into HTML markup.
    Stateless, never raises for bad math.
    """
    if not text:
        return ''

    parts = []
    position = 0
    for match in DISPLAY_PATTERN.finditer(text):
        parts.append(_render_inline(text[position:match.start()]))
        parts.append(render_math(match.group(1), display=True))
        position = match.end()
    parts.append(_render_inline(text[position:]))
    return ''.join(parts)
