from django import template
from django.utils.safestring import mark_safe

from catalog.services.latex import render_latex

register = template.Library()


@register.filter(name='latex')
def latex(value):
    """{{ question.question_text|latex }} - text is escaped, math becomes MathML"""
    return mark_safe(render_latex(value or ''))
