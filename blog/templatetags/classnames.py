"""
{% cn %} template tag.

    {% load classnames %}
    <a class="{% cn 'tag' active_flags %}">...</a>
"""

from django import template

from core.utils import cn as compose_class_names

register = template.Library()


@register.simple_tag(name="cn")
def cn(*inputs):
    return compose_class_names(*inputs)
