"""
Markup templates for the admin UI.

Minimal, list-table style output; all interpolated values are escaped.
"""

from jinja2 import Environment

env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)


ADMIN_SHELL_TEMPLATE = env.from_string(
    """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{{ title }}</title></head>
<body class="wp-admin">
<ul id="adminmenu">
{% for page in menu %}
<li><a href="/admin/{{ page.path_key }}">{{ page.menu_title }}</a></li>
{% endfor %}
</ul>
<div class="wrap">
{{ notices|safe }}
{{ body|safe }}
</div>
</body>
</html>
"""
)


CATEGORY_NOTICE_TEMPLATE = env.from_string(
    '<div class="notice notice-error"><p>'
    "One or more of your categories are missing or configured incorrectly for this plugin. "
    "Please ensure you have these: "
    "{% for category in categories %}"
    '<br>"{{ category.display_name }}" with a slug of "{{ category.identifier }}"'
    "{% endfor %}"
    "</p></div>"
)


_TABLE_HEADER_CELLS = (
    '<th scope="col" class="manage-column column-title column-primary">Title</th>'
    '<th scope="col" class="manage-column column-author">Author</th>'
    '<th scope="col" class="manage-column column-date">Date</th>'
)

CATEGORY_PAGE_TEMPLATE = env.from_string(
    "<h1>{{ display_name }} Content</h1>\n"
    "{% if rows %}"
    '<table class="wp-list-table widefat fixed striped posts">'
    "<thead><tr>" + _TABLE_HEADER_CELLS + "</tr></thead>"
    '<tbody id="the-list">'
    "{% for row in rows %}"
    '<tr id="post-{{ row.id }}" class="type-post status-publish entry">'
    "<td>{{ row.title }}</td><td>{{ row.author }}</td><td>{{ row.date }}</td>"
    "</tr>"
    "{% endfor %}"
    "</tbody>"
    "<tfoot><tr>" + _TABLE_HEADER_CELLS + "</tr></tfoot>"
    "</table>"
    "{% else %}"
    "<h3>There are no {{ display_name }} posts. Check back later.</h3>"
    "{% endif %}"
)


def render_admin_shell(title: str, menu, notices: str, body: str) -> str:
    """Wrap a page body in the admin chrome (menu + pending notices)."""
    return ADMIN_SHELL_TEMPLATE.render(title=title, menu=menu, notices=notices, body=body)
