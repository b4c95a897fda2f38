import os
from typing import Any, Dict
import jinja2

# Configure Jinja2 environment
# src/common/utils/email_service.py -> src/templates/emails
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATE_DIR = os.path.join(BASE_DIR, "templates", "emails")

template_loader = jinja2.FileSystemLoader(searchpath=TEMPLATE_DIR)
html_env = jinja2.Environment(loader=template_loader, autoescape=True)
# Plain-text bodies must not be HTML-escaped
text_env = jinja2.Environment(loader=template_loader, autoescape=False, keep_trailing_newline=True)

def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """
    Render an email template from src/templates/emails.
    Templates ending in .html are autoescaped, anything else is rendered verbatim.
    """
    env = html_env if template_name.endswith(".html") else text_env
    template = env.get_template(template_name)
    return template.render(**context)
