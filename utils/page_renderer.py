"""Compose a generated page into one standalone HTML document."""

import html as html_lib
import re

from models.search import GeneratedPage

# Served with this CSP so the document renders without scripts.
SANDBOX_CSP = "sandbox allow-same-origin"

_DOCUMENT_HEAD_RE = re.compile(r"<!DOCTYPE html>.*?<body[^>]*>", re.IGNORECASE | re.DOTALL)
_DOCUMENT_TAIL_RE = re.compile(r"</body>.*?</html>", re.IGNORECASE | re.DOTALL)

BASE_CSS = """
body {
    margin: 0;
    padding: 20px;
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', sans-serif;
    line-height: 1.6;
    color: #333;
}

/* links in generated pages lead nowhere */
a {
    color: #1a0dab;
    cursor: default;
    pointer-events: none;
}

img {
    max-width: 100%;
    height: auto;
}
"""


def body_content(page_html: str) -> str:
    """Strip the document skeleton around the body, if there is one."""
    return _DOCUMENT_TAIL_RE.sub("", _DOCUMENT_HEAD_RE.sub("", page_html))


def compose_document(page: GeneratedPage) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html_lib.escape(page.title)}</title>
    <style>
{page.css}
{BASE_CSS}
    </style>
</head>
<body>
{body_content(page.html)}
</body>
</html>
"""
