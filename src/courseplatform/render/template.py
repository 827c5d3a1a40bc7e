"""Fixed HTML document template for rendered lessons.

The template is constant: only the body fragment changes between lessons,
so the same markdown always renders to the same bytes.
"""

from __future__ import annotations

STYLESHEET = """\
body {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    line-height: 1.6;
    color: #333;
    max-width: 900px;
    margin: 0 auto;
    padding: 20px;
    background-color: #f5f5f5;
}
h1 {
    color: #2c3e50;
    border-bottom: 3px solid #3498db;
    padding-bottom: 10px;
    margin-top: 0;
}
h2 {
    color: #34495e;
    margin-top: 30px;
    border-left: 4px solid #3498db;
    padding-left: 10px;
}
h3 {
    color: #546e7a;
    margin-top: 20px;
}
code {
    background-color: #f4f4f4;
    padding: 2px 6px;
    border-radius: 3px;
    font-family: 'Courier New', monospace;
    font-size: 0.9em;
    color: #c7254e;
}
pre {
    background-color: #2d2d2d;
    color: #f8f8f2;
    padding: 15px;
    border-radius: 5px;
    overflow-x: auto;
    line-height: 1.4;
}
pre code {
    background-color: transparent;
    color: #f8f8f2;
    padding: 0;
}
blockquote {
    border-left: 4px solid #3498db;
    margin: 20px 0;
    padding: 10px 20px;
    background-color: #ecf0f1;
    font-style: italic;
}
ul, ol {
    margin: 15px 0;
    padding-left: 30px;
}
li {
    margin: 8px 0;
}
table {
    border-collapse: collapse;
    width: 100%;
    margin: 20px 0;
}
th, td {
    border: 1px solid #ddd;
    padding: 12px;
    text-align: left;
}
th {
    background-color: #3498db;
    color: white;
}
tr:nth-child(even) {
    background-color: #f2f2f2;
}
.success, .warning, .info {
    padding: 15px;
    margin: 15px 0;
    border-radius: 4px;
}
.success {
    background-color: #d4edda;
    border-left: 4px solid #28a745;
}
.warning {
    background-color: #fff3cd;
    border-left: 4px solid #ffc107;
}
.info {
    background-color: #d1ecf1;
    border-left: 4px solid #17a2b8;
}
a {
    color: #3498db;
    text-decoration: none;
}
a:hover {
    text-decoration: underline;
}
img {
    max-width: 100%;
    height: auto;
    border-radius: 5px;
    box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}
"""

DOCUMENT_HEAD = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    '<meta charset="UTF-8">\n'
    '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
    "<style>\n" + STYLESHEET + "</style>\n"
    "</head>\n"
    "<body>\n"
)

DOCUMENT_TAIL = "</body>\n</html>\n"


def wrap_in_template(fragment: str) -> str:
    """Wrap an HTML fragment in the complete styled document."""
    if fragment and not fragment.endswith("\n"):
        fragment += "\n"
    return DOCUMENT_HEAD + fragment + DOCUMENT_TAIL
