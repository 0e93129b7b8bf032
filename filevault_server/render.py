from __future__ import annotations

from html import escape
from typing import Iterable
from urllib.parse import quote

from filevault.operations import FileEntry

_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>File Manager</title></head>
<body>
<h1>File Manager</h1>
<h2>Files:</h2>
<ul>
{items}
</ul>
<h2>Create File</h2>
<form action="/create" method="GET">
<input type="text" name="file" placeholder="filename.txt" required>
<textarea name="content" placeholder="File content..."></textarea>
<button type="submit">Create File</button>
</form>
</body>
</html>
"""


def _render_entry(entry: FileEntry) -> str:
    marker = "(Dir)" if entry.is_directory else "(File)"
    link = quote(entry.name, safe="")
    return (
        f"<li>{escape(entry.name)} {marker}"
        f' | <a href="/read?file={link}">Read</a>'
        f' | <a href="/delete?file={link}">Delete</a></li>'
    )


def render_listing(entries: Iterable[FileEntry]) -> str:
    return _PAGE.format(items="\n".join(_render_entry(e) for e in entries))
