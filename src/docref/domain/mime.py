import posixpath
from typing import Mapping

DEFAULT_MIME_KEY = "txt"

DEFAULT_MIME_TABLE: Mapping[str, str] = {
    "txt": "text/plain",
    "htm": "text/html",
    "html": "text/html",
    "xhtml": "application/xhtml+xml",
    "css": "text/css",
    "js": "application/javascript",
    "mjs": "application/javascript",
    "json": "application/json",
    "xml": "application/xml",
    "svg": "image/svg+xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "webp": "image/webp",
    "avif": "image/avif",
    "ico": "image/x-icon",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "otf": "font/otf",
    "eot": "application/vnd.ms-fontobject",
    "mp3": "audio/mpeg",
    "ogg": "audio/ogg",
    "wav": "audio/wav",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "pdf": "application/pdf",
    "zip": "application/zip",
    "swf": "application/x-shockwave-flash",
}


def mime_for(file_name: str | None, table: Mapping[str, str] = DEFAULT_MIME_TABLE) -> str:
    default = table[DEFAULT_MIME_KEY]
    if not file_name:
        return default
    ext = posixpath.splitext(file_name)[1]
    if not ext:
        return default
    return table.get(ext[1:].lower(), default)
