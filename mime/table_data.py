"""Built-in extension to MIME type table. The first MIME of each entry is canonical."""

EXTENSION_MIMES: dict[str, tuple[str, ...]] = {
    # Documents
    "pdf": ("application/pdf", "application/x-pdf", "application/acrobat"),
    "ai": ("application/postscript",),
    "eps": ("application/postscript",),
    "ps": ("application/postscript",),
    "doc": ("application/msword", "application/vnd.ms-office", "application/octet-stream"),
    "dot": ("application/msword",),
    "docx": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/zip",
        "application/msword",
    ),
    "xls": ("application/vnd.ms-excel", "application/msexcel", "application/excel", "application/octet-stream"),
    "xlsx": (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/zip",
        "application/vnd.ms-excel",
    ),
    "ppt": ("application/vnd.ms-powerpoint", "application/powerpoint", "application/octet-stream"),
    "pptx": (
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "application/zip",
    ),
    "odt": ("application/vnd.oasis.opendocument.text",),
    "ods": ("application/vnd.oasis.opendocument.spreadsheet",),
    "odp": ("application/vnd.oasis.opendocument.presentation",),
    "odg": ("application/vnd.oasis.opendocument.graphics",),
    "rtf": ("text/rtf", "application/rtf"),
    "wri": ("application/x-mswrite",),
    # Text and markup
    "txt": ("text/plain",),
    "text": ("text/plain",),
    "log": ("text/plain", "text/x-log"),
    "csv": (
        "text/csv",
        "text/x-comma-separated-values",
        "text/comma-separated-values",
        "application/vnd.ms-excel",
        "text/plain",
        "application/octet-stream",
    ),
    "tsv": ("text/tab-separated-values",),
    "htm": ("text/html",),
    "html": ("text/html",),
    "shtml": ("text/html",),
    "xhtml": ("application/xhtml+xml",),
    "xml": ("application/xml", "text/xml"),
    "xsl": ("application/xml", "text/xsl"),
    "css": ("text/css",),
    "js": ("application/javascript", "text/javascript", "application/x-javascript"),
    "json": ("application/json", "text/json"),
    "md": ("text/markdown", "text/plain"),
    "ics": ("text/calendar",),
    "vcf": ("text/x-vcard",),
    "sgml": ("text/sgml",),
    # Source code
    "php": ("application/x-httpd-php", "text/x-php", "application/php"),
    "phps": ("application/x-httpd-php-source",),
    "py": ("text/x-python", "text/plain"),
    "sh": ("application/x-sh", "text/x-shellscript"),
    "c": ("text/x-c", "text/plain"),
    "h": ("text/x-c", "text/plain"),
    "java": ("text/x-java-source", "text/plain"),
    # Images
    "bmp": ("image/bmp", "image/x-ms-bmp", "image/x-windows-bmp"),
    "gif": ("image/gif",),
    "jpeg": ("image/jpeg", "image/pjpeg"),
    "jpg": ("image/jpeg", "image/pjpeg"),
    "jpe": ("image/jpeg", "image/pjpeg"),
    "png": ("image/png", "image/x-png"),
    "tif": ("image/tiff",),
    "tiff": ("image/tiff",),
    "ico": ("image/x-icon", "image/vnd.microsoft.icon"),
    "svg": ("image/svg+xml",),
    "webp": ("image/webp",),
    "psd": ("application/x-photoshop", "image/vnd.adobe.photoshop"),
    "swf": ("application/x-shockwave-flash",),
    # Audio
    "aif": ("audio/x-aiff",),
    "aiff": ("audio/x-aiff",),
    "mid": ("audio/midi",),
    "midi": ("audio/midi",),
    "mp2": ("audio/mpeg",),
    "mp3": ("audio/mpeg", "audio/mpg", "audio/mpeg3", "audio/mp3"),
    "m4a": ("audio/mp4", "audio/x-m4a"),
    "ogg": ("audio/ogg", "application/ogg"),
    "flac": ("audio/flac", "audio/x-flac"),
    "wav": ("audio/x-wav", "audio/wav", "audio/wave"),
    "ra": ("audio/x-realaudio",),
    "ram": ("audio/x-pn-realaudio",),
    "rm": ("audio/x-pn-realaudio",),
    # Video
    "avi": ("video/x-msvideo", "video/avi"),
    "flv": ("video/x-flv",),
    "mkv": ("video/x-matroska",),
    "mov": ("video/quicktime",),
    "qt": ("video/quicktime",),
    "movie": ("video/x-sgi-movie",),
    "mp4": ("video/mp4",),
    "mpe": ("video/mpeg",),
    "mpeg": ("video/mpeg",),
    "mpg": ("video/mpeg",),
    "webm": ("video/webm",),
    "wmv": ("video/x-ms-wmv",),
    # Archives
    "7z": ("application/x-7z-compressed",),
    "bz2": ("application/x-bzip2",),
    "gtar": ("application/x-gtar",),
    "gz": ("application/x-gzip", "application/gzip"),
    "tgz": ("application/x-tar", "application/x-gzip-compressed"),
    "tar": ("application/x-tar",),
    "rar": ("application/x-rar", "application/vnd.rar", "application/x-rar-compressed"),
    "xz": ("application/x-xz",),
    "zip": ("application/zip", "application/x-zip", "application/x-zip-compressed", "application/octet-stream"),
    # Binaries
    "bin": ("application/octet-stream", "application/macbinary"),
    "class": ("application/octet-stream", "application/java-vm"),
    "dll": ("application/octet-stream", "application/x-msdownload"),
    "dms": ("application/octet-stream",),
    "exe": ("application/octet-stream", "application/x-msdownload"),
    "lha": ("application/octet-stream",),
    "lzh": ("application/octet-stream",),
    "so": ("application/octet-stream",),
    "iso": ("application/x-iso9660-image",),
    "jar": ("application/java-archive", "application/x-java-application"),
    "dcr": ("application/x-director",),
    "dir": ("application/x-director",),
    "dxr": ("application/x-director",),
    # Fonts
    "ttf": ("font/ttf", "application/x-font-ttf"),
    "otf": ("font/otf",),
    "woff": ("font/woff",),
    "woff2": ("font/woff2",),
    # Mail
    "eml": ("message/rfc822",),
    "msg": ("application/vnd.ms-outlook",),
}
