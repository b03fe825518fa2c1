"""Constants for favicon resolution"""

# Link elements declaring an icon. `rel*="icon"` also matches `apple-touch-icon`
# and its variants, which are accepted as candidates too.
LINK_SELECTOR: str = 'link[rel*="icon"][href]'

PARSER: str = "html.parser"

# Href of the conventional icon location assumed when the page declares none.
IMPLICIT_FAVICON_HREF: str = "/favicon.ico"

DEFAULT_ICON_CONTENT_TYPE: str = "image/svg+xml"

FALLBACK_CONTENT_TYPE: str = "application/octet-stream"

REQUEST_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:128.0) Gecko/20100101 Firefox/128.0"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/*,*/*;q=0.8",
}

# Messages attached to resolved icons
MESSAGE_NO_ICON_URL: str = "No icon-URL found"
MESSAGE_ICON_NOT_FOUND: str = "Icon href returns 404"
MESSAGE_ICON_FETCH_ERROR: str = "Error fetching icon file"
MESSAGE_INVALID_DOMAIN: str = "Domain name cannot be parsed!"
