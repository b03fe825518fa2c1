"""Get Favicon: resolve, encode and cache website favicons."""
