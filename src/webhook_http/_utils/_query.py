from typing import Optional


def merge_query(url: str, query_string: Optional[str]) -> str:
    """Append a caller-encoded query string to a URL.

    The query string is used as given: no escaping and no merging of
    individual keys. It is joined with ``?`` when the URL has no query yet,
    otherwise with ``&``. A ``None`` or blank query string leaves the URL
    unchanged.

    Examples:
        >>> merge_query("http://a/b", "x=1")
        'http://a/b?x=1'
        >>> merge_query("http://a/b?y=2", "x=1")
        'http://a/b?y=2&x=1'
        >>> merge_query("http://a/b", "")
        'http://a/b'
    """
    if query_string is None or not query_string.strip():
        return url

    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query_string}"
