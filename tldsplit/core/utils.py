"""
Utility functions shared by the compiler, the matcher and the CLI.
They are pure helpers with no knowledge of a particular rule set.
"""
import re
from typing import List, Optional
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*://')


def ascii_compatible_encode(text: str) -> Optional[str]:
    """
    Encode an internationalized PSL line or label to its IDNA (punycode) form.

    Args:
        text: A suffix line such as '公司.hk' or '*.网络.cn'

    Returns:
        The ASCII-compatible string (e.g. 'xn--55qx5d.hk'), or None if the
        text is already ASCII or cannot be encoded
    """
    if not text or text.isascii():
        return None

    try:
        return text.encode("idna").decode("ascii")
    except UnicodeError:
        return None


def split_labels(host: str) -> List[str]:
    """Lowercase a hostname and split it into its dot-separated labels."""
    return host.lower().split('.')


def extract_host(value: Optional[str]) -> Optional[str]:
    """
    Pull the hostname out of a URL or a bare host string.

    Args:
        value: 'https://user@www.example.com:8080/path', 'example.com.', ...

    Returns:
        Lowercase hostname without a trailing dot, or None if nothing is left
    """
    if not isinstance(value, str) or not value.strip():
        return None

    value = value.strip()

    # urlsplit only fills netloc when a scheme or '//' is present
    if not _SCHEME_RE.match(value) and not value.startswith('//'):
        value = '//' + value

    try:
        host = urlsplit(value).hostname
    except ValueError:
        return None

    if not host:
        return None

    host = host.rstrip('.')
    return host or None


def parse_comma_separated(value: str) -> List[str]:
    """
    Split a comma separated CLI value into trimmed, non-empty items.

    Args:
        value: 'example.com, www.example.co.uk'

    Returns:
        ['example.com', 'www.example.co.uk']
    """
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]
