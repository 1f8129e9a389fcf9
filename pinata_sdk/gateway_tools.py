"""
CID detection and gateway URL conversion for the Pinata SDK.

This module finds IPFS Content Identifiers (CIDs) inside arbitrary strings
(bare CIDs, relative paths, ``ipfs://`` URIs, path-style and subdomain-style
gateway URLs) and rewrites such URLs so they point at a chosen gateway.

Everything here is pure and synchronous; no network access is performed.
"""

import re
from enum import Enum
from typing import List, Optional
from urllib.parse import SplitResult, urlsplit

from pydantic import BaseModel, ConfigDict, model_validator

from pinata_sdk.errors import UnresolvedCIDError, UnsupportedURLPatternError

# base58btc without 0, O, I and l
_CIDV0_RE = re.compile(r"^Qm[1-9A-HJ-NP-Za-km-z]{44}$")
# RFC4648 base32, lowercase, multibase prefix "b"
_CIDV1_RE = re.compile(r"^b[a-z2-7]{58,}$")

_RELATIVE_SPLIT_RE = re.compile(r"[/?]")

# Schemes whose empty path is normalised to "/" by WHATWG URL parsers
_SPECIAL_SCHEMES = ("http", "https")


class LocateResult(BaseModel):
    """Outcome of searching a string for a CID."""

    model_config = ConfigDict(frozen=True)

    found: bool
    cid: Optional[str] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "LocateResult":
        if not self.found and self.cid is not None:
            raise ValueError("cid must be None when no CID was found")
        if self.found and not is_cid(self.cid or ""):
            raise ValueError(f"'{self.cid}' is not a valid CID")
        return self


_NOT_FOUND = LocateResult(found=False, cid=None)


class URLShape(str, Enum):
    """Where a CID sits inside a source URL."""

    BARE_IDENTIFIER = "bare_identifier"
    IPFS_URI = "ipfs_uri"
    PATH_EMBEDDED = "path_embedded"
    IPNS_PATH_EMBEDDED = "ipns_path_embedded"
    SUBDOMAIN_EMBEDDED = "subdomain_embedded"


def is_valid_cid_v0(cid: str) -> bool:
    """Check for a 46 character base58btc CIDv0 starting with ``Qm``."""
    return bool(_CIDV0_RE.match(cid))


def is_valid_cid_v1(cid: str) -> bool:
    """Check for a lowercase base32 CIDv1 of at least 59 characters."""
    return bool(_CIDV1_RE.match(cid))


def is_cid(value: str) -> bool:
    """
    Check whether a string, ignoring surrounding whitespace, is a CID.

    Args:
        value: String to check

    Returns:
        bool: True if the trimmed string is a CIDv0 or CIDv1
    """
    value = value.strip()
    return is_valid_cid_v0(value) or is_valid_cid_v1(value)


def _leading_cid(value: str) -> Optional[str]:
    head = value.split("/", 1)[0].strip()
    return head if is_cid(head) else None


def _parse_absolute_url(value: str) -> Optional[SplitResult]:
    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts


def _hostname(parts: SplitResult) -> str:
    # SplitResult.hostname lowercases, which would hide CIDv0 subdomains
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[1:].partition("]")[0]
    return host.partition(":")[0]


def _hostname_labels(parts: SplitResult) -> List[str]:
    return _hostname(parts).split(".")


def contains_cid(value: str) -> LocateResult:
    """
    Find the first CID in a string.

    Search order, first match wins:
        1. The value itself or its first ``/`` segment
        2. For relative values, each ``/`` or ``?`` separated part
        3. For absolute URLs, each hostname label (subdomain form)
        4. For absolute URLs, each path segment

    Args:
        value: A bare CID, a CID-prefixed path or a URL

    Returns:
        LocateResult: ``found`` and the CID, or ``found=False`` and ``cid=None``

    Raises:
        TypeError: If value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"Input must be a string, got {type(value).__name__}")

    value = value.strip()

    direct = _leading_cid(value)
    if direct:
        return LocateResult(found=True, cid=direct)

    parts = _parse_absolute_url(value)
    if parts is None:
        for segment in _RELATIVE_SPLIT_RE.split(value):
            cid = _leading_cid(segment)
            if cid:
                return LocateResult(found=True, cid=cid)
        return _NOT_FOUND

    for label in _hostname_labels(parts):
        if is_cid(label):
            return LocateResult(found=True, cid=label.strip())

    for segment in parts.path.split("/"):
        cid = _leading_cid(segment)
        if cid:
            return LocateResult(found=True, cid=cid)

    return _NOT_FOUND


def _url_suffix(parts: SplitResult) -> str:
    path = parts.path
    if not path and parts.scheme.lower() in _SPECIAL_SCHEMES:
        path = "/"
    query = f"?{parts.query}" if parts.query else ""
    fragment = f"#{parts.fragment}" if parts.fragment else ""
    return f"{path}{query}{fragment}"


def classify_source_url(source_url: str, cid: str) -> URLShape:
    """
    Decide where ``cid`` sits in ``source_url``.

    Args:
        source_url: URL or path the CID was found in
        cid: The CID located in source_url

    Returns:
        URLShape: The first matching shape, in rewrite precedence order

    Raises:
        UnsupportedURLPatternError: If no supported shape matches
    """
    if not source_url.startswith("https") and not source_url.startswith("ipfs://"):
        return URLShape.BARE_IDENTIFIER

    if source_url.startswith(f"ipfs://{cid}"):
        return URLShape.IPFS_URI
    if f"/ipfs/{cid}" in source_url:
        return URLShape.PATH_EMBEDDED
    if f"/ipns/{cid}" in source_url:
        return URLShape.IPNS_PATH_EMBEDDED

    try:
        parts = urlsplit(source_url)
    except ValueError:
        parts = None
    if parts is not None and cid in _hostname(parts):
        return URLShape.SUBDOMAIN_EMBEDDED

    raise UnsupportedURLPatternError(
        "unsupported URL pattern, please submit a github issue with the URL utilized",
        details={"url": source_url, "cid": cid},
    )


def convert_to_desired_gateway(source_url: str, gateway_prefix: str) -> str:
    """
    Rewrite a URL containing a CID so it is served by another gateway.

    Any path, query string and fragment following the CID is kept. Surrounding
    whitespace is stripped, including from bare identifiers.

    Args:
        source_url: Bare CID, CID-prefixed path, ``ipfs://`` URI or gateway URL
        gateway_prefix: Origin of the target gateway, used verbatim

    Returns:
        str: The equivalent URL under ``gateway_prefix``

    Raises:
        UnresolvedCIDError: If source_url contains no CID
        UnsupportedURLPatternError: If the CID is in an unsupported position or
            the URL cannot be parsed
    """
    result = contains_cid(source_url)
    if not result.found:
        raise UnresolvedCIDError(
            "url does not contain CID", details={"url": source_url}
        )

    source_url = source_url.strip()
    cid = result.cid
    shape = classify_source_url(source_url, cid)

    if shape is URLShape.BARE_IDENTIFIER:
        return f"{gateway_prefix}/files/{source_url}"

    try:
        parts = urlsplit(source_url)
    except ValueError as e:
        raise UnsupportedURLPatternError(
            f"unparseable URL: {e}", details={"url": source_url, "cid": cid}
        ) from e

    suffix = _url_suffix(parts)
    if shape in (URLShape.PATH_EMBEDDED, URLShape.IPNS_PATH_EMBEDDED):
        return f"{gateway_prefix}{suffix}"
    return f"{gateway_prefix}/files/{cid}{suffix}"
