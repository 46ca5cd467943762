"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Parses raw HTTP/1.x request text into structured ParsedRequest objects.

This parser is deliberately lenient. It never validates beyond recognizing
two methods (GET, POST) and one version (HTTP/1.1); anything else maps to
an UNINITIALIZED sentinel and the caller decides what to do about it.

=============================================================================
LINE CLASSIFICATION
=============================================================================

Each line is classified on its own, in this order (first match wins):

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     LINE CLASSIFICATION                             │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   "GET / HTTP/1.1"        contains "HTTP"  → REQUEST LINE           │
    │   "Host: example.com"     contains ":"     → HEADER LINE            │
    │   ""                      zero length      → BLANK (skipped)        │
    │   "name=value"            anything else    → BODY LINE              │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

There is no grammar here, only substring checks. A body line containing a
colon is read as a header, and a body line containing "HTTP" is read as a
request line. The last request line wins, the last value for a header name
wins, and only the last body line is kept.

=============================================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union
import logging


logger = logging.getLogger(__name__)


class MalformedRequest(Exception):
    """
    Raised when a request line cannot be split into its three parts.

    Attributes:
        message: Human-readable description.
        line: The offending request line, or None when no request
              line was found at all (strict mode only).
    """

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line


class Method(Enum):
    """Request methods the parser recognizes."""
    GET = "GET"
    POST = "POST"
    UNINITIALIZED = "UNINITIALIZED"  # Not parsed yet, or not recognized

    @classmethod
    def from_token(cls, token: str) -> "Method":
        """Exact match on the method token; everything else is UNINITIALIZED."""
        if token == "GET":
            return cls.GET
        if token == "POST":
            return cls.POST
        return cls.UNINITIALIZED


class Version(Enum):
    """Protocol versions. V2_0 is reserved: no token maps to it."""
    V1_1 = "HTTP/1.1"
    V2_0 = "HTTP/2.0"
    UNINITIALIZED = "UNINITIALIZED"

    @classmethod
    def from_token(cls, token: str) -> "Version":
        if token == "HTTP/1.1":
            return cls.V1_1
        return cls.UNINITIALIZED


@dataclass(frozen=True)
class Resource:
    """Base class for request targets."""


@dataclass(frozen=True)
class Path(Resource):
    """A request target held exactly as it appeared on the request line."""
    value: str = ""


@dataclass(frozen=True)
class ParsedRequest:
    """
    Structured view of one HTTP request.

    Every field is always populated. When the parser could not work
    something out the field holds a sentinel instead:

        method   → Method.UNINITIALIZED
        version  → Version.UNINITIALIZED
        resource → Path("")
        body     → ""

    Header names keep the case they were sent with. A repeated name keeps
    only its last value.
    """

    method: Method = Method.UNINITIALIZED
    version: Version = Version.UNINITIALIZED
    resource: Resource = field(default_factory=Path)
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def path(self) -> str:
        """The raw resource string."""
        return getattr(self.resource, "value", "")

    @property
    def is_recognized(self) -> bool:
        """
        True when both the method and the version were recognized.

        This is the parser's only error signal in lenient mode: a
        request with an unknown method or version is still returned,
        it just is not recognized.
        """
        return (
            self.method is not Method.UNINITIALIZED
            and self.version is not Version.UNINITIALIZED
        )

    def get_header(self, name: str, default: str = "") -> str:
        """
        Get a header value.

        Tries the name exactly as given first, then falls back to a
        case-insensitive match.

        Example:
            request.get_header("content-type")
            # Finds "Content-Type" as well
        """
        if name in self.headers:
            return self.headers[name]
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default


def split_lines(raw: str) -> list[str]:
    """
    Split request text into lines.

    Lines end at "\\n"; one "\\r" right before it is part of the line
    terminator, not content. Text after a final newline is only a line
    if it is non-empty.
    """
    lines = raw.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class RequestParser:
    """
    Parses raw HTTP request text into ParsedRequest objects.

    ==========================================================================
    PARSER MODES
    ==========================================================================

    LENIENT (default):
        Unknown methods and versions become UNINITIALIZED, a missing
        request line leaves every request-line field at its sentinel,
        and extra tokens on the request line are ignored.

    STRICT (strict=True):
        Same as lenient, but a request with no request line at all, or
        a request line with more than three tokens, raises
        MalformedRequest.

    In both modes a request line with fewer than three tokens raises
    MalformedRequest. There is no sensible value to fill in for a
    missing resource or version, so the parser refuses to guess.

    ==========================================================================
    """

    REQUEST_LINE_MARKER = "HTTP"
    HEADER_SEPARATOR = ":"

    def __init__(self, strict: bool = False, encoding: str = "utf-8"):
        """
        Initialize the request parser.

        Args:
            strict: Raise MalformedRequest for a missing request line or
                    extra request-line tokens.
            encoding: Used to decode bytes handed to parse_bytes().
        """
        self.strict = strict
        self.encoding = encoding

    def parse(self, raw: str) -> ParsedRequest:
        """
        Parse request text into a ParsedRequest.

        Args:
            raw: One complete request, already decoded to text.

        Returns:
            Parsed request. Fields the parser could not determine
            hold their sentinel values.

        Raises:
            MalformedRequest: If a request line has fewer than three
                              tokens, or in strict mode as described
                              on the class.
        """
        method = Method.UNINITIALIZED
        version = Version.UNINITIALIZED
        resource: Resource = Path("")
        headers: Dict[str, str] = {}
        body = ""
        seen_request_line = False

        for line in split_lines(raw):
            if self.REQUEST_LINE_MARKER in line:
                method, resource, version = self._parse_request_line(line)
                seen_request_line = True
            elif self.HEADER_SEPARATOR in line:
                key, value = self._parse_header_line(line)
                headers[key] = value
            elif len(line) == 0:
                # End of headers; order is not enforced
                continue
            else:
                body = line

        if not seen_request_line:
            if self.strict:
                raise MalformedRequest("Missing request line")
            logger.debug("No request line found")

        return ParsedRequest(
            method=method,
            version=version,
            resource=resource,
            headers=headers,
            body=body,
        )

    def parse_bytes(self, data: bytes) -> ParsedRequest:
        """Decode raw bytes with the parser's encoding and parse them."""
        return self.parse(data.decode(self.encoding, errors="replace"))

    def _parse_request_line(self, line: str) -> tuple[Method, Resource, Version]:
        """
        Parse "METHOD RESOURCE VERSION".

        Tokens are separated by any run of whitespace. The resource is
        kept verbatim: no URL decoding, no normalization.
        """
        tokens = line.split()
        if len(tokens) < 3:
            raise MalformedRequest(
                f"Request line has {len(tokens)} token(s), expected 3",
                line=line,
            )
        if len(tokens) > 3:
            if self.strict:
                raise MalformedRequest(
                    f"Request line has {len(tokens)} tokens, expected 3",
                    line=line,
                )
            logger.debug(f"Ignoring extra request line tokens: {tokens[3:]}")

        method_token, resource_token, version_token = tokens[:3]

        method = Method.from_token(method_token)
        if method is Method.UNINITIALIZED:
            logger.debug(f"Unrecognized method: {method_token!r}")

        version = Version.from_token(version_token)
        if version is Version.UNINITIALIZED:
            logger.debug(f"Unrecognized version: {version_token!r}")

        return method, Path(resource_token), version

    def _parse_header_line(self, line: str) -> tuple[str, str]:
        """
        Parse "Name: Value" on the first colon.

        Both sides are trimmed. Either side may come out empty:
        ": value" has an empty name, "Name:" has an empty value.
        """
        key, _, value = line.partition(self.HEADER_SEPARATOR)
        return key.strip(), value.strip()


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_request(
    raw: Union[str, bytes],
    strict: bool = False,
    encoding: str = "utf-8",
) -> ParsedRequest:
    """
    Parse one request in a single call.

    Accepts text, or bytes which are decoded with `encoding`
    (undecodable bytes are replaced, never rejected).
    """
    parser = RequestParser(strict=strict, encoding=encoding)
    if isinstance(raw, bytes):
        return parser.parse_bytes(raw)
    return parser.parse(raw)
