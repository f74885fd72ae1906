#!/usr/bin/env python3
"""mdurlguard - Remote Markdown URL Gate.

Decide whether a caller-supplied URL is safe to fetch as markdown, rewrite
GitHub and Gist viewer URLs into raw-content URLs, strip access tokens from
private raw links and check the Content-Type of the response.
Zero dependencies - Python 3.9+ stdlib only.

Usage:
    python mdurlguard.py <url>                   # Check a single URL
    python mdurlguard.py <file>                  # Check URLs from a file
    echo "https://example.com/a.md" | python mdurlguard.py -   # From stdin
    python mdurlguard.py --check <url>           # CI mode (exit 1 if blocked)
    python mdurlguard.py --json <url>            # JSON output
    python mdurlguard.py --content-type "text/html"   # Check a response type
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
import sys
import unicodedata
from dataclasses import dataclass, asdict
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional
from urllib.parse import urlsplit, urlunsplit, quote, unquote, unquote_plus

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

RED = "\033[91m"
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[92m"
YELLOW = "\033[93m"

# ─── Limits & Hosts ──────────────────────────────────────────────────────────

MAX_URL_LENGTH = 2048

GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})
GIST_HOST = "gist.github.com"
RAW_GITHUB_HOST = "raw.githubusercontent.com"
GIST_RAW_HOST = "gist.githubusercontent.com"

ALLOWED_CONTENT_TYPES = frozenset({
    "text/plain",
    "text/markdown",
    "text/x-markdown",
    "application/octet-stream",  # GitHub's default for raw files
})

ALLOWED_CSS_DOMAINS = frozenset({
    "cdn.jsdelivr.net",
    "cdnjs.cloudflare.com",
    RAW_GITHUB_HOST,
    GIST_RAW_HOST,
    "unpkg.com",
})

# Schemes a URL parser refuses to accept without a host
_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/<>?@[\\]^|")

# Characters left as-is when percent-encoding rewritten URLs. Existing
# escapes survive because '%' is safe; everything non-ASCII is encoded.
_PATH_SAFE = "/%!$&'()*+,;=:@[]\\^|"
_QUERY_SAFE = "/%!$&()*+,;=:@?[]\\^|`{}"
_FRAGMENT_SAFE = "/%!$&'()*+,;=:@?#[]\\^|{}"

_GIST_USER = re.compile(r"^[A-Za-z0-9_-]+$")
_GIST_ID = re.compile(r"^[A-Za-z0-9]+$")

# ─── Confusable Characters (Unicode Homoglyphs) ─────────────────────────────

# Cyrillic and Greek letters drawn identically to a Latin letter.
# Read-only: built once at import, never mutated.
CONFUSABLES: Mapping[str, str] = MappingProxyType({
    # Cyrillic
    '\u0430': 'a',  # а → a
    '\u0441': 'c',  # с → c
    '\u0435': 'e',  # е → e
    '\u0456': 'i',  # і → i
    '\u043a': 'k',  # к → k
    '\u043c': 'm',  # м → m
    '\u043d': 'h',  # н → h (approx)
    '\u043e': 'o',  # о → o
    '\u0440': 'p',  # р → p
    '\u0442': 't',  # т → t (approx)
    '\u0443': 'y',  # у → y
    '\u0445': 'x',  # х → x
    '\u0432': 'b',  # в → b (approx)
    '\u0410': 'A',  # А → A
    '\u0412': 'B',  # В → B
    '\u0421': 'C',  # С → C
    '\u0415': 'E',  # Е → E
    '\u0406': 'I',  # І → I
    '\u041a': 'K',  # К → K
    '\u041c': 'M',  # М → M
    '\u041d': 'H',  # Н → H
    '\u041e': 'O',  # О → O
    '\u0420': 'P',  # Р → P
    '\u0422': 'T',  # Т → T
    '\u0423': 'Y',  # У → Y
    '\u0425': 'X',  # Х → X
    # Greek
    '\u03b1': 'a',  # α → a
    '\u03b9': 'i',  # ι → i
    '\u03ba': 'k',  # κ → k
    '\u03bf': 'o',  # ο → o
    '\u03c1': 'p',  # ρ → p
    '\u03c4': 't',  # τ → t (approx)
    '\u03c5': 'u',  # υ → u
    '\u03c7': 'x',  # χ → x
    '\u0391': 'A',  # Α → A
    '\u0392': 'B',  # Β → B
    '\u0395': 'E',  # Ε → E
    '\u0397': 'H',  # Η → H
    '\u0399': 'I',  # Ι → I
    '\u039a': 'K',  # Κ → K
    '\u039c': 'M',  # Μ → M
    '\u039d': 'N',  # Ν → N
    '\u039f': 'O',  # Ο → O
    '\u03a1': 'P',  # Ρ → P
    '\u03a4': 'T',  # Τ → T
    '\u03a5': 'Y',  # Υ → Y
    '\u03a7': 'X',  # Χ → X
    '\u0396': 'Z',  # Ζ → Z
})


def latin_lookalike(hostname: str) -> str:
    """Return *hostname* with every confusable replaced by its Latin letter."""
    return "".join(CONFUSABLES.get(c, c) for c in hostname)


def confusable_characters(hostname: str) -> list[tuple[str, str]]:
    """List ``(char, latin)`` pairs for each confusable in *hostname*."""
    return [(c, CONFUSABLES[c]) for c in hostname if c in CONFUSABLES]


# ─── Script Purity ───────────────────────────────────────────────────────────

class ScriptClass(Enum):
    PURE_ASCII = "pure-ascii"
    PURE_NON_LATIN = "pure-non-latin"
    MIXED_FORBIDDEN = "mixed-forbidden"

    def __str__(self) -> str:
        return self.name


def _char_script(char: str) -> str:
    name = unicodedata.name(char, '')
    if 'CYRILLIC' in name:
        return 'CYRILLIC'
    if 'GREEK' in name:
        return 'GREEK'
    if 'CJK' in name or 'HIRAGANA' in name or 'KATAKANA' in name:
        return 'CJK'
    if 'HANGUL' in name:
        return 'HANGUL'
    if 'ARABIC' in name:
        return 'ARABIC'
    if 'LATIN' in name:
        return 'LATIN-EXTENDED'
    return 'OTHER'


def _host_scripts(hostname: str) -> list[str]:
    """Sorted script names of the non-ASCII code points in *hostname*."""
    return sorted({_char_script(c) for c in hostname if not c.isascii()})


def classify_hostname(hostname: str) -> ScriptClass:
    """Classify a hostname by the scripts its code points come from.

    A hostname containing any confusable code point is forbidden outright,
    whether it sits beside Latin letters or makes up a whole-script
    lookalike. A hostname that pairs ASCII Latin letters with any non-ASCII
    code point cannot be resolved to one script and is forbidden too. Only
    hostnames with no ASCII letters at all (``中文.中国``) are
    ``PURE_NON_LATIN``.
    """
    if hostname.isascii():
        return ScriptClass.PURE_ASCII

    has_latin = False
    for char in hostname:
        if char in CONFUSABLES:
            return ScriptClass.MIXED_FORBIDDEN
        if char.isascii():
            has_latin = has_latin or char.isalpha()

    if has_latin:
        return ScriptClass.MIXED_FORBIDDEN
    return ScriptClass.PURE_NON_LATIN


# ─── URL Policy ──────────────────────────────────────────────────────────────

class ReasonCode(Enum):
    NONE = "none"
    NOT_HTTPS = "not-https"
    HAS_CREDENTIALS = "has-credentials"
    TOO_LONG = "too-long"
    MALFORMED = "malformed"
    NON_ASCII_HOST = "non-ascii-host"
    DOMAIN_NOT_ALLOWED = "domain-not-allowed"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ValidationVerdict:
    allowed: bool
    reason: ReasonCode = ReasonCode.NONE
    detail: str = ""

    def to_dict(self) -> dict:
        d = asdict(self)
        d["reason"] = str(self.reason)
        return d


_ALLOWED = ValidationVerdict(True)


def _netloc_host(netloc: str) -> str:
    """Host part of a netloc with case preserved (``hostname`` lowercases)."""
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        return hostinfo[1:].partition("]")[0]
    return hostinfo.partition(":")[0]


def _parse_failure(url) -> Optional[ValidationVerdict]:
    """Return a MALFORMED verdict if *url* is not an absolute URL, else None."""
    if not isinstance(url, str) or not url:
        return ValidationVerdict(False, ReasonCode.MALFORMED, "invalid URL format (empty)")
    try:
        parsed = urlsplit(url)
        parsed.port  # raises on a non-numeric or out-of-range port
    except ValueError:
        # The parser's message can echo the netloc, credentials included.
        return ValidationVerdict(False, ReasonCode.MALFORMED,
                                 "invalid URL format (unparsable)")

    if not parsed.scheme:
        return ValidationVerdict(False, ReasonCode.MALFORMED,
                                 "invalid URL format (not an absolute URL)")

    host = unquote(_netloc_host(parsed.netloc))
    if parsed.scheme in _SPECIAL_SCHEMES and not host:
        return ValidationVerdict(False, ReasonCode.MALFORMED,
                                 "invalid URL format (missing hostname)")
    if any(c in _FORBIDDEN_HOST_CHARS or ord(c) < 0x20 or c == '\x7f' for c in host):
        return ValidationVerdict(False, ReasonCode.MALFORMED,
                                 "invalid URL format (forbidden character in hostname)")
    return None


def _host_verdict(host: str) -> ValidationVerdict:
    script_class = classify_hostname(host)
    if script_class is ScriptClass.PURE_ASCII:
        return _ALLOWED

    if script_class is ScriptClass.MIXED_FORBIDDEN:
        detail = "hostname contains homoglyphs (mixed scripts)"
        pairs = confusable_characters(host)
        if pairs:
            substitutions = ", ".join(
                f"'{c}' (U+{ord(c):04X}) looks like '{a}'" for c, a in pairs[:5]
            )
            detail += f": {substitutions}. Appears to imitate '{latin_lookalike(host)}'"
        else:
            detail += f": Latin letters alongside {', '.join(_host_scripts(host))}"
    else:
        detail = (
            f"non-ASCII hostname not allowed ('{host}'); internationalized "
            f"domains cannot be told apart from homoglyphs"
        )
    return ValidationVerdict(False, ReasonCode.NON_ASCII_HOST, detail)


def check_markdown_url(url: str) -> ValidationVerdict:
    """Decide whether *url* may be fetched as markdown.

    Checks run in a fixed order and the first failure decides the reason:
    length of the raw string, absolute-URL parse, ``https`` scheme, absent
    userinfo, ASCII-only hostname. Path, query and fragment are not scanned.
    Any HTTPS domain is acceptable once these pass.

    Never raises; a rejection is logged once at WARNING level.
    """
    verdict = _check_markdown_url(url)
    if not verdict.allowed:
        logger.warning("Markdown URL blocked: %s", verdict.detail)
    return verdict


def _check_markdown_url(url) -> ValidationVerdict:
    if isinstance(url, str) and len(url) > MAX_URL_LENGTH:
        return ValidationVerdict(
            False, ReasonCode.TOO_LONG,
            f"URL too long ({len(url)} characters, max {MAX_URL_LENGTH})",
        )

    failure = _parse_failure(url)
    if failure is not None:
        return failure

    parsed = urlsplit(url)
    if parsed.scheme != "https":
        return ValidationVerdict(False, ReasonCode.NOT_HTTPS,
                                 f"HTTPS required, got '{parsed.scheme}'")

    if parsed.username or parsed.password:
        # The URL itself is not echoed: it carries the secret.
        return ValidationVerdict(False, ReasonCode.HAS_CREDENTIALS,
                                 "credentials not allowed in URL")

    return _host_verdict(unquote(_netloc_host(parsed.netloc)))


def is_allowed_markdown_url(url: str) -> bool:
    """Return True if *url* passes every markdown URL check."""
    return check_markdown_url(url).allowed


# ─── GitHub / Gist Normalization ─────────────────────────────────────────────

def _raw_url(host: str, path: str, query: str, fragment: str) -> str:
    return urlunsplit((
        "https",
        host,
        quote(path, safe=_PATH_SAFE),
        quote(query, safe=_QUERY_SAFE),
        quote(fragment, safe=_FRAGMENT_SAFE),
    ))


def _split_or_none(url: str):
    if not url:
        return None
    try:
        return urlsplit(url)
    except ValueError:
        return None


def normalize_gist_url(url: str) -> str:
    """Rewrite a gist.github.com page URL to its raw-content URL.

    ``https://gist.github.com/<user>/<id>[/<file>]`` becomes
    ``https://gist.githubusercontent.com/<user>/<id>/raw[/<file>]``. Query
    and fragment are kept. Anything else is returned unchanged.
    """
    parsed = _split_or_none(url)
    if parsed is None or parsed.scheme != "https" or parsed.hostname != GIST_HOST:
        return url

    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) < 2:
        return url
    user, gist_id, *rest = segments
    if not _GIST_USER.match(user) or not _GIST_ID.match(gist_id):
        return url

    path = "/" + "/".join([user, gist_id, "raw", *rest])
    normalized = _raw_url(GIST_RAW_HOST, path, parsed.query, parsed.fragment)
    # query and fragment stay out of the log; they may carry a token
    logger.debug("Normalized gist URL to %s", _raw_url(GIST_RAW_HOST, path, "", ""))
    return normalized


def normalize_github_content_url(url: str) -> str:
    """Rewrite GitHub viewer URLs (blob pages and gists) to raw-content URLs.

    ``https://github.com/<owner>/<repo>/blob/<ref>/<path>`` becomes
    ``https://raw.githubusercontent.com/<owner>/<repo>/<ref>/<path>``; gist
    pages go through :func:`normalize_gist_url`. Existing percent-escapes in
    the path are kept and raw non-ASCII is encoded. Other URLs, including
    ones already on a raw host, pass through unchanged.

    This is a rewrite, not a check: only call it on URLs that already passed
    :func:`check_markdown_url`.
    """
    parsed = _split_or_none(url)
    if parsed is None or parsed.scheme != "https":
        return url
    if parsed.hostname == GIST_HOST:
        return normalize_gist_url(url)
    if parsed.hostname not in GITHUB_HOSTS:
        return url

    # ['', owner, repo, 'blob', ref, *path]
    parts = parsed.path.split("/")
    if len(parts) < 6 or parts[3] != "blob":
        return url
    owner, repo, ref = parts[1], parts[2], parts[4]
    file_path = "/".join(parts[5:])
    if not (owner and repo and ref and file_path):
        return url

    path = f"/{owner}/{repo}/{ref}/{file_path}"
    normalized = _raw_url(RAW_GITHUB_HOST, path, parsed.query, parsed.fragment)
    logger.debug("Normalized GitHub URL to %s", _raw_url(RAW_GITHUB_HOST, path, "", ""))
    return normalized


# ─── Token Stripping ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TokenStripResult:
    clean_url: str
    had_token: bool

    def to_dict(self) -> dict:
        return asdict(self)


def strip_github_token(url: str) -> TokenStripResult:
    """Remove the ``token`` query parameter from a raw.githubusercontent.com URL.

    Private-repository raw links carry ``?token=...``; keeping one in history or
    a shared link leaks it. Every other parameter is kept verbatim and in
    order. Other hosts, gist.githubusercontent.com included, and unparsable
    input come back unchanged with ``had_token=False``.
    """
    parsed = _split_or_none(url)
    if parsed is None or parsed.hostname != RAW_GITHUB_HOST or not parsed.query:
        return TokenStripResult(url, False)

    pairs = parsed.query.split("&")
    kept = [p for p in pairs if unquote_plus(p.partition("=")[0]) != "token"]
    if len(kept) == len(pairs):
        return TokenStripResult(url, False)

    clean_url = urlunsplit(parsed._replace(query="&".join(kept)))
    return TokenStripResult(clean_url, True)


# ─── Content-Type ────────────────────────────────────────────────────────────

def is_valid_markdown_content_type(content_type: Optional[str]) -> bool:
    """Check a response's Content-Type against the markdown allowlist.

    Case-insensitive and ignores parameters such as ``; charset=utf-8``. A
    missing or blank header is accepted since many servers omit it for plain
    text.
    """
    if not content_type or not content_type.strip():
        return True

    mime_type = content_type.split(";", 1)[0].strip().lower()
    if mime_type in ALLOWED_CONTENT_TYPES:
        return True

    logger.warning("Content-Type not allowed for markdown: %s", mime_type or content_type)
    return False


# ─── Load Pipeline ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LoadPlan:
    """What the fetch layer should do with a user-supplied URL."""
    url: str
    verdict: ValidationVerdict
    fetch_url: Optional[str] = None
    had_token: bool = False

    @property
    def allowed(self) -> bool:
        return self.verdict.allowed

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "allowed": self.allowed,
            "reason": str(self.verdict.reason),
            "detail": self.verdict.detail,
            "fetch_url": self.fetch_url,
            "had_token": self.had_token,
        }


def prepare_markdown_url(url: str) -> LoadPlan:
    """Validate, normalize and de-token *url* ahead of a markdown fetch."""
    verdict = check_markdown_url(url)
    if not verdict.allowed:
        return LoadPlan(url, verdict)

    stripped = strip_github_token(normalize_github_content_url(url))
    if stripped.had_token:
        logger.warning("Access token removed from GitHub raw URL; link is private")
    return LoadPlan(url, verdict, stripped.clean_url, stripped.had_token)


# ─── Stylesheet Gates ────────────────────────────────────────────────────────

def check_css_url(url: str) -> ValidationVerdict:
    """Check a stylesheet URL: HTTPS, no credentials, allowlisted CDN host."""
    verdict = _check_css_url(url)
    if not verdict.allowed:
        logger.warning("CSS URL blocked: %s", verdict.detail)
    return verdict


def _check_css_url(url) -> ValidationVerdict:
    failure = _parse_failure(url)
    if failure is not None:
        return failure

    parsed = urlsplit(url)
    if parsed.scheme != "https":
        return ValidationVerdict(False, ReasonCode.NOT_HTTPS,
                                 f"HTTPS required, got '{parsed.scheme}'")
    if parsed.username or parsed.password:
        return ValidationVerdict(False, ReasonCode.HAS_CREDENTIALS,
                                 "credentials not allowed in URL")
    if parsed.hostname not in ALLOWED_CSS_DOMAINS:
        return ValidationVerdict(False, ReasonCode.DOMAIN_NOT_ALLOWED,
                                 f"domain not in allowlist: {parsed.hostname}")
    return _ALLOWED


def is_allowed_css_url(url: str) -> bool:
    return check_css_url(url).allowed


def prepare_css_url(url: str) -> LoadPlan:
    """Normalize GitHub/Gist links first, then gate the result on the CDN allowlist."""
    normalized = normalize_github_content_url(url)
    verdict = check_css_url(normalized)
    return LoadPlan(url, verdict, normalized if verdict.allowed else None)


_COLOR_PATTERNS = (
    re.compile(r'^#[0-9a-f]{3,8}$'),       # hex
    re.compile(r'^rgba?\s*\([^)]+\)$'),    # rgb/rgba
    re.compile(r'^hsla?\s*\([^)]+\)$'),    # hsl/hsla
    re.compile(r'^[a-z]+$'),               # named colors
)


def is_valid_background_color(value: str) -> bool:
    """Accept hex, rgb(a), hsl(a) and named colors; refuse script or url() payloads."""
    trimmed = value.strip().lower()
    if 'javascript:' in trimmed or 'url(' in trimmed:
        return False
    return any(p.match(trimmed) for p in _COLOR_PATTERNS)


# ─── Output Formatters ───────────────────────────────────────────────────────

def print_text_report(plan: LoadPlan, use_color: bool = True,
                      verbose: bool = False) -> None:
    """Print the verdict for a single URL."""
    def paint(text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if use_color else text

    print(f"\n  {paint('URL:', BOLD)} {plan.url}")
    if plan.allowed:
        print(f"  {paint('Verdict:', BOLD)} {paint('ALLOWED', GREEN)}")
        print(f"  {paint('Fetch:', BOLD)} {plan.fetch_url}")
    else:
        print(f"  {paint('Verdict:', BOLD)} {paint('BLOCKED', RED)} "
              f"{paint(str(plan.verdict.reason), DIM)}")
        if verbose:
            print(f"    {plan.verdict.detail}")

    if plan.had_token:
        print(f"  {paint('[WARNING]', YELLOW)} URL carried a GitHub access token; "
              f"it was removed and the link should not be shared")
    print()


def print_batch_summary(plans: list[LoadPlan], use_color: bool = True) -> None:
    """Print summary for a batch of URLs."""
    allowed = sum(1 for p in plans if p.allowed)
    tokens = sum(1 for p in plans if p.had_token)

    rule = "═" * 42 if use_color else "=" * 42
    head = f"{BOLD}{rule}{RESET}" if use_color else rule
    print(f"\n{head}")
    print(f"  mdurlguard v{__version__} — Batch Summary")
    print(f"{head}\n")
    print(f"  URLs checked: {len(plans)}")
    print(f"  Allowed: {allowed}  |  Blocked: {len(plans) - allowed}  |  Tokens removed: {tokens}")
    print()


def print_content_types(results: list[tuple[str, bool]], use_color: bool = True) -> None:
    for content_type, ok in results:
        if use_color:
            status = f"{GREEN}accepted{RESET}" if ok else f"{RED}rejected{RESET}"
        else:
            status = "accepted" if ok else "rejected"
        print(f"  Content-Type '{content_type}': {status}")
    print()


def print_json_report(plans: list[LoadPlan],
                      content_types: Optional[list[tuple[str, bool]]] = None) -> None:
    """Print all results as JSON."""
    report = {
        "version": __version__,
        "total_urls": len(plans),
        "results": [p.to_dict() for p in plans],
        "summary": {
            "allowed": sum(1 for p in plans if p.allowed),
            "blocked": sum(1 for p in plans if not p.allowed),
            "tokens_removed": sum(1 for p in plans if p.had_token),
        },
    }
    if content_types:
        report["content_types"] = [
            {"content_type": ct, "allowed": ok} for ct, ok in content_types
        ]
    print(json.dumps(report, indent=2, ensure_ascii=False))


# ─── CLI ─────────────────────────────────────────────────────────────────────

def read_url_lines(text: str) -> list[str]:
    """One URL per line; blank lines and ``#`` comments are skipped."""
    urls = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            urls.append(line)
    return urls


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="mdurlguard",
        description="Remote markdown URL gate — validate, normalize and de-token URLs before fetching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  mdurlguard https://github.com/o/r/blob/main/README.md   Check and normalize a URL
  mdurlguard urls.txt                                     Check URLs from a file
  echo "https://example.com/a.md" | mdurlguard -          From stdin
  mdurlguard --json https://example.com/a.md              JSON output
  mdurlguard --check http://example.com/a.md              CI mode (exit 1 if blocked)
  mdurlguard --css https://unpkg.com/pkg/style.css        Check a stylesheet URL
  mdurlguard --content-type "text/plain; charset=utf-8"   Check a response type""",
    )

    parser.add_argument("targets", nargs="*", default=[],
                        help="URLs, files containing URLs, or - for stdin")
    parser.add_argument("--version", action="version", version=f"mdurlguard {__version__}")

    # Output
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show rejection details and diagnostic log lines")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable colored output")

    # Mode
    parser.add_argument("--css", action="store_true",
                        help="Apply the stylesheet URL gate instead of the markdown gate")
    parser.add_argument("--content-type", action="append", default=[],
                        metavar="TYPE",
                        help="Check a response Content-Type (repeatable)")

    # CI mode
    parser.add_argument("--check", action="store_true",
                        help="CI mode: exit 1 if any URL or content type is rejected")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.WARNING if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.targets and not args.content_type:
        if sys.stdin.isatty():
            parser.print_help()
            return 0
        args.targets = ["-"]

    use_color = not args.no_color and sys.stdout.isatty() and not args.json

    # Collect URLs
    urls: list[str] = []
    for target in args.targets:
        if target == "-":
            urls.extend(read_url_lines(sys.stdin.read()))
        elif os.path.isfile(target):
            with open(target, 'r', encoding='utf-8', errors='replace') as f:
                urls.extend(read_url_lines(f.read()))
        else:
            urls.append(target)

    if args.targets and not urls:
        print("No URLs to check.", file=sys.stderr)

    prepare = prepare_css_url if args.css else prepare_markdown_url
    plans = [prepare(url) for url in urls]
    content_types = [(ct, is_valid_markdown_content_type(ct)) for ct in args.content_type]

    # Output
    if args.json:
        print_json_report(plans, content_types)
    else:
        if use_color:
            print(f"\n{BOLD}══════════════════════════════════════════{RESET}")
            print(f"{BOLD}  mdurlguard v{__version__} — URL Gate{RESET}")
            print(f"{BOLD}══════════════════════════════════════════{RESET}")
        else:
            print(f"\n{'=' * 42}")
            print(f"  mdurlguard v{__version__} — URL Gate")
            print(f"{'=' * 42}")

        for plan in plans:
            print_text_report(plan, use_color=use_color, verbose=args.verbose)

        if content_types:
            print_content_types(content_types, use_color=use_color)

        if len(plans) > 1:
            print_batch_summary(plans, use_color=use_color)

    if args.check:
        if any(not p.allowed for p in plans) or any(not ok for _, ok in content_types):
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
