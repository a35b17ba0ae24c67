"""
Minimal scanners used by the structured match mode.

They only know enough about the file syntax to tell code from strings and
comments:
- TOML manifests: basic ("...") and literal ('...') strings, '#' comments.
- Rust sources: "..." strings with escapes, raw strings (r"...", r#"..."#),
  quote char literals ('"'), line and block comments.
"""
import re
from typing import Iterator, List, Tuple

Span = Tuple[int, int]

# `version` key, bare or as the last segment of a dotted key, followed by `=` and a basic string.
_VERSION_FIELD = re.compile(
    r'(?<![A-Za-z0-9_.\-])(?:[A-Za-z0-9_\-]+[ \t]*\.[ \t]*)*version[ \t]*=[ \t]*"'
)
_RAW_STRING_START = re.compile(r'r(#*)"')
_IDENT_CHAR = re.compile(r"[A-Za-z0-9_]")


def scan_toml_line(line: str) -> Tuple[List[Span], int]:
    """Return the string spans (quotes included) of a TOML line and where its comment starts.

    The comment start is len(line) when the line has no comment.
    """
    spans: List[Span] = []
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if ch == "#":
            return spans, i
        if ch == '"' or ch == "'":
            j = i + 1
            while j < n and line[j] != ch:
                if ch == '"' and line[j] == "\\":
                    j += 1
                j += 1
            end = min(j + 1, n)
            spans.append((i, end))
            i = end
            continue
        i += 1
    return spans, n


def _inside(pos: int, spans: List[Span]) -> bool:
    return any(start <= pos < end for start, end in spans)


def replace_version_fields(text: str, old: str, new: str) -> Tuple[str, int]:
    """Rewrite `version = "<old>"` fields of a TOML document.

    Dotted keys such as `package.version` match, comments and keys such as
    `rust-version` are left alone, spacing around `=` is kept as written.
    """
    out: List[str] = []
    count = 0
    for line in text.splitlines(keepends=True):
        if "version" not in line:
            out.append(line)
            continue
        spans, comment_at = scan_toml_line(line)
        pieces: List[str] = []
        last = 0
        for match in _VERSION_FIELD.finditer(line, 0, comment_at):
            if _inside(match.start(), spans):
                continue
            value_start = match.end()
            value_end = value_start + len(old)
            if line[value_start:value_end] != old or line[value_end:value_end + 1] != '"':
                continue
            pieces.append(line[last:value_start])
            pieces.append(new)
            last = value_end
            count += 1
        pieces.append(line[last:])
        out.append("".join(pieces))
    return "".join(out), count


def _starts_token(text: str, i: int) -> bool:
    # `r` opens a raw string on its own or right after a `b` prefix
    if i > 0 and text[i - 1] == "b":
        i -= 1
    return i == 0 or not _IDENT_CHAR.match(text[i - 1])


def iter_string_literals(text: str) -> Iterator[Span]:
    """Yield the (start, end) span of the content of every string literal in Rust source."""
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = n if newline == -1 else newline
            continue
        if text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = n if close == -1 else close + 2
            continue
        if ch == "r" and _starts_token(text, i):
            raw = _RAW_STRING_START.match(text, i)
            if raw:
                closing = '"' + raw.group(1)
                start = raw.end()
                close = text.find(closing, start)
                if close == -1:
                    return
                yield start, close
                i = close + len(closing)
                continue
        if ch == "'":
            if text.startswith("'\"'", i):
                i += 3
                continue
            if text.startswith("'\\\"'", i):
                i += 4
                continue
        if ch == '"':
            start = j = i + 1
            while j < n and text[j] != '"':
                j += 2 if text[j] == "\\" else 1
            if j >= n:
                # unterminated literal
                return
            yield start, j
            i = j + 1
            continue
        i += 1


def replace_string_literals(text: str, old: str, new: str) -> Tuple[str, int]:
    """Replace the content of every string literal that is exactly `old`."""
    pieces: List[str] = []
    last = 0
    count = 0
    for start, end in iter_string_literals(text):
        if text[start:end] != old:
            continue
        pieces.append(text[last:start])
        pieces.append(new)
        last = end
        count += 1
    pieces.append(text[last:])
    return "".join(pieces), count
