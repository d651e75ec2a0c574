"""
services/generator.py
──────────────────────────────────────────────────────────────────────────────
Renders a group of taxonomy entries as a generated source module.

Each module is a "do not edit" header followed by ONE exported, read-only
constant bound to a list of {type, label, value} records:

  typescript   export const CONDITIONS = [ ... ] as const;
  python       CONDITIONS: Final = (MappingProxyType({...}), ...)

Rendering is a pure function of (entries, constant name, language): no
timestamps, no dict-ordering surprises, a single trailing newline.  Running
the generator twice over the same taxonomy must produce byte-identical files
so regenerated output can be committed and diffed safely.

String values go through quote_literal(), which escapes quotes, backslashes
and control characters.  The double-quoted JSON string grammar is a subset of
both TypeScript and Python string literals, once U+2028/U+2029 are escaped.
"""
from __future__ import annotations

import json
import keyword
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from taxonomy_codegen.domain.exceptions import ConfigurationError, EscapeError
from taxonomy_codegen.domain.models import OptionRecord, TaxonomyEntry

GENERATED_NOTICE = "This code was automatically generated. Please do not edit."

_TS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
# ECMAScript reserved words plus strict-mode and TypeScript-reserved names
# that cannot be bound by `export const`.
_TS_RESERVED_WORDS = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
    "await", "yield", "let", "static", "implements", "interface", "package",
    "private", "protected", "public", "arguments", "eval",
})
_LINE_SEPARATORS = {"\u2028": "\\u2028", "\u2029": "\\u2029"}


# ── Literal escaping ───────────────────────────────────────────────────────

def quote_literal(value: object) -> str:
    """Return ``value`` as a double-quoted, fully escaped string literal.

    Raises:
        EscapeError: If ``value`` is not a string or is not UTF-8 encodable
            (e.g. contains lone surrogates).
    """
    if not isinstance(value, str):
        raise EscapeError(f"Cannot render {type(value).__name__} as a string literal")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EscapeError(f"Value {value!r} is not valid UTF-8 text") from exc

    quoted = json.dumps(value, ensure_ascii=False)
    for raw, escaped in _LINE_SEPARATORS.items():
        quoted = quoted.replace(raw, escaped)
    return quoted


# ── Dialects ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class _Dialect:
    """How one target language spells the generated module."""

    name: str
    is_identifier: Callable[[str], bool]
    render: Callable[[str, list[OptionRecord]], str]


def _render_typescript(constant_name: str, records: list[OptionRecord]) -> str:
    lines = [
        "/* eslint-disable */",
        f"/* {GENERATED_NOTICE} */",
    ]
    if not records:
        lines.append(f"export const {constant_name} = [] as const;")
    else:
        lines.append(f"export const {constant_name} = [")
        for r in records:
            lines.append(
                f"  {{ type: {quote_literal(r.type)}, "
                f"label: {quote_literal(r.label)}, "
                f"value: {quote_literal(r.value)} }},"
            )
        lines.append("] as const;")
    return "\n".join(lines) + "\n"


def _render_python(constant_name: str, records: list[OptionRecord]) -> str:
    lines = [
        f"# {GENERATED_NOTICE}",
        "from types import MappingProxyType",
        "from typing import Final",
        "",
    ]
    if not records:
        lines.append(f"{constant_name}: Final = ()")
    else:
        lines.append(f"{constant_name}: Final = (")
        for r in records:
            lines.append(
                f'    MappingProxyType({{"type": {quote_literal(r.type)}, '
                f'"label": {quote_literal(r.label)}, '
                f'"value": {quote_literal(r.value)}}}),'
            )
        lines.append(")")
    return "\n".join(lines) + "\n"


def _is_ts_identifier(name: str) -> bool:
    return bool(_TS_IDENTIFIER.match(name)) and name not in _TS_RESERVED_WORDS


def _is_py_identifier(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


_DIALECTS: dict[str, _Dialect] = {
    "typescript": _Dialect("typescript", _is_ts_identifier, _render_typescript),
    "python": _Dialect("python", _is_py_identifier, _render_python),
}

SUPPORTED_LANGUAGES = tuple(_DIALECTS)


def normalize_language(language: str) -> str:
    """Return the canonical dialect name for ``language`` (case-insensitive)."""
    return _get_dialect(language).name


def _get_dialect(language: str) -> _Dialect:
    try:
        return _DIALECTS[language.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown OUTPUT_LANGUAGE '{language}'. "
            f"Valid values: {', '.join(repr(l) for l in SUPPORTED_LANGUAGES)}."
        ) from None


# ── Public API ─────────────────────────────────────────────────────────────

def render_option_list(
    entries: Sequence[TaxonomyEntry],
    constant_name: str,
    language: str = "typescript",
) -> str:
    """Render ``entries`` as a read-only ``constant_name`` option list.

    Args:
        entries:       Ordered group of taxonomy entries (may be empty).
        constant_name: Exported identifier in the generated module.
        language:      One of SUPPORTED_LANGUAGES.

    Returns:
        The complete module text, ending with a single newline.

    Raises:
        ConfigurationError: Unknown language.
        EscapeError: Invalid constant name or unrenderable entry value.
    """
    dialect = _get_dialect(language)
    if not dialect.is_identifier(constant_name):
        raise EscapeError(
            f"{constant_name!r} is not a valid {dialect.name} identifier"
        )
    records = [OptionRecord.from_entry(e) for e in entries]
    return dialect.render(constant_name, records)
