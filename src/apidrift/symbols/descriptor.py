"""SCIP symbol string parsing.

Grammar (SCIP symbol syntax)::

    <symbol>      ::= <scheme> ' ' <manager> ' ' <package-name> ' ' <version> ' ' <descriptor>+
                    | 'local ' <local-id>
    <descriptor>  ::= <name> '/'                     namespace
                    | <name> '#'                     type
                    | <name> '.'                     term
                    | <name> '(' <disambiguator> ').'  method
                    | '[' <name> ']'                 type parameter
                    | '(' <name> ')'                 parameter
                    | <name> ':'                     meta
                    | <name> '!'                     macro
    <name>        ::= [A-Za-z0-9_+$-]+ | '`' ( any | '``' )+ '`'

Header fields escape a literal space as two spaces. Example from scip-go::

    scip-go gomod github.com/foo/bar v1.2.0 `github.com/foo/bar/sub`/Client#Do().

parses to namespace ``github.com/foo/bar/sub``, kind function, owner
``Client``, name ``Do``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from apidrift.symbols.models import SymbolIdentity, SymbolKind

_FIELD = r"(?:[^ ]|  )+"
_HEADER_RE = re.compile(
    rf"^(?P<scheme>{_FIELD}) (?P<manager>{_FIELD}) (?P<package>{_FIELD}) "
    rf"(?P<version>{_FIELD}) (?P<descriptors>.+)$"
)

_NAME = r"(?:`(?:[^`]|``)+`|[\w+\-$]+)"
_DESCRIPTOR_RE = re.compile(
    rf"(?P<name>{_NAME})(?:(?P<method>\([\w+\-$]*\)\.)|(?P<suffix>[/#.:!]))"
    rf"|\[(?P<type_param>{_NAME})\]"
    rf"|\((?P<param>{_NAME})\)"
)

_SUFFIX_TAGS = {
    "/": "namespace",
    "#": "type",
    ".": "term",
    ":": "meta",
    "!": "macro",
}

_TRAILING_KINDS = {
    "method": SymbolKind.FUNCTION,
    "type": SymbolKind.TYPE,
    "term": SymbolKind.CONSTANT_OR_VARIABLE,
}


@dataclass(frozen=True, slots=True)
class Descriptor:
    tag: str  # namespace, type, term, method, type_parameter, parameter, meta, macro
    name: str


def _unescape(name: str) -> str:
    if len(name) >= 2 and name.startswith("`") and name.endswith("`"):
        return name[1:-1].replace("``", "`")
    return name


def parse_descriptors(text: str) -> list[Descriptor] | None:
    """Tokenize a descriptor sequence; None if any part is malformed."""
    descriptors: list[Descriptor] = []
    pos = 0
    while pos < len(text):
        m = _DESCRIPTOR_RE.match(text, pos)
        if m is None:
            return None
        if m.group("type_param") is not None:
            descriptors.append(Descriptor("type_parameter", _unescape(m.group("type_param"))))
        elif m.group("param") is not None:
            descriptors.append(Descriptor("parameter", _unescape(m.group("param"))))
        elif m.group("method") is not None:
            descriptors.append(Descriptor("method", _unescape(m.group("name"))))
        else:
            tag = _SUFFIX_TAGS[m.group("suffix")]
            descriptors.append(Descriptor(tag, _unescape(m.group("name"))))
        pos = m.end()
    return descriptors or None


def parse_symbol(raw: str) -> SymbolIdentity | None:
    """Parse a raw SCIP symbol into a canonical identity.

    Returns None for local symbols and for anything that is not a package
    level function, type, constant/variable, or a member of a type.
    """
    if raw.startswith("local "):
        return None
    m = _HEADER_RE.match(raw)
    if m is None or m.group("scheme") == "local":
        return None

    descriptors = parse_descriptors(m.group("descriptors"))
    if descriptors is None:
        return None

    *leading, trailing = descriptors
    kind = _TRAILING_KINDS.get(trailing.tag)
    if kind is None:
        return None

    namespaces: list[str] = []
    owners: list[str] = []
    for d in leading:
        if d.tag == "namespace" and not owners:
            namespaces.append(d.name)
        elif d.tag == "type":
            owners.append(d.name)
        else:
            # nested inside a function body, parameter list, etc.
            return None

    prefix = " ".join(m.group(g) for g in ("scheme", "manager", "package", "version"))
    return SymbolIdentity(
        prefix=prefix,
        namespace="/".join(namespaces),
        kind=kind,
        owner=".".join(owners),
        name=trailing.name,
    )
