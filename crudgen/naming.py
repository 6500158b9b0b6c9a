"""
Crudgen Naming - inflection helpers shared by every generator

Derives module names, file paths and human labels from a resource name.
Scoped resources use dotted CamelCase (``Admin.User``); the lowercase path
spelling (``admin/user``) is accepted and camelizes to the same name.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

PATH_SEPARATOR = "/"
SCOPE_SEPARATOR = "."

_SCOPE_SPLIT = re.compile(r"[./]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


# ═══════════════════════════════════════════════════════════════════════════
# STRING HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def camelize(value: str) -> str:
    """Convert to a dotted CamelCase module name.

    ``user_profile`` becomes ``UserProfile`` and ``admin/user`` becomes
    ``Admin.User``. Capitals already present are preserved.
    """
    segments = _SCOPE_SPLIT.split(value)
    return SCOPE_SEPARATOR.join(_camelize_segment(s) for s in segments)


def _camelize_segment(segment: str) -> str:
    parts = segment.replace("-", "_").split("_")
    # Use upper on first char only, preserve rest
    return "".join(p[0].upper() + p[1:] if p else "" for p in parts)


def underscore(value: str) -> str:
    """Convert to a lowercase path, one ``/`` per scope level.

    ``Admin.UserProfile`` becomes ``admin/user_profile``; acronyms stay
    together so ``HTTPClient`` becomes ``http_client``.
    """
    segments = _SCOPE_SPLIT.split(value)
    return PATH_SEPARATOR.join(_underscore_segment(s) for s in segments)


def _underscore_segment(segment: str) -> str:
    segment = _ACRONYM_BOUNDARY.sub(r"\1_\2", segment)
    segment = _WORD_BOUNDARY.sub(r"\1_\2", segment)
    return segment.replace("-", "_").lower()


def humanize(value: str) -> str:
    """Turn an attribute or resource name into a label.

    ``first_name`` becomes ``First name``; a trailing ``_id`` is dropped.
    """
    if value.endswith("_id"):
        value = value[:-3]
    return value.replace("_", " ").capitalize()


def is_underscored(value: str) -> bool:
    """True when ``value`` is already in lowercase snake_case form."""
    return underscore(value) == value


def pluralize(value: str) -> str:
    """Simple English pluralization."""
    if value.endswith("y") and not value.endswith(("ay", "ey", "iy", "oy", "uy")):
        return value[:-1] + "ies"
    if value.endswith(("s", "x", "ch", "sh")):
        return value + "es"
    return value + "s"


# ═══════════════════════════════════════════════════════════════════════════
# NAME INFLECTOR
# ═══════════════════════════════════════════════════════════════════════════


class NamingBinding(BaseModel):
    """Every naming variant derived from a singular resource name"""

    base: str
    scoped: str
    module: str
    alias: str
    singular: str
    path: str
    namespace: str | None = None
    human: str
    human_plural: str

    model_config = {"frozen": True}


def inflect(singular: str, base: str = "", plural: str | None = None) -> NamingBinding:
    """Derive the naming variants for ``singular``.

    ``plural`` defaults to ``pluralize`` of the singular resource name.
    Pure: the same arguments always yield an equal binding.

    >>> inflect("Admin.User", base="MyApp").path
    'admin/user'
    """
    scoped = camelize(singular)
    parts = scoped.split(SCOPE_SEPARATOR)
    alias = parts[-1]
    namespace = SCOPE_SEPARATOR.join(parts[:-1]) or None
    resource = underscore(alias)

    return NamingBinding(
        base=base,
        scoped=scoped,
        module=f"{base}{SCOPE_SEPARATOR}{scoped}" if base else scoped,
        alias=alias,
        singular=resource,
        path=underscore(scoped),
        namespace=namespace,
        human=humanize(resource),
        human_plural=humanize(plural or pluralize(resource)),
    )


# ═══════════════════════════════════════════════════════════════════════════
# ROUTE COMPOSER
# ═══════════════════════════════════════════════════════════════════════════


def compose_route(path: str, plural: str) -> str:
    """Replace the last segment of ``path`` with ``plural``.

    ``admin/user`` with ``users`` gives ``admin/users``; an unscoped path
    gives the plural itself.
    """
    segments = path.split(PATH_SEPARATOR)[:-1]
    segments.append(plural)
    return PATH_SEPARATOR.join(segments)
