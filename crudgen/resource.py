"""
Crudgen Resource Models - the resource descriptor and its attributes

Validates the raw ``singular plural attr...`` arguments and classifies
``name:type[:subtype]`` tokens into typed attributes.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel

from crudgen.errors import InvalidArguments
from crudgen.naming import is_underscored, pluralize

TYPE_SEPARATOR = ":"

USAGE = """expects both singular and plural names
of the generated resource followed by any number of attributes:

    {command} User users name:string"""

_MODULE_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_]*([./][A-Za-z][A-Za-z0-9_]*)*$")


# ═══════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════


class TypeTag(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    TEXT = "text"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    ARRAY = "array"
    REFERENCES = "references"
    OTHER = "other"


_TAG_ALIASES = {"reference": TypeTag.REFERENCES}

# Tags that describe relationships or collections rather than form fields
RELATIONAL_TAGS = frozenset({TypeTag.ARRAY, TypeTag.REFERENCES})


# ═══════════════════════════════════════════════════════════════════════════
# MODELS
# ═══════════════════════════════════════════════════════════════════════════


class Attribute(BaseModel):
    """A typed resource attribute"""

    name: str
    type: TypeTag
    subtype: str | None = None
    raw_type: str = "string"  # Type text as given, for the model generator

    model_config = {"frozen": True}

    @property
    def is_relational(self) -> bool:
        return self.type in RELATIONAL_TAGS

    @property
    def assoc_name(self) -> str:
        """Association name for a reference (``post_id`` -> ``post``)"""
        if self.name.endswith("_id"):
            return self.name[:-3]
        return self.name


class ResourceDescriptor(BaseModel):
    """A validated resource: names plus ordered attributes"""

    singular: str
    plural: str
    attributes: tuple[Attribute, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def from_args(cls, args: list[str], command: str = "crudgen html") -> "ResourceDescriptor":
        """Validate positional arguments and classify their attributes"""
        singular, plural, tokens = validate_args(args, command)
        return cls(singular=singular, plural=plural, attributes=tuple(parse_attrs(tokens)))


# ═══════════════════════════════════════════════════════════════════════════
# ARGUMENT VALIDATOR
# ═══════════════════════════════════════════════════════════════════════════


def validate_args(args: list[str], command: str = "crudgen html") -> tuple[str, str, list[str]]:
    """Split arguments into ``(singular, plural, attribute tokens)``.

    Raises:
        InvalidArguments: too few arguments, an attribute given in place of
            the plural, or a plural not in snake_case.
    """
    if len(args) < 2:
        raise InvalidArguments(f"{command} {USAGE.format(command=command)}")

    singular, plural, *tokens = args

    if TYPE_SEPARATOR in plural:
        raise InvalidArguments(f"{command} {USAGE.format(command=command)}")
    if not is_underscored(plural):
        raise InvalidArguments(
            f"expected the second argument, {plural!r}, to be all lowercase "
            "using snake_case convention"
        )
    if not _MODULE_NAME.match(singular):
        raise InvalidArguments(
            f"expected the first argument, {singular!r}, to be a valid module name "
            "such as User or Admin.User"
        )

    return singular, plural, tokens


# ═══════════════════════════════════════════════════════════════════════════
# ATTRIBUTE CLASSIFIER
# ═══════════════════════════════════════════════════════════════════════════


def classify(token: str) -> Attribute:
    """Parse one ``name:type[:subtype]`` token.

    A missing or unrecognised type classifies as ``other``.
    """
    name, _, rest = token.partition(TYPE_SEPARATOR)
    raw_type, _, subtype = rest.partition(TYPE_SEPARATOR)

    if not name:
        raise InvalidArguments(f"expected attribute {token!r} to have a name, e.g. title:string")

    raw_type = raw_type or "string"
    try:
        tag = TypeTag(raw_type)
    except ValueError:
        tag = _TAG_ALIASES.get(raw_type, TypeTag.OTHER)

    if tag == TypeTag.STRING and not rest:
        tag = TypeTag.OTHER

    if tag == TypeTag.ARRAY:
        subtype = subtype or "string"
    elif tag == TypeTag.REFERENCES:
        subtype = subtype or pluralize(name[:-3] if name.endswith("_id") else name)
    else:
        subtype = subtype or None

    return Attribute(name=name, type=tag, subtype=subtype, raw_type=raw_type)


def parse_attrs(tokens: list[str]) -> list[Attribute]:
    """Classify attribute tokens, keeping their order"""
    return [classify(token) for token in tokens]


# ═══════════════════════════════════════════════════════════════════════════
# SAMPLE PARAMS
# ═══════════════════════════════════════════════════════════════════════════


_DATE_SAMPLE = "%{year: 2010, month: 4, day: 17}"
_TIME_SAMPLE = "%{hour: 14, min: 0, sec: 0}"

_SAMPLE_VALUES = {
    TypeTag.INTEGER: "42",
    TypeTag.FLOAT: '"120.5"',
    TypeTag.DECIMAL: '"120.5"',
    TypeTag.BOOLEAN: "true",
    TypeTag.TEXT: '"some content"',
    TypeTag.DATE: _DATE_SAMPLE,
    TypeTag.TIME: _TIME_SAMPLE,
    TypeTag.DATETIME: "%{year: 2010, month: 4, day: 17, hour: 14, min: 0, sec: 0}",
    TypeTag.ARRAY: "[]",
}

_RAW_SAMPLE_VALUES = {
    "uuid": '"7488a646-e31f-11e4-aace-600308960662"',
    "map": "%{}",
}


def sample_value(attr: Attribute) -> str:
    """Elixir literal used as an example value in generated tests"""
    if attr.type == TypeTag.OTHER and attr.raw_type in _RAW_SAMPLE_VALUES:
        return _RAW_SAMPLE_VALUES[attr.raw_type]
    return _SAMPLE_VALUES.get(attr.type, '"some content"')


def sample_params(attrs: list[Attribute] | tuple[Attribute, ...]) -> dict[str, str]:
    """Example values keyed by attribute name; references are left out"""
    return {a.name: sample_value(a) for a in attrs if a.type != TypeTag.REFERENCES}


def params_literal(params: dict[str, str]) -> str:
    """Render sample params as an Elixir map literal"""
    pairs = ", ".join(f"{key}: {value}" for key, value in params.items())
    return f"%{{{pairs}}}"
