"""Mapping of CLR operator method names to Scripting Reference page slugs."""

import logging
import re

logger = logging.getLogger(__name__)

OPERATOR_RE = re.compile(
    r"\.op_(?P<op>[A-Za-z]+)(?:\((?P<params>[^)]*)\))?(?:~(?P<returns>.+))?"
)

OPERATOR_SLUGS: dict[str, str] = {
    "Equality": "eq",
    "Inequality": "ne",
    "LessThan": "lt",
    "GreaterThan": "gt",
    "Addition": "add",
    "Subtraction": "subtract",
    "UnaryNegation": "subtract",
    "Multiply": "multiply",
    "Division": "divide",
}

CONVERSION_OPERATORS = frozenset({"Implicit", "Explicit"})

# Conversion pages are named after the C# keyword for System primitives.
CSHARP_KEYWORDS: dict[str, str] = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.Single": "float",
    "System.Double": "double",
    "System.Decimal": "decimal",
    "System.String": "string",
    "System.Object": "object",
}

GENERIC_NOISE_RE = re.compile(r"\{.*\}|`+\d+")


def conversion_slug(type_name: str) -> str:
    """Return the page slug for a conversion to or from ``type_name``.

    >>> conversion_slug("UnityEngine.Vector3")
    'Vector3'
    >>> conversion_slug("System.Boolean")
    'bool'
    """
    type_name = type_name.strip()
    if type_name in CSHARP_KEYWORDS:
        return CSHARP_KEYWORDS[type_name]
    type_name = GENERIC_NOISE_RE.sub("", type_name)
    return type_name.rsplit(".", 1)[-1]


def operator_slug(
    op: str, params: str | None, returns: str | None, owner: str = ""
) -> str | None:
    """Return the slug for an ``op_<op>`` method, or None if it is not recognised.

    Conversion pages hang off the declaring type ``owner`` and are named after
    the other side of the conversion: the converted-to type, or the
    converted-from parameter when the conversion produces ``owner`` itself.
    """
    if op in OPERATOR_SLUGS:
        return OPERATOR_SLUGS[op]
    if op in CONVERSION_OPERATORS:
        first_param = GENERIC_NOISE_RE.sub("", params or "").split(",")[0].strip()
        target = returns or first_param
        if (
            returns
            and first_param
            and owner
            and conversion_slug(returns) == conversion_slug(owner)
        ):
            target = first_param
        if target:
            return conversion_slug(target)
    return None


def rewrite_operator(href: str) -> str:
    """Replace an ``.op_X(...)`` segment with ``-operator_<slug>``.

    Everything after the slug is dropped, since the parameter list and return
    type are already folded into it. Unrecognised operators are left alone.
    """
    m = OPERATOR_RE.search(href)
    if not m:
        return href
    owner = href[: m.start()]
    slug = operator_slug(m.group("op"), m.group("params"), m.group("returns"), owner)
    if slug is None:
        logger.debug("No page slug for operator op_%s in %s", m.group("op"), href)
        return href
    return f"{owner}-operator_{slug}"
