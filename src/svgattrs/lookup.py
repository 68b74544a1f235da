"""Attribute name classification.

Maps the raw name of an attribute, exactly as it appeared in the document, to
its `Attribute` identifier. Called once per attribute of every element, so the
lookup is a single dict probe against a table built when the module is
imported.

Matching is exact and case-sensitive: no trimming, no case folding, no prefix
handling. `xlink:href`, `xml:lang` and `xml:space` are matched verbatim like
any other name. An unknown name is a normal outcome and yields None.
"""

from .attributes import Attribute


def _build_table(attrs):
    table = {}
    for attr in attrs:
        spelling = attr.spelling
        if spelling in table:
            raise ValueError(f"Attribute name '{spelling}' declared for both {table[spelling].name} and {attr.name}")
        table[spelling] = attr
    return table


# spelling -> Attribute; never mutated after import
ATTRIBUTES_BY_NAME = _build_table(Attribute)

_lookup = ATTRIBUTES_BY_NAME.get


def classify(name):
    """Return the Attribute for `name`, or None if the name is not known.

    Args:
        name: attribute name as written in the source, e.g. "stroke-width"

    Returns:
        Attribute | None
    """
    return _lookup(name)


def is_known(name):
    return name in ATTRIBUTES_BY_NAME
