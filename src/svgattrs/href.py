"""`href` and `xlink:href` handling.

SVG 1.1 links to other elements and resources with `xlink:href`. SVG 2 dropped
the namespace and uses plain `href`. When an element has both, `href` wins no
matter which one came first. `Href` splits the value itself into its URI and
fragment parts.
    from svgattrs.href import is_href, set_href

    target = None
    for name, attr, value in bag:
        if is_href(attr):
            target = set_href(attr, target, value)
"""

from .attributes import Attribute
from .errors import HrefError


def is_href(attr):
    """Return True for both `href` and `xlink:href`."""
    return attr is Attribute.HREF or attr is Attribute.XLINK_HREF


def set_href(attr, current, value):
    """Return the href value to keep after seeing `attr=value`.

    An `xlink:href` only fills an empty slot; a plain `href` always replaces.

    Args:
        attr: Attribute.HREF or Attribute.XLINK_HREF
        current: the value kept so far, or None
        value: the value of the attribute being applied

    Returns:
        the new value for the slot
    """
    if current is None or attr is not Attribute.XLINK_HREF:
        return value
    return current


class Href:
    """A link target, split into its URI and fragment identifier parts.

    Elements such as `<feImage>` must decide between loading an external
    resource and referencing an element in the same document; `kind` makes
    that distinction.
    """

    __slots__ = ("fragment", "kind", "uri")

    PLAIN_URI = 0
    FRAGMENT_ID = 1
    URI_WITH_FRAGMENT_ID = 2

    def __init__(self, kind, uri=None, fragment=None):
        self.kind = kind
        self.uri = uri
        self.fragment = fragment

    @classmethod
    def parse(cls, href):
        """Split `href` at its last '#'.

        Raises:
            HrefError: PARSE_ERROR if the value, its URI part or its fragment is empty

        Returns:
            Href
        """
        pos = href.rfind("#")
        if pos == -1:
            uri, fragment = href, None
        elif pos == 0:
            uri, fragment = None, href[1:]
        else:
            uri, fragment = href[:pos], href[pos + 1 :]

        if uri is None:
            if not fragment:
                raise HrefError(HrefError.PARSE_ERROR, href)
            return cls(cls.FRAGMENT_ID, fragment=fragment)
        if not uri:
            raise HrefError(HrefError.PARSE_ERROR, href)
        if fragment is None:
            return cls(cls.PLAIN_URI, uri=uri)
        if not fragment:
            raise HrefError(HrefError.PARSE_ERROR, href)
        return cls(cls.URI_WITH_FRAGMENT_ID, uri=uri, fragment=fragment)

    @classmethod
    def without_fragment(cls, href):
        parsed = cls.parse(href)
        if parsed.kind != cls.PLAIN_URI:
            raise HrefError(HrefError.FRAGMENT_FORBIDDEN, href)
        return parsed

    @classmethod
    def with_fragment(cls, href):
        parsed = cls.parse(href)
        if parsed.kind == cls.PLAIN_URI:
            raise HrefError(HrefError.FRAGMENT_REQUIRED, href)
        return parsed

    def __eq__(self, other):
        if not isinstance(other, Href):
            return NotImplemented
        return self.kind == other.kind and self.uri == other.uri and self.fragment == other.fragment

    __hash__ = None

    def __repr__(self):
        if self.kind == self.PLAIN_URI:
            return f"Href({self.uri!r})"
        if self.kind == self.FRAGMENT_ID:
            return f"Href(#{self.fragment!r})"
        return f"Href({self.uri!r}#{self.fragment!r})"
