"""Classified attributes of a single element.

A tree builder receives an element's attributes from the tokenizer either as a
dict or as a flat `[name, value, name, value, ...]` list. `PropertyBag`
classifies every name once, up front, so element implementations can dispatch
on `Attribute` members while walking their attributes:

    bag = PropertyBag(tag.attrs)
    for name, attr, value in bag:
        if attr is Attribute.DX:
            dx = bag.parse(attr, float)

Unrecognized names are kept aside (see `unknown()`) unless
`BagOpts(keep_unknown=False)` is passed.
"""

from .errors import AttributeValueError, ParseError, StrictModeError
from .href import is_href, set_href
from .lookup import classify


class BagOpts:
    __slots__ = ("keep_unknown",)

    def __init__(self, keep_unknown=True):
        self.keep_unknown = bool(keep_unknown)


class PropertyBag:
    __slots__ = ("_known", "_unknown", "_values", "column", "debug_enabled", "errors", "line", "opts", "strict")

    def __init__(
        self,
        attrs,
        *,
        opts=None,
        collect_errors=False,
        strict=False,
        debug=False,
        line=None,
        column=None,
    ):
        self.opts = opts or BagOpts()
        self.strict = bool(strict)
        self.debug_enabled = bool(debug)
        self.line = line
        self.column = column
        # Strict mode needs errors to be reported even if not collected
        self.errors = [] if (collect_errors or strict) else None
        self._known = []  # (name, attr, value)
        self._unknown = []  # (name, value)
        self._values = {}  # attr -> value
        self._collect(attrs)

    def _collect(self, attrs):
        if not attrs:
            return
        if isinstance(attrs, dict):
            pairs = attrs.items()
        else:
            names = attrs[0::2]
            values = list(attrs[1::2])
            if len(names) > len(values):
                # Trailing name with no value is kept as an empty attribute
                self._emit_error("missing-attribute-value", f"No value for attribute '{names[-1]}'")
                values.append("")
            pairs = zip(names, values)

        seen = set()
        keep_unknown = self.opts.keep_unknown
        for name, value in pairs:
            if name in seen:
                self._emit_error("duplicate-attribute", f"Duplicate attribute '{name}' ignored")
                continue
            seen.add(name)

            attr = classify(name)
            if attr is None:
                if keep_unknown:
                    self._unknown.append((name, value))
                if self.debug_enabled:
                    self.debug(f"unknown attribute {name!r}")
                continue
            self._known.append((name, attr, value))
            self._values[attr] = value

    def _emit_error(self, code, message):
        if self.errors is None:
            return
        error = ParseError(code, line=self.line, column=self.column, message=message)
        if self.strict:
            raise StrictModeError(error)
        self.errors.append(error)

    def debug(self, message, indent=4):
        if self.debug_enabled:
            print(f"{' ' * indent}PropertyBag: {message}")

    def __iter__(self):
        return iter(self._known)

    def iter(self):
        """Yield (name, Attribute, value) for every recognized attribute, in source order."""
        return iter(self._known)

    def unknown(self):
        """Yield (name, value) for every attribute whose name was not recognized."""
        return iter(self._unknown)

    def __len__(self):
        return len(self._known)

    def __contains__(self, key):
        if isinstance(key, str):
            key = classify(key)
        return key in self._values

    def get(self, attr, default=None):
        return self._values.get(attr, default)

    def parse(self, attr, parser, default=None):
        """Parse the value of `attr` with `parser`, or return `default` if absent.

        Raises:
            AttributeValueError: if `parser` raises ValueError
        """
        value = self._values.get(attr)
        if value is None:
            return default
        try:
            return parser(value)
        except ValueError as exc:
            raise AttributeValueError(attr, str(exc)) from exc

    def href(self):
        """Return the element's link target, preferring `href` over `xlink:href`."""
        target = None
        for _name, attr, value in self._known:
            if is_href(attr):
                target = set_href(attr, target, value)
        return target

    def __repr__(self):
        parts = [f"{name}={value!r}" for name, _attr, value in self._known]
        return f"<PropertyBag {' '.join(parts)}>"
