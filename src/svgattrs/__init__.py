from .attributes import Attribute, all_attributes
from .errors import AttributeValueError, HrefError, ParseError, StrictModeError
from .foreign import adjust_svg_attribute, classify_foreign
from .href import Href, is_href, set_href
from .lookup import classify, is_known
from .property_bag import BagOpts, PropertyBag

__all__ = [
    "Attribute",
    "AttributeValueError",
    "BagOpts",
    "Href",
    "HrefError",
    "ParseError",
    "PropertyBag",
    "StrictModeError",
    "adjust_svg_attribute",
    "all_attributes",
    "classify",
    "classify_foreign",
    "is_href",
    "is_known",
    "set_href",
]
