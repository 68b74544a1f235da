"""SVG attribute names as seen through an HTML tokenizer.

The HTML tokenizer lowercases every attribute name, so `<svg viewBox="...">`
inside an HTML document arrives as `viewbox`. The HTML5 tree construction
rules restore the SVG spelling with a fixed table ("adjust SVG attributes").
This module applies that table before classification. `classify()` itself
never folds case.

References:
    - https://html.spec.whatwg.org/multipage/parsing.html#adjust-svg-attributes
"""

from .lookup import classify

# Lowercased name -> SVG spelling, per the HTML5 adjust-SVG-attributes table
SVG_CASE_SENSITIVE_ATTRIBUTES = {
    "attributename": "attributeName",
    "attributetype": "attributeType",
    "basefrequency": "baseFrequency",
    "baseprofile": "baseProfile",
    "calcmode": "calcMode",
    "clippathunits": "clipPathUnits",
    "diffuseconstant": "diffuseConstant",
    "edgemode": "edgeMode",
    "filterunits": "filterUnits",
    "glyphref": "glyphRef",
    "gradienttransform": "gradientTransform",
    "gradientunits": "gradientUnits",
    "kernelmatrix": "kernelMatrix",
    "kernelunitlength": "kernelUnitLength",
    "keypoints": "keyPoints",
    "keysplines": "keySplines",
    "keytimes": "keyTimes",
    "lengthadjust": "lengthAdjust",
    "limitingconeangle": "limitingConeAngle",
    "markerheight": "markerHeight",
    "markerunits": "markerUnits",
    "markerwidth": "markerWidth",
    "maskcontentunits": "maskContentUnits",
    "maskunits": "maskUnits",
    "numoctaves": "numOctaves",
    "pathlength": "pathLength",
    "patterncontentunits": "patternContentUnits",
    "patterntransform": "patternTransform",
    "patternunits": "patternUnits",
    "pointsatx": "pointsAtX",
    "pointsaty": "pointsAtY",
    "pointsatz": "pointsAtZ",
    "preservealpha": "preserveAlpha",
    "preserveaspectratio": "preserveAspectRatio",
    "primitiveunits": "primitiveUnits",
    "refx": "refX",
    "refy": "refY",
    "repeatcount": "repeatCount",
    "repeatdur": "repeatDur",
    "requiredextensions": "requiredExtensions",
    "requiredfeatures": "requiredFeatures",
    "specularconstant": "specularConstant",
    "specularexponent": "specularExponent",
    "spreadmethod": "spreadMethod",
    "startoffset": "startOffset",
    "stddeviation": "stdDeviation",
    "stitchtiles": "stitchTiles",
    "surfacescale": "surfaceScale",
    "systemlanguage": "systemLanguage",
    "tablevalues": "tableValues",
    "targetx": "targetX",
    "targety": "targetY",
    "textlength": "textLength",
    "viewbox": "viewBox",
    "viewtarget": "viewTarget",
    "xchannelselector": "xChannelSelector",
    "ychannelselector": "yChannelSelector",
    "zoomandpan": "zoomAndPan",
}


def adjust_svg_attribute(name):
    """Return the SVG spelling of an HTML-tokenized attribute name.

    Names not in the table (including `xlink:href`, `xml:lang`, `xml:space`,
    which the tokenizer already emits in their canonical lowercase form) are
    returned unchanged.
    """
    return SVG_CASE_SENSITIVE_ATTRIBUTES.get(name, name)


def classify_foreign(name):
    """Classify an attribute name that came from an HTML tokenizer."""
    return classify(adjust_svg_attribute(name))
