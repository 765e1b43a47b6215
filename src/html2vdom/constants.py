#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2vdom.

This module centralizes the static tables and default configuration values
used across the library. Every table here is built once at import time and
exposed as a read-only ``MappingProxyType`` or ``frozenset``.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Defaults - Default option values and fixed messages
3. Element Categories - Tag sets driving whitespace, raw text and rendering
4. Attribute Mapping Table - HTML attribute name to element property name
5. Dependencies - Third-party packages required by each backend
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html5lib", "html.parser", "lxml"]
BackendName = Literal["standalone", "document"]

# =============================================================================
# Conversion Defaults
# =============================================================================

INPUT_TYPE_ERROR_MESSAGE = "Expected HTML string"

# Transform table key that matches any tag or text without its own entry
DEFAULT_TRANSFORM_KEY = "_"

DEFAULT_DANGEROUSLY_SET_CHILDREN: tuple[str, ...] = ("style",)
DEFAULT_HTML_PARSER: HtmlParser = "html5lib"
DEFAULT_BACKEND: BackendName = "standalone"

DANGEROUS_INNER_HTML_PROP = "dangerouslySetInnerHTML"
DANGEROUS_INNER_HTML_KEY = "__html"
STYLE_PROP = "style"

# =============================================================================
# Element Categories
# =============================================================================

# Whitespace-only text directly inside these tags is elided
TABLE_ELEMENTS = frozenset({"table", "thead", "tbody", "tfoot", "tr", "colgroup"})

# Text content of these tags is never entity-decoded by an HTML5 parser
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "xmp", "iframe", "noembed", "noframes", "plaintext"})

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# =============================================================================
# Attribute Mapping Table
# =============================================================================

# HTML attributes whose property name is a camelCase spelling of the
# lowercase attribute name
_HTML_CAMELCASE_PROPERTIES = (
    "accessKey",
    "allowFullScreen",
    "autoCapitalize",
    "autoComplete",
    "autoCorrect",
    "autoFocus",
    "autoPlay",
    "autoSave",
    "cellPadding",
    "cellSpacing",
    "charSet",
    "classID",
    "colSpan",
    "contentEditable",
    "contextMenu",
    "controlsList",
    "crossOrigin",
    "dateTime",
    "disablePictureInPicture",
    "disableRemotePlayback",
    "encType",
    "enterKeyHint",
    "fetchPriority",
    "formAction",
    "formEncType",
    "formMethod",
    "formNoValidate",
    "formTarget",
    "frameBorder",
    "hrefLang",
    "imageSizes",
    "imageSrcSet",
    "inputMode",
    "itemID",
    "itemProp",
    "itemRef",
    "itemScope",
    "itemType",
    "keyParams",
    "keyType",
    "marginHeight",
    "marginWidth",
    "maxLength",
    "mediaGroup",
    "minLength",
    "noModule",
    "noValidate",
    "playsInline",
    "radioGroup",
    "readOnly",
    "referrerPolicy",
    "rowSpan",
    "spellCheck",
    "srcDoc",
    "srcLang",
    "srcSet",
    "tabIndex",
    "useMap",
)

# SVG attributes that are case-sensitive camelCase in markup
_SVG_CAMELCASE_ATTRIBUTES = (
    "attributeName",
    "attributeType",
    "baseFrequency",
    "baseProfile",
    "calcMode",
    "clipPathUnits",
    "contentScriptType",
    "contentStyleType",
    "diffuseConstant",
    "edgeMode",
    "externalResourcesRequired",
    "filterRes",
    "filterUnits",
    "glyphRef",
    "gradientTransform",
    "gradientUnits",
    "kernelMatrix",
    "kernelUnitLength",
    "keyPoints",
    "keySplines",
    "keyTimes",
    "lengthAdjust",
    "limitingConeAngle",
    "markerHeight",
    "markerUnits",
    "markerWidth",
    "maskContentUnits",
    "maskUnits",
    "numOctaves",
    "pathLength",
    "patternContentUnits",
    "patternTransform",
    "patternUnits",
    "pointsAtX",
    "pointsAtY",
    "pointsAtZ",
    "preserveAlpha",
    "preserveAspectRatio",
    "primitiveUnits",
    "refX",
    "refY",
    "repeatCount",
    "repeatDur",
    "requiredExtensions",
    "requiredFeatures",
    "specularConstant",
    "specularExponent",
    "spreadMethod",
    "startOffset",
    "stdDeviation",
    "stitchTiles",
    "surfaceScale",
    "systemLanguage",
    "tableValues",
    "targetX",
    "targetY",
    "textLength",
    "viewBox",
    "viewTarget",
    "xChannelSelector",
    "yChannelSelector",
    "zoomAndPan",
)

# Hyphenated (SVG presentation) and namespaced attributes, camelCased on
# every hyphen and colon
_DELIMITED_ATTRIBUTES = (
    "accent-height",
    "alignment-baseline",
    "arabic-form",
    "baseline-shift",
    "cap-height",
    "clip-path",
    "clip-rule",
    "color-interpolation",
    "color-interpolation-filters",
    "color-profile",
    "color-rendering",
    "dominant-baseline",
    "enable-background",
    "fill-opacity",
    "fill-rule",
    "flood-color",
    "flood-opacity",
    "font-family",
    "font-size",
    "font-size-adjust",
    "font-stretch",
    "font-style",
    "font-variant",
    "font-weight",
    "glyph-name",
    "glyph-orientation-horizontal",
    "glyph-orientation-vertical",
    "horiz-adv-x",
    "horiz-origin-x",
    "image-rendering",
    "letter-spacing",
    "lighting-color",
    "marker-end",
    "marker-mid",
    "marker-start",
    "overline-position",
    "overline-thickness",
    "paint-order",
    "panose-1",
    "pointer-events",
    "rendering-intent",
    "shape-rendering",
    "stop-color",
    "stop-opacity",
    "strikethrough-position",
    "strikethrough-thickness",
    "stroke-dasharray",
    "stroke-dashoffset",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "text-anchor",
    "text-decoration",
    "text-rendering",
    "transform-origin",
    "underline-position",
    "underline-thickness",
    "unicode-bidi",
    "unicode-range",
    "units-per-em",
    "v-alphabetic",
    "v-hanging",
    "v-ideographic",
    "v-mathematical",
    "vector-effect",
    "vert-adv-y",
    "vert-origin-x",
    "vert-origin-y",
    "word-spacing",
    "writing-mode",
    "x-height",
    "accept-charset",
    "http-equiv",
    "xlink:actuate",
    "xlink:arcrole",
    "xlink:href",
    "xlink:role",
    "xlink:show",
    "xlink:title",
    "xlink:type",
    "xml:base",
    "xml:lang",
    "xml:space",
    "xmlns:xlink",
)

_IRREGULAR_ATTRIBUTES = {
    "class": "className",
    "for": "htmlFor",
}

_DELIMITER_PATTERN = re.compile(r"[-:](.)")


def _camelize_delimited(name: str) -> str:
    return _DELIMITER_PATTERN.sub(lambda match: match.group(1).upper(), name)


def _build_attribute_tables() -> tuple[Mapping[str, str], Mapping[str, str]]:
    """Build the forward (attribute -> property) and inverse tables.

    The forward table is keyed by lowercase attribute name. The inverse
    table gives the attribute name a renderer should emit for a property.
    """
    forward: dict[str, str] = {}
    inverse: dict[str, str] = {}

    for prop in _HTML_CAMELCASE_PROPERTIES:
        forward[prop.lower()] = prop
        inverse[prop] = prop.lower()
    for attribute in _SVG_CAMELCASE_ATTRIBUTES:
        forward[attribute.lower()] = attribute
        inverse[attribute] = attribute
    for attribute in _DELIMITED_ATTRIBUTES:
        prop = _camelize_delimited(attribute)
        forward[attribute] = prop
        inverse[prop] = attribute
    for attribute, prop in _IRREGULAR_ATTRIBUTES.items():
        forward[attribute] = prop
        inverse[prop] = attribute

    return MappingProxyType(forward), MappingProxyType(inverse)


ATTRIBUTE_TO_PROPERTY, PROPERTY_TO_ATTRIBUTE = _build_attribute_tables()

# Presence-only attributes: any value (including none) means true
BOOLEAN_PROPERTIES = frozenset(
    {
        "allowFullScreen",
        "async",
        "autoFocus",
        "autoPlay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "disablePictureInPicture",
        "disableRemotePlayback",
        "formNoValidate",
        "hidden",
        "inert",
        "itemScope",
        "loop",
        "multiple",
        "muted",
        "noModule",
        "noValidate",
        "open",
        "playsInline",
        "readOnly",
        "required",
        "reversed",
        "scoped",
        "seamless",
        "selected",
    }
)

# Enumerated "true"/"false" attributes that mean true when valueless
BOOLEANISH_PROPERTIES = frozenset({"contentEditable", "draggable", "spellCheck"})

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_STANDALONE = [("beautifulsoup4", "bs4", ">=4.13.0")]
DEPS_DOCUMENT = [("html5lib", "html5lib", ">=1.1")]

# Extra packages required by each BeautifulSoup tree builder
DEPS_HTML_PARSER: Mapping[str, list[tuple[str, str, str]]] = MappingProxyType(
    {
        "html.parser": [],
        "html5lib": [("html5lib", "html5lib", ">=1.1")],
        "lxml": [("lxml", "lxml", "")],
    }
)
