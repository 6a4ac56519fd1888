"""Common literal values used across html_decorations.

These constants keep style identifiers, class-name formats, and template file
names centralized so builders, the registry, and tests can import the same
values without drifting. Intended for internal use within the package.

Examples
--------
>>> from html_decorations import _constants
>>> _constants.CLASS_NAME_TEMPLATE.format(prefix="readium", key="note", index=7)
'readium-note-7'
>>> _constants.HIGHLIGHT_STYLE
'highlight'
"""

CLASS_NAME_PREFIX = "readium"
CLASS_NAME_TEMPLATE = "{prefix}-{key}-{index}"

HIGHLIGHT_STYLE = "highlight"
NOTE_STYLE = "note"

HIGHLIGHT_CLASS_KEY = "highlight"
NOTE_CLASS_KEY = "sidemark"

HIGHLIGHT_ELEMENT_TEMPLATE = "highlight.html.jinja"
HIGHLIGHT_STYLESHEET_TEMPLATE = "highlight.css.jinja"
NOTE_ELEMENT_TEMPLATE = "note.html.jinja"
NOTE_STYLESHEET_TEMPLATE = "note.css.jinja"

DEFAULT_ELEMENT = "<div/>"
