"""Values that should not change without a code change.

Settings callers may tweak through the environment belong in `styleruns.config` instead.
"""

# -- a numeric `font-weight` strictly above this renders bold --
BOLD_WEIGHT_THRESHOLD = 400

BOLD_WEIGHT_KEYWORDS = frozenset(("bold", "bolder"))

BOLD_TAG = "b"
ITALIC_TAG = "i"

DEFAULT_CONTAINER_TAG = "div"

# -- elements removed (with their content, but not their tail) before the tree is walked --
STRIPPED_TAGS = ("link", "meta", "noscript", "script", "style")

# -- HTML "ASCII whitespace"; a text node made only of these produces no run --
HTML_WHITESPACE = " \t\n\r\f"
