"""Core constants: volatile annotation keys, access levels, and markup.

Single source of truth for literal values shared by matchers, the
executor, and renderers.
"""

# Volatile annotation keys attached to each returned entity
SEARCH_MATCHED_TITLE = "search_matched_title"
SEARCH_MATCHED_DESCRIPTION = "search_matched_description"
SEARCH_MATCHED_EXTRA = "search_matched_extra"

# Access levels stored in entities.access_id / metadata.access_id
ACCESS_PRIVATE = 0
ACCESS_LOGGED_IN = 1
ACCESS_PUBLIC = 2

# Highlight markup (renderers look for this class)
HIGHLIGHT_OPEN = '<strong class="search-highlight">'
HIGHLIGHT_CLOSE = "</strong>"
ELLIPSIS = "..."

# Translation key prefixes
PROFILE_LABEL_PREFIX = "profile:"
TAG_LABEL_PREFIX = "tag_names:"

# Annotation name prefix for profile values, e.g. "profile:phone"
PROFILE_ANNOTATION_PREFIX = "profile:"

# Custom search type contributed by tag matching
TAGS_SEARCH_TYPE = "tags"
