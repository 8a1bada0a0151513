"""Configure how paginated lists are laid out and themed.

This subpackage defines the immutable :class:`ListOptions` value, the fluent
:class:`ListOptionsBuilder` used to create it, and YAML loaders that read
options and item lists from disk. Options are validated once when built, so
every page rendered from them can rely on a positive page size and
non-negative jump-button windows.

Examples
--------
>>> from menu_pages.options import ListOptions
>>> options = ListOptions.builder().with_items_per_page(4).build()
>>> options.items_per_page
4
>>> ListOptions().color_code
'#00fb9a'
"""

from .builder import ListOptionsBuilder
from .loader import build_list_options, load_items, load_list_options
from .models import OPTION_FIELDS, RGB, ListOptions, OptionsError

__all__ = [
    "OPTION_FIELDS",
    "RGB",
    "ListOptions",
    "ListOptionsBuilder",
    "OptionsError",
    "build_list_options",
    "load_items",
    "load_list_options",
]
