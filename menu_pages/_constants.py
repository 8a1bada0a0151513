"""Stock templates and layout values used when no options are supplied.

The templates use MineDown-style ``[text](format)`` markup so that an external
renderer can turn them into coloured, clickable chat text. The core never
interprets that markup; it only substitutes ``%name%`` placeholders.

Examples
--------
>>> from menu_pages import _constants
>>> _constants.DEFAULT_PAGE_JUMPERS_TEMPLATE
'(%page_jump_buttons%)'
>>> _constants.DEFAULT_ACCENT_COLOR
(0, 251, 154)
"""

DEFAULT_HEADER_TEMPLATE = (
    "[Viewing %topic%](%color%) "
    "[(%first_item_on_page_index%-%last_item_on_page_index% of](%color%) "
    "[%total_items%](%color% bold)[)](%color%)"
)
DEFAULT_FOOTER_TEMPLATE = (
    "%previous_page_button%Page [%current_page%](%color%)/"
    "[%total_pages%](%color%)%next_page_button%   %page_jumpers%"
)
DEFAULT_PREVIOUS_BUTTON_TEMPLATE = (
    "[◀](white show_text=&7View previous page "
    "run_command=/%command% %previous_page_index%) "
)
DEFAULT_NEXT_BUTTON_TEMPLATE = (
    " [▶](white show_text=&7View next page "
    "run_command=/%command% %next_page_index%)"
)
DEFAULT_PAGE_JUMPERS_TEMPLATE = "(%page_jump_buttons%)"
DEFAULT_PAGE_JUMPER_PAGE_SEPARATOR = " "
DEFAULT_PAGE_JUMPER_GROUP_SEPARATOR = "…"
DEFAULT_PAGE_JUMPER_CURRENT_PAGE_TEMPLATE = "[%current_page%](%color%)"
DEFAULT_PAGE_JUMPER_PAGE_TEMPLATE = (
    "[%target_page_index%](show_text=&7Jump to page %target_page_index% "
    "run_command=/%command% %target_page_index%)"
)
DEFAULT_TOPIC_TEMPLATE = "List"
DEFAULT_COMMAND_NAME = "example"
DEFAULT_ACCENT_COLOR = (0x00, 0xFB, 0x9A)
DEFAULT_ITEM_SEPARATOR = "\n"
DEFAULT_ITEMS_PER_PAGE = 10
DEFAULT_PAGE_JUMPER_START_WINDOW = 3
DEFAULT_PAGE_JUMPER_END_WINDOW = 3

TARGET_PAGE_PLACEHOLDER = "%target_page_index%"
PLACEHOLDER_DELIMITER = "%"
