# constants/__init__.py
"""
상수 패키지 초기화
모든 상수들을 중앙에서 관리하고 쉽게 import할 수 있도록 함
"""

from .ui_constants import MonthGridLayout, WindowSize
from .color_constants import (
    BaseColors, ColorCategory, BranchColors, CalendarColors,
    get_category_colors, get_text_color_for_background
)
from .text_constants import (
    MONTH_NAMES, MONTH_NAMES_GENITIVE, WEEKDAY_NAMES, BRANCH_LABELS, RANGE_POSITION_LABELS,
    CalendarText, get_branch_label, get_range_position_label, plural_bookings
)

__all__ = [
    # UI Constants
    'MonthGridLayout', 'WindowSize',

    # Color Constants
    'BaseColors', 'ColorCategory', 'BranchColors', 'CalendarColors',
    'get_category_colors', 'get_text_color_for_background',

    # Text Constants
    'MONTH_NAMES', 'MONTH_NAMES_GENITIVE', 'WEEKDAY_NAMES', 'BRANCH_LABELS', 'RANGE_POSITION_LABELS',
    'CalendarText', 'get_branch_label', 'get_range_position_label', 'plural_bookings',
]
