# constants/color_constants.py
"""
색상 관련 상수 정의
Branch and completion colours for booking bars and day-detail cards.
"""

# ============================================================================
# 기본 색상 팔레트
# ============================================================================
class BaseColors:
    WHITE = "#FFFFFF"
    BLACK = "#000000"

    GRAY_LIGHTEST = "#FAFAFA"
    GRAY_LIGHTER = "#F4F4F5"
    GRAY_LIGHT = "#E4E4E7"
    GRAY_DARK = "#52525B"


# ============================================================================
# 색상 분류 (레이아웃 엔진에 주입되는 classify 결과)
# ============================================================================
class ColorCategory:
    COMPLETED = "completed"
    MSK = "msk"
    RND = "rnd"
    NONE = "none"

    ALL = (COMPLETED, MSK, RND, NONE)


# ============================================================================
# 분류별 색상: 막대 그라디언트(start, end)와 상세 카드(light, border)
# ============================================================================
class BranchColors:
    GRADIENT = {
        ColorCategory.COMPLETED: ("#9CA3AF", "#6B7280"),
        ColorCategory.MSK: ("#EA580C", "#C2410C"),
        ColorCategory.RND: ("#1D4ED8", "#1E40AF"),
        ColorCategory.NONE: ("#A1A1AA", "#71717A"),
    }
    SOLID = {
        ColorCategory.COMPLETED: "#6B7280",
        ColorCategory.MSK: "#EA580C",
        ColorCategory.RND: "#1D4ED8",
        ColorCategory.NONE: "#71717A",
    }
    LIGHT = {
        ColorCategory.COMPLETED: "#F9FAFB",
        ColorCategory.MSK: "#FFF7ED",
        ColorCategory.RND: "#EFF6FF",
        ColorCategory.NONE: "#FAFAFA",
    }
    BORDER = {
        ColorCategory.COMPLETED: "#E5E7EB",
        ColorCategory.MSK: "#FED7AA",
        ColorCategory.RND: "#BFDBFE",
        ColorCategory.NONE: "#E4E4E7",
    }


class CalendarColors:
    CELL_BACKGROUND = BaseColors.WHITE
    CELL_HOVER = BaseColors.GRAY_LIGHTEST
    GRID_LINE = BaseColors.GRAY_LIGHT
    DAY_TEXT = BaseColors.GRAY_DARK
    TODAY_BACKGROUND = BaseColors.BLACK
    TODAY_TEXT = BaseColors.WHITE


def get_category_colors(category):
    """분류에 맞는 색상 묶음 반환. 모르는 분류는 NONE으로 취급"""
    if category not in ColorCategory.ALL:
        category = ColorCategory.NONE
    start, end = BranchColors.GRADIENT[category]
    return {
        'gradient_start': start,
        'gradient_end': end,
        'solid': BranchColors.SOLID[category],
        'light': BranchColors.LIGHT[category],
        'border': BranchColors.BORDER[category],
    }


def get_text_color_for_background(hex_color):
    try:
        hex_color = hex_color.lstrip('#')
        r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
        luminance = (0.299 * r + 0.587 * g + 0.114 * b)
        return '#000000' if luminance > 149 else '#FFFFFF'
    except (ValueError, AttributeError):
        return '#FFFFFF'
