# constants/ui_constants.py
"""
UI 관련 상수 정의
Month grid geometry shared by the layout engine and the renderer.
"""

# ============================================================================
# 월간 그리드 레이아웃
# ============================================================================
class MonthGridLayout:
    CELL_MIN_HEIGHT = 90        # 날짜 셀 최소 높이
    GAP = 1                     # 셀 사이 간격
    ROW_HEIGHT = CELL_MIN_HEIGHT + GAP
    HEADER_OFFSET = 32          # 날짜 숫자 아래로 막대 시작 위치
    LANE_HEIGHT = 20            # 레인 하나의 높이
    EVENT_HEIGHT = 18           # 막대 높이
    EVENT_PADDING = 6           # 막대 텍스트 좌우 패딩
    CORNER_RADIUS = 4.0
    DAY_BADGE_SIZE = 24         # 오늘 표시 원 지름


class WindowSize:
    MIN_WIDTH = 420
    MIN_HEIGHT = 480
    DETAIL_MIN_HEIGHT = 140
