# views/month_view.py
import datetime

from dateutil.relativedelta import relativedelta
from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtGui import (
    QPainter, QColor, QPainterPath, QLinearGradient, QBrush, QFont, QPen
)
from PyQt6.QtCore import Qt, pyqtSignal, QPointF, QRectF

from config import DAYS_IN_WEEK, DEFAULT_LANE_STRATEGY
from constants.color_constants import CalendarColors, get_category_colors, get_text_color_for_background
from constants.ui_constants import MonthGridLayout
from booking_manager import event_label
from .layout_calculator import MonthLayoutCalculator, month_geometry_for, row_offsets, segment_rect


# ---------------------------
# 월간 그리드 (셀 + 예약 막대)
# ---------------------------
class MonthGridWidget(QWidget):
    date_clicked = pyqtSignal(str)
    month_changed = pyqtSignal(int, int)  # year, 0-based month

    def __init__(self, parent=None, lane_strategy=DEFAULT_LANE_STRATEGY):
        super().__init__(parent)
        self.current_date = datetime.date.today().replace(day=1)
        self.today = datetime.date.today()
        self.lane_strategy = lane_strategy
        self.events = []
        self.classify = None

        self.geometry_info = month_geometry_for(self.current_date)
        self.segments = []
        self.row_heights = [MonthGridLayout.ROW_HEIGHT] * self.geometry_info['total_rows']
        self.row_tops = row_offsets(self.row_heights)
        self._render_boxes = []  # [{'rect': QRectF, 'segment': dict}]

        self.setMouseTracking(True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._update_fixed_height()

    # ---------------------------
    # 데이터 / 월 이동
    # ---------------------------
    def set_events(self, events, classify=None):
        self.events = list(events)
        self.classify = classify
        self.refresh()

    def set_month(self, year, month):
        """month는 0부터 시작"""
        self.current_date = datetime.date(year, month + 1, 1)
        self.refresh()
        self.month_changed.emit(year, month)

    def go_to_previous_month(self):
        self._shift_month(-1)

    def go_to_next_month(self):
        self._shift_month(1)

    def _shift_month(self, months):
        target = self.current_date + relativedelta(months=months)
        self.set_month(target.year, target.month - 1)

    # ---------------------------
    # 레이아웃 계산
    # ---------------------------
    def refresh(self):
        self.geometry_info = month_geometry_for(self.current_date)
        calculator = MonthLayoutCalculator(
            self.events,
            self.geometry_info['year'],
            self.geometry_info['month'],
            days=self.geometry_info['days'],
            pad=self.geometry_info['pad'],
            lane_strategy=self.lane_strategy,
            classify=self.classify,
        )
        self.segments = calculator.calculate()
        # 레인이 많은 주는 막대가 모두 들어가도록 행을 늘린다
        self.row_heights = calculator.row_heights(self.segments)
        self.row_tops = row_offsets(self.row_heights)
        self._update_fixed_height()
        self._rebuild_render_boxes()
        self.update()

    def _update_fixed_height(self):
        self.setFixedHeight(sum(self.row_heights))

    def _cell_width(self):
        return (self.width() - MonthGridLayout.GAP * (DAYS_IN_WEEK - 1)) / DAYS_IN_WEEK

    def _rebuild_render_boxes(self):
        self._render_boxes = []
        for seg in self.segments:
            x, y, width = segment_rect(seg, self.width(), row_top=self.row_tops[seg['row']])
            rect = QRectF(x, y, width, MonthGridLayout.EVENT_HEIGHT)
            self._render_boxes.append({'rect': rect, 'segment': seg})

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rebuild_render_boxes()

    # ---------------------------
    # 히트 테스트
    # ---------------------------
    def date_at(self, pos):
        """Grid position -> ISO date of the cell, or None for padding cells."""
        cell_width = self._cell_width()
        if cell_width <= 0 or pos.x() < 0 or pos.y() < 0:
            return None
        col = int(pos.x() // (cell_width + MonthGridLayout.GAP))
        row = self._row_at(pos.y())
        if col >= DAYS_IN_WEEK or row is None:
            return None
        day = row * DAYS_IN_WEEK + col - self.geometry_info['pad'] + 1
        if not 1 <= day <= self.geometry_info['days']:
            return None
        return self.current_date.replace(day=day).isoformat()

    def _row_at(self, y):
        for row, (top, height) in enumerate(zip(self.row_tops, self.row_heights)):
            if top <= y < top + height:
                return row
        return None

    def segment_at(self, pos):
        for item in reversed(self._render_boxes):  # 위에 그린 것부터
            if item['rect'].contains(pos):
                return item['segment']
        return None

    def handle_click(self, pos):
        """막대 클릭은 예약 시작일, 셀 클릭은 해당 날짜를 알린다."""
        seg = self.segment_at(pos)
        date_str = seg['start_date'] if seg else self.date_at(pos)
        if date_str:
            self.date_clicked.emit(date_str)
        return date_str

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.handle_click(event.position())
        super().mousePressEvent(event)

    # ---------------------------
    # 캡슐(좌/우 라운딩) 그리기
    # ---------------------------
    def _bar_path(self, rect, left_round, right_round):
        r = min(MonthGridLayout.CORNER_RADIUS, rect.height() / 2.0, rect.width() / 2.0)
        path = QPainterPath()
        if r <= 0.0:
            path.addRect(rect)
            return path

        path.moveTo(rect.left() + (r if left_round else 0.0), rect.top())
        path.lineTo(rect.right() - (r if right_round else 0.0), rect.top())
        if right_round:
            path.arcTo(QRectF(rect.right() - 2 * r, rect.top(), 2 * r, 2 * r), 90, -90)
            path.lineTo(rect.right(), rect.bottom() - r)
            path.arcTo(QRectF(rect.right() - 2 * r, rect.bottom() - 2 * r, 2 * r, 2 * r), 0, -90)
        else:
            path.lineTo(rect.right(), rect.bottom())
        path.lineTo(rect.left() + (r if left_round else 0.0), rect.bottom())
        if left_round:
            path.arcTo(QRectF(rect.left(), rect.bottom() - 2 * r, 2 * r, 2 * r), 270, -90)
            path.lineTo(rect.left(), rect.top() + r)
            path.arcTo(QRectF(rect.left(), rect.top(), 2 * r, 2 * r), 180, -90)
        else:
            path.lineTo(rect.left(), rect.top())
        path.closeSubpath()
        return path

    # ---------------------------
    # 페인트
    # ---------------------------
    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(CalendarColors.GRID_LINE))
        self._paint_cells(painter)
        self._paint_bars(painter)
        painter.end()

    def _paint_cells(self, painter):
        cell_width = self._cell_width()
        gap = MonthGridLayout.GAP
        pad = self.geometry_info['pad']
        today_str = self.today.isoformat()

        day_font = QFont(self.font())
        day_font.setBold(True)
        painter.setFont(day_font)

        for index in range(self.geometry_info['total_rows'] * DAYS_IN_WEEK):
            row, col = divmod(index, DAYS_IN_WEEK)
            cell = QRectF(col * (cell_width + gap), self.row_tops[row],
                          cell_width, self.row_heights[row] - gap)
            painter.fillRect(cell, QColor(CalendarColors.CELL_BACKGROUND))

            day = index - pad + 1
            if not 1 <= day <= self.geometry_info['days']:
                continue

            badge_size = MonthGridLayout.DAY_BADGE_SIZE
            badge = QRectF(cell.left() + 4, cell.top() + 4, badge_size, badge_size)
            if self.current_date.replace(day=day).isoformat() == today_str:
                painter.setPen(Qt.PenStyle.NoPen)
                painter.setBrush(QColor(CalendarColors.TODAY_BACKGROUND))
                painter.drawEllipse(badge)
                painter.setPen(QColor(CalendarColors.TODAY_TEXT))
            else:
                painter.setPen(QColor(CalendarColors.DAY_TEXT))
            painter.drawText(badge, Qt.AlignmentFlag.AlignCenter, str(day))

    def _paint_bars(self, painter):
        label_font = QFont(self.font())
        label_font.setBold(True)
        label_font.setPointSizeF(max(6.0, label_font.pointSizeF() * 0.75))
        painter.setFont(label_font)
        fm = painter.fontMetrics()

        for item in self._render_boxes:
            rect = item['rect']
            seg = item['segment']
            colors = get_category_colors(seg.get('category'))

            gradient = QLinearGradient(rect.topLeft(), rect.topRight())
            gradient.setColorAt(0.0, QColor(colors['gradient_start']))
            gradient.setColorAt(1.0, QColor(colors['gradient_end']))

            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(gradient))
            painter.drawPath(self._bar_path(rect, seg['is_first'], seg['is_last']))

            # 이어지는 막대에는 제목을 쓰지 않는다
            if not seg['is_first']:
                continue
            padding = MonthGridLayout.EVENT_PADDING
            painter.setPen(QPen(QColor(get_text_color_for_background(colors['solid']))))
            elided = fm.elidedText(event_label(seg['event']), Qt.TextElideMode.ElideRight,
                                   max(0, int(rect.width()) - 2 * padding))
            painter.drawText(rect.adjusted(padding, 0, -padding, 0),
                             Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, elided)

    def day_badge_point(self, date_str):
        """Point on the day-number badge of a date; bars never cover it."""
        date_obj = datetime.date.fromisoformat(date_str)
        row, col = divmod(self.geometry_info['pad'] + date_obj.day - 1, DAYS_IN_WEEK)
        cell_width = self._cell_width()
        half_badge = MonthGridLayout.DAY_BADGE_SIZE / 2
        return QPointF(col * (cell_width + MonthGridLayout.GAP) + 4 + half_badge,
                       self.row_tops[row] + 4 + half_badge)
