# views/day_detail_view.py
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QListWidget, QListWidgetItem, QLabel
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QPainter, QColor

from booking_manager import day_details, format_date
from constants.color_constants import get_category_colors
from constants.text_constants import CalendarText, plural_bookings


class DayDetailItemWidget(QWidget):
    """
    선택한 날짜의 예약 한 건.
    시간, 고객, 서비스, 지점/기간 정보를 표시합니다.
    """
    def __init__(self, detail):
        super().__init__()
        self.detail = detail
        self.colors = get_category_colors(detail['color_category'])
        self.initUI()

    def initUI(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 5, 10, 5)

        header = f"{self.detail['time']}  {self.detail['client_name']}".strip()
        self.client_label = QLabel(header)
        self.client_label.setStyleSheet("font-weight: bold; font-size: 10pt; background-color: transparent;")
        layout.addWidget(self.client_label)

        self.service_label = QLabel(self.detail['service'])
        self.service_label.setStyleSheet("font-size: 9pt; background-color: transparent;")
        layout.addWidget(self.service_label)

        info_parts = [self.detail['branch_label'], self.detail['category_name'], self.detail['car'], self.detail['phone']]
        if self.detail['payment_status'] == 'paid':
            info_parts.append(CalendarText.PAID)
        elif self.detail['payment_status'] == 'advance':
            info_parts.append(CalendarText.ADVANCE)
        if self.detail['is_completed']:
            info_parts.append(CalendarText.COMPLETED)
        self.info_label = QLabel(" · ".join(part for part in info_parts if part))
        self.info_label.setStyleSheet("font-size: 8pt; color: #71717A; background-color: transparent;")
        layout.addWidget(self.info_label)

        if self.detail['period']:
            period_text = self.detail['period']
            if self.detail['position_label']:
                period_text = f"{self.detail['position_label']}: {period_text}"
            self.period_label = QLabel(period_text)
            self.period_label.setStyleSheet(
                f"font-size: 8pt; font-weight: bold; color: {self.colors['solid']}; background-color: transparent;"
            )
            layout.addWidget(self.period_label)

        self.setStyleSheet(f"background-color: {self.colors['light']};")

    def paintEvent(self, event):
        """왼쪽에 지점 색상으로 된 세로 막대를 그립니다."""
        super().paintEvent(event)
        painter = QPainter(self)
        painter.fillRect(0, 0, 5, self.height(), QColor(self.colors['solid']))


class DayDetailWidget(QWidget):
    client_requested = pyqtSignal(dict)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.date_str = None
        self.details = []
        self.initUI()

    def initUI(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_label = QLabel("")
        self.title_label.setStyleSheet("font-weight: bold; font-size: 13pt;")
        layout.addWidget(self.title_label)

        self.list_widget = QListWidget()
        self.list_widget.setStyleSheet("QListWidget { border: none; }")
        self.list_widget.itemDoubleClicked.connect(self.on_item_double_clicked)
        layout.addWidget(self.list_widget)

    def show_date(self, date_str, events, clients, categories=None):
        self.date_str = date_str
        self.details = day_details(date_str, events, clients, categories)
        count = len(self.details)
        self.title_label.setText(f"{format_date(date_str)} · {count} {plural_bookings(count)}")

        self.list_widget.clear()
        if not self.details:
            self.list_widget.addItem(QListWidgetItem(CalendarText.NO_BOOKINGS))
            return

        for detail in self.details:
            item_widget = DayDetailItemWidget(detail)
            list_item = QListWidgetItem()
            list_item.setSizeHint(item_widget.sizeHint())
            self.list_widget.addItem(list_item)
            self.list_widget.setItemWidget(list_item, item_widget)

    def on_item_double_clicked(self, item):
        row = self.list_widget.row(item)
        if 0 <= row < len(self.details) and self.details[row]['client']:
            self.client_requested.emit(self.details[row]['client'])
