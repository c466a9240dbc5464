import sys
import datetime
import logging

from PyQt6.QtWidgets import (QApplication, QWidget, QVBoxLayout, QHBoxLayout,
                             QPushButton, QLabel, QGridLayout, QScrollArea, QMessageBox)
from PyQt6.QtCore import Qt

from logger_config import setup_logger
from settings_manager import load_settings
from config import BOOKINGS_FILE, DEFAULT_WINDOW_GEOMETRY, DEFAULT_LANE_STRATEGY
from constants.text_constants import MONTH_NAMES, WEEKDAY_NAMES
from constants.ui_constants import WindowSize
from error_messages import BookingDataError, ErrorMessages
from booking_manager import (
    load_bookings_file, events_from_clients, filter_by_branch, make_classifier, client_summary
)
from views.month_view import MonthGridWidget
from views.day_detail_view import DayDetailWidget

logger = logging.getLogger(__name__)


class CalendarWindow(QWidget):
    def __init__(self, settings, clients=None, categories=None):
        super().__init__()
        self.settings = settings
        self.clients = clients or []
        self.categories = categories or []
        self.events = filter_by_branch(
            events_from_clients(self.clients), self.settings.get("branch_filter", "all")
        )
        self.initUI()

        self.month_grid.set_events(self.events, classify=make_classifier(self.clients))
        self.update_month_label(self.month_grid.current_date.year, self.month_grid.current_date.month - 1)

    def initUI(self):
        self.setWindowTitle("Календарь")
        self.setGeometry(*self.settings.get("geometry", DEFAULT_WINDOW_GEOMETRY))
        self.setMinimumSize(WindowSize.MIN_WIDTH, WindowSize.MIN_HEIGHT)

        main_layout = QVBoxLayout(self)

        nav_layout = QHBoxLayout()
        self.prev_button, self.next_button = QPushButton("<"), QPushButton(">")
        self.month_label = QLabel()
        self.month_label.setStyleSheet("font-size: 20pt; font-weight: bold;")
        self.year_label = QLabel()
        self.year_label.setStyleSheet("font-weight: bold; color: #A1A1AA;")
        nav_layout.addWidget(self.prev_button)
        nav_layout.addWidget(self.month_label)
        nav_layout.addWidget(self.next_button)
        nav_layout.addStretch(1)
        nav_layout.addWidget(self.year_label)
        main_layout.addLayout(nav_layout)

        weekday_layout = QGridLayout()
        for col, name in enumerate(WEEKDAY_NAMES):
            label = QLabel(name)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setStyleSheet("font-size: 8pt; font-weight: bold; color: #A1A1AA;")
            weekday_layout.addWidget(label, 0, col)
        main_layout.addLayout(weekday_layout)

        self.month_grid = MonthGridWidget(
            lane_strategy=self.settings.get("lane_strategy", DEFAULT_LANE_STRATEGY)
        )
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.month_grid)
        main_layout.addWidget(scroll, 3)

        self.day_detail = DayDetailWidget()
        self.day_detail.setMinimumHeight(WindowSize.DETAIL_MIN_HEIGHT)
        self.day_detail.hide()
        main_layout.addWidget(self.day_detail, 2)

        self.prev_button.clicked.connect(self.month_grid.go_to_previous_month)
        self.next_button.clicked.connect(self.month_grid.go_to_next_month)
        self.month_grid.month_changed.connect(self.update_month_label)
        self.month_grid.date_clicked.connect(self.show_day)
        self.day_detail.client_requested.connect(self.show_client)

    def update_month_label(self, year, month):
        self.month_label.setText(MONTH_NAMES[month])
        self.year_label.setText(str(year))

    def show_day(self, date_str):
        logger.debug(f"Day selected: {date_str}")
        self.day_detail.show_date(date_str, self.events, self.clients, self.categories)
        self.day_detail.show()

    def show_client(self, client):
        QMessageBox.information(self, client.get("name") or "", client_summary(client))


def load_bookings(path):
    """Load (clients, categories); a broken export is reported and the calendar starts empty."""
    try:
        return load_bookings_file(path)
    except BookingDataError as e:
        logger.error(f"{e} [{e.error_code}]")
        suggestions = ErrorMessages.format_suggestions(e.suggestions)
        if suggestions:
            logger.info(suggestions)
        return [], []


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    settings = load_settings()
    setup_logger(settings.get("log_level"))

    path = argv[1] if len(argv) > 1 else BOOKINGS_FILE
    clients, categories = load_bookings(path)
    logger.info(f"Starting calendar for {datetime.date.today():%Y-%m} with {len(clients)} clients")

    app = QApplication(argv)
    window = CalendarWindow(settings, clients, categories)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
