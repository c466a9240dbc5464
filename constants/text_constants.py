# constants/text_constants.py
"""
텍스트 상수 정의
Russian calendar captions used by the booking views.
"""

MONTH_NAMES = [
    "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
    "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
]

# 날짜 표기용 소유격 월 이름 (15 марта 2024)
MONTH_NAMES_GENITIVE = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
]

WEEKDAY_NAMES = ['Пн', 'Вт', 'Ср', 'Чт', 'Пт', 'Сб', 'Вс']

BRANCH_LABELS = {
    "msk": "МСК",
    "rnd": "РНД",
}


class CalendarText:
    DEFAULT_SERVICE = "Услуга"
    DEFAULT_CLIENT = "Клиент"
    NO_BOOKINGS = "Нет броней на этот день"
    PAID = "Оплачено"
    ADVANCE = "Аванс"
    COMPLETED = "Выполнено"


# 여러 날 예약에서 선택한 날짜의 위치
RANGE_POSITION_LABELS = {
    "single": "",
    "start": "Начало",
    "middle": "Продолжение",
    "end": "Последний день",
}


def get_branch_label(branch):
    return BRANCH_LABELS.get(branch, "")


def get_range_position_label(position):
    return RANGE_POSITION_LABELS.get(position, "")


def plural_bookings(count):
    """Бронь / брони / броней по числу."""
    if count % 10 == 1 and count % 100 != 11:
        return "бронь"
    if 2 <= count % 10 <= 4 and not 12 <= count % 100 <= 14:
        return "брони"
    return "броней"
