# booking_manager.py
"""
Booking records -> calendar events, plus the lookups the month view needs
(completion state, colour category, day-detail rows).
"""
import json
import logging
import os

from dateutil import parser as dateutil_parser

from config import DEFAULT_BOOKING_LABEL
from constants.color_constants import ColorCategory
from constants.text_constants import (
    MONTH_NAMES_GENITIVE, CalendarText, get_branch_label, get_range_position_label
)
from error_messages import BookingDataError
from views.layout_calculator import classify_by_branch, events_on_date, range_position

logger = logging.getLogger(__name__)


def load_bookings_file(path):
    """
    Read a booking export ({"clients": [...], "categories": [...]}) written by the server.

    Returns:
        tuple: (클라이언트 목록, 카테고리 목록). 각 클라이언트는 records 리스트를 가짐
    """
    if not os.path.exists(path):
        raise BookingDataError.from_message('BOOKING_FILE_NOT_FOUND', path)

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise BookingDataError.from_message('BOOKING_FILE_INVALID', str(e)) from e

    if isinstance(data, dict):
        clients = data.get('clients')
        categories = data.get('categories') or []
    else:
        clients, categories = data, []
    if not isinstance(clients, list):
        raise BookingDataError.from_message('BOOKING_FILE_INVALID', "no clients list")
    if not isinstance(categories, list):
        raise BookingDataError.from_message('BOOKING_FILE_INVALID', "categories is not a list")

    for client in clients:
        if not isinstance(client, dict) or 'id' not in client:
            raise BookingDataError.from_message('BOOKING_FILE_INVALID', "client without id")
        records = client.setdefault('records', [])
        if not isinstance(records, list):
            raise BookingDataError.from_message(
                'BOOKING_FILE_INVALID', f"records of client {client['id']} is not a list"
            )

    for category in categories:
        if not isinstance(category, dict) or 'id' not in category:
            raise BookingDataError.from_message('BOOKING_FILE_INVALID', "category without id")

    logger.info(f"Loaded {len(clients)} clients and {len(categories)} categories from {path}")
    return clients, categories


def events_from_clients(clients):
    """클라이언트의 각 기록(record)마다 캘린더 이벤트 하나를 만든다."""
    events = []
    for client in clients:
        for record in client.get('records') or []:
            service = record.get('service') or ''
            events.append({
                'id': f"event_{record.get('id')}",
                'clientId': client.get('id'),
                'recordId': record.get('id'),
                'branch': client.get('branch'),
                'date': record.get('date'),
                'endDate': record.get('endDate'),
                'time': record.get('time'),
                'service': record.get('service'),
                'paymentStatus': record.get('paymentStatus'),
                'category': record.get('category'),
                'title': f"{client.get('carBrand') or ''} ({service})",
                'type': 'work',
            })
    return events


def filter_by_branch(events, branch):
    if not branch or branch == "all":
        return list(events)
    return [event for event in events if event.get('branch') == branch]


def completion_lookup(clients):
    lookup = {}
    for client in clients:
        for record in client.get('records') or []:
            lookup[(client.get('id'), record.get('id'))] = bool(record.get('isCompleted'))
    return lookup


def make_classifier(clients):
    """Build classify(event) -> ColorCategory; completed records win over the branch colour."""
    completed = completion_lookup(clients)

    def classify(event):
        if completed.get((event.get('clientId'), event.get('recordId'))):
            return ColorCategory.COMPLETED
        return classify_by_branch(event)

    return classify


def event_label(event):
    return event.get('service') or event.get('title') or DEFAULT_BOOKING_LABEL


def format_date(date_str):
    """'2024-03-15' -> '15 марта 2024'. Unparseable input comes back unchanged."""
    if not date_str or not isinstance(date_str, str):
        return ''
    try:
        parsed = dateutil_parser.isoparse(date_str)
    except ValueError:
        return date_str
    return f"{parsed.day} {MONTH_NAMES_GENITIVE[parsed.month - 1]} {parsed.year}"


def client_summary(client):
    """Multi-line card text for a client: car, phone, then one line per record."""
    lines = []
    car = ' '.join(part for part in (client.get('carBrand'), client.get('carModel')) if part)
    for part in (car, client.get('phone'), get_branch_label(client.get('branch'))):
        if part:
            lines.append(part)

    for record in client.get('records') or []:
        when = format_date(record.get('date'))
        if record.get('endDate'):
            when = f"{when} - {format_date(record.get('endDate'))}"
        line = f"{when} · {record.get('service') or CalendarText.DEFAULT_SERVICE}"
        if record.get('isCompleted'):
            line = f"{line} · {CalendarText.COMPLETED}"
        lines.append(line)
    return "\n".join(lines)


def day_details(date_str, events, clients, categories=None):
    """
    Rows for the day-detail panel of ``date_str``.

    Every event active on the date is included regardless of branch.
    """
    clients_by_id = {client.get('id'): client for client in clients}
    categories_by_id = {cat.get('id'): cat for cat in categories or []}
    classify = make_classifier(clients)

    details = []
    for event in events_on_date(events, date_str):
        client = clients_by_id.get(event.get('clientId'))
        category = categories_by_id.get(event.get('category'))
        color_category = classify(event)
        position = range_position(event, date_str)
        period = ''
        if event.get('endDate'):
            period = f"{format_date(event.get('date'))} - {format_date(event.get('endDate'))}"

        details.append({
            'event': event,
            'client': client,
            'client_name': (client or {}).get('name') or CalendarText.DEFAULT_CLIENT,
            'car': ' '.join(
                part for part in ((client or {}).get('carBrand'), (client or {}).get('carModel')) if part
            ),
            'phone': (client or {}).get('phone') or '',
            'service': event.get('service') or CalendarText.DEFAULT_SERVICE,
            'time': str(event.get('time') or ''),
            'branch_label': get_branch_label(event.get('branch')),
            'category_name': category.get('name') if category else '',
            'category_color': category.get('color') if category else '',
            'period': period,
            'position': position,
            'position_label': get_range_position_label(position),
            'payment_status': event.get('paymentStatus'),
            'is_completed': color_category == ColorCategory.COMPLETED,
            'color_category': color_category,
        })
    return details
