# tests/test_booking_manager.py
import unittest
import json
import os
import sys
import tempfile

# 프로젝트 루트 경로를 sys.path에 추가
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from booking_manager import (
    load_bookings_file, events_from_clients, filter_by_branch, completion_lookup,
    make_classifier, event_label, format_date, day_details, client_summary
)
from constants.color_constants import ColorCategory
from error_messages import BookingDataError


def sample_clients():
    return [
        {
            'id': 'c1', 'name': 'Иван', 'branch': 'msk', 'carBrand': 'BMW', 'carModel': 'M3',
            'phone': '+7 900 000-00-01',
            'records': [
                {'id': 'r1', 'date': '2024-03-08', 'endDate': '2024-03-11', 'time': '10:00',
                 'service': 'Чип-тюнинг', 'isCompleted': False, 'paymentStatus': 'advance'},
                {'id': 'r2', 'date': '2024-03-11', 'service': 'Диагностика', 'isCompleted': True},
            ],
        },
        {
            'id': 'c2', 'name': 'Пётр', 'branch': 'rnd', 'carBrand': 'Audi',
            'records': [
                {'id': 'r3', 'date': '2024-03-11', 'time': '12:30', 'paymentStatus': 'paid',
                 'category': 'cat1'},
            ],
        },
        {'id': 'c3', 'name': 'Без записей'},
    ]


class TestEventsFromClients(unittest.TestCase):

    def setUp(self):
        self.clients = sample_clients()
        self.events = events_from_clients(self.clients)

    def test_one_event_per_record(self):
        self.assertEqual([e['id'] for e in self.events], ['event_r1', 'event_r2', 'event_r3'])

    def test_event_fields(self):
        event = self.events[0]
        self.assertEqual(event['clientId'], 'c1')
        self.assertEqual(event['recordId'], 'r1')
        self.assertEqual(event['branch'], 'msk')
        self.assertEqual(event['date'], '2024-03-08')
        self.assertEqual(event['endDate'], '2024-03-11')
        self.assertEqual(event['title'], 'BMW (Чип-тюнинг)')
        self.assertEqual(event['type'], 'work')

    def test_title_without_service(self):
        self.assertEqual(self.events[2]['title'], 'Audi ()')

    def test_filter_by_branch(self):
        self.assertEqual(len(filter_by_branch(self.events, 'all')), 3)
        self.assertEqual(len(filter_by_branch(self.events, None)), 3)
        self.assertEqual([e['id'] for e in filter_by_branch(self.events, 'rnd')], ['event_r3'])

    def test_event_label_fallbacks(self):
        self.assertEqual(event_label(self.events[0]), 'Чип-тюнинг')
        self.assertEqual(event_label(self.events[2]), 'Audi ()')
        self.assertEqual(event_label({'date': '2024-03-01'}), 'Бронь')


class TestClassifier(unittest.TestCase):

    def setUp(self):
        self.clients = sample_clients()
        self.events = events_from_clients(self.clients)
        self.classify = make_classifier(self.clients)

    def test_completion_lookup(self):
        lookup = completion_lookup(self.clients)
        self.assertEqual(lookup[('c1', 'r2')], True)
        self.assertEqual(lookup[('c1', 'r1')], False)
        self.assertEqual(lookup[('c2', 'r3')], False)

    def test_completed_wins_over_branch(self):
        self.assertEqual(self.classify(self.events[1]), ColorCategory.COMPLETED)

    def test_branch_colors(self):
        self.assertEqual(self.classify(self.events[0]), ColorCategory.MSK)
        self.assertEqual(self.classify(self.events[2]), ColorCategory.RND)

    def test_unknown_record_uses_branch(self):
        self.assertEqual(self.classify({'clientId': 'zz', 'date': '2024-03-01'}), ColorCategory.NONE)


class TestDayDetails(unittest.TestCase):

    def setUp(self):
        self.clients = sample_clients()
        self.events = events_from_clients(self.clients)
        self.categories = [{'id': 'cat1', 'name': 'Тюнинг', 'color': '#FF0000'}]

    def test_details_for_shared_day(self):
        details = day_details('2024-03-11', self.events, self.clients, self.categories)
        self.assertEqual([d['event']['id'] for d in details], ['event_r1', 'event_r2', 'event_r3'])

        multi_day = details[0]
        self.assertEqual(multi_day['client_name'], 'Иван')
        self.assertEqual(multi_day['car'], 'BMW M3')
        self.assertEqual(multi_day['branch_label'], 'МСК')
        self.assertEqual(multi_day['period'], '8 марта 2024 - 11 марта 2024')
        self.assertEqual(multi_day['payment_status'], 'advance')
        self.assertFalse(multi_day['is_completed'])

        self.assertTrue(details[1]['is_completed'])
        self.assertEqual(details[1]['period'], '')

        rnd = details[2]
        self.assertEqual(rnd['branch_label'], 'РНД')
        self.assertEqual(rnd['service'], 'Услуга')
        self.assertEqual(rnd['category_name'], 'Тюнинг')
        self.assertEqual(rnd['time'], '12:30')
        self.assertEqual(rnd['phone'], '')

    def test_empty_day(self):
        self.assertEqual(day_details('2024-03-20', self.events, self.clients), [])

    def test_position_within_three_day_range(self):
        events = [
            {'id': 'e1', 'clientId': 'c1', 'date': '2024-03-10', 'endDate': '2024-03-12'},
            {'id': 'e2', 'clientId': 'c2', 'date': '2024-03-11'},
        ]
        expected = {
            '2024-03-10': ('start', 'Начало'),
            '2024-03-11': ('middle', 'Продолжение'),
            '2024-03-12': ('end', 'Последний день'),
        }
        for day, (position, label) in expected.items():
            detail = day_details(day, events, self.clients)[0]
            self.assertEqual((detail['position'], detail['position_label']), (position, label), day)

        single = day_details('2024-03-11', events, self.clients)[1]
        self.assertEqual(single['position'], 'single')
        self.assertEqual(single['position_label'], '')

    def test_timestamp_dates_are_listed(self):
        events = [{'id': 'e1', 'clientId': 'c1', 'date': '2024-03-15T00:00:00.000Z',
                   'endDate': '2024-03-16T00:00:00.000Z'}]
        details = day_details('2024-03-15', events, self.clients)
        self.assertEqual(len(details), 1)
        self.assertEqual(details[0]['position'], 'start')

    def test_unknown_client(self):
        details = day_details('2024-03-01', [{'clientId': 'gone', 'date': '2024-03-01'}], self.clients)
        self.assertEqual(details[0]['client_name'], 'Клиент')
        self.assertIsNone(details[0]['client'])


class TestFormatDate(unittest.TestCase):

    def test_format(self):
        self.assertEqual(format_date('2024-03-15'), '15 марта 2024')
        self.assertEqual(format_date('2025-01-01T09:00:00Z'), '1 января 2025')

    def test_invalid_input(self):
        self.assertEqual(format_date(''), '')
        self.assertEqual(format_date(None), '')
        self.assertEqual(format_date('когда-нибудь'), 'когда-нибудь')


class TestClientSummary(unittest.TestCase):

    def test_summary_lists_car_and_records(self):
        summary = client_summary(sample_clients()[0]).split("\n")
        self.assertEqual(summary[:3], ['BMW M3', '+7 900 000-00-01', 'МСК'])
        self.assertEqual(summary[3], '8 марта 2024 - 11 марта 2024 · Чип-тюнинг')
        self.assertEqual(summary[4], '11 марта 2024 · Диагностика · Выполнено')

    def test_summary_without_records(self):
        self.assertEqual(client_summary({'id': 'c3', 'name': 'Без записей'}), '')


class TestLoadBookingsFile(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp_dir.name, 'bookings.json')

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write(self, content):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(content)

    def test_load_valid_file(self):
        self._write(json.dumps({'clients': sample_clients()}, ensure_ascii=False))
        clients, categories = load_bookings_file(self.path)
        self.assertEqual(len(clients), 3)
        self.assertEqual(clients[2]['records'], [])
        self.assertEqual(categories, [])

    def test_categories_are_returned(self):
        self._write(json.dumps({
            'clients': [{'id': 'c1', 'records': []}],
            'categories': [{'id': 'k', 'name': 'N'}],
        }))
        clients, categories = load_bookings_file(self.path)
        self.assertEqual([c['id'] for c in clients], ['c1'])
        self.assertEqual(categories, [{'id': 'k', 'name': 'N'}])

    def test_categories_must_be_list(self):
        self._write(json.dumps({'clients': [], 'categories': {'id': 'k'}}))
        with self.assertRaises(BookingDataError) as ctx:
            load_bookings_file(self.path)
        self.assertEqual(ctx.exception.error_code, 'DATA_003')

    def test_category_without_id(self):
        self._write(json.dumps({'clients': [], 'categories': [{'name': 'N'}]}))
        with self.assertRaises(BookingDataError):
            load_bookings_file(self.path)

    def test_missing_file(self):
        with self.assertRaises(BookingDataError) as ctx:
            load_bookings_file(self.path)
        self.assertEqual(ctx.exception.error_code, 'FILE_001')

    def test_corrupted_file(self):
        self._write("this is not a valid json")
        with self.assertRaises(BookingDataError) as ctx:
            load_bookings_file(self.path)
        self.assertEqual(ctx.exception.error_code, 'DATA_003')
        self.assertTrue(ctx.exception.suggestions)

    def test_client_without_id(self):
        self._write(json.dumps({'clients': [{'name': 'x'}]}))
        with self.assertRaises(BookingDataError):
            load_bookings_file(self.path)

    def test_records_must_be_list(self):
        self._write(json.dumps({'clients': [{'id': 'c1', 'records': 'r1'}]}))
        with self.assertRaises(BookingDataError):
            load_bookings_file(self.path)


if __name__ == '__main__':
    unittest.main()
