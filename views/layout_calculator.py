# views/layout_calculator.py
"""
Month grid layout for booking events.

Events are anchored to the month they start in. Each event becomes one or
more single-row segments (split at week boundaries, Monday-first), and every
segment gets a vertical lane (``row_index``) inside its grid row.
"""
import calendar
import datetime
import logging
import math
from collections import defaultdict

from config import (
    BRANCH_MSK, BRANCH_RND, DAYS_IN_WEEK, DEFAULT_LANE_STRATEGY,
    LANE_STRATEGY_IDENTITY, LANE_STRATEGY_OVERLAP
)
from constants.color_constants import ColorCategory
from constants.ui_constants import MonthGridLayout
from error_messages import ErrorMessages, InvalidEventDateError

logger = logging.getLogger(__name__)

PART_SEPARATOR = "-part-"


# ---------------------------
# 월간 그리드 형상
# ---------------------------
def month_geometry(year, month):
    """
    Grid geometry for a month view.

    Args:
        year (int): 연도
        month (int): 0부터 시작하는 월 (0=1월)

    Returns:
        dict: year, month, days, pad, total_cells, total_rows
    """
    days = calendar.monthrange(year, month + 1)[1]
    # weekday()는 월요일=0 이므로 그대로 앞쪽 빈 칸 수가 된다
    pad = datetime.date(year, month + 1, 1).weekday()
    total_cells = pad + days
    return {
        'year': year,
        'month': month,
        'days': days,
        'pad': pad,
        'total_cells': total_cells,
        'total_rows': math.ceil(total_cells / DAYS_IN_WEEK),
    }


def month_geometry_for(date_obj):
    return month_geometry(date_obj.year, date_obj.month - 1)


# ---------------------------
# 날짜/ID 헬퍼
# ---------------------------
def parse_event_date(value):
    """ISO 'YYYY-MM-DD' (or a longer ISO timestamp) -> datetime.date"""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise InvalidEventDateError.from_message('INVALID_EVENT_DATE', repr(value)) from e


def base_event_id(event):
    event_id = event.get('id')
    if event_id:
        return str(event_id)
    return f"{event.get('clientId', '')}-{event.get('date', '')}-{event.get('recordId', '')}"


def strip_part_suffix(segment_id):
    return str(segment_id).split(PART_SEPARATOR)[0]


def event_range(event):
    """Inclusive (start, end) dates of an event. Inverted ranges collapse to the start day."""
    start = parse_event_date(event.get('date'))
    end_value = event.get('endDate')
    if not end_value or end_value == event.get('date'):
        return start, start

    end = parse_event_date(end_value)
    if end < start:
        logger.warning(
            f"[{ErrorMessages.INVERTED_DATE_RANGE['code']}] Event {base_event_id(event)} "
            f"ends ({end}) before it starts ({start}), treating it as a single day"
        )
        return start, start
    return start, end


def classify_by_branch(event):
    branch = event.get('branch')
    if branch == BRANCH_MSK:
        return ColorCategory.MSK
    if branch == BRANCH_RND:
        return ColorCategory.RND
    return ColorCategory.NONE


# ---------------------------
# 세그먼트 분할
# ---------------------------
def _make_segment(event, segment_id, base_id, start_date, row, col, duration_days, is_first, is_last):
    return {
        'event': event,
        'event_id': segment_id,
        'base_id': base_id,
        'start_day': start_date.day,
        'start_date': start_date.isoformat(),
        'row': row,
        'col': col,
        'duration_days': duration_days,
        'is_first': is_first,
        'is_last': is_last,
        'row_index': 0,
    }


def segment_event(event, year, month, days, pad):
    """
    Split one event into grid-row segments for the given month (0-based).

    Events starting in another month produce no segments. A range running into
    a later month is clipped to the last day of this month.
    """
    start, end = event_range(event)
    if (start.year, start.month) != (year, month + 1):
        return []

    start_day = start.day
    if end == start:
        duration_days = 1
    elif (end.year, end.month) == (year, month + 1):
        duration_days = end.day - start_day + 1
    else:
        # 다음 달로 이어지는 부분은 그리지 않는다
        duration_days = days - start_day + 1

    event_id = base_event_id(event)
    row, col = divmod(pad + start_day - 1, DAYS_IN_WEEK)
    days_to_week_end = DAYS_IN_WEEK - col

    if duration_days <= days_to_week_end:
        return [_make_segment(event, event_id, event_id, start, row, col, duration_days, True, True)]

    segments = [
        _make_segment(event, f"{event_id}{PART_SEPARATOR}0", event_id, start,
                      row, col, days_to_week_end, True, False)
    ]
    remaining_days = duration_days - days_to_week_end
    current_row = row + 1
    part_index = 1
    while remaining_days > 0:
        segments.append(_make_segment(
            event, f"{event_id}{PART_SEPARATOR}{part_index}", event_id, start,
            current_row, 0, min(remaining_days, DAYS_IN_WEEK),
            False, remaining_days <= DAYS_IN_WEEK
        ))
        remaining_days -= DAYS_IN_WEEK
        current_row += 1
        part_index += 1
    return segments


# ---------------------------
# 레인 배정
# ---------------------------
def _group_by_row(segments):
    rows = defaultdict(list)
    for seg in segments:
        rows[seg['row']].append(seg)
    return rows


def assign_lanes(segments):
    """
    Lane per distinct event within a row, in emission order.

    Segments of one event share a lane; different events in the same row never
    do, even when their columns don't overlap.
    """
    for row_segments in _group_by_row(segments).values():
        lane_by_event = {}
        for seg in row_segments:
            base_id = seg.get('base_id') or strip_part_suffix(seg['event_id'])
            if base_id not in lane_by_event:
                lane_by_event[base_id] = len(lane_by_event)
            seg['row_index'] = lane_by_event[base_id]
    return segments


def assign_overlap_lanes(segments):
    """Greedy packing: lowest lane whose segments don't intersect this column range."""
    for row_segments in _group_by_row(segments).values():
        occupied = defaultdict(list)  # lane -> [(first_col, last_col)]
        for seg in sorted(row_segments, key=lambda s: s['col']):
            first_col = seg['col']
            last_col = seg['col'] + seg['duration_days'] - 1
            lane = 0
            while any(first_col <= used_last and used_first <= last_col
                      for used_first, used_last in occupied[lane]):
                lane += 1
            occupied[lane].append((first_col, last_col))
            seg['row_index'] = lane
    return segments


def lane_count(segments, row):
    lanes = [seg['row_index'] for seg in segments if seg['row'] == row]
    return max(lanes) + 1 if lanes else 0


def row_height_for(lanes,
                   min_height=MonthGridLayout.ROW_HEIGHT,
                   header_offset=MonthGridLayout.HEADER_OFFSET,
                   lane_height=MonthGridLayout.LANE_HEIGHT,
                   gap=MonthGridLayout.GAP):
    """Row height (cell + gap) that fits ``lanes`` stacked bars below the day number."""
    return max(min_height, header_offset + lanes * lane_height + gap)


def row_offsets(row_heights):
    """Top y of every row for the given row heights."""
    offsets = []
    top = 0
    for height in row_heights:
        offsets.append(top)
        top += height
    return offsets


# ---------------------------
# 좌표 변환
# ---------------------------
def segment_rect(segment, grid_width,
                 row_height=MonthGridLayout.ROW_HEIGHT,
                 header_offset=MonthGridLayout.HEADER_OFFSET,
                 lane_height=MonthGridLayout.LANE_HEIGHT,
                 gap=MonthGridLayout.GAP,
                 row_top=None):
    """
    (x, y, width) of a segment bar inside a grid of ``grid_width`` pixels.

    ``row_top`` overrides ``row * row_height`` when rows have different heights.
    """
    cell_width = (grid_width - gap * (DAYS_IN_WEEK - 1)) / DAYS_IN_WEEK
    duration = segment['duration_days']
    x = segment['col'] * (cell_width + gap)
    width = duration * cell_width + (duration - 1) * gap
    if row_top is None:
        row_top = segment['row'] * row_height
    y = row_top + header_offset + segment['row_index'] * lane_height
    return x, y, width


# ---------------------------
# 날짜 포함 여부
# ---------------------------
def _as_iso(value):
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, str):
        # parse_event_date와 같은 규칙: 타임스탬프는 날짜 부분만 본다
        return value[:10]
    return value


def range_position(event, date_str):
    """'single', 'start', 'middle' or 'end' of the event's range on ``date_str``."""
    date_str = _as_iso(date_str)
    start = _as_iso(event.get('date'))
    end = _as_iso(event.get('endDate'))
    if not start or not end or end <= start:
        return 'single'
    if date_str == start:
        return 'start'
    if date_str == end:
        return 'end'
    return 'middle'


def is_date_in_range(event, date_str):
    """Inclusive membership test on zero-padded ISO strings."""
    date_str = _as_iso(date_str)
    start = _as_iso(event.get('date'))
    end = _as_iso(event.get('endDate'))
    if not start:
        return False
    if not end or end < start:
        return start == date_str
    return start <= date_str <= end


def events_on_date(events, date_str):
    return [event for event in events if is_date_in_range(event, date_str)]


# ---------------------------
# 월간 레이아웃 계산기
# ---------------------------
class MonthLayoutCalculator:
    def __init__(self, events, year, month, days=None, pad=None,
                 lane_strategy=DEFAULT_LANE_STRATEGY, classify=None):
        geometry = month_geometry(year, month)
        self.events = list(events)
        self.year = year
        self.month = month
        self.days = geometry['days'] if days is None else days
        self.pad = geometry['pad'] if pad is None else pad
        self.total_rows = math.ceil((self.pad + self.days) / DAYS_IN_WEEK)
        self.classify = classify or classify_by_branch

        if lane_strategy not in (LANE_STRATEGY_IDENTITY, LANE_STRATEGY_OVERLAP):
            logger.warning(f"Unknown lane strategy '{lane_strategy}', using '{LANE_STRATEGY_IDENTITY}'")
            lane_strategy = LANE_STRATEGY_IDENTITY
        self.lane_strategy = lane_strategy

    def calculate(self):
        segments = []
        for event in self.events:
            try:
                event_segments = segment_event(event, self.year, self.month, self.days, self.pad)
            except InvalidEventDateError as e:
                logger.error(f"이벤트 위치 계산 오류: {e}, 이벤트: {base_event_id(event)}")
                continue

            if not event_segments:
                continue
            category = self.classify(event)
            for seg in event_segments:
                seg['category'] = category
            segments.extend(event_segments)

        if self.lane_strategy == LANE_STRATEGY_OVERLAP:
            assign_overlap_lanes(segments)
        else:
            assign_lanes(segments)

        logger.debug(
            f"Laid out {len(segments)} segments for {self.year}-{self.month + 1:02d} "
            f"from {len(self.events)} events"
        )
        return segments

    def lanes_per_row(self, segments):
        return [lane_count(segments, row) for row in range(self.total_rows)]

    def row_heights(self, segments):
        return [row_height_for(lanes) for lanes in self.lanes_per_row(segments)]
