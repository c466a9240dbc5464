"""
로깅 설정 모듈
Central logging setup shared by the layout engine and the UI.
"""
import logging
import sys

from config import DEFAULT_LOG_LEVEL


def setup_logger(level=None):
    """Configure the root logger once and return it."""
    root_logger = logging.getLogger()

    # 이미 핸들러가 있으면 중복 추가 방지
    if root_logger.handlers:
        if level:
            root_logger.setLevel(_resolve_level(level))
        return root_logger

    resolved = _resolve_level(level or DEFAULT_LOG_LEVEL)
    root_logger.setLevel(resolved)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved)

    formatter = logging.Formatter(
        '[%(levelname)s] %(name)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    return root_logger


def _resolve_level(level):
    if isinstance(level, int):
        return level
    # getLevelName은 모르는 이름이면 "Level X" 문자열을 돌려준다
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO
