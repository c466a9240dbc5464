import json
import logging
import os

from config import SETTINGS_FILE, DEFAULT_LANE_STRATEGY, DEFAULT_LOG_LEVEL
from error_messages import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "lane_strategy": DEFAULT_LANE_STRATEGY,
    "branch_filter": "all",
    "log_level": DEFAULT_LOG_LEVEL,
}


def load_settings(path=None):
    """설정 파일(settings.json)을 읽어와서 기본값과 합친 딕셔너리로 반환합니다."""
    path = path or SETTINGS_FILE
    settings = dict(DEFAULT_SETTINGS)
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                stored = json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"Settings file {path} is corrupted, using defaults")
                return settings
        if isinstance(stored, dict):
            settings.update(stored)
        else:
            logger.warning(f"Settings file {path} does not contain an object, using defaults")
    return settings


def save_settings(data, path=None):
    """설정 데이터(딕셔너리)를 settings.json 파일에 저장합니다."""
    if not isinstance(data, dict):
        raise SettingsError.from_message('SETTINGS_INVALID', type(data).__name__)
    path = path or SETTINGS_FILE
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=4, ensure_ascii=False)
