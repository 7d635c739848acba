# app/data/labels.py
from types import MappingProxyType
from typing import Mapping


# =====================================================================
# DISPLAY LABELS
# =====================================================================

SITUATION_LABELS: Mapping[str, str] = MappingProxyType({
    "boredom": "심심함",
    "stress": "스트레스",
    "habit": "습관",
    "social": "소셜미디어",
    "work": "업무",
    "entertainment": "엔터테인먼트",
    "other": "기타",
})

MOOD_LABELS: Mapping[str, str] = MappingProxyType({
    "good": "좋음",
    "neutral": "무감정",
    "bad": "나쁨",
})

SCORE_LEVEL_LABELS: Mapping[str, str] = MappingProxyType({
    "healthy": "건강",
    "caution": "주의",
    "danger": "위험",
})

CONTRACT_STATUS_LABELS: Mapping[str, str] = MappingProxyType({
    "active": "진행 중",
    "completed": "완료",
    "failed": "실패",
})

ROUTINE_CATEGORY_LABELS: Mapping[str, str] = MappingProxyType({
    "meditation": "명상",
    "breathing": "호흡 운동",
    "gratitude": "감사 쓰기",
    "exercise": "가벼운 운동",
    "reading": "독서",
})


# =====================================================================
# SITUATION ADVICE
# =====================================================================

SITUATION_ADVICE: Mapping[str, str] = MappingProxyType({
    "social": "소셜미디어 사용 시간을 제한하고, 실제 대화나 활동으로 대체해보세요.",
    "stress": "스트레스 해소를 위한 건강한 방법(운동, 명상, 취미)을 찾아보세요.",
    "habit": "의식적인 사용을 위해 알림을 끄거나 앱을 숨겨보세요.",
    "boredom": "새로운 취미나 활동을 시작하여 건설적인 시간을 만들어보세요.",
    "work": "업무 중 휴식 시간을 정하고, 업무 외 활동으로 균형을 맞춰보세요.",
    "entertainment": "다양한 엔터테인먼트를 즐기며 과도한 소비를 피해보세요.",
})

DEFAULT_ADVICE = "패턴을 관찰하고 개선점을 찾아보세요."


def _label(table: Mapping[str, str], key) -> str:
    # Enum members and plain strings resolve the same way.
    key = getattr(key, "value", key)
    return table.get(key, key)


def situation_label(situation) -> str:
    return _label(SITUATION_LABELS, situation)


def mood_label(mood) -> str:
    return _label(MOOD_LABELS, mood)


def score_level_label(level) -> str:
    return _label(SCORE_LEVEL_LABELS, level)


def situation_advice(situation) -> str:
    situation = getattr(situation, "value", situation)
    return SITUATION_ADVICE.get(situation, DEFAULT_ADVICE)


def all_labels() -> dict:
    """All display tables, as plain dicts for JSON responses."""
    return {
        "situations": dict(SITUATION_LABELS),
        "moods": dict(MOOD_LABELS),
        "score_levels": dict(SCORE_LEVEL_LABELS),
        "contract_statuses": dict(CONTRACT_STATUS_LABELS),
        "routine_categories": dict(ROUTINE_CATEGORY_LABELS),
    }
