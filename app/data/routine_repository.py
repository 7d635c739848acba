# app/data/routine_repository.py
from typing import Dict, List, Any

from app.models.reset_routine import RoutineCategory


# =====================================================================
# RESET ROUTINE CATALOG
# =====================================================================

ROUTINE_REPOSITORY: List[Dict[str, Any]] = [
    {"name": "명상", "category": RoutineCategory.meditation, "description": "마음을 진정시키고 집중력을 높입니다", "duration": 10, "dopamine_reduction": 15},
    {"name": "호흡 운동", "category": RoutineCategory.breathing, "description": "깊은 호흡으로 스트레스를 해소합니다", "duration": 5, "dopamine_reduction": 10},
    {"name": "감사 쓰기", "category": RoutineCategory.gratitude, "description": "감사한 일들을 기록하며 긍정적 마음을 기릅니다", "duration": 5, "dopamine_reduction": 10},
    {"name": "가벼운 운동", "category": RoutineCategory.exercise, "description": "스트레칭이나 가벼운 운동으로 몸을 이완시킵니다", "duration": 15, "dopamine_reduction": 20},
    {"name": "독서", "category": RoutineCategory.reading, "description": "책을 읽으며 마음을 차분히 만듭니다", "duration": 20, "dopamine_reduction": 15},
]


def get_catalog_entry(category: RoutineCategory) -> Dict[str, Any]:
    """Catalog entry for a routine category."""
    for entry in ROUTINE_REPOSITORY:
        if entry["category"] == category:
            return entry
    raise KeyError(category)
