# services/analysis.py
"""
Dopamine scoring and record aggregation.

Everything here is a pure function over in-memory values: records, contracts
and routines are read through their attributes, so ORM rows and pydantic
schemas are both accepted. Nothing in this module reads configuration,
touches the database or raises for out-of-range numbers.
"""
import math
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from app.data.labels import situation_advice, situation_label
from app.models.contract import ContractStatus
from app.models.dopamine_record import Mood, Situation
from app.schemas.analysis import AnalysisResult, ScoreLevel, WeeklyTrend


# =====================================================================
# CONSTANTS
# =====================================================================

TIME_SATURATION_MINUTES = 60
PATTERN_SATURATION = 10
STRESS_SATURATION = 5

TIME_WEIGHT = 40
PATTERN_WEIGHT = 30
STRESS_WEIGHT = 30

CAUTION_THRESHOLD = 30
DANGER_THRESHOLD = 60

MOOD_VALUES = {Mood.good.value: 3, Mood.neutral.value: 2, Mood.bad.value: 1}

INTEGRITY_WINDOW = timedelta(days=7)
DOMINANT_SHARE = 0.3
MAX_SITUATION_MESSAGES = 2

NO_RECORDS_MESSAGE = "아직 기록이 없습니다. 첫 번째 기록을 시작해보세요!"

LEVEL_MESSAGES = {
    ScoreLevel.healthy: "건강한 도파민 소비 패턴을 보이고 있습니다. 계속 관찰해보세요!",
    ScoreLevel.caution: "도파민 소비가 다소 높습니다. 사용 시간과 반복 패턴을 점검해보세요.",
    ScoreLevel.danger: "도파민 소비가 매우 높습니다. 리셋 루틴으로 잠시 쉬어가세요.",
}

STEADY_RECORDING_MESSAGE = "꾸준히 기록하고 계시네요! 패턴을 파악하는 데 도움이 될 것입니다."
GOOD_START_MESSAGE = "좋은 출발입니다! 기록이 쌓일수록 패턴이 선명해집니다."
FIRST_STEPS_MESSAGE = "기록을 조금 더 남겨보세요. 며칠만 모여도 패턴이 보이기 시작합니다."


# =====================================================================
# HELPERS
# =====================================================================

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _key(value: Any) -> Any:
    return getattr(value, "value", value)


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def week_start(moment: datetime) -> date:
    """Monday of the ISO week that contains ``moment`` (UTC)."""
    day = _as_utc(moment).date()
    return day - timedelta(days=day.weekday())


# =====================================================================
# SCORING
# =====================================================================

def score(usage_time: float, pattern_repetition: float, stress_level: float) -> int:
    """
    Composite dopamine score for a single record.

    Each input is normalised against its saturation point (60 minutes,
    10 repetitions, stress level 5) and weighted 40/30/30. Negative inputs
    count as zero, so the result is always in [0, 100].

    Args:
        usage_time: Usage duration in minutes
        pattern_repetition: How many times the pattern repeated
        stress_level: Self-reported stress, 1-5

    Returns:
        Integer score between 0 and 100
    """
    time_term = min(max(usage_time, 0) / TIME_SATURATION_MINUTES, 1) * TIME_WEIGHT
    pattern_term = min(max(pattern_repetition, 0) / PATTERN_SATURATION, 1) * PATTERN_WEIGHT
    stress_term = min(max(stress_level, 0) / STRESS_SATURATION, 1) * STRESS_WEIGHT
    return _round_half_up(time_term + pattern_term + stress_term)


def score_level(value: float) -> ScoreLevel:
    """Band a score: below 30 healthy, below 60 caution, otherwise danger."""
    if value < CAUTION_THRESHOLD:
        return ScoreLevel.healthy
    if value < DANGER_THRESHOLD:
        return ScoreLevel.caution
    return ScoreLevel.danger


def score_trend(current: Optional[int], previous: Optional[int]) -> Optional[str]:
    """Direction of the latest score against the one before it. Lower is better."""
    if current is None or previous is None:
        return None
    if current < previous:
        return "improved"
    if current > previous:
        return "increased"
    return "maintained"


# =====================================================================
# AGGREGATION
# =====================================================================

def integrity_score(records: Iterable[Any], now: Optional[datetime] = None) -> int:
    """
    Self-trust metric: 100 minus the mean score of the trailing 7 days.

    Returns 100 when nothing was recorded in the window.
    """
    now = _now(now)
    window_start = now - INTEGRITY_WINDOW
    recent = [
        r.dopamine_score for r in records
        if window_start <= _as_utc(r.created_at) <= now
    ]
    if not recent:
        return 100
    return max(0, 100 - _round_half_up(sum(recent) / len(recent)))


def _goal_completion_rates(contracts: Iterable[Any]) -> Dict[date, float]:
    decided: Dict[date, List[bool]] = {}
    for contract in contracts:
        status = _key(contract.status)
        if status == ContractStatus.active.value or contract.end_date is None:
            continue
        decided.setdefault(week_start(contract.end_date), []).append(
            status == ContractStatus.completed.value
        )
    return {
        week: round(sum(outcomes) / len(outcomes) * 100, 2)
        for week, outcomes in decided.items()
    }


def weekly_trend(
    records: Iterable[Any], contracts: Optional[Iterable[Any]] = None
) -> List[WeeklyTrend]:
    """Bucket records by ISO week start, oldest week first."""
    buckets: Dict[date, List[int]] = {}
    for record in records:
        buckets.setdefault(week_start(record.created_at), []).append(record.dopamine_score)

    rates = _goal_completion_rates(contracts or [])
    return [
        WeeklyTrend(
            week_start=week,
            average_score=round(sum(scores) / len(scores), 2),
            record_count=len(scores),
            goal_completion_rate=rates.get(week, 100.0),
        )
        for week, scores in sorted(buckets.items())
    ]


def situation_share(breakdown: Dict[str, int], total: int) -> Dict[str, float]:
    if total <= 0:
        return {situation: 0.0 for situation in breakdown}
    return {situation: count / total for situation, count in breakdown.items()}


def build_feedback(
    average_score: float, situation_breakdown: Dict[str, int], total: int
) -> List[str]:
    """
    Advisory messages, in order: score level, dominant situations, record count.

    A situation is dominant when it holds more than 30% of the records; at
    most two are reported, highest share first.
    """
    if total == 0:
        return [NO_RECORDS_MESSAGE]

    feedback = [LEVEL_MESSAGES[score_level(_round_half_up(average_score))]]

    shares = situation_share(situation_breakdown, total)
    dominant = sorted(
        (situation for situation, share in shares.items() if share > DOMINANT_SHARE),
        key=lambda situation: -shares[situation],
    )
    for situation in dominant[:MAX_SITUATION_MESSAGES]:
        percent = _round_half_up(shares[situation] * 100)
        feedback.append(
            f"{situation_label(situation)} 상황이 전체 기록의 {percent}%를 차지합니다. "
            f"{situation_advice(situation)}"
        )

    if total >= 10:
        feedback.append(STEADY_RECORDING_MESSAGE)
    elif total >= 3:
        feedback.append(GOOD_START_MESSAGE)
    else:
        feedback.append(FIRST_STEPS_MESSAGE)
    return feedback


def analyze(
    records: Sequence[Any],
    contracts: Optional[Iterable[Any]] = None,
    now: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Aggregate statistics over a user's records.

    Args:
        records: Records with situation, mood, dopamine_score and created_at
        contracts: Optional contracts feeding the weekly goal completion rate
        now: Reference time for the integrity window (defaults to UTC now)

    Returns:
        AnalysisResult; a zero-valued result with a single feedback message
        when there are no records
    """
    situation_breakdown = {situation.value: 0 for situation in Situation}
    mood_breakdown = {mood.value: 0 for mood in Mood}

    total = len(records)
    if total == 0:
        return AnalysisResult(
            total_records=0,
            situation_breakdown=situation_breakdown,
            mood_breakdown=mood_breakdown,
            average_mood=0,
            most_common_situation=None,
            average_score=0,
            score_level=ScoreLevel.healthy,
            integrity_score=100,
            weekly_trend=[],
            feedback=build_feedback(0, situation_breakdown, 0),
        )

    encountered = Counter(_key(record.situation) for record in records)
    for situation, count in encountered.items():
        situation_breakdown[situation] = situation_breakdown.get(situation, 0) + count

    mood_total = 0
    for record in records:
        mood = _key(record.mood)
        mood_breakdown[mood] = mood_breakdown.get(mood, 0) + 1
        mood_total += MOOD_VALUES.get(mood, 0)

    # Counter keeps first-seen order, so ties resolve to the earliest situation.
    most_common_situation = encountered.most_common(1)[0][0]
    average_score = sum(record.dopamine_score for record in records) / total

    return AnalysisResult(
        total_records=total,
        situation_breakdown=situation_breakdown,
        mood_breakdown=mood_breakdown,
        average_mood=round(mood_total / total, 2),
        most_common_situation=most_common_situation,
        average_score=round(average_score, 2),
        score_level=score_level(_round_half_up(average_score)),
        integrity_score=integrity_score(records, now),
        weekly_trend=weekly_trend(records, contracts),
        feedback=build_feedback(average_score, situation_breakdown, total),
    )


# =====================================================================
# CONTRACTS & ROUTINES
# =====================================================================

def contract_completion(contract: Any, now: Optional[datetime] = None) -> float:
    """
    Progress of a contract as a percentage.

    Completed contracts are 100 and failed ones 0. Active contracts report
    the elapsed share of [start_date, end_date or now], clamped to [0, 100].
    """
    status = _key(contract.status)
    if status == ContractStatus.completed.value:
        return 100.0
    if status == ContractStatus.failed.value:
        return 0.0

    now = _now(now)
    start = _as_utc(contract.start_date)
    end = _as_utc(contract.end_date) if contract.end_date is not None else now

    span = (end - start).total_seconds()
    elapsed = (now - start).total_seconds()
    if span <= 0:
        return 100.0 if elapsed >= 0 else 0.0

    percentage = elapsed / span * 100
    return round(min(max(percentage, 0.0), 100.0), 2)


def average_contract_integrity(contracts: Sequence[Any]) -> int:
    """Rounded mean of stored contract integrity, 100 when there are no contracts."""
    if not contracts:
        return 100
    return _round_half_up(sum(c.integrity_score for c in contracts) / len(contracts))


def routine_effect(routines: Iterable[Any]) -> int:
    """Total dopamine reduction earned by completed routines."""
    return sum(routine.dopamine_reduction for routine in routines if routine.completed)
