"""Risk aggregation and reasoning. Combines the stage outputs into the final
confidence score, a four-level risk label, and display-only explanation lines."""

from dataclasses import dataclass
from typing import List

from aurashield.detector import IntentScores, PsychScores, ScamTypeInfo
from aurashield.lexicons import NON_SCAM

# Boosts applied on top of the classifier confidence
PSYCH_BOOST_FLOOR: float = 0.5
PSYCH_BOOST_WEIGHT: float = 0.3
INTENT_BOOST_FLOOR: float = 1.0
INTENT_BOOST_WEIGHT: float = 0.1

# (level, min confidence, min psychological sum), checked top-down
RISK_BANDS = (
    ("critical", 0.8, 0.7),
    ("high", 0.6, 0.5),
    ("medium", 0.4, 0.3),
)

REASON_THRESHOLD: float = 0.3
INTENT_REASON_THRESHOLD: float = 0.5

TACTIC_REASONS = {
    "urgency": "Urgency tactics detected",
    "fear": "Fear-based manipulation detected",
    "reward_bait": "Reward baiting detected",
    "authority_bias": "Authority impersonation detected",
}

COORDINATED_PATTERN_REASON = (
    "Detected coordinated social-engineering patterns commonly used in "
    "large-scale fraud campaigns"
)
NO_INDICATORS_REASON = "No clear scam indicators detected"

SCAM_RECOMMENDATION = (
    "Exercise extreme caution. Do not share personal information or click links."
)
SAFE_RECOMMENDATION = "Message appears legitimate, but remain vigilant."


@dataclass(frozen=True)
class RiskInfo:
    confidence_score: float
    risk_level: str
    is_scam: bool


def risk_level_for(confidence: float, psych_sum: float) -> str:
    for level, min_confidence, min_psych in RISK_BANDS:
        if confidence >= min_confidence or psych_sum >= min_psych:
            return level
    return "low"


def aggregate_risk(
    scam_type: ScamTypeInfo,
    psych: PsychScores,
    intents: IntentScores,
) -> RiskInfo:
    """Boost the classifier confidence with manipulation and intent pressure.

    is_scam follows the classified type only; a high boosted confidence on a
    non_scam message still reports is_scam=False.
    """
    psych_sum = psych.total()
    intent_sum = intents.total()

    confidence = scam_type.confidence
    if psych_sum > PSYCH_BOOST_FLOOR:
        confidence += psych_sum * PSYCH_BOOST_WEIGHT
    if intent_sum > INTENT_BOOST_FLOOR:
        confidence += intent_sum * INTENT_BOOST_WEIGHT
    confidence = round(min(1.0, max(0.0, confidence)), 2)

    return RiskInfo(
        confidence_score=confidence,
        risk_level=risk_level_for(confidence, psych_sum),
        is_scam=scam_type.type != NON_SCAM,
    )


def generate_reasoning(
    scam_type: ScamTypeInfo,
    psych: PsychScores,
    intents: IntentScores,
    risk: RiskInfo,
) -> List[str]:
    reasons: List[str] = []

    if risk.is_scam:
        reasons.append(f"Detected scam pattern: {scam_type.type.replace('_', ' ')}")
        reasons.append(COORDINATED_PATTERN_REASON)
    else:
        reasons.append(NO_INDICATORS_REASON)

    for tactic, score in psych.items():
        if score > REASON_THRESHOLD:
            reasons.append(f"{TACTIC_REASONS[tactic]} (score: {score:.2f})")

    high_intents = [name for name, score in intents.items() if score > INTENT_REASON_THRESHOLD]
    if high_intents:
        reasons.append(f"Suspicious intent detected: {', '.join(high_intents)}")

    return reasons


def recommendation_for(risk: RiskInfo) -> str:
    return SCAM_RECOMMENDATION if risk.is_scam else SAFE_RECOMMENDATION
