"""
detector.py — Lexical Signal Stages
===================================

The four independent scoring stages of the analysis pipeline. Each stage is
a pure function of the message text (plus the channel for context analysis)
and can run in any order:

    1. detect_intent()        : flat score per attacker intent on any hit
    2. score_psychological()  : +0.15 per distinct manipulation cue, capped
    3. analyze_context()      : impersonated organization + coarse intent label
    4. classify_scam_type()   : +0.1 per distinct lexicon hit, best type wins

Intent is presence-based while the psychological and scam-type stages are
density-based, so more distinct cues push those scores higher.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterable, Optional

from aurashield.lexicons import (
    CONTEXT_INTENT_RULES,
    DEFAULT_CONTEXT_INTENT,
    INTENT_TRIGGERS,
    KNOWN_ORGANIZATIONS,
    NON_SCAM,
    PSYCH_INCREMENT,
    PSYCH_LEXICONS,
    SCAM_TYPE_INCREMENT,
    SCAM_TYPE_LEXICONS,
    SCAM_TYPE_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntentScores:
    """Per-intent confidence. Field order is the reasoning order."""
    otp_theft: float = 0.0
    money_fraud: float = 0.0
    credential_theft: float = 0.0
    link_click: float = 0.0
    personal_info: float = 0.0

    def items(self):
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def total(self) -> float:
        return round(sum(score for _, score in self.items()), 2)


@dataclass(frozen=True)
class PsychScores:
    """Manipulation tactic scores, each rounded to 2 decimals."""
    urgency: float = 0.0
    fear: float = 0.0
    reward_bait: float = 0.0
    authority_bias: float = 0.0

    def items(self):
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def total(self) -> float:
        return round(sum(score for _, score in self.items()), 2)


@dataclass(frozen=True)
class ContextInfo:
    organization: Optional[str]
    intent: str
    channel: str


@dataclass(frozen=True)
class ScamTypeInfo:
    type: str
    confidence: float


def _count_hits(lowered: str, triggers: Iterable[str]) -> int:
    """Number of distinct triggers present as substrings."""
    return sum(1 for trigger in set(triggers) if trigger in lowered)


def _capped(hits: int, increment: float) -> float:
    return round(min(1.0, hits * increment), 2)


def detect_intent(message: str) -> IntentScores:
    """Score each attacker intent. Any single trigger sets the category's
    fixed score; extra triggers in the same category add nothing."""
    lowered = message.lower()
    scores: Dict[str, float] = {}
    for intent, score, triggers in INTENT_TRIGGERS:
        matched = any(trigger in lowered for trigger in triggers)
        scores[intent] = min(1.0, score) if matched else 0.0
    return IntentScores(**scores)


def score_psychological(message: str) -> PsychScores:
    """Score the four manipulation tactics by number of distinct cues."""
    lowered = message.lower()
    scores = {
        tactic: _capped(_count_hits(lowered, triggers), PSYCH_INCREMENT)
        for tactic, triggers in PSYCH_LEXICONS
    }
    return PsychScores(**scores)


def extract_organization(message: str) -> Optional[str]:
    lowered = message.lower()
    for org in KNOWN_ORGANIZATIONS:
        if org in lowered:
            return org
    return None


def infer_context_intent(message: str) -> str:
    lowered = message.lower()
    for label, keywords in CONTEXT_INTENT_RULES:
        if any(keyword in lowered for keyword in keywords):
            return label
    return DEFAULT_CONTEXT_INTENT


def analyze_context(message: str, source: str) -> ContextInfo:
    """Impersonated organization, coarse intent label, and the channel as given."""
    return ContextInfo(
        organization=extract_organization(message),
        intent=infer_context_intent(message),
        channel=source,
    )


def score_scam_types(message: str) -> Dict[str, float]:
    """Raw density score for every scam-type lexicon, in declaration order."""
    lowered = message.lower()
    return {
        scam_type: _capped(_count_hits(lowered, triggers), SCAM_TYPE_INCREMENT)
        for scam_type, triggers in SCAM_TYPE_LEXICONS
    }


def classify_scam_type(message: str) -> ScamTypeInfo:
    """Pick the best-scoring scam type.

    Ties keep the earlier lexicon. A winner below SCAM_TYPE_THRESHOLD is
    reported as non_scam but keeps its raw score as confidence.
    """
    scores = score_scam_types(message)

    best_type, best_score = NON_SCAM, 0.0
    for scam_type, _ in SCAM_TYPE_LEXICONS:
        if scores[scam_type] > best_score:
            best_type, best_score = scam_type, scores[scam_type]

    if best_score < SCAM_TYPE_THRESHOLD:
        best_type = NON_SCAM

    logger.debug(f"Scam type scores={scores} -> {best_type} ({best_score:.2f})")
    return ScamTypeInfo(type=best_type, confidence=best_score)
