"""
analyzer.py — Scam Analysis Coordinator
=======================================

Runs the full scoring pipeline for one message and assembles the
AnalysisResult returned to callers:

    1. Intent detection          (detector.detect_intent)
    2. Psychological scoring     (detector.score_psychological)
    3. Context analysis          (detector.analyze_context)
    4. Scam type classification  (detector.classify_scam_type)
    5. Risk aggregation          (risk.aggregate_risk)
    6. Reasoning                 (risk.generate_reasoning)

Failure policy:
    analyze() never raises. Any exception from a stage is logged and replaced
    by the canonical safe default (non-scam, confidence 0.0, risk low) so the
    caller always receives a structurally complete result.

Concurrency:
    Stateless. Lexicons are read-only tuples, so concurrent calls need no lock.
"""

import logging
from typing import Any

from aurashield import detector, risk
from aurashield.lexicons import DEFAULT_CONTEXT_INTENT, NON_SCAM
from aurashield.models import (
    AnalysisResult,
    CognitiveExploitation,
    ExtractedEntities,
    normalize_source,
)

logger = logging.getLogger(__name__)

ERROR_REASON = "Error occurred during analysis, defaulting to non-scam"
ERROR_RECOMMENDATION = "Error occurred during analysis, treating as non-scam for safety"


def safe_default(source: Any) -> AnalysisResult:
    """The result handed back when any stage fails. Accepts any source value."""
    return AnalysisResult(
        is_scam=False,
        confidence_score=0.0,
        scam_type=NON_SCAM,
        risk_level="low",
        cognitive_exploitation=CognitiveExploitation(),
        reasoning=[ERROR_REASON],
        extracted_entities=ExtractedEntities(
            organization=None,
            intent=DEFAULT_CONTEXT_INTENT,
            channel=normalize_source(source),
        ),
        recommendation=ERROR_RECOMMENDATION,
    )


class MessageAnalyzer:
    """Coordinates the scoring stages for a single message."""

    def analyze(self, message: str, source: str) -> AnalysisResult:
        try:
            return self._run_pipeline(message, source)
        except Exception as exc:
            logger.error(f"Analysis error, returning safe default: {exc}", exc_info=True)
            return safe_default(source)

    @staticmethod
    def _run_pipeline(message: str, source: str) -> AnalysisResult:
        intents = detector.detect_intent(message)
        psych = detector.score_psychological(message)
        context = detector.analyze_context(message, source)
        scam_type = detector.classify_scam_type(message)

        risk_info = risk.aggregate_risk(scam_type, psych, intents)
        reasoning = risk.generate_reasoning(scam_type, psych, intents, risk_info)

        logger.debug(
            f"type={scam_type.type} psych={psych.total():.2f} "
            f"intent={intents.total():.2f} org={context.organization}"
        )

        return AnalysisResult(
            is_scam=risk_info.is_scam,
            confidence_score=risk_info.confidence_score,
            scam_type=scam_type.type,
            risk_level=risk_info.risk_level,
            cognitive_exploitation=CognitiveExploitation(
                urgency=psych.urgency,
                fear=psych.fear,
                reward_bait=psych.reward_bait,
                authority_bias=psych.authority_bias,
            ),
            reasoning=reasoning,
            extracted_entities=ExtractedEntities(
                organization=context.organization,
                intent=context.intent,
                channel=context.channel or source or "unknown",
            ),
            recommendation=risk.recommendation_for(risk_info),
        )


# Module-level singleton
message_analyzer = MessageAnalyzer()


def analyze(message: str, source: str) -> AnalysisResult:
    return message_analyzer.analyze(message, source)
