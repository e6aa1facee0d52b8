"""
lexicons.py — Fixed Trigger Lexicons for the Scoring Engine
============================================================

Every table the scoring stages read lives here. All tables are tuples of
(category, triggers) pairs so that iteration order is the literal declaration
order below; winner selection and tie-breaks depend on that order.

Matching rules (shared by every stage):
    - The message is lower-cased once per stage
    - A trigger matches when it occurs anywhere as a substring
    - Each distinct trigger counts at most once per message

Tables:
    SCAM_TYPE_LEXICONS   : 6 scam-type lexicons (+0.1 per distinct hit)
    PSYCH_LEXICONS       : 4 manipulation tactics (+0.15 per distinct hit)
    INTENT_TRIGGERS      : 5 attacker intents (flat score on any hit)
    KNOWN_ORGANIZATIONS  : impersonation targets, first match wins
    CONTEXT_INTENT_RULES : coarse context label, first rule wins
"""

from typing import Tuple


Lexicon = Tuple[Tuple[str, Tuple[str, ...]], ...]


# Scam type labels used for classification output.
BANK_IMPERSONATION = "bank_impersonation"
LOTTERY_FRAUD = "lottery_fraud"
OTP_SCAM = "otp_scam"
FAKE_SUPPORT = "fake_support"
JOB_SCAM = "job_scam"
CRYPTO_SCAM = "crypto_scam"
NON_SCAM = "non_scam"

VALID_SCAM_TYPES = frozenset([
    BANK_IMPERSONATION, LOTTERY_FRAUD, OTP_SCAM, FAKE_SUPPORT,
    JOB_SCAM, CRYPTO_SCAM, NON_SCAM,
])

RISK_LEVELS = ("low", "medium", "high", "critical")

VALID_SOURCES = frozenset(["sms", "email", "chat", "unknown"])

# Per-hit weights and cut-offs
SCAM_TYPE_INCREMENT: float = 0.1
PSYCH_INCREMENT: float = 0.15
SCAM_TYPE_THRESHOLD: float = 0.2


# ================================================================
# SCAM TYPE LEXICONS: declaration order is the tie-break order
# ================================================================

SCAM_TYPE_LEXICONS: Lexicon = (
    (BANK_IMPERSONATION, (
        "bank", "account", "blocked", "suspended", "debit", "credit",
        "card", "atm", "pin", "password", "login", "security", "verification",
        "fraud", "unauthorized", "transaction", "balance", "statement",
    )),
    (LOTTERY_FRAUD, (
        "won", "prize", "lottery", "jackpot", "winner", "congratulations",
        "claim", "free", "gift", "cash", "money", "reward", "lucky", "draw",
    )),
    (OTP_SCAM, (
        "otp", "code", "verification", "one time password", "security code",
        "confirm", "authenticate", "verify", "token", "temporary", "access code",
    )),
    (FAKE_SUPPORT, (
        "support", "help", "service", "customer care", "technical", "problem",
        "issue", "fix", "resolve", "assistance", "agent", "representative",
        "upgrade", "maintenance", "system", "software",
    )),
    (JOB_SCAM, (
        "job", "employment", "hiring", "salary", "interview", "position",
        "work from home", "remote", "recruitment", "offer", "contract",
        "training fee", "placement", "candidate", "opportunity",
    )),
    (CRYPTO_SCAM, (
        "bitcoin", "crypto", "investment", "returns", "profit", "trading",
        "blockchain", "wallet", "miner", "yield", "defi", "coin", "token",
        "digital asset", "high returns", "guaranteed", "investment plan",
    )),
)


# ================================================================
# PSYCHOLOGICAL TACTICS: order is also the reasoning order
# ================================================================

PSYCH_LEXICONS: Lexicon = (
    ("urgency", (
        "immediately", "urgent", "now", "today", "limited time", "hurry",
        "act fast", "before", "deadline", "expire", "last chance", "final notice",
        "within 24 hours", "before midnight", "asap", "rush", "quick",
    )),
    ("fear", (
        "suspended", "blocked", "penalty", "legal action", "compliance",
        "violation", "deactivation", "account frozen", "restricted", "warning",
        "threat", "ban", "investigation", "audit", "suspicious activity",
        "security breach", "unauthorized access", "will be suspended",
        "will be blocked",
    )),
    # Bare "free" is left out: "are you free" is a scheduling question.
    ("reward_bait", (
        "for free", "free gift", "free of cost", "bonus", "prize", "gift",
        "cashback", "discount", "offer", "win", "won", "winner", "guaranteed",
        "amazing", "exclusive", "special deal", "limited offer", "cash prize",
        "rewards",
    )),
    ("authority_bias", (
        "official", "government", "police", "irs", "tax", "court",
        "bank manager", "ceo", "director", "ministry", "embassy",
        "authorized", "verified", "certified", "regulatory", "licensed",
    )),
)


# ================================================================
# INTENT TRIGGERS: (intent, flat score, triggers)
# ================================================================

INTENT_TRIGGERS: Tuple[Tuple[str, float, Tuple[str, ...]], ...] = (
    ("otp_theft", 0.8, (
        "otp", "one time password", "verification code", "security code",
    )),
    ("money_fraud", 0.7, (
        "send money", "transfer", "payment", "deposit", "fees",
        "processing charge",
    )),
    ("credential_theft", 0.8, (
        "password", "login", "username", "credentials", "pin", "card details",
    )),
    ("link_click", 0.6, (
        "click here", "visit", "download", "link", "website", "portal",
    )),
    ("personal_info", 0.7, (
        "personal information", "id proof", "pan card", "aadhar", "ssn",
        "address proof",
    )),
)


# ================================================================
# CONTEXT TABLES
# ================================================================

# Earlier entries win when several organizations are mentioned.
KNOWN_ORGANIZATIONS: Tuple[str, ...] = (
    "bank of india", "sbi", "icici", "hdfc", "axis bank", "paytm",
    "amazon", "flipkart", "google", "facebook", "whatsapp",
    "income tax", "irs", "government", "police", "court",
)

CONTEXT_INTENT_RULES: Lexicon = (
    ("verification_request", ("otp", "verification")),
    ("prize_notification", ("won", "prize")),
    ("employment_offer", ("job", "interview")),
    ("investment_opportunity", ("investment", "returns")),
    ("support_request", ("support", "help")),
)

DEFAULT_CONTEXT_INTENT = "general"
