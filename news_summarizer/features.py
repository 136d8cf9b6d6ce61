from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple
from .datatypes import SentenceCandidate, FeatureVector


RE_METRIC       = re.compile(r"\$?\d+(?:\.\d+)?(?:%| ?(?:billion|million|thousand))?")
RE_CONCEPT_LINK = re.compile(r"\b(?:while|however|despite|although|but|therefore)\b", re.I)
RE_REGULATORY   = re.compile(r"\b(?:regulation|policy|law|directive|resolution)\b", re.I)
RE_IMPACT_STMT  = re.compile(r"\b(?:impact|effect|result|outcome|consequence)\b", re.I)
RE_WORD         = re.compile(r"\w+")

# category -> (pattern, weight); every match counts, words are matched as substrings
CONTENT_PATTERNS: Dict[str, Tuple[re.Pattern, float]] = {
    "numbers":      (RE_METRIC, 1.5),
    "comparison":   (re.compile(r"increase|decrease|grew|growth|higher|lower|rise|fell|drop|surge", re.I), 1.2),
    "future":       (re.compile(r"will|expect|forecast|project|predict|anticipate|plan|target|goal", re.I), 1.2),
    "significance": (re.compile(r"significant|major|critical|important|essential|key|crucial|vital", re.I), 1.0),
    "impact":       (re.compile(r"affect|impact|influence|result|lead|cause|enable|improve", re.I), 1.0),
    "analysis":     (re.compile(r"however|therefore|consequently|due to|because|despite|although", re.I), 0.8),
    "action":       (re.compile(r"launch|implement|introduce|announce|establish|develop|create|begin", re.I), 0.5),
    "stakeholder":  (re.compile(r"company|government|organization|industry|sector|market|customer|user", re.I), 0.5),
}

FINANCIAL  = "financial"
PERCENTAGE = "percentage"
SCALE      = "scale"
OTHER      = "other"

@dataclass
class ScoringConfig:
    list_penalty: float = 5.0
    metric_category_bonus: float = 2.0
    concept_link_bonus: float = 1.5
    position_weight: float = 0.15
    paragraph_opening_bonus: float = 0.5
    short_word_limit: int = 10
    short_penalty: float = 1.0
    long_word_limit: int = 40
    long_penalty_per_word: float = 0.05
    regulatory_bonus: float = 2.0
    impact_statement_bonus: float = 1.5
    duplicate_trigram_limit: int = 2
    redundancy_multiplier: float = 0.7
    content_patterns: Dict[str, Tuple[re.Pattern, float]] = field(default_factory=lambda: dict(CONTENT_PATTERNS))

def metric_category(token: str) -> str:
    if "$" in token:
        return FINANCIAL
    if "%" in token:
        return PERCENTAGE
    if "billion" in token or "million" in token:
        return SCALE
    return OTHER

def metric_categories(text: str) -> Set[str]:
    return {metric_category(m) for m in RE_METRIC.findall(text.lower())}

def _trigrams(text: str) -> List[Tuple[str, str, str]]:
    words = RE_WORD.findall(text.lower())
    return list(zip(words, words[1:], words[2:]))

def duplicate_trigram_count(text: str) -> int:
    # sliding 3-word windows that repeat an earlier window
    tris = _trigrams(text)
    return len(tris) - len(set(tris))

def has_duplicate_information(text: str, cfg: Optional[ScoringConfig] = None) -> bool:
    cfg = cfg or ScoringConfig()
    return duplicate_trigram_count(text) > cfg.duplicate_trigram_limit

def _position_score(sequence_index: int, total_count: int, weight: float) -> float:
    return 1 - (sequence_index / total_count) * weight

def _length_penalty(word_count: int, cfg: ScoringConfig) -> float:
    penalty = 0.0
    if word_count < cfg.short_word_limit:
        penalty -= cfg.short_penalty
    if word_count > cfg.long_word_limit:
        penalty -= (word_count - cfg.long_word_limit) * cfg.long_penalty_per_word
    return penalty

def extract_features(candidate: SentenceCandidate, sequence_index: int, total_count: int,
                     cfg: Optional[ScoringConfig] = None) -> FeatureVector:
    """Additive score contributions of one sentence, keyed by signal name.

    Pattern checks run on the lower-cased text; the bullet check looks at the
    original text. The redundancy multiplier is not part of the vector, see
    `scoring.score`.
    """
    cfg = cfg or ScoringConfig()
    text = candidate.text.lower()
    f: FeatureVector = {}

    f["list_penalty"] = -cfg.list_penalty if candidate.text.strip().startswith(("-", "•")) else 0.0
    f["metric_diversity"] = len(metric_categories(text)) * cfg.metric_category_bonus
    f["concept_links"] = len(RE_CONCEPT_LINK.findall(text)) * cfg.concept_link_bonus
    f["position"] = _position_score(sequence_index, total_count, cfg.position_weight)

    # granted to every sentence outside the first paragraph, not only openers
    opening = sequence_index == 0 or candidate.paragraph_index > 0
    f["paragraph_opening"] = cfg.paragraph_opening_bonus if opening else 0.0

    for name, (pattern, weight) in cfg.content_patterns.items():
        f[f"pattern_{name}"] = len(pattern.findall(text)) * weight

    f["length"] = _length_penalty(len(text.split()), cfg)
    f["regulatory"] = cfg.regulatory_bonus if RE_REGULATORY.search(text) else 0.0
    f["impact_statement"] = cfg.impact_statement_bonus if RE_IMPACT_STMT.search(text) else 0.0
    return f
