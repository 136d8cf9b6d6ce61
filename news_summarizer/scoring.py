from __future__ import annotations
from typing import List, Optional, Sequence
from .datatypes import SentenceCandidate, ScoredSentence, FeatureVector
from .features import ScoringConfig, extract_features, has_duplicate_information

def _redundancy_multiplier(text: str, cfg: ScoringConfig) -> float:
    return cfg.redundancy_multiplier if has_duplicate_information(text, cfg) else 1.0

def score(candidate: SentenceCandidate, sequence_index: int, total_count: int,
          cfg: Optional[ScoringConfig] = None) -> float:
    """
    Importance score of one sentence.

    Sum of the additive signals from `extract_features`, then scaled by the
    redundancy multiplier when the sentence repeats too many 3-word phrases.
    Scores may be negative.
    """
    cfg = cfg or ScoringConfig()
    total = sum(extract_features(candidate, sequence_index, total_count, cfg).values())
    return total * _redundancy_multiplier(candidate.text, cfg)

def explain_score(candidate: SentenceCandidate, sequence_index: int, total_count: int,
                  cfg: Optional[ScoringConfig] = None) -> FeatureVector:
    cfg = cfg or ScoringConfig()
    f = extract_features(candidate, sequence_index, total_count, cfg)
    multiplier = _redundancy_multiplier(candidate.text, cfg)
    f["redundancy_multiplier"] = multiplier
    f["total"] = sum(v for k, v in f.items() if k != "redundancy_multiplier") * multiplier
    return f

def score_sentences(candidates: Sequence[SentenceCandidate],
                    cfg: Optional[ScoringConfig] = None) -> List[ScoredSentence]:
    cfg = cfg or ScoringConfig()
    n = len(candidates)
    return [
        ScoredSentence(text=c.text, paragraph_index=c.paragraph_index,
                       score=score(c, i, n, cfg), sequence_index=i)
        for i, c in enumerate(candidates)
    ]
