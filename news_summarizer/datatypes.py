from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

@dataclass(frozen=True)
class SentenceCandidate:
    text: str
    paragraph_index: int

@dataclass(frozen=True)
class ScoredSentence(SentenceCandidate):
    score: float = 0.0
    sequence_index: int = 0

@dataclass(frozen=True)
class FragmentReport:
    text: str
    paragraph_index: int
    reason: Optional[str]  # None when the fragment was kept

    @property
    def kept(self) -> bool:
        return self.reason is None

@dataclass(frozen=True)
class SelectionStep:
    sentence: ScoredSentence
    contextual_score: float  # seed round: raw score

FeatureVector = Dict[str, float]  # per-signal score contributions
