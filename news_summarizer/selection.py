from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence
from .datatypes import ScoredSentence, SelectionStep

@dataclass
class SelectionConfig:
    pool_factor: int = 2            # pool = top pool_factor * target_count by score
    paragraph_boost: float = 1.2    # same or neighbouring paragraph as the last pick
    sequence_boost: float = 1.1     # directly before or after the last pick

    def __post_init__(self):
        if self.pool_factor < 1:
            raise ValueError(f"pool_factor must be >= 1, got {self.pool_factor}")

def contextual_score(candidate: ScoredSentence, last: ScoredSentence, cfg: SelectionConfig) -> float:
    s = candidate.score
    if abs(candidate.paragraph_index - last.paragraph_index) <= 1:
        s *= cfg.paragraph_boost
    if abs(candidate.sequence_index - last.sequence_index) == 1:
        s *= cfg.sequence_boost
    return s

def selection_trace(scored: Sequence[ScoredSentence], target_count: int,
                    cfg: Optional[SelectionConfig] = None) -> List[SelectionStep]:
    """Selection rounds in pick order: the seed first, then one step per coherent pick."""
    cfg = cfg or SelectionConfig()
    if target_count < 1:
        raise ValueError(f"target_count must be >= 1, got {target_count}")
    if len(scored) <= target_count:
        return [SelectionStep(sentence=s, contextual_score=s.score) for s in scored]

    pool_size = min(cfg.pool_factor * target_count, len(scored))
    pool = sorted(scored, key=lambda s: s.score, reverse=True)[:pool_size]

    # the seed stays at pool[0] and is never examined again
    steps = [SelectionStep(sentence=pool[0], contextual_score=pool[0].score)]
    while len(steps) < target_count and len(pool) > 1:
        last = steps[-1].sentence
        best_idx, best_score = 1, -1.0
        for i in range(1, len(pool)):
            ctx = contextual_score(pool[i], last, cfg)
            if ctx > best_score:
                best_idx, best_score = i, ctx
        picked = pool.pop(best_idx)
        steps.append(SelectionStep(sentence=picked, contextual_score=contextual_score(picked, last, cfg)))
    return steps

def select(scored: Sequence[ScoredSentence], target_count: int,
           cfg: Optional[SelectionConfig] = None) -> List[ScoredSentence]:
    picked = [step.sentence for step in selection_trace(scored, target_count, cfg)]
    picked.sort(key=lambda s: s.sequence_index)  # restore reading order
    return picked
