from __future__ import annotations
import logging
from typing import Optional, Sequence
from .datatypes import SentenceCandidate
from .errors import SummarizationError
from .segmentation import SegmentConfig, segment
from .features import ScoringConfig
from .scoring import score_sentences
from .selection import SelectionConfig, select

logger = logging.getLogger(__name__)

def generate_summary(candidates: Sequence[SentenceCandidate], num_sentences: int = 3,
                     scoring_cfg: Optional[ScoringConfig] = None,
                     selection_cfg: Optional[SelectionConfig] = None) -> str:
    if num_sentences < 1:
        raise ValueError(f"num_sentences must be >= 1, got {num_sentences}")
    # nothing to choose from: keep everything, skip scoring
    if len(candidates) <= num_sentences:
        return " ".join(c.text for c in candidates)

    scored = score_sentences(candidates, cfg=scoring_cfg)
    selected = select(scored, num_sentences, cfg=selection_cfg)
    logger.debug("Selected sentences %s of %d", [s.sequence_index for s in selected], len(scored))
    return " ".join(s.text for s in selected)

def summarize(text: str, num_sentences: int = 3,
              segment_cfg: Optional[SegmentConfig] = None,
              scoring_cfg: Optional[ScoringConfig] = None,
              selection_cfg: Optional[SelectionConfig] = None) -> str:
    # Pipeline glue; any failure surfaces as SummarizationError, never a partial summary
    try:
        candidates = segment(text, cfg=segment_cfg)
        logger.debug("Segmented %d candidate sentences", len(candidates))
        return generate_summary(candidates, num_sentences,
                                scoring_cfg=scoring_cfg, selection_cfg=selection_cfg)
    except Exception as exc:
        logger.exception("Summarization error")
        raise SummarizationError("Failed to generate summary") from exc
