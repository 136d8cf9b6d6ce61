from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple
from .datatypes import SentenceCandidate, FragmentReport


_DOT = "\x00"  # stands in for a non-terminal period while splitting; never occurs in prose

RE_INITIAL    = re.compile(r"\b([A-Z])\.")                # J. Smith, U.S.
RE_PARAGRAPH  = re.compile(r"\n\s*\n")                    # one or more blank lines
RE_SENT_BREAK = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")     # terminator + space + capital
RE_SPACE      = re.compile(r"\s")

ABBREVIATIONS = ("Mr", "Mrs", "Ms", "Dr", "Prof", "Sr", "Jr", "vs", "etc")
HEADING_SUFFIXES = ("Report", "Update", "News", "Analysis")

# rejection reasons reported by rejection_reason()
TOO_SHORT   = "too_short"
TOO_LONG    = "too_long"
TITLE       = "title"
SINGLE_WORD = "single_word"

@dataclass
class SegmentConfig:
    min_length: int = 30
    max_length: int = 250
    title_max_length: int = 150   # longer lines are never treated as headings
    title_min_words: int = 8
    heading_suffixes: Tuple[str, ...] = HEADING_SUFFIXES
    abbreviations: Tuple[str, ...] = ABBREVIATIONS

    def __post_init__(self):
        if self.min_length < 0 or self.max_length < self.min_length:
            raise ValueError(f"Invalid length bounds: {self.min_length}..{self.max_length}")

def _abbreviation_re(abbreviations: Tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(re.escape(a) for a in abbreviations)
    return re.compile(rf"\b({alternatives})\.", re.I)

_DEFAULT_ABBREV_RE = _abbreviation_re(ABBREVIATIONS)

def mask_abbreviations(text: str, cfg: Optional[SegmentConfig] = None) -> str:
    cfg = cfg or SegmentConfig()
    abbrev_re = _DEFAULT_ABBREV_RE if cfg.abbreviations == ABBREVIATIONS else _abbreviation_re(cfg.abbreviations)
    text = RE_INITIAL.sub(rf"\1{_DOT}", text)
    return abbrev_re.sub(rf"\1{_DOT}", text)

def unmask(text: str) -> str:
    return text.replace(_DOT, ".")

def split_paragraphs(text: str) -> List[str]:
    # empty blocks are kept so that paragraph indices follow the raw layout
    return RE_PARAGRAPH.split(text)

def split_fragments(paragraph: str) -> List[str]:
    return [p.strip() for p in RE_SENT_BREAK.split(paragraph)]

def is_title(line: str, cfg: Optional[SegmentConfig] = None) -> bool:
    cfg = cfg or SegmentConfig()
    if len(line) >= cfg.title_max_length:
        return False
    words = line.strip().split()
    return (
        line.endswith(cfg.heading_suffixes)
        or line.upper() == line
        or not line.endswith(".")
        or len(words) < cfg.title_min_words
        or all(w[0] == w[0].upper() for w in words)
    )

def rejection_reason(fragment: str, cfg: Optional[SegmentConfig] = None) -> Optional[str]:
    cfg = cfg or SegmentConfig()
    if len(fragment) < cfg.min_length:
        return TOO_SHORT
    if len(fragment) > cfg.max_length:
        return TOO_LONG
    if is_title(fragment, cfg):
        return TITLE
    if not RE_SPACE.search(fragment):
        return SINGLE_WORD
    return None

def inspect_segmentation(text: str, cfg: Optional[SegmentConfig] = None) -> List[FragmentReport]:
    cfg = cfg or SegmentConfig()
    reports: List[FragmentReport] = []
    for p_idx, paragraph in enumerate(split_paragraphs(mask_abbreviations(text, cfg))):
        for raw in split_fragments(paragraph):
            fragment = unmask(raw)
            reports.append(FragmentReport(text=fragment, paragraph_index=p_idx,
                                          reason=rejection_reason(fragment, cfg)))
    return reports

def segment(text: str, cfg: Optional[SegmentConfig] = None) -> List[SentenceCandidate]:
    return [SentenceCandidate(text=r.text, paragraph_index=r.paragraph_index)
            for r in inspect_segmentation(text, cfg) if r.kept]
