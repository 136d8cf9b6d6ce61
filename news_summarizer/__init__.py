from .datatypes import SentenceCandidate, ScoredSentence, FragmentReport, SelectionStep, FeatureVector
from .errors import SummarizationError, SummarizationFailure
from .segmentation import SegmentConfig, segment, inspect_segmentation, is_title, rejection_reason
from .features import ScoringConfig, extract_features, metric_categories, has_duplicate_information
from .scoring import score, score_sentences, explain_score
from .selection import SelectionConfig, select, selection_trace
from .summarize import summarize, generate_summary
