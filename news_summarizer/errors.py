class SummarizationError(Exception):
    """Raised when any stage of the summarization pipeline fails."""


SummarizationFailure = SummarizationError
