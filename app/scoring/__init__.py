from .engine import analyze
from .exceptions import AnalysisError
from .models import AnalysisFeedback, AnalysisResult, KeywordReport
from .vocabulary import DEFAULT_VOCABULARY, get_vocabulary

__all__ = [
    "analyze",
    "AnalysisError",
    "AnalysisFeedback",
    "AnalysisResult",
    "KeywordReport",
    "DEFAULT_VOCABULARY",
    "get_vocabulary",
]
