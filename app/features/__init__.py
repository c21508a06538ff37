from .keyword_relevance import KeywordRelevance, evaluate_keyword_relevance, relevance_vocabulary

__all__ = [
    "KeywordRelevance",
    "evaluate_keyword_relevance",
    "relevance_vocabulary",
]
