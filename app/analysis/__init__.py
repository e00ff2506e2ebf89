"""Response scoring and analytics.

Scoring pipeline for a single engine response:
  1. Sentiment scorer (word lists, substring containment)
  2. Keyword relevance matcher
  3. Performance score composer

Input:  response text + domain keywords + elapsed time
Output: AnalysisResult (sentiment, relevant keywords, performance)

Analytics (keyword rankings, engine performance) aggregate stored results.
"""

from app.analysis.scoring import score
from app.analysis.types import AnalysisInput, AnalysisResult

__all__ = ["AnalysisInput", "AnalysisResult", "score"]
