"""Article analyses and the derived per-article score"""

from __future__ import annotations

from datetime import UTC, datetime
import logging
from typing import Iterable

from papergraph.models.analysis import ArticleAnalysis, KeyFinding, ScoreDimensions
from papergraph.services.article_store import ArticleStore

logger = logging.getLogger(__name__)


class AnalysisStore:
    """
    Evaluations recorded against articles

    An article's score is the mean `overall_score` of its analyses. Articles
    without any analysis have no score (callers treat that as 0).
    """

    def __init__(self, articles: ArticleStore) -> None:
        self._articles = articles
        self._analyses: dict[int, ArticleAnalysis] = {}
        self._next_id = 1

        articles.on_delete(self.remove_article)

    def create(
        self,
        *,
        article_id: int,
        user_id: int,
        overall_score: float,
        dimensions: ScoreDimensions | None = None,
        summary: str = "",
        key_findings: Iterable[KeyFinding] = (),
        strengths: Iterable[str] = (),
        weaknesses: Iterable[str] = (),
        suggestions: Iterable[str] = (),
        extracted_tags: Iterable[str] = (),
    ) -> ArticleAnalysis | None:
        if not self._articles.exists(article_id):
            return None

        now = datetime.now(UTC)
        analysis = ArticleAnalysis(
            id=self._next_id,
            article_id=article_id,
            user_id=user_id,
            overall_score=overall_score,
            dimensions=dimensions or ScoreDimensions(),
            summary=summary,
            key_findings=list(key_findings),
            strengths=list(strengths),
            weaknesses=list(weaknesses),
            suggestions=list(suggestions),
            extracted_tags=list(extracted_tags),
            created_at=now,
            updated_at=now,
        )
        self._next_id += 1
        self._analyses[analysis.id] = analysis
        logger.info(f"Recorded analysis {analysis.id} for article {article_id} (score={overall_score})")
        return analysis

    def get(self, analysis_id: int) -> ArticleAnalysis | None:
        return self._analyses.get(analysis_id)

    def get_for_article(self, article_id: int) -> ArticleAnalysis | None:
        """First analysis recorded for the article"""
        return next((a for a in self._analyses.values() if a.article_id == article_id), None)

    def analyses_for(self, article_id: int) -> list[ArticleAnalysis]:
        return [a for a in self._analyses.values() if a.article_id == article_id]

    def article_score(self, article_id: int) -> float | None:
        scores = [a.overall_score for a in self._analyses.values() if a.article_id == article_id]
        if not scores:
            return None
        return sum(scores) / len(scores)

    def remove_article(self, article_id: int) -> int:
        stale = [analysis_id for analysis_id, a in self._analyses.items() if a.article_id == article_id]
        for analysis_id in stale:
            del self._analyses[analysis_id]
        return len(stale)

    def __len__(self) -> int:
        return len(self._analyses)
