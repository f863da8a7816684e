"""Multi-dimensional evaluation of an article"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True)
class ScoreDimensions:
    """Per-dimension scores on a 0-10 scale"""

    innovation: float = 0.0
    methodology: float = 0.0
    impact: float = 0.0
    clarity: float = 0.0
    reproducibility: float = 0.0
    significance: float = 0.0


@dataclass(slots=True)
class KeyFinding:
    id: str
    title: str
    description: str
    icon: str = ""


@dataclass(slots=True)
class ArticleAnalysis:
    """Evaluation recorded by one user for one article"""

    id: int
    article_id: int
    user_id: int
    overall_score: float
    created_at: datetime
    updated_at: datetime
    dimensions: ScoreDimensions = field(default_factory=ScoreDimensions)
    summary: str = ""
    key_findings: list[KeyFinding] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    extracted_tags: list[str] = field(default_factory=list)

    def __repr__(self):
        return f"<ArticleAnalysis {self.id} article_id={self.article_id} score={self.overall_score}>"
