"""Default tag set seeded into a fresh catalog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TagSeed:
    """Tag definition registered when a catalog starts up."""

    name: str
    description: str
    color: str
    category: str


DEFAULT_TAG_SEEDS: tuple[TagSeed, ...] = (
    TagSeed(name="深度学习", description="基于神经网络的学习方法", color="#3B82F6", category="method"),
    TagSeed(name="自然语言处理", description="文本理解和生成技术", color="#10B981", category="domain"),
    TagSeed(name="计算机视觉", description="图像和视频处理技术", color="#F59E0B", category="domain"),
    TagSeed(name="强化学习", description="基于奖励的学习方法", color="#EF4444", category="method"),
    TagSeed(name="Transformer", description="注意力机制架构", color="#8B5CF6", category="technique"),
    TagSeed(name="BERT", description="双向编码器表示", color="#06B6D4", category="technique"),
    TagSeed(name="GPT", description="生成式预训练变换器", color="#F97316", category="technique"),
    TagSeed(name="图像识别", description="图像分类和识别", color="#84CC16", category="application"),
    TagSeed(name="机器翻译", description="自动语言翻译", color="#EC4899", category="application"),
    TagSeed(name="推荐系统", description="个性化推荐技术", color="#6366F1", category="application"),
)


def get_default_tag_seeds() -> list[TagSeed]:
    return list(DEFAULT_TAG_SEEDS)
