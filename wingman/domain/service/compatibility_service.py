"""Compatibility scoring between two user bios.

The score combines two signals:

- Category overlap: which goal areas (fitness, career, ...) each bio
  touches, compared with Jaccard similarity.
- Word overlap: Jaccard similarity of the distinct longer words in each bio.

Bios that are missing or blank carry no signal, so the pair gets a random
score from a neutral band instead.
"""

import random

from wingman.config import MatchingSettings

from .base import Service

# Lowercase trigger words and phrases per goal category. A category is
# present when any trigger appears as a substring of the lowercased bio.
KEYWORD_CATEGORIES: dict[str, tuple[str, ...]] = {
    "fitness": (
        "workout",
        "gym",
        "exercise",
        "fitness",
        "health",
        "running",
        "yoga",
        "weightlifting",
        "cardio",
        "training",
        "athletic",
    ),
    "career": (
        "career",
        "professional",
        "work",
        "business",
        "entrepreneur",
        "startup",
        "job",
        "promotion",
        "productivity",
        "skills",
    ),
    "education": (
        "learning",
        "study",
        "education",
        "reading",
        "books",
        "course",
        "degree",
        "knowledge",
        "school",
        "university",
    ),
    "creative": (
        "creative",
        "art",
        "music",
        "writing",
        "design",
        "craft",
        "painting",
        "photography",
        "drawing",
        "artistic",
    ),
    "personal": (
        "mindfulness",
        "meditation",
        "mental health",
        "therapy",
        "self-care",
        "growth",
        "development",
        "habits",
        "routine",
    ),
    "social": (
        "social",
        "networking",
        "friends",
        "community",
        "volunteer",
        "relationship",
        "family",
        "connection",
    ),
    "financial": (
        "money",
        "finance",
        "saving",
        "investment",
        "budget",
        "debt",
        "financial",
        "wealth",
        "income",
    ),
    "lifestyle": (
        "lifestyle",
        "travel",
        "adventure",
        "hobbies",
        "cooking",
        "food",
        "organization",
        "home",
        "garden",
    ),
}


def _has_text(bio: object) -> bool:
    return isinstance(bio, str) and bio.strip() != ""


def _jaccard_percent(a: set[str], b: set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union) * 100


def extract_categories(bio: str | None) -> set[str]:
    """Return the goal categories a bio mentions.

    Args:
        bio: Free-text bio

    Returns:
        Names of categories with at least one trigger in the bio
    """
    if not _has_text(bio):
        return set()
    text = bio.lower()
    return {
        category
        for category, triggers in KEYWORD_CATEGORIES.items()
        if any(trigger in text for trigger in triggers)
    }


def category_score(bio_a: str | None, bio_b: str | None) -> float:
    """Jaccard similarity of the two bios' categories, scaled to 0-100."""
    return _jaccard_percent(extract_categories(bio_a), extract_categories(bio_b))


def _significant_words(bio: str | None, min_length: int) -> set[str]:
    if not _has_text(bio):
        return set()
    return {word for word in bio.lower().split() if len(word) >= min_length}


def word_overlap_score(
    bio_a: str | None, bio_b: str | None, min_length: int = 4
) -> float:
    """Jaccard similarity of the bios' distinct words, scaled to 0-100.

    Words shorter than ``min_length`` are ignored.
    """
    return _jaccard_percent(
        _significant_words(bio_a, min_length), _significant_words(bio_b, min_length)
    )


class CompatibilityScorer(Service):
    """Scores how well two users' bios match on a 0-100 scale.

    The random generator only adds variety to rankings, so it is a plain
    ``random.Random`` that tests can seed.
    """

    def __init__(
        self, settings: MatchingSettings, rng: random.Random | None = None
    ) -> None:
        """Initialize the scorer.

        Args:
            settings: Weights, jitter and neutral band
            rng: Random source for jitter and neutral scores
        """
        self.settings = settings
        self.rng = rng or random.Random()

    def base_score(self, bio_a: str | None, bio_b: str | None) -> float | None:
        """Weighted score before jitter.

        Returns:
            The combined score, or None when either bio carries no signal
        """
        if not (_has_text(bio_a) and _has_text(bio_b)):
            return None
        return self.settings.category_weight * category_score(
            bio_a, bio_b
        ) + self.settings.word_overlap_weight * word_overlap_score(
            bio_a, bio_b, self.settings.min_word_length
        )

    def score(self, bio_a: str | None, bio_b: str | None) -> int:
        """Compatibility score for two bios.

        Args:
            bio_a: First user's bio
            bio_b: Second user's bio

        Returns:
            Integer score in [0, 100]
        """
        base = self.base_score(bio_a, bio_b)
        if base is None:
            return self.rng.randint(
                self.settings.neutral_score_min, self.settings.neutral_score_max
            )

        jitter = self.rng.uniform(-self.settings.jitter, self.settings.jitter)
        return round(max(0.0, min(100.0, base + jitter)))
