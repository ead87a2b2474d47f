# mlsamples/training/engines/text_featurizer.py
from __future__ import annotations

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion


def build_text_featurizer() -> FeatureUnion:
    """
    FeaturizeText: lower-cased word 1-2 grams + char 3 grams, tf-idf weighted.

    Input is a 1-D sequence of strings.
    """
    return FeatureUnion(
        [
            (
                "words",
                TfidfVectorizer(
                    lowercase=True,
                    analyzer="word",
                    ngram_range=(1, 2),
                    token_pattern=r"(?u)\b\w+\b",
                ),
            ),
            (
                "chars",
                TfidfVectorizer(
                    lowercase=True,
                    analyzer="char_wb",
                    ngram_range=(3, 3),
                ),
            ),
        ]
    )
