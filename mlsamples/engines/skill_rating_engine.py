# mlsamples/engines/skill_rating_engine.py
from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd
import trueskill

from mlsamples import logs


class SkillRatingEngine:
    """
    SkillRatingEngine（FINAL）

    Gaussian player skills from head-to-head results, no draws:

        skill_i       ~ N(prior_mean, prior_variance)
        performance_i ~ N(skill_i, performance_variance)
        winner's performance > loser's performance

    Inference is TrueSkill message passing (tau = 0, so skills do not drift),
    absorbing games in the order given.

    Output: one row per player id 0..max(id), columns (player, mean, variance),
    sorted by mean descending; ties keep player order.
    """

    columns = ("player", "mean", "variance")

    def __init__(
        self,
        prior_mean: float = 6.0,
        prior_variance: float = 9.0,
        performance_variance: float = 1.0,
    ):
        if prior_variance <= 0 or performance_variance <= 0:
            raise ValueError(
                f"variances must be > 0, got prior={prior_variance} "
                f"performance={performance_variance}"
            )

        self.env = trueskill.TrueSkill(
            mu=prior_mean,
            sigma=math.sqrt(prior_variance),
            beta=math.sqrt(performance_variance),
            tau=0.0,
            draw_probability=0.0,
        )

    def infer(self, winners: Sequence[int], losers: Sequence[int]) -> pd.DataFrame:
        winners = np.asarray(winners, dtype=int)
        losers = np.asarray(losers, dtype=int)

        if winners.shape != losers.shape:
            raise ValueError(
                f"[SkillRating] {winners.size} winners vs {losers.size} losers"
            )
        if winners.size and min(winners.min(), losers.min()) < 0:
            raise ValueError("[SkillRating] player ids must be >= 0")
        if (winners == losers).any():
            raise ValueError("[SkillRating] a player cannot beat themselves")

        n_players = int(max(winners.max(), losers.max())) + 1 if winners.size else 0
        ratings = [self.env.create_rating() for _ in range(n_players)]

        for w, l in zip(winners, losers):
            ratings[w], ratings[l] = self.env.rate_1vs1(ratings[w], ratings[l])

        frame = pd.DataFrame(
            {
                "player": np.arange(n_players, dtype=int),
                "mean": [r.mu for r in ratings],
                "variance": [r.sigma ** 2 for r in ratings],
            }
        )
        frame = frame.sort_values("mean", ascending=False, kind="stable").reset_index(drop=True)

        logs.info(f"[SkillRating] games={winners.size} players={n_players}")
        return frame
