#!filepath: tests/workflows/test_game_match_workflow.py
from mlsamples.config.tutorial_config import GameMatchConfig
from mlsamples.steps.skill_rating_step import format_gaussian
from mlsamples.workflows.game_match import GAMES, run_game_match


def test_game_match_ranks_skills(capsys):
    ctx = run_game_match(GameMatchConfig())

    assert len(ctx.data["games"]) == len(GAMES) == 6

    skills = ctx.predictions["skills"]
    assert sorted(s.player for s in skills) == [0, 1, 2, 3, 4]
    # player 0 won all three of its games
    assert skills[0].player == 0
    means = [s.mean for s in skills]
    assert means == sorted(means, reverse=True)
    assert all(0.0 < s.variance < 9.0 for s in skills)

    out = capsys.readouterr().out.splitlines()
    report = [line for line in out if line.startswith("Player ")]
    assert report == ctx.outputs["skills_report"]
    assert report[0] == f"Player 0 skill: {format_gaussian(skills[0].mean, skills[0].variance)}"


def test_game_match_prior_from_config():
    wide = run_game_match(GameMatchConfig(prior_variance=25.0))
    narrow = run_game_match(GameMatchConfig(prior_variance=1.0))

    assert wide.predictions["skills"][0].player == 0
    assert wide.predictions["skills"][0].variance > narrow.predictions["skills"][0].variance


def test_format_gaussian_uses_four_significant_digits():
    assert format_gaussian(9.51734, 3.92588) == "Gaussian(9.517, 3.926)"
