import pytest

from gridsnake.config import Direction
from gridsnake.main import build_config, parse_args


def test_defaults_build_classic_config():
    cfg = build_config(parse_args([]))
    assert cfg.tick_ms == 200
    assert not cfg.draw_grid
    assert cfg.detect_bite
    assert cfg.allow_restart
    assert cfg.persist_high_score
    assert cfg.seed is None
    assert cfg.high_score_path == "high_score.json"
    assert cfg.spawn_direction is Direction.LEFT


def test_reduced_profile_with_overrides():
    args = parse_args([
        "--profile", "reduced", "--grid", "--seed", "5",
        "--tick-ms", "150", "--high-score-file", "scores/hs.json",
    ])
    cfg = build_config(args)
    assert (cfg.bounds.low, cfg.bounds.high) == (40, 440)
    assert not cfg.detect_bite
    assert not cfg.allow_restart
    assert cfg.draw_grid
    assert cfg.seed == 5
    assert cfg.tick_ms == 150
    assert cfg.high_score_path == "scores/hs.json"


def test_invalid_tick_rejected():
    with pytest.raises(ValueError):
        build_config(parse_args(["--tick-ms", "0"]))
