import pytest

from team_balancer import Config, InvalidInput


def test_defaults():
    cfg = Config()
    assert cfg.iterations == 10000
    assert cfg.pair_month_cap == 2
    assert cfg.avoid_last_week_pairs is True
    assert cfg.seed is None


def test_from_env_overrides():
    cfg = Config.from_env(
        {
            "TEAM_BALANCER_ITERATIONS": "250",
            "TEAM_BALANCER_PAIR_MONTH_CAP": "3",
            "TEAM_BALANCER_AVOID_LAST_WEEK_PAIRS": "no",
            "TEAM_BALANCER_SEED": "7",
        }
    )
    assert cfg == Config(iterations=250, pair_month_cap=3, avoid_last_week_pairs=False, seed=7)


def test_from_env_ignores_blank_values():
    assert Config.from_env({"TEAM_BALANCER_ITERATIONS": " "}) == Config()


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TEAM_BALANCER_ITERATIONS", "42")
    assert Config.from_env().iterations == 42


def test_from_env_rejects_garbage():
    with pytest.raises(ValueError):
        Config.from_env({"TEAM_BALANCER_ITERATIONS": "lots"})


@pytest.mark.parametrize(
    "kwargs, code",
    [
        ({"pair_month_cap": 0}, "invalid_pair_month_cap"),
        ({"pair_month_cap": -2}, "invalid_pair_month_cap"),
        ({"iterations": -1}, "invalid_iterations"),
    ],
)
def test_invalid_values_rejected(kwargs, code):
    with pytest.raises(InvalidInput, match=code):
        Config(**kwargs)


def test_from_env_rejects_zero_cap():
    with pytest.raises(InvalidInput, match="invalid_pair_month_cap"):
        Config.from_env({"TEAM_BALANCER_PAIR_MONTH_CAP": "0"})
