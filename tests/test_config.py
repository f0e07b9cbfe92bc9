import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from hera.config import GeneratorConfig, SimulationConfig


def test_defaults_match_explorer():
    config = GeneratorConfig()
    assert (config.q2_min, config.q2_max) == (1.0, 40000.0)
    assert (config.x_min, config.x_max) == (1e-5, 0.8)
    assert (config.y_min, config.y_max) == (0.005, 0.95)
    assert config.isr_probability == 0.25
    assert config.min_electron_energy == 2.0
    assert config.max_attempts == 100

    sim = SimulationConfig()
    assert (sim.batch_size, sim.buffer_size, sim.luminosity_per_tick) == (5, 800, 0.01)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"q2_min": 0.0},
        {"q2_min": 50.0, "q2_max": 10.0},
        {"x_max": 1.5},
        {"y_min": 0.9, "y_max": 0.1},
        {"isr_probability": 1.2},
        {"min_electron_energy": 30.0},
        {"max_attempts": 0},
    ],
)
def test_invalid_generator_config(kwargs):
    with pytest.raises(ValueError):
        GeneratorConfig(**kwargs)


def test_invalid_simulation_config():
    with pytest.raises(ValueError):
        SimulationConfig(batch_size=0)
    with pytest.raises(ValueError):
        SimulationConfig(buffer_size=0)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HERA_MAX_ATTEMPTS", "250")
    monkeypatch.setenv("HERA_ISR_PROBABILITY", "0.5")
    config = GeneratorConfig.from_env()
    assert config.max_attempts == 250
    assert isinstance(config.max_attempts, int)
    assert config.isr_probability == 0.5
    assert config.q2_max == 40000.0


def test_env_overrides_simulation(monkeypatch):
    monkeypatch.setenv("HERA_BUFFER_SIZE", "50")
    assert SimulationConfig.from_env().buffer_size == 50


def test_bad_env_value(monkeypatch):
    monkeypatch.setenv("HERA_MAX_ATTEMPTS", "lots")
    with pytest.raises(ValueError):
        GeneratorConfig.from_env()


def test_env_value_out_of_range(monkeypatch):
    monkeypatch.setenv("HERA_ISR_PROBABILITY", "2")
    with pytest.raises(ValueError):
        GeneratorConfig.from_env()
