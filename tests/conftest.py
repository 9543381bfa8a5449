"""Pytest configuration and fixtures for cat toy tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def recording_renderer():
    from tests.fakes.recording_renderer import RecordingRenderer

    return RecordingRenderer()


@pytest.fixture
def aquarium(seeded_rng, recording_renderer):
    """Aquarium simulation with the start-up school in place."""
    from cattoy.config.simulation_config import SimulationConfig
    from cattoy.simulation import CatToySimulation

    sim = CatToySimulation(
        SimulationConfig.for_preset("aquarium"), rng=seeded_rng, renderer=recording_renderer
    )
    sim.setup()
    return sim


@pytest.fixture
def bounce(seeded_rng, recording_renderer):
    """Empty bounce simulation."""
    from cattoy.config.simulation_config import SimulationConfig
    from cattoy.simulation import CatToySimulation

    sim = CatToySimulation(
        SimulationConfig.for_preset("bounce"), rng=seeded_rng, renderer=recording_renderer
    )
    sim.setup()
    return sim
