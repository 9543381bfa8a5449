"""Tests for interval, manual and start-up spawning."""

import pytest

from cattoy.config.display import BOUNCE_PALETTE, FISH_COLOR, LASER_COLOR
from cattoy.config.simulation_config import SimulationConfig, SpawnPolicy
from cattoy.config.spawning import BOUNCE_SPEED, INITIAL_FISH_COUNT
from cattoy.entities import Entity, EntityKind
from cattoy.exceptions import ConfigurationError, EntityError
from cattoy.math_utils import Vector2
from cattoy.simulation import CatToySimulation
from cattoy.util.rng import MissingRNGError


class TestIntervalSpawn:
    """Test the time-gated spawner."""

    def test_spawns_after_interval(self, aquarium):
        ctx = aquarium.context
        before = len(ctx.store)

        assert aquarium.spawner.try_spawn(ctx, 1000) is None
        entity = aquarium.spawner.try_spawn(ctx, 1401)

        assert entity is not None
        assert len(ctx.store) == before + 1
        assert ctx.last_spawn_ms == 1401

    def test_gate_measured_from_last_spawn(self, aquarium):
        ctx = aquarium.context
        aquarium.spawner.try_spawn(ctx, 1500)

        assert aquarium.spawner.try_spawn(ctx, 2800) is None
        assert aquarium.spawner.try_spawn(ctx, 2901) is not None

    def test_respects_cap(self, aquarium):
        ctx = aquarium.context
        policy = aquarium.spawner.policy
        now = 0.0
        for _ in range(policy.max_entities * 2):
            now += policy.interval_ms + 1
            aquarium.spawner.try_spawn(ctx, now)

        assert len(ctx.store) == policy.max_entities
        last = ctx.last_spawn_ms
        assert aquarium.spawner.try_spawn(ctx, now + 10000) is None
        assert ctx.last_spawn_ms == last

    def test_uses_selected_kind(self, aquarium):
        aquarium.controls.kind = EntityKind.DOT

        entity = aquarium.spawner.try_spawn(aquarium.context, 5000)

        assert entity.kind is EntityKind.DOT


class TestManualSpawn:
    """Test pointer-down/click spawns under both cap policies."""

    def test_aquarium_bypasses_cap(self, aquarium):
        ctx = aquarium.context
        cap = aquarium.spawner.policy.max_entities
        for i in range(cap + 5):
            assert aquarium.spawner.spawn_at(ctx, 100 + i, 100) is not None

        assert len(ctx.store) == INITIAL_FISH_COUNT + cap + 5

    def test_bounce_enforces_cap(self, bounce):
        ctx = bounce.context
        cap = bounce.spawner.policy.max_entities
        spawned = [bounce.spawner.spawn_at(ctx, 50, 50) for _ in range(cap + 5)]

        assert len(ctx.store) == cap
        assert spawned[-1] is None

    def test_spawns_at_location_and_ignores_interval(self, aquarium):
        ctx = aquarium.context
        ctx.last_spawn_ms = 0

        entity = aquarium.spawner.spawn_at(ctx, 123.0, 45.0)

        assert (entity.pos.x, entity.pos.y) == (123.0, 45.0)
        assert ctx.last_spawn_ms == 0

    def test_custom_policy(self, seeded_rng):
        config = SimulationConfig(
            spawn=SpawnPolicy(enforce_cap_on_manual_spawn=True, interval_ms=10, max_entities=2),
            initial_count=0,
        )
        sim = CatToySimulation(config, rng=seeded_rng)
        for _ in range(4):
            sim.spawner.spawn_at(sim.context, 1, 1)

        assert len(sim.store) == 2


class TestCreateEntity:
    """Test randomized entity construction."""

    def test_aquarium_speed_in_range(self, aquarium):
        for _ in range(50):
            entity = aquarium.spawner.create_entity(aquarium.context, EntityKind.FISH)
            assert 20.0 - 1e-9 <= entity.speed <= 80.0 + 1e-9
            assert 22.0 <= entity.size <= 48.0
            assert entity.color == FISH_COLOR

    def test_random_position_inside_margin(self, aquarium):
        ctx = aquarium.context
        for _ in range(50):
            entity = aquarium.spawner.create_entity(ctx, EntityKind.FISH)
            assert 50 <= entity.pos.x <= ctx.width - 50
            assert 50 <= entity.pos.y <= ctx.height - 50

    def test_tiny_surface_spawns_at_centre(self, aquarium):
        aquarium.input.resize(80, 60)

        entity = aquarium.spawner.create_entity(aquarium.context, EntityKind.FISH)

        assert (entity.pos.x, entity.pos.y) == (40, 30)

    def test_ids_increase(self, aquarium):
        a = aquarium.spawner.create_entity(aquarium.context, EntityKind.FISH)
        b = aquarium.spawner.create_entity(aquarium.context, EntityKind.FISH)

        assert b.entity_id == a.entity_id + 1

    def test_bounce_velocity_scaled_by_speed_factor(self, bounce):
        bounce.controls.speed_factor = 2.0
        for _ in range(50):
            entity = bounce.spawner.create_entity(bounce.context, EntityKind.DOT)
            assert abs(entity.vel.x) <= BOUNCE_SPEED * 2.0
            assert abs(entity.vel.y) <= BOUNCE_SPEED * 2.0
            assert entity.color in BOUNCE_PALETTE

    def test_laser_dots_are_red(self, seeded_rng):
        sim = CatToySimulation(SimulationConfig.for_preset("laser"), rng=seeded_rng)

        entity = sim.spawner.create_entity(sim.context, EntityKind.DOT)

        assert entity.color == LASER_COLOR

    def test_populate_initial_stops_at_cap(self, seeded_rng):
        config = SimulationConfig(spawn=SpawnPolicy(max_entities=3))
        sim = CatToySimulation(config, rng=seeded_rng)

        created = sim.spawner.populate_initial(sim.context, 6)

        assert len(created) == 3
        assert all(e.kind is EntityKind.FISH for e in created)

    def test_seeded_runs_match(self):
        a = CatToySimulation(seed=7)
        b = CatToySimulation(seed=7)
        a.setup()
        b.setup()

        assert [(e.pos, e.vel, e.size) for e in a.store] == [(e.pos, e.vel, e.size) for e in b.store]


class TestValidation:
    """Test invalid construction."""

    def test_missing_rng(self):
        from cattoy.spawner import Spawner

        with pytest.raises(MissingRNGError):
            Spawner(SimulationConfig(), None)

    def test_negative_cap_rejected(self):
        with pytest.raises(ConfigurationError):
            SpawnPolicy(max_entities=-1)

    def test_negative_interval_rejected(self):
        with pytest.raises(ConfigurationError):
            SpawnPolicy(interval_ms=-5)

    def test_non_positive_size_rejected(self):
        with pytest.raises(EntityError):
            Entity(EntityKind.DOT, Vector2(), Vector2(), 0.0)

    def test_kind_parsing(self):
        assert EntityKind.parse("laser") is EntityKind.DOT
        assert EntityKind.parse("Fish") is EntityKind.FISH
        with pytest.raises(EntityError):
            EntityKind.parse("mouse")
