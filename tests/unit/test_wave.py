import math

import numpy as np
import pytest

from astrolingua.config import GameConfig, LevelConfig
from astrolingua.errors import InvalidVocabularyError
from astrolingua.gen.wave import generate_wave, wave_size
from astrolingua.vocab import DEFAULT_VOCAB, VocabPair

SHIP = np.array([480.0, 300.0])


def test_wave_size_formula(config):
    assert wave_size(1, config) == 5
    assert wave_size(2, config) == 7  # 6.5 rounds up
    assert wave_size(3, config) == 8
    assert wave_size(4, config) == 10


def test_wave_size_monotonic(config):
    sizes = [wave_size(level, config) for level in range(1, 40)]
    assert sizes == sorted(sizes)


def test_wave_size_floor_and_clamp():
    cfg = GameConfig(level=LevelConfig(base_count=0, growth=0.0))
    assert wave_size(1, cfg) == 3
    assert wave_size(0, GameConfig()) == 5
    assert wave_size(-7, GameConfig()) == 5


@pytest.mark.parametrize("level", [1, 2, 5, 12])
def test_exactly_one_correct_matching_prompt(config, level):
    for seed in range(20):
        wave = generate_wave(level, DEFAULT_VOCAB, SHIP, np.random.default_rng(seed), config)
        correct = [t for t in wave.targets if t.is_correct]
        assert len(correct) == 1
        assert correct[0].text == wave.prompt.zh
        assert wave.prompt in DEFAULT_VOCAB
        assert len(wave.targets) == wave_size(level, config)
        assert wave.level == level


def test_decoys_drawn_from_vocabulary(config, vocab):
    wave = generate_wave(3, vocab, SHIP, np.random.default_rng(3), config)
    zh = {p.zh for p in vocab}
    assert all(t.text in zh for t in wave.targets)
    assert all(t.alive for t in wave.targets)


def test_single_entry_vocab_all_match(config):
    only = (VocabPair("cat", "猫"),)
    wave = generate_wave(6, only, SHIP, np.random.default_rng(0), config)
    assert all(t.text == "猫" for t in wave.targets)
    assert sum(t.is_correct for t in wave.targets) == 1


def test_spawns_outside_field(config):
    pad = config.target.spawn_padding
    wave = generate_wave(8, DEFAULT_VOCAB, SHIP, np.random.default_rng(5), config)
    for t in wave.targets:
        x, y = float(t.pos[0]), float(t.pos[1])
        on_edge = (
            (y == -pad and 0.0 <= x <= config.width)
            or (y == config.height + pad and 0.0 <= x <= config.width)
            or (x == -pad and 0.0 <= y <= config.height)
            or (x == config.width + pad and 0.0 <= y <= config.height)
        )
        assert on_edge, (x, y)


def test_size_and_speed_scale_with_level(config):
    tc = config.target
    for level in (1, 10):
        wave = generate_wave(level, DEFAULT_VOCAB, SHIP, np.random.default_rng(level), config)
        size_scale = 1 + level * config.level.size_growth
        speed_scale = 1 + level * config.level.speed_growth
        for t in wave.targets:
            assert tc.min_size * size_scale <= t.size <= tc.max_size * size_scale
            speed = float(np.linalg.norm(t.vel))
            assert tc.base_speed * speed_scale * tc.speed_mult_min - 1e-9 <= speed
            assert speed <= tc.base_speed * speed_scale * tc.speed_mult_max + 1e-9
            assert abs(t.spin) <= tc.max_spin
            assert 0.0 <= t.angle < 2 * math.pi


def test_velocity_aims_near_ship(config):
    wave = generate_wave(4, DEFAULT_VOCAB, SHIP, np.random.default_rng(11), config)
    for t in wave.targets:
        to_ship = math.atan2(SHIP[1] - t.pos[1], SHIP[0] - t.pos[0])
        heading = math.atan2(t.vel[1], t.vel[0])
        diff = (heading - to_ship + math.pi) % (2 * math.pi) - math.pi
        assert abs(diff) <= config.target.aim_jitter + 1e-9


def test_same_seed_same_wave(config):
    a = generate_wave(3, DEFAULT_VOCAB, SHIP, np.random.default_rng(42), config)
    b = generate_wave(3, DEFAULT_VOCAB, SHIP, np.random.default_rng(42), config)
    assert a.prompt == b.prompt
    for ta, tb in zip(a.targets, b.targets):
        np.testing.assert_array_equal(ta.pos, tb.pos)
        np.testing.assert_array_equal(ta.vel, tb.vel)
        assert (ta.text, ta.is_correct, ta.size) == (tb.text, tb.is_correct, tb.size)


@pytest.mark.parametrize("bad", [(), [{"en": "cat"}], [{"en": "cat", "zh": ""}]])
def test_invalid_vocabulary(config, bad):
    with pytest.raises(InvalidVocabularyError):
        generate_wave(1, bad, SHIP, np.random.default_rng(0), config)
