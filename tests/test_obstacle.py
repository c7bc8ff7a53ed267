import random

import pytest

from flappy.bird import Bird
from flappy.obstacle import Obstacle, ObstacleStream


def make_stream(**kwargs):
    kwargs.setdefault("rng", random.Random(42))
    return ObstacleStream(**kwargs)


def test_spawn_enters_from_right_edge():
    stream = make_stream(playfield_width=480)
    obstacle = stream.spawn()
    assert obstacle.x == 480
    assert obstacle.scored is False
    assert list(stream) == [obstacle]


def test_gap_geometry_from_offset():
    obstacle = Obstacle(100, gap_offset=0, playfield_height=640, gap_height=150)
    assert obstacle.gap_top == 320
    assert obstacle.gap_bottom == 470

    obstacle = Obstacle(100, gap_offset=-200, playfield_height=640, gap_height=150)
    assert obstacle.gap_top == 120
    assert obstacle.gap_bottom == 270


def test_gap_always_inside_margins():
    rnd = random.Random(2024)
    for _ in range(200):
        height = rnd.randint(200, 1200)
        gap = rnd.randint(20, height // 2)
        upper = rnd.randint(0, (height - gap) // 2)
        lower = rnd.randint(0, height - gap - upper)
        stream = ObstacleStream(playfield_width=rnd.randint(100, 900), playfield_height=height,
                                gap_height=gap, upper_margin=upper, lower_margin=lower,
                                rng=random.Random(rnd.randrange(10**9)))
        for _ in range(25):
            obstacle = stream.spawn()
            assert obstacle.gap_top >= upper
            assert obstacle.gap_bottom <= height - lower


def test_gap_with_zero_slack_is_deterministic():
    stream = make_stream(playfield_height=400, gap_height=200, upper_margin=100, lower_margin=100)
    for _ in range(5):
        obstacle = stream.spawn()
        assert obstacle.gap_top == pytest.approx(100)
        assert obstacle.gap_bottom == pytest.approx(300)


@pytest.mark.parametrize("kwargs", [
    {"playfield_height": 300, "gap_height": 150, "upper_margin": 80, "lower_margin": 80},
    {"gap_height": 0},
    {"pipe_width": -1},
    {"playfield_width": 0},
    {"upper_margin": -5},
])
def test_bad_geometry_fails_fast(kwargs):
    with pytest.raises(ValueError):
        ObstacleStream(**kwargs)


def test_advance_moves_all_by_game_speed():
    stream = make_stream(game_speed=2)
    a = stream.spawn(gap_offset=0)
    a.x = 300
    b = stream.spawn(gap_offset=0)
    stream.advance()
    assert a.x == 298
    assert b.x == 478


def test_advance_prunes_offscreen_and_keeps_order():
    stream = make_stream(pipe_width=60, game_speed=2)
    gone = stream.spawn(gap_offset=0)
    gone.x = -59
    edge = stream.spawn(gap_offset=0)
    edge.x = -57
    fresh = stream.spawn(gap_offset=0)
    stream.advance()
    assert list(stream) == [edge, fresh]
    assert len(stream) == 2


def test_centered_gap_collision_scenario():
    # playfield 640, gap 150 centrado: gap 320..470
    stream = make_stream(playfield_height=640, gap_height=150)
    obstacle = stream.spawn(gap_offset=0)
    obstacle.x = 140  # sobrepõe horizontalmente o pássaro em x=150
    bird = Bird(playfield_height=640)

    bird.pos.y = 400
    assert stream.check_collision(bird) is False

    bird.pos.y = 0
    assert stream.check_collision(bird) is True


def test_hitbox_leaving_gap_bottom_collides():
    stream = make_stream(playfield_height=640, gap_height=150)
    obstacle = stream.spawn(gap_offset=0)
    obstacle.x = 140
    bird = Bird(playfield_height=640)
    bird.pos.y = 450   # caixa 450..470 ainda cabe
    assert stream.check_collision(bird) is False
    bird.pos.y = 451   # caixa passa de 470
    assert stream.check_collision(bird) is True


def test_no_collision_without_horizontal_overlap():
    stream = make_stream()
    obstacle = stream.spawn(gap_offset=0)
    bird = Bird()
    bird.pos.y = 30  # fora da abertura, mas longe do cano

    obstacle.x = 170  # borda esquerda == borda direita da caixa
    assert stream.check_collision(bird) is False
    obstacle.x = 90   # borda direita == x do pássaro
    assert stream.check_collision(bird) is False
    obstacle.x = 91
    assert stream.check_collision(bird) is True


def test_scoring_happens_once_per_obstacle():
    stream = make_stream(pipe_width=60)
    bird = Bird()
    obstacle = stream.spawn(gap_offset=0)

    obstacle.x = 90   # borda traseira em 150: ainda não passou
    assert stream.check_scoring(bird) == 0
    obstacle.x = 89
    assert stream.check_scoring(bird) == 1
    assert obstacle.scored is True
    assert stream.check_scoring(bird) == 0
    obstacle.x = 10
    assert stream.check_scoring(bird) == 0


def test_scoring_counts_each_passed_obstacle():
    stream = make_stream()
    bird = Bird()
    for x in (0, 50, 200):
        stream.spawn(gap_offset=0).x = x
    assert stream.check_scoring(bird) == 2
    assert [o.scored for o in stream] == [True, True, False]


def test_clear_empties_stream():
    stream = make_stream()
    for _ in range(3):
        stream.spawn()
    stream.clear()
    assert len(stream) == 0
