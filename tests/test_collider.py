import pygame
import pytest

from tilerpg.collider import OUTLINE_COLOUR, Collider, ColliderManager


def test_overlapping_colliders_collide():
    a = Collider(0, 0, 10, 10)
    b = Collider(5, 5, 10, 10)
    assert a.collides_with(b)
    assert b.collides_with(a)


def test_touching_edges_count_as_collision():
    a = Collider(0, 0, 10, 10)
    b = Collider(10, 0, 10, 10)
    assert a.collides_with(b) is True


@pytest.mark.parametrize(
    "other",
    [Collider(11, 0, 5, 5), Collider(0, 11, 5, 5), Collider(-20, 0, 5, 5), Collider(0, -20, 5, 5)],
)
def test_separated_colliders_do_not_collide(other):
    a = Collider(0, 0, 10, 10)
    assert a.collides_with(other) is False
    assert other.collides_with(a) is False


def test_collider_never_collides_with_itself():
    a = Collider(0, 0, 10, 10)
    assert a.collides_with(a) is False


def test_identical_but_distinct_colliders_collide():
    assert Collider(3, 3, 4, 4).collides_with(Collider(3, 3, 4, 4)) is True


def test_defaults():
    c = Collider(1, 2, 3, 4)
    assert (c.show, c.active) == (False, True)


def test_draw_outlines_rectangle():
    surface = pygame.Surface((20, 20))
    surface.fill((0, 0, 0))
    Collider(2, 2, 10, 10).draw(surface)
    assert tuple(surface.get_at((2, 2)))[:3] == OUTLINE_COLOUR
    assert tuple(surface.get_at((7, 7)))[:3] == (0, 0, 0)


def test_manager_keeps_insertion_order():
    manager = ColliderManager()
    colliders = [Collider(i, i, 1, 1) for i in range(3)]
    for c in colliders:
        manager.add(c)
    assert list(manager) == colliders
    assert len(manager) == len(colliders)


def test_manager_remove_uses_identity():
    manager = ColliderManager()
    first = Collider(0, 0, 1, 1)
    twin = Collider(0, 0, 1, 1)
    manager.add(first)
    manager.add(twin)
    manager.remove(twin)
    result = list(manager)
    assert len(result) == 1
    assert result[0] is first


def test_manager_remove_missing_is_ignored():
    manager = ColliderManager()
    kept = Collider(0, 0, 1, 1)
    manager.add(kept)
    manager.remove(Collider(5, 5, 1, 1))
    assert list(manager) == [kept]


def test_iteration_survives_removal_during_loop():
    manager = ColliderManager()
    colliders = [Collider(i, 0, 1, 1) for i in range(4)]
    for c in colliders:
        manager.add(c)
    seen = []
    for c in manager:
        seen.append(c)
        manager.remove(c)
    assert seen == colliders
    assert len(manager) == 0