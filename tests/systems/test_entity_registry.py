"""
test_entity_registry.py
-----------------------
Unit tests for the live entity collection.
"""


def test_add_is_idempotent(registry, place_player):
    player = place_player(100, 100)
    registry.add(player)

    assert len(registry) == 1
    assert player in registry


def test_discard_reports_membership(registry, place_player):
    player = place_player(100, 100)

    assert registry.discard(player) is True
    assert registry.discard(player) is False
    assert player not in registry


def test_others_excludes_self(registry, place_player):
    a = place_player(100, 100)
    b = place_player(300, 100)
    c = place_player(500, 100)

    assert registry.others(b) == [a, c]


def test_iteration_keeps_insertion_order_and_allows_removal(registry, place_player):
    players = [place_player(100 + 100 * i, 100) for i in range(4)]

    seen = []
    for player in registry:
        seen.append(player)
        registry.discard(player)

    assert seen == players
    assert len(registry) == 0
