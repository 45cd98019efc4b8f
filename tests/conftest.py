"""Pytest configuration and fixtures."""

import pytest

from death_mountain_renderer.models import AdventurerSnapshot, Bag, Equipment, Item, Stats


@pytest.fixture
def basic_stats():
    """Stats with a little of everything."""
    return Stats(strength=5, dexterity=3, vitality=2, intelligence=1, wisdom=4, charisma=2, luck=7)


@pytest.fixture
def full_equipment():
    """One item in every equipment slot."""
    return Equipment(
        weapon=Item(id=42, xp=400),
        chest=Item(id=49, xp=25),
        head=Item(id=82, xp=1),
        waist=Item(id=27, xp=0),
        foot=Item(id=92, xp=10),
        hand=Item(id=69, xp=100),
        neck=Item(id=1, xp=4),
        ring=Item(id=8, xp=9),
    )


@pytest.fixture
def sample_adventurer(basic_stats, full_equipment):
    """Healthy adventurer out of battle."""
    return AdventurerSnapshot(
        name="Bob",
        health=130,
        xp=250,
        level=15,
        gold=120,
        beast_health=0,
        stat_upgrades_available=1,
        stats=basic_stats,
        equipment=full_equipment,
        bag=Bag(items=[Item(id=12, xp=3), Item(id=77), Item(id=200)]),
        item_specials_seed=4242,
        action_count=77,
    )


@pytest.fixture
def battle_adventurer(sample_adventurer):
    """Same adventurer fighting a beast."""
    return sample_adventurer.model_copy(update={"beast_health": 35})


@pytest.fixture
def dead_adventurer(sample_adventurer):
    """Same adventurer with no health left."""
    return sample_adventurer.model_copy(update={"health": 0})


@pytest.fixture
def empty_adventurer():
    """Adventurer with every field at its default."""
    return AdventurerSnapshot(health=1)
