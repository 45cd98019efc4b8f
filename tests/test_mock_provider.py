"""Tests for MockAdventurerProvider."""

import pytest

from death_mountain_renderer.engine.item_catalog import ItemCatalog
from death_mountain_renderer.engine.page_state import AdventurerState, PageStateMachine
from death_mountain_renderer.providers.mock_provider import MOCK_NAMES, MockAdventurerProvider


@pytest.fixture
def provider():
    """Mock provider."""
    return MockAdventurerProvider()


class TestMockAdventurerProvider:
    """Test suite for MockAdventurerProvider."""

    def test_deterministic(self, provider):
        """Test the same token always gives the same adventurer."""
        assert provider.get_adventurer(42) == provider.get_adventurer(42)

    def test_names(self, provider):
        """Test names cycle through the mock list."""
        assert provider.get_adventurer_name(0) == MOCK_NAMES[0]
        assert provider.get_adventurer(1).name == MOCK_NAMES[1]

    @pytest.mark.parametrize(
        "token_id,state",
        [(1, AdventurerState.NORMAL), (7, AdventurerState.IN_COMBAT), (11, AdventurerState.DEAD), (77, AdventurerState.DEAD)],
    )
    def test_states(self, provider, token_id, state):
        """Test multiples of 7 fight and multiples of 11 are dead."""
        assert PageStateMachine.adventurer_state(provider.get_adventurer(token_id)) == state

    @pytest.mark.parametrize("token_id", range(0, 30))
    def test_equipment_fits_slots(self, provider, token_id):
        """Test every equipped item is a catalog item worn in its own slot."""
        snapshot = provider.get_adventurer(token_id)
        for slot, item in snapshot.equipment.slots():
            view = ItemCatalog.resolve_item(item)
            assert view.is_known
            assert view.slot == slot

    def test_health_within_max(self, provider):
        """Test health never exceeds max health."""
        for token_id in range(50):
            snapshot = provider.get_adventurer(token_id)
            assert 0 <= snapshot.health <= snapshot.max_health

    def test_large_token_id(self, provider):
        """Test 64-bit token ids build a valid snapshot."""
        assert provider.get_adventurer(2**64 - 1).action_count < 2**32

    def test_negative_token_id(self, provider):
        """Test negative token ids are rejected."""
        with pytest.raises(ValueError):
            provider.get_adventurer(-1)
