"""Tests for the freshness reducer and action constructors."""

from types import SimpleNamespace

import pytest

from cache_freshness.application.actions import update_key, invalidate_key
from cache_freshness.application.reducer import transition
from cache_freshness.config.constants import MIN_VALID_KEY, UNSET_KEY_TIME
from cache_freshness.core.value_objects.freshness_action import (
    ActionType,
    FreshnessAction,
    get_action_type,
)


class TestActionConstructors:
    """Test cases for the plain action constructors."""

    def test_update_key(self):
        """Test UPDATE action shape."""
        action = update_key("test-key")

        assert action.type == ActionType.UPDATE
        assert action.key == "test-key"

    def test_invalidate_key(self):
        """Test INVALIDATE action shape."""
        action = invalidate_key("test-key")

        assert action.type == ActionType.INVALIDATE
        assert action.key == "test-key"

    def test_action_is_immutable(self):
        """Test that actions cannot be modified after creation."""
        action = update_key("test-key")

        with pytest.raises(AttributeError):
            action.key = "other"

    def test_action_rejects_non_string_key(self):
        """Test key type validation."""
        with pytest.raises(TypeError):
            FreshnessAction(ActionType.UPDATE, 42)

    def test_to_dict(self):
        """Test action serialization."""
        assert invalidate_key("a").to_dict() == {
            "type": "FreshnessActions.INVALIDATE",
            "key": "a",
        }

    def test_get_action_type_accepts_mappings_and_objects(self):
        """Test reading type tags from foreign action shapes."""
        assert get_action_type({"type": "@@INIT"}) == "@@INIT"
        assert get_action_type(SimpleNamespace(type="other")) == "other"
        assert get_action_type(object()) is None


class TestTransition:
    """Test cases for the transition function."""

    def test_initial_state_is_empty(self, timestamps):
        """Test that a None state starts out empty."""
        assert transition(None, {"type": "@@INIT"}, timestamps) == {}

    def test_update_sets_fresh_timestamp(self, timestamps):
        """Test UPDATE writes a valid key time."""
        state = transition({}, update_key("test-key"), timestamps)

        assert list(state) == ["test-key"]
        assert state["test-key"] >= MIN_VALID_KEY

    def test_update_does_not_mutate_input(self, timestamps):
        """Test that UPDATE returns a new mapping."""
        original = {"other": 5}

        state = transition(original, update_key("test-key"), timestamps)

        assert original == {"other": 5}
        assert state is not original
        assert state["other"] == 5

    def test_update_issues_increasing_key_times(self, timestamps):
        """Test successive updates are totally ordered."""
        state = {}
        state = transition(state, update_key("test-key1"), timestamps)
        state = transition(state, update_key("test-key2"), timestamps)
        state = transition(state, update_key("test-key3"), timestamps)

        assert state["test-key1"] < state["test-key2"] < state["test-key3"]

    def test_update_existing_key_moves_forward(self, timestamps):
        """Test re-updating a key raises its time."""
        state = transition({}, update_key("k"), timestamps)
        first = state["k"]

        state = transition(state, update_key("k"), timestamps)

        assert state["k"] > first

    def test_invalidate_sets_sentinel(self, timestamps):
        """Test INVALIDATE expires a key."""
        state = transition({}, update_key("k"), timestamps)

        state = transition(state, invalidate_key("k"), timestamps)

        assert state["k"] == UNSET_KEY_TIME

    def test_invalidate_unknown_key(self, timestamps):
        """Test INVALIDATE on a key that was never written."""
        state = transition({}, invalidate_key("missing"), timestamps)

        assert state == {"missing": UNSET_KEY_TIME}

    def test_invalidate_consumes_no_timestamp(self, timestamps):
        """Test INVALIDATE leaves the high water mark alone."""
        transition({}, update_key("k"), timestamps)
        mark = timestamps.high_water_mark

        transition({"k": mark}, invalidate_key("k"), timestamps)

        assert timestamps.high_water_mark == mark

    @pytest.mark.parametrize("action", [
        {"type": "unknown"},
        {"type": "random-action", "key": "k"},
        SimpleNamespace(type="random-action", key="k"),
        object(),
        {"type": ActionType.UPDATE.value},
        {"type": ActionType.INVALIDATE.value, "key": None},
        SimpleNamespace(type=ActionType.UPDATE, key=None),
    ])
    def test_unknown_action_returns_identical_state(self, timestamps, action):
        """Test foreign actions are a no-op returning the same object."""
        state = {"k": 10}

        assert transition(state, action, timestamps) is state

    def test_mapping_actions_with_known_types(self, timestamps):
        """Test plain dict actions carrying a known type tag."""
        state = transition({}, {"type": ActionType.UPDATE.value, "key": "k"}, timestamps)

        assert state["k"] >= MIN_VALID_KEY

    def test_update_lands_above_stored_key_times(self, timestamps):
        """Test UPDATE never writes below times already in the state."""
        state = {"dep": 5000}

        state = transition(state, update_key("entry"), timestamps)

        assert state["entry"] > 5000
