"""Tests for the tri-state field markers."""

import copy
import pickle

import pytest
from pydantic import ValidationError

from clubhouse_sdk.models.fields import (
    RESET,
    RESET_COLOR,
    RESET_ESTIMATE,
    RESET_ID,
    RESET_TIME,
    UNSET,
    ResetType,
    UnsetType,
    is_reset,
    is_unset,
)
from clubhouse_sdk.models.params import (
    UpdateCategoryParams,
    UpdateEpicParams,
    UpdateFileParams,
)


class TestMarkers:
    """Tests for UNSET and RESET."""

    def test_singletons(self):
        """Constructing a marker type again should return the same object."""
        assert UnsetType() is UNSET
        assert ResetType() is RESET

    def test_distinct(self):
        """UNSET and RESET should be different markers."""
        assert UNSET is not RESET
        assert not is_reset(UNSET)
        assert not is_unset(RESET)

    def test_classifiers(self):
        """is_unset and is_reset should recognize their own marker."""
        assert is_unset(UNSET)
        assert is_reset(RESET)
        assert is_reset(ResetType())

    def test_reprs(self):
        """Markers should have readable reprs."""
        assert repr(UNSET) == "UNSET"
        assert repr(RESET) == "RESET"

    def test_copy_keeps_identity(self):
        """copy and deepcopy should return the marker itself."""
        assert copy.copy(RESET) is RESET
        assert copy.deepcopy(RESET) is RESET
        assert copy.deepcopy(UNSET) is UNSET

    def test_pickle_keeps_identity(self):
        """Markers should unpickle to the same singletons."""
        assert pickle.loads(pickle.dumps(RESET)) is RESET
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    def test_legacy_aliases(self):
        """Per-kind reset names should all be RESET."""
        assert RESET_ID is RESET
        assert RESET_ESTIMATE is RESET
        assert RESET_TIME is RESET
        assert RESET_COLOR is RESET

    def test_empty_string_is_a_value(self):
        """An empty string should not be classified as a reset."""
        assert not is_reset("")
        assert not is_unset("")


class TestFieldValidation:
    """Tests for how update params validate tri-state fields."""

    def test_defaults_are_unset(self):
        """Every field should default to UNSET."""
        params = UpdateEpicParams()
        for name in UpdateEpicParams.model_fields:
            assert getattr(params, name) is UNSET

    def test_nullable_accepts_reset(self):
        """A nullable field should accept RESET."""
        params = UpdateCategoryParams(color=RESET)
        assert params.color is RESET

    def test_nullable_accepts_none_as_reset(self):
        """None on a nullable field should become RESET."""
        params = UpdateCategoryParams(color=None)
        assert params.color is RESET

    def test_nullable_accepts_value(self):
        """A nullable field should accept a value."""
        params = UpdateCategoryParams(color="#00ff00")
        assert params.color == "#00ff00"

    def test_nullable_accepts_empty_string(self):
        """An empty string should stay a value on a nullable field."""
        params = UpdateCategoryParams(color="")
        assert params.color == ""

    def test_omittable_rejects_reset(self):
        """A field that cannot be cleared should reject RESET."""
        with pytest.raises(ValidationError) as exc_info:
            UpdateCategoryParams(archived=RESET)
        assert "archived" in str(exc_info.value)

    def test_omittable_rejects_none(self):
        """A field that cannot be cleared should reject None."""
        with pytest.raises(ValidationError):
            UpdateFileParams(name=None)

    def test_assignment_is_validated(self):
        """Assigning RESET to a field that cannot be cleared should fail."""
        params = UpdateEpicParams()
        params.milestone_id = RESET
        assert params.milestone_id is RESET
        with pytest.raises(ValidationError):
            params.name = RESET

    def test_unknown_field_rejected(self):
        """Misspelled fields should not be silently dropped."""
        with pytest.raises(ValidationError):
            UpdateCategoryParams(colour="#fff")

    def test_wrong_value_type_rejected(self):
        """Values should still be type-checked."""
        with pytest.raises(ValidationError):
            UpdateEpicParams(milestone_id="not a number")
