"""Unit tests for random quote selection."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from quotebook.picker import random_index


class TestRandomIndex:
    """Tests for random_index()."""

    def test_single_item_always_zero(self) -> None:
        """With one quote the only index is 0."""
        assert all(random_index(1) == 0 for _ in range(20))

    def test_results_in_range(self) -> None:
        """Every draw falls in [0, limit)."""
        draws = {random_index(7) for _ in range(500)}

        assert draws <= set(range(7))

    def test_all_values_reachable(self) -> None:
        """Over many draws every index is produced."""
        draws = {random_index(3) for _ in range(300)}

        assert draws == {0, 1, 2}

    def test_uses_secrets(self) -> None:
        """The draw is delegated to secrets.randbelow."""
        with patch("quotebook.picker.secrets.randbelow", return_value=4) as mock_rand:
            assert random_index(10) == 4

        mock_rand.assert_called_once_with(10)

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_raises(self, limit: int) -> None:
        """An empty range is rejected."""
        with pytest.raises(ValueError, match="limit must be positive"):
            random_index(limit)
