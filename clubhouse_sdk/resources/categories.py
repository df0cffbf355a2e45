"""Category operations."""

from __future__ import annotations

from clubhouse_sdk.models.params import CreateCategoryParams, UpdateCategoryParams
from clubhouse_sdk.models.resources import Category
from clubhouse_sdk.resources._base import ResourceGroup


class Categories(ResourceGroup):
    """Categories group Milestones."""

    def list(self) -> list[Category]:
        """List all categories and their attributes."""
        return self._request("GET", "categories", list[Category])

    def get(self, category_id: int) -> Category:
        """Get a category by ID."""
        return self._request("GET", f"categories/{category_id}", Category)

    def create(self, params: CreateCategoryParams) -> Category:
        """Create a category.

        Reusing the name of an existing category fails with an
        UnprocessableError.
        """
        return self._request("POST", "categories", Category, params)

    def update(self, category_id: int, params: UpdateCategoryParams) -> Category:
        """Update a category.

        Only the fields set on ``params`` are changed; set ``color=RESET``
        to clear the color.
        """
        return self._request("PUT", f"categories/{category_id}", Category, params)

    def delete(self, category_id: int) -> None:
        """Delete a category."""
        self._delete(f"categories/{category_id}")
