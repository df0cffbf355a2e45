"""Request params for the Clubhouse API.

Create params are plain models: ``None`` fields are left out of the request.

Update params are partial updates. Their fields default to ``UNSET`` and are
only sent when set. Fields typed ``Nullable`` also accept ``RESET`` (or
``None``) to clear the stored value. Fields are declared in wire-key order,
which is the key order of the encoded body.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import IO, Literal

from pydantic import BaseModel, ConfigDict, Field

from clubhouse_sdk.models.fields import UNSET, Nullable, Omittable

# =============================================================================
# Enumerations
# =============================================================================

CategoryType = Literal["milestone"]
EpicState = Literal["to do", "in progress", "done"]
MilestoneState = Literal["to do", "in progress", "done"]
StoryType = Literal["bug", "chore", "feature"]
StoryVerb = Literal["blocks", "duplicates", "relates to"]

# =============================================================================
# Create Params
# =============================================================================


class CreateCategoryParams(BaseModel):
    """Payload for creating a Category.

    Using a name that already exists fails with an UnprocessableError.
    """

    color: str | None = None
    external_id: str | None = None
    name: str
    type: CategoryType = "milestone"


class CreateCommentParams(BaseModel):
    """Payload for creating a comment on an Epic or Story."""

    author_id: str | None = None
    created_at: datetime | None = None
    external_id: str | None = None
    text: str
    updated_at: datetime | None = None


class UpdateCommentParams(BaseModel):
    """Payload for replacing the text of a comment."""

    text: str


class CreateLabelParams(BaseModel):
    """Payload for creating a Label."""

    color: str | None = None
    external_id: str | None = None
    name: str


class CreateEpicParams(BaseModel):
    """Payload for creating an Epic."""

    completed_at_override: datetime | None = None
    created_at: datetime | None = None
    deadline: datetime | None = None
    description: str | None = None
    external_id: str | None = None
    follower_ids: list[str] | None = None
    labels: list[CreateLabelParams] | None = None
    milestone_id: int | None = None
    name: str
    owner_ids: list[str] | None = None
    started_at_override: datetime | None = None
    state: EpicState | None = None
    updated_at: datetime | None = None


class CreateMilestoneParams(BaseModel):
    """Payload for creating a Milestone."""

    categories: list[CreateCategoryParams] | None = None
    completed_at_override: datetime | None = None
    description: str | None = None
    name: str
    started_at_override: datetime | None = None
    state: MilestoneState | None = None


class CreateProjectParams(BaseModel):
    """Payload for creating a Project."""

    abbreviation: str | None = None
    color: str | None = None
    created_at: datetime | None = None
    description: str | None = None
    external_id: str | None = None
    follower_ids: list[str] | None = None
    iteration_length: int | None = None
    name: str
    start_time: datetime | None = None
    team_id: int | None = None
    updated_at: datetime | None = None


class CreateStoryLinkParams(BaseModel):
    """Payload for linking two stories: subject -> verb -> object."""

    object_id: int
    subject_id: int
    verb: StoryVerb


class CreateTaskParams(BaseModel):
    """Payload for creating a Task on a Story."""

    complete: bool | None = None
    created_at: datetime | None = None
    description: str
    external_id: str | None = None
    owner_ids: list[str] | None = None
    updated_at: datetime | None = None


class CreateStoryParams(BaseModel):
    """Payload for creating a Story, alone or in bulk."""

    comments: list[CreateCommentParams] | None = None
    completed_at_override: datetime | None = None
    created_at: datetime | None = None
    deadline: datetime | None = None
    description: str | None = None
    epic_id: int | None = None
    estimate: int | None = None
    external_id: str | None = None
    file_ids: list[int] | None = None
    follower_ids: list[str] | None = None
    labels: list[CreateLabelParams] | None = None
    linked_file_ids: list[int] | None = None
    name: str
    owner_ids: list[str] | None = None
    project_id: int
    requested_by_id: str | None = None
    started_at_override: datetime | None = None
    story_links: list[CreateStoryLinkParams] | None = None
    story_type: StoryType | None = None
    tasks: list[CreateTaskParams] | None = None
    updated_at: datetime | None = None
    workflow_state_id: int | None = None


class SearchParams(BaseModel):
    """Payload for a story search.

    ``next`` is the continuation token of the page to fetch; leave it unset
    for the first page.
    """

    query: str
    page_size: int | None = Field(default=None, ge=1, le=25)
    next: str | None = None


@dataclass
class FileUpload:
    """A file to upload: its name and a readable binary stream."""

    name: str
    file: IO[bytes]


# =============================================================================
# Update Params
# =============================================================================


class UpdateParams(BaseModel):
    """Base class for partial update params.

    Every field defaults to UNSET. Assignment is validated, so a field that
    cannot be cleared never holds RESET.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class UpdateCategoryParams(UpdateParams):
    archived: Omittable[bool] = UNSET
    color: Nullable[str] = UNSET
    name: Omittable[str] = UNSET


class UpdateEpicParams(UpdateParams):
    after_id: Omittable[int] = UNSET
    archived: Omittable[bool] = UNSET
    before_id: Omittable[int] = UNSET
    completed_at_override: Nullable[datetime] = UNSET
    deadline: Nullable[datetime] = UNSET
    description: Omittable[str] = UNSET
    follower_ids: Omittable[list[str]] = UNSET
    labels: Omittable[list[CreateLabelParams]] = UNSET
    milestone_id: Nullable[int] = UNSET
    name: Omittable[str] = UNSET
    owner_ids: Omittable[list[str]] = UNSET
    started_at_override: Nullable[datetime] = UNSET
    state: Omittable[EpicState] = UNSET


class UpdateFileParams(UpdateParams):
    created_at: Omittable[datetime] = UNSET
    description: Omittable[str] = UNSET
    external_id: Omittable[str] = UNSET
    name: Omittable[str] = UNSET
    updated_at: Omittable[datetime] = UNSET
    uploader_id: Omittable[str] = UNSET


class UpdateLabelParams(UpdateParams):
    archived: Omittable[bool] = UNSET
    color: Nullable[str] = UNSET
    name: Omittable[str] = UNSET


class UpdateMilestoneParams(UpdateParams):
    after_id: Omittable[int] = UNSET
    before_id: Omittable[int] = UNSET
    categories: Omittable[list[CreateCategoryParams]] = UNSET
    completed_at_override: Nullable[datetime] = UNSET
    description: Omittable[str] = UNSET
    name: Omittable[str] = UNSET
    started_at_override: Nullable[datetime] = UNSET
    state: Omittable[MilestoneState] = UNSET


class UpdateProjectParams(UpdateParams):
    abbreviation: Omittable[str] = UNSET
    archived: Omittable[bool] = UNSET
    color: Nullable[str] = UNSET
    days_to_thermometer: Omittable[int] = UNSET
    description: Omittable[str] = UNSET
    follower_ids: Omittable[list[str]] = UNSET
    name: Omittable[str] = UNSET
    show_thermometer: Omittable[bool] = UNSET
    team_id: Omittable[int] = UNSET


class UpdateStoryParams(UpdateParams):
    after_id: Omittable[int] = UNSET
    archived: Omittable[bool] = UNSET
    before_id: Omittable[int] = UNSET
    branch_ids: Omittable[list[int]] = UNSET
    commit_ids: Omittable[list[int]] = UNSET
    completed_at_override: Nullable[datetime] = UNSET
    deadline: Nullable[datetime] = UNSET
    description: Omittable[str] = UNSET
    epic_id: Nullable[int] = UNSET
    estimate: Nullable[int] = UNSET
    file_ids: Omittable[list[int]] = UNSET
    follower_ids: Omittable[list[str]] = UNSET
    labels: Omittable[list[CreateLabelParams]] = UNSET
    linked_file_ids: Omittable[list[int]] = UNSET
    name: Omittable[str] = UNSET
    owner_ids: Omittable[list[str]] = UNSET
    project_id: Omittable[int] = UNSET
    requested_by_id: Omittable[str] = UNSET
    started_at_override: Nullable[datetime] = UNSET
    story_type: Omittable[StoryType] = UNSET
    workflow_state_id: Omittable[int] = UNSET


class UpdateStoriesParams(UpdateParams):
    """Bulk update applied to every story in ``story_ids``."""

    after_id: Omittable[int] = UNSET
    archived: Omittable[bool] = UNSET
    before_id: Omittable[int] = UNSET
    deadline: Nullable[datetime] = UNSET
    epic_id: Nullable[int] = UNSET
    estimate: Nullable[int] = UNSET
    follower_ids_add: Omittable[list[str]] = UNSET
    follower_ids_remove: Omittable[list[str]] = UNSET
    labels_add: Omittable[list[CreateLabelParams]] = UNSET
    labels_remove: Omittable[list[CreateLabelParams]] = UNSET
    owner_ids_add: Omittable[list[str]] = UNSET
    owner_ids_remove: Omittable[list[str]] = UNSET
    project_id: Omittable[int] = UNSET
    requested_by_id: Omittable[str] = UNSET
    story_ids: list[int]
    story_type: Omittable[StoryType] = UNSET
    workflow_state_id: Omittable[int] = UNSET
