"""Public models for the Clubhouse SDK.

Request params (``params``), response resources (``resources``) and the
tri-state markers used by partial updates (``fields``).
"""

from clubhouse_sdk.models.fields import (
    RESET,
    RESET_COLOR,
    RESET_ESTIMATE,
    RESET_ID,
    RESET_TIME,
    UNSET,
    Nullable,
    Omittable,
    ResetType,
    UnsetType,
)
from clubhouse_sdk.models.params import (
    CategoryType,
    CreateCategoryParams,
    CreateCommentParams,
    CreateEpicParams,
    CreateLabelParams,
    CreateMilestoneParams,
    CreateProjectParams,
    CreateStoryLinkParams,
    CreateStoryParams,
    CreateTaskParams,
    EpicState,
    FileUpload,
    MilestoneState,
    SearchParams,
    StoryType,
    StoryVerb,
    UpdateCategoryParams,
    UpdateCommentParams,
    UpdateEpicParams,
    UpdateFileParams,
    UpdateLabelParams,
    UpdateMilestoneParams,
    UpdateParams,
    UpdateProjectParams,
    UpdateStoriesParams,
    UpdateStoryParams,
)
from clubhouse_sdk.models.resources import (
    Branch,
    Category,
    Comment,
    Commit,
    Epic,
    EpicStats,
    File,
    Icon,
    Identity,
    Label,
    LabelStats,
    LinkedFile,
    Member,
    Milestone,
    Profile,
    Project,
    ProjectStats,
    PullRequest,
    Repository,
    SearchResults,
    Story,
    StoryLink,
    StorySearch,
    StorySlim,
    Task,
    Team,
    ThreadedComment,
    TypedStoryLink,
    Workflow,
    WorkflowState,
)

__all__ = [
    # Tri-state markers
    "RESET",
    "RESET_COLOR",
    "RESET_ESTIMATE",
    "RESET_ID",
    "RESET_TIME",
    "UNSET",
    "Nullable",
    "Omittable",
    "ResetType",
    "UnsetType",
    # Params
    "CategoryType",
    "CreateCategoryParams",
    "CreateCommentParams",
    "CreateEpicParams",
    "CreateLabelParams",
    "CreateMilestoneParams",
    "CreateProjectParams",
    "CreateStoryLinkParams",
    "CreateStoryParams",
    "CreateTaskParams",
    "EpicState",
    "FileUpload",
    "MilestoneState",
    "SearchParams",
    "StoryType",
    "StoryVerb",
    "UpdateCategoryParams",
    "UpdateCommentParams",
    "UpdateEpicParams",
    "UpdateFileParams",
    "UpdateLabelParams",
    "UpdateMilestoneParams",
    "UpdateParams",
    "UpdateProjectParams",
    "UpdateStoriesParams",
    "UpdateStoryParams",
    # Resources
    "Branch",
    "Category",
    "Comment",
    "Commit",
    "Epic",
    "EpicStats",
    "File",
    "Icon",
    "Identity",
    "Label",
    "LabelStats",
    "LinkedFile",
    "Member",
    "Milestone",
    "Profile",
    "Project",
    "ProjectStats",
    "PullRequest",
    "Repository",
    "SearchResults",
    "Story",
    "StoryLink",
    "StorySearch",
    "StorySlim",
    "Task",
    "Team",
    "ThreadedComment",
    "TypedStoryLink",
    "Workflow",
    "WorkflowState",
]
