"""User-facing client for the Clubhouse API.

Example usage:
    from clubhouse_sdk import RESET, ClubhouseClient, UpdateCategoryParams

    with ClubhouseClient.from_env() as client:
        category = client.categories.get(17)

        # Archive the category and clear its color in one request
        client.categories.update(
            category.id,
            UpdateCategoryParams(archived=True, color=RESET),
        )
"""

from types import TracebackType

import httpx

from clubhouse_sdk._internal.dispatch import RequestDispatcher
from clubhouse_sdk._internal.http import create_http_client
from clubhouse_sdk._internal.ratelimit import RateLimiter, new_rate_limiter
from clubhouse_sdk.config import ClientConfig
from clubhouse_sdk.resources import (
    Categories,
    Epics,
    Files,
    Labels,
    Members,
    Milestones,
    Projects,
    Repositories,
    Stories,
    StoryLinks,
    Teams,
)


class ClubhouseClient:
    """Client for the Clubhouse v2 REST API.

    Every operation is synchronous and performs one HTTP round trip (paginated
    search performs one per page). Requests wait on the client's rate limiter
    first. Errors are raised as ``ClubhouseError`` subclasses; nothing is
    retried.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.Client | None = None,
        limiter: RateLimiter | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration.
            http_client: Optional httpx client to send requests with. The
                caller keeps ownership of a client passed in here.
            limiter: Optional rate limiter. Defaults to one built from
                ``config.rate_limit``.
        """
        self._config = config
        self._owns_http_client = http_client is None
        self._http = http_client or create_http_client(timeout=config.timeout)
        self._limiter = limiter or new_rate_limiter(config.rate_limit)
        self._dispatcher = RequestDispatcher(
            http_client=self._http,
            limiter=self._limiter,
            auth_token=config.auth_token,
            root_url=config.root_url,
            version=config.version,
            debug=config.debug,
        )

        self._categories = Categories(self._dispatcher)
        self._epics = Epics(self._dispatcher)
        self._files = Files(self._dispatcher, test_mode=config.test_mode)
        self._labels = Labels(self._dispatcher)
        self._members = Members(self._dispatcher)
        self._milestones = Milestones(self._dispatcher)
        self._projects = Projects(self._dispatcher)
        self._repositories = Repositories(self._dispatcher)
        self._stories = Stories(self._dispatcher)
        self._story_links = StoryLinks(self._dispatcher)
        self._teams = Teams(self._dispatcher)

    @classmethod
    def from_env(cls) -> "ClubhouseClient":
        """Create a client configured from environment variables.

        See ``ClientConfig.from_env`` for the variables read.

        Raises:
            ClubhouseConfigError: If CLUBHOUSE_API_TOKEN is missing.
        """
        return cls(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def dispatcher(self) -> RequestDispatcher:
        """Low-level dispatcher, for endpoints without a resource method."""
        return self._dispatcher

    # =========================================================================
    # Resources
    # =========================================================================

    @property
    def categories(self) -> Categories:
        return self._categories

    @property
    def epics(self) -> Epics:
        return self._epics

    @property
    def files(self) -> Files:
        return self._files

    @property
    def labels(self) -> Labels:
        return self._labels

    @property
    def members(self) -> Members:
        return self._members

    @property
    def milestones(self) -> Milestones:
        return self._milestones

    @property
    def projects(self) -> Projects:
        return self._projects

    @property
    def repositories(self) -> Repositories:
        return self._repositories

    @property
    def stories(self) -> Stories:
        return self._stories

    @property
    def story_links(self) -> StoryLinks:
        return self._story_links

    @property
    def teams(self) -> Teams:
        return self._teams

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the HTTP client, unless it was passed in by the caller."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "ClubhouseClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
