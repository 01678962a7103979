"""Repository webhooks (``/2.0/repositories/{owner}/{repo}/hooks``)."""

from collections.abc import Callable, Mapping
from uuid import UUID

from .api import Api
from .paginator import ResponseCollection, iter_items, wrap
from .request import OperationSpec

VALID_KEY_PARAM_NAMES = ("description", "url", "active", "events")
REQUIRED_KEY_PARAM_NAMES = ("description", "url")

HOOKS_PATH = "/2.0/repositories/{owner}/{repo}/hooks"
HOOK_PATH = HOOKS_PATH + "/{uuid}"

GET = OperationSpec(name="get", verb="GET", path_template=HOOK_PATH, requires_uuid=True)
LIST = OperationSpec(name="list", verb="GET", path_template=HOOKS_PATH)
CREATE = OperationSpec(
    name="create",
    verb="POST",
    path_template=HOOKS_PATH,
    valid_keys=VALID_KEY_PARAM_NAMES,
    required_keys=REQUIRED_KEY_PARAM_NAMES,
)
EDIT = OperationSpec(
    name="edit",
    verb="PUT",
    path_template=HOOK_PATH,
    valid_keys=VALID_KEY_PARAM_NAMES,
    required_keys=REQUIRED_KEY_PARAM_NAMES,
    requires_uuid=True,
)
DELETE = OperationSpec(name="delete", verb="DELETE", path_template=HOOK_PATH, requires_uuid=True)


def _merge(params: Mapping | None, extra: dict) -> dict:
    merged = dict(params or {})
    merged.update(extra)
    return merged


class Webhooks(Api):
    """Create, read, update, delete and list webhooks of a repository.

    Usage::

        hooks = Webhooks(HttpTransport(token="..."))
        hooks.create("alice", "repo1", description="CI", url="https://ci.example.com/hook",
                     events=["repo:push"])

        scoped = hooks.with_context("alice", "repo1")
        for hook in scoped.list():
            print(hook["uuid"])
    """

    def get(self, owner: str | None = None, repo: str | None = None, uuid: str | UUID | None = None,
            params: Mapping | None = None):
        """Get a single webhook by UUID."""
        return self._execute(GET, owner, repo, uuid, params)

    find = get

    def create(self, owner: str | None = None, repo: str | None = None, params: Mapping | None = None,
               **kwargs):
        """Create a webhook.

        Parameters:
            description: A user-defined description of the webhook (required).
            url: The URL Bitbucket posts event payloads to (required).
            active: Whether the hook is active. Bitbucket defaults to true.
            events: Event keys to subscribe to, e.g. ["repo:push", "issue:created"].

        Any other key is dropped.
        """
        return self._execute(CREATE, owner, repo, params=_merge(params, kwargs))

    def edit(self, owner: str | None = None, repo: str | None = None, uuid: str | UUID | None = None,
             params: Mapping | None = None, **kwargs):
        """Update a webhook. Accepts the same parameters as create()."""
        return self._execute(EDIT, owner, repo, uuid, _merge(params, kwargs))

    def delete(self, owner: str | None = None, repo: str | None = None, uuid: str | UUID | None = None,
               params: Mapping | None = None):
        """Delete a webhook. Returns the response body, usually None."""
        return self._execute(DELETE, owner, repo, uuid, params)

    def list(self, owner: str | None = None, repo: str | None = None, params: Mapping | None = None,
             consumer: Callable | None = None, all_pages: bool = False):
        """List the webhooks of a repository.

        Query parameters such as page and pagelen are passed through.
        Returns a ResponseCollection, or None when consumer is given, in which
        case consumer is called once per webhook. With all_pages, the
        following pages are fetched and every webhook is returned.
        """
        response = self._execute(LIST, owner, repo, params=params)
        if not all_pages:
            return wrap(response, consumer)

        items = iter_items(self.transport, response)
        if consumer is None:
            return ResponseCollection(items)
        for item in items:
            consumer(item)
        return None

    all = list
