"""Client facade tying settings, transport and resource bindings together."""

from .config import Settings
from .transport import HttpTransport, Transport
from .webhooks import Webhooks


class Bitbucket:
    """Entry point of the binding.

    Example:
        bitbucket = Bitbucket(Settings(token="..."))
        bitbucket.webhooks.list("alice", "repo1")

        repo = bitbucket.scoped("alice", "repo1")
        repo.webhooks.get(uuid="{...}")
    """

    def __init__(self, settings: Settings | None = None, transport: Transport | None = None):
        self.settings = settings or Settings()
        self.transport = transport or HttpTransport(
            base_url=self.settings.base_url,
            token=self.settings.token,
            username=self.settings.username,
            app_password=self.settings.app_password,
            timeout=self.settings.timeout,
        )

    @property
    def webhooks(self) -> Webhooks:
        return Webhooks(self.transport, owner=self.settings.owner, repo=self.settings.repo)

    def scoped(self, owner: str, repo: str) -> "Bitbucket":
        """Return a new client whose bindings default to owner/repo."""
        settings = self.settings.model_copy(update={"owner": owner, "repo": repo})
        return Bitbucket(settings, transport=self.transport)
