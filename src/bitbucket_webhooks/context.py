"""Identifying context of a request: owner, repository and item identifier."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .errors import MissingContextError, MissingIdentifierError


class ResourceContext(BaseModel):
    """Owner/repository pair plus the optional per-item identifier."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    uuid: str | None = None


def validate_context(owner, repo) -> None:
    """Fail when owner or repo is None or a blank string."""
    if not _is_present(owner) or not _is_present(repo):
        raise MissingContextError(
            f"Owner and repository must be provided (got owner={owner!r}, repo={repo!r})"
        )


def validate_presence(identifier) -> None:
    """Fail when a per-item identifier is None or a blank string."""
    if not _is_present(identifier):
        raise MissingIdentifierError()


def resolve_context(
    owner: str | None,
    repo: str | None,
    default_owner: str | None = None,
    default_repo: str | None = None,
    uuid: str | UUID | None = None,
    requires_uuid: bool = False,
) -> ResourceContext:
    """Build a ResourceContext, preferring explicit values over scoped defaults.

    Non-string values are converted with str(); a uuid.UUID is written in
    Bitbucket's braced form, ``{1234...}``.
    """
    owner = owner if _is_present(owner) else default_owner
    repo = repo if _is_present(repo) else default_repo
    validate_context(owner, repo)
    if requires_uuid:
        validate_presence(uuid)
    return ResourceContext(
        owner=str(owner),
        repo=str(repo),
        uuid=_identifier(uuid) if uuid is not None else None,
    )


def _identifier(value) -> str:
    if isinstance(value, UUID):
        return f"{{{value}}}"
    return str(value)


def _is_present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
