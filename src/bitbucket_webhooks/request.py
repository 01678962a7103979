"""Operation declarations and request composition.

An OperationSpec is the static description of one endpoint. build_request()
turns a verb, a path template, a ResourceContext and a parameter bag into an
immutable Request for the transport; build_for() takes the verb and template
from an OperationSpec.
"""

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from .context import ResourceContext

HTTP_VERBS = ("GET", "POST", "PUT", "DELETE", "PATCH")


class OperationSpec(BaseModel):
    """Static declaration of a single API operation."""

    model_config = ConfigDict(frozen=True)

    name: str
    verb: str
    path_template: str
    valid_keys: tuple[str, ...] | None = None  # None: pass-through
    required_keys: tuple[str, ...] = ()
    requires_uuid: bool = False

    @property
    def filters_params(self) -> bool:
        return self.valid_keys is not None


class Request(BaseModel):
    """A fully composed request, ready to hand to a transport."""

    model_config = ConfigDict(frozen=True)

    verb: str
    path: str
    params: dict = {}


def build_request(verb: str, path_template: str, context: ResourceContext, params: dict | None = None) -> Request:
    """Substitute context values into path_template and return a Request.

    Placeholders: {owner}, {repo} (or {resource}) and {uuid}.
    The repository segment is lower-cased; the owner keeps its casing.
    """
    verb = verb.upper()
    if verb not in HTTP_VERBS:
        raise ValueError(f"Unsupported HTTP verb: {verb}")

    repo = _segment(context.repo.lower())
    path = path_template.format(
        owner=_segment(context.owner),
        repo=repo,
        resource=repo,
        uuid=_segment(context.uuid) if context.uuid is not None else "",
    )
    return Request(verb=verb, path=path, params=dict(params or {}))


def build_for(spec: OperationSpec, context: ResourceContext, params: dict | None = None) -> Request:
    """Build the request declared by an OperationSpec."""
    return build_request(spec.verb, spec.path_template, context, params)


def _segment(value: str) -> str:
    # Bitbucket UUIDs are wrapped in braces; keep them readable.
    return quote(value, safe="{}")
