"""Generic resource binding.

Every operation runs the same pipeline:
normalize -> resolve context -> (writes) filter, check values, assert
required -> build request -> transport.
"""

from typing import Any

from loguru import logger

from .context import resolve_context
from .params import assert_required_keys, filter_keys, normalize, validate_values
from .request import OperationSpec, build_for
from .transport import Transport


class Api:
    """Base class for resource bindings.

    A handle may carry a default owner/repo. Handles are never mutated:
    with_context() returns a new one.
    """

    def __init__(self, transport: Transport, owner: str | None = None, repo: str | None = None):
        self.transport = transport
        self.owner = owner
        self.repo = repo

    def with_context(self, owner: str | None, repo: str | None):
        """Return a handle of the same type scoped to owner/repo."""
        return type(self)(self.transport, owner=owner, repo=repo)

    def _execute(
        self,
        spec: OperationSpec,
        owner: str | None,
        repo: str | None,
        uuid: str | None = None,
        params=None,
    ) -> Any:
        context = resolve_context(
            owner, repo, self.owner, self.repo, uuid=uuid, requires_uuid=spec.requires_uuid
        )
        params = normalize(params)
        if spec.filters_params:
            params = filter_keys(spec.valid_keys, params)
            validate_values(params)
            assert_required_keys(spec.required_keys, params)

        request = build_for(spec, context, params)
        logger.debug(f"{spec.name}: {request.verb} {request.path}")
        return self.transport.request(request.verb, request.path, request.params)
