"""Remote authority port - sync target."""

from typing import Protocol

from reviewdesk.domain.entities import Document


class RemoteAuthority(Protocol):
    """Port for reconciling a local document with the remote side.

    ``reconcile`` must be idempotent and either fully apply or raise
    ``ReconciliationFailure``.
    """

    async def reconcile(self, document: Document) -> None: ...
