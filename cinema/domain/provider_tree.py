"""Provider hierarchy stored as an arena keyed by provider id."""

import logging
from collections.abc import Iterable, Iterator
from typing import NoReturn, Self

from cinema.domain.errors import InvalidCatalogError, ProviderNotFoundError
from cinema.domain.models import Provider, ProviderNode
from cinema.domain.value_objects import ProviderId

logger = logging.getLogger(__name__)


class ProviderTree:
    """A rooted tree of providers.

    Every provider is reachable from the root through exactly one parent.
    Children keep the order in which they were listed.
    """

    def __init__(self, root_id: ProviderId, providers: Iterable[Provider]) -> None:
        self._providers: dict[ProviderId, Provider] = {}
        for provider in providers:
            if provider.id in self._providers:
                _reject(f"duplicate provider id {provider.id}")
            self._providers[provider.id] = provider

        if root_id not in self._providers:
            _reject(f"root provider {root_id} is not in the provider list")
        self._root_id = root_id
        self._validate()

    @classmethod
    def from_nested(cls, root: ProviderNode) -> Self:
        """Flatten a nested provider description into a tree."""
        providers: list[Provider] = []
        pending = [root]
        while pending:
            node = pending.pop()
            providers.append(
                Provider(
                    id=node.id,
                    company_name=node.company_name,
                    child_ids=tuple(child.id for child in node.sub),
                )
            )
            pending.extend(reversed(node.sub))
        return cls(root.id, providers)

    def _validate(self) -> None:
        parents: dict[ProviderId, ProviderId] = {}
        for provider in self._providers.values():
            for child_id in provider.child_ids:
                if child_id not in self._providers:
                    _reject(f"provider {provider.id} lists unknown child {child_id}")
                if child_id == self._root_id:
                    _reject(f"root provider {child_id} is listed as a child")
                if child_id in parents:
                    _reject(f"provider {child_id} has more than one parent")
                parents[child_id] = provider.id

        reachable = {self._root_id, *(p.id for p in self.descendants(self._root_id))}
        unreachable = sorted(
            (pid for pid in self._providers if pid not in reachable),
            key=lambda pid: pid.value,
        )
        if unreachable:
            _reject(
                "providers not reachable from the root: "
                + ", ".join(str(pid) for pid in unreachable)
            )

    @property
    def root(self) -> Provider:
        return self._providers[self._root_id]

    def get(self, provider_id: ProviderId) -> Provider:
        try:
            return self._providers[provider_id]
        except KeyError:
            raise ProviderNotFoundError(provider_id) from None

    def children(self, provider_id: ProviderId) -> list[Provider]:
        return [self._providers[cid] for cid in self.get(provider_id).child_ids]

    def descendants(self, provider_id: ProviderId) -> list[Provider]:
        """Return the subtree below a provider, depth-first, pre-order."""
        result: list[Provider] = []
        seen = {provider_id}
        pending = list(reversed(self.get(provider_id).child_ids))
        while pending:
            current = pending.pop()
            if current in seen:
                continue
            seen.add(current)
            provider = self._providers[current]
            result.append(provider)
            pending.extend(reversed(provider.child_ids))
        return result

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __iter__(self) -> Iterator[Provider]:
        yield self.root
        yield from self.descendants(self._root_id)

    def __len__(self) -> int:
        return len(self._providers)


def _reject(reason: str) -> NoReturn:
    logger.error("Rejected provider tree: %s", reason)
    raise InvalidCatalogError(reason)
