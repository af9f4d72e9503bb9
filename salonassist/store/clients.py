"""In-memory client records and visit history."""

import logging

from salonassist.schemas.client_schema import Client, VisitHistory, VisitRecord
from salonassist.store.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class ClientStore:
    def __init__(self) -> None:
        self._clients: dict[str, Client] = {}
        self._visits: dict[str, list[VisitRecord]] = {}

    def add(self, client: Client) -> Client:
        self._clients[client.id] = client.model_copy(deep=True)
        logger.debug("Client stored: %s (%s)", client.name, client.id)
        return client

    def get(self, client_id: str) -> Client:
        client = self._clients.get(client_id)
        if client is None:
            raise RecordNotFoundError("Client", client_id)
        return client.model_copy(deep=True)

    def list_all(self) -> list[Client]:
        return [c.model_copy(deep=True) for c in sorted(self._clients.values(), key=lambda c: c.name)]

    def add_visit(self, visit: VisitRecord) -> None:
        """Append a past visit; updates the client's last visit and total."""
        client = self._clients.get(visit.client_id)
        if client is None:
            raise RecordNotFoundError("Client", visit.client_id)
        self._visits.setdefault(visit.client_id, []).append(visit)
        if client.last_visit is None or visit.date > client.last_visit:
            client.last_visit = visit.date
        client.total_visits = max(client.total_visits, len(self._visits[visit.client_id]))

    def visits(self, client_id: str) -> list[VisitRecord]:
        """Visits for a client, newest first."""
        self.get(client_id)
        return sorted(self._visits.get(client_id, []), key=lambda v: (v.date, v.time), reverse=True)

    def all_visits(self) -> list[VisitRecord]:
        return [v for visits in self._visits.values() for v in visits]

    def history(self, client_id: str) -> VisitHistory:
        return VisitHistory.from_visits(client_id, self._visits.get(client_id, []))

    def histories(self) -> dict[str, VisitHistory]:
        return {client_id: self.history(client_id) for client_id in self._clients}

    def reset(self) -> None:
        """Clear all clients and visits. Used by test fixtures for isolation."""
        self._clients.clear()
        self._visits.clear()
