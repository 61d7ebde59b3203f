"""
Persistence collaborator.

Each business collection (inventory, products, sales, orders) is loaded and
saved as a whole list per scope, mirroring how the front-end keeps its local
state. Domain services work on the immutable snapshots returned here and hand
the mutated list back to ``save_all``.
"""
import logging

from django.db import DatabaseError, transaction

from core_backend.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class ScopedRepository:
    """
    Load/save a whole collection for one scope (owner id).

    Subclasses set ``model``, ``collection`` and ``ordering`` and implement
    ``to_snapshot`` / ``to_fields``. ``save_all`` is all-or-nothing: every
    snapshot is upserted by id and rows missing from the list are deleted,
    inside a single transaction.

    There is no concurrency token: two callers saving lists built from the
    same stale load will overwrite each other (last writer wins).
    """

    model = None
    collection = None
    ordering = ()

    def get_queryset(self, scope_id):
        return self.model.objects.filter(owner_id=scope_id).order_by(*self.ordering)

    def load_all(self, scope_id):
        return [self.to_snapshot(row) for row in self.get_queryset(scope_id)]

    def save_all(self, snapshots, scope_id):
        snapshots = list(snapshots)
        try:
            with transaction.atomic():
                for snapshot in snapshots:
                    self.save_one(snapshot, scope_id)

                keep_ids = [snapshot.id for snapshot in snapshots]
                deleted, _ = (
                    self.model.objects.filter(owner_id=scope_id)
                    .exclude(id__in=keep_ids)
                    .delete()
                )
        except DatabaseError as e:
            logger.error(f"Failed to save {self.collection} for scope {scope_id}: {e}")
            raise PersistenceError(self.collection) from e

        logger.debug(
            f"Saved {len(snapshots)} {self.collection} for scope {scope_id} ({deleted} removed)"
        )
        return True

    def save_one(self, snapshot, scope_id):
        obj, _ = self.model.objects.update_or_create(
            id=snapshot.id,
            owner_id=scope_id,
            defaults=self.to_fields(snapshot),
        )
        return obj

    def to_snapshot(self, row):
        raise NotImplementedError

    def to_fields(self, snapshot):
        raise NotImplementedError
