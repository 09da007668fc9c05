# cms/models/revision_mixin.py
from sqlalchemy import event
from cms.extensions import db


class RevisionMixin:
    version = db.Column(db.Integer, nullable=False)
    note = db.Column(db.String(255), nullable=True)
    created_by = db.Column(db.String(36), nullable=True)

    def get_snapshot(self):
        return getattr(self, self.snapshot_field)


def make_immutable(revision_cls):
    @event.listens_for(revision_cls, "before_update")
    def prevent_revision_mutation(mapper, connection, target):
        raise RuntimeError(f"{revision_cls.__name__} rows are immutable")

    return revision_cls
