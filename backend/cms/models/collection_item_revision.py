from cms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin
from .revision_mixin import RevisionMixin, make_immutable


@make_immutable
class CollectionItemRevision(BaseModel, TenantMixin, RevisionMixin):
    __tablename__ = "collection_item_revisions"

    snapshot_field = "data_json"

    item_id = db.Column(
        db.String(36),
        db.ForeignKey("collection_items.id"),
        nullable=False
    )
    data_json = db.Column(db.JSON, nullable=False)

    item = db.relationship("CollectionItem", back_populates="revisions")

    __table_args__ = (
        db.UniqueConstraint("item_id", "version", name="uq_item_revision_version"),
        db.Index("idx_item_revision_item", "item_id"),
    )
