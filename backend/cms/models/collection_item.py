from cms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin
from .soft_delete_mixin import SoftDeleteMixin
from .publishable_mixin import PublishableMixin

class CollectionItem(BaseModel, TenantMixin, SoftDeleteMixin, PublishableMixin):
    __tablename__ = "collection_items"

    collection_id = db.Column(
        db.String(36),
        db.ForeignKey("collections.id"),
        nullable=False,
        index=True
    )

    collection = db.relationship("Collection", back_populates="items")

    revisions = db.relationship(
        "CollectionItemRevision",
        back_populates="item",
        order_by="CollectionItemRevision.version.desc()",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )
