from cms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin
from .soft_delete_mixin import SoftDeleteMixin

class Collection(BaseModel, TenantMixin, SoftDeleteMixin):
    __tablename__ = "collections"

    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)

    # Ordered list of {key, label, type, required?, options?, description?}
    schema_json = db.Column(db.JSON, nullable=False, default=list)

    __table_args__ = (
        db.Index(
            "uq_collection_live_slug_per_tenant",
            "tenant_id",
            "slug",
            unique=True,
            sqlite_where=db.text("deleted_at IS NULL"),
            postgresql_where=db.text("deleted_at IS NULL"),
        ),
    )

    items = db.relationship(
        "CollectionItem",
        back_populates="collection",
        lazy="dynamic",
    )
