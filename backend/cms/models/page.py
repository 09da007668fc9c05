from cms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin
from .soft_delete_mixin import SoftDeleteMixin
from .publishable_mixin import PublishableMixin

class Page(BaseModel, TenantMixin, SoftDeleteMixin, PublishableMixin):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    seo = db.Column(db.JSON(none_as_null=True), default=dict)

    __table_args__ = (
        # Soft-deleted pages release their slug
        db.Index(
            "uq_page_live_slug_per_tenant",
            "tenant_id",
            "slug",
            unique=True,
            sqlite_where=db.text("deleted_at IS NULL"),
            postgresql_where=db.text("deleted_at IS NULL"),
        ),
    )

    revisions = db.relationship(
        "PageRevision",
        back_populates="page",
        order_by="PageRevision.version.desc()",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )
