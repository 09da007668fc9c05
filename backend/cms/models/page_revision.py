from cms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin
from .revision_mixin import RevisionMixin, make_immutable


@make_immutable
class PageRevision(BaseModel, TenantMixin, RevisionMixin):
    __tablename__ = "page_revisions"

    snapshot_field = "content_json"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("pages.id"),
        nullable=False
    )
    content_json = db.Column(db.JSON, nullable=False)

    page = db.relationship("Page", back_populates="revisions")

    __table_args__ = (
        db.UniqueConstraint("page_id", "version", name="uq_page_revision_version"),
        db.Index("idx_page_revision_page", "page_id"),
    )
