# cms/models/publishable_mixin.py
from cms.extensions import db


class PublishableMixin:
    """
    Columns shared by every revision-tracked document (pages, collection items).

    head_* is the content pointer: the newest revision and the version counter
    new revisions continue from. published_* is what public readers get.
    published_revision_id is deliberately not a foreign key: retention may
    trim that revision row, published_content keeps the snapshot itself.
    """

    status = db.Column(db.String(20), nullable=False, default="DRAFT", index=True)

    head_version = db.Column(db.Integer, nullable=False, default=0)
    head_revision_id = db.Column(db.String(36), nullable=True)

    published_revision_id = db.Column(db.String(36), nullable=True)
    published_version = db.Column(db.Integer, nullable=True)
    published_content = db.Column(db.JSON(none_as_null=True), nullable=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    @property
    def is_published(self):
        return self.status == "PUBLISHED"
