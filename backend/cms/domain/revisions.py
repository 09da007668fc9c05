"""
Revision store.

Append-only history per document, keyed by (document, version).

Invariants:
    - versions start at 1 and strictly increase; trimming never frees a number
      because the counter lives on the document (head_version)
    - revisions are never updated (see models.revision_mixin)
    - at most MAX_REVISIONS rows per document; the lowest versions go first
    - rollback appends a copy of an old snapshot, it never rewrites history

None of these methods commit. Insert, trim and the document pointer update
must run inside the caller's transaction (utils.transaction.transactional) so
they land together or not at all.
"""

import copy
import logging

from sqlalchemy import select

from cms.extensions import db
from cms.domain.exceptions import DocumentNotFound, RevisionNotFound
from cms.models.base import utc_now

logger = logging.getLogger(__name__)

MAX_REVISIONS = 10


class RevisionStore:
    def __init__(self, kind, max_revisions=MAX_REVISIONS):
        self.kind = kind
        self.max_revisions = max_revisions

    # ------------------------
    # Documents
    # ------------------------

    def lock_document(self, *, tenant_id, document_id):
        """Fetch a live document with a row-level lock."""
        model = self.kind.model
        document = (
            db.session.execute(
                select(model)
                .where(
                    model.id == document_id,
                    model.tenant_id == tenant_id,
                    model.deleted_at.is_(None),
                )
                .with_for_update()
            )
            .scalar_one_or_none()
        )

        if document is None:
            raise DocumentNotFound(document_id)
        return document

    # ------------------------
    # Writes
    # ------------------------

    def create_revision(self, document, snapshot, note=None, actor_id=None):
        model = self.kind.revision_model
        version = (document.head_version or 0) + 1

        revision = model()
        revision.tenant_id = document.tenant_id
        setattr(revision, self.kind.document_fk, document.id)
        setattr(revision, self.kind.snapshot_field, snapshot)
        revision.version = version
        revision.note = note
        revision.created_by = actor_id

        db.session.add(revision)
        db.session.flush()  # ensures revision.id

        document.head_version = version
        document.head_revision_id = revision.id
        document.updated_at = utc_now()

        self.trim(document)

        logger.debug(
            "Created %s revision v%d for %s", self.kind.name, version, document.id
        )
        return revision

    def trim(self, document):
        model = self.kind.revision_model
        expired = (
            self.kind.revision_query(document)
            .order_by(model.version.desc())
            .offset(self.max_revisions)
            .all()
        )

        for revision in expired:
            db.session.delete(revision)

        if expired:
            db.session.flush()
            logger.debug(
                "Trimmed %d %s revision(s) of %s",
                len(expired),
                self.kind.name,
                document.id,
            )
        return len(expired)

    def rollback(self, document, revision_id, actor_id=None):
        """
        Append a new revision carrying the content of revision_id.
        Raises RevisionNotFound before anything is written.
        """
        target = self.get_revision(document, revision_id)
        snapshot = copy.deepcopy(target.get_snapshot())

        return self.create_revision(
            document,
            snapshot,
            note=f"Rollback to v{target.version}",
            actor_id=actor_id,
        )

    # ------------------------
    # Reads
    # ------------------------

    def list_revisions(self, document):
        model = self.kind.revision_model
        return self.kind.revision_query(document).order_by(model.version.desc()).all()

    def latest_revision(self, document):
        model = self.kind.revision_model
        return self.kind.revision_query(document).order_by(model.version.desc()).first()

    def get_revision(self, document, revision_id):
        model = self.kind.revision_model
        revision = (
            self.kind.revision_query(document)
            .filter(model.id == revision_id)
            .first()
        )

        if revision is None:
            raise RevisionNotFound(revision_id)
        return revision
