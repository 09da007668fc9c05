from contextlib import contextmanager
from cms.extensions import db

@contextmanager
def transactional():
    """
    Unit of work: commit on success, roll back everything on any error.
    Nothing written inside the block survives a failure.
    """
    try:
        yield
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
