from .tenant import Tenant
from .user import User
from .audit_log import AuditLog
from .page import Page
from .page_revision import PageRevision
from .collection import Collection
from .collection_item import CollectionItem
from .collection_item_revision import CollectionItemRevision
