# cms/normalizers/collection.py
from .revision import normalize_publish_state


def normalize_collection(collection):
    return {
        "id": collection.id,
        "name": collection.name,
        "slug": collection.slug,
        "description": collection.description,
        "schema_json": collection.schema_json or [],
        "created_at": collection.created_at.isoformat(),
        "updated_at": collection.updated_at.isoformat(),
    }


def normalize_item(item, admin=False):
    data = {
        "id": item.id,
        "collection_id": item.collection_id,
    }

    if admin:
        data.update(normalize_publish_state(item))
        data["created_at"] = item.created_at.isoformat()
        data["updated_at"] = item.updated_at.isoformat()
    else:
        data["version"] = item.published_version
        data["data"] = item.published_content

    return data
