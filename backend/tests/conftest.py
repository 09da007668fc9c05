import pytest
from flask_jwt_extended import create_access_token

from cms import create_app
from cms.extensions import db as _db
from cms.models.tenant import Tenant
from cms.models.user import User

PASSWORD = "correct-horse-battery"


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


def _create_tenant(name, slug, **flags):
    tenant = Tenant()
    tenant.name = name
    tenant.slug = slug
    tenant.is_active = True
    for key, value in flags.items():
        setattr(tenant, key, value)

    _db.session.add(tenant)
    _db.session.commit()
    return tenant.id


def _create_user(tenant_id, email, role):
    user = User()
    user.tenant_id = tenant_id
    user.email = email
    user.role = role
    user.set_password(PASSWORD)

    _db.session.add(user)
    _db.session.commit()
    return user.id


@pytest.fixture
def tenant_id(app):
    return _create_tenant("Acme", "acme")


@pytest.fixture
def other_tenant_id(app):
    return _create_tenant("Globex", "globex")


@pytest.fixture
def admin_id(tenant_id):
    return _create_user(tenant_id, "admin@acme.test", "admin")


@pytest.fixture
def editor_id(tenant_id):
    return _create_user(tenant_id, "editor@acme.test", "editor")


def _headers(tenant_id, user_id, role):
    token = create_access_token(
        identity=user_id,
        additional_claims={"tenant_id": tenant_id, "role": role},
    )
    return {"Authorization": f"Bearer {token}", "X-Tenant-ID": tenant_id}


@pytest.fixture
def admin_headers(tenant_id, admin_id):
    return _headers(tenant_id, admin_id, "admin")


@pytest.fixture
def editor_headers(tenant_id, editor_id):
    return _headers(tenant_id, editor_id, "editor")


def make_content(*blocks, schema_version=1, root=None):
    """Envelope around (type, id, extra_props) tuples."""
    return {
        "schemaVersion": schema_version,
        "data": {
            "content": [
                {"type": block_type, "props": {"id": block_id, **props}}
                for block_type, block_id, props in blocks
            ],
            "root": root or {},
        },
    }


@pytest.fixture
def content_factory():
    return make_content


@pytest.fixture
def password():
    return PASSWORD
