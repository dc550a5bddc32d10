from discovery.auth.session import ANONYMOUS, Role, current_session, encode


def test_anonymous_without_header(app):
    with app.test_request_context("/"):
        assert current_session() is ANONYMOUS


def test_role_from_claims(app):
    with app.app_context():
        token = encode({"sub": "u1", "role": "Adviser"})
    with app.test_request_context("/", headers={"Authorization": f"Bearer {token}"}):
        session = current_session()
    assert session.is_authenticated
    assert session.user_id == "u1"
    assert session.role is Role.ADVISER


def test_unknown_role_defaults_to_student(app):
    with app.app_context():
        token = encode({"sub": "u2", "role": "janitor"})
    with app.test_request_context("/", headers={"Authorization": f"Bearer {token}"}):
        assert current_session().role is Role.STUDENT


def test_non_bearer_scheme_is_anonymous(app):
    with app.test_request_context("/", headers={"Authorization": "Basic dXNlcjpwYXNz"}):
        assert not current_session().is_authenticated


def test_collaborator_helpers(app):
    from discovery.auth.session import current_user_role, is_authenticated

    with app.test_request_context("/"):
        assert is_authenticated() is False
        assert current_user_role() is None
    with app.app_context():
        token = encode({"sub": "u3", "role": "superadmin"})
    with app.test_request_context("/", headers={"Authorization": f"Bearer {token}"}):
        assert is_authenticated() is True
        assert current_user_role() is Role.SUPERADMIN
