# tests\core\test_session.py
from pricing_gateway.core.domain.models import SessionSource
from pricing_gateway.core.domain.session import (
    SESSION_TOKEN_PREFIX,
    derive_session_identity,
    generate_session_id,
)


class TestDeriveSessionIdentity:
    def test_cookie_beats_header(self):
        identity = derive_session_identity("from-cookie", "from-header")
        assert identity.value == "from-cookie"
        assert identity.source == SessionSource.COOKIE

    def test_header_when_no_cookie(self):
        identity = derive_session_identity(None, "from-header")
        assert identity.value == "from-header"
        assert identity.source == SessionSource.HEADER

    def test_empty_values_count_as_absent(self):
        identity = derive_session_identity("", "")
        assert identity.source == SessionSource.GENERATED
        assert identity.value.startswith(SESSION_TOKEN_PREFIX)

    def test_generated_when_nothing_sent(self):
        identity = derive_session_identity(None, None)
        assert identity.source == SessionSource.GENERATED
        assert len(identity.value) > len(SESSION_TOKEN_PREFIX)


def test_generated_tokens_are_unique():
    tokens = {generate_session_id() for _ in range(200)}
    assert len(tokens) == 200
