"""Unit tests for Team derived values and preferences"""

from urllib.parse import urlsplit
from uuid import uuid4

import pytest

from teamspace.models import Team, TeamPreference
from teamspace.utils.avatars import generate_avatar_url

pytestmark = pytest.mark.unit


class TestDefaults:
    """Test values of a new team"""

    def test_policy_defaults(self):
        team = Team(name="Acme")

        assert team.sharing is True
        assert team.invite_required is False
        assert team.guest_signin is True
        assert team.document_embeds is True
        assert team.member_collection_create is True
        assert team.collaborative_editing is True
        assert team.default_user_role == "member"

    def test_optional_fields_absent(self):
        team = Team(name="Acme")

        assert team.id is not None
        assert team.subdomain is None
        assert team.domain is None
        assert team.signup_query_params is None
        assert team.preferences is None
        assert team.is_deleted is False

    def test_explicit_values_win_over_defaults(self):
        team = Team(name="Acme", sharing=False, default_user_role="viewer")

        assert team.sharing is False
        assert team.default_user_role == "viewer"

    def test_soft_delete(self):
        team = Team(name="Acme")

        team.soft_delete()
        assert team.is_deleted is True

        team.restore()
        assert team.is_deleted is False


class TestUrl:
    """Test public URL resolution"""

    def test_custom_domain_wins(self, platform_settings):
        platform_settings(url="https://app.example.com", subdomains_enabled=True)
        team = Team(name="Acme", subdomain="acme", domain="docs.acme.com")

        assert team.url == "https://docs.acme.com"

    def test_custom_domain_without_subdomain_routing(self, platform_settings):
        platform_settings(url="https://app.example.com", subdomains_enabled=False)
        team = Team(name="Acme", domain="docs.acme.com")

        assert team.url == "https://docs.acme.com"

    def test_subdomain(self, platform_settings):
        platform_settings(url="https://app.example.com", base_domain="example.com", subdomains_enabled=True)
        team = Team(name="Acme", subdomain="acme")

        assert urlsplit(team.url).hostname == "acme.example.com"
        assert team.url == "https://acme.example.com"

    def test_subdomain_base_domain_derived_from_url(self, platform_settings):
        platform_settings(url="https://app.example.com", base_domain=None, subdomains_enabled=True)
        team = Team(name="Acme", subdomain="acme")

        assert team.url == "https://acme.example.com"

    def test_subdomain_keeps_port_and_strips_trailing_slash(self, platform_settings):
        platform_settings(url="http://localhost:3000/", base_domain="example.test", subdomains_enabled=True)
        team = Team(name="Acme", subdomain="acme")

        assert team.url == "http://acme.example.test:3000"

    def test_subdomain_routing_disabled(self, platform_settings):
        platform_settings(url="https://app.example.com", subdomains_enabled=False)
        team = Team(name="Acme", subdomain="acme")

        assert team.url == "https://app.example.com"

    def test_no_subdomain(self, platform_settings):
        platform_settings(url="https://app.example.com", subdomains_enabled=True)
        team = Team(name="Acme")

        assert team.url == "https://app.example.com"

    def test_derived_on_every_access(self, platform_settings):
        platform_settings(url="https://app.example.com", base_domain="example.com", subdomains_enabled=True)
        team = Team(name="Acme", subdomain="acme")
        assert team.url == "https://acme.example.com"

        team.domain = "docs.acme.com"
        assert team.url == "https://docs.acme.com"

        team.domain = None
        platform_settings(subdomains_enabled=False)
        assert team.url == "https://app.example.com"


class TestLogoUrl:
    """Test logo URL resolution"""

    def test_avatar_url_used_when_set(self):
        team = Team(name="Acme", avatar_url="https://cdn.example.com/acme.png")

        assert team.logo_url == "https://cdn.example.com/acme.png"

    def test_placeholder_when_unset(self, platform_settings):
        platform_settings(default_avatar_host="https://avatars.example.com")
        team = Team(id=uuid4(), name="acme")

        assert team.logo_url == generate_avatar_url(team.id, "acme")
        assert team.logo_url.startswith("https://avatars.example.com/avatar/")
        assert team.logo_url.endswith("/A.png")

    def test_placeholder_is_deterministic(self):
        team_id = uuid4()

        assert Team(id=team_id, name="Acme").logo_url == Team(id=team_id, name="Acme").logo_url
        assert Team(id=team_id, name="Acme").logo_url != Team(id=uuid4(), name="Acme").logo_url


class TestEmailSignin:
    """Test email sign-in availability"""

    def test_enabled_with_smtp(self, platform_settings):
        platform_settings(smtp_host="smtp.example.com", environment="production")

        assert Team(name="Acme").email_signin_enabled is True

    def test_enabled_in_development_without_smtp(self, platform_settings):
        platform_settings(smtp_host=None, environment="development")

        assert Team(name="Acme").email_signin_enabled is True

    def test_disabled_without_smtp_in_production(self, platform_settings):
        platform_settings(smtp_host=None, environment="production")

        assert Team(name="Acme").email_signin_enabled is False

    def test_disabled_when_guest_signin_off(self, platform_settings):
        platform_settings(smtp_host="smtp.example.com", environment="development")

        assert Team(name="Acme", guest_signin=False).email_signin_enabled is False


class TestPreferences:
    """Test the preference store"""

    def test_set_then_get(self):
        team = Team(name="Acme")

        team.set_preference(TeamPreference.COMMENTING, True)

        assert team.get_preference(TeamPreference.COMMENTING) is True

    def test_never_set_is_none(self):
        team = Team(name="Acme")

        assert team.get_preference(TeamPreference.SEAMLESS_EDIT) is None

        team.set_preference(TeamPreference.COMMENTING, True)
        assert team.get_preference(TeamPreference.SEAMLESS_EDIT) is None

    def test_explicit_false_is_distinct_from_unset(self):
        team = Team(name="Acme")

        team.set_preference(TeamPreference.VIEW_COUNT, False)

        assert team.get_preference(TeamPreference.VIEW_COUNT) is False

    def test_set_returns_all_preferences(self):
        team = Team(name="Acme")

        team.set_preference(TeamPreference.COMMENTING, True)
        preferences = team.set_preference("public_branding", False)

        assert preferences == {"commenting": True, "public_branding": False}
        assert team.preferences == preferences

    def test_set_assigns_new_mapping(self):
        team = Team(name="Acme")
        first = team.set_preference(TeamPreference.COMMENTING, True)

        second = team.set_preference(TeamPreference.COMMENTING, False)

        assert second is not first
        assert first == {"commenting": True}

    def test_unknown_preference_rejected(self):
        team = Team(name="Acme")

        with pytest.raises(ValueError):
            team.set_preference("dark_mode", True)
