# app/tests/test_account_schema.py

import pytest
from pydantic import ValidationError
from schemas.account_schema import AccountCreate, AccountUpdate, MAX_TAGS


class TestAccountCreate:

    def test_name_is_stripped(self):
        account = AccountCreate(email="ada@example.com", password="longenough123", name="  Ada  ")
        assert account.name == "Ada"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            AccountCreate(email="ada@example.com", password="longenough123", name="   ")

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountCreate(email="ada@example.com", password="short", name="Ada")
        assert "at least 8 characters" in str(exc_info.value)


class TestAccountUpdate:

    def test_tags_trimmed_and_deduplicated(self):
        update = AccountUpdate(expertise=[" SaaS ", "saas", "", "Fundraising"])
        assert update.expertise == ["SaaS", "Fundraising"]

    def test_too_many_tags_rejected(self):
        with pytest.raises(ValidationError):
            AccountUpdate(hobbies=[f"hobby {i}" for i in range(MAX_TAGS + 1)])

    def test_social_links_normalized(self):
        update = AccountUpdate(social_links={"LinkedIn": " https://linkedin.com/in/ada ", "x": ""})
        assert update.social_links == {"linkedin": "https://linkedin.com/in/ada"}

    def test_social_link_scheme_required(self):
        with pytest.raises(ValidationError):
            AccountUpdate(social_links={"github": "javascript:alert(1)"})

    def test_untouched_fields_stay_unset(self):
        update = AccountUpdate(location="Berlin")
        assert update.model_dump(exclude_unset=True) == {"location": "Berlin"}
