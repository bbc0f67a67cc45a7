"""Tests for the user profile and CNPJ helpers."""

import pytest
import yaml
from pydantic import ValidationError

from rescisao.sdk.config import get_profile_path, has_seen_first_open
from rescisao.sdk.profile import (
    UserProfile,
    company_name,
    format_cnpj,
    get_user_profile,
    is_hr_mode,
    save_user_profile,
    validate_cnpj,
)

VALID_CNPJ = "11.222.333/0001-81"


class TestCnpj:

    def test_valid_formatted_and_bare(self):
        assert validate_cnpj(VALID_CNPJ) is True
        assert validate_cnpj("11222333000181") is True

    def test_wrong_check_digits(self):
        assert validate_cnpj("11222333000180") is False
        assert validate_cnpj("11222333000191") is False

    def test_repeated_digits(self):
        assert validate_cnpj("11111111111111") is False

    def test_wrong_length(self):
        assert validate_cnpj("1122233300018") is False
        assert validate_cnpj("") is False

    @pytest.mark.parametrize("raw,masked", [
        ("11", "11"),
        ("11222", "11.222"),
        ("11222333", "11.222.333"),
        ("112223330001", "11.222.333/0001"),
        ("11222333000181", VALID_CNPJ),
        ("11222333000181999", VALID_CNPJ),
    ])
    def test_format(self, raw, masked):
        assert format_cnpj(raw) == masked


class TestUserProfile:

    def test_no_profile(self):
        assert get_user_profile() is None
        assert is_hr_mode() is False
        assert company_name() == ""

    def test_save_hr_profile_marks_onboarding(self):
        assert has_seen_first_open() is False
        save_user_profile(UserProfile(user_type="hr", company="Acme Ltda", cnpj="11222333000181"))

        assert has_seen_first_open() is True
        assert is_hr_mode() is True
        assert company_name() == "Acme Ltda"
        assert get_user_profile().cnpj == VALID_CNPJ

    def test_invalid_cnpj_rejected(self):
        with pytest.raises(ValidationError):
            UserProfile(user_type="hr", cnpj="11222333000180")

    def test_legacy_profile_migrated_to_worker(self):
        path = get_profile_path()
        path.write_text(yaml.dump({"name": "João"}))

        profile = get_user_profile()
        assert profile.user_type == "worker"
        assert profile.name == "João"
        assert yaml.safe_load(path.read_text())["user_type"] == "worker"
