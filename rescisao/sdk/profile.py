"""User profile: who is running calculations and for which company.

Two kinds of users share the same rules:
- worker: estimates their own termination
- hr: processes terminations for employees of a company (CNPJ)
"""

import logging
import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import load_profile, mark_first_open_done, save_profile

logger = logging.getLogger(__name__)

UserType = Literal["worker", "hr"]

_CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_CNPJ_WEIGHTS_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def _digits(text: str) -> str:
    return re.sub(r"\D", "", text)


def _check_digit(digits: str, weights: list) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def validate_cnpj(cnpj: str) -> bool:
    """Check a CNPJ (company tax ID), formatted or not.

    Requires 14 digits, not all the same, with both mod-11 check digits valid.
    """
    nums = _digits(cnpj)
    if len(nums) != 14:
        return False
    if len(set(nums)) == 1:
        return False
    if int(nums[12]) != _check_digit(nums, _CNPJ_WEIGHTS_1):
        return False
    return int(nums[13]) == _check_digit(nums, _CNPJ_WEIGHTS_2)


def format_cnpj(value: str) -> str:
    """Mask a (possibly partial) CNPJ as 00.000.000/0000-00."""
    nums = _digits(value)[:14]
    if len(nums) <= 2:
        return nums
    if len(nums) <= 5:
        return f"{nums[:2]}.{nums[2:]}"
    if len(nums) <= 8:
        return f"{nums[:2]}.{nums[2:5]}.{nums[5:]}"
    if len(nums) <= 12:
        return f"{nums[:2]}.{nums[2:5]}.{nums[5:8]}/{nums[8:]}"
    return f"{nums[:2]}.{nums[2:5]}.{nums[5:8]}/{nums[8:12]}-{nums[12:]}"


class UserProfile(BaseModel):
    """Contents of profile.yaml."""

    model_config = ConfigDict(extra="forbid")

    user_type: UserType = "worker"
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    cnpj: Optional[str] = Field(default=None, description="Company CNPJ (hr users)")

    @field_validator("cnpj")
    @classmethod
    def check_cnpj(cls, value: Optional[str]) -> Optional[str]:
        if value and not validate_cnpj(value):
            raise ValueError(f"invalid CNPJ: {value}")
        return format_cnpj(value) if value else value


def get_user_profile() -> Optional[UserProfile]:
    """Load the user profile, or None if none was saved.

    Profiles saved before user_type existed are migrated to 'worker' and
    written back.
    """
    raw = load_profile(require_exists=False)
    if not raw:
        return None

    if "user_type" not in raw:
        logger.info("Migrating profile without user_type to 'worker'")
        raw["user_type"] = "worker"
        save_profile(raw)

    return UserProfile.model_validate(raw)


def save_user_profile(profile: UserProfile) -> None:
    """Persist the profile and mark first-use onboarding as done."""
    save_profile(profile.model_dump(exclude_none=True))
    mark_first_open_done()


def is_hr_mode() -> bool:
    profile = get_user_profile()
    return profile is not None and profile.user_type == "hr"


def company_name() -> str:
    profile = get_user_profile()
    if profile is None:
        return ""
    return profile.company or ""
