"""
Unit tests for models.tag module.

Tests:
- DataSuffix / ReferralTag construction and validation
- Provider list frozen to a tuple
- Immutability, equality and hashing
- to_dict() serialization
"""

from dataclasses import FrozenInstanceError

import pytest
from fixtures.addresses import CONSUMER, PROVIDER_A, USER

from divvi_referral.models import DataSuffix, FormatID, ReferralTag


class TestDataSuffix:
    def test_construction(self):
        suffix = DataSuffix(
            consumer=CONSUMER,
            providers=(PROVIDER_A,),
            format_id=FormatID.DEFAULT,
            length=137,
        )
        assert suffix.consumer == CONSUMER
        assert suffix.providers == (PROVIDER_A,)
        assert suffix.is_legacy is False

    def test_list_providers_become_tuple(self):
        suffix = DataSuffix(CONSUMER, [PROVIDER_A], FormatID.DEFAULT, 137)  # type: ignore[arg-type]
        assert suffix.providers == (PROVIDER_A,)

    def test_legacy(self):
        suffix = DataSuffix(CONSUMER, (), None, 104)
        assert suffix.is_legacy is True

    def test_rejects_uppercase_consumer(self):
        with pytest.raises(ValueError, match="consumer"):
            DataSuffix("0x" + USER[2:].upper(), (), None, 104)

    def test_rejects_invalid_provider(self):
        with pytest.raises(ValueError, match=r"providers\[1\]"):
            DataSuffix(CONSUMER, (PROVIDER_A, "0x1234"), None, 104)

    def test_rejects_string_providers(self):
        with pytest.raises(TypeError, match="providers"):
            DataSuffix(CONSUMER, PROVIDER_A, None, 104)  # type: ignore[arg-type]

    def test_rejects_non_format_id(self):
        with pytest.raises(TypeError, match="format_id"):
            DataSuffix(CONSUMER, (), "default", 104)  # type: ignore[arg-type]

    def test_frozen(self):
        suffix = DataSuffix(CONSUMER, (), None, 104)
        with pytest.raises(FrozenInstanceError):
            suffix.consumer = PROVIDER_A  # type: ignore[misc]

    def test_equality_and_hash(self):
        a = DataSuffix(CONSUMER, (PROVIDER_A,), FormatID.DEFAULT, 137)
        b = DataSuffix(CONSUMER, [PROVIDER_A], FormatID.DEFAULT, 137)  # type: ignore[arg-type]
        assert a == b
        assert hash(a) == hash(b)

    def test_to_dict(self):
        suffix = DataSuffix(CONSUMER, (PROVIDER_A,), FormatID.DEFAULT, 137)
        assert suffix.to_dict() == {
            "kind": "data_suffix",
            "format": "default",
            "consumer": CONSUMER,
            "providers": [PROVIDER_A],
            "length": 137,
        }

    def test_to_dict_legacy(self):
        assert DataSuffix(CONSUMER, (), None, 104).to_dict()["format"] == "legacy"


class TestReferralTag:
    def test_construction(self):
        tag = ReferralTag(USER, CONSUMER, (PROVIDER_A,), FormatID.DEFAULT, 160)
        assert tag.user == USER
        assert tag.providers == (PROVIDER_A,)

    def test_rejects_invalid_user(self):
        with pytest.raises(ValueError, match="user"):
            ReferralTag("0x12", CONSUMER, (), FormatID.DEFAULT, 128)

    def test_requires_format_id(self):
        with pytest.raises(TypeError, match="format_id"):
            ReferralTag(USER, CONSUMER, (), None, 128)  # type: ignore[arg-type]

    def test_to_dict(self):
        tag = ReferralTag(USER, CONSUMER, (), FormatID.DEFAULT, 128)
        assert tag.to_dict() == {
            "kind": "referral_tag",
            "format": "default",
            "user": USER,
            "consumer": CONSUMER,
            "providers": [],
            "payload_length": 128,
        }
