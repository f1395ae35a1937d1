"""Donations and donors: CRM views, public giving and donor history."""

import uuid
from decimal import Decimal

import pytest
import pytest_asyncio

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.context import DonorSession, PublicSession
from src.database.models import DonationStatus
from src.modules.donation.repository import DonationFilters
from src.modules.donation.service import DonationRequest, DonationService, DonorDetails
from src.modules.donor.repository import DonorAccountRepository
from src.modules.donor.service import DonorService
from tests.factories import (
    CampaignFactory,
    CampaignQuestionFactory,
    DesignationFactory,
    DonationAnswerFactory,
    DonationFactory,
    DonorAccountFactory,
)
from tests.utils.assertions import assert_donorhub_exception


@pytest_asyncio.fixture
async def giving(db_session, test_organization):
    """Two campaigns, two donors and three donations."""
    org_id = test_organization.id
    spring = await CampaignFactory.create_async(db_session, organization_id=org_id)
    autumn = await CampaignFactory.create_async(db_session, organization_id=org_id)
    fund = await DesignationFactory.create_async(db_session, organization_id=org_id)
    alice = await DonorAccountFactory.create_async(
        db_session, organization_id=org_id, email="alice@example.com"
    )
    bob = await DonorAccountFactory.create_async(
        db_session, organization_id=org_id, email="bob@example.com"
    )

    def donation(campaign, donor, **kwargs):
        return DonationFactory.create_async(
            db_session,
            organization_id=org_id,
            campaign_id=campaign.id,
            donor_account_id=donor.id,
            designation_id=fund.id,
            **kwargs,
        )

    return {
        "spring": spring,
        "autumn": autumn,
        "alice": alice,
        "bob": bob,
        "donations": [
            await donation(spring, alice),
            await donation(spring, bob, status=DonationStatus.REFUNDED),
            await donation(autumn, alice),
        ],
    }


@pytest_asyncio.fixture
async def foreign_donation(db_session, other_organization):
    org_id = other_organization.id
    campaign = await CampaignFactory.create_async(db_session, organization_id=org_id)
    fund = await DesignationFactory.create_async(db_session, organization_id=org_id)
    donor = await DonorAccountFactory.create_async(db_session, organization_id=org_id)
    return await DonationFactory.create_async(
        db_session,
        organization_id=org_id,
        campaign_id=campaign.id,
        donor_account_id=donor.id,
        designation_id=fund.id,
    )


class TestListDonations:
    @pytest.mark.asyncio
    async def test_lists_only_own_organization(
        self, db_session, editor_session, giving, foreign_donation
    ):
        donations, total = await DonationService(db_session).list_donations(
            editor_session, DonationFilters(), limit=50, offset=0
        )

        assert total == 3
        assert foreign_donation.id not in {d.id for d in donations}

    @pytest.mark.parametrize(
        "filter_key, expected",
        [("status", 1), ("campaign_id", 2), ("donor_email", 2)],
    )
    @pytest.mark.asyncio
    async def test_filters(self, db_session, editor_session, giving, filter_key, expected):
        filters = {
            "status": DonationFilters(status=DonationStatus.REFUNDED),
            "campaign_id": DonationFilters(campaign_id=giving["spring"].id),
            "donor_email": DonationFilters(donor_email="ALICE@example.com"),
        }[filter_key]

        donations, total = await DonationService(db_session).list_donations(
            editor_session, filters, limit=50, offset=0
        )

        assert total == expected
        assert len(donations) == expected

    @pytest.mark.asyncio
    async def test_pagination_keeps_total(self, db_session, editor_session, giving):
        donations, total = await DonationService(db_session).list_donations(
            editor_session, DonationFilters(), limit=2, offset=2
        )

        assert total == 3
        assert len(donations) == 1


class TestGetDonation:
    @pytest.mark.asyncio
    async def test_includes_answers(self, db_session, editor_session, giving):
        donation = giving["donations"][0]
        question = await CampaignQuestionFactory.create_async(
            db_session, campaign_id=giving["spring"].id, question_text="Dedication?"
        )
        await DonationAnswerFactory.create_async(
            db_session,
            donation_id=donation.id,
            question_id=question.id,
            answer_value="In memory of Ann",
        )
        db_session.expunge_all()

        loaded = await DonationService(db_session).get_donation(
            editor_session, donation.id
        )

        assert [a.answer_value for a in loaded.answers] == ["In memory of Ann"]
        assert loaded.answers[0].question.question_text == "Dedication?"

    @pytest.mark.asyncio
    async def test_foreign_donation_is_not_found(
        self, db_session, editor_session, foreign_donation
    ):
        with pytest.raises(DonorHubException) as exc_info:
            await DonationService(db_session).get_donation(
                editor_session, foreign_donation.id
            )

        assert_donorhub_exception(exc_info.value, MessageCode.DONATION_NOT_FOUND, 404)


class TestDonors:
    @pytest.mark.asyncio
    async def test_list_donors(self, db_session, editor_session, giving):
        donors, total = await DonorService(db_session).list_donors(
            editor_session, limit=10, offset=0
        )

        assert total == 2
        assert {d.email for d in donors} == {"alice@example.com", "bob@example.com"}

    @pytest.mark.asyncio
    async def test_profile_uses_donor_session(
        self, db_session, giving, test_organization
    ):
        alice = giving["alice"]
        session = DonorSession(
            donor_account_id=alice.id, organization_id=test_organization.id
        )

        profile = await DonorService(db_session).get_profile(session)

        assert profile.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_donor_from_another_organization_is_not_found(
        self, db_session, editor_session, other_organization
    ):
        outsider = await DonorAccountFactory.create_async(
            db_session, organization_id=other_organization.id
        )

        with pytest.raises(DonorHubException) as exc_info:
            await DonorService(db_session).get_donor(editor_session, outsider.id)

        assert_donorhub_exception(exc_info.value, MessageCode.DONOR_NOT_FOUND, 404)

    @pytest.mark.asyncio
    async def test_unknown_donor_is_not_found(self, db_session, editor_session):
        with pytest.raises(DonorHubException) as exc_info:
            await DonorService(db_session).get_donor(editor_session, uuid.uuid4())

        assert_donorhub_exception(exc_info.value, MessageCode.DONOR_NOT_FOUND, 404)


def guest_request(designation_id=None, answers=None, email="new@example.com"):
    return DonationRequest(
        amount=Decimal("40.00"),
        designation_id=designation_id,
        donor=DonorDetails(first_name="New", last_name="Donor", email=email),
        answers=answers or {},
    )


@pytest_asyncio.fixture
async def live_campaign(db_session, test_organization):
    fund = await DesignationFactory.create_async(
        db_session, organization_id=test_organization.id, name="General"
    )
    return await CampaignFactory.create_async(
        db_session,
        organization_id=test_organization.id,
        slug="general",
        is_active=True,
        default_designation_id=fund.id,
    )


class TestCreatePublicDonation:
    @pytest.mark.asyncio
    async def test_falls_back_to_default_designation(
        self, db_session, public_session, live_campaign
    ):
        donation = await DonationService(db_session).create_public_donation(
            public_session, "general", guest_request()
        )

        assert donation.designation_id == live_campaign.default_designation_id
        assert donation.status == DonationStatus.PENDING
        assert donation.stripe_charge_id is None
        assert donation.donor_account.is_guest

    @pytest.mark.asyncio
    async def test_existing_donor_keeps_account(
        self, db_session, public_session, live_campaign, giving
    ):
        alice = giving["alice"]

        donation = await DonationService(db_session).create_public_donation(
            public_session, "general", guest_request(email="Alice@Example.com")
        )

        assert donation.donor_account_id == alice.id

    @pytest.mark.asyncio
    async def test_required_question_must_be_answered(
        self, db_session, public_session, live_campaign
    ):
        question = await CampaignQuestionFactory.create_async(
            db_session, campaign_id=live_campaign.id, is_required=True
        )

        with pytest.raises(DonorHubException) as exc_info:
            await DonationService(db_session).create_public_donation(
                public_session, "general", guest_request(answers={question.id: "  "})
            )

        assert_donorhub_exception(exc_info.value, MessageCode.INVALID_INPUT, 400)
        assert exc_info.value.details["question_ids"] == [str(question.id)]

    @pytest.mark.asyncio
    async def test_rejected_donation_creates_no_guest(
        self, db_session, public_session, live_campaign
    ):
        with pytest.raises(DonorHubException):
            await DonationService(db_session).create_public_donation(
                public_session, "general", guest_request(answers={uuid.uuid4(): "x"})
            )

        donors = DonorAccountRepository(db_session, public_session)
        assert await donors.find_by_email("new@example.com") is None

    @pytest.mark.asyncio
    async def test_other_organizations_campaign_is_not_found(
        self, db_session, live_campaign, other_organization
    ):
        session = PublicSession(organization_id=other_organization.id)

        with pytest.raises(DonorHubException) as exc_info:
            await DonationService(db_session).create_public_donation(
                session, "general", guest_request()
            )

        assert_donorhub_exception(exc_info.value, MessageCode.CAMPAIGN_NOT_FOUND, 404)


class TestDonorHistory:
    @pytest.mark.asyncio
    async def test_lists_only_own_donations(
        self, db_session, giving, test_organization
    ):
        alice = giving["alice"]
        session = DonorSession(
            donor_account_id=alice.id, organization_id=test_organization.id
        )

        history = await DonationService(db_session).list_donor_history(session)

        assert {d.id for d in history} == {
            giving["donations"][0].id,
            giving["donations"][2].id,
        }
        assert all(d.campaign is not None and d.designation for d in history)
