"""Campaign domain router: campaigns, their designations and questions."""

from uuid import UUID

from fastapi import APIRouter, Request

from src.api.campaign.schemas import (
    CampaignCreateRequest,
    CampaignDeleteResponse,
    CampaignDesignationListResponse,
    CampaignDesignationResponse,
    CampaignListResponse,
    CampaignModel,
    CampaignResponse,
    CampaignUpdateRequest,
    DesignationLinkRequest,
    DesignationSyncData,
    DesignationSyncRequest,
    DesignationSyncResponse,
    PageConfigData,
    PageConfigRequest,
    PageConfigResponse,
    QuestionCreateRequest,
    QuestionListResponse,
    QuestionModel,
    QuestionResponse,
    QuestionSyncData,
    QuestionSyncRequest,
    QuestionSyncResponse,
    QuestionUpdateRequest,
)
from src.api.core.decorators.auth import ANY_STAFF_ROLE, require_role
from src.api.core.dependencies import AsyncSessionDep, StaffSessionDep
from src.api.core.messages import APIResponse, MessageCode
from src.api.designation.schemas import DesignationModel
from src.database.models import StaffRoleName
from src.modules.campaign.designations import CampaignDesignationService
from src.modules.campaign.questions import CampaignQuestionService
from src.modules.campaign.service import CampaignService

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=CampaignListResponse)
@require_role(*ANY_STAFF_ROLE)
async def list_campaigns(
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignListResponse:
    campaigns = await CampaignService(db).list_campaigns(session)
    return APIResponse.success_response(
        data=[CampaignModel.model_validate(c) for c in campaigns]
    )


@router.post("", response_model=CampaignResponse, status_code=201)
@require_role(*ANY_STAFF_ROLE)
async def create_campaign(
    request: Request,
    campaign_data: CampaignCreateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignResponse:
    campaign = await CampaignService(db).create_campaign(
        session, campaign_data.model_dump(exclude_unset=True)
    )
    return APIResponse.success_response(
        message_code=MessageCode.CAMPAIGN_CREATED,
        data=CampaignModel.model_validate(campaign),
    )


@router.get("/{campaign_id}", response_model=CampaignResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_campaign(
    campaign_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignResponse:
    campaign = await CampaignService(db).get_campaign(session, campaign_id)
    return APIResponse.success_response(data=CampaignModel.model_validate(campaign))


@router.patch("/{campaign_id}", response_model=CampaignResponse)
@require_role(*ANY_STAFF_ROLE)
async def update_campaign(
    campaign_id: UUID,
    request: Request,
    campaign_data: CampaignUpdateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignResponse:
    campaign = await CampaignService(db).update_campaign(
        session, campaign_id, campaign_data.model_dump(exclude_unset=True)
    )
    return APIResponse.success_response(
        message_code=MessageCode.CAMPAIGN_UPDATED,
        data=CampaignModel.model_validate(campaign),
    )


@router.delete("/{campaign_id}", response_model=CampaignDeleteResponse)
@require_role(StaffRoleName.ADMIN)
async def delete_campaign(
    campaign_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignDeleteResponse:
    await CampaignService(db).delete_campaign(session, campaign_id)
    return APIResponse.success_response(
        message_code=MessageCode.CAMPAIGN_DELETED, data=True
    )


@router.get("/{campaign_id}/page-config", response_model=PageConfigResponse)
@require_role(*ANY_STAFF_ROLE)
async def get_page_config(
    campaign_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> PageConfigResponse:
    page_config = await CampaignService(db).get_page_config(session, campaign_id)
    return APIResponse.success_response(data=PageConfigData(page_config=page_config))


@router.put("/{campaign_id}/page-config", response_model=CampaignResponse)
@require_role(*ANY_STAFF_ROLE)
async def update_page_config(
    campaign_id: UUID,
    request: Request,
    config_data: PageConfigRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignResponse:
    """Save a draft of the campaign page without publishing it."""
    campaign = await CampaignService(db).update_page_config(
        session, campaign_id, config_data.page_config
    )
    return APIResponse.success_response(
        message_code=MessageCode.CAMPAIGN_UPDATED,
        data=CampaignModel.model_validate(campaign),
    )


@router.post("/{campaign_id}/publish", response_model=CampaignResponse)
@require_role(*ANY_STAFF_ROLE)
async def publish_campaign(
    campaign_id: UUID,
    request: Request,
    config_data: PageConfigRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignResponse:
    """Validate the page config and make the campaign live."""
    campaign = await CampaignService(db).publish_campaign(
        session, campaign_id, config_data.page_config
    )
    return APIResponse.success_response(
        message_code=MessageCode.CAMPAIGN_PUBLISHED,
        data=CampaignModel.model_validate(campaign),
    )


@router.get(
    "/{campaign_id}/designations", response_model=CampaignDesignationListResponse
)
@require_role(*ANY_STAFF_ROLE)
async def list_campaign_designations(
    campaign_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignDesignationListResponse:
    designations = await CampaignDesignationService(db).list_designations(
        session, campaign_id
    )
    return APIResponse.success_response(
        data=[DesignationModel.model_validate(d) for d in designations]
    )


@router.put("/{campaign_id}/designations", response_model=DesignationSyncResponse)
@require_role(*ANY_STAFF_ROLE)
async def sync_campaign_designations(
    campaign_id: UUID,
    request: Request,
    sync_data: DesignationSyncRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> DesignationSyncResponse:
    """Replace the campaign's designations with the given set."""
    result = await CampaignDesignationService(db).sync_designations(
        session, campaign_id, sync_data.designation_ids
    )
    return APIResponse.success_response(
        message_code=MessageCode.DESIGNATIONS_SYNCED,
        data=DesignationSyncData(
            added=result.added, removed=result.removed, total=result.total
        ),
    )


@router.post(
    "/{campaign_id}/designations",
    response_model=CampaignDesignationResponse,
    status_code=201,
)
@require_role(*ANY_STAFF_ROLE)
async def link_campaign_designation(
    campaign_id: UUID,
    request: Request,
    link_data: DesignationLinkRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignDesignationResponse:
    designation = await CampaignDesignationService(db).link_designation(
        session, campaign_id, link_data.designation_id
    )
    return APIResponse.success_response(
        message_code=MessageCode.CREATED,
        data=DesignationModel.model_validate(designation),
    )


@router.delete(
    "/{campaign_id}/designations/{designation_id}",
    response_model=CampaignDeleteResponse,
)
@require_role(*ANY_STAFF_ROLE)
async def unlink_campaign_designation(
    campaign_id: UUID,
    designation_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignDeleteResponse:
    await CampaignDesignationService(db).unlink_designation(
        session, campaign_id, designation_id
    )
    return APIResponse.success_response(message_code=MessageCode.DELETED, data=True)


@router.get("/{campaign_id}/questions", response_model=QuestionListResponse)
@require_role(*ANY_STAFF_ROLE)
async def list_campaign_questions(
    campaign_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> QuestionListResponse:
    questions = await CampaignQuestionService(db).list_questions(session, campaign_id)
    return APIResponse.success_response(
        data=[QuestionModel.model_validate(q) for q in questions]
    )


@router.put("/{campaign_id}/questions", response_model=QuestionSyncResponse)
@require_role(*ANY_STAFF_ROLE)
async def sync_campaign_questions(
    campaign_id: UUID,
    request: Request,
    sync_data: QuestionSyncRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> QuestionSyncResponse:
    """Create, update and delete questions so they match the given list."""
    result = await CampaignQuestionService(db).sync_questions(
        session,
        campaign_id,
        [item.model_dump(exclude_unset=True) for item in sync_data.questions],
    )
    return APIResponse.success_response(
        message_code=MessageCode.QUESTIONS_SYNCED,
        data=QuestionSyncData(
            added=result.added,
            updated=result.updated,
            removed=result.removed,
            total=result.total,
        ),
    )


@router.post(
    "/{campaign_id}/questions", response_model=QuestionResponse, status_code=201
)
@require_role(*ANY_STAFF_ROLE)
async def create_campaign_question(
    campaign_id: UUID,
    request: Request,
    question_data: QuestionCreateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> QuestionResponse:
    question = await CampaignQuestionService(db).create_question(
        session, campaign_id, question_data.model_dump()
    )
    return APIResponse.success_response(
        message_code=MessageCode.QUESTION_CREATED,
        data=QuestionModel.model_validate(question),
    )


@router.patch(
    "/{campaign_id}/questions/{question_id}", response_model=QuestionResponse
)
@require_role(*ANY_STAFF_ROLE)
async def update_campaign_question(
    campaign_id: UUID,
    question_id: UUID,
    request: Request,
    question_data: QuestionUpdateRequest,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> QuestionResponse:
    question = await CampaignQuestionService(db).update_question(
        session,
        campaign_id,
        question_id,
        question_data.model_dump(exclude_unset=True),
    )
    return APIResponse.success_response(
        message_code=MessageCode.QUESTION_UPDATED,
        data=QuestionModel.model_validate(question),
    )


@router.delete(
    "/{campaign_id}/questions/{question_id}", response_model=CampaignDeleteResponse
)
@require_role(*ANY_STAFF_ROLE)
async def delete_campaign_question(
    campaign_id: UUID,
    question_id: UUID,
    request: Request,
    db: AsyncSessionDep,
    session: StaffSessionDep,
) -> CampaignDeleteResponse:
    await CampaignQuestionService(db).delete_question(session, campaign_id, question_id)
    return APIResponse.success_response(
        message_code=MessageCode.QUESTION_DELETED, data=True
    )
