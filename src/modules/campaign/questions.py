"""Custom donation-form questions and their bulk reconciliation."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence
from uuid import UUID

from fastapi import status

from src.api.core.exceptions.base import DonorHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService, drop_nulls
from src.core.context import Session, StaffSession
from src.database.models import CHOICE_QUESTION_TYPES, CampaignQuestion, QuestionType
from src.modules.campaign.repository import (
    QUESTION_REQUIRED_FIELDS,
    CampaignQuestionRepository,
    CampaignRepository,
)


@dataclass
class QuestionSyncResult:
    added: int
    updated: int
    removed: int
    total: int


@dataclass
class QuestionSyncPlan:
    to_add: list[dict] = field(default_factory=list)
    to_update: list[tuple[CampaignQuestion, dict]] = field(default_factory=list)
    to_remove: set[UUID] = field(default_factory=set)
    skipped: list[UUID] = field(default_factory=list)


def _check_options(question_type: Any, options: list | None) -> None:
    if QuestionType(question_type) in CHOICE_QUESTION_TYPES and not options:
        raise DonorHubException(
            MessageCode.INVALID_INPUT,
            status.HTTP_400_BAD_REQUEST,
            {"description": f"Questions of type {question_type} require options"},
        )


def _fields(item: Mapping[str, Any]) -> dict:
    return {key: value for key, value in item.items() if key != "id"}


def plan_question_sync(
    existing: Sequence[CampaignQuestion], items: Sequence[Mapping[str, Any]]
) -> QuestionSyncPlan:
    by_id = {question.id: question for question in existing}
    plan = QuestionSyncPlan()
    seen: set[UUID] = set()

    for item in items:
        question_id = item.get("id")
        if question_id is None:
            plan.to_add.append(_fields(item))
        elif question_id in by_id:
            seen.add(question_id)
            plan.to_update.append((by_id[question_id], _fields(item)))
        else:
            plan.skipped.append(question_id)

    plan.to_remove = set(by_id) - seen
    return plan


class CampaignQuestionService(BaseService):
    async def list_questions(
        self, session: Session, campaign_id: UUID
    ) -> list[CampaignQuestion]:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        return await CampaignQuestionRepository(self.db, session).list(campaign.id)

    async def create_question(
        self, session: StaffSession, campaign_id: UUID, fields: dict
    ) -> CampaignQuestion:
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        _check_options(fields["question_type"], fields.get("options"))
        async with self.transaction():
            question = await CampaignQuestionRepository(self.db, session).create(
                campaign.id, **fields
            )
        return question

    async def update_question(
        self,
        session: StaffSession,
        campaign_id: UUID,
        question_id: UUID,
        changes: dict,
    ) -> CampaignQuestion:
        repo = CampaignQuestionRepository(self.db, session)
        question = await repo.get(campaign_id, question_id)
        changes = drop_nulls(changes, QUESTION_REQUIRED_FIELDS)
        _check_options(
            changes.get("question_type", question.question_type),
            changes.get("options", question.options),
        )
        async with self.transaction():
            await repo.update(question, changes)
        return question

    async def delete_question(
        self, session: StaffSession, campaign_id: UUID, question_id: UUID
    ) -> None:
        repo = CampaignQuestionRepository(self.db, session)
        question = await repo.get(campaign_id, question_id)
        async with self.transaction():
            await repo.delete_many(campaign_id, [question.id])

    async def sync_questions(
        self,
        session: StaffSession,
        campaign_id: UUID,
        items: Sequence[Mapping[str, Any]],
    ) -> QuestionSyncResult:
        """Make the campaign's questions match ``items``.

        Items with an ``id`` update that question, items without one are
        created, and questions missing from ``items`` are deleted. Ids that
        do not belong to the campaign are ignored. All changes commit
        together.
        """
        campaign = await CampaignRepository(self.db, session).get(campaign_id)
        repo = CampaignQuestionRepository(self.db, session)

        plan = plan_question_sync(await repo.list(campaign.id), items)
        for fields in plan.to_add:
            _check_options(fields["question_type"], fields.get("options"))
        for question, fields in plan.to_update:
            _check_options(
                fields.get("question_type", question.question_type),
                fields.get("options", question.options),
            )
        if plan.skipped:
            self.logger.warning(
                "Ignoring questions that do not belong to the campaign",
                campaign_id=str(campaign.id),
                question_ids=[str(i) for i in plan.skipped],
            )

        async with self.transaction():
            await repo.delete_many(campaign.id, plan.to_remove)
            for fields in plan.to_add:
                await repo.create(campaign.id, **fields)
            for question, fields in plan.to_update:
                await repo.update(question, fields)

        self.logger.info(
            "Campaign questions synced",
            campaign_id=str(campaign.id),
            added=len(plan.to_add),
            updated=len(plan.to_update),
            removed=len(plan.to_remove),
        )
        return QuestionSyncResult(
            added=len(plan.to_add),
            updated=len(plan.to_update),
            removed=len(plan.to_remove),
            total=len(items),
        )
