# api_service/questions.py

from typing import List

from celery import Celery
from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api_service.database import scoped_session_dependency
from api_service.errors import BadRequest, NotFound
from api_service.models import UNTITLED_QUESTION
from api_service.notifier import get_celery_app, schedule_new_question
from api_service.repositories import QuestionRepository
from api_service.schemas import Message, QuestionCreate, QuestionResponse, QuestionUpdate
from api_service.security import Identity, get_current_identity

router = APIRouter(prefix="/questions", tags=["questions"])

QUESTION_NOT_FOUND = "Question not found"


@router.get("", response_model=List[QuestionResponse])
async def list_questions(session: AsyncSession = Depends(scoped_session_dependency)):
    return await QuestionRepository(session).list()


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    question: QuestionCreate,
    background_tasks: BackgroundTasks,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(scoped_session_dependency),
    celery: Celery = Depends(get_celery_app),
):
    try:
        saved = await QuestionRepository(session).add(
            title=question.title or UNTITLED_QUESTION,
            problem_statement=question.problem_statement,
            solution=question.solution,
            topic=question.topic,
            created_by=identity.user_id,
        )
    except SQLAlchemyError as e:
        raise BadRequest(str(e))

    background_tasks.add_task(schedule_new_question, celery, saved.title, saved.topic, identity.user_id)
    return saved


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: str,
    changes: QuestionUpdate,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(scoped_session_dependency),
):
    # any authenticated caller may edit any question
    fields = changes.model_dump(exclude_unset=True, exclude_none=True)
    question = await QuestionRepository(session).update(question_id, fields)
    if question is None:
        raise NotFound(QUESTION_NOT_FOUND)
    return question


@router.delete("/{question_id}", response_model=Message)
async def delete_question(
    question_id: str,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(scoped_session_dependency),
):
    if not await QuestionRepository(session).delete(question_id):
        raise NotFound(QUESTION_NOT_FOUND)
    return Message(message="Question deleted successfully")
