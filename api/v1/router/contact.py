from collections.abc import Iterator
from controller.contact import ContactOp
from core.db import CreateDBSession
from fastapi import APIRouter, Depends, Path, Request, status
from schema import SuccessOut
from schema.contact import ContactRequest, ContactSubmissionOut
from sqlalchemy.orm import Session

router = APIRouter(tags=["Contact"])

# ids are stored as signed 64-bit integers
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def get_db_session(request: Request) -> Iterator[Session]:
    """Open a session on the database handle the app was built with"""
    with CreateDBSession(request.app.state.database) as session:
        yield session


@router.post(
    "/contact",
    response_model=SuccessOut,
    status_code=status.HTTP_201_CREATED,
)
def submit_contact_form(
    data: ContactRequest,
    session: Session = Depends(get_db_session),
):
    return ContactOp.submit(session, data)


@router.get("/contact", response_model=list[ContactSubmissionOut])
def get_contact_submissions(session: Session = Depends(get_db_session)):
    """All submissions, most recent first"""
    return ContactOp.list_submissions(session)


@router.get("/contact/{submission_id}", response_model=ContactSubmissionOut)
def get_contact_submission(
    submission_id: int = Path(ge=MIN_ID, le=MAX_ID),
    session: Session = Depends(get_db_session),
):
    return ContactOp.get_submission(session, submission_id)
