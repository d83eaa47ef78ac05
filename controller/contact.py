import logging
from sqlalchemy.orm import Session
from model.contact import ContactSubmission
from schema.contact import ContactRequest
from schema import SuccessOut
from error import ResourceNotFoundError

logger = logging.getLogger(__name__)


class ContactOp:

    @staticmethod
    def submit(session: Session, data: ContactRequest) -> SuccessOut:
        """
        Persist a contact form submission and acknowledge the sender by name
        """
        submission = ContactSubmission.add(session, **data.model_dump())
        logger.info(f"Contact submission {submission.id} received")
        return SuccessOut(
            message=f"Thanks {submission.name}! Your message has been received."
        )

    @staticmethod
    def list_submissions(session: Session) -> list[ContactSubmission]:
        return ContactSubmission.get_all(session)

    @staticmethod
    def get_submission(session: Session, submission_id: int) -> ContactSubmission:
        submission = ContactSubmission.get_by_id(session, submission_id)
        if not submission:
            logger.info(f"Contact submission {submission_id} not found")
            raise ResourceNotFoundError(msg="Submission not found")
        return submission
