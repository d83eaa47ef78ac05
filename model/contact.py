from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import Session
from core.setup import Base


class ContactSubmission(Base):
    """
    Represents a single contact-form entry. Rows are only ever inserted.
    """

    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(200), nullable=True)
    message = Column(String(2000), nullable=False)
    submitted_at = Column(DateTime(timezone=True), nullable=False, index=True)

    def save(self, session: Session) -> "ContactSubmission":
        session.add(self)
        session.commit()
        session.refresh(self)
        return self

    @staticmethod
    def add(
        session: Session,
        name: str,
        email: str,
        message: str,
        subject: Optional[str] = None,
    ) -> "ContactSubmission":
        submission = ContactSubmission(
            name=name,
            email=email,
            subject=subject,
            message=message,
            submitted_at=datetime.now(timezone.utc),
        )
        return submission.save(session)

    @staticmethod
    def get_by_id(session: Session, submission_id: int) -> Optional["ContactSubmission"]:
        return (
            session.query(ContactSubmission)
            .filter(ContactSubmission.id == submission_id)
            .first()
        )

    @staticmethod
    def get_all(session: Session) -> list["ContactSubmission"]:
        """Newest first; id breaks ties between rows stamped in the same tick"""
        return (
            session.query(ContactSubmission)
            .order_by(
                ContactSubmission.submitted_at.desc(),
                ContactSubmission.id.desc(),
            )
            .all()
        )

    def __repr__(self) -> str:
        return f"<ContactSubmission id={self.id} email={self.email}>"
