from model.contact import ContactSubmission

__all__ = ["ContactSubmission"]
