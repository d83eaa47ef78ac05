from api.v1.router.contact import router as contact

__all__ = ["contact"]
