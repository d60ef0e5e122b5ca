"""Services package - Business logic layer"""

from services.progress_service import ProgressService

__all__ = ["ProgressService"]
