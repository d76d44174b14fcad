from .judges import router as judges_router

__all__ = ["judges_router"]
