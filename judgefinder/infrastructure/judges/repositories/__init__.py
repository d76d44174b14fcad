from .judge_repository import InMemoryJudgeRepository

__all__ = ["InMemoryJudgeRepository"]
