from .trainer import Trainer, TrainerSkill, TrainerDocument
from .assignment import TrainerAssignment

__all__ = [
    "Trainer",
    "TrainerSkill",
    "TrainerDocument",
    "TrainerAssignment",
]
