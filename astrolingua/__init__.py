from .actions import InputState, ShipInput
from .config import BulletConfig, GameConfig, LevelConfig, ShipConfig, TargetConfig
from .errors import AstroLinguaError, EmptyCollectionError, InvalidVocabularyError
from .session.controller import Session
from .sim.state import RunSummary, SessionStatus
from .vocab import DEFAULT_VOCAB, VocabPair

__all__ = [
    "DEFAULT_VOCAB",
    "AstroLinguaError",
    "BulletConfig",
    "EmptyCollectionError",
    "GameConfig",
    "InputState",
    "InvalidVocabularyError",
    "LevelConfig",
    "RunSummary",
    "Session",
    "SessionStatus",
    "ShipConfig",
    "ShipInput",
    "TargetConfig",
    "VocabPair",
]
