from astrobots.engine.gameplay.game import GamePlay, Mode

__all__ = ["GamePlay", "Mode"]
