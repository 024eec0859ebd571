from astrobots.engine.walkthrough.walkthrough import SolutionWalkthrough

__all__ = ["SolutionWalkthrough"]
