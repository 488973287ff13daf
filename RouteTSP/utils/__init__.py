from RouteTSP.utils.taxonomy import AlgorithmFamily

__all__ = ["AlgorithmFamily"]
